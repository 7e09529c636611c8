"""Portfolio admin - unified exception definitions.

Business exception types and their metadata live here so views, services
and the form engine share one vocabulary.
"""

from __future__ import annotations

from dataclasses import dataclass

from portfolio.constants import HttpStatus
from portfolio.constants.system_constants import ErrorCategory, ErrorMessages, ErrorSeverity
from portfolio.types import LoggerExtra


@dataclass(frozen=True, slots=True)
class ExceptionMetadata:
    """Exception metadata."""

    status_code: int
    category: ErrorCategory
    severity: ErrorSeverity
    default_message_key: str


class AppError(Exception):
    """Base business exception.

    Args:
        message: Explicit message; derived from ``message_key`` when empty.
        message_key: Message key overriding the default one.
        extra: Additional structured log fields.
        severity: Error severity.
        category: Error category.
        status_code: HTTP status code.

    """

    metadata = ExceptionMetadata(
        status_code=HttpStatus.INTERNAL_SERVER_ERROR,
        category=ErrorCategory.SYSTEM,
        severity=ErrorSeverity.HIGH,
        default_message_key="INTERNAL_ERROR",
    )

    def __init__(
        self,
        message: str | None = None,
        *,
        message_key: str | None = None,
        extra: LoggerExtra | None = None,
        severity: ErrorSeverity | None = None,
        category: ErrorCategory | None = None,
        status_code: int | None = None,
    ) -> None:
        self.message_key = message_key or self.metadata.default_message_key
        self.message = message or getattr(ErrorMessages, self.message_key, ErrorMessages.INTERNAL_ERROR)
        self.extra = dict(extra or {})
        self.severity = severity or self.metadata.severity
        self.category = category or self.metadata.category
        self.status_code = status_code or self.metadata.status_code
        super().__init__(self.message)

    @property
    def recoverable(self) -> bool:
        """Whether the error is recoverable (severity LOW or MEDIUM)."""
        return self.severity in (ErrorSeverity.LOW, ErrorSeverity.MEDIUM)


class ValidationError(AppError):
    """Request payload failed validation. Defaults to 400."""

    metadata = ExceptionMetadata(
        status_code=HttpStatus.BAD_REQUEST,
        category=ErrorCategory.VALIDATION,
        severity=ErrorSeverity.LOW,
        default_message_key="VALIDATION_ERROR",
    )


class AuthenticationError(AppError):
    """The content API rejected the forwarded session. Defaults to 401."""

    metadata = ExceptionMetadata(
        status_code=HttpStatus.UNAUTHORIZED,
        category=ErrorCategory.AUTHENTICATION,
        severity=ErrorSeverity.MEDIUM,
        default_message_key="INVALID_CREDENTIALS",
    )


class NotFoundError(AppError):
    """Requested entity or screen does not exist. Defaults to 404."""

    metadata = ExceptionMetadata(
        status_code=HttpStatus.NOT_FOUND,
        category=ErrorCategory.BUSINESS,
        severity=ErrorSeverity.LOW,
        default_message_key="RESOURCE_NOT_FOUND",
    )


class ConflictError(AppError):
    """State conflict reported by the content API. Defaults to 409."""

    metadata = ExceptionMetadata(
        status_code=HttpStatus.CONFLICT,
        category=ErrorCategory.BUSINESS,
        severity=ErrorSeverity.MEDIUM,
        default_message_key="CONSTRAINT_VIOLATION",
    )


class ExternalServiceError(AppError):
    """A downstream dependency failed or timed out. Defaults to 502."""

    metadata = ExceptionMetadata(
        status_code=HttpStatus.BAD_GATEWAY,
        category=ErrorCategory.EXTERNAL,
        severity=ErrorSeverity.HIGH,
        default_message_key="EXTERNAL_SERVICE_ERROR",
    )


class RpcError(ExternalServiceError):
    """A remote procedure call failed.

    Attributes:
        procedure: Dotted procedure name, e.g. ``content.createProject``.
        code: Error code reported by the API (``BAD_REQUEST``...), if any.
        http_status: HTTP status the API attached to the error, if any. The
            response status stays 502.

    """

    def __init__(
        self,
        message: str | None = None,
        *,
        procedure: str,
        code: str | None = None,
        http_status: int | None = None,
        status_code: int | None = None,
    ) -> None:
        self.procedure = procedure
        self.code = code
        self.http_status = http_status
        super().__init__(
            message,
            extra={"procedure": procedure, "rpc_code": code, "http_status": http_status},
            status_code=status_code,
        )


class SystemError(AppError):  # noqa: A001
    """Unclassified failure. Defaults to 500."""


class FormConfigurationError(AppError):
    """A field descriptor set or schema violates the form contract.

    Raised for integrator mistakes (duplicate names, select without options,
    required flag disagreeing with the schema). Never caught to recover.
    """

    metadata = ExceptionMetadata(
        status_code=HttpStatus.INTERNAL_SERVER_ERROR,
        category=ErrorCategory.CONFIGURATION,
        severity=ErrorSeverity.CRITICAL,
        default_message_key="FORM_CONFIGURATION_ERROR",
    )


class FormStateError(AppError):
    """An edit, submit or cancel reached a form that already finished."""

    metadata = ExceptionMetadata(
        status_code=HttpStatus.CONFLICT,
        category=ErrorCategory.SYSTEM,
        severity=ErrorSeverity.MEDIUM,
        default_message_key="FORM_STATE_ERROR",
    )


def map_exception_to_status(error: Exception, default: int = HttpStatus.INTERNAL_SERVER_ERROR) -> int:
    """Resolve the HTTP status code for an exception.

    Args:
        error: Any exception.
        default: Status used when the exception carries none.

    Returns:
        HTTP status code.

    """
    if isinstance(error, AppError):
        return error.status_code
    status = getattr(error, "code", None)
    if isinstance(status, int):
        return status
    return default


__all__ = [
    "AppError",
    "AuthenticationError",
    "ConflictError",
    "ExternalServiceError",
    "FormConfigurationError",
    "FormStateError",
    "NotFoundError",
    "RpcError",
    "SystemError",
    "ValidationError",
    "map_exception_to_status",
]
