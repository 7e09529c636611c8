"""Safe route execution and structured logging helpers.

`log_with_context` reuses the common structured log fields and `safe_route_call`
centralizes exception handling in the view layer, so views do not repeat
try/except boilerplate around content API calls.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Literal, TypeVar, Unpack, cast

from werkzeug.exceptions import HTTPException

from portfolio.errors import AppError, SystemError
from portfolio.utils.structlog_config import get_logger

if TYPE_CHECKING:
    from collections.abc import Callable

    from portfolio.types import ContextDict, LoggerExtra, RouteSafetyOptions

R = TypeVar("R")
LogLevel = Literal["debug", "info", "warning", "error", "critical"]
DEFAULT_EXPECTED_EXCEPTIONS: tuple[type[BaseException], ...] = (AppError, HTTPException)


def log_with_context(
    level: LogLevel,
    event: str,
    *,
    module: str,
    action: str,
    context: ContextDict | None = None,
    extra: LoggerExtra | None = None,
) -> None:
    """Emit a structured log event with the common context fields.

    Args:
        level: structlog method name, e.g. "info", "error".
        event: Event name.
        module: Owning module or domain, for filtering.
        action: Operation name, usually the view or handler method.
        context: Business context (entity, resource id...).
        extra: Additional diagnostic fields.

    """
    logger = get_logger("portfolio")
    payload: ContextDict = {"module": module, "action": action}
    if context:
        payload.update(context)
    if extra:
        payload.update(extra)

    log_method = getattr(logger, level, logger.error)
    log_method(event, **payload)


def safe_route_call(
    func: Callable[..., R],
    *,
    module: str,
    action: str,
    public_error: str,
    func_args: tuple[Any, ...] | None = None,
    func_kwargs: dict[str, Any] | None = None,
    **options: Unpack[RouteSafetyOptions],
) -> R:
    """Run view logic, logging failures and translating unexpected exceptions.

    Args:
        func: The business callable, usually a local closure.
        module: Module name for the log event.
        action: Action name, e.g. "project_form_upsert".
        public_error: Message exposed to the user when an unexpected error occurs.
        func_args: Positional arguments for ``func``.
        func_kwargs: Keyword arguments for ``func``.
        **options: context, extra, expected_exceptions, fallback_exception, log_event.

    Returns:
        Whatever ``func`` returns.

    Raises:
        AppError: Raised by ``func`` itself, or the fallback exception wrapping
            an unexpected error.

    """
    handled_exceptions = DEFAULT_EXPECTED_EXCEPTIONS
    expected_exceptions = options.get("expected_exceptions")
    if expected_exceptions:
        handled_exceptions += expected_exceptions

    fallback_exception = options.get("fallback_exception", SystemError)
    event = options.get("log_event") or f"{action}_failed"
    context_payload: ContextDict = dict(cast("ContextDict | None", options.get("context")) or {})
    extra_payload: dict[str, Any] = dict(cast("LoggerExtra | None", options.get("extra")) or {})

    try:
        return func(*(func_args or ()), **(func_kwargs or {}))
    except handled_exceptions as exc:
        log_with_context(
            "warning",
            event,
            module=module,
            action=action,
            context=context_payload,
            extra={**extra_payload, "error_type": exc.__class__.__name__, "error_message": str(exc)},
        )
        raise
    except Exception as exc:
        log_with_context(
            "error",
            event,
            module=module,
            action=action,
            context=context_payload,
            extra={**extra_payload, "error_type": exc.__class__.__name__, "unexpected": True},
        )
        raise fallback_exception(public_error) from exc
