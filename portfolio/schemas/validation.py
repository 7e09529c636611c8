"""Schema validation and error mapping."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, TypeVar

from pydantic import BaseModel, ValidationError as PydanticValidationError

from portfolio.errors import ValidationError
from portfolio.i18n import translate
from portfolio.types import FieldErrors

ModelT = TypeVar("ModelT", bound=BaseModel)

FORM_ERROR_KEY = "__form__"
REQUIRED_MESSAGE_KEY = "validation.required"
INVALID_MESSAGE_KEY = "validation.invalid"
_REQUIRED_ERROR_TYPES = frozenset({"missing", "string_too_short"})


class SchemaMessageKeyError(ValueError):
    """Raised from schema validators to carry a translatable message key."""

    def __init__(self, message: str, *, message_key: str) -> None:
        super().__init__(message)
        self.message_key = message_key


def validate_or_raise(
    model: type[ModelT],
    payload: object,
    *,
    message_key: str | None = None,
) -> ModelT:
    """Validate ``payload`` and raise the project ValidationError on failure.

    Args:
        model: pydantic model.
        payload: Payload to validate.
        message_key: Fallback message key when the schema supplies none.

    """
    try:
        return model.model_validate(payload)
    except PydanticValidationError as exc:
        errors = collect_field_errors(exc)
        first_path, first_message = next(iter(errors.items()), (FORM_ERROR_KEY, None))
        raise ValidationError(
            first_message,
            message_key=message_key,
            extra={"field": first_path, "field_errors": dict(errors)},
        ) from None


def collect_field_errors(exc: PydanticValidationError, *, locale: str | None = None) -> FieldErrors:
    """Map a pydantic failure to ``{dotted path: localized message}``.

    Only the first error per path is kept. Errors without a location (model
    level validators) are reported under ``FORM_ERROR_KEY``.
    """
    result: FieldErrors = {}
    for error in exc.errors():
        path = _dotted_path(error.get("loc", ()))
        if path in result:
            continue
        result[path] = _error_message(error, locale=locale)
    return result


def _dotted_path(loc: Any) -> str:
    parts = [str(part) for part in loc if isinstance(part, (str, int))]
    return ".".join(parts) or FORM_ERROR_KEY


def _error_message(error: Mapping[str, Any], *, locale: str | None) -> str:
    error_type = error.get("type")
    if error_type in _REQUIRED_ERROR_TYPES or ("input" in error and error["input"] is None):
        return translate(REQUIRED_MESSAGE_KEY, locale)

    ctx = error.get("ctx")
    if isinstance(ctx, Mapping):
        raw_error = ctx.get("error")
        if isinstance(raw_error, SchemaMessageKeyError):
            return translate(raw_error.message_key, locale)
    return translate(INVALID_MESSAGE_KEY, locale)
