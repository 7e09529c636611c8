"""Schema infrastructure."""

from __future__ import annotations

from typing import Any

import annotated_types
from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel
from pydantic.fields import FieldInfo

from portfolio.utils.payload_converters import as_optional_str


class PayloadSchema(BaseModel):
    """Base schema for write-path payloads.

    Conventions:
    - Unknown keys are ignored, so list-only attributes (``id``, ``order``) can
      ride along in the draft without failing validation.
    - Surrounding whitespace is stripped before constraints apply.
    """

    model_config = ConfigDict(extra="ignore", str_strip_whitespace=True)


class ContentPayloadSchema(PayloadSchema):
    """Payload exchanged with the content API: snake_case in Python, camelCase on the wire."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class LocalizedText(PayloadSchema):
    """Localized pair where both languages are mandatory."""

    pl: str = Field(min_length=1)
    en: str = Field(min_length=1)


class OptionalLocalizedText(PayloadSchema):
    """Localized pair where either language may be blank."""

    pl: str = ""
    en: str = ""

    @field_validator("pl", "en", mode="before")
    @classmethod
    def _none_as_blank(cls, value: Any) -> Any:
        return "" if value is None else value


def blank_to_none(value: Any) -> Any:
    """Turn blank strings into None; other values pass through."""
    if value is None or isinstance(value, str):
        return as_optional_str(value)
    return value


def _unwrap_model(annotation: Any) -> type[BaseModel] | None:
    if isinstance(annotation, type) and issubclass(annotation, BaseModel):
        return annotation
    for arg in getattr(annotation, "__args__", ()):
        if isinstance(arg, type) and issubclass(arg, BaseModel):
            return arg
    return None


def _lookup_field(schema: type[BaseModel], key: str) -> FieldInfo | None:
    for name, info in schema.model_fields.items():
        if key in (name, info.alias, info.validation_alias):
            return info
    return None


def _demands_value(info: FieldInfo) -> bool:
    if not info.is_required():
        return False
    if info.annotation is str:
        return any(
            isinstance(item, annotated_types.MinLen) and item.min_length >= 1 for item in info.metadata
        )
    return True


def schema_requires(schema: type[BaseModel], path: tuple[str, ...]) -> bool | None:
    """Whether ``schema`` demands a non-empty value at ``path``.

    A string counts as demanded only when it is required and has a minimum
    length of at least one; a nested leaf only when its parent is required too.

    Returns:
        True/False, or None when the path does not exist in the schema.

    """
    model: type[BaseModel] | None = schema
    required = True
    for index, key in enumerate(path):
        if model is None:
            return None
        info = _lookup_field(model, key)
        if info is None:
            return None
        required = required and _demands_value(info)
        if index < len(path) - 1:
            model = _unwrap_model(info.annotation)
    return required
