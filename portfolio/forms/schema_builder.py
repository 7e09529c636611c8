"""Validation schemas derived from, and checked against, field descriptor sets."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any

from pydantic import BaseModel, Field, create_model

from portfolio.errors import FormConfigurationError
from portfolio.forms.fields import FieldKind, FormField
from portfolio.schemas.base import PayloadSchema, schema_requires


def _leaf_spec(item: FormField) -> tuple[Any, Any]:
    if item.kind is FieldKind.SWITCH:
        return bool, bool(item.default) if item.default is not None else False
    if item.required:
        return str, Field(min_length=1)
    return str | None, None


def _model_name(name: str) -> str:
    return "".join(part[:1].upper() + part[1:] for part in name.replace("-", "_").split("_") if part)


def build_schema(name: str, fields: Iterable[FormField]) -> type[BaseModel]:
    """Derive a pydantic schema from a descriptor set.

    Text and select fields become optional strings, or non-empty strings when
    marked required; switches become booleans defaulting to the field default.
    Nested paths become nested models, required when any of their leaves is.

    Args:
        name: Entity name, used for the generated model names.
        fields: Descriptor set.

    Returns:
        The generated model class.

    """
    base_name = _model_name(name) or "Entity"
    flat: dict[str, Any] = {}
    groups: dict[str, dict[str, Any]] = {}
    group_required: dict[str, bool] = {}
    for item in fields:
        spec = _leaf_spec(item)
        if item.path.leaf is None:
            flat[item.path.key] = spec
            continue
        groups.setdefault(item.path.key, {})[item.path.leaf] = spec
        group_required[item.path.key] = group_required.get(item.path.key, False) or item.required

    for key, leaves in groups.items():
        group_model = create_model(f"{base_name}{_model_name(key)}Payload", __base__=PayloadSchema, **leaves)
        if group_required[key]:
            flat[key] = (group_model, ...)
        else:
            flat[key] = (group_model | None, None)

    return create_model(f"{base_name}Payload", __base__=PayloadSchema, **flat)


def check_schema_alignment(fields: Iterable[FormField], schema: type[BaseModel]) -> None:
    """Ensure every field exists in ``schema`` and agrees on requiredness.

    Raises:
        FormConfigurationError: A field path is unknown to the schema, or its
            ``required`` flag differs from what the schema enforces.

    """
    for item in fields:
        enforced = schema_requires(schema, item.path.parts)
        if enforced is None:
            raise FormConfigurationError(f"field {item.name!r} is not part of schema {schema.__name__}")
        if enforced != item.required:
            state = "requires" if enforced else "does not require"
            raise FormConfigurationError(
                f"schema {schema.__name__} {state} {item.name!r} but the field says required={item.required}",
            )
