"""Structured data type aliases.

JSON/Mapping style aliases shared by views, services and the form engine.
"""

from __future__ import annotations

from collections.abc import Mapping, MutableMapping, Sequence
from typing import TYPE_CHECKING, Any, TypeAlias, TypedDict

if TYPE_CHECKING:
    from portfolio.errors import AppError

ScalarValue: TypeAlias = str | int | float | bool | None
PayloadValue: TypeAlias = ScalarValue | Sequence[ScalarValue] | Mapping[str, ScalarValue]
PayloadMapping: TypeAlias = Mapping[str, PayloadValue]
MutablePayloadDict: TypeAlias = dict[str, PayloadValue]
JsonValue: TypeAlias = ScalarValue | Sequence["JsonValue"] | Mapping[str, "JsonValue"]
JsonDict: TypeAlias = dict[str, JsonValue]
ContextDict: TypeAlias = dict[str, Any]
StructlogEventDict: TypeAlias = MutableMapping[str, Any]
LoggerExtra: TypeAlias = Mapping[str, JsonValue]

# Entity as exchanged with the content API: camelCase keys, localized pairs nested.
EntityData: TypeAlias = dict[str, Any]
EntityId: TypeAlias = str
# Dotted field path -> message.
FieldErrors: TypeAlias = dict[str, str]


class RouteSafetyOptions(TypedDict, total=False):
    """Extra options of safe_route_call."""

    context: ContextDict | None
    extra: LoggerExtra | None
    expected_exceptions: tuple[type[BaseException], ...]
    fallback_exception: type[AppError]
    log_event: str | None
