"""Form/JSON value converters.

Stable conversions from `PayloadValue` to concrete str/bool values so the form
engine can treat HTML form posts (lists of strings) and JSON bodies alike.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from portfolio.types import PayloadValue

_STRING_LIKE_TYPES = (str, bytes, bytearray)


def _unwrap_sequence(value: PayloadValue | None) -> PayloadValue | None:
    # Multi-valued form keys (hidden "false" + checkbox "true") resolve to the last value.
    if isinstance(value, Sequence) and not isinstance(value, _STRING_LIKE_TYPES):
        if not value:
            return None
        return value[-1]
    return value


def as_str(value: PayloadValue | None, *, default: str = "") -> str:
    """Convert to a string.

    Args:
        value: Raw value.
        default: Returned for None or an empty sequence.

    Returns:
        The string value.

    """
    base = _unwrap_sequence(value)
    if base is None:
        return default
    if isinstance(base, str):
        return base
    if isinstance(base, (bytes, bytearray)):
        return base.decode()
    return str(base)


def as_optional_str(value: PayloadValue | None) -> str | None:
    """Convert to an optional string; blank becomes None."""
    cleaned = as_str(value, default="").strip()
    return cleaned or None


def as_bool(value: PayloadValue | None, *, default: bool = False) -> bool:
    """Convert to a boolean."""
    base = _unwrap_sequence(value)
    if base is None:
        return default

    result = default
    if isinstance(base, bool):
        result = base
    elif isinstance(base, (int, float)):
        result = bool(base)
    elif isinstance(base, str):
        normalized = base.strip().lower()
        if normalized in {"true", "1", "yes", "on"}:
            result = True
        elif normalized in {"false", "0", "no", "off", ""}:
            result = False
    return result
