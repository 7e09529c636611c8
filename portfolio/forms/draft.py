"""Entity draft helpers.

The draft is the nested dict a mounted form edits. Updates go through
``update_path`` so that changing ``title.pl`` copies the ``title`` group
instead of mutating it, leaving ``title.en`` and every other key untouched.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any

from portfolio.forms.fields import FieldPath, FormField
from portfolio.types import EntityData

_MISSING = object()


def read_path(data: Mapping[str, Any] | None, path: FieldPath, default: Any = None) -> Any:
    """Value at ``path``, or ``default`` when any segment is absent."""
    if not isinstance(data, Mapping) or path.key not in data:
        return default
    value = data[path.key]
    if path.leaf is None:
        return value
    if not isinstance(value, Mapping) or path.leaf not in value:
        return default
    return value[path.leaf]


def update_path(draft: EntityData, path: FieldPath, value: Any) -> EntityData:
    """Set ``value`` at ``path`` and return the draft.

    For a nested path the group dict is shallow-copied before the leaf is
    set; the top-level mapping itself is updated in place.
    """
    if path.leaf is None:
        draft[path.key] = value
        return draft
    group = draft.get(path.key)
    copied = dict(group) if isinstance(group, Mapping) else {}
    copied[path.leaf] = value
    draft[path.key] = copied
    return draft


def build_draft(fields: Iterable[FormField], initial_data: Mapping[str, Any] | None) -> EntityData:
    """Create the draft of a freshly mounted form.

    Each field takes, in order of preference, the value present in
    ``initial_data`` (even when falsy), the field default, or the empty value
    of its kind.
    """
    draft: EntityData = {}
    for item in fields:
        value = read_path(initial_data, item.path, _MISSING)
        if value is _MISSING:
            value = item.empty_value()
        update_path(draft, item.path, value)
    return draft
