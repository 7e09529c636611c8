"""Field descriptors of the entity form engine.

A descriptor set is the single source of truth for which attributes a form
edits, in which order, with which control.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from enum import Enum
from typing import NamedTuple

from portfolio.errors import FormConfigurationError


class FieldKind(str, Enum):
    """Input control kind; a closed set."""

    TEXT = "text"
    TEXTAREA = "textarea"
    SELECT = "select"
    SWITCH = "switch"


class FieldPath(NamedTuple):
    """Location of a field in the entity data: a top-level key and an optional leaf.

    ``title.pl`` is ``FieldPath("title", "pl")``; ``slug`` is ``FieldPath("slug", None)``.
    Nesting deeper than one level cannot be expressed.
    """

    key: str
    leaf: str | None = None

    @classmethod
    def parse(cls, name: str) -> FieldPath:
        """Parse a dotted field name.

        Raises:
            FormConfigurationError: Empty segment or more than two segments.

        """
        parts = name.split(".")
        if len(parts) > 2 or any(not part for part in parts):
            raise FormConfigurationError(f"invalid field path: {name!r}")
        if len(parts) == 1:
            return cls(parts[0])
        return cls(parts[0], parts[1])

    @property
    def parts(self) -> tuple[str, ...]:
        return (self.key,) if self.leaf is None else (self.key, self.leaf)

    @property
    def dotted(self) -> str:
        return ".".join(self.parts)


@dataclass(frozen=True, slots=True)
class FieldOption:
    """One entry of a select control."""

    value: str
    label: str


@dataclass(frozen=True, slots=True)
class FormField:
    """Metadata of one editable attribute.

    Attributes:
        name: Dotted path into the entity data (``slug``, ``title.pl``).
        label: Display label. Definitions store a message key; views translate it.
        kind: Input control.
        required: Marks the input as required in the UI; the schema enforces it.
        options: Select entries, in display order.
        options_source: Name of call-site supplied options (select fields whose
            entries come from other entities).
        default: Initial value when the entity data lacks the field.

    """

    name: str
    label: str
    kind: FieldKind = FieldKind.TEXT
    required: bool = False
    options: tuple[FieldOption, ...] = ()
    options_source: str | None = None
    default: object | None = None
    path: FieldPath = field(init=False, compare=False)

    def __post_init__(self) -> None:
        try:
            kind = FieldKind(self.kind)
        except ValueError:
            raise FormConfigurationError(f"unknown field kind {self.kind!r} for {self.name!r}") from None
        object.__setattr__(self, "kind", kind)
        object.__setattr__(self, "options", tuple(self.options))
        object.__setattr__(self, "path", FieldPath.parse(self.name))
        if kind is FieldKind.SELECT and not self.options and not self.options_source:
            raise FormConfigurationError(f"select field {self.name!r} declares no options")

    def empty_value(self) -> object:
        """Initial value when neither the entity data nor a default provides one."""
        if self.default is not None:
            return self.default
        if self.kind is FieldKind.SWITCH:
            return False
        if self.kind is FieldKind.SELECT:
            return None
        return ""

    def with_options(self, options: list[FieldOption] | tuple[FieldOption, ...]) -> FormField:
        """Copy of this field with resolved select entries."""
        return replace(self, options=tuple(options))

    def with_label(self, label: str) -> FormField:
        """Copy of this field with a display label."""
        return replace(self, label=label)


def check_field_set(fields: list[FormField] | tuple[FormField, ...]) -> None:
    """Check a descriptor set as a whole.

    Raises:
        FormConfigurationError: Duplicate names, or a key used both as a leaf
            field and as the parent of a nested one.

    """
    seen: set[str] = set()
    flat_keys: set[str] = set()
    nested_keys: set[str] = set()
    for item in fields:
        if item.name in seen:
            raise FormConfigurationError(f"duplicate field name: {item.name!r}")
        seen.add(item.name)
        if item.path.leaf is None:
            flat_keys.add(item.path.key)
        else:
            nested_keys.add(item.path.key)
    clashes = flat_keys & nested_keys
    if clashes:
        raise FormConfigurationError(f"field key used as value and as group: {', '.join(sorted(clashes))}")
