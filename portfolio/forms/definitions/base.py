"""Base entity form definition model.

A definition pairs the field descriptor set of an admin entity with its
validation schema and the RPC procedures that persist it, so views, handlers
and templates share one description of every entity screen.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from pydantic import BaseModel

from portfolio.forms.fields import FieldKind, FieldOption, FormField, check_field_set
from portfolio.forms.schema_builder import build_schema, check_schema_alignment

ICON_PROVIDER_OPTIONS: tuple[FieldOption, ...] = (
    FieldOption("lucide", "Lucide React"),
    FieldOption("simple-icons", "Simple Icons"),
)


@dataclass(frozen=True, slots=True)
class RpcProcedures:
    """Content API procedures serving one entity."""

    list_items: str
    create: str
    update: str
    delete: str
    reorder: str


@dataclass(slots=True)
class EntityFormDefinition:
    """Configuration of one admin entity screen.

    Attributes:
        name: Entity key used in URLs (``project``, ``skill_category``).
        title_key: Message key of the screen title.
        display_field: Top-level key shown in list rows (a localized pair or a string).
        procedures: Content API procedures.
        fields: Descriptor set, labels stored as message keys.
        schema: Validation schema; derived from ``fields`` when omitted.
        client_assigns_order: Whether create requests carry ``order`` computed
            by the client (max listed order + 1).
        template: Template rendering the form.

    Raises:
        FormConfigurationError: The descriptor set is inconsistent or disagrees
            with the schema.

    """

    name: str
    title_key: str
    display_field: str
    procedures: RpcProcedures
    fields: list[FormField] = field(default_factory=list)
    schema: type[BaseModel] | None = None
    client_assigns_order: bool = True
    template: str = "admin/form.html"

    def __post_init__(self) -> None:
        check_field_set(self.fields)
        if self.schema is None:
            self.schema = build_schema(self.name, self.fields)
        else:
            check_schema_alignment(self.fields, self.schema)

    @property
    def validation_schema(self) -> type[BaseModel]:
        """The schema, derived or declared."""
        if self.schema is None:
            self.schema = build_schema(self.name, self.fields)
        return self.schema

    @property
    def edits_is_active(self) -> bool:
        """Whether the form edits the ``isActive`` flag itself."""
        return any(item.name == "isActive" for item in self.fields)

    def option_sources(self) -> set[str]:
        """Names of select option lists the call site must supply."""
        return {
            item.options_source
            for item in self.fields
            if item.kind is FieldKind.SELECT and item.options_source
        }
