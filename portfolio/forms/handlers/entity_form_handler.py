"""Entity form handler: loads and persists admin entities over the content API."""

from __future__ import annotations

from collections.abc import Callable, Mapping
from typing import TYPE_CHECKING, Any

from portfolio.errors import FormConfigurationError, NotFoundError
from portfolio.forms.fields import FieldKind, FieldOption, FormField
from portfolio.i18n import localized, translate
from portfolio.schemas.content import MoveRequest
from portfolio.schemas.validation import validate_or_raise
from portfolio.services.rpc_client import get_rpc_client
from portfolio.types import ContextDict, EntityData, EntityId

if TYPE_CHECKING:
    from portfolio.forms.definitions.base import EntityFormDefinition
    from portfolio.services.rpc_client import RpcClient

OptionProvider = Callable[["RpcClient", str | None], list[FieldOption]]


def _order_of(row: Mapping[str, Any]) -> int:
    value = row.get("order")
    return value if isinstance(value, int) else 0


def sort_by_order(rows: object) -> list[EntityData]:
    """Entities with a mapping shape, ordered by their ``order`` attribute."""
    if not isinstance(rows, list):
        return []
    return sorted((row for row in rows if isinstance(row, Mapping)), key=_order_of)


def _skill_category_options(client: RpcClient, locale: str | None) -> list[FieldOption]:
    from portfolio.forms.definitions import SKILL_CATEGORY_FORM_DEFINITION

    rows = sort_by_order(client.query(SKILL_CATEGORY_FORM_DEFINITION.procedures.list_items))
    return [FieldOption(str(row["id"]), localized(row.get("name"), locale)) for row in rows if "id" in row]


OPTION_PROVIDERS: dict[str, OptionProvider] = {
    "skill_categories": _skill_category_options,
}


class EntityFormHandler:
    """Content API operations behind one admin entity screen.

    Args:
        definition: Entity form definition.
        client: Content API client; the app-bound client when omitted.

    """

    def __init__(self, definition: EntityFormDefinition, client: RpcClient | None = None) -> None:
        self.definition = definition
        self._client = client or get_rpc_client()

    # ------------------------------------------------------------------ #
    # Reads
    # ------------------------------------------------------------------ #
    def list_entities(self) -> list[EntityData]:
        """All entities, ordered by ``order``."""
        return sort_by_order(self._client.query(self.definition.procedures.list_items))

    def load(self, resource_id: EntityId) -> EntityData:
        """Entity with the given id.

        Raises:
            NotFoundError: The list procedure does not return it.

        """
        for row in self.list_entities():
            if str(row.get("id")) == str(resource_id):
                return row
        raise NotFoundError(
            f"{self.definition.name} {resource_id} not found",
            extra={"entity": self.definition.name, "resource_id": resource_id},
        )

    # ------------------------------------------------------------------ #
    # Writes
    # ------------------------------------------------------------------ #
    def upsert(self, data: EntityData, resource: EntityData | None = None) -> Any:
        """Create the entity, or update ``resource`` with the validated form data."""
        if resource is None:
            return self._client.mutation(self.definition.procedures.create, self._create_payload(data))
        return self._client.mutation(self.definition.procedures.update, self._update_payload(data, resource))

    def delete(self, resource_id: EntityId) -> Any:
        return self._client.mutation(self.definition.procedures.delete, str(resource_id))

    def move(self, resource_id: EntityId, direction: str) -> Any:
        """Swap the entity with its neighbour in the list order.

        Raises:
            ValidationError: ``direction`` is neither ``up`` nor ``down``.

        """
        request = validate_or_raise(MoveRequest, {"id": str(resource_id), "direction": direction})
        return self._client.mutation(self.definition.procedures.reorder, request.model_dump(by_alias=True))

    def _create_payload(self, data: EntityData) -> EntityData:
        payload = dict(data)
        if self.definition.client_assigns_order:
            orders = [_order_of(row) for row in self.list_entities()]
            payload["order"] = max(orders, default=0) + 1
        return payload

    def _update_payload(self, data: EntityData, resource: EntityData) -> EntityData:
        payload: EntityData = {"id": resource["id"], **data}
        if "order" in resource:
            payload["order"] = resource["order"]
        if not self.definition.edits_is_active and "isActive" in resource:
            payload["isActive"] = resource["isActive"]
        return payload

    # ------------------------------------------------------------------ #
    # Form preparation
    # ------------------------------------------------------------------ #
    def resolve_fields(self, locale: str | None) -> list[FormField]:
        """Descriptors with translated labels and call-site supplied options."""
        resolved_options: dict[str, list[FieldOption]] = {}
        for source in self.definition.option_sources():
            provider = OPTION_PROVIDERS.get(source)
            if provider is None:
                raise FormConfigurationError(f"no option provider named {source!r}")
            resolved_options[source] = provider(self._client, locale)
        fields: list[FormField] = []
        for item in self.definition.fields:
            resolved = item.with_label(translate(item.label, locale))
            if item.kind is FieldKind.SELECT and item.options_source:
                resolved = resolved.with_options(resolved_options[item.options_source])
            fields.append(resolved)
        return fields

    def build_context(self, *, resource: EntityData | None, locale: str | None) -> ContextDict:
        return {
            "entity": self.definition.name,
            "title": translate(self.definition.title_key, locale),
            "display_name": localized(resource.get(self.definition.display_field), locale) if resource else None,
        }
