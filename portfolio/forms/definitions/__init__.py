"""Entity form definitions, imported lazily on first access."""

from __future__ import annotations

from importlib import import_module
from typing import Any

from portfolio.errors import NotFoundError

from .base import ICON_PROVIDER_OPTIONS, EntityFormDefinition, RpcProcedures

_LAZY_ATTRS: dict[str, str] = {
    "BLOG_CATEGORY_FORM_DEFINITION": "portfolio.forms.definitions.blog_category",
    "PROJECT_FORM_DEFINITION": "portfolio.forms.definitions.project",
    "SKILL_CATEGORY_FORM_DEFINITION": "portfolio.forms.definitions.skill_category",
    "SKILL_FORM_DEFINITION": "portfolio.forms.definitions.skill",
    "CONTACT_FORM_DEFINITION": "portfolio.forms.definitions.contact",
    "NAVIGATION_FORM_DEFINITION": "portfolio.forms.definitions.navigation",
    "TOPBAR_FORM_DEFINITION": "portfolio.forms.definitions.topbar",
}

# URL entity key -> definition attribute, in dashboard order.
ENTITY_DEFINITIONS: dict[str, str] = {
    "project": "PROJECT_FORM_DEFINITION",
    "skill_category": "SKILL_CATEGORY_FORM_DEFINITION",
    "skill": "SKILL_FORM_DEFINITION",
    "blog_category": "BLOG_CATEGORY_FORM_DEFINITION",
    "contact": "CONTACT_FORM_DEFINITION",
    "navigation": "NAVIGATION_FORM_DEFINITION",
    "topbar": "TOPBAR_FORM_DEFINITION",
}

__all__ = [
    "ENTITY_DEFINITIONS",
    "ICON_PROVIDER_OPTIONS",
    "EntityFormDefinition",
    "RpcProcedures",
    "all_definitions",
    "get_definition",
    *_LAZY_ATTRS.keys(),
]


def __getattr__(name: str) -> Any:
    """Load a concrete definition on first access to avoid import cycles."""
    if name not in _LAZY_ATTRS:
        raise AttributeError(f"module 'portfolio.forms.definitions' has no attribute {name}")

    module = import_module(_LAZY_ATTRS[name])
    value = getattr(module, name)
    globals()[name] = value
    return value


def get_definition(entity: str) -> EntityFormDefinition:
    """Definition registered under a URL entity key.

    Raises:
        NotFoundError: No entity with that key.

    """
    attr = ENTITY_DEFINITIONS.get(entity)
    if attr is None:
        raise NotFoundError(f"unknown entity: {entity}", extra={"entity": entity})
    return __getattr__(attr)


def all_definitions() -> list[EntityFormDefinition]:
    """Every registered definition, in dashboard order."""
    return [__getattr__(attr) for attr in ENTITY_DEFINITIONS.values()]
