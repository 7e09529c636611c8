"""Admin content payload schemas.

One schema per entity form. Field names are snake_case; the wire (and the form
draft) uses the camelCase aliases expected by the content API.
"""

from __future__ import annotations

import re
from typing import Any, Literal

from pydantic import Field, field_validator

from portfolio.schemas.base import ContentPayloadSchema, LocalizedText, OptionalLocalizedText, blank_to_none
from portfolio.schemas.validation import SchemaMessageKeyError

ICON_PROVIDERS: tuple[str, ...] = ("lucide", "simple-icons")
_SLUG_PATTERN = re.compile(r"^[a-z0-9]+(?:-[a-z0-9]+)*$")


def _validate_icon_provider(value: str | None) -> str | None:
    if value is not None and value not in ICON_PROVIDERS:
        raise SchemaMessageKeyError(f"unknown icon provider: {value}", message_key="validation.invalid")
    return value


class IconFieldsMixin(ContentPayloadSchema):
    """Icon reference shared by blog categories, skills, contact and top-bar entries."""

    icon_name: str | None = None
    icon_provider: str | None = None

    @field_validator("icon_name", "icon_provider", mode="before")
    @classmethod
    def _blank_icon_to_none(cls, value: Any) -> Any:
        return blank_to_none(value)

    @field_validator("icon_provider")
    @classmethod
    def _check_icon_provider(cls, value: str | None) -> str | None:
        return _validate_icon_provider(value)


class LinkFieldsMixin(ContentPayloadSchema):
    """Link target shared by navigation, contact and top-bar entries."""

    url: str = ""
    external: bool = False
    new_tab: bool = False

    @field_validator("url", mode="before")
    @classmethod
    def _missing_url_to_blank(cls, value: Any) -> Any:
        # the API accepts a string or no key, never null
        return "" if value is None else value


class MoveRequest(ContentPayloadSchema):
    """Reorder request: swap an entity with its neighbour."""

    id: str = Field(min_length=1)
    direction: Literal["up", "down"]


class BlogCategoryPayload(IconFieldsMixin):
    """Blog category."""

    name: LocalizedText
    slug: str = Field(min_length=1)
    description: OptionalLocalizedText | None = None
    is_active: bool = True

    @field_validator("slug")
    @classmethod
    def _check_slug(cls, value: str) -> str:
        if not _SLUG_PATTERN.match(value):
            raise SchemaMessageKeyError(f"invalid slug: {value}", message_key="validation.invalid")
        return value


class ProjectPayload(ContentPayloadSchema):
    """Portfolio project."""

    title: LocalizedText
    description: LocalizedText
    url: str | None = None
    repo_url: str | None = None
    repo_url2: str | None = None
    image_url: str | None = None
    is_active: bool = True

    @field_validator("url", "repo_url", "repo_url2", "image_url", mode="before")
    @classmethod
    def _blank_links_to_none(cls, value: Any) -> Any:
        return blank_to_none(value)


class SkillCategoryPayload(ContentPayloadSchema):
    """Skill category."""

    name: LocalizedText


class SkillPayload(IconFieldsMixin):
    """Skill, optionally assigned to a skill category."""

    name: LocalizedText
    category_id: str | None = None
    is_active: bool = True

    @field_validator("category_id", mode="before")
    @classmethod
    def _blank_category_to_none(cls, value: Any) -> Any:
        return blank_to_none(value)


class ContactPayload(IconFieldsMixin, LinkFieldsMixin):
    """Contact entry."""

    name: LocalizedText


class NavigationPayload(LinkFieldsMixin):
    """Main navigation item."""

    label: LocalizedText
    is_active: bool = True


class TopBarPayload(IconFieldsMixin, LinkFieldsMixin):
    """Top-bar link."""

    name: LocalizedText
