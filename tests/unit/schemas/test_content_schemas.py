import pytest

from portfolio.errors import ValidationError
from portfolio.schemas.content import (
    BlogCategoryPayload,
    ContactPayload,
    NavigationPayload,
    ProjectPayload,
    SkillPayload,
)
from portfolio.schemas.validation import validate_or_raise


@pytest.mark.unit
def test_project_payload_dumps_camel_case_and_blank_links_as_none() -> None:
    payload = validate_or_raise(
        ProjectPayload,
        {
            "title": {"pl": " Portfolio ", "en": "Portfolio"},
            "description": {"pl": "Opis", "en": "Description"},
            "url": "",
            "repoUrl": "https://github.com/example/portfolio",
            "repoUrl2": "  ",
            "imageUrl": None,
            "isActive": False,
            "order": 3,
        },
    )

    assert payload.model_dump(by_alias=True) == {
        "title": {"pl": "Portfolio", "en": "Portfolio"},
        "description": {"pl": "Opis", "en": "Description"},
        "url": None,
        "repoUrl": "https://github.com/example/portfolio",
        "repoUrl2": None,
        "imageUrl": None,
        "isActive": False,
    }


@pytest.mark.unit
def test_blog_category_slug_must_be_kebab_case() -> None:
    base = {"name": {"pl": "Nauka", "en": "Learning"}}

    assert validate_or_raise(BlogCategoryPayload, {**base, "slug": "machine-learning"}).slug == "machine-learning"
    with pytest.raises(ValidationError) as exc_info:
        validate_or_raise(BlogCategoryPayload, {**base, "slug": "Machine Learning"})
    assert exc_info.value.extra["field"] == "slug"


@pytest.mark.unit
def test_blog_category_optional_description_accepts_blanks() -> None:
    payload = validate_or_raise(
        BlogCategoryPayload,
        {"name": {"pl": "A", "en": "B"}, "slug": "a", "description": {"pl": None, "en": ""}},
    )

    assert payload.model_dump(by_alias=True)["description"] == {"pl": "", "en": ""}
    assert payload.is_active is True


@pytest.mark.unit
def test_icon_provider_limited_to_known_providers() -> None:
    base = {"name": {"pl": "Python", "en": "Python"}}

    assert validate_or_raise(SkillPayload, {**base, "iconProvider": ""}).icon_provider is None
    assert validate_or_raise(SkillPayload, {**base, "iconProvider": "simple-icons"}).icon_provider == "simple-icons"
    with pytest.raises(ValidationError) as exc_info:
        validate_or_raise(SkillPayload, {**base, "iconProvider": "fontawesome"})
    assert exc_info.value.extra["field"] == "iconProvider"


@pytest.mark.unit
def test_link_defaults() -> None:
    contact = validate_or_raise(ContactPayload, {"name": {"pl": "GitHub", "en": "GitHub"}})
    navigation = validate_or_raise(NavigationPayload, {"label": {"pl": "Blog", "en": "Blog"}, "url": "/blog"})

    assert contact.model_dump(by_alias=True) == {
        "name": {"pl": "GitHub", "en": "GitHub"},
        "iconName": None,
        "iconProvider": None,
        "url": "",
        "external": False,
        "newTab": False,
    }
    assert navigation.new_tab is False
    assert navigation.is_active is True


@pytest.mark.unit
def test_missing_localized_pair_is_reported_at_the_group() -> None:
    with pytest.raises(ValidationError) as exc_info:
        validate_or_raise(NavigationPayload, {"url": "/blog"})

    assert exc_info.value.extra["field_errors"] == {"label": "To pole jest wymagane"}
