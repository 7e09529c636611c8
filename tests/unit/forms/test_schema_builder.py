import pytest

from portfolio.errors import FormConfigurationError
from portfolio.forms.fields import FieldKind, FieldOption, FormField
from portfolio.forms.schema_builder import build_schema, check_schema_alignment
from portfolio.schemas.base import PayloadSchema
from portfolio.schemas.content import ProjectPayload, SkillCategoryPayload


def _fields() -> list[FormField]:
    return [
        FormField(name="name.pl", label="PL", required=True),
        FormField(name="name.en", label="EN", required=True),
        FormField(name="summary.pl", label="Summary PL"),
        FormField(name="slug", label="Slug", required=True),
        FormField(name="kind", label="Kind", kind=FieldKind.SELECT, options=(FieldOption("a", "A"),)),
        FormField(name="isActive", label="Active", kind=FieldKind.SWITCH, default=True),
    ]


@pytest.mark.unit
def test_derived_schema_defaults() -> None:
    schema = build_schema("blog_category", _fields())

    validated = schema.model_validate({"name": {"pl": "A", "en": "B"}, "slug": "a"})

    assert schema.__name__ == "BlogCategoryPayload"
    assert validated.model_dump(by_alias=True) == {
        "name": {"pl": "A", "en": "B"},
        "summary": None,
        "slug": "a",
        "kind": None,
        "isActive": True,
    }


@pytest.mark.unit
def test_derived_schema_rejects_blank_required_values() -> None:
    schema = build_schema("sample", _fields())

    with pytest.raises(ValueError):
        schema.model_validate({"name": {"pl": "A", "en": " "}, "slug": "a"})


@pytest.mark.unit
def test_derived_schema_is_aligned_with_its_fields() -> None:
    fields = _fields()

    check_schema_alignment(fields, build_schema("sample", fields))


@pytest.mark.unit
def test_alignment_accepts_content_schema_aliases() -> None:
    fields = [
        FormField(name="title.pl", label="PL", required=True),
        FormField(name="title.en", label="EN", required=True),
        FormField(name="description.pl", label="PL", kind=FieldKind.TEXTAREA, required=True),
        FormField(name="description.en", label="EN", kind=FieldKind.TEXTAREA, required=True),
        FormField(name="repoUrl2", label="Repo"),
        FormField(name="isActive", label="Active", kind=FieldKind.SWITCH, default=True),
    ]

    check_schema_alignment(fields, ProjectPayload)


@pytest.mark.unit
def test_alignment_rejects_required_flag_drift() -> None:
    fields = [
        FormField(name="name.pl", label="PL", required=True),
        FormField(name="name.en", label="EN"),
    ]

    with pytest.raises(FormConfigurationError):
        check_schema_alignment(fields, SkillCategoryPayload)


@pytest.mark.unit
def test_alignment_rejects_optional_field_marked_required() -> None:
    class _Schema(PayloadSchema):
        slug: str | None = None

    with pytest.raises(FormConfigurationError):
        check_schema_alignment([FormField(name="slug", label="Slug", required=True)], _Schema)


@pytest.mark.unit
def test_alignment_rejects_unknown_path() -> None:
    with pytest.raises(FormConfigurationError):
        check_schema_alignment([FormField(name="name.de", label="DE")], SkillCategoryPayload)
