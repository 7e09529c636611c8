import pytest

from portfolio.constants.messages import CATALOGS
from portfolio.errors import FormConfigurationError, NotFoundError
from portfolio.forms import definitions
from portfolio.forms.definitions import ENTITY_DEFINITIONS, EntityFormDefinition, RpcProcedures, all_definitions, get_definition
from portfolio.forms.fields import FieldKind, FormField
from portfolio.schemas.content import SkillCategoryPayload

_PROCEDURES = RpcProcedures(
    list_items="content.getThings",
    create="content.createThing",
    update="content.updateThing",
    delete="content.deleteThing",
    reorder="content.changeThingOrder",
)


@pytest.mark.unit
def test_every_entity_is_registered_under_its_name() -> None:
    loaded = all_definitions()

    assert [definition.name for definition in loaded] == list(ENTITY_DEFINITIONS)
    for definition in loaded:
        assert get_definition(definition.name) is definition


@pytest.mark.unit
def test_lazy_attributes_resolve_to_definitions() -> None:
    assert definitions.PROJECT_FORM_DEFINITION.name == "project"
    with pytest.raises(AttributeError):
        definitions.UNKNOWN_FORM_DEFINITION  # noqa: B018


@pytest.mark.unit
def test_unknown_entity_is_not_found() -> None:
    with pytest.raises(NotFoundError):
        get_definition("comments")


@pytest.mark.unit
def test_labels_and_titles_exist_in_every_catalog() -> None:
    for definition in all_definitions():
        keys = [definition.title_key, *(item.label for item in definition.fields)]
        for catalog in CATALOGS.values():
            missing = [key for key in keys if key not in catalog]
            assert missing == [], f"{definition.name}: {missing}"


@pytest.mark.unit
def test_order_assignment_per_entity() -> None:
    server_assigned = {definition.name for definition in all_definitions() if not definition.client_assigns_order}

    assert server_assigned == {"blog_category", "skill_category"}


@pytest.mark.unit
def test_skill_category_select_uses_option_source() -> None:
    skill = get_definition("skill")

    assert skill.option_sources() == {"skill_categories"}
    assert get_definition("project").option_sources() == set()


@pytest.mark.unit
def test_edits_is_active_flag() -> None:
    assert get_definition("project").edits_is_active is True
    assert get_definition("contact").edits_is_active is False


@pytest.mark.unit
def test_definition_without_schema_derives_one() -> None:
    definition = EntityFormDefinition(
        name="thing",
        title_key="admin.thing",
        display_field="name",
        procedures=_PROCEDURES,
        fields=[
            FormField(name="name.pl", label="PL", required=True),
            FormField(name="visible", label="Visible", kind=FieldKind.SWITCH, default=False),
        ],
    )

    validated = definition.validation_schema.model_validate({"name": {"pl": "Rzecz"}})

    assert validated.model_dump(by_alias=True) == {"name": {"pl": "Rzecz"}, "visible": False}


@pytest.mark.unit
def test_definition_rejects_schema_drift() -> None:
    with pytest.raises(FormConfigurationError):
        EntityFormDefinition(
            name="thing",
            title_key="admin.thing",
            display_field="name",
            procedures=_PROCEDURES,
            schema=SkillCategoryPayload,
            fields=[
                FormField(name="name.pl", label="PL"),
                FormField(name="name.en", label="EN", required=True),
            ],
        )


@pytest.mark.unit
def test_definition_rejects_duplicate_fields() -> None:
    with pytest.raises(FormConfigurationError):
        EntityFormDefinition(
            name="thing",
            title_key="admin.thing",
            display_field="name",
            procedures=_PROCEDURES,
            fields=[FormField(name="slug", label="Slug"), FormField(name="slug", label="Slug")],
        )
