import pytest

from portfolio.errors import FormConfigurationError, NotFoundError, ValidationError
from portfolio.forms.engine import EntityForm
from portfolio.forms.definitions import get_definition
from portfolio.forms.fields import FieldOption
from portfolio.forms.handlers import EntityFormHandler
from portfolio.forms.handlers.entity_form_handler import sort_by_order

PROJECTS = [
    {"id": "p2", "order": 2, "title": {"pl": "Drugi", "en": "Second"}, "isActive": True},
    {"id": "p1", "order": 1, "title": {"pl": "Pierwszy", "en": "First"}, "isActive": False},
]

CONTACTS = [
    {"id": "c1", "order": 5, "name": {"pl": "Poczta", "en": "Mail"}, "isActive": False, "url": "mailto:x@y.z"},
]


@pytest.mark.unit
def test_list_entities_sorted_by_order(fake_rpc) -> None:
    fake_rpc.data["content.getProjects"] = PROJECTS
    handler = EntityFormHandler(get_definition("project"), fake_rpc)

    assert [row["id"] for row in handler.list_entities()] == ["p1", "p2"]


@pytest.mark.unit
def test_sort_by_order_ignores_malformed_rows() -> None:
    assert sort_by_order(None) == []
    assert sort_by_order([{"id": "b", "order": 3}, "junk", {"id": "a"}]) == [{"id": "a"}, {"id": "b", "order": 3}]


@pytest.mark.unit
def test_load_unknown_id_raises_not_found(fake_rpc) -> None:
    fake_rpc.data["content.getProjects"] = PROJECTS
    handler = EntityFormHandler(get_definition("project"), fake_rpc)

    assert handler.load("p2")["order"] == 2
    with pytest.raises(NotFoundError):
        handler.load("missing")


@pytest.mark.unit
def test_create_appends_after_the_highest_order(fake_rpc) -> None:
    fake_rpc.data["content.getProjects"] = PROJECTS
    handler = EntityFormHandler(get_definition("project"), fake_rpc)

    handler.upsert({"title": {"pl": "Nowy", "en": "New"}})

    assert fake_rpc.mutations == [("content.createProject", {"title": {"pl": "Nowy", "en": "New"}, "order": 3})]


@pytest.mark.unit
def test_create_first_entity_gets_order_one(fake_rpc) -> None:
    handler = EntityFormHandler(get_definition("navigation"), fake_rpc)

    handler.upsert({"label": {"pl": "Start", "en": "Home"}})

    assert fake_rpc.mutations[0][1]["order"] == 1


@pytest.mark.unit
def test_create_leaves_order_to_the_server_for_categories(fake_rpc) -> None:
    handler = EntityFormHandler(get_definition("skill_category"), fake_rpc)

    handler.upsert({"name": {"pl": "Narzędzia", "en": "Tools"}})

    assert fake_rpc.calls == [("mutation", "content.createSkillCategory", {"name": {"pl": "Narzędzia", "en": "Tools"}})]


@pytest.mark.unit
def test_update_carries_id_order_and_untouched_active_flag(fake_rpc) -> None:
    handler = EntityFormHandler(get_definition("contact"), fake_rpc)

    handler.upsert({"name": {"pl": "E-mail", "en": "E-mail"}, "url": "mailto:a@b.c"}, CONTACTS[0])

    assert fake_rpc.mutations == [
        (
            "content.updateContact",
            {"id": "c1", "name": {"pl": "E-mail", "en": "E-mail"}, "url": "mailto:a@b.c", "order": 5, "isActive": False},
        ),
    ]


@pytest.mark.unit
def test_update_keeps_edited_active_flag(fake_rpc) -> None:
    handler = EntityFormHandler(get_definition("project"), fake_rpc)

    handler.upsert({"title": {"pl": "A", "en": "B"}, "isActive": True}, PROJECTS[1])

    payload = fake_rpc.mutations[0][1]
    assert payload["isActive"] is True
    assert payload["order"] == 1


@pytest.mark.unit
def test_blank_link_url_is_sent_as_empty_string(fake_rpc) -> None:
    definition = get_definition("navigation")
    handler = EntityFormHandler(definition, fake_rpc)
    stored = {"id": "n1", "order": 1, "label": {"pl": "Start", "en": "Home"}, "url": None, "isActive": True}

    created = EntityForm(definition.fields, definition.validation_schema, on_submit=handler.upsert, on_cancel=lambda: None)
    created.set_value("label.pl", "Blog")
    created.set_value("label.en", "Blog")
    created.submit()
    updated = EntityForm(
        definition.fields,
        definition.validation_schema,
        on_submit=lambda data: handler.upsert(data, stored),
        on_cancel=lambda: None,
        initial_data=stored,
    )
    updated.submit()

    (create_procedure, create_payload), (update_procedure, update_payload) = fake_rpc.mutations
    assert create_procedure == "content.createNavItem"
    assert update_procedure == "content.updateNavItem"
    for payload in (create_payload, update_payload):
        assert payload["url"] == ""
        assert None not in payload.values()


@pytest.mark.unit
def test_delete_and_move(fake_rpc) -> None:
    handler = EntityFormHandler(get_definition("topbar"), fake_rpc)

    handler.delete("t1")
    handler.move("t1", "up")

    assert fake_rpc.mutations == [
        ("content.deleteTopBarItem", "t1"),
        ("content.changeTopBarOrder", {"id": "t1", "direction": "up"}),
    ]


@pytest.mark.unit
def test_move_rejects_unknown_direction(fake_rpc) -> None:
    handler = EntityFormHandler(get_definition("topbar"), fake_rpc)

    with pytest.raises(ValidationError):
        handler.move("t1", "left")
    assert fake_rpc.mutations == []


@pytest.mark.unit
def test_resolve_fields_translates_and_fills_category_options(fake_rpc) -> None:
    fake_rpc.data["content.getSkillCategories"] = [
        {"id": 7, "order": 2, "name": {"pl": "Narzędzia", "en": "Tools"}},
        {"id": 3, "order": 1, "name": {"pl": "Języki", "en": "Languages"}},
    ]
    handler = EntityFormHandler(get_definition("skill"), fake_rpc)

    fields = {item.name: item for item in handler.resolve_fields("en")}

    assert fields["name.pl"].label == "Name (PL)"
    assert fields["categoryId"].options == (FieldOption("3", "Languages"), FieldOption("7", "Tools"))


@pytest.mark.unit
def test_resolve_fields_rejects_unknown_option_source(fake_rpc, monkeypatch) -> None:
    definition = get_definition("skill")
    monkeypatch.setattr(type(definition), "option_sources", lambda self: {"tags"})
    handler = EntityFormHandler(definition, fake_rpc)

    with pytest.raises(FormConfigurationError):
        handler.resolve_fields("pl")
