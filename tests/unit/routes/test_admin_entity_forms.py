import pytest

from portfolio.errors import NotFoundError, RpcError

SKILL_CATEGORIES = [
    {"id": "sc1", "order": 1, "name": {"pl": "Języki", "en": "Languages"}},
]

SKILLS = [
    {
        "id": "s1",
        "order": 1,
        "name": {"pl": "Python", "en": "Python"},
        "categoryId": "sc1",
        "iconName": "python",
        "iconProvider": "simple-icons",
        "isActive": True,
    },
]

NAVIGATION = [
    {"id": "n1", "order": 1, "label": {"pl": "Start", "en": "Home"}, "url": "/", "external": False, "newTab": False, "isActive": True},
    {"id": "n2", "order": 2, "label": {"pl": "Blog", "en": "Blog"}, "url": "/blog", "external": False, "newTab": False, "isActive": False},
]


@pytest.fixture
def seeded_rpc(fake_rpc):
    fake_rpc.data.update(
        {
            "content.getSkillCategories": SKILL_CATEGORIES,
            "content.getSkills": SKILLS,
            "content.getNavigation": NAVIGATION,
        },
    )
    return fake_rpc


@pytest.mark.unit
def test_healthz(client) -> None:
    response = client.get("/healthz")

    assert response.status_code == 200
    assert response.get_json()["data"] == {"status": "ok"}


@pytest.mark.unit
def test_dashboard_lists_every_entity(client) -> None:
    response = client.get("/en/admin/")

    assert response.status_code == 200
    html = response.get_data(as_text=True)
    assert "/en/admin/project/" in html
    assert "/en/admin/topbar/" in html
    assert response.headers["X-Request-ID"]


@pytest.mark.unit
def test_unknown_locale_is_not_found(client) -> None:
    assert client.get("/de/admin/").status_code == 404


@pytest.mark.unit
def test_unknown_entity_is_not_found(client) -> None:
    response = client.get("/pl/admin/comments/", headers={"Accept": "application/json"})

    assert response.status_code == 404
    assert response.get_json()["message_key"] == "RESOURCE_NOT_FOUND"


@pytest.mark.unit
def test_non_object_json_body_is_rejected(client, seeded_rpc) -> None:
    response = client.post("/pl/admin/navigation/new", json=[1, 2])

    assert response.status_code == 400
    assert response.get_json()["message_key"] == "VALIDATION_ERROR"
    assert seeded_rpc.mutations == []


@pytest.mark.unit
def test_list_shows_localized_rows_in_order(client, seeded_rpc) -> None:
    response = client.get("/en/admin/navigation/")

    html = response.get_data(as_text=True)
    assert response.status_code == 200
    assert html.index("Home") < html.index("Blog")
    assert 'data-id="n2" class="inactive"' in html


@pytest.mark.unit
def test_list_failure_renders_error_page(client, seeded_rpc) -> None:
    seeded_rpc.failures["content.getNavigation"] = RpcError("down", procedure="content.getNavigation")

    response = client.get("/pl/admin/navigation/")

    assert response.status_code == 502


@pytest.mark.unit
def test_new_form_renders_fields_with_category_options(client, seeded_rpc) -> None:
    response = client.get("/en/admin/skill/new")

    html = response.get_data(as_text=True)
    assert response.status_code == 200
    assert 'name="name.pl"' in html
    assert '<option value="sc1"' in html
    assert "Languages" in html
    assert 'type="hidden" name="isActive" value="false"' in html


@pytest.mark.unit
def test_edit_form_prefills_entity(client, seeded_rpc) -> None:
    response = client.get("/pl/admin/skill/s1/edit")

    html = response.get_data(as_text=True)
    assert response.status_code == 200
    assert 'value="python"' in html
    assert '<option value="sc1" selected>' in html


@pytest.mark.unit
def test_edit_unknown_id_is_not_found(client, seeded_rpc) -> None:
    assert client.get("/pl/admin/skill/missing/edit").status_code == 404


@pytest.mark.unit
def test_create_submits_and_redirects(client, seeded_rpc) -> None:
    response = client.post(
        "/en/admin/navigation/new",
        data={
            "label.pl": "Kontakt",
            "label.en": "Contact",
            "url": "/contact",
            "external": "false",
            "newTab": ["false", "true"],
            "isActive": ["false", "true"],
        },
    )

    assert response.status_code == 302
    assert response.headers["Location"].endswith("/en/admin/navigation/")
    assert seeded_rpc.mutations == [
        (
            "content.createNavItem",
            {
                "label": {"pl": "Kontakt", "en": "Contact"},
                "url": "/contact",
                "external": False,
                "newTab": True,
                "isActive": True,
                "order": 3,
            },
        ),
    ]


@pytest.mark.unit
def test_invalid_submission_rerenders_with_errors(client, seeded_rpc) -> None:
    response = client.post("/en/admin/navigation/new", data={"label.pl": "Kontakt", "label.en": ""})

    html = response.get_data(as_text=True)
    assert response.status_code == 400
    assert "This field is required" in html
    assert 'value="Kontakt"' in html
    assert seeded_rpc.mutations == []


@pytest.mark.unit
def test_update_sends_id_and_order(client, seeded_rpc) -> None:
    response = client.post(
        "/pl/admin/skill/s1/edit",
        data={
            "name.pl": "Python 3",
            "name.en": "Python 3",
            "categoryId": "",
            "iconName": "python",
            "iconProvider": "simple-icons",
            "isActive": "false",
        },
    )

    assert response.status_code == 302
    procedure, payload = seeded_rpc.mutations[0]
    assert procedure == "content.updateSkill"
    assert payload["id"] == "s1"
    assert payload["order"] == 1
    assert payload["categoryId"] is None
    assert payload["isActive"] is False


@pytest.mark.unit
def test_cancel_redirects_without_mutation(client, seeded_rpc) -> None:
    response = client.post("/pl/admin/skill/s1/edit", data={"_action": "cancel", "name.pl": ""})

    assert response.status_code == 302
    assert response.headers["Location"].endswith("/pl/admin/skill/")
    assert seeded_rpc.mutations == []


@pytest.mark.unit
def test_rpc_failure_keeps_the_draft(client, seeded_rpc) -> None:
    seeded_rpc.failures["content.createSkillCategory"] = RpcError("boom", procedure="content.createSkillCategory")

    response = client.post("/en/admin/skill_category/new", data={"name.pl": "Bazy", "name.en": "Databases"})

    html = response.get_data(as_text=True)
    assert response.status_code == 502
    assert 'value="Databases"' in html
    assert "Could not save changes" in html


@pytest.mark.unit
def test_delete_and_move_redirect_with_flash(client, seeded_rpc) -> None:
    delete_response = client.post("/pl/admin/navigation/n1/delete")
    move_response = client.post("/pl/admin/navigation/n2/move/up")

    assert delete_response.status_code == 302
    assert move_response.status_code == 302
    assert seeded_rpc.mutations == [
        ("content.deleteNavItem", "n1"),
        ("content.changeNavigationOrder", {"id": "n2", "direction": "up"}),
    ]


@pytest.mark.unit
def test_failed_delete_flashes_error(client, seeded_rpc) -> None:
    seeded_rpc.failures["content.deleteNavItem"] = NotFoundError("gone")

    response = client.post("/pl/admin/navigation/n9/delete", follow_redirects=True)

    assert response.status_code == 200
    assert "Nie udało się usunąć wpisu" in response.get_data(as_text=True)
