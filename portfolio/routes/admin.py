"""Admin back-office routes, mounted under ``/<locale>/admin``."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, cast

from flask import Blueprint, current_app, flash, redirect, render_template, request, url_for
from flask.typing import ResponseReturnValue, RouteCallable

from portfolio.constants import FlashCategory
from portfolio.errors import AppError, NotFoundError
from portfolio.forms.definitions import all_definitions, get_definition
from portfolio.forms.handlers import EntityFormHandler
from portfolio.i18n import is_supported_locale, localized, translate
from portfolio.utils.route_safety import safe_route_call
from portfolio.views.mixins.entity_forms import EntityFormView

admin_bp = Blueprint("admin", __name__, url_prefix="/<locale>/admin")


@admin_bp.url_defaults
def _add_locale(endpoint: str, values: dict[str, Any]) -> None:
    if "locale" in values or not current_app.url_map.is_endpoint_expecting(endpoint, "locale"):
        return
    view_args = request.view_args or {}
    values["locale"] = view_args.get("locale", current_app.config.get("DEFAULT_LOCALE"))


@admin_bp.before_request
def _check_locale() -> None:
    locale = (request.view_args or {}).get("locale")
    if not is_supported_locale(locale):
        raise NotFoundError(f"unsupported locale: {locale}", extra={"locale": locale})


@admin_bp.route("/")
def dashboard(locale: str) -> str:
    """Entry page linking every entity screen."""
    entities = [
        {"name": definition.name, "title": translate(definition.title_key, locale)}
        for definition in all_definitions()
    ]
    return render_template("admin/dashboard.html", locale=locale, entities=entities)


@admin_bp.route("/<entity>/")
def entity_list(locale: str, entity: str) -> str:
    """Entities of one kind, in display order."""
    definition = get_definition(entity)

    def _execute() -> str:
        handler = EntityFormHandler(definition)
        rows = [
            {
                "id": row.get("id"),
                "label": localized(row.get(definition.display_field), locale),
                "is_active": row.get("isActive"),
            }
            for row in handler.list_entities()
        ]
        return render_template(
            "admin/list.html",
            locale=locale,
            entity=definition.name,
            title=translate(definition.title_key, locale),
            rows=rows,
        )

    return safe_route_call(
        _execute,
        module="admin",
        action=f"{definition.name}_list",
        public_error=translate("common.loadFailed", locale),
        context={"entity": definition.name},
    )


@admin_bp.route("/<entity>/<resource_id>/delete", methods=["POST"])
def entity_delete(locale: str, entity: str, resource_id: str) -> ResponseReturnValue:
    """Delete one entity and return to the list."""
    definition = get_definition(entity)
    handler = EntityFormHandler(definition)
    try:
        safe_route_call(
            handler.delete,
            module="admin",
            action=f"{definition.name}_delete",
            public_error=translate("common.deleteFailed", locale),
            func_args=(resource_id,),
            context={"entity": definition.name, "resource_id": resource_id},
        )
    except AppError:
        flash(translate("common.deleteFailed", locale), FlashCategory.ERROR)
    else:
        flash(translate("common.deleted", locale), FlashCategory.SUCCESS)
    return redirect(url_for("admin.entity_list", entity=definition.name))


@admin_bp.route("/<entity>/<resource_id>/move/<direction>", methods=["POST"])
def entity_move(locale: str, entity: str, resource_id: str, direction: str) -> ResponseReturnValue:
    """Move one entity up or down the display order."""
    definition = get_definition(entity)
    handler = EntityFormHandler(definition)
    try:
        safe_route_call(
            handler.move,
            module="admin",
            action=f"{definition.name}_move",
            public_error=translate("common.orderFailed", locale),
            func_args=(resource_id, direction),
            context={"entity": definition.name, "resource_id": resource_id, "direction": direction},
        )
    except AppError:
        flash(translate("common.orderFailed", locale), FlashCategory.ERROR)
    else:
        flash(translate("common.orderChanged", locale), FlashCategory.SUCCESS)
    return redirect(url_for("admin.entity_list", entity=definition.name))


# ---------------------------------------------------------------------------
# Form routes
# ---------------------------------------------------------------------------
_entity_create_view = cast(Callable[..., ResponseReturnValue], EntityFormView.as_view("entity_create_form"))

admin_bp.add_url_rule(
    "/<entity>/new",
    view_func=cast(RouteCallable, _entity_create_view),
    methods=["GET", "POST"],
    defaults={"resource_id": None},
    endpoint="entity_create",
)

_entity_edit_view = cast(Callable[..., ResponseReturnValue], EntityFormView.as_view("entity_edit_form"))

admin_bp.add_url_rule(
    "/<entity>/<resource_id>/edit",
    view_func=cast(RouteCallable, _entity_edit_view),
    methods=["GET", "POST"],
    endpoint="entity_edit",
)
