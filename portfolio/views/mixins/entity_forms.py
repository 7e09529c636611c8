"""Generic entity form view.

Mounts an `EntityForm` for the entity named in the URL on GET, and on POST
applies the submitted values, then cancels or submits. Persistence goes
through `EntityFormHandler`.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING, cast

from flask import Request, flash, redirect, render_template, request, url_for
from flask.views import MethodView

from portfolio.constants import FlashCategory, HttpStatus
from portfolio.errors import AppError, ValidationError
from portfolio.forms.definitions import get_definition
from portfolio.forms.engine import EntityForm
from portfolio.forms.handlers import EntityFormHandler
from portfolio.i18n import translate
from portfolio.types import ContextDict, EntityData, PayloadMapping
from portfolio.utils.payload_converters import as_str
from portfolio.utils.route_safety import safe_route_call

if TYPE_CHECKING:
    from flask.typing import ResponseReturnValue

    from portfolio.forms.definitions.base import EntityFormDefinition

CANCEL_ACTION = "cancel"


class EntityFormView(MethodView):
    """Create/edit screen of any registered entity.

    Subclasses may pin ``form_definition``; otherwise it is resolved from the
    ``entity`` URL segment.
    """

    form_definition: EntityFormDefinition | None = None

    # ------------------------------------------------------------------ #
    # HTTP Methods
    # ------------------------------------------------------------------ #
    def get(self, locale: str, entity: str | None = None, resource_id: str | None = None) -> ResponseReturnValue:
        """Render the form, pre-filled with the entity when editing."""
        definition = self._resolve_definition(entity)
        handler = EntityFormHandler(definition)
        resource = self._load_resource(handler, resource_id)
        form = self._mount(handler, resource, locale)
        return render_template(definition.template, **self._build_context(handler, form, resource, locale))

    def post(self, locale: str, entity: str | None = None, resource_id: str | None = None) -> ResponseReturnValue:
        """Apply the posted values, then cancel or submit."""
        definition = self._resolve_definition(entity)
        handler = EntityFormHandler(definition)
        resource = self._load_resource(handler, resource_id)
        payload = self._extract_payload(request)
        form = self._mount(handler, resource, locale)

        if as_str(payload.get("_action")) == CANCEL_ACTION:
            form.cancel()
            return redirect(self._list_url(definition))

        form.apply(payload)
        try:
            data = safe_route_call(
                form.submit,
                module="entity_forms",
                action=f"{definition.name}_form_upsert",
                public_error=translate("common.saveFailed", locale),
                context={
                    "entity": definition.name,
                    "resource_id": resource_id,
                    "form_mode": "create" if resource is None else "edit",
                },
            )
        except AppError as exc:
            flash(translate("common.saveFailed", locale), FlashCategory.ERROR)
            context = self._build_context(handler, form, resource, locale)
            return render_template(definition.template, **context), exc.status_code

        if data is None:
            context = self._build_context(handler, form, resource, locale)
            return render_template(definition.template, **context), HttpStatus.BAD_REQUEST

        flash(self.get_success_message(resource, locale), FlashCategory.SUCCESS)
        return redirect(self._list_url(definition))

    # ------------------------------------------------------------------ #
    # Helpers
    # ------------------------------------------------------------------ #
    def _resolve_definition(self, entity: str | None) -> EntityFormDefinition:
        if self.form_definition is not None:
            return self.form_definition
        return get_definition(entity or "")

    def _load_resource(self, handler: EntityFormHandler, resource_id: str | None) -> EntityData | None:
        if resource_id is None:
            return None
        return handler.load(resource_id)

    def _mount(self, handler: EntityFormHandler, resource: EntityData | None, locale: str) -> EntityForm:
        return EntityForm(
            handler.resolve_fields(locale),
            handler.definition.validation_schema,
            on_submit=lambda data: handler.upsert(data, resource),
            on_cancel=lambda: None,
            initial_data=resource,
            locale=locale,
            placeholder=translate("common.select", locale),
        )

    def _extract_payload(self, req: Request) -> PayloadMapping:
        if req.is_json:
            body = req.get_json(silent=True)
            if body is None:
                return {}
            if not isinstance(body, Mapping):
                raise ValidationError("request body must be a JSON object", extra={"field": "body"})
            return cast("PayloadMapping", body)
        # Lists keep both the hidden "false" and the checked "true" of a switch.
        return cast("PayloadMapping", req.form.to_dict(flat=False))

    def _build_context(
        self,
        handler: EntityFormHandler,
        form: EntityForm,
        resource: EntityData | None,
        locale: str,
    ) -> ContextDict:
        context: ContextDict = {
            "locale": locale,
            "resource": resource,
            "form_mode": "edit" if resource else "create",
            "form_definition": handler.definition,
            "form_fields": form.render(),
            "form_error": form.form_error,
            "cancel_action": CANCEL_ACTION,
            "list_url": self._list_url(handler.definition),
        }
        context.update(handler.build_context(resource=resource, locale=locale))
        return context

    def _list_url(self, definition: EntityFormDefinition) -> str:
        return url_for("admin.entity_list", entity=definition.name)

    def get_success_message(self, resource: EntityData | None, locale: str) -> str:
        return translate("common.updated" if resource else "common.saved", locale)
