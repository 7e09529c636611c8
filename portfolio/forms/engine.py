"""Generic entity form engine.

`EntityForm` owns the draft of one mounted form: it renders one input per field
descriptor, applies edits, validates on submit and reports the outcome through
the caller's callbacks. It performs no I/O; persisting the submitted data is
the caller's job.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping, Sequence
from dataclasses import dataclass
from enum import Enum
from typing import Any

from pydantic import BaseModel, ValidationError as PydanticValidationError

from portfolio.errors import FormConfigurationError, FormStateError
from portfolio.forms.draft import build_draft, read_path, update_path
from portfolio.forms.fields import FieldKind, FieldOption, FormField, check_field_set
from portfolio.schemas.validation import collect_field_errors
from portfolio.types import EntityData, FieldErrors, PayloadMapping
from portfolio.utils.payload_converters import as_bool, as_str
from portfolio.utils.structlog_config import get_form_logger

SubmitCallback = Callable[[EntityData], object]
CancelCallback = Callable[[], object]

PLACEHOLDER_VALUE = ""


class FormState(str, Enum):
    """Lifecycle of one mounted form."""

    PRISTINE = "pristine"
    EDITING = "editing"
    VALIDATING = "validating"
    INVALID = "invalid"
    SUBMITTED = "submitted"
    CANCELLED = "cancelled"

    @property
    def is_terminal(self) -> bool:
        return self in (FormState.SUBMITTED, FormState.CANCELLED)


@dataclass(frozen=True, slots=True)
class RenderedField:
    """View model of one input, consumed by the ``forms/_fields.html`` macros.

    Attributes:
        name: Dotted field name, also the HTML input name.
        widget: Template macro rendering the input.
        label: Display label.
        value: Current draft value, normalized for the widget.
        required: Whether the input carries the required marker.
        options: Select entries, starting with the placeholder.
        error: Message from the last failed submit, if any.

    """

    name: str
    widget: str
    label: str
    value: Any
    required: bool = False
    options: tuple[FieldOption, ...] = ()
    error: str | None = None

    @property
    def input_id(self) -> str:
        return "field-" + self.name.replace(".", "-")


def _render_text(item: FormField, value: Any, placeholder: str) -> dict[str, Any]:
    del placeholder
    return {"widget": "text_input", "value": as_str(value)}


def _render_textarea(item: FormField, value: Any, placeholder: str) -> dict[str, Any]:
    del placeholder
    return {"widget": "textarea", "value": as_str(value)}


def _render_select(item: FormField, value: Any, placeholder: str) -> dict[str, Any]:
    options = (FieldOption(PLACEHOLDER_VALUE, placeholder), *(o for o in item.options if o.value != PLACEHOLDER_VALUE))
    return {"widget": "select", "value": as_str(value), "options": options}


def _render_switch(item: FormField, value: Any, placeholder: str) -> dict[str, Any]:
    del placeholder
    return {"widget": "switch", "value": as_bool(value)}


_RENDERERS: dict[FieldKind, Callable[[FormField, Any, str], dict[str, Any]]] = {
    FieldKind.TEXT: _render_text,
    FieldKind.TEXTAREA: _render_textarea,
    FieldKind.SELECT: _render_select,
    FieldKind.SWITCH: _render_switch,
}


def _coerce(item: FormField, value: Any) -> Any:
    if item.kind is FieldKind.SWITCH:
        return as_bool(value)
    if item.kind is FieldKind.SELECT:
        text = as_str(value)
        return None if text == PLACEHOLDER_VALUE else text
    return as_str(value)


class EntityForm:
    """One mounted entity form.

    Args:
        fields: Descriptor set, in display order. Labels are display strings.
        schema: pydantic model validating the draft; the only authority on
            requiredness and shape.
        on_submit: Called once with the validated data after a successful submit.
        on_cancel: Called once when the form is cancelled.
        initial_data: Entity being edited, or None for a new entity.
        locale: Language of validation messages.
        placeholder: Label of the leading empty option of select inputs.

    Raises:
        FormConfigurationError: The descriptor set is inconsistent.

    """

    def __init__(
        self,
        fields: Sequence[FormField],
        schema: type[BaseModel],
        *,
        on_submit: SubmitCallback,
        on_cancel: CancelCallback,
        initial_data: Mapping[str, Any] | None = None,
        locale: str | None = None,
        placeholder: str = "",
    ) -> None:
        check_field_set(tuple(fields))
        self.fields: tuple[FormField, ...] = tuple(fields)
        self.schema = schema
        self.locale = locale
        self.placeholder = placeholder
        self._on_submit = on_submit
        self._on_cancel = on_cancel
        self._by_name = {item.name: item for item in self.fields}
        self.draft: EntityData = build_draft(self.fields, initial_data)
        self.errors: FieldErrors = {}
        self.state = FormState.PRISTINE
        self.submitted_data: EntityData | None = None

    # ------------------------------------------------------------------ #
    # Rendering
    # ------------------------------------------------------------------ #
    def value(self, name: str) -> Any:
        """Current draft value of a field."""
        return read_path(self.draft, self._field(name).path)

    def render(self) -> list[RenderedField]:
        """One view model per field, in descriptor order."""
        rendered: list[RenderedField] = []
        for item in self.fields:
            spec = _RENDERERS[item.kind](item, read_path(self.draft, item.path), self.placeholder)
            rendered.append(
                RenderedField(
                    name=item.name,
                    label=item.label,
                    required=item.required,
                    error=self.errors.get(item.name),
                    **spec,
                ),
            )
        return rendered

    @property
    def form_error(self) -> str | None:
        """Error not attached to any rendered field."""
        for path, message in self.errors.items():
            if path not in self._by_name:
                return message
        return None

    # ------------------------------------------------------------------ #
    # Editing
    # ------------------------------------------------------------------ #
    def set_value(self, name: str, value: Any) -> None:
        """Apply one edit to the draft.

        Raises:
            FormConfigurationError: Unknown field name.
            FormStateError: The form already submitted or was cancelled.

        """
        item = self._field(name)
        self._ensure_open()
        update_path(self.draft, item.path, _coerce(item, value))
        if self.state in (FormState.PRISTINE, FormState.INVALID):
            self.state = FormState.EDITING

    def apply(self, payload: PayloadMapping) -> None:
        """Apply a submitted flat mapping keyed by dotted field names.

        A switch missing from the payload is switched off (unchecked HTML
        checkbox); other missing keys leave the draft untouched.
        """
        for item in self.fields:
            if item.name in payload:
                self.set_value(item.name, payload[item.name])
            elif item.kind is FieldKind.SWITCH:
                self.set_value(item.name, False)

    # ------------------------------------------------------------------ #
    # Outcome
    # ------------------------------------------------------------------ #
    def submit(self) -> EntityData | None:
        """Validate the draft and hand it to ``on_submit``.

        Returns:
            The validated data, or None when validation failed; failures are
            available in ``errors`` keyed by dotted field name.

        """
        self._ensure_open()
        self.state = FormState.VALIDATING
        try:
            validated = self.schema.model_validate(self.draft)
        except PydanticValidationError as exc:
            self.errors = collect_field_errors(exc, locale=self.locale)
            self.state = FormState.INVALID
            get_form_logger().debug(
                "entity_form_invalid",
                schema=self.schema.__name__,
                fields=sorted(self.errors),
            )
            return None

        data = validated.model_dump(by_alias=True)
        self.errors = {}
        self.state = FormState.SUBMITTED
        self.submitted_data = data
        self._on_submit(data)
        return data

    def cancel(self) -> None:
        """Discard the draft and notify ``on_cancel``."""
        self._ensure_open()
        self.state = FormState.CANCELLED
        self._on_cancel()

    # ------------------------------------------------------------------ #
    # Helpers
    # ------------------------------------------------------------------ #
    def _field(self, name: str) -> FormField:
        try:
            return self._by_name[name]
        except KeyError:
            raise FormConfigurationError(f"unknown field: {name!r}") from None

    def _ensure_open(self) -> None:
        if self.state.is_terminal:
            raise FormStateError(f"form already {self.state.value}")
