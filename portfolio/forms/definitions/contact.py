"""Contact entry form definition."""

from portfolio.forms.definitions.base import ICON_PROVIDER_OPTIONS, EntityFormDefinition, RpcProcedures
from portfolio.forms.fields import FieldKind, FormField
from portfolio.schemas.content import ContactPayload

CONTACT_FORM_DEFINITION = EntityFormDefinition(
    name="contact",
    title_key="admin.contact.title",
    display_field="name",
    procedures=RpcProcedures(
        list_items="content.getContact",
        create="content.createContact",
        update="content.updateContact",
        delete="content.deleteContact",
        reorder="content.changeContactOrder",
    ),
    schema=ContactPayload,
    fields=[
        FormField(name="name.pl", label="admin.contact.namePl", required=True),
        FormField(name="name.en", label="admin.contact.nameEn", required=True),
        FormField(name="iconName", label="admin.contact.iconName"),
        FormField(
            name="iconProvider",
            label="admin.contact.iconProvider",
            kind=FieldKind.SELECT,
            options=ICON_PROVIDER_OPTIONS,
        ),
        FormField(name="url", label="admin.contact.url"),
        FormField(name="external", label="admin.contact.external", kind=FieldKind.SWITCH, default=False),
        FormField(name="newTab", label="admin.contact.newTab", kind=FieldKind.SWITCH, default=False),
    ],
)
