"""Top-bar link form definition."""

from portfolio.forms.definitions.base import ICON_PROVIDER_OPTIONS, EntityFormDefinition, RpcProcedures
from portfolio.forms.fields import FieldKind, FormField
from portfolio.schemas.content import TopBarPayload

TOPBAR_FORM_DEFINITION = EntityFormDefinition(
    name="topbar",
    title_key="admin.topBar.title",
    display_field="name",
    procedures=RpcProcedures(
        list_items="content.getTopBar",
        create="content.createTopBarItem",
        update="content.updateTopBarItem",
        delete="content.deleteTopBarItem",
        reorder="content.changeTopBarOrder",
    ),
    schema=TopBarPayload,
    fields=[
        FormField(name="name.pl", label="admin.topBar.namePl", required=True),
        FormField(name="name.en", label="admin.topBar.nameEn", required=True),
        FormField(name="iconName", label="admin.topBar.iconName"),
        FormField(
            name="iconProvider",
            label="admin.topBar.iconProvider",
            kind=FieldKind.SELECT,
            options=ICON_PROVIDER_OPTIONS,
        ),
        FormField(name="url", label="admin.topBar.url"),
        FormField(name="external", label="admin.topBar.external", kind=FieldKind.SWITCH, default=False),
        FormField(name="newTab", label="admin.topBar.newTab", kind=FieldKind.SWITCH, default=False),
    ],
)
