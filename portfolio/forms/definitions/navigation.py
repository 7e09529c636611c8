"""Navigation item form definition."""

from portfolio.forms.definitions.base import EntityFormDefinition, RpcProcedures
from portfolio.forms.fields import FieldKind, FormField
from portfolio.schemas.content import NavigationPayload

NAVIGATION_FORM_DEFINITION = EntityFormDefinition(
    name="navigation",
    title_key="admin.navigation.title",
    display_field="label",
    procedures=RpcProcedures(
        list_items="content.getNavigation",
        create="content.createNavItem",
        update="content.updateNavItem",
        delete="content.deleteNavItem",
        reorder="content.changeNavigationOrder",
    ),
    schema=NavigationPayload,
    fields=[
        FormField(name="label.pl", label="admin.navigation.labelPl", required=True),
        FormField(name="label.en", label="admin.navigation.labelEn", required=True),
        FormField(name="url", label="admin.navigation.url"),
        FormField(name="external", label="admin.navigation.external", kind=FieldKind.SWITCH, default=False),
        FormField(name="newTab", label="admin.navigation.newTab", kind=FieldKind.SWITCH, default=False),
        FormField(name="isActive", label="admin.navigation.active", kind=FieldKind.SWITCH, default=True),
    ],
)
