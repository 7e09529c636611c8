"""Skill form definition."""

from portfolio.forms.definitions.base import ICON_PROVIDER_OPTIONS, EntityFormDefinition, RpcProcedures
from portfolio.forms.fields import FieldKind, FormField
from portfolio.schemas.content import SkillPayload

SKILL_CATEGORY_OPTIONS = "skill_categories"

SKILL_FORM_DEFINITION = EntityFormDefinition(
    name="skill",
    title_key="admin.skills.title",
    display_field="name",
    procedures=RpcProcedures(
        list_items="content.getSkills",
        create="content.createSkill",
        update="content.updateSkill",
        delete="content.deleteSkill",
        reorder="content.changeSkillOrder",
    ),
    schema=SkillPayload,
    fields=[
        FormField(name="name.pl", label="admin.skills.namePl", required=True),
        FormField(name="name.en", label="admin.skills.nameEn", required=True),
        FormField(
            name="categoryId",
            label="admin.skills.category",
            kind=FieldKind.SELECT,
            options_source=SKILL_CATEGORY_OPTIONS,
        ),
        FormField(name="iconName", label="admin.skills.iconName"),
        FormField(
            name="iconProvider",
            label="admin.skills.iconProvider",
            kind=FieldKind.SELECT,
            options=ICON_PROVIDER_OPTIONS,
        ),
        FormField(name="isActive", label="admin.skills.active", kind=FieldKind.SWITCH, default=True),
    ],
)
