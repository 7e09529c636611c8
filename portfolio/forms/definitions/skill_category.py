"""Skill category form definition."""

from portfolio.forms.definitions.base import EntityFormDefinition, RpcProcedures
from portfolio.forms.fields import FormField
from portfolio.schemas.content import SkillCategoryPayload

SKILL_CATEGORY_FORM_DEFINITION = EntityFormDefinition(
    name="skill_category",
    title_key="admin.skills.categories",
    display_field="name",
    procedures=RpcProcedures(
        list_items="content.getSkillCategories",
        create="content.createSkillCategory",
        update="content.updateSkillCategory",
        delete="content.deleteSkillCategory",
        reorder="content.changeSkillCategoryOrder",
    ),
    client_assigns_order=False,
    schema=SkillCategoryPayload,
    fields=[
        FormField(name="name.pl", label="admin.skills.namePl", required=True),
        FormField(name="name.en", label="admin.skills.nameEn", required=True),
    ],
)
