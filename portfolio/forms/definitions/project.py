"""Project form definition."""

from portfolio.forms.definitions.base import EntityFormDefinition, RpcProcedures
from portfolio.forms.fields import FieldKind, FormField
from portfolio.schemas.content import ProjectPayload

PROJECT_FORM_DEFINITION = EntityFormDefinition(
    name="project",
    title_key="admin.projects.title",
    display_field="title",
    procedures=RpcProcedures(
        list_items="content.getProjects",
        create="content.createProject",
        update="content.updateProject",
        delete="content.deleteProject",
        reorder="content.changeProjectOrder",
    ),
    schema=ProjectPayload,
    fields=[
        FormField(name="title.pl", label="admin.projects.titlePl", required=True),
        FormField(name="title.en", label="admin.projects.titleEn", required=True),
        FormField(name="description.pl", label="admin.projects.descriptionPl", kind=FieldKind.TEXTAREA, required=True),
        FormField(name="description.en", label="admin.projects.descriptionEn", kind=FieldKind.TEXTAREA, required=True),
        FormField(name="url", label="admin.projects.url"),
        FormField(name="repoUrl", label="admin.projects.repoUrl"),
        FormField(name="repoUrl2", label="admin.projects.repoUrl2"),
        FormField(name="imageUrl", label="admin.projects.imageUrl"),
        FormField(name="isActive", label="admin.projects.active", kind=FieldKind.SWITCH, default=True),
    ],
)
