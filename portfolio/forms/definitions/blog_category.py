"""Blog category form definition."""

from portfolio.forms.definitions.base import ICON_PROVIDER_OPTIONS, EntityFormDefinition, RpcProcedures
from portfolio.forms.fields import FieldKind, FormField
from portfolio.schemas.content import BlogCategoryPayload

BLOG_CATEGORY_FORM_DEFINITION = EntityFormDefinition(
    name="blog_category",
    title_key="admin.blog.categories",
    display_field="name",
    procedures=RpcProcedures(
        list_items="blog.getBlogCategories",
        create="blog.createBlogCategory",
        update="blog.updateBlogCategory",
        delete="blog.deleteBlogCategory",
        reorder="blog.changeBlogCategoryOrder",
    ),
    client_assigns_order=False,
    schema=BlogCategoryPayload,
    fields=[
        FormField(name="name.pl", label="admin.blog.categoryNamePl", required=True),
        FormField(name="name.en", label="admin.blog.categoryNameEn", required=True),
        FormField(name="slug", label="admin.blog.categorySlug", required=True),
        FormField(name="description.pl", label="admin.blog.categoryDescriptionPl", kind=FieldKind.TEXTAREA),
        FormField(name="description.en", label="admin.blog.categoryDescriptionEn", kind=FieldKind.TEXTAREA),
        FormField(name="iconName", label="admin.blog.iconName"),
        FormField(
            name="iconProvider",
            label="admin.blog.iconProvider",
            kind=FieldKind.SELECT,
            options=ICON_PROVIDER_OPTIONS,
        ),
        FormField(name="isActive", label="admin.blog.categoryActive", kind=FieldKind.SWITCH, default=True),
    ],
)
