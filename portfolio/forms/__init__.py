"""Entity form package.

Field descriptors, the form engine and per-entity definitions (fields, schema,
content API procedures).
"""

from .engine import EntityForm, FormState, RenderedField
from .fields import FieldKind, FieldOption, FieldPath, FormField

__all__ = [
    "EntityForm",
    "FieldKind",
    "FieldOption",
    "FieldPath",
    "FormField",
    "FormState",
    "RenderedField",
]
