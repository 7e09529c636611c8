"""Entity form handlers."""

from .entity_form_handler import EntityFormHandler

__all__ = ["EntityFormHandler"]
