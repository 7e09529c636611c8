"""Flask flash message categories."""

from __future__ import annotations

from typing import ClassVar


class FlashCategory:
    """Flash categories, matching the alert styles of the admin templates."""

    SUCCESS = "success"
    ERROR = "error"
    WARNING = "warning"
    INFO = "info"

    ALL: ClassVar[tuple[str, ...]] = (SUCCESS, ERROR, WARNING, INFO)

    CSS_CLASSES: ClassVar[dict[str, str]] = {
        SUCCESS: "alert-success",
        ERROR: "alert-danger",
        WARNING: "alert-warning",
        INFO: "alert-info",
    }

    @classmethod
    def get_css_class(cls, category: str) -> str:
        """Return the alert CSS class for a category, defaulting to info."""
        return cls.CSS_CLASSES.get(category, "alert-info")
