"""Context variables shared by the structured logging helpers."""

from contextvars import ContextVar

request_id_var: ContextVar[str | None] = ContextVar("request_id", default=None)
locale_var: ContextVar[str | None] = ContextVar("locale", default=None)

__all__ = ["locale_var", "request_id_var"]
