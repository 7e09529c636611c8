"""Blueprints of the admin back-office."""

from .admin import admin_bp
from .health import health_bp

__all__ = ["admin_bp", "health_bp"]
