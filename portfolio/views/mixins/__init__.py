"""Reusable view mixins."""
