"""Class-based admin views."""
