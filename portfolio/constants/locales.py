"""Supported interface languages."""

from __future__ import annotations

from enum import Enum


class Locale(str, Enum):
    """Interface language; every localized pair carries both."""

    PL = "pl"
    EN = "en"


DEFAULT_LOCALE = Locale.PL.value
SUPPORTED_LOCALES: tuple[str, ...] = tuple(locale.value for locale in Locale)
