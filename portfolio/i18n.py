"""Interface translations for the admin back-office."""

from __future__ import annotations

from collections.abc import Mapping

from portfolio.constants import DEFAULT_LOCALE, SUPPORTED_LOCALES
from portfolio.constants.messages import CATALOGS


def is_supported_locale(locale: str | None) -> bool:
    """Whether the locale has a message catalog."""
    return locale in SUPPORTED_LOCALES


def translate(key: str, locale: str | None = None, **params: object) -> str:
    """Translate a message key.

    Falls back to the default locale, then to the key itself, so a missing
    message is visible in the UI instead of failing the request.

    Args:
        key: Dotted message key, e.g. ``admin.projects.titlePl``.
        locale: Interface language; the default locale when None.
        **params: ``str.format`` parameters.

    Returns:
        Translated message.

    """
    catalog = CATALOGS.get(locale or DEFAULT_LOCALE, CATALOGS[DEFAULT_LOCALE])
    message = catalog.get(key) or CATALOGS[DEFAULT_LOCALE].get(key) or key
    if params:
        return message.format(**params)
    return message


def localized(pair: object, locale: str | None = None) -> str:
    """Pick one side of a localized pair (``{"pl": ..., "en": ...}``).

    Falls back to the other language when the requested side is blank.
    Non-mapping values are rendered as strings.
    """
    if not isinstance(pair, Mapping):
        return "" if pair is None else str(pair)
    preferred = locale or DEFAULT_LOCALE
    value = pair.get(preferred)
    if value:
        return str(value)
    for candidate in SUPPORTED_LOCALES:
        fallback = pair.get(candidate)
        if fallback:
            return str(fallback)
    return ""
