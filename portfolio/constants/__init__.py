"""Constants shared across the admin back-office.

Main groups:
- ErrorMessages / ErrorCategory / ErrorSeverity: error metadata
- HttpStatus: HTTP status codes
- FlashCategory: flash message categories
- Locale: supported interface languages
"""

from http import HTTPStatus as HttpStatus

from .flash_categories import FlashCategory
from .locales import DEFAULT_LOCALE, SUPPORTED_LOCALES, Locale
from .system_constants import (
    ErrorCategory,
    ErrorMessages,
    ErrorSeverity,
    LogLevel,
)

__all__ = [
    "DEFAULT_LOCALE",
    "SUPPORTED_LOCALES",
    "ErrorCategory",
    "ErrorMessages",
    "ErrorSeverity",
    "FlashCategory",
    "HttpStatus",
    "Locale",
    "LogLevel",
]
