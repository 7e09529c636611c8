"""System-wide constants: log levels, error categories and default messages."""

from enum import Enum


class LogLevel(Enum):
    """Log level names."""

    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


class ErrorCategory(Enum):
    """Error classification used in structured logs."""

    VALIDATION = "validation"
    BUSINESS = "business"
    AUTHENTICATION = "authentication"
    CONFIGURATION = "configuration"
    EXTERNAL = "external"
    SYSTEM = "system"


class ErrorSeverity(Enum):
    """Error severity."""

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    CRITICAL = "critical"


class ErrorMessages:
    """Default error messages, keyed by message key."""

    INTERNAL_ERROR = "Internal server error"
    VALIDATION_ERROR = "Validation failed"
    INVALID_CREDENTIALS = "Authentication required by the content API"
    RESOURCE_NOT_FOUND = "Resource not found"
    CONSTRAINT_VIOLATION = "Conflicting change"
    EXTERNAL_SERVICE_ERROR = "Content API request failed"
    FORM_CONFIGURATION_ERROR = "Invalid form configuration"
    FORM_STATE_ERROR = "Form is no longer editable"
