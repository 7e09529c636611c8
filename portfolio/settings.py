"""Portfolio admin - configuration loading and validation.

Goals:
- Environment variables, defaults and checks live in one place.
- `create_app(settings=...)` only consumes Settings and never reads the environment itself.

Settings uses `pydantic-settings` `BaseSettings` and reads the environment plus an
optional local `.env`. Production is stricter: a missing SECRET_KEY raises ValueError.
"""

from __future__ import annotations

import logging
import secrets
from pathlib import Path

from dotenv import load_dotenv
from pydantic import Field, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from portfolio.constants import SUPPORTED_LOCALES

logger = logging.getLogger(__name__)

PROJECT_ROOT = Path(__file__).resolve().parent.parent
DOTENV_PATH = PROJECT_ROOT / ".env"

DEFAULT_ENVIRONMENT = "development"
APP_VERSION = "1.0.0"

DEFAULT_RPC_BASE_URL = "http://localhost:3000"
DEFAULT_RPC_TIMEOUT_SECONDS = 10.0
DEFAULT_LOG_LEVEL = "INFO"

_DEBUG_ENVIRONMENTS = {"development", "testing", "test"}


class Settings(BaseSettings):
    """Runtime settings."""

    model_config = SettingsConfigDict(
        env_ignore_empty=True,
        extra="ignore",
        frozen=True,
        str_strip_whitespace=True,
    )

    environment: str = Field(default=DEFAULT_ENVIRONMENT, validation_alias="FLASK_ENV")
    debug: bool = Field(default=False, validation_alias="FLASK_DEBUG")

    app_name: str = Field(default="Portfolio Admin", validation_alias="APP_NAME")
    app_version: str = APP_VERSION

    secret_key: str = Field(default="", validation_alias="SECRET_KEY")

    rpc_base_url: str = Field(default=DEFAULT_RPC_BASE_URL, validation_alias="RPC_BASE_URL")
    rpc_timeout_seconds: float = Field(default=DEFAULT_RPC_TIMEOUT_SECONDS, validation_alias="RPC_TIMEOUT")
    # Session cookie forwarded to the content API; issuing it is the auth service's job.
    rpc_session_cookie: str | None = Field(default=None, validation_alias="RPC_SESSION_COOKIE")

    default_locale: str = Field(default=SUPPORTED_LOCALES[0], validation_alias="DEFAULT_LOCALE")

    log_level: str = Field(default=DEFAULT_LOG_LEVEL, validation_alias="LOG_LEVEL")
    enable_debug_log: bool = Field(default=False, validation_alias="ENABLE_DEBUG_LOG")

    csrf_enabled: bool = Field(default=True, validation_alias="WTF_CSRF_ENABLED")

    @field_validator("rpc_base_url")
    @classmethod
    def _strip_trailing_slash(cls, value: str) -> str:
        return value.rstrip("/")

    @field_validator("log_level")
    @classmethod
    def _normalize_log_level(cls, value: str) -> str:
        return value.upper()

    @field_validator("default_locale")
    @classmethod
    def _normalize_locale(cls, value: str) -> str:
        return value.lower()

    @property
    def is_production(self) -> bool:
        """Whether the app runs in production."""
        return self.environment.strip().lower() == "production"

    def to_flask_config(self) -> dict[str, object]:
        """Map the settings onto Flask ``app.config`` keys."""
        return {
            "ENV": self.environment,
            "DEBUG": self.debug,
            "APP_NAME": self.app_name,
            "APP_VERSION": self.app_version,
            "SECRET_KEY": self.secret_key,
            "RPC_BASE_URL": self.rpc_base_url,
            "RPC_TIMEOUT": self.rpc_timeout_seconds,
            "RPC_SESSION_COOKIE": self.rpc_session_cookie,
            "DEFAULT_LOCALE": self.default_locale,
            "LOG_LEVEL": self.log_level,
            "ENABLE_DEBUG_LOG": self.enable_debug_log,
            "WTF_CSRF_ENABLED": self.csrf_enabled,
        }

    @classmethod
    def load(cls) -> Settings:
        """Load Settings from the environment and run the checks."""
        load_dotenv(dotenv_path=DOTENV_PATH if DOTENV_PATH.exists() else None, override=False)
        return cls()

    @model_validator(mode="after")
    def _apply_defaults_and_validate(self) -> Settings:
        environment_normalized = self.environment.strip().lower()

        debug = self._resolve_debug(environment_normalized)
        self._ensure_secret_key(debug)
        self._validate()
        return self

    def _resolve_debug(self, environment_normalized: str) -> bool:
        if "debug" in self.model_fields_set:
            return bool(self.debug)
        debug = environment_normalized in _DEBUG_ENVIRONMENTS
        object.__setattr__(self, "debug", debug)
        return debug

    def _ensure_secret_key(self, debug: bool) -> None:
        if self.secret_key:
            return
        if not debug:
            raise ValueError("SECRET_KEY environment variable must be set in production")
        object.__setattr__(self, "secret_key", secrets.token_urlsafe(32))
        logger.warning("SECRET_KEY not set, using a random key for this process")

    def _validate(self) -> None:
        """Cross-field checks, reported together as one ValueError."""
        errors: list[str] = []
        checks: list[tuple[str, bool]] = [
            ("RPC_TIMEOUT must be positive", self.rpc_timeout_seconds <= 0),
            (
                "RPC_BASE_URL must start with http:// or https://",
                not self.rpc_base_url.startswith(("http://", "https://")),
            ),
            (
                f"DEFAULT_LOCALE must be one of {', '.join(SUPPORTED_LOCALES)}",
                self.default_locale not in SUPPORTED_LOCALES,
            ),
            (
                "LOG_LEVEL must be a standard logging level",
                self.log_level not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"},
            ),
        ]
        for message, condition in checks:
            if condition:
                errors.append(message)

        if errors:
            joined = "; ".join(errors)
            raise ValueError(f"Invalid configuration: {joined}")
