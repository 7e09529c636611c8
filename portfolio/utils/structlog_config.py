"""Structured logging configuration and helpers for the portfolio admin."""

from __future__ import annotations

import logging
import sys
from typing import TYPE_CHECKING, cast

import structlog
from flask import Flask, current_app, has_request_context, request

from portfolio.settings import APP_VERSION
from portfolio.types import StructlogEventDict
from portfolio.utils.logging.context_vars import locale_var, request_id_var

if TYPE_CHECKING:
    from structlog.typing import BindableLogger, Processor


class DebugFilter:
    """Processor that drops DEBUG events unless debug logging is enabled.

    Attributes:
        enabled: Whether DEBUG events pass through.

    """

    def __init__(self, *, enabled: bool = False) -> None:
        self.enabled = enabled

    def set_enabled(self, *, enabled: bool) -> None:
        self.enabled = enabled

    def __call__(
        self,
        _logger: BindableLogger,
        method_name: str,
        event_dict: StructlogEventDict,
    ) -> StructlogEventDict:
        if method_name == "debug" and not self.enabled:
            raise structlog.DropEvent
        return event_dict


class StructlogConfig:
    """structlog configuration core.

    Owns the processor chain and the debug filter. ``configure`` may be called
    many times; the processor chain is installed once.

    Attributes:
        debug_filter: DEBUG event filter.
        configured: Whether structlog has been configured.

    Example:
        >>> config = StructlogConfig()
        >>> config.configure(app)
        >>> logger = get_logger("portfolio.forms")

    """

    def __init__(self) -> None:
        self.debug_filter = DebugFilter(enabled=False)
        self.configured = False

    def configure(self, app: Flask | None = None) -> None:
        """Install the structlog processors (idempotent).

        Args:
            app: Optional Flask app; when given, its debug logging flag is applied.

        """
        if not self.configured:
            processors = [
                self.debug_filter,
                structlog.contextvars.merge_contextvars,
                structlog.processors.TimeStamper(fmt="iso"),
                structlog.stdlib.add_log_level,
                structlog.processors.StackInfoRenderer(),
                structlog.processors.format_exc_info,
                self._add_request_context,
                self._add_global_context,
                self._get_renderer(),
            ]
            structlog.configure(
                processors=cast("list[Processor]", processors),
                context_class=dict,
                logger_factory=structlog.stdlib.LoggerFactory(),
                wrapper_class=structlog.stdlib.BoundLogger,
                cache_logger_on_first_use=True,
            )
            self.configured = True

        if app is not None:
            enable_debug = bool(app.config.get("ENABLE_DEBUG_LOG", False))
            self.debug_filter.set_enabled(enabled=enable_debug)

    @staticmethod
    def _add_request_context(
        _logger: BindableLogger,
        _method_name: str,
        event_dict: StructlogEventDict,
    ) -> StructlogEventDict:
        """Attach request id, path and interface locale."""
        if has_request_context():
            event_dict["request_id"] = request_id_var.get()
            event_dict.setdefault("path", request.path)
            locale = locale_var.get()
            if locale:
                event_dict["locale"] = locale
        return event_dict

    @staticmethod
    def _add_global_context(
        _logger: BindableLogger,
        _method_name: str,
        event_dict: StructlogEventDict,
    ) -> StructlogEventDict:
        """Attach application name and version."""
        try:
            event_dict["app_name"] = current_app.config["APP_NAME"]
            event_dict["app_version"] = current_app.config["APP_VERSION"]
        except (RuntimeError, KeyError):
            event_dict["app_name"] = "Portfolio Admin"
            event_dict["app_version"] = APP_VERSION
        return event_dict

    @staticmethod
    def _get_renderer() -> Processor:
        """Console renderer on a TTY, JSON lines otherwise."""
        if sys.stdout.isatty():
            return structlog.dev.ConsoleRenderer(colors=True)
        return structlog.processors.JSONRenderer()


structlog_config = StructlogConfig()


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """Return a structured logger.

    Args:
        name: Logger name, usually the module path.

    Returns:
        Bound structlog logger.

    """
    structlog_config.configure()
    return structlog.get_logger(name)


def configure_structlog(app: Flask) -> None:
    """Configure structlog for an app and register the teardown hook.

    Args:
        app: Flask application.

    """
    structlog_config.configure(app)
    if not logging.getLogger().handlers:
        logging.basicConfig(format="%(message)s", stream=sys.stdout)
    logging.getLogger().setLevel(getattr(logging, str(app.config.get("LOG_LEVEL", "INFO")), logging.INFO))

    @app.teardown_appcontext
    def log_teardown_error(exception: BaseException | None) -> None:
        if exception:
            get_logger("portfolio").error("request_teardown_error", module="system", exception=str(exception))


def get_system_logger() -> structlog.stdlib.BoundLogger:
    """Logger for application lifecycle events."""
    return get_logger("portfolio.system")


def get_rpc_logger() -> structlog.stdlib.BoundLogger:
    """Logger for content API calls."""
    return get_logger("portfolio.rpc")


def get_form_logger() -> structlog.stdlib.BoundLogger:
    """Logger for entity form lifecycle events."""
    return get_logger("portfolio.forms")
