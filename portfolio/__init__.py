"""Portfolio admin - Flask application factory.

Bilingual (Polish/English) back-office of the portfolio site. Every entity
lives behind the remote content API; this app only renders and validates the
admin forms and forwards the results.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from flask import Flask, jsonify, render_template, request, url_for
from flask_wtf.csrf import CSRFProtect
from werkzeug.exceptions import HTTPException

from portfolio.constants import SUPPORTED_LOCALES, FlashCategory
from portfolio.errors import AppError
from portfolio.i18n import is_supported_locale, localized, translate
from portfolio.settings import Settings
from portfolio.utils.logging.request_middleware import register_request_logging
from portfolio.utils.response_utils import prefers_json_response, unified_error_response
from portfolio.utils.structlog_config import configure_structlog, get_system_logger

if TYPE_CHECKING:
    from flask.typing import ResponseReturnValue

    from portfolio.services.rpc_client import RpcClient

csrf = CSRFProtect()


def create_app(*, settings: Settings | None = None, rpc_client: RpcClient | None = None) -> Flask:
    """Create the Flask application.

    Args:
        settings: Configuration; loaded from the environment when omitted.
        rpc_client: Content API client; built lazily from the settings when omitted.

    Returns:
        The configured application.

    """
    resolved_settings = settings or Settings.load()
    app = Flask(__name__)

    configure_app(app, resolved_settings)
    initialize_extensions(app, rpc_client)
    configure_blueprints(app)
    configure_structlog(app)
    register_request_logging(app)
    configure_error_handlers(app)
    configure_template_globals(app)

    get_system_logger().info(
        "app_created",
        module="system",
        environment=resolved_settings.environment,
        rpc_base_url=resolved_settings.rpc_base_url,
    )
    return app


def configure_app(app: Flask, settings: Settings) -> None:
    """Write the settings into ``app.config``."""
    app.config.from_mapping(settings.to_flask_config())
    app.config["SESSION_COOKIE_HTTPONLY"] = True
    app.config["SESSION_COOKIE_SAMESITE"] = "Lax"
    app.config["SESSION_COOKIE_NAME"] = "portfolio_admin_session"


def initialize_extensions(app: Flask, rpc_client: RpcClient | None) -> None:
    csrf.init_app(app)
    if rpc_client is not None:
        app.extensions["rpc_client"] = rpc_client


def configure_blueprints(app: Flask) -> None:
    from portfolio.routes import admin_bp, health_bp

    app.register_blueprint(health_bp)
    app.register_blueprint(admin_bp)


def _request_locale() -> str | None:
    locale = (request.view_args or {}).get("locale")
    return locale if is_supported_locale(locale) else None


def configure_error_handlers(app: Flask) -> None:
    """Render errors as JSON for API clients and as an error page otherwise."""

    def _render_error(error: Exception) -> ResponseReturnValue:
        payload, status_code = unified_error_response(error)
        if prefers_json_response():
            return jsonify(payload), status_code
        locale = _request_locale()
        message = payload["message"]
        if isinstance(error, AppError) and status_code == 404:
            message = translate("common.notFound", locale)
        return render_template("errors/error.html", status_code=status_code, message=message, locale=locale), status_code

    @app.errorhandler(AppError)
    def handle_app_error(error: AppError) -> ResponseReturnValue:
        log_method = get_system_logger().warning if error.recoverable else get_system_logger().error
        log_method(
            "app_error",
            module="system",
            error_type=error.__class__.__name__,
            error_message=error.message,
            status_code=error.status_code,
            path=request.path,
            **error.extra,
        )
        return _render_error(error)

    @app.errorhandler(HTTPException)
    def handle_http_error(error: HTTPException) -> ResponseReturnValue:
        return _render_error(error)

    @app.errorhandler(Exception)
    def handle_unexpected_error(error: Exception) -> ResponseReturnValue:
        get_system_logger().exception("unhandled_exception", module="system", path=request.path)
        return _render_error(error)


def configure_template_globals(app: Flask) -> None:
    def switch_locale_url(code: str) -> str:
        values = {key: value for key, value in (request.view_args or {}).items() if value is not None}
        values["locale"] = code
        return url_for(request.endpoint or "admin.dashboard", **values)

    app.jinja_env.globals.update(
        t=translate,
        localized=localized,
        flash_css_class=FlashCategory.get_css_class,
        supported_locales=SUPPORTED_LOCALES,
        switch_locale_url=switch_locale_url,
    )


__all__ = ["create_app", "csrf"]
