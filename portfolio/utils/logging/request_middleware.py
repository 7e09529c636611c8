"""Request-scoped logging context.

Binds a request id and the interface locale through contextvars for the whole
request, and emits one summary event per request.
"""

from __future__ import annotations

import re
import time
from typing import TYPE_CHECKING
from uuid import uuid4

from flask import Flask, g, request

from portfolio.utils.logging.context_vars import locale_var, request_id_var
from portfolio.utils.structlog_config import get_logger

if TYPE_CHECKING:
    from werkzeug.wrappers.response import Response

_REQUEST_ID_HEADER = "X-Request-ID"
_REQUEST_ID_PATTERN = re.compile(r"^[A-Za-z0-9][A-Za-z0-9_.:-]{0,127}$")


def _generate_request_id() -> str:
    return f"req_{uuid4().hex}"


def _sanitize_request_id(raw_value: str | None) -> str | None:
    if not raw_value:
        return None
    value = raw_value.strip()
    if not _REQUEST_ID_PATTERN.match(value):
        return None
    return value


def register_request_logging(app: Flask) -> None:
    """Register the before/after/teardown hooks."""

    @app.before_request
    def _bind_request_context() -> None:
        request_id = _sanitize_request_id(request.headers.get(_REQUEST_ID_HEADER)) or _generate_request_id()
        view_args = request.view_args or {}

        # Tokens are reset on teardown so values never leak into the next request on this thread.
        g._request_id_token = request_id_var.set(request_id)
        g._locale_token = locale_var.set(view_args.get("locale"))
        g.request_id = request_id
        g._request_start_perf = time.perf_counter()

    @app.after_request
    def _emit_request_event(response: Response) -> Response:
        started = getattr(g, "_request_start_perf", None)
        duration_ms = round((time.perf_counter() - started) * 1000, 2) if started is not None else None
        response.headers[_REQUEST_ID_HEADER] = getattr(g, "request_id", "") or ""
        get_logger("portfolio.request").info(
            "request_completed",
            module="http",
            method=request.method,
            path=request.path,
            endpoint=request.endpoint,
            status_code=response.status_code,
            duration_ms=duration_ms,
        )
        return response

    @app.teardown_request
    def _reset_request_context(_exception: BaseException | None) -> None:
        request_id_token = g.pop("_request_id_token", None)
        if request_id_token is not None:
            request_id_var.reset(request_id_token)
        locale_token = g.pop("_locale_token", None)
        if locale_token is not None:
            locale_var.reset(locale_token)
