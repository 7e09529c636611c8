"""Unified JSON response payloads."""

from __future__ import annotations

from typing import TYPE_CHECKING

from flask import Response, jsonify, request

from portfolio.constants import HttpStatus
from portfolio.errors import AppError, map_exception_to_status

if TYPE_CHECKING:
    from portfolio.types import JsonDict


def prefers_json_response() -> bool:
    """Whether the current request expects JSON rather than an HTML page."""
    if request.is_json or request.headers.get("X-Requested-With") == "XMLHttpRequest":
        return True
    mimetypes = request.accept_mimetypes
    return mimetypes.accept_json and not mimetypes.accept_html


def unified_success_response(data: object | None = None, *, status: int = HttpStatus.OK) -> tuple[JsonDict, int]:
    payload: JsonDict = {"success": True, "error": False}
    if data is not None:
        payload["data"] = data  # type: ignore[assignment]
    return payload, status


def unified_error_response(error: Exception) -> tuple[JsonDict, int]:
    """Error payload and status code for any exception.

    `AppError` exposes its message and metadata; anything else is reported as
    an internal error without leaking details.
    """
    status = map_exception_to_status(error, default=HttpStatus.INTERNAL_SERVER_ERROR)
    if isinstance(error, AppError):
        payload: JsonDict = {
            "success": False,
            "error": True,
            "message": error.message,
            "message_key": error.message_key,
            "category": error.category.value,
            "severity": error.severity.value,
        }
    else:
        payload = {
            "success": False,
            "error": True,
            "message": getattr(error, "description", None) or "Internal server error",
            "message_key": "INTERNAL_ERROR",
        }
    return payload, status


def jsonify_unified_success(*args: object, **kwargs: object) -> tuple[Response, int]:
    payload, status = unified_success_response(*args, **kwargs)  # type: ignore[arg-type]
    return jsonify(payload), status


def jsonify_unified_error(error: Exception) -> tuple[Response, int]:
    payload, status = unified_error_response(error)
    return jsonify(payload), status
