"""Liveness probe."""

from flask import Blueprint, Response

from portfolio.utils.response_utils import jsonify_unified_success

health_bp = Blueprint("health", __name__)


@health_bp.route("/healthz")
def healthz() -> tuple[Response, int]:
    """Report that the process serves requests; the content API is not probed."""
    return jsonify_unified_success({"status": "ok"})
