"""Client of the remote content API (tRPC over HTTP, no transformer).

Queries are ``GET {base}/trpc/{procedure}?input=<json>``, mutations
``POST {base}/trpc/{procedure}`` with a JSON body. Responses arrive in an
envelope: ``{"result": {"data": ...}}`` on success and
``{"error": {"message": ..., "data": {"code": ..., "httpStatus": ...}}}``
on failure.
"""

from __future__ import annotations

import json
import time
from collections.abc import Mapping
from typing import Any

import requests
from flask import current_app

from portfolio.errors import AppError, AuthenticationError, ConflictError, NotFoundError, RpcError
from portfolio.utils.structlog_config import get_rpc_logger

SESSION_COOKIE_NAME = "better-auth.session_token"
_CODE_ERRORS: dict[str, type[AppError]] = {
    "NOT_FOUND": NotFoundError,
    "UNAUTHORIZED": AuthenticationError,
    "CONFLICT": ConflictError,
}


class RpcClient:
    """Thin wrapper around ``requests.Session`` speaking the content API envelope.

    Args:
        base_url: API origin, e.g. ``http://localhost:3000``.
        timeout: Per-request timeout in seconds.
        session_cookie: Admin session token forwarded as a cookie, if any.
        session: Session to reuse; a new one is created when omitted.

    """

    def __init__(
        self,
        base_url: str,
        *,
        timeout: float = 10.0,
        session_cookie: str | None = None,
        session: requests.Session | None = None,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.session = session or requests.Session()
        self.session.headers.setdefault("Accept", "application/json")
        if session_cookie:
            self.session.cookies.set(SESSION_COOKIE_NAME, session_cookie)
        self._logger = get_rpc_logger()

    # ------------------------------------------------------------------ #
    # Public API
    # ------------------------------------------------------------------ #
    def query(self, procedure: str, payload: Any = None) -> Any:
        """Call a query procedure and return its ``data``."""
        params = None if payload is None else {"input": json.dumps(payload, separators=(",", ":"))}
        return self._call("GET", procedure, params=params)

    def mutation(self, procedure: str, payload: Any = None) -> Any:
        """Call a mutation procedure and return its ``data``."""
        return self._call("POST", procedure, json_body=payload)

    # ------------------------------------------------------------------ #
    # Helpers
    # ------------------------------------------------------------------ #
    def _url(self, procedure: str) -> str:
        return f"{self.base_url}/trpc/{procedure}"

    def _call(
        self,
        method: str,
        procedure: str,
        *,
        params: Mapping[str, str] | None = None,
        json_body: Any = None,
    ) -> Any:
        start = time.perf_counter()
        try:
            response = self.session.request(
                method,
                self._url(procedure),
                params=params,
                json=json_body,
                timeout=self.timeout,
            )
        except requests.RequestException as exc:
            self._logger.warning(
                "rpc_transport_failed",
                procedure=procedure,
                method=method,
                duration_ms=round((time.perf_counter() - start) * 1000, 1),
                error_type=exc.__class__.__name__,
            )
            raise RpcError(f"content API unreachable: {exc}", procedure=procedure) from exc

        duration_ms = round((time.perf_counter() - start) * 1000, 1)
        try:
            data = self._unwrap(procedure, response)
        except AppError as exc:
            self._logger.warning(
                "rpc_call_failed",
                procedure=procedure,
                method=method,
                status_code=response.status_code,
                duration_ms=duration_ms,
                error_type=exc.__class__.__name__,
                error_message=exc.message,
            )
            raise
        self._logger.debug(
            "rpc_call_completed",
            procedure=procedure,
            method=method,
            status_code=response.status_code,
            duration_ms=duration_ms,
        )
        return data

    def _unwrap(self, procedure: str, response: requests.Response) -> Any:
        try:
            envelope = response.json()
        except ValueError:
            raise RpcError(
                f"non-JSON response ({response.status_code}): {response.text[:200]}",
                procedure=procedure,
            ) from None

        if not isinstance(envelope, Mapping):
            raise RpcError("malformed response envelope", procedure=procedure)

        error = envelope.get("error")
        if error is not None:
            raise self._error_from_envelope(procedure, error)

        result = envelope.get("result")
        if not isinstance(result, Mapping) or not response.ok:
            raise RpcError(
                f"unexpected response ({response.status_code})",
                procedure=procedure,
            )
        return result.get("data")

    @staticmethod
    def _error_from_envelope(procedure: str, error: Any) -> AppError:
        message = None
        code = None
        http_status = None
        if isinstance(error, Mapping):
            message = error.get("message")
            details = error.get("data")
            if isinstance(details, Mapping):
                code = details.get("code")
                status = details.get("httpStatus")
                http_status = status if isinstance(status, int) else None
        error_class = _CODE_ERRORS.get(str(code))
        if error_class is not None:
            return error_class(
                message,
                extra={"procedure": procedure, "rpc_code": code, "http_status": http_status},
            )
        return RpcError(message, procedure=procedure, code=code, http_status=http_status)


def get_rpc_client() -> RpcClient:
    """Client bound to the current app, created on first use from its config."""
    client = current_app.extensions.get("rpc_client")
    if client is None:
        client = RpcClient(
            current_app.config["RPC_BASE_URL"],
            timeout=float(current_app.config["RPC_TIMEOUT"]),
            session_cookie=current_app.config.get("RPC_SESSION_COOKIE"),
        )
        current_app.extensions["rpc_client"] = client
    return client
