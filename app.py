"""Portfolio admin - local development launcher."""

from __future__ import annotations

import os
from typing import Final

from portfolio import create_app
from portfolio.utils.structlog_config import get_system_logger

os.environ.setdefault("FLASK_ENV", "development")

DEFAULT_HOST: Final[str] = "127.0.0.1"
DEFAULT_PORT: Final[str] = "5001"
DEFAULT_DEBUG: Final[str] = "true"


def _load_runtime_config() -> tuple[str, int, bool]:
    """Read the development server bind address and debug flag."""
    host = os.environ.get("FLASK_HOST") or DEFAULT_HOST
    port = int(os.environ.get("FLASK_PORT", DEFAULT_PORT))
    debug = os.environ.get("FLASK_DEBUG", DEFAULT_DEBUG).lower() == "true"
    return host, port, debug


def main() -> None:
    """Start the Flask development server."""
    app = create_app()
    host, port, debug = _load_runtime_config()
    logger = get_system_logger()
    logger.info("dev_server_started", host=host, port=port, debug=debug)
    logger.info("admin_entry", url=f"http://{host}:{port}/{app.config['DEFAULT_LOCALE']}/admin/")
    app.run(host=host, port=port, debug=debug, threaded=True, use_reloader=False)


if __name__ == "__main__":
    main()
