"""
Logging configuration for the application.

``setup_logging`` configures the root logger once per process with a
console handler and an optional file handler.  ``log_requests`` is an
HTTP middleware writing one line per request (method, path, status
and elapsed time) to the ``bookshelf_api.access`` logger.
"""

import logging
import time
from pathlib import Path
from typing import Optional

from fastapi import Request, Response

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"

access_logger = logging.getLogger("bookshelf_api.access")


def setup_logging(level: str = "INFO", logfile: Optional[str] = None) -> None:
    """Configure the root logger unless it already has handlers.

    ``level`` is a logging level name, case insensitive; unknown names
    fall back to INFO.  ``logfile`` adds a UTF‑8 file handler.
    """
    root = logging.getLogger()
    if root.handlers:
        # Already configured (pytest, uvicorn or a repeated create_app call).
        return

    root.setLevel(getattr(logging, level.upper(), logging.INFO))
    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt="%Y-%m-%d %H:%M:%S")

    handlers: list = [logging.StreamHandler()]
    if logfile:
        handlers.append(logging.FileHandler(Path(logfile).resolve(), encoding="utf-8"))
    for handler in handlers:
        handler.setFormatter(formatter)
        root.addHandler(handler)


async def log_requests(request: Request, call_next) -> Response:
    """Log method, path, status and duration of each request."""
    started = time.perf_counter()
    response = await call_next(request)
    elapsed_ms = (time.perf_counter() - started) * 1000
    access_logger.info(
        "%s %s -> %s (%.1f ms)",
        request.method,
        request.url.path,
        response.status_code,
        elapsed_ms,
    )
    return response
