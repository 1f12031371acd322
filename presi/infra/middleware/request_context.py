"""
Request context middleware for structured logging.
"""

from __future__ import annotations

import re
import time
from typing import Callable
from uuid import uuid4

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware

from presi.infra.config.logging_config import bind_context, clear_context, get_logger

REQUEST_ID_HEADER = "X-Request-ID"
# Client-supplied ids end up in every log line, so only short plain tokens are trusted.
REQUEST_ID_RE = re.compile(r"^[A-Za-z0-9._-]{1,64}$")


def resolve_request_id(incoming: str | None) -> str:
    if incoming and REQUEST_ID_RE.match(incoming):
        return incoming
    return str(uuid4())


class RequestContextMiddleware(BaseHTTPMiddleware):
    """Binds a request_id to the structlog context and echoes it back.

    Every request logs ``request.start`` and either ``request.end`` with its
    duration or ``request.error`` when the handler raised.
    """

    async def dispatch(self, request: Request, call_next: Callable[[Request], Response]) -> Response:  # type: ignore[override]
        request_id = resolve_request_id(request.headers.get(REQUEST_ID_HEADER))
        bind_context(
            request_id=request_id, path=str(request.url.path), method=request.method
        )
        logger = get_logger("http")
        started = time.perf_counter()

        logger.info(
            "request.start", client_ip=request.client.host if request.client else None
        )
        try:
            response = await call_next(request)
        except Exception as exc:
            logger.exception(
                "request.error",
                request_id=request_id,
                error_type=type(exc).__name__,
                duration_ms=round((time.perf_counter() - started) * 1000, 2),
            )
            raise
        finally:
            clear_context()

        response.headers[REQUEST_ID_HEADER] = request_id
        logger.info(
            "request.end",
            request_id=request_id,
            status_code=response.status_code,
            duration_ms=round((time.perf_counter() - started) * 1000, 2),
        )
        return response
