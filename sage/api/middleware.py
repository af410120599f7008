"""
HTTP middleware.

LatencyMiddleware logs method/path/status/elapsed_ms for every request,
records Prometheus observations and adds ``X-Response-Time-Ms`` and
``X-Request-Id`` headers. It is a pure ASGI middleware so it never buffers
response bodies.

PreflightCORSMiddleware answers browser preflights with an empty 200 body
instead of Starlette's plain-text "OK".
"""

from __future__ import annotations

import time
import uuid

from starlette.datastructures import Headers
from starlette.middleware.cors import CORSMiddleware
from starlette.responses import Response
from starlette.types import ASGIApp, Message, Receive, Scope, Send

from sage.api.metrics import observe_duration, record_request
from sage.config import get_logger

logger = get_logger(__name__)


# Paths excluded from per-request logging (still measured by Prometheus)
_QUIET_PATHS = {"/metrics", "/health"}

# Map raw paths to fixed labels so random scanner paths cannot blow up
# Prometheus label cardinality.
_KNOWN_ROUTES = {
    "/health": "/health",
    "/api/sage": "/api/sage",
    "/api/v1/chat/message": "/api/v1/chat/message",
    "/api/research": "/api/research",
    "/api/research/export": "/api/research/export",
    "/metrics": "/metrics",
}


def _normalize_path(path: str) -> str:
    """Map a raw URL path to a known route label, or 'unknown'."""
    clean = path.rstrip("/") or "/"
    if clean.startswith("/api/research/collections/"):
        return "/api/research/collections"
    return _KNOWN_ROUTES.get(clean, "unknown")


class LatencyMiddleware:
    """Pure ASGI middleware for latency measurement and request ids."""

    def __init__(self, app: ASGIApp) -> None:
        self.app = app

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return

        path = _normalize_path(scope["path"])
        method = scope["method"]
        start = time.perf_counter()
        request_id = uuid.uuid4().hex[:12]
        status = 500  # until http.response.start says otherwise

        async def send_wrapper(message: Message) -> None:
            nonlocal status
            if message["type"] == "http.response.start":
                status = message["status"]
                elapsed_ms = (time.perf_counter() - start) * 1000
                headers = list(message.get("headers", []))
                headers.append((b"x-response-time-ms", f"{elapsed_ms:.1f}".encode()))
                headers.append((b"x-request-id", request_id.encode()))
                message = {**message, "headers": headers}
            await send(message)

        try:
            await self.app(scope, receive, send_wrapper)
        except Exception:
            logger.exception("%s %s [%s] failed", method, path, request_id)
            raise
        finally:
            elapsed_ms = (time.perf_counter() - start) * 1000
            record_request(path, method, status)
            observe_duration(path, elapsed_ms)
            if path not in _QUIET_PATHS:
                logger.info(
                    "%s %s %d %.1fms [%s]",
                    method,
                    path,
                    status,
                    elapsed_ms,
                    request_id,
                )


class PreflightCORSMiddleware(CORSMiddleware):
    """CORSMiddleware whose successful preflight responses have no body."""

    def preflight_response(self, request_headers: Headers) -> Response:
        response = super().preflight_response(request_headers)
        if response.status_code != 200:
            return response
        headers = {
            k: v
            for k, v in response.headers.items()
            if k not in ("content-length", "content-type")
        }
        return Response(status_code=200, headers=headers)
