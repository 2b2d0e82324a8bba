"""Per-request correlation ids for the companion API.

The header name comes from ``REQUEST_ID_HEADER``. A safe incoming id is kept,
anything else is replaced with a fresh uuid4. The id is stored on
``request.state.request_id`` and echoed on the response. Each request gets
one access log line; the body is never read.
"""

from __future__ import annotations

import logging
import time
from typing import Optional

from starlette.datastructures import Headers, MutableHeaders
from starlette.types import ASGIApp, Message, Receive, Scope, Send

from backend.companion.config import get_settings
from backend.companion.observability import accept_request_id, new_request_id

logger = logging.getLogger(__name__)


class RequestIdMiddleware:
    def __init__(self, app: ASGIApp, header_name: Optional[str] = None) -> None:
        self.app = app
        self.header_name = (header_name or get_settings().request_id_header).lower()

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return

        request_id = accept_request_id(Headers(scope=scope).get(self.header_name)) or new_request_id()
        scope.setdefault("state", {})["request_id"] = request_id

        started = time.monotonic()
        status: Optional[int] = None

        async def send_with_request_id(message: Message) -> None:
            nonlocal status
            if message["type"] == "http.response.start":
                status = message["status"]
                MutableHeaders(scope=message).setdefault(self.header_name, request_id)
            await send(message)

        try:
            await self.app(scope, receive, send_with_request_id)
        finally:
            logger.info(
                "[HTTP] %s %s -> %s",
                scope.get("method", "?"),
                scope.get("path", "?"),
                status,
                extra={
                    "method": scope.get("method"),
                    "path": scope.get("path"),
                    "status": status,
                    "duration_ms": int((time.monotonic() - started) * 1000),
                    "request_id": request_id,
                },
            )


__all__ = ["RequestIdMiddleware"]
