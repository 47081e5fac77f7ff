"""ASGI middleware for the HTTP surface."""
import logging
from typing import Optional

from starlette.responses import JSONResponse
from starlette.types import ASGIApp, Message, Receive, Scope, Send

logger = logging.getLogger(__name__)


class BodySizeLimitMiddleware:
    """
    Rejects request bodies larger than max_body_bytes with 413.

    A declared Content-Length is checked up front. Bodies without one (chunked
    transfer) are read here up to the limit and replayed to the app.
    """

    def __init__(self, app: ASGIApp, max_body_bytes: int) -> None:
        self.app = app
        self.max_body_bytes = max_body_bytes

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return

        content_length = dict(scope.get("headers") or []).get(b"content-length")
        if content_length is not None:
            try:
                declared = int(content_length)
            except ValueError:
                declared = -1
            if declared > self.max_body_bytes:
                await self._reject(scope, receive, send, declared)
                return

        body = bytearray()
        more_body = True
        while more_body:
            message = await receive()
            if message["type"] != "http.request":
                # Client went away before the body was complete
                return
            body.extend(message.get("body", b""))
            if len(body) > self.max_body_bytes:
                await self._reject(scope, receive, send, len(body))
                return
            more_body = message.get("more_body", False)

        replayed = False

        async def replay_receive() -> Message:
            nonlocal replayed
            if not replayed:
                replayed = True
                return {"type": "http.request", "body": bytes(body), "more_body": False}
            return await receive()

        await self.app(scope, replay_receive, send)

    async def _reject(self, scope: Scope, receive: Receive, send: Send, size: Optional[int]) -> None:
        logger.warning(
            f"Petición rechazada en {scope.get('path')}: cuerpo de {size} bytes "
            f"supera el límite de {self.max_body_bytes}"
        )
        response = JSONResponse(
            status_code=413,
            content={"error": "Payload demasiado grande"},
        )
        await response(scope, receive, send)
