import logging

from fastapi import status
from starlette.datastructures import Headers
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.types import ASGIApp, Message, Receive, Scope, Send

from app.core.exceptions import error_response

logger = logging.getLogger(__name__)


class BodySizeLimitMiddleware:
    """
    Reject request bodies larger than `max_body_bytes` with a 413.

    A declared Content-Length is checked before the app runs. Bodies without
    one (chunked uploads) are counted as they are received, and the read that
    crosses the limit raises an HTTPException that the exception handlers
    turn into the error envelope.
    """

    def __init__(self, app: ASGIApp, max_body_bytes: int):
        self.app = app
        self.max_body_bytes = max_body_bytes

    def _too_large(self) -> str:
        return f"Request body exceeds {self.max_body_bytes} bytes"

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return

        content_length = Headers(scope=scope).get("content-length")
        if content_length and content_length.isdigit() and int(content_length) > self.max_body_bytes:
            response = error_response(status.HTTP_413_REQUEST_ENTITY_TOO_LARGE, self._too_large())
            await response(scope, receive, send)
            return

        received = 0

        async def limited_receive() -> Message:
            nonlocal received
            message = await receive()
            if message["type"] == "http.request":
                received += len(message.get("body", b""))
                if received > self.max_body_bytes:
                    logger.warning(f"Rejected streamed body on {scope['method']} {scope['path']}: over {self.max_body_bytes} bytes")
                    raise StarletteHTTPException(
                        status_code=status.HTTP_413_REQUEST_ENTITY_TOO_LARGE,
                        detail=self._too_large(),
                    )
            return message

        await self.app(scope, limited_receive, send)
