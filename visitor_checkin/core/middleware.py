"""
Request body size limit

Bodies announced with a Content-Length over the limit are refused before
anything is read. Bodies without one (chunked uploads) are counted while the
endpoint reads them and refused as soon as the count passes the limit.
"""

from typing import Optional

from fastapi import HTTPException
from fastapi.responses import JSONResponse
from starlette.datastructures import Headers
from starlette.types import ASGIApp, Message, Receive, Scope, Send
import structlog

from visitor_checkin.core.config import settings

logger = structlog.get_logger(__name__)

TOO_LARGE = "Request body too large."


class BodySizeLimitMiddleware:
    """Answer 413 for request bodies larger than MAX_BODY_SIZE"""

    def __init__(self, app: ASGIApp, max_body_size: Optional[int] = None):
        self.app = app
        self.max_body_size = max_body_size

    async def __call__(self, scope: Scope, receive: Receive, send: Send):
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return

        limit = self.max_body_size if self.max_body_size is not None else settings.MAX_BODY_SIZE

        content_length = Headers(scope=scope).get("content-length")
        if content_length and content_length.isdigit() and int(content_length) > limit:
            logger.warning("Request body too large", content_length=int(content_length), limit=limit)
            response = JSONResponse(status_code=413, content={"message": TOO_LARGE})
            await response(scope, receive, send)
            return

        received = 0

        async def limited_receive() -> Message:
            nonlocal received
            message = await receive()
            if message["type"] == "http.request":
                received += len(message.get("body", b""))
                if received > limit:
                    logger.warning("Streamed request body too large", received=received, limit=limit)
                    # Raised inside the body read, so FastAPI passes it to the HTTPException handler
                    raise HTTPException(status_code=413, detail=TOO_LARGE)
            return message

        await self.app(scope, limited_receive, send)
