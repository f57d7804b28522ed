"""Request Deadlines — per-request read and write timeouts as ASGI middleware.

Invariants:
    - Read deadline runs from request start until the last body chunk arrives;
      receives after the body is complete (disconnect polling) are not timed
    - Write deadline bounds the whole handler, from request start to the final send
    - Read overrun raises RequestTimeoutError inside the app, so the global
      ToolkitError handler answers 408
    - Write overrun cancels the handler; 503 is sent only if no response has started

Design Decisions:
    - Pure ASGI middleware over BaseHTTPMiddleware: it can wrap receive() and
      see whether http.response.start was already sent
    - Deadlines live in the app, so they hold under any ASGI server
"""

import asyncio
import logging

from starlette.types import ASGIApp, Message, Receive, Scope, Send

from toolkit_server.api.responses import text_response
from toolkit_server.core.errors import RequestTimeoutError

logger = logging.getLogger(__name__)


class RequestTimeoutMiddleware:
    def __init__(
        self, app: ASGIApp, read_timeout: float, write_timeout: float,
    ) -> None:
        self.app = app
        self.read_timeout = read_timeout
        self.write_timeout = write_timeout

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return

        loop = asyncio.get_running_loop()
        read_deadline = loop.time() + self.read_timeout
        body_complete = False
        response_started = False

        async def timed_receive() -> Message:
            nonlocal body_complete
            if body_complete:
                return await receive()
            remaining = max(read_deadline - loop.time(), 0)
            try:
                message = await asyncio.wait_for(receive(), timeout=remaining)
            except asyncio.TimeoutError as exc:
                raise RequestTimeoutError("read", self.read_timeout) from exc
            if message["type"] != "http.request" or not message.get("more_body", False):
                body_complete = True
            return message

        async def tracked_send(message: Message) -> None:
            nonlocal response_started
            if message["type"] == "http.response.start":
                response_started = True
            await send(message)

        try:
            await asyncio.wait_for(
                self.app(scope, timed_receive, tracked_send),
                timeout=self.write_timeout,
            )
        except asyncio.TimeoutError:
            exc = RequestTimeoutError("write", self.write_timeout)
            logger.warning(
                f"{exc.code}: {exc.message}",
                extra={
                    **exc.log_extra(),
                    "method": scope.get("method"),
                    "path": scope.get("path"),
                    "status_code": exc.http_status,
                },
            )
            if not response_started:
                response = text_response(exc.public_message, exc.http_status)
                await response(scope, receive, send)
