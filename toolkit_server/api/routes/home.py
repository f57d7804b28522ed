"""Home — plain-text greeting at "/" (and every unmatched path by default).

Invariants:
    - Always 200 text/plain, three lines, whatever the method or query string
"""

import logging
from datetime import datetime

from fastapi import APIRouter, Depends, Request

from toolkit_server.api.dependencies import get_now
from toolkit_server.api.http_methods import ALL_METHODS
from toolkit_server.api.responses import text_response
from toolkit_server.core.payloads import build_home_text

logger = logging.getLogger(__name__)
router = APIRouter(tags=["home"])


async def home(request: Request, now: datetime = Depends(get_now)):
    """Greeting, server time, and a pointer to /api."""
    logger.info(
        f"HomeHandler called: {request.method} {request.url.path}",
        extra={"method": request.method, "path": request.url.path},
    )
    return text_response(build_home_text(now))


router.add_api_route("/", home, methods=ALL_METHODS)
