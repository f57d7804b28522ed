"""Not Found — JSON 404 at "/404", and for unmatched paths when the catch-all is off.

Invariants:
    - Always 404 application/json with exactly {error, path, message}
    - path echoes the request path, not the route template
"""

import logging

from fastapi import APIRouter, Request, status

from toolkit_server.api.http_methods import ALL_METHODS
from toolkit_server.api.responses import json_response
from toolkit_server.core.errors import ErrorSeverity
from toolkit_server.core.payloads import build_not_found

logger = logging.getLogger(__name__)
router = APIRouter(tags=["errors"])


async def not_found(request: Request):
    path = request.url.path
    response = json_response(build_not_found(path), status.HTTP_404_NOT_FOUND)
    logger.warning(
        f"404 Not Found: {path}",
        extra={
            "method": request.method,
            "path": path,
            "status_code": 404,
            "severity": ErrorSeverity.WARNING.value,
        },
    )
    return response


router.add_api_route("/404", not_found, methods=ALL_METHODS)
