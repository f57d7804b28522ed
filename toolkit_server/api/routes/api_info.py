"""API — JSON welcome message at "/api".

Invariants:
    - 200 application/json with exactly {message, status, timestamp, endpoint, version}
    - Encode failure never produces a partial 200: it becomes a plain-text 500
"""

import logging
from datetime import datetime

from fastapi import APIRouter, Depends, Request

from toolkit_server.api.dependencies import get_app_settings, get_now
from toolkit_server.api.http_methods import ALL_METHODS
from toolkit_server.api.responses import json_response
from toolkit_server.config import Settings
from toolkit_server.core.payloads import build_api_message

logger = logging.getLogger(__name__)
router = APIRouter(tags=["api"])


@router.api_route("/api", methods=ALL_METHODS)
async def api_info(
    request: Request,
    now: datetime = Depends(get_now),
    settings: Settings = Depends(get_app_settings),
):
    logger.info(
        f"API request: {request.method} {request.url.path}",
        extra={"method": request.method, "path": request.url.path},
    )
    return json_response(build_api_message(now, settings.api_version))
