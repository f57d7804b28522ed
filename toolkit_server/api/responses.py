"""Response Rendering — plain-text and JSON responses with exact Content-Type.

Invariants:
    - JSON bodies come only from schema models (no undocumented keys)
    - Content-Type is exactly "text/plain" or "application/json", no charset parameter
    - Serialization failure raises ResponseEncodingError; nothing is partially written

Design Decisions:
    - Serialize before building the Response: the status line is only chosen once
      the body exists, so an encode failure can still become a 500
"""

from fastapi import Response
from pydantic import BaseModel
from pydantic_core import PydanticSerializationError

from toolkit_server.core.errors import ResponseEncodingError

TEXT_PLAIN = "text/plain"
APPLICATION_JSON = "application/json"


def text_response(body: str, status_code: int = 200) -> Response:
    # explicit header keeps Starlette from appending "; charset=utf-8"
    return Response(
        content=body, status_code=status_code, headers={"content-type": TEXT_PLAIN},
    )


def json_response(payload: BaseModel, status_code: int = 200) -> Response:
    try:
        body = payload.model_dump_json()
    except PydanticSerializationError as exc:
        raise ResponseEncodingError(str(exc)) from exc
    return Response(content=body, status_code=status_code, media_type=APPLICATION_JSON)
