"""
Response helpers for Wake Word Gateway API.
Every response is pretty-printed JSON carrying the CORS headers.
"""
import json
from typing import Any, Dict, Optional, Union

from fastapi.responses import JSONResponse

from wakeword_gateway.core.models import UploadResult
from wakeword_gateway.schemas.upload import UploadResponse

CORS_HEADERS: Dict[str, str] = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Methods": "PUT",
    "Access-Control-Allow-Headers": "Content-Type",
}


class PrettyJSONResponse(JSONResponse):
    """JSON response indented by two spaces."""

    media_type = "application/json;charset=UTF-8"

    def render(self, content: Any) -> bytes:
        return json.dumps(content, ensure_ascii=False, indent=2).encode("utf-8")


def create_response(
    content: Union[Dict[str, Any], str],
    status_code: int = 400,
    headers: Optional[Dict[str, str]] = None
) -> PrettyJSONResponse:
    """
    Build a JSON response with the CORS headers attached.

    Args:
        content: JSON body (object or bare string)
        status_code: HTTP status code
        headers: Extra headers

    Returns:
        PrettyJSONResponse
    """
    return PrettyJSONResponse(
        content=content,
        status_code=status_code,
        headers={**CORS_HEADERS, **(headers or {})}
    )


def upload_result_response(result: UploadResult) -> PrettyJSONResponse:
    """Map an UploadResult onto the HTTP response."""
    body = UploadResponse(message=result.message, key=result.key)
    return create_response(
        content=body.model_dump(exclude_none=True),
        status_code=result.status_code
    )
