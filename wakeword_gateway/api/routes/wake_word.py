"""
Wake word training routes for Wake Word Gateway API.
Handles training clip uploads.
"""
from fastapi import APIRouter, Depends, Request
from wakeword_gateway.api.dependencies import get_upload_use_case
from wakeword_gateway.api.responses import upload_result_response
from wakeword_gateway.config.app_settings import app_settings
from wakeword_gateway.core.models import UploadRequest
from wakeword_gateway.core.usecases.wake_word_upload import WakeWordUploadUseCase

router = APIRouter(tags=["Wake Word"])

# Common methods reach the handler so the validator can answer 405 itself.
# Any other method gets the same 405 from the app's HTTP exception handler.
# OPTIONS never gets here, preflight is answered by the app middleware.
UPLOAD_ROUTE_METHODS = ["GET", "HEAD", "POST", "PUT", "PATCH", "DELETE"]


def resolve_client_ip(request: Request) -> str:
    """
    Client address from the edge proxy header, else the transport peer.
    """
    forwarded = request.headers.get(app_settings.client_ip_header)
    if forwarded:
        return forwarded.strip()
    if request.client is not None:
        return request.client.host
    return ""


@router.api_route(app_settings.upload_path, methods=UPLOAD_ROUTE_METHODS)
async def upload_training_clip(
    request: Request,
    upload_use_case: WakeWordUploadUseCase = Depends(get_upload_use_case)
):
    """
    Store a wake word training clip.

    Expects PUT with an audio body and distance, speed and wake_word query
    parameters. Responds 201 with the storage key.
    """
    upload = UploadRequest(
        method=request.method,
        headers=request.headers,
        query_params=request.query_params,
        client_ip=resolve_client_ip(request),
        body=request.stream()
    )
    result = await upload_use_case.upload(upload)
    return upload_result_response(result)
