"""
Wake Word Upload Use Case for Wake Word Gateway.
Orchestrates validation, key derivation and the blob store write.
"""
from wakeword_gateway.core.models import (
    BlobStoreError,
    RejectedUpload,
    UploadRequest,
    UploadResult
)
from wakeword_gateway.core.ports.blob_store import BlobStorePort
from wakeword_gateway.core.ports.error_reporter import ErrorReporterPort
from wakeword_gateway.core.services.storage_key import StorageKeyDeriver
from wakeword_gateway.core.services.upload_validator import UploadRequestValidator
from wakeword_gateway.infrastructure.logging.log_config import get_logger

logger = get_logger("WakeWordUploadUseCase")


class WakeWordUploadUseCase:
    """
    Use case for storing one wake word training clip.

    Received -> Validating -> Rejected | Accepted -> Deriving Key -> Writing
    -> Stored | WriteFailed. No retries; every call yields one UploadResult.
    """

    STORAGE_FAILURE_MESSAGE = "Failed to store audio file"
    UNEXPECTED_FAILURE_MESSAGE = "Internal server error"

    def __init__(
        self,
        validator: UploadRequestValidator,
        key_deriver: StorageKeyDeriver,
        blob_store: BlobStorePort,
        error_reporter: ErrorReporterPort
    ):
        """
        Initialize upload use case.

        Args:
            validator: Upload policy checks
            key_deriver: Storage key builder
            blob_store: Destination for accepted uploads
            error_reporter: Sink for storage and unexpected failures
        """
        self.validator = validator
        self.key_deriver = key_deriver
        self.blob_store = blob_store
        self.error_reporter = error_reporter

    async def upload(self, request: UploadRequest) -> UploadResult:
        """
        Validate and store an upload.

        Args:
            request: Inbound upload

        Returns:
            UploadResult with status code, message and, on success, the key
        """
        outcome = self.validator.validate(request)
        if isinstance(outcome, RejectedUpload):
            logger.info("Upload rejected", extra={"extra_fields": {
                "status_code": outcome.status_code,
                "reason": outcome.message
            }})
            return UploadResult(status_code=outcome.status_code, message=outcome.message)

        key = None
        try:
            key = self.key_deriver.derive_key(outcome, request.client_ip)
            stored = await self.blob_store.put(key, request.body, outcome.content_type)
        except BlobStoreError as e:
            self.error_reporter.capture_exception(e, {
                "operation": e.operation or "put",
                "key": e.key or key
            })
            return UploadResult(status_code=500, message=self.STORAGE_FAILURE_MESSAGE)
        except Exception as e:
            self.error_reporter.capture_exception(e, {"operation": "upload", "key": key})
            return UploadResult(status_code=500, message=self.UNEXPECTED_FAILURE_MESSAGE)

        logger.info("Upload stored", extra={"extra_fields": {
            "key": stored.key,
            "wake_word": outcome.wake_word,
            "size_bytes": stored.size_bytes
        }})
        return UploadResult(status_code=201, message="success", key=stored.key)
