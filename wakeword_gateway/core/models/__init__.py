"""
Core domain models for Wake Word Gateway.
"""
from .upload import (
    UploadRequest,
    AcceptedUpload,
    RejectedUpload,
    ValidationOutcome,
    StoredUpload,
    UploadResult,
    BlobStoreError
)

__all__ = [
    "UploadRequest",
    "AcceptedUpload",
    "RejectedUpload",
    "ValidationOutcome",
    "StoredUpload",
    "UploadResult",
    "BlobStoreError"
]
