"""
Schemas module for Wake Word Gateway API.
Contains Pydantic models for response serialization.
"""

from .upload import UploadResponse

__all__ = [
    "UploadResponse"
]
