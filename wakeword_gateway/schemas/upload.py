"""
Upload schemas for Wake Word Gateway API.
"""
from pydantic import BaseModel, Field
from typing import Optional


class UploadResponse(BaseModel):
    """
    Response model for the training upload endpoint.
    """
    message: str = Field(..., description="'success' or the rejection reason")
    key: Optional[str] = Field(default=None, description="Storage key of the stored clip")
