"""
Wake word upload domain models.
Pure domain entities without infrastructure dependencies.
"""
from dataclasses import dataclass, field
from typing import AsyncIterator, Mapping, Optional, Union


@dataclass(frozen=True)
class UploadRequest:
    """
    Inbound training upload as seen by the core.

    Headers must be a case-insensitive mapping (the HTTP layer passes
    Starlette's ``Headers``). The body is consumed at most once, by the
    blob store.
    """
    method: str
    headers: Mapping[str, str]
    query_params: Mapping[str, str]
    client_ip: str
    body: Optional[AsyncIterator[bytes]] = field(default=None, repr=False, compare=False)


@dataclass(frozen=True)
class AcceptedUpload:
    """Upload that passed every validation check."""
    content_type: str
    key_extension: str
    distance: str
    speed: str
    wake_word: str


@dataclass(frozen=True)
class RejectedUpload:
    """Upload refused by validation, with the client-facing reason."""
    status_code: int
    message: str


ValidationOutcome = Union[AcceptedUpload, RejectedUpload]


@dataclass(frozen=True)
class StoredUpload:
    """Confirmation returned by a blob store after a successful write."""
    key: str
    bucket: str
    content_type: str
    size_bytes: int


@dataclass(frozen=True)
class UploadResult:
    """Terminal outcome of one upload request."""
    status_code: int
    message: str
    key: Optional[str] = None

    @property
    def is_success(self) -> bool:
        return 200 <= self.status_code < 300


class BlobStoreError(Exception):
    """Domain exception for blob store write failures."""
    def __init__(self, message: str, operation: str = "", key: str = ""):
        self.message = message
        self.operation = operation
        self.key = key
        super().__init__(self.message)

    def __str__(self):
        parts = [self.message]
        if self.operation:
            parts.append(f"Operation: {self.operation}")
        if self.key:
            parts.append(f"Key: {self.key}")
        return " | ".join(parts)
