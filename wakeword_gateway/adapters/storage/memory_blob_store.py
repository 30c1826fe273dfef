"""
In-memory blob store for local development and testing.
"""
from typing import AsyncIterator, Dict, Optional, Tuple

from wakeword_gateway.core.models import StoredUpload
from wakeword_gateway.core.ports.blob_store import BlobStorePort


class InMemoryBlobStore(BlobStorePort):
    """
    Keeps uploads in a process-local dict. Not for production use.
    """

    def __init__(self, bucket_name: str = "memory"):
        self.bucket_name = bucket_name
        self._objects: Dict[str, Tuple[bytes, str]] = {}
        self.put_calls = 0

    async def put(
        self,
        key: str,
        body: AsyncIterator[bytes],
        content_type: str
    ) -> StoredUpload:
        self.put_calls += 1
        data = bytearray()
        if body is not None:
            async for chunk in body:
                data.extend(chunk)
        self._objects[key] = (bytes(data), content_type)
        return StoredUpload(
            key=key,
            bucket=self.bucket_name,
            content_type=content_type,
            size_bytes=len(data)
        )

    def get(self, key: str) -> Optional[bytes]:
        """Return stored bytes for a key, or None."""
        stored = self._objects.get(key)
        return stored[0] if stored else None

    def keys(self) -> list:
        return list(self._objects)

    def get_store_info(self) -> dict:
        return {"backend": "memory", "bucket_name": self.bucket_name, "objects": len(self._objects)}
