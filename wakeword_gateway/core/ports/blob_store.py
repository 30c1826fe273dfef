"""
Blob store port for Wake Word Gateway.
Defines the interface for persisting training uploads.
"""
from abc import ABC, abstractmethod
from typing import AsyncIterator

from wakeword_gateway.core.models import StoredUpload


class BlobStorePort(ABC):
    """
    Port for blob storage operations.
    Defines the contract for blob store implementations.
    """

    @abstractmethod
    async def put(
        self,
        key: str,
        body: AsyncIterator[bytes],
        content_type: str
    ) -> StoredUpload:
        """
        Stream a body into the store under the given key.

        Existing objects with the same key are overwritten.

        Args:
            key: Storage key
            body: Async iterator of byte chunks, consumed once
            content_type: MIME type recorded with the object

        Returns:
            StoredUpload confirming the written key

        Raises:
            BlobStoreError: If the write fails
        """
        pass

    @abstractmethod
    def get_store_info(self) -> dict:
        """
        Describe the store for startup logging.

        Returns:
            Dict with backend type and location
        """
        pass
