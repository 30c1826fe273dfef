"""
Storage key derivation for training uploads.
Keys encode the upload metadata and an anonymized uploader id.
"""
import hashlib
from datetime import datetime, timezone
from typing import Callable

from wakeword_gateway.core.models import AcceptedUpload


def utc_now() -> datetime:
    """Default clock."""
    return datetime.now(timezone.utc)


def format_timestamp(instant: datetime) -> str:
    """
    Render an instant as a key-safe UTC timestamp.

    Args:
        instant: Timezone-aware datetime (naive values are taken as UTC)

    Returns:
        ISO-8601 with millisecond precision and ':' replaced by '-',
        e.g. '2024-01-01T00-00-00.000'
    """
    if instant.tzinfo is not None:
        instant = instant.astimezone(timezone.utc)
    iso = instant.isoformat(timespec="milliseconds")
    return iso[:23].replace(":", "-")


def hash_user(client_ip: str) -> str:
    """SHA-256 of the client address as lowercase hex."""
    return hashlib.sha256(client_ip.encode("utf-8")).hexdigest()


class StorageKeyDeriver:
    """
    Builds '{wake_word}-{timestamp}-{distance}-{speed}-{user_hash}.{extension}' keys.
    """

    def __init__(self, clock: Callable[[], datetime] = utc_now):
        self.clock = clock

    def derive_key(self, upload: AcceptedUpload, client_ip: str) -> str:
        """
        Derive the storage key for an accepted upload.

        Args:
            upload: Validated upload descriptor
            client_ip: Address of the uploader

        Returns:
            Storage key
        """
        timestamp = format_timestamp(self.clock())
        user_hash = hash_user(client_ip)
        return (
            f"{upload.wake_word}-{timestamp}-{upload.distance}-{upload.speed}"
            f"-{user_hash}.{upload.key_extension}"
        )
