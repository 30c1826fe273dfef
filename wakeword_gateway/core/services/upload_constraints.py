"""
Wake word upload business rules and constraints.
Domain-level constants that define what a training upload may look like.
"""
import re
from dataclasses import dataclass
from typing import FrozenSet, Pattern, Tuple


class WakeWordUploadConstraints:
    """
    Business rules for wake word training uploads.
    These are domain rules that remain constant across environments.
    """

    # Only uploads are accepted on the training endpoint
    ALLOWED_METHOD = "PUT"

    # Supported container formats, in the order reported to clients
    ALLOWED_CONTENT_TYPES = ("audio/webm", "audio/ogg", "audio/mp4")

    # Supported training targets
    ALLOWED_WAKE_WORDS = ("casita", "ok_nabu")

    # 250 KiB
    MAX_CONTENT_LENGTH = 250 * 1024

    # Query parameters that become part of the storage key
    REQUIRED_PARAMETERS = ("distance", "speed", "wake_word")

    # distance and speed are embedded in the key, keep them path-safe
    NUMERIC_PARAMETER_PATTERN = r"^[0-9]+(\.[0-9]+)?$"
    MAX_NUMERIC_PARAMETER_LENGTH = 16

    @classmethod
    def extension_for(cls, content_type: str) -> str:
        """Derive the key extension from an allowed content type."""
        return content_type.replace("audio/", "", 1)


@dataclass(frozen=True)
class UploadPolicy:
    """
    Immutable validation policy injected into the validator at startup.
    """
    allowed_method: str
    allowed_content_types: Tuple[str, ...]
    allowed_wake_words: FrozenSet[str]
    max_content_length: int
    required_parameters: Tuple[str, ...]
    numeric_parameter_pattern: Pattern
    max_numeric_parameter_length: int

    @classmethod
    def default(cls) -> "UploadPolicy":
        """Build the policy from the domain constraints."""
        return cls(
            allowed_method=WakeWordUploadConstraints.ALLOWED_METHOD,
            allowed_content_types=WakeWordUploadConstraints.ALLOWED_CONTENT_TYPES,
            allowed_wake_words=frozenset(WakeWordUploadConstraints.ALLOWED_WAKE_WORDS),
            max_content_length=WakeWordUploadConstraints.MAX_CONTENT_LENGTH,
            required_parameters=WakeWordUploadConstraints.REQUIRED_PARAMETERS,
            numeric_parameter_pattern=re.compile(WakeWordUploadConstraints.NUMERIC_PARAMETER_PATTERN),
            max_numeric_parameter_length=WakeWordUploadConstraints.MAX_NUMERIC_PARAMETER_LENGTH
        )
