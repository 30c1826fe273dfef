"""
Validation of wake word training uploads.
Runs the upload policy checks in a fixed order and stops at the first failure.
"""
import re
from typing import Callable, List, Optional

from wakeword_gateway.core.models import (
    AcceptedUpload,
    RejectedUpload,
    UploadRequest,
    ValidationOutcome
)
from wakeword_gateway.core.services.upload_constraints import (
    UploadPolicy,
    WakeWordUploadConstraints
)

_DECIMAL_INTEGER = re.compile(r"^[0-9]+$")


class UploadRequestValidator:
    """
    Validates an inbound upload against an UploadPolicy.

    Checks run in order: method, content-type, content-length, required
    parameters, wake word, numeric parameters. Client mistakes are returned
    as RejectedUpload values, never raised.
    """

    def __init__(self, policy: UploadPolicy):
        self.policy = policy
        self._checks: List[Callable[[UploadRequest], Optional[RejectedUpload]]] = [
            self._check_method,
            self._check_content_type,
            self._check_content_length,
            self._check_required_parameters,
            self._check_wake_word,
            self._check_numeric_parameters,
        ]

    def validate(self, request: UploadRequest) -> ValidationOutcome:
        """
        Validate an upload request.

        Args:
            request: Upload request to inspect

        Returns:
            RejectedUpload for the first failing check, otherwise AcceptedUpload
        """
        for check in self._checks:
            rejection = check(request)
            if rejection is not None:
                return rejection

        content_type = request.headers.get("content-type")
        return AcceptedUpload(
            content_type=content_type,
            key_extension=WakeWordUploadConstraints.extension_for(content_type),
            distance=request.query_params.get("distance"),
            speed=request.query_params.get("speed"),
            wake_word=request.query_params.get("wake_word")
        )

    def _check_method(self, request: UploadRequest) -> Optional[RejectedUpload]:
        if request.method != self.policy.allowed_method:
            return RejectedUpload(405, "Invalid method")
        return None

    def _check_content_type(self, request: UploadRequest) -> Optional[RejectedUpload]:
        content_type = request.headers.get("content-type")
        if content_type not in self.policy.allowed_content_types:
            allowed = ",".join(self.policy.allowed_content_types)
            return RejectedUpload(
                415,
                f"Invalid content-type, received: {content_type}, allowed: {allowed}"
            )
        return None

    def _check_content_length(self, request: UploadRequest) -> Optional[RejectedUpload]:
        raw_length = request.headers.get("content-length")
        if raw_length is None or not raw_length.strip():
            return RejectedUpload(411, "Missing content-length")

        raw_length = raw_length.strip()
        if not _DECIMAL_INTEGER.fullmatch(raw_length):
            return RejectedUpload(400, f"Invalid content-length, received: {raw_length}")

        # More digits than the limit is too large, and may not fit int()
        significant_digits = raw_length.lstrip("0")
        if len(significant_digits) > len(str(self.policy.max_content_length)):
            return self._too_large(raw_length)

        content_length = int(significant_digits or "0", 10)
        if content_length > self.policy.max_content_length:
            return self._too_large(content_length)
        return None

    def _too_large(self, received) -> RejectedUpload:
        return RejectedUpload(
            413,
            f"Invalid content-length, received: {received}, "
            f"allowed [<{self.policy.max_content_length}]"
        )

    def _check_required_parameters(self, request: UploadRequest) -> Optional[RejectedUpload]:
        missing = [
            name for name in self.policy.required_parameters
            if not request.query_params.get(name)
        ]
        if missing:
            return RejectedUpload(
                400,
                "Invalid parameters: missing distance, speed or wake_word "
                f"(missing: {', '.join(missing)})"
            )
        return None

    def _check_wake_word(self, request: UploadRequest) -> Optional[RejectedUpload]:
        wake_word = request.query_params.get("wake_word")
        if wake_word not in self.policy.allowed_wake_words:
            return RejectedUpload(400, f"Invalid wake word, received: {wake_word}")
        return None

    def _check_numeric_parameters(self, request: UploadRequest) -> Optional[RejectedUpload]:
        for name in ("distance", "speed"):
            value = request.query_params.get(name)
            if (
                len(value) > self.policy.max_numeric_parameter_length
                or not self.policy.numeric_parameter_pattern.fullmatch(value)
            ):
                return RejectedUpload(400, f"Invalid {name}, received: {value}")
        return None
