"""
Error reporter that records failures through the service logger.
"""
import logging
from typing import Any, Dict, Optional

from wakeword_gateway.core.ports.error_reporter import ErrorReporterPort
from wakeword_gateway.infrastructure.logging.log_config import get_logger


class LoggingErrorReporter(ErrorReporterPort):
    """
    ErrorReporterPort backed by structured logging.
    """

    def __init__(self, logger: Optional[logging.Logger] = None):
        self.logger = logger or get_logger("ErrorReporter")

    def capture_exception(
        self,
        error: BaseException,
        context: Optional[Dict[str, Any]] = None
    ) -> None:
        extra_fields = {
            "error_type": type(error).__name__,
            "error_message": str(error),
        }
        if context:
            extra_fields.update({k: v for k, v in context.items() if v is not None})

        self.logger.error(
            "Unexpected failure",
            exc_info=(type(error), error, error.__traceback__),
            extra={"extra_fields": extra_fields}
        )
