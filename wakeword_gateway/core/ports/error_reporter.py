"""
Error reporting port for Wake Word Gateway.
"""
from abc import ABC, abstractmethod
from typing import Any, Dict, Optional


class ErrorReporterPort(ABC):
    """
    Port for reporting unexpected failures to an observability backend.
    """

    @abstractmethod
    def capture_exception(
        self,
        error: BaseException,
        context: Optional[Dict[str, Any]] = None
    ) -> None:
        """
        Report an exception. Implementations must not raise.

        Args:
            error: Exception to report
            context: Request details to attach to the report
        """
        pass
