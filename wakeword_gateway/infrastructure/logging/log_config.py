"""
Unified logging configuration for Wake Word Gateway.
Provides singleton pattern to ensure single configuration.
"""
import logging
import sys
import json
from typing import Optional
from datetime import datetime, timezone
from wakeword_gateway.infrastructure.config.infrastructure_settings import infra_settings


LOGGER_NAMESPACE = "wakeword-gateway"

LEVEL_COLORS = {
    logging.DEBUG: "\033[36m",
    logging.INFO: "\033[32m",
    logging.WARNING: "\033[33m",
    logging.ERROR: "\033[31m",
    logging.CRITICAL: "\033[35m",
}
RESET_COLOR = "\033[0m"


class JSONFormatter(logging.Formatter):
    """One JSON object per record, with extra_fields merged at the top level."""

    def format(self, record: logging.LogRecord) -> str:
        created = datetime.fromtimestamp(record.created, timezone.utc)
        entry = {
            "timestamp": created.isoformat(timespec="milliseconds"),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "source": f"{record.module}.{record.funcName}:{record.lineno}",
            "service": infra_settings.service_name,
            "environment": infra_settings.environment,
        }
        entry.update(getattr(record, "extra_fields", {}))

        if record.exc_info:
            entry["exception"] = self.formatException(record.exc_info)

        return json.dumps(entry, ensure_ascii=False, default=str)


class DevelopmentFormatter(logging.Formatter):
    """Single coloured line per record, extra_fields appended as key=value."""

    def __init__(self):
        super().__init__("%(asctime)s %(levelname)-8s %(name)s: %(message)s")

    def formatMessage(self, record: logging.LogRecord) -> str:
        # Extras are appended after interpolation, so '%' in values is literal
        line = super().formatMessage(record)
        extra_fields = getattr(record, "extra_fields", None)
        if extra_fields:
            line += " | " + " ".join(f"{key}={value}" for key, value in extra_fields.items())

        color = LEVEL_COLORS.get(record.levelno)
        return f"{color}{line}{RESET_COLOR}" if color else line


class LoggingManager:
    """Singleton manager for logging configuration."""

    _instance: Optional['LoggingManager'] = None
    _configured: bool = False

    def __new__(cls) -> 'LoggingManager':
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def _configure_logging(self) -> None:
        """Unified logging configuration."""
        if self._configured:
            return

        log_level = getattr(logging, infra_settings.log_level.upper(), logging.INFO)

        if infra_settings.is_production_env:
            formatter = JSONFormatter()
        else:
            formatter = DevelopmentFormatter()

        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setLevel(log_level)
        console_handler.setFormatter(formatter)

        app_logger = logging.getLogger(LOGGER_NAMESPACE)
        app_logger.setLevel(log_level)
        app_logger.addHandler(console_handler)
        app_logger.propagate = False

        self._configure_third_party_loggers()

        self._configured = True

        app_logger.info("Logging configuration initialized", extra={
            'extra_fields': {
                "environment": infra_settings.environment,
                "log_level": logging.getLevelName(log_level),
                "formatter": "json" if infra_settings.is_production_env else "development"
            }
        })

    def _configure_third_party_loggers(self) -> None:
        """
        Configure third-party library loggers to reduce noise.
        """
        third_party_loggers = ["boto3", "botocore", "s3transfer", "urllib3"]

        for logger_name in third_party_loggers:
            logger = logging.getLogger(logger_name)
            if logger.level < logging.WARNING:
                logger.setLevel(logging.WARNING)

    def get_logger(self, name: str) -> logging.Logger:
        """Get a configured logger instance under the service namespace."""
        self._configure_logging()

        if not name.startswith(LOGGER_NAMESPACE):
            name = f"{LOGGER_NAMESPACE}.{name}"

        return logging.getLogger(name)


# Singleton instance
logging_manager = LoggingManager()


def get_logger(name: str) -> logging.Logger:
    """
    Get a configured logger instance.

    Args:
        name: Logger name (typically __name__ or component name)

    Returns:
        Configured logger instance under wakeword-gateway namespace

    Example:
        logger = get_logger("S3BlobStore")
        # Results in logger named: "wakeword-gateway.S3BlobStore"
    """
    return logging_manager.get_logger(name)
