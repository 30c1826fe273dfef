"""
Logging decorators for Wake Word Gateway infrastructure operations.
Provides structured, context-rich, and secure logging around adapter calls.
"""
import dataclasses
import logging
import functools
import time
import uuid
import inspect
from typing import Dict, Any, Optional, Callable, Set
from datetime import datetime, timezone

from wakeword_gateway.infrastructure.config.infrastructure_settings import infra_settings
from .log_config import get_logger


# Default sensitive fields blacklist
DEFAULT_SENSITIVE_FIELDS: Set[str] = {
    'password', 'secret', 'token', 'api_key', 'private_key', 'auth_token',
    'body', 'audio_data', 'client_ip'
}


def _sanitize_sensitive_data(data: Any, blacklist: Set[str]) -> Any:
    """
    Recursively sanitize sensitive data from logs.
    Replaces values of keys matching sensitive fields with [REDACTED].

    Args:
        data: Data to sanitize (dict, list, dataclass, etc.)
        blacklist: Set of sensitive field names

    Returns:
        Sanitized data with sensitive fields masked
    """
    if dataclasses.is_dataclass(data) and not isinstance(data, type):
        data = dataclasses.asdict(data)
    if isinstance(data, dict):
        sanitized = {}
        for key, value in data.items():
            if any(sensitive in str(key).lower() for sensitive in blacklist):
                sanitized[key] = "[REDACTED]"
            else:
                sanitized[key] = _sanitize_sensitive_data(value, blacklist)
        return sanitized
    elif isinstance(data, (list, tuple)):
        return [_sanitize_sensitive_data(item, blacklist) for item in data]
    return data


def _build_operation_context(
    operation: str,
    method_name: str,
    component_name: str
) -> Dict[str, Any]:
    """
    Build base context for operation logging.

    Args:
        operation: Operation name
        method_name: Name of the method/function
        component_name: Name of the component/class

    Returns:
        dict: Context for logging
    """
    return {
        "component": component_name,
        "operation": operation,
        "method": method_name,
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "environment": infra_settings.environment,
        "service": infra_settings.service_name,
        "operation_id": f"op_{uuid.uuid4().hex[:8]}"
    }


def log_infrastructure_operation(
    operation: str,
    level: str = "INFO",
    include_args: bool = False,
    include_result: bool = True,
    include_performance: bool = True,
    sensitive_fields: Optional[Set[str]] = None
) -> Callable:
    """
    Decorator for async infrastructure operations.
    Logs start, completion (with duration and sanitized result) and failures.

    Args:
        operation: Operation name
        level: Logging level
        include_args: Whether to log function arguments
        include_result: Whether to log operation result
        include_performance: Whether to log timing metrics
        sensitive_fields: Additional sensitive fields to blacklist

    Returns:
        Decorated coroutine function with structured logging
    """
    def decorator(func: Callable) -> Callable:
        @functools.wraps(func)
        async def wrapper(self, *args, **kwargs):
            component_name = self.__class__.__name__
            logger = get_logger(component_name)

            blacklist = DEFAULT_SENSITIVE_FIELDS.copy()
            if sensitive_fields:
                blacklist.update(sensitive_fields)

            context = _build_operation_context(operation, func.__name__, component_name)

            if include_args:
                sig = inspect.signature(func)
                bound_args = sig.bind(self, *args, **kwargs)
                bound_args.apply_defaults()

                args_dict = {k: v for k, v in bound_args.arguments.items() if k != 'self'}
                context["arguments"] = _sanitize_sensitive_data(args_dict, blacklist)

            start_time = time.perf_counter()
            log_level = getattr(logging, level.upper(), logging.INFO)

            logger.log(log_level, f"Starting {operation}", extra={"extra_fields": {**context, "status": "started"}})

            try:
                result = await func(self, *args, **kwargs)
            except Exception as e:
                duration_ms = (time.perf_counter() - start_time) * 1000

                error_context = context.copy()
                error_context.update({
                    "status": "failed",
                    "error_type": type(e).__name__,
                    "error_message": str(e),
                    "duration_ms": round(duration_ms, 2)
                })

                error_level = logging.CRITICAL if level.upper() == "CRITICAL" else logging.ERROR
                logger.log(error_level, f"Failed {operation}", extra={"extra_fields": error_context})
                raise

            success_context = context.copy()
            success_context["status"] = "completed"

            if include_performance:
                duration_ms = (time.perf_counter() - start_time) * 1000
                success_context["duration_ms"] = round(duration_ms, 2)
                if duration_ms > 2000:
                    success_context["slow_operation"] = True

            if include_result and result is not None:
                success_context["result"] = _sanitize_sensitive_data(result, blacklist)
                success_context["result_type"] = type(result).__name__

            logger.log(log_level, f"Completed {operation}", extra={"extra_fields": success_context})
            return result

        return wrapper
    return decorator
