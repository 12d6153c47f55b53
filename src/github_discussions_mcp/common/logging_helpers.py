"""Common logging utilities."""

import inspect
import time
from functools import wraps

import structlog

logger = structlog.get_logger(__name__)


def _log_success(name: str, start_time: float, result, log_result: bool) -> None:
    result_log_data = {
        "operation": name,
        "duration_seconds": round(time.time() - start_time, 3),
        "status": "success"
    }
    if log_result:
        result_log_data["result"] = result
    logger.info(f"Completed {name}", **result_log_data)


def _log_failure(name: str, start_time: float, error: Exception) -> None:
    logger.error(
        f"Failed {name}",
        operation=name,
        duration_seconds=round(time.time() - start_time, 3),
        status="error",
        error=str(error),
        error_type=type(error).__name__
    )


def log_function_call(operation_name: str | None = None, log_args: bool = False, log_result: bool = False):
    """Decorator to log function calls with timing information.

    Args:
        operation_name: Custom name for the operation (defaults to function name)
        log_args: Whether to log function arguments
        log_result: Whether to log function result
    """
    def decorator(func):
        name = operation_name or func.__name__

        def _log_start(args, kwargs) -> float:
            log_data = {"operation": name}
            if log_args:
                log_data["args"] = args
                log_data["kwargs"] = kwargs
            logger.info(f"Starting {name}", **log_data)
            return time.time()

        @wraps(func)
        async def async_wrapper(*args, **kwargs):
            start_time = _log_start(args, kwargs)
            try:
                result = await func(*args, **kwargs)
            except Exception as e:
                _log_failure(name, start_time, e)
                raise
            _log_success(name, start_time, result, log_result)
            return result

        @wraps(func)
        def sync_wrapper(*args, **kwargs):
            start_time = _log_start(args, kwargs)
            try:
                result = func(*args, **kwargs)
            except Exception as e:
                _log_failure(name, start_time, e)
                raise
            _log_success(name, start_time, result, log_result)
            return result

        # Return appropriate wrapper based on whether function is async
        if inspect.iscoroutinefunction(func):
            return async_wrapper
        return sync_wrapper

    return decorator
