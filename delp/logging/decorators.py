"""
Decorators for automatic logging of reasoning operations.

These decorators enable traceability without cluttering the search code.
"""

import functools
import time
from datetime import datetime, timezone
from typing import Any, Callable

from .logger import get_delp_logger, log_reasoning_operation


def track_reasoning_operation(operation_type: str, component: str = "semantics") -> Callable:
    """
    Decorator to track reasoning operations.

    Logs start, completion and failure of the wrapped call at DEBUG level.

    Args:
        operation_type: Type of operation (e.g., "completion_search", "query")
        component: Logger component to bind

    Example:
        >>> @track_reasoning_operation("compare")
        ... def compare(self, argument1, argument2, program):
        ...     ...
    """

    def decorator(func: Callable) -> Callable:
        @functools.wraps(func)
        def wrapper(*args: Any, **kwargs: Any) -> Any:
            log = get_delp_logger(component)

            operation_id = datetime.now(timezone.utc).timestamp()
            log_reasoning_operation(
                log,
                operation=operation_type,
                operation_id=operation_id,
                function=func.__name__,
            )

            try:
                result = func(*args, **kwargs)

                log_reasoning_operation(
                    log,
                    operation=f"{operation_type}_complete",
                    operation_id=operation_id,
                    function=func.__name__,
                    result=str(result)[:200],
                    success=True,
                )

                return result

            except Exception as e:
                log_reasoning_operation(
                    log,
                    operation=f"{operation_type}_error",
                    operation_id=operation_id,
                    function=func.__name__,
                    error=str(e),
                    error_type=type(e).__name__,
                    success=False,
                )
                raise

        return wrapper

    return decorator


def performance_monitor(threshold_ms: float = 1000.0, component: str = "system") -> Callable:
    """
    Decorator to monitor function performance.

    Logs a warning if execution exceeds the threshold.

    Args:
        threshold_ms: Warning threshold in milliseconds
        component: Logger component to bind

    Example:
        >>> @performance_monitor(threshold_ms=500)
        ... def query(self, program, literal):
        ...     ...
    """

    def decorator(func: Callable) -> Callable:
        @functools.wraps(func)
        def wrapper(*args: Any, **kwargs: Any) -> Any:
            log = get_delp_logger(component)
            start_time = time.perf_counter()

            try:
                result = func(*args, **kwargs)
            except Exception:
                elapsed_ms = (time.perf_counter() - start_time) * 1000
                log.debug(
                    f"Function failed: {func.__name__}",
                    function=func.__name__,
                    elapsed_ms=elapsed_ms,
                )
                raise

            elapsed_ms = (time.perf_counter() - start_time) * 1000
            if elapsed_ms > threshold_ms:
                log.warning(
                    f"Performance threshold exceeded: {func.__name__}",
                    function=func.__name__,
                    elapsed_ms=elapsed_ms,
                    threshold_ms=threshold_ms,
                )
            else:
                log.debug(
                    f"Function executed: {func.__name__}",
                    function=func.__name__,
                    elapsed_ms=elapsed_ms,
                )
            return result

        return wrapper

    return decorator
