"""
Logging infrastructure for the DeLP engine.

Provides component loggers, sink configuration and decorators for
tracking reasoning operations.
"""

from .logger import (
    DelpLogger,
    get_delp_logger,
    initialize_logging,
    get_logger_instance,
    log_reasoning_operation,
    log_query_answer,
)

from .decorators import (
    track_reasoning_operation,
    performance_monitor,
)

__all__ = [
    # Logger
    "DelpLogger",
    "get_delp_logger",
    "initialize_logging",
    "get_logger_instance",
    "log_reasoning_operation",
    "log_query_answer",
    # Decorators
    "track_reasoning_operation",
    "performance_monitor",
]
