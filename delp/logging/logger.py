"""
Logging infrastructure for the DeLP engine.

Provides loguru-based structured logging with:
- Component-specific loggers (syntax, semantics, reasoner, cli)
- Console and rotating file sinks
- Helpers for logging reasoning operations and query answers
"""

import sys
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Optional

from loguru import logger

COMPONENTS = ("syntax", "semantics", "reasoner", "cli")


class DelpLogger:
    """
    Configures the process-wide loguru sinks for DeLP.

    Library modules only bind component loggers via ``get_delp_logger``;
    sinks are installed once by the application (the CLI or a caller of
    ``initialize_logging``).
    """

    def __init__(
        self,
        log_dir: Optional[Path] = None,
        rotation: str = "10 MB",
        retention: str = "1 week",
        level: str = "INFO",
        format_string: Optional[str] = None,
        enable_file_logging: bool = True,
        enable_console_logging: bool = True,
    ):
        """
        Initialize the DeLP logger.

        Args:
            log_dir: Directory for log files
            rotation: When to rotate log files
            retention: How long to keep old logs
            level: Default log level
            format_string: Custom format string
            enable_file_logging: Whether to log to files
            enable_console_logging: Whether to log to stderr
        """
        self.log_dir = log_dir or Path("logs")
        self.rotation = rotation
        self.retention = retention
        self.level = level

        self.format_string = format_string or (
            "<green>{time:YYYY-MM-DD HH:mm:ss.SSS}</green> | "
            "<level>{level: <8}</level> | "
            "<cyan>{extra[component]}</cyan> | "
            "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> | "
            "<level>{message}</level>"
        )

        logger.remove()
        logger.configure(extra={"component": "system"})

        if enable_console_logging:
            logger.add(
                sys.stderr,
                format=self.format_string,
                level=level,
                colorize=True,
            )

        if enable_file_logging:
            self.log_dir.mkdir(parents=True, exist_ok=True)
            self._add_file_handlers()

        self.logger = logger.bind(component="system")

    def _add_file_handlers(self) -> None:
        """Add the main log file and a reasoning trace file."""
        logger.add(
            self.log_dir / "delp.log",
            format=self.format_string,
            level=self.level,
            rotation=self.rotation,
            retention=self.retention,
            compression="zip",
        )

        # Search and tree-expansion details, always at DEBUG
        logger.add(
            self.log_dir / "reasoning.log",
            format=self.format_string,
            level="DEBUG",
            rotation=self.rotation,
            retention=self.retention,
            compression="zip",
            filter=lambda record: record["extra"].get("component")
            in ("semantics", "reasoner"),
        )

        logger.add(
            self.log_dir / "errors.log",
            format=self.format_string,
            level="ERROR",
            rotation=self.rotation,
            retention=self.retention,
            compression="zip",
        )

    def get_logger(self, component: str) -> Any:
        """Get a logger bound to a specific component."""
        return logger.bind(component=component)


def get_delp_logger(component: str = "system") -> Any:
    """
    Get a component-specific logger.

    Example:
        >>> log = get_delp_logger("semantics")
        >>> log.debug("Expanding node", depth=2)
    """
    return logger.bind(component=component)


def log_reasoning_operation(logger_instance: Any, operation: str, **kwargs: Any) -> None:
    """
    Log a reasoning operation (completion search, comparison, expansion).

    Args:
        logger_instance: Logger to use
        operation: Operation name
        **kwargs: Additional context
    """
    logger_instance.debug(
        f"Reasoning operation: {operation}",
        operation=operation,
        timestamp=datetime.now(timezone.utc).isoformat(),
        **kwargs,
    )


def log_query_answer(logger_instance: Any, query: str, answer: str, **kwargs: Any) -> None:
    """Log the answer to a warrant query."""
    logger_instance.info(
        f"Query {query}: {answer}",
        query=query,
        answer=answer,
        timestamp=datetime.now(timezone.utc).isoformat(),
        **kwargs,
    )


_delp_logger: Optional[DelpLogger] = None


def initialize_logging(
    log_dir: Optional[Path] = None, level: str = "INFO", **kwargs: Any
) -> DelpLogger:
    """
    Initialize the DeLP logging system.

    This should be called once at application startup.

    Args:
        log_dir: Directory for log files
        level: Default log level
        **kwargs: Additional configuration for DelpLogger

    Returns:
        Configured DelpLogger instance
    """
    global _delp_logger
    _delp_logger = DelpLogger(log_dir=log_dir, level=level, **kwargs)
    return _delp_logger


def get_logger_instance() -> Optional[DelpLogger]:
    """Get the global logger instance."""
    return _delp_logger
