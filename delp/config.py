"""
Configuration management for the DeLP engine.

This module provides centralized configuration for:
- The warrant reasoner (comparison criterion, search budgets)
- Logging settings
"""

import os
from pathlib import Path
from typing import Literal, Optional, cast

from dotenv import load_dotenv
from pydantic import BaseModel, Field

# Load environment variables from .env file
load_dotenv()

CriterionName = Literal["empty", "genspec"]
LogLevel = Literal["TRACE", "DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


def _optional_int(name: str) -> Optional[int]:
    value = os.getenv(name, "").strip()
    return int(value) if value else None


class ReasonerConfig(BaseModel):
    """Configuration for dialectical tree construction."""

    criterion: CriterionName = Field(
        default="genspec",
        description="Comparison criterion: 'empty' or 'genspec' (generalized specificity)",
    )
    max_tree_depth: Optional[int] = Field(
        default=None,
        gt=0,
        description="Maximum depth of dialectical trees (root is depth 0); None = unbounded",
    )
    max_completions: Optional[int] = Field(
        default=None,
        gt=0,
        description="Maximum partial completions explored per argument; None = unbounded",
    )


class LogConfig(BaseModel):
    """Configuration for logging system."""

    level: LogLevel = Field(default="WARNING", description="Logging level")
    format: str = Field(
        default="<green>{time:YYYY-MM-DD HH:mm:ss}</green> | "
        "<level>{level: <8}</level> | "
        "<cyan>{extra[component]}</cyan> | "
        "<level>{message}</level>",
        description="Log message format",
    )
    rotation: str = Field(default="10 MB", description="Log file rotation size")
    retention: str = Field(default="1 week", description="Log file retention period")
    log_dir: str = Field(default="logs", description="Directory for log files")
    enable_file_logging: bool = Field(
        default=False, description="Whether to enable file logging"
    )
    enable_console_logging: bool = Field(
        default=True, description="Whether to enable console logging"
    )

    @property
    def log_path(self) -> Path:
        """Get absolute path to the log directory."""
        return Path(self.log_dir).resolve()


class Config(BaseModel):
    """Main configuration object for the DeLP engine."""

    reasoner: ReasonerConfig = Field(default_factory=ReasonerConfig)
    logging: LogConfig = Field(default_factory=LogConfig)

    @classmethod
    def from_env(cls) -> "Config":
        """Create configuration from environment variables."""
        return cls(
            reasoner=ReasonerConfig(
                criterion=cast(CriterionName, os.getenv("DELP_CRITERION", "genspec").lower()),
                max_tree_depth=_optional_int("DELP_MAX_TREE_DEPTH"),
                max_completions=_optional_int("DELP_MAX_COMPLETIONS"),
            ),
            logging=LogConfig(
                level=cast(LogLevel, os.getenv("LOG_LEVEL", "WARNING").upper()),
                log_dir=os.getenv("LOG_DIR", "logs"),
            ),
        )


# Global configuration instance
config = Config.from_env()
