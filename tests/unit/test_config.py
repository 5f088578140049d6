"""
Unit tests for configuration system.

These tests verify that the configuration system works correctly
and can load settings from environment variables.
"""

import pytest
from delp.config import Config, LogConfig, ReasonerConfig


def test_config_has_defaults() -> None:
    """Test that Config initializes with sensible defaults."""
    config = Config()

    assert config.reasoner.criterion == "genspec"
    assert config.reasoner.max_tree_depth is None
    assert config.reasoner.max_completions is None

    assert config.logging.level == "WARNING"
    assert config.logging.enable_file_logging is False


def test_log_config_defaults() -> None:
    """Test LogConfig default values."""
    log_config = LogConfig()

    assert log_config.rotation == "10 MB"
    assert log_config.retention == "1 week"
    assert log_config.log_dir == "logs"
    assert log_config.enable_console_logging is True


def test_log_config_log_path() -> None:
    """Test LogConfig log_path property."""
    path = LogConfig(log_dir="logs").log_path

    assert path.is_absolute()
    assert path.name == "logs"


def test_config_from_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Test that Config.from_env() reads environment variables correctly."""
    monkeypatch.setenv("DELP_CRITERION", "EMPTY")
    monkeypatch.setenv("DELP_MAX_TREE_DEPTH", "4")
    monkeypatch.setenv("DELP_MAX_COMPLETIONS", "1000")
    monkeypatch.setenv("LOG_LEVEL", "debug")
    monkeypatch.setenv("LOG_DIR", "custom_logs")

    config = Config.from_env()

    assert config.reasoner.criterion == "empty"
    assert config.reasoner.max_tree_depth == 4
    assert config.reasoner.max_completions == 1000
    assert config.logging.level == "DEBUG"
    assert config.logging.log_dir == "custom_logs"


def test_config_from_env_blank_budgets(monkeypatch: pytest.MonkeyPatch) -> None:
    """Blank budget variables mean unbounded."""
    monkeypatch.setenv("DELP_MAX_TREE_DEPTH", "")
    monkeypatch.delenv("DELP_MAX_COMPLETIONS", raising=False)

    config = Config.from_env()

    assert config.reasoner.max_tree_depth is None
    assert config.reasoner.max_completions is None


def test_reasoner_config_validation() -> None:
    """Test that invalid reasoner settings are rejected."""
    ReasonerConfig(max_tree_depth=1, max_completions=1)

    with pytest.raises(Exception):  # Pydantic ValidationError
        ReasonerConfig(max_tree_depth=0)

    with pytest.raises(Exception):  # Pydantic ValidationError
        ReasonerConfig(criterion="priority")


def test_config_is_importable_from_top_level() -> None:
    """Test that config can be imported from delp package."""
    from delp import config

    assert isinstance(config, Config)
