import logging

from minish.config import ShellConfig
from minish.log import configure_logging


def test_config_defaults():
    config = ShellConfig.from_env({})
    assert config.prompt == "$ "
    assert config.log_level == "WARNING"


def test_config_from_env_and_overrides():
    config = ShellConfig.from_env({"MINISH_PROMPT": "% ", "MINISH_LOG_LEVEL": "debug"})
    assert config == ShellConfig(prompt="% ", log_level="DEBUG")
    assert config.with_overrides(log_level="info").log_level == "INFO"
    assert config.with_overrides(prompt="# ").prompt == "# "


def test_configure_logging_is_idempotent():
    logger = configure_logging("debug")
    configure_logging("error")
    assert logger.level == logging.ERROR
    assert sum(getattr(h, "_minish", False) for h in logger.handlers) == 1
    configure_logging("WARNING")
