from __future__ import annotations

import logging

import pytest

from directive_linter.config import LintConfig
from directive_linter.logging import LOGGER_NAME


@pytest.fixture
def recommended_config() -> LintConfig:
    return LintConfig()


@pytest.fixture
def all_rules_config() -> LintConfig:
    return LintConfig.all_rules()


@pytest.fixture
def restore_logging():
    logger = logging.getLogger(LOGGER_NAME)
    level = logger.level
    handlers = list(logger.handlers)
    yield logger
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        if handler not in handlers:
            handler.close()
    for handler in handlers:
        logger.addHandler(handler)
    logger.setLevel(level)
