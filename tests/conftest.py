import logging

import pytest

pytest_plugins = ["fixtures.pnpm"]


@pytest.fixture(autouse=True)
def reset_logging():
    """The CLI installs a handler on the package logger for every invocation."""
    yield
    logger = logging.getLogger("pnpmkit")
    for handler in logger.handlers[:]:
        logger.removeHandler(handler)
    logger.setLevel(logging.NOTSET)
