"""Root pytest configuration for all tests.

This conftest applies to all test types (unit, integration).
"""

import logging

import pytest


@pytest.fixture(autouse=True)
def reset_app_loggers():
    """Drop handlers the CLI attaches to the 'src' logger.

    CliRunner swaps stderr per invocation; handlers left bound to a closed
    stream would otherwise print logging errors in later tests.
    """
    yield
    for name in ("src",):
        app_logger = logging.getLogger(name)
        for handler in list(app_logger.handlers):
            app_logger.removeHandler(handler)
            handler.close()
        app_logger.setLevel(logging.NOTSET)
