from __future__ import annotations

import logging

import pytest


@pytest.fixture(autouse=True)
def _reset_package_logger():
    """Drop handlers bound to a previous test's captured stdout."""
    yield
    logger = logging.getLogger("go_runconfig")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    logger.setLevel(logging.NOTSET)
