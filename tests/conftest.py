"""Shared fixtures for promptguard tests."""

import logging

import pytest

from promptguard.scanners import SecurityScanner


@pytest.fixture
def scanner():
    """Scanner with the built-in catalog at the default level."""
    return SecurityScanner()


@pytest.fixture(autouse=True)
def reset_promptguard_logger():
    """Undo configure_scan_logging so handlers do not leak between tests."""
    yield
    logger = logging.getLogger("promptguard")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.setLevel(logging.NOTSET)
    logger.propagate = True
