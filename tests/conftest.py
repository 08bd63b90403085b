"""Pytest fixtures shared across the style engine tests."""

from __future__ import annotations

import logging

import pytest

from tracestyler import flags
from tracestyler.core.scheme import ColorScheme
from tracestyler.logging_config import PACKAGE_LOGGER


@pytest.fixture
def in_out_scheme() -> ColorScheme:
    """The two-column traffic scheme on the default palette."""

    return ColorScheme(["in", "out"])


@pytest.fixture(autouse=True)
def _reset_flags(monkeypatch):
    monkeypatch.delenv(flags.ENV_VAR, raising=False)
    flags.reload()
    yield
    flags.reload()


@pytest.fixture
def clean_logging():
    """Remove the handlers ``setup_logging`` installs once the test is done."""

    yield
    package_logger = logging.getLogger(PACKAGE_LOGGER)
    for handler in list(package_logger.handlers):
        package_logger.removeHandler(handler)
        handler.close()
    root = logging.getLogger()
    for handler in list(root.handlers):
        if getattr(handler, "_tracestyler_handler", False):
            root.removeHandler(handler)
            handler.close()
    package_logger.setLevel(logging.NOTSET)
    logging.getLogger("tracestyler.core.palettes").setLevel(logging.NOTSET)
