"""Shared test fixtures."""

import logging

import pytest

from maestro_testdata.models import AppModeDescriptor, RichModeCatalog
from maestro_testdata.platforms import android, ios


@pytest.fixture
def make_env():
    """Factory for get_env accessors backed by a plain dict."""
    def _make(values: dict):
        return values.get
    return _make


@pytest.fixture
def android_defaults():
    return android.DEFAULTS


@pytest.fixture
def ios_defaults():
    return ios.DEFAULTS


@pytest.fixture
def example_defaults(ios_defaults):
    """Small rich-catalog defaults with a custom app id."""
    from dataclasses import replace

    return replace(
        ios_defaults,
        app_id="com.x.y",
        modes=RichModeCatalog({
            "lite": AppModeDescriptor(name="Lite", selector="Lite.*", timeout=10000, features=("a",)),
            "full": AppModeDescriptor(name="Full", selector="Full.*", timeout=15000, features=("a", "b")),
        }),
    )


@pytest.fixture
def clean_env(monkeypatch):
    """Remove the variables the package reads from the real environment."""
    monkeypatch.delenv("APP_MODE", raising=False)
    monkeypatch.delenv("MAESTRO_TESTDATA_PLATFORM", raising=False)
    return monkeypatch


@pytest.fixture(autouse=True)
def reset_package_logger():
    """Drop handlers installed by configure_logging() during a test."""
    logger = logging.getLogger("maestro_testdata")
    level = logger.level
    yield
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    logger.setLevel(level)
