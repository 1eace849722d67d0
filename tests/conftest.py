from __future__ import annotations

import os

import pytest

from appconfig import ApplicationRegistry, default_registry


@pytest.fixture
def registry() -> ApplicationRegistry:
    return ApplicationRegistry()


@pytest.fixture(autouse=True)
def clean_default_registry():
    default_registry.clear()
    yield
    default_registry.clear()


@pytest.fixture
def clean_env(monkeypatch):
    """Remove the APPCFG_TEST_* variables the tests rely on."""
    for key in list(os.environ.keys()):
        if key.startswith("APPCFG_TEST_"):
            monkeypatch.delenv(key, raising=False)
    return monkeypatch
