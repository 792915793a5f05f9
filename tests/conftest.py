"""Shared fixtures for staticfile tests."""

import pytest

from staticfile import registry as registry_module
from staticfile.registry import Registry


@pytest.fixture
def default_registry(monkeypatch: pytest.MonkeyPatch) -> Registry:
    """Swap in an empty process default registry for one test."""
    fresh = Registry()
    monkeypatch.setattr(registry_module, "_default", fresh)
    return fresh
