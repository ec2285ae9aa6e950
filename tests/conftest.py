import os

import pytest

from add_binary.core.config import Config, reset_config


@pytest.fixture(autouse=True)
def clean_config(monkeypatch):
    """Isolate every test from ADD_BINARY_* variables and the cached config."""
    for var in list(os.environ):
        if var.startswith("ADD_BINARY_"):
            monkeypatch.delenv(var, raising=False)
    monkeypatch.chdir(os.path.dirname(__file__))
    reset_config()
    yield
    reset_config()


@pytest.fixture
def config():
    """Default 32-bit configuration"""
    return Config()


@pytest.fixture
def strict_config():
    """Configuration rejecting overflow and negative sums"""
    return Config(overflow_policy="error", negative_policy="error")
