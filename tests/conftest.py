"""Pytest fixtures for viewkit tests."""

import os
import tempfile

import pytest

# CRITICAL: Set test config path BEFORE any imports that use ConfigManager
# This prevents tests from reading the user's real ~/.viewkit.json
_TEST_CONFIG_DIR = tempfile.mkdtemp(prefix="viewkit_test_config_")
_TEST_CONFIG_PATH = os.path.join(_TEST_CONFIG_DIR, "test_config.json")
with open(_TEST_CONFIG_PATH, "w") as f:
    f.write('{"root": "app/templates"}')
os.environ["VIEWKIT_CONFIG_PATH"] = _TEST_CONFIG_PATH

from viewkit.config import ConfigManager  # noqa: E402
from viewkit.registry import get_registry  # noqa: E402


def _clear_config_singletons():
    ConfigManager._instance = None
    ConfigManager._instances_by_path.clear()


@pytest.fixture(autouse=True, scope="function")
def registry(monkeypatch, request):
    """
    Give each test an empty process-wide view registry.

    Config singletons are cleared first so the registry defaults come from
    the session-level test config file, not from a previous test. View names
    are taken relative to the test module, as an application would set
    namespace to its views package.
    """
    monkeypatch.delenv("VIEWKIT_ROOT", raising=False)
    monkeypatch.delenv("VIEWKIT_LAYOUT", raising=False)
    monkeypatch.delenv("VIEWKIT_NAMESPACE", raising=False)
    _clear_config_singletons()

    registry = get_registry()
    registry.reset()
    registry.namespace = request.module.__name__

    yield registry

    _clear_config_singletons()
    registry.reset()


@pytest.fixture
def config_path():
    """Path to a fresh, not yet existing config file."""
    directory = tempfile.mkdtemp(prefix="viewkit_config_")
    return os.path.join(directory, "viewkit.json")
