"""Tests for ConfigManager and the global view defaults."""

import json
import os

import pytest

from viewkit.config import ConfigManager, ViewkitConfig, get_config_manager


def test_defaults_without_file(config_path):
    config = ConfigManager(config_path).load()

    assert config.root == "."
    assert config.layout is None


def test_loads_values_from_file(config_path):
    with open(config_path, "w") as f:
        json.dump({"root": "web/templates", "layout": "application"}, f)

    config = ConfigManager(config_path).load()

    assert config.root == "web/templates"
    assert config.layout == "application"


def test_environment_overrides_file(config_path, monkeypatch):
    with open(config_path, "w") as f:
        json.dump({"root": "web/templates", "layout": "application"}, f)
    monkeypatch.setenv("VIEWKIT_ROOT", "env/templates")
    monkeypatch.setenv("VIEWKIT_LAYOUT", "env_layout")

    config = ConfigManager(config_path).load()

    assert config.root == "env/templates"
    assert config.layout == "env_layout"


@pytest.mark.parametrize(
    "contents",
    [{"root": 5}, {"layout": 1}, {"root": "templates", "namespace": ["app"]}],
)
def test_invalid_values_fall_back_to_defaults(config_path, caplog, contents):
    with open(config_path, "w") as f:
        json.dump(contents, f)

    config = ConfigManager(config_path).load()

    assert config == ViewkitConfig()
    assert "Invalid view configuration" in caplog.text


def test_corrupted_file_falls_back_to_defaults(config_path, caplog):
    with open(config_path, "w") as f:
        f.write("{not json")

    config = ConfigManager(config_path).load()

    assert config == ViewkitConfig()
    assert "corrupted" in caplog.text


def test_non_object_file_falls_back_to_defaults(config_path, caplog):
    with open(config_path, "w") as f:
        json.dump(["app/templates"], f)

    config = ConfigManager(config_path).load()

    assert config.root == "."
    assert "JSON object" in caplog.text


def test_singleton_per_path(config_path, tmp_path):
    assert ConfigManager(config_path) is get_config_manager(config_path)
    assert ConfigManager(config_path) is not ConfigManager(str(tmp_path / "other.json"))


def test_env_config_path_is_used():
    manager = ConfigManager()

    assert manager.config_path == os.environ["VIEWKIT_CONFIG_PATH"]
    assert manager.get_config().root == "app/templates"


def test_update_persists(config_path):
    manager = ConfigManager(config_path)

    assert manager.update(layout="application")

    with open(config_path) as f:
        saved = json.load(f)
    assert saved["layout"] == "application"
    assert saved["root"] == "."


def test_extra_keys_are_kept(config_path):
    with open(config_path, "w") as f:
        json.dump({"root": "templates", "engine": "jinja"}, f)

    config = ConfigManager(config_path).load()

    assert config.model_dump()["engine"] == "jinja"
