import logging

import pytest

from html_tailwind.config import ConfigManager
from html_tailwind.logging_config import setup_logging


def test_packaged_defaults_are_loaded():
    config = ConfigManager()
    assert config.get_loader_config()["extensions"] == ["html", "xml"]
    assert config.get("loader", "hot_reload") is True
    assert config.get_logging_config()["version"] == 1


def test_config_manager_is_a_singleton():
    assert ConfigManager() is ConfigManager()


def test_override_directory_comes_from_environment_only(tmp_path):
    with pytest.raises(TypeError):
        ConfigManager(tmp_path)


def test_user_overrides_are_merged(tmp_path, monkeypatch):
    user_dir = tmp_path / "overrides"
    user_dir.mkdir()
    (user_dir / "loader.yml").write_text("hot_reload: false\n", encoding="utf-8")
    monkeypatch.setenv("HTML_TAILWIND_CONFIG_DIR", str(user_dir))
    ConfigManager.reset()

    loader_config = ConfigManager().get_loader_config()
    assert loader_config["hot_reload"] is False
    assert loader_config["extensions"] == ["html", "xml"]


def test_invalid_user_override_is_ignored(tmp_path, monkeypatch):
    user_dir = tmp_path / "overrides"
    user_dir.mkdir()
    (user_dir / "loader.yml").write_text("extensions: [unclosed\n", encoding="utf-8")
    monkeypatch.setenv("HTML_TAILWIND_CONFIG_DIR", str(user_dir))
    ConfigManager.reset()

    assert ConfigManager().get_loader_config()["extensions"] == ["html", "xml"]


def test_setup_logging_writes_log_file(tmp_path, monkeypatch):
    monkeypatch.setenv("HTML_TAILWIND_LOG_DIR", str(tmp_path / "logs"))
    monkeypatch.setenv("HTML_TAILWIND_DEBUG_MODULES", "html_tailwind.core.grammar")

    setup_logging()
    logging.getLogger("html_tailwind.test").info("hello")

    assert (tmp_path / "logs" / "html_tailwind.log").exists()
    assert logging.getLogger("html_tailwind.core.grammar").level == logging.DEBUG
    # cached section is left untouched by dictConfig
    assert ConfigManager().get_logging_config()["handlers"]["file"]["filename"] == "html_tailwind.log"
