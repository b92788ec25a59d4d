from __future__ import annotations

import pytest
import yaml

from biodata.shared.core.configuration import (
    DEFAULT_CONFIG_DIR,
    ConfigManager,
    SystemConfig,
    ValidationLevel,
)


def _write(path, data):
    path.write_text(yaml.safe_dump(data), encoding="utf-8")


def test_packaged_defaults_match_model_defaults(clean_env):
    assert (DEFAULT_CONFIG_DIR / "defaults.yaml").exists()

    config = ConfigManager().get_config()

    assert config == SystemConfig()


def test_empty_directory_uses_pydantic_defaults(tmp_path, clean_env):
    config = ConfigManager(tmp_path).get_config()

    assert config.form.clear_errors_on_success is False
    assert config.ui.flet_port == 8550


def test_precedence_env_over_project_over_user(tmp_path, clean_env):
    _write(tmp_path / "defaults.yaml", {"ui": {"flet_port": 9000}})
    _write(tmp_path / "user.yaml", {"ui": {"flet_port": 9001, "theme_mode": "dark"}})
    _write(tmp_path / "project.yaml", {"ui": {"flet_port": 9002}})
    clean_env.setenv("FLET_PORT", "9003")

    config = ConfigManager(tmp_path).get_config()

    assert config.ui.flet_port == 9003
    assert config.ui.theme_mode == "dark"


def test_env_values_are_coerced(tmp_path, clean_env):
    clean_env.setenv("FLET_WEB_MODE", "yes")
    clean_env.setenv("BIODATA_CLEAR_ERRORS_ON_SUCCESS", "on")
    clean_env.setenv("LOG_LEVEL", "info")

    config = ConfigManager(tmp_path).get_config()

    assert config.ui.flet_web_mode is True
    assert config.form.clear_errors_on_success is True
    assert config.logging.level == "info"


def test_non_numeric_port_is_ignored(tmp_path, clean_env):
    clean_env.setenv("FLET_PORT", "abc")
    assert ConfigManager(tmp_path).get_config().ui.flet_port == 8550


def test_strict_validation_raises(tmp_path, clean_env):
    _write(tmp_path / "project.yaml", {"ui": {"flet_port": 80}})

    with pytest.raises(ValueError):
        ConfigManager(tmp_path).get_config(ValidationLevel.STRICT)


def test_lenient_validation_falls_back(tmp_path, clean_env):
    _write(tmp_path / "project.yaml", {"form": {"unknown_flag": True}})

    config = ConfigManager(tmp_path).get_config(ValidationLevel.LENIENT)

    assert config == SystemConfig()


def test_broken_yaml_is_skipped(tmp_path, clean_env):
    (tmp_path / "user.yaml").write_text("ui: [unclosed", encoding="utf-8")
    assert ConfigManager(tmp_path).get_config() == SystemConfig()


def test_save_project_config_merges_and_reloads(tmp_path, clean_env):
    manager = ConfigManager(tmp_path / "settings")
    assert manager.save_project_config({"form": {"clear_errors_on_success": True}})
    assert manager.save_project_config({"ui": {"theme_mode": "system"}})

    config = manager.get_config()

    assert config.form.clear_errors_on_success is True
    assert config.ui.theme_mode == "system"
    saved = yaml.safe_load((tmp_path / "settings" / "project.yaml").read_text(encoding="utf-8"))
    assert saved == {"form": {"clear_errors_on_success": True}, "ui": {"theme_mode": "system"}}
