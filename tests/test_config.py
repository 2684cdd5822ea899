"""
Tests for configuration management.
"""

import json

import pytest

from addlee.config import (
    SETTINGS,
    ConfigError,
    ConfigManager,
    check_value,
    get_config_manager,
    reload_config,
)


@pytest.fixture
def manager(tmp_path, clean_env) -> ConfigManager:
    return ConfigManager(config_dir=str(tmp_path))


class TestConfigLoading:
    """Test layered configuration loading."""

    def test_defaults(self, manager):
        assert manager.get("matching", "min_score") == 0
        assert manager.get("matching", "default_tier") == "all"
        assert manager.get("export", "default_format") == "csv"
        assert manager.get("logging", "level") == "WARNING"

    def test_section_lookup(self, manager):
        assert manager.get("cli") == ConfigManager.DEFAULT_CONFIG["cli"]
        assert manager.get("missing") == {}

    def test_defaults_not_shared(self, manager):
        manager.config["matching"]["min_score"] = 90
        assert ConfigManager.DEFAULT_CONFIG["matching"]["min_score"] == 0

    def test_json_file_merges_over_defaults(self, tmp_path, clean_env):
        (tmp_path / "addlee.config.json").write_text(json.dumps({"matching": {"min_score": 65}}))
        manager = ConfigManager(config_dir=str(tmp_path))
        assert manager.get("matching", "min_score") == 65
        assert manager.get("matching", "default_tier") == "all"

    def test_broken_json_file_falls_back(self, tmp_path, clean_env):
        (tmp_path / "addlee.config.json").write_text("{broken")
        manager = ConfigManager(config_dir=str(tmp_path))
        assert manager.get("matching", "min_score") == 0

    def test_env_overrides_with_types(self, tmp_path, monkeypatch, clean_env):
        monkeypatch.setenv("ADDLEE_MIN_SCORE", "75")
        monkeypatch.setenv("ADDLEE_SHOW_EXPLANATIONS", "yes")
        monkeypatch.setenv("ADDLEE_EXPORT_FORMAT", "json")
        manager = ConfigManager(config_dir=str(tmp_path))
        assert manager.get("matching", "min_score") == 75
        assert manager.get("cli", "show_explanations") is True
        assert manager.get("export", "default_format") == "json"

    def test_invalid_env_value_keeps_default(self, tmp_path, monkeypatch, clean_env):
        monkeypatch.setenv("ADDLEE_TABLE_LIMIT", "lots")
        manager = ConfigManager(config_dir=str(tmp_path))
        assert manager.get("cli", "default_table_limit") == 30

    def test_unknown_file_keys_ignored(self, tmp_path, clean_env):
        (tmp_path / "addlee.config.json").write_text(json.dumps({
            "matching": {"min_score": 65, "weights": [1, 2]},
            "ollama": {"model": "x"},
        }))
        manager = ConfigManager(config_dir=str(tmp_path))
        assert manager.get("matching") == {"min_score": 65, "default_tier": "all"}
        assert manager.get("ollama") == {}

    def test_every_setting_has_default_and_env_var(self):
        for setting in SETTINGS:
            assert ConfigManager.DEFAULT_CONFIG[setting.section][setting.key] == setting.default
            assert ConfigManager.ENV_MAPPINGS[setting.env_var] == (setting.section, setting.key)

    def test_env_beats_json_file(self, tmp_path, monkeypatch, clean_env):
        (tmp_path / "addlee.config.json").write_text(json.dumps({"matching": {"min_score": 65}}))
        monkeypatch.setenv("ADDLEE_MIN_SCORE", "80")
        assert ConfigManager(config_dir=str(tmp_path)).get("matching", "min_score") == 80


class TestConfigUpdates:
    """Test saving and editing configuration."""

    def test_set_persists(self, tmp_path, manager):
        assert manager.set("matching", "min_score", 70)
        saved = json.loads((tmp_path / "addlee.config.json").read_text())
        assert saved["matching"]["min_score"] == 70

    def test_set_converts_strings(self, manager):
        assert manager.set("cli", "default_table_limit", "12")
        assert manager.set("cli", "show_explanations", "yes")
        assert manager.get("cli", "default_table_limit") == 12
        assert manager.get("cli", "show_explanations") is True

    @pytest.mark.parametrize("section, key, value, message", [
        ("matching", "weights", "1", "Unknown config key"),
        ("matching", "default_tier", "best", "Invalid tier"),
        ("matching", "min_score", "lots", "Invalid int value"),
        ("cli", "default_table_limit", "0", "Invalid table limit"),
    ])
    def test_set_rejects(self, tmp_path, manager, section, key, value, message):
        with pytest.raises(ConfigError, match=message):
            manager.set(section, key, value)
        assert not (tmp_path / "addlee.config.json").exists()

    def test_set_env_var_rejects_unknown_variable(self, tmp_path, manager):
        with pytest.raises(ConfigError, match="Unknown environment variable"):
            manager.set_env_var("OLLAMA_HOST", "localhost")
        assert not (tmp_path / ".env").exists()

    def test_set_env_var_rejects_bad_value(self, manager):
        with pytest.raises(ConfigError, match="Unsupported export format"):
            manager.set_env_var("ADDLEE_EXPORT_FORMAT", "xml")

    def test_reset_to_defaults(self, manager):
        manager.set("matching", "default_tier", "top")
        assert manager.reset_to_defaults()
        assert manager.get("matching", "default_tier") == "all"

    def test_set_and_unset_env_var(self, tmp_path, manager, monkeypatch):
        # Registers the variable with monkeypatch so it is removed afterwards
        monkeypatch.setenv("ADDLEE_DEFAULT_TIER", "all")

        assert manager.set_env_var("ADDLEE_DEFAULT_TIER", "good")
        assert "ADDLEE_DEFAULT_TIER" in (tmp_path / ".env").read_text()
        assert manager.get("matching", "default_tier") == "good"

        assert manager.unset_env_var("ADDLEE_DEFAULT_TIER")
        assert "ADDLEE_DEFAULT_TIER" not in (tmp_path / ".env").read_text()
        assert manager.get("matching", "default_tier") == "all"

    @pytest.mark.parametrize("value, default, expected", [
        ("true", False, True),
        ("off", True, False),
        ("12", 0, 12),
        ("0.5", 0.0, 0.5),
        ("json", "csv", "json"),
    ])
    def test_coerce_value(self, value, default, expected):
        assert ConfigManager.coerce_value(value, default) == expected

    def test_coerce_value_rejects_bad_number(self):
        with pytest.raises(ConfigError, match="Invalid float value"):
            ConfigManager.coerce_value("half", 0.0)


class TestConfigValidation:
    """Test configuration validation."""

    def test_defaults_are_valid(self, manager):
        assert manager.validate_config() == []

    @pytest.mark.parametrize("section, key, value", [
        ("matching", "min_score", 150),
        ("matching", "min_score", "high"),
        ("matching", "default_tier", "best"),
        ("cli", "default_table_limit", 0),
        ("export", "default_format", "xml"),
        ("logging", "level", "LOUD"),
    ])
    def test_invalid_values(self, manager, section, key, value):
        manager.config[section][key] = value
        issues = manager.validate_config()
        assert len(issues) == 1

    def test_check_value(self):
        assert check_value("matching", "default_tier", "top") == "top"
        with pytest.raises(ConfigError, match="Invalid tier"):
            check_value("matching", "default_tier", "best")
        with pytest.raises(ConfigError, match="Unknown config key"):
            check_value("matching", "weights", 1)

    def test_config_error_is_value_error(self):
        assert issubclass(ConfigError, ValueError)


class TestGlobalConfig:
    """Test the process-wide config manager."""

    def test_singleton(self, isolated_config):
        assert get_config_manager() is get_config_manager()

    def test_reload(self, isolated_config):
        first = get_config_manager()
        reload_config()
        assert get_config_manager() is not first
