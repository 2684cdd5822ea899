"""
Configuration management for Addlee.

Settings are layered: built-in defaults, then addlee.config.json, then a
.env file, then ADDLEE_* environment variables. Each setting is declared
once in SETTINGS with its environment variable and its check; the same
checks guard values handed to the Matcher, the exporter and the CLI.

Scoring weights, the display offset and the display cap live in
addlee.matching and are not read from configuration.
"""

import copy
import json
import os
from pathlib import Path
from typing import Any, Callable, Dict, List, NamedTuple, Optional, Tuple

from dotenv import load_dotenv, set_key, unset_key
from rich.console import Console
from rich.table import Table

TIERS = ("all", "top", "good")
EXPORT_FORMATS = ("csv", "json", "html")
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class ConfigError(ValueError):
    """Raised for unknown settings and values that fail their check."""
    pass


def _is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def _min_score_issue(value: Any) -> Optional[str]:
    if not _is_int(value) or not 0 <= value <= 99:
        return f"Invalid minimum score: {value} (expected 0-99)"
    return None


def _tier_issue(value: Any) -> Optional[str]:
    if value not in TIERS:
        return f"Invalid tier: {value} (expected one of {', '.join(TIERS)})"
    return None


def _table_limit_issue(value: Any) -> Optional[str]:
    if not _is_int(value) or value < 1:
        return f"Invalid table limit: {value} (expected a positive integer)"
    return None


def _export_format_issue(value: Any) -> Optional[str]:
    if value not in EXPORT_FORMATS:
        return f"Unsupported export format: {value} (expected one of {', '.join(EXPORT_FORMATS)})"
    return None


def _directory_issue(value: Any) -> Optional[str]:
    if not isinstance(value, str) or not value:
        return f"Invalid output directory: {value!r}"
    return None


def _log_level_issue(value: Any) -> Optional[str]:
    if not isinstance(value, str) or value.upper() not in LOG_LEVELS:
        return f"Invalid log level: {value}"
    return None


def _flag_issue(value: Any) -> Optional[str]:
    if not isinstance(value, bool):
        return f"Invalid flag: {value} (expected true or false)"
    return None


class Setting(NamedTuple):
    section: str
    key: str
    default: Any
    env_var: str
    check: Callable[[Any], Optional[str]]
    help: str


SETTINGS = [
    Setting("matching", "min_score", 0, "ADDLEE_MIN_SCORE", _min_score_issue,
            "Hide matches with a display score below this"),
    Setting("matching", "default_tier", "all", "ADDLEE_DEFAULT_TIER", _tier_issue,
            "Tier shown when --tier is not given"),
    Setting("cli", "default_table_limit", 30, "ADDLEE_TABLE_LIMIT", _table_limit_issue,
            "Rows shown by `match run` when --limit is not given"),
    Setting("cli", "show_explanations", False, "ADDLEE_SHOW_EXPLANATIONS", _flag_issue,
            "Add the explanation column to `match run`"),
    Setting("cli", "color_output", True, "ADDLEE_COLOR_OUTPUT", _flag_issue,
            "Colour console output"),
    Setting("export", "default_format", "csv", "ADDLEE_EXPORT_FORMAT", _export_format_issue,
            "Format used when --format is not given"),
    Setting("export", "output_directory", ".", "ADDLEE_EXPORT_DIR", _directory_issue,
            "Directory for exports without --output"),
    Setting("export", "include_timestamps", True, "ADDLEE_EXPORT_TIMESTAMPS", _flag_issue,
            "Timestamp default export filenames"),
    Setting("logging", "level", "WARNING", "ADDLEE_LOG_LEVEL", _log_level_issue,
            "Log level for the rich log handler"),
]

_SETTINGS_BY_KEY = {(s.section, s.key): s for s in SETTINGS}
_SETTINGS_BY_ENV = {s.env_var: s for s in SETTINGS}


def find_setting(section: str, key: str) -> Setting:
    """Look up a declared setting, raising ConfigError for unknown names."""
    try:
        return _SETTINGS_BY_KEY[(section, key)]
    except KeyError:
        raise ConfigError(f"Unknown config key '{section}.{key}'") from None


def check_value(section: str, key: str, value: Any) -> Any:
    """Return value unchanged if it passes the setting's check, else raise ConfigError."""
    issue = find_setting(section, key).check(value)
    if issue:
        raise ConfigError(issue)
    return value


def _default_config() -> Dict[str, Dict[str, Any]]:
    config: Dict[str, Dict[str, Any]] = {}
    for setting in SETTINGS:
        config.setdefault(setting.section, {})[setting.key] = setting.default
    return config


class ConfigManager:
    """Manages Addlee configuration settings and .env files."""

    DEFAULT_CONFIG = _default_config()
    ENV_MAPPINGS = {s.env_var: (s.section, s.key) for s in SETTINGS}

    def __init__(self, config_dir: str = "."):
        self.config_dir = Path(config_dir)
        self.env_file = self.config_dir / ".env"
        self.config_file = self.config_dir / "addlee.config.json"
        self.console = Console()

        self.config = self._load_config()

    def _load_config(self) -> Dict[str, Dict[str, Any]]:
        if self.env_file.exists():
            load_dotenv(str(self.env_file))

        config = copy.deepcopy(self.DEFAULT_CONFIG)
        for (section, key), value in self._read_config_file().items():
            config[section][key] = value

        for setting in SETTINGS:
            raw = os.getenv(setting.env_var)
            if raw is None:
                continue
            try:
                config[setting.section][setting.key] = self.coerce_value(raw, setting.default)
            except ConfigError as e:
                self.console.print(f"[yellow]Warning: ignoring {setting.env_var}: {e}[/yellow]")

        return config

    def _read_config_file(self) -> Dict[Tuple[str, str], Any]:
        """Declared settings stored in addlee.config.json, keyed by (section, key)."""
        if not self.config_file.exists():
            return {}
        try:
            with open(self.config_file, 'r', encoding='utf-8') as f:
                stored = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            self.console.print(f"[yellow]Warning: Could not load config file: {e}[/yellow]")
            return {}

        found = {}
        sections = stored.items() if isinstance(stored, dict) else []
        for section, values in sections:
            if not isinstance(values, dict):
                continue
            for key, value in values.items():
                if (section, key) in _SETTINGS_BY_KEY:
                    found[(section, key)] = value
                else:
                    self.console.print(f"[yellow]Warning: Unknown config key '{section}.{key}' ignored[/yellow]")
        return found

    @staticmethod
    def coerce_value(value: str, default_value: Any) -> Any:
        """Convert a string from the command line or environment to the default's type."""
        if isinstance(default_value, bool):
            return value.lower() in ('true', '1', 'yes', 'on')
        kind = type(default_value)
        if kind in (int, float):
            try:
                return kind(value)
            except ValueError:
                raise ConfigError(f"Invalid {kind.__name__} value: {value}") from None
        return value

    def get(self, section: str, key: Optional[str] = None) -> Any:
        """Get a setting, or a whole section when key is omitted."""
        if key is None:
            return self.config.get(section, {})
        return self.config.get(section, {}).get(key)

    def set(self, section: str, key: str, value: Any) -> bool:
        """
        Change one setting and persist it to addlee.config.json.

        String values are converted to the setting's type first.

        Raises:
            ConfigError: If the setting is unknown or the value fails its check
        """
        setting = find_setting(section, key)
        if isinstance(value, str):
            value = self.coerce_value(value, setting.default)
        self.config[section][key] = check_value(section, key, value)
        return self.save_config()

    def save_config(self) -> bool:
        """Write the current settings to addlee.config.json."""
        try:
            self.config_dir.mkdir(parents=True, exist_ok=True)
            self.config_file.write_text(json.dumps(self.config, indent=2), encoding='utf-8')
        except OSError as e:
            self.console.print(f"[red]Error saving config: {e}[/red]")
            return False
        return True

    def _env_setting(self, env_var: str) -> Setting:
        if env_var not in _SETTINGS_BY_ENV:
            known = ', '.join(_SETTINGS_BY_ENV)
            raise ConfigError(f"Unknown environment variable {env_var} (expected one of {known})")
        return _SETTINGS_BY_ENV[env_var]

    def set_env_var(self, key: str, value: str) -> bool:
        """
        Write an ADDLEE_* variable to .env and reload.

        Raises:
            ConfigError: If the variable is unknown or the value fails its check
        """
        setting = self._env_setting(key)
        check_value(setting.section, setting.key, self.coerce_value(value, setting.default))
        try:
            self.config_dir.mkdir(parents=True, exist_ok=True)
            set_key(str(self.env_file), key, value)
        except OSError as e:
            self.console.print(f"[red]Error setting environment variable: {e}[/red]")
            return False
        os.environ[key] = value
        self.config = self._load_config()
        return True

    def unset_env_var(self, key: str) -> bool:
        """Remove an ADDLEE_* variable from .env and the process environment, then reload."""
        self._env_setting(key)
        try:
            if self.env_file.exists():
                unset_key(str(self.env_file), key)
        except OSError as e:
            self.console.print(f"[red]Error removing environment variable: {e}[/red]")
            return False
        os.environ.pop(key, None)
        self.config = self._load_config()
        return True

    def reset_to_defaults(self) -> bool:
        """Reset configuration to default values."""
        self.config = copy.deepcopy(self.DEFAULT_CONFIG)
        return self.save_config()

    def validate_config(self) -> List[str]:
        """Run every setting's check and return the problems found."""
        issues = []
        for setting in SETTINGS:
            issue = setting.check(self.get(setting.section, setting.key))
            if issue:
                issues.append(issue)
        return issues

    def display_config(self) -> None:
        """Print every setting with its current value, default and variable."""
        table = Table(title="Addlee Configuration")
        table.add_column("Setting", style="cyan")
        table.add_column("Value", style="green")
        table.add_column("Default", style="dim")
        table.add_column("Environment", style="magenta")
        table.add_column("Description")

        for setting in SETTINGS:
            value = self.get(setting.section, setting.key)
            table.add_row(
                f"{setting.section}.{setting.key}",
                _format_value(value),
                _format_value(setting.default),
                setting.env_var,
                setting.help
            )

        self.console.print(table)


def _format_value(value: Any) -> str:
    if isinstance(value, bool):
        return "✓" if value else "✗"
    return str(value)


def get_config_manager() -> ConfigManager:
    """Get global configuration manager instance."""
    if not hasattr(get_config_manager, '_instance'):
        get_config_manager._instance = ConfigManager()
    return get_config_manager._instance


def reload_config():
    """Reload configuration from files."""
    if hasattr(get_config_manager, '_instance'):
        get_config_manager._instance = ConfigManager()
