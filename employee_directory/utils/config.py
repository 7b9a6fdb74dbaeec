"""
Configuration Management Module

Handles loading and validating application configuration from config.json.
Missing keys are filled from defaults; the file itself is never written,
so a run leaves no state behind.
"""

import json
import copy
import logging

from .constants import DEFAULT_CURRENCY_SYMBOL

logger = logging.getLogger("employee_directory")


DEFAULT_CONFIG = {
    "logging": {
        "level": "WARNING",
        "file_enabled": False,
    },
    "display": {
        "color": True,
        "currency_symbol": DEFAULT_CURRENCY_SYMBOL,
        "table_view": True,
    },
    "directory": {
        "seed_on_start": True,
    },
}


def load_config(config_file=None):
    """
    Load configuration from config.json merged over the defaults

    Args:
        config_file: Optional path override (defaults to CONFIG_FILE)

    Returns:
        dict: Configuration dictionary
    """
    if config_file is None:
        from .constants import CONFIG_FILE
        config_file = CONFIG_FILE

    defaults = copy.deepcopy(DEFAULT_CONFIG)

    if not config_file.exists():
        return defaults

    try:
        with open(config_file, 'r', encoding='utf-8') as f:
            config = json.load(f)
    except json.JSONDecodeError as e:
        logger.error(f"Config file corrupted: {e}. Using defaults.")
        return defaults
    except OSError as e:
        logger.error(f"Error loading config: {e}. Using defaults.")
        return defaults

    if not isinstance(config, dict):
        logger.error("Config file must contain a JSON object. Using defaults.")
        return defaults

    return _deep_merge(defaults, config)


def _deep_merge(defaults: dict, override: dict) -> dict:
    """
    Deep merge override config into defaults, preserving new defaults

    Args:
        defaults: Default configuration
        override: User-provided configuration

    Returns:
        dict: Merged configuration
    """
    result = defaults.copy()
    for key, value in override.items():
        if key in defaults and isinstance(defaults[key], dict) and isinstance(value, dict):
            result[key] = _deep_merge(defaults[key], value)
        else:
            result[key] = value
    return result


def get_setting(config: dict, section: str, key: str, default=None):
    """Read config[section][key], falling back to default for missing entries."""
    value = config.get(section, {})
    if not isinstance(value, dict):
        return default
    return value.get(key, default)
