# chatbook_nav/config.py
# Description: Configuration management for chatbook_nav.
#
# Imports
import copy
import os
import sys
import threading
if sys.version_info < (3, 11):
    import tomli as tomllib
else:
    import tomllib
from pathlib import Path
from typing import Any, Dict, Optional
#
# Third-Party Imports
import toml
from loguru import logger
#
#######################################################################################################################
#
# Functions:

# --- Path to the user configuration file ---
DEFAULT_CONFIG_PATH = Path.home() / ".config" / "chatbook_nav" / "config.toml"
CONFIG_PATH_ENV_VAR = "CHATBOOK_NAV_CONFIG"
LOG_LEVEL_ENV_VAR = "CHATBOOK_NAV_LOG_LEVEL"

# --- Default Fallback Configuration (if not found in TOML) ---
DEFAULT_CONFIG: Dict[str, Any] = {
    "Logging": {
        "log_level": "INFO",
        "log_file": "",          # empty -> no file sink
        "log_rotation": "10 MB",
        "log_retention": "7 days",
    },
    "Navigation": {
        "max_history": 50,
    },
}


def deep_merge_dicts(base: Dict, update: Dict) -> Dict:
    """Recursively merges update_dict into base_dict."""
    merged = copy.deepcopy(base)
    for key, value in update.items():
        if isinstance(value, dict) and key in merged and isinstance(merged[key], dict):
            merged[key] = deep_merge_dicts(merged[key], value)
        else:
            merged[key] = value
    return merged


def get_config_path(config_path: Optional[Path] = None) -> Path:
    """Explicit path, then the environment variable, then the default location."""
    if config_path is not None:
        return Path(config_path)
    env_path = os.environ.get(CONFIG_PATH_ENV_VAR)
    if env_path:
        return Path(env_path).expanduser()
    return DEFAULT_CONFIG_PATH


def _load_toml_file(path: Path) -> Dict[str, Any]:
    """Read a TOML file. Problems are logged and yield an empty dict."""
    if not path.exists():
        logger.info(f"Config file not found at {path}. Using defaults.")
        return {}
    try:
        with open(path, "rb") as f:  # Use "rb" for tomllib.load
            data = tomllib.load(f)
        logger.info(f"Loaded config from: {path}")
        return data
    except tomllib.TOMLDecodeError as e:
        logger.error(f"Error decoding TOML config file {path}: {e}. Using defaults.")
    except OSError as e:
        logger.error(f"Could not read config file {path}: {e}. Using defaults.")
    return {}


def _coerce_settings(settings: Dict[str, Any]) -> Dict[str, Any]:
    """Fix up values whose type the rest of the package relies on."""
    for section in ("Navigation", "Logging"):
        if not isinstance(settings.get(section), dict):
            settings[section] = copy.deepcopy(DEFAULT_CONFIG[section])

    nav = settings["Navigation"]
    try:
        nav["max_history"] = max(int(nav.get("max_history", 50)), 0)
    except (TypeError, ValueError):
        logger.warning(f"Config key 'max_history' has value {nav.get('max_history')!r} which is not an integer. Using default: 50")
        nav["max_history"] = 50

    logging_section = settings["Logging"]
    env_level = os.environ.get(LOG_LEVEL_ENV_VAR)
    if env_level:
        logging_section["log_level"] = env_level
    logging_section["log_level"] = str(logging_section.get("log_level", "INFO")).upper()
    return settings


# Global cache for load_settings to avoid redundant file I/O
_SETTINGS_CACHE: Optional[Dict[str, Any]] = None
_SETTINGS_CACHE_LOCK = threading.Lock()


def load_settings(force_reload: bool = False, config_path: Optional[Path] = None) -> Dict[str, Any]:
    """
    Loads settings from the TOML config file merged over the defaults.

    Args:
        force_reload: If True, bypasses the cache and reloads from disk.
        config_path: Explicit config file; bypasses the cache when given.

    Returns:
        Dictionary containing all configuration settings.
    """
    global _SETTINGS_CACHE

    with _SETTINGS_CACHE_LOCK:
        if _SETTINGS_CACHE is not None and not force_reload and config_path is None:
            logger.debug("load_settings: Returning cached configuration (cache hit)")
            return _SETTINGS_CACHE

        user_config = _load_toml_file(get_config_path(config_path))
        settings = _coerce_settings(deep_merge_dicts(DEFAULT_CONFIG, user_config))
        if config_path is None:
            _SETTINGS_CACHE = settings
        return settings


def save_settings(settings: Dict[str, Any], config_path: Optional[Path] = None) -> Path:
    """
    Write settings to the TOML config file and drop the cache.

    Returns:
        The path written to
    """
    global _SETTINGS_CACHE

    path = get_config_path(config_path)
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w", encoding="utf-8") as f:
        toml.dump(settings, f)
    logger.info(f"Saved config to: {path}")

    with _SETTINGS_CACHE_LOCK:
        _SETTINGS_CACHE = None
    return path

#
# End of config.py
#######################################################################################################################
