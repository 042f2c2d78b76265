"""
================================================================================
Global Configuration for UI Automation Tools
================================================================================

Centralized configuration management for the page facade and its tooling,
including logging setup and configuration file loading.

Features:
    - Module-level configuration store shared by every page object
    - YAML-based configuration loading (base file + per-environment file)
    - Environment variable overrides (TIMEOUTS__LONG=60)
    - Centralized Loguru logging configuration

Author: Automation Team
License: MIT
================================================================================
"""

import os
import sys
from pathlib import Path
from typing import Any, Dict, List, Optional

import yaml
from loguru import logger

# Global configuration storage
_config: Dict[str, Any] = {}
_logger_initialized: bool = False

DEFAULT_LOG_FORMAT = (
    "{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name}:{function}:{line} | {message}"
)

# Searched in order; the first existing directory wins
CONFIG_DIRS: List[Path] = [
    Path("config"),
    Path(__file__).parent.parent.parent / "config",
]


def init_logger(level: Optional[str] = None, format_str: Optional[str] = None) -> None:
    """
    Initializes the global Loguru logger with consistent configuration.

    Call once at the start of a test session (the root conftest does) so
    every page object logs through the same sinks.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR). Defaults to config value.
        format_str: Custom log format string. Defaults to config value.
    """
    global _logger_initialized

    if _logger_initialized:
        return

    _ensure_config_loaded()

    log_level = str(level or get_config("logging.level", "INFO"))
    log_format = format_str or get_config("logging.format", DEFAULT_LOG_FORMAT)

    logger.remove()
    logger.add(
        sys.stderr,
        level=log_level.upper(),
        format=log_format,
        colorize=True,
        backtrace=True,
        diagnose=True,
    )

    log_file = get_config("logging.file", None)
    if log_file:
        Path(log_file).parent.mkdir(parents=True, exist_ok=True)
        logger.add(
            log_file,
            level=log_level.upper(),
            format=log_format.replace("{level: <8}", "{level}"),
            rotation=get_config("logging.rotation", "10 MB"),
            retention=get_config("logging.retention", "7 days"),
            compression="zip",
        )

    _logger_initialized = True
    logger.debug(f"Logger initialized with level: {log_level}")


def get_logger():
    """
    Returns the configured Loguru logger instance.

    Ensures the logger is initialized before returning.
    """
    if not _logger_initialized:
        init_logger()
    return logger


def _ensure_config_loaded() -> None:
    """Ensures the configuration is loaded."""
    if not _config:
        _load_config()


def _find_config_dir() -> Optional[Path]:
    for dir_path in CONFIG_DIRS:
        if dir_path.is_dir():
            return dir_path
    return None


def _load_config() -> None:
    """
    Loads configuration from YAML files and environment variables.

    Configuration loading order:
        1. Built-in defaults
        2. Default configuration file (config/config.yaml)
        3. Environment-specific configuration (config/{ENV}.yaml)
        4. Environment variables (override YAML settings)
    """
    global _config
    _config = _get_defaults()

    config_dir = _find_config_dir()
    if config_dir is None:
        logger.warning("No configuration directory found. Using defaults.")
    else:
        default_config_path = config_dir / "config.yaml"
        if default_config_path.exists():
            with open(default_config_path, "r", encoding="utf-8") as f:
                _config = _deep_merge(_config, yaml.safe_load(f) or {})
            logger.debug(f"Loaded configuration from {default_config_path}")

        env = os.getenv("ENVIRONMENT", os.getenv("ENV", "dev"))
        env_config_path = config_dir / f"{env}.yaml"
        if env_config_path.exists():
            with open(env_config_path, "r", encoding="utf-8") as f:
                env_config = yaml.safe_load(f) or {}
            _config = _deep_merge(_config, env_config)
            logger.debug(f"Merged environment config: {env_config_path}")

    _apply_env_overrides()


def _get_defaults() -> Dict[str, Any]:
    """
    Returns default configuration values.
    """
    return {
        "logging": {
            "level": "INFO",
            "format": DEFAULT_LOG_FORMAT,
        },
        "timeouts": {
            "short": 5,
            "long": 30,
            "poll_interval": 0.5,
            "settle": 1,
        },
        "ui": {
            "base_url": "http://localhost:3000",
            "browser": "chromium",
            "headless": True,
            "access_token_key": "auth0AccessToken",
        },
    }


def _deep_merge(base: Dict, override: Dict) -> Dict:
    """
    Deep merges two dictionaries, with override taking precedence.
    """
    result = base.copy()
    for key, value in override.items():
        if key in result and isinstance(result[key], dict) and isinstance(value, dict):
            result[key] = _deep_merge(result[key], value)
        else:
            result[key] = value
    return result


def _apply_env_overrides() -> None:
    """
    Applies environment variable overrides to the configuration.

    Environment variable naming convention:
        - Use double underscore to separate nested keys
        - Example: TIMEOUTS__SHORT=2 overrides timeouts.short
    """
    for key, value in os.environ.items():
        if "__" in key and not key.startswith("_"):
            parts = [p.lower() for p in key.split("__")]
            _set_nested(_config, parts, value)


def _set_nested(d: Dict, keys: list, value: Any) -> None:
    """
    Sets a nested dictionary value using a list of keys.
    """
    for key in keys[:-1]:
        existing = d.get(key)
        if not isinstance(existing, dict):
            existing = {}
            d[key] = existing
        d = existing
    d[keys[-1]] = value


def get_config(key: str, default: Any = None) -> Any:
    """
    Retrieves a configuration value using a dot-separated key path.

    Args:
        key: Dot-separated key path (e.g., "timeouts.long", "ui.base_url").
        default: Default value to return if key is not found.

    Returns:
        The configuration value, or the default if not found.

    Examples:
        >>> get_config("timeouts.long", 30)
        30
        >>> get_config("ui.browser")
        'chromium'
    """
    _ensure_config_loaded()

    value: Any = _config
    for k in key.split("."):
        if isinstance(value, dict) and k in value:
            value = value[k]
        else:
            return default

    return value


def set_config(key: str, value: Any) -> None:
    """
    Sets a configuration value at runtime.

    Args:
        key: Dot-separated key path.
        value: Value to set.
    """
    _ensure_config_loaded()
    _set_nested(_config, key.split("."), value)


def reload_config() -> None:
    """
    Reloads the configuration from files and environment.
    """
    global _config, _logger_initialized
    _config = {}
    _logger_initialized = False
    _load_config()
    init_logger()
    logger.info("Configuration reloaded.")
