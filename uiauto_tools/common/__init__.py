"""
================================================================================
UI Automation Tools Common Utilities
================================================================================

Shared configuration management and logging setup.

Exports:
    - get_config: Get a configuration value by dot path
    - set_config: Override a configuration value at runtime
    - reload_config: Re-read YAML files and environment overrides
    - init_logger / get_logger: Loguru logger with standard settings

Usage:
    from uiauto_tools.common import get_config, init_logger

    init_logger()
    long_timeout = get_config("timeouts.long", 30)

================================================================================
"""

from .global_config import (
    get_config,
    get_logger,
    init_logger,
    reload_config,
    set_config,
)

__all__ = [
    "get_config",
    "get_logger",
    "init_logger",
    "reload_config",
    "set_config",
]
