"""
Runtime Configuration Module

Provides configuration loading and management for commitkit.
"""

from .runtime import (
    RuntimeConfig,
    MMRConfig,
    LoggingConfig,
    OutputConfig,
    get_default_config,
    set_default_config,
)

__all__ = [
    "RuntimeConfig",
    "MMRConfig",
    "LoggingConfig",
    "OutputConfig",
    "get_default_config",
    "set_default_config",
]
