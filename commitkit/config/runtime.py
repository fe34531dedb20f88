"""
Runtime Configuration

Central configuration for the commitment structures and the CLI.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from typing import Any, Optional
from pathlib import Path

from dotenv import load_dotenv

from commitkit.mmr.mountain_range import DEFAULT_BAG_SIZE

load_dotenv()


@dataclass
class MMRConfig:
    """Configuration for Merkle mountain ranges."""
    bag_size: int = DEFAULT_BAG_SIZE


@dataclass
class LoggingConfig:
    """Configuration for log output."""
    level: str = "INFO"
    file: Optional[str] = None


@dataclass
class OutputConfig:
    """Configuration for CLI output."""
    json: bool = False


@dataclass
class RuntimeConfig:
    """
    Complete runtime configuration for commitkit.

    Can be loaded from:
    - Environment variables
    - YAML file
    - Programmatic construction
    """
    mmr: MMRConfig = field(default_factory=MMRConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)
    output: OutputConfig = field(default_factory=OutputConfig)
    extra: dict[str, Any] = field(default_factory=dict)

    @staticmethod
    def _get_env_overrides() -> dict[str, Any]:
        """
        Get configuration overrides from environment variables.

        Supported variables:
        - COMMITKIT_MMR_BAG_SIZE: Peak bagging window (integer >= 2)
        - COMMITKIT_LOG_LEVEL: Log level name
        - COMMITKIT_LOG_FILE: Optional log file path
        - COMMITKIT_OUTPUT_JSON: Emit JSON from the CLI (true/false)
        """
        overrides: dict[str, Any] = {}

        if os.getenv("COMMITKIT_MMR_BAG_SIZE"):
            overrides.setdefault("mmr", {})["bag_size"] = int(
                os.getenv("COMMITKIT_MMR_BAG_SIZE", str(DEFAULT_BAG_SIZE))
            )

        if os.getenv("COMMITKIT_LOG_LEVEL"):
            overrides.setdefault("logging", {})["level"] = os.getenv("COMMITKIT_LOG_LEVEL")
        if os.getenv("COMMITKIT_LOG_FILE"):
            overrides.setdefault("logging", {})["file"] = os.getenv("COMMITKIT_LOG_FILE")

        if os.getenv("COMMITKIT_OUTPUT_JSON"):
            overrides.setdefault("output", {})["json"] = (
                os.getenv("COMMITKIT_OUTPUT_JSON", "false").lower() == "true"
            )

        return overrides

    @classmethod
    def from_env(cls) -> "RuntimeConfig":
        """
        Load configuration purely from environment variables.

        Uses defaults for any values not specified in env vars.
        """
        return cls.from_dict(cls._get_env_overrides())

    @classmethod
    def from_yaml(cls, path: str | Path) -> "RuntimeConfig":
        """Load configuration from a YAML file."""
        import yaml
        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"Config file not found: {path}")

        with open(path) as f:
            data = yaml.safe_load(f)

        return cls.from_dict(data or {})

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "RuntimeConfig":
        """Load configuration from a dictionary (supports partial data)."""
        mmr_data = data.get("mmr", {})
        logging_data = data.get("logging", {})
        output_data = data.get("output", {})

        return cls(
            mmr=MMRConfig(**mmr_data) if mmr_data else MMRConfig(),
            logging=LoggingConfig(**logging_data) if logging_data else LoggingConfig(),
            output=OutputConfig(**output_data) if output_data else OutputConfig(),
            extra=data.get("extra", {}),
        )

    def with_env_overrides(self) -> "RuntimeConfig":
        """
        Return a new config with environment variable overrides applied.

        This allows loading from a config file first, then overlaying env vars.
        """
        overrides = self._get_env_overrides()
        if not overrides:
            return self

        import copy
        new_config = copy.deepcopy(self)

        for section in ("mmr", "logging", "output"):
            for key, value in overrides.get(section, {}).items():
                setattr(getattr(new_config, section), key, value)

        return new_config

    def to_dict(self) -> dict[str, Any]:
        """Convert configuration to a dictionary."""
        return {
            "mmr": {
                "bag_size": self.mmr.bag_size,
            },
            "logging": {
                "level": self.logging.level,
                "file": self.logging.file,
            },
            "output": {
                "json": self.output.json,
            },
            "extra": self.extra,
        }


# Global default configuration
_default_config: Optional[RuntimeConfig] = None


def get_default_config() -> RuntimeConfig:
    """Get the default runtime configuration."""
    global _default_config
    if _default_config is None:
        _default_config = RuntimeConfig.from_env()
    return _default_config


def set_default_config(config: RuntimeConfig) -> None:
    """Set the default runtime configuration."""
    global _default_config
    _default_config = config
