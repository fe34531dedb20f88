"""
Runtime Configuration Unit Tests
Tests for commitkit/config/runtime.py
"""
import pytest

from commitkit.config import RuntimeConfig
from commitkit.config.runtime import get_default_config, set_default_config


class TestDefaults:
    """Tests for default configuration values."""

    def test_defaults(self):
        config = RuntimeConfig()

        assert config.mmr.bag_size == 2
        assert config.logging.level == "INFO"
        assert config.logging.file is None
        assert config.output.json is False


class TestFromDict:
    """Tests for RuntimeConfig.from_dict()."""

    def test_partial_data(self):
        config = RuntimeConfig.from_dict({"mmr": {"bag_size": 4}})

        assert config.mmr.bag_size == 4
        assert config.logging.level == "INFO"

    def test_round_trip_to_dict(self):
        data = {
            "mmr": {"bag_size": 3},
            "logging": {"level": "DEBUG", "file": "out.log"},
            "output": {"json": True},
            "extra": {"note": "x"},
        }

        assert RuntimeConfig.from_dict(data).to_dict() == data


class TestFromEnv:
    """Tests for environment overrides."""

    def test_env_overrides(self, clean_env):
        clean_env.setenv("COMMITKIT_MMR_BAG_SIZE", "5")
        clean_env.setenv("COMMITKIT_LOG_LEVEL", "WARNING")
        clean_env.setenv("COMMITKIT_OUTPUT_JSON", "true")

        config = RuntimeConfig.from_env()

        assert config.mmr.bag_size == 5
        assert config.logging.level == "WARNING"
        assert config.output.json is True

    def test_no_env_gives_defaults(self, clean_env):
        assert RuntimeConfig.from_env().to_dict() == RuntimeConfig().to_dict()

    def test_with_env_overrides_keeps_file_values(self, clean_env):
        clean_env.setenv("COMMITKIT_LOG_LEVEL", "ERROR")
        base = RuntimeConfig.from_dict({"mmr": {"bag_size": 7}})

        config = base.with_env_overrides()

        assert config.mmr.bag_size == 7
        assert config.logging.level == "ERROR"
        assert base.logging.level == "INFO"


class TestFromYaml:
    """Tests for YAML loading."""

    def test_from_yaml(self, tmp_path):
        path = tmp_path / "commitkit.yaml"
        path.write_text("mmr:\n  bag_size: 3\nlogging:\n  level: DEBUG\n")

        config = RuntimeConfig.from_yaml(path)

        assert config.mmr.bag_size == 3
        assert config.logging.level == "DEBUG"

    def test_empty_yaml(self, tmp_path):
        path = tmp_path / "empty.yaml"
        path.write_text("")

        assert RuntimeConfig.from_yaml(path).mmr.bag_size == 2

    def test_missing_file_raises(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            RuntimeConfig.from_yaml(tmp_path / "missing.yaml")


class TestDefaultConfig:
    """Tests for the process-wide default config."""

    def test_set_and_get(self):
        config = RuntimeConfig.from_dict({"mmr": {"bag_size": 9}})
        set_default_config(config)
        try:
            assert get_default_config() is config
        finally:
            set_default_config(None)
