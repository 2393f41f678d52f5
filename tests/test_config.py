"""Unit tests for configuration loading."""

import json

import pytest
from config import (
    Config,
    FlakeConfig,
    HealthConfig,
    ServerConfig,
    LoggingConfig,
    load_config,
)


class TestFlakeConfig:
    """Tests for FlakeConfig class."""

    def test_default_values(self):
        """FlakeConfig has sensible defaults."""
        config = FlakeConfig()
        assert config.encoding == "base62"
        assert config.batch_limit == 1000

    def test_custom_values(self):
        """FlakeConfig accepts custom values."""
        config = FlakeConfig(encoding="hex", batch_limit=10)
        assert config.encoding == "hex"
        assert config.batch_limit == 10

    def test_unknown_encoding(self):
        """Only known encodings are accepted."""
        with pytest.raises(ValueError):
            FlakeConfig(encoding="base64")


class TestServerConfig:
    """Tests for ServerConfig class."""

    def test_default_values(self):
        """ServerConfig has sensible defaults."""
        config = ServerConfig()
        assert config.host == "127.0.0.1"
        assert config.port == 8080

    def test_custom_values(self):
        """ServerConfig accepts custom values."""
        config = ServerConfig(host="0.0.0.0", port=9000)
        assert config.host == "0.0.0.0"
        assert config.port == 9000


class TestLoggingConfig:
    """Tests for LoggingConfig class."""

    def test_default_values(self):
        """LoggingConfig defaults to INFO."""
        assert LoggingConfig().level == "INFO"


class TestConfig:
    """Tests for main Config class."""

    def test_default_config(self):
        """Config creates default sub-configs."""
        config = Config()
        assert isinstance(config.flake, FlakeConfig)
        assert isinstance(config.server, ServerConfig)
        assert isinstance(config.logging, LoggingConfig)
        assert isinstance(config.health, HealthConfig)

    def test_from_dict(self):
        """Config.from_dict parses dictionary."""
        data = {
            "flake": {"encoding": "hex", "batch_limit": 10},
            "server": {"port": 9000},
            "logging": {"level": "DEBUG"},
            "health": {"ttl": 5.0},
        }
        config = Config.from_dict(data)
        assert config.flake.encoding == "hex"
        assert config.flake.batch_limit == 10
        assert config.server.port == 9000
        assert config.logging.level == "DEBUG"
        assert config.health.ttl == 5.0

    def test_from_dict_partial(self):
        """Config.from_dict handles partial data."""
        config = Config.from_dict({"flake": {"batch_limit": 5}})
        assert config.flake.batch_limit == 5
        assert config.server.port == 8080  # Default


class TestLoadConfig:
    """Tests for load_config function."""

    def test_load_config_returns_config(self):
        """load_config returns Config object."""
        assert isinstance(load_config(), Config)

    def test_load_config_reads_file(self):
        """load_config reads from config.json."""
        config = load_config()
        assert config.flake.encoding == "base62"
        assert config.flake.batch_limit == 500

    def test_load_config_custom_path(self, tmp_path):
        """load_config reads an explicit path."""
        path = tmp_path / "config.json"
        path.write_text(json.dumps({"flake": {"encoding": "uuid"}}))
        assert load_config(path).flake.encoding == "uuid"

    def test_load_config_missing_file(self, tmp_path):
        """load_config returns defaults for missing file."""
        config = load_config(tmp_path / "nonexistent.json")
        assert isinstance(config, Config)
        assert config.flake.batch_limit == 1000  # Default
