import json
from pathlib import Path

_DEFAULT_CONFIG = Path(__file__).parent / "config.json"


class FlakeConfig:
    __slots__ = ("encoding", "batch_limit")
    
    def __init__(self, encoding="base62", batch_limit=1000):
        if encoding not in ("base62", "hex", "uuid"):
            raise ValueError(f"unknown encoding {encoding!r}")
        self.encoding = encoding
        self.batch_limit = batch_limit


class ServerConfig:
    __slots__ = ("host", "port")
    
    def __init__(self, host="127.0.0.1", port=8080):
        self.host = host
        self.port = port


class LoggingConfig:
    __slots__ = ("level",)
    
    def __init__(self, level="INFO"):
        self.level = level


class HealthConfig:
    __slots__ = ("ttl",)

    def __init__(self, ttl=1.0):
        self.ttl = ttl


class Config:
    __slots__ = ("flake", "server", "logging", "health")
    
    def __init__(self, flake=None, server=None, logging=None, health=None):
        self.flake = flake or FlakeConfig()
        self.server = server or ServerConfig()
        self.logging = logging or LoggingConfig()
        self.health = health or HealthConfig()

    @classmethod
    def from_dict(cls, d):
        return cls(
            FlakeConfig(**d.get("flake", {})),
            ServerConfig(**d.get("server", {})),
            LoggingConfig(**d.get("logging", {})),
            HealthConfig(**d.get("health", {})),
        )


def load_config(path=None):
    config_path = Path(path) if path else _DEFAULT_CONFIG
    
    if not config_path.exists():
        return Config()
    
    with open(config_path) as file:
        return Config.from_dict(json.load(file))
