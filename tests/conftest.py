"""Pytest fixtures for all tests."""

import pytest
from httpx import AsyncClient, ASGITransport

from config import Config, FlakeConfig
from ui.app import create_app


# 2020-01-15T12:38:55.216Z, random 724773312193627487660233
KNOWN_HEX = "016fa936bff0997a0a3c428548fee8c9"
KNOWN_BASE62 = "02i1KoFfY3auBS745gImbZ"


@pytest.fixture
def known_bytes():
    """16-byte layout of a known flake."""
    return bytes.fromhex(KNOWN_HEX)


@pytest.fixture
def small_bytes():
    """Timestamp 1ms, random 1: most leading bytes are zero."""
    return b"\x00" * 5 + b"\x01" + b"\x00" * 9 + b"\x01"


@pytest.fixture
def app_config():
    """Config with a small batch limit."""
    return Config(flake=FlakeConfig(encoding="base62", batch_limit=5))


@pytest.fixture
async def app(app_config):
    """Create test FastAPI app."""
    return create_app(app_config)


@pytest.fixture
async def client(app):
    """Create async test client."""
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
