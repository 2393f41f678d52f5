"""Timeflake generation and parsing routes."""

from fastapi import APIRouter, HTTPException, Query

import timeflake

router = APIRouter(prefix="/api/v1/flakes", tags=["flakes"])

# Set by app.py
_config = None


def init(flake_config):
    """Initialize with the flake section of the config."""
    global _config
    _config = flake_config


def _render(flake):
    data = flake.to_dict()
    data["id"] = data[_config.encoding]
    return data


@router.get("")
async def generate(count: int = Query(1, ge=1)):
    """Generate `count` fresh Timeflakes."""
    if count > _config.batch_limit:
        raise HTTPException(status_code=400, detail=f"count exceeds batch limit {_config.batch_limit}")
    return {"flakes": [_render(timeflake.random()) for _ in range(count)]}


@router.post("/values")
async def from_values(timestamp: int = Query(...), random: str | None = Query(None)):
    """Build a Timeflake from epoch seconds and an optional decimal random part."""
    if random is not None:
        detail = "random must be a non-negative decimal integer"
        if not (random.isascii() and random.isdecimal()):
            raise HTTPException(status_code=400, detail=detail)
        try:
            random = int(random)
        except ValueError as exc:
            # longer than the interpreter's int-string digit limit
            raise HTTPException(status_code=400, detail=detail) from exc
    return _render(timeflake.from_values(timestamp, random))


@router.get("/{value}")
async def parse(value: str):
    """Parse a hex, base62 or UUID-text Timeflake."""
    return _render(timeflake.parse(value))
