from timeflake.flake import (
    Timeflake,
    format_uuid,
    from_base62,
    from_bytes,
    from_hex,
    from_uuid,
    from_values,
    parse,
    random,
)
from timeflake.packer import MAX_RANDOM, MAX_TIMEFLAKE, MAX_TIMESTAMP

__all__ = [
    "Timeflake",
    "format_uuid",
    "from_base62",
    "from_bytes",
    "from_hex",
    "from_uuid",
    "from_values",
    "parse",
    "random",
    "MAX_RANDOM",
    "MAX_TIMEFLAKE",
    "MAX_TIMESTAMP",
]
