"""
Secure random source.

Reads from the OS CSPRNG only. Failures surface as RandomSourceError and
are never papered over with a weaker generator.
"""

import secrets

from core.errors import RandomSourceError

RANDOM_BYTES = 10  # 80 bits


def random_bytes(n, op="entropy:random_bytes"):
    """Return n bytes from the OS secure random source."""
    try:
        data = secrets.token_bytes(n)
    except (OSError, NotImplementedError) as exc:
        raise RandomSourceError("secure random source failed", requested=n, op=op, cause=exc) from exc

    if len(data) != n:
        raise RandomSourceError(f"short read: got {len(data)} of {n} bytes", requested=n, op=op)
    return data


def random_component(op="entropy:random_component"):
    """80-bit random component as an unsigned int."""
    return int.from_bytes(random_bytes(RANDOM_BYTES, op=op), byteorder="big")
