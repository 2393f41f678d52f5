import asyncio
import time
from enum import Enum

from core.errors import BaseTimeflakeError, RandomSourceError
from utils.entropy import RANDOM_BYTES, random_bytes
from utils.timestamp import format_timestamp

class Status(Enum):
    OK = "healthy"
    DEGRADED = "degraded"
    FAIL = "unhealthy"

class CheckResult:
    __slots__ = ("name", "status", "msg")
    
    def __init__(self, name, status, msg=""): 
        self.name = name
        self.status = status
        self.msg = msg
    
    def to_dict(self): 
        return {"name": self.name,
                "status": self.status.value,
                "msg": self.msg}

class HealthReport:
    __slots__ = ("status", "checks", "uptime", "timestamp")
    
    def __init__(self, status, checks, uptime=0):
        self.status = status
        self.checks = checks
        self.uptime = uptime
        self.timestamp = format_timestamp()
    
    def to_dict(self):
        return {"status": self.status.value,
                "timestamp": self.timestamp,
                "uptime": round(self.uptime, 1),
                "checks": [check.to_dict() for check in self.checks]}

_checker = None

class HealthChecker:
    def __init__(self, ttl=1.0):
        self._checks = {}
        self._cache = None
        self._cache_time = 0
        self._ttl = ttl
        self._start_time = time.time()

    def register(self, name, check_fn, critical=True):
        self._checks[name] = (check_fn, critical)

    async def check(self):
        now = time.time()
        if self._cache and now - self._cache_time < self._ttl:
            return self._cache

        results = []
        for name, (check_fn, is_critical) in self._checks.items():
            try:
                result = await asyncio.wait_for(check_fn(), timeout=5)
            except asyncio.TimeoutError:
                result = CheckResult(name, Status.FAIL, "timeout")
            except Exception as exc:
                result = CheckResult(name, Status.FAIL, str(exc))
            results.append((result, is_critical))

        status = Status.OK
        for result, is_critical in results:
            if result.status == Status.FAIL and is_critical:
                status = Status.FAIL
            elif result.status != Status.OK and status == Status.OK:
                status = Status.DEGRADED

        self._cache = HealthReport(status, [result for result, _ in results], now - self._start_time)
        self._cache_time = now
        return self._cache

    @property
    def uptime(self):
        return time.time() - self._start_time

def get_health_checker(ttl=1.0):
    """Process-wide checker. A ttl differing from the current one resets it."""
    global _checker
    if not _checker or _checker._ttl != ttl:
        _checker = HealthChecker(ttl)
    return _checker

# Checks
async def check_event_loop():
    await asyncio.sleep(0)
    return CheckResult("loop", Status.OK)

async def check_entropy():
    try:
        random_bytes(RANDOM_BYTES, op="health:entropy")
    except RandomSourceError as exc:
        return CheckResult("entropy", Status.FAIL, str(exc))
    return CheckResult("entropy", Status.OK)

def create_codec_check(generate, parse_base62, parse_hex):
    """Round-trip a fresh flake through both string encodings."""
    async def check():
        try:
            flake = generate()
            by_base62 = parse_base62(flake.base62)
            by_hex = parse_hex(flake.hex)
        except BaseTimeflakeError as exc:
            return CheckResult("codec", Status.FAIL, str(exc))

        if by_base62.bytes != flake.bytes or by_hex.bytes != flake.bytes:
            return CheckResult("codec", Status.FAIL, f"mismatch@{flake.base62}")
        return CheckResult("codec", Status.OK, flake.base62)
    return check
