"""Unit tests for health checks."""

import pytest

import timeflake
from core.errors import RandomSourceError
from core.health import (
    CheckResult,
    HealthChecker,
    Status,
    check_entropy,
    check_event_loop,
    create_codec_check,
    get_health_checker,
)


class TestHealthChecker:
    """Tests for HealthChecker aggregation."""

    @pytest.mark.asyncio
    async def test_all_ok(self):
        """No failing checks is healthy."""
        checker = HealthChecker(ttl=0)
        checker.register("loop", check_event_loop)
        report = await checker.check()
        assert report.status == Status.OK
        assert report.to_dict()["checks"] == [{"name": "loop", "status": "healthy", "msg": ""}]

    @pytest.mark.asyncio
    async def test_critical_failure(self):
        """A failing critical check fails the report."""
        async def failing():
            raise RuntimeError("down")

        checker = HealthChecker(ttl=0)
        checker.register("bad", failing, critical=True)
        report = await checker.check()
        assert report.status == Status.FAIL
        assert report.checks[0].msg == "down"

    @pytest.mark.asyncio
    async def test_non_critical_failure_degrades(self):
        """A failing non-critical check only degrades."""
        async def failing():
            return CheckResult("opt", Status.FAIL, "meh")

        checker = HealthChecker(ttl=0)
        checker.register("loop", check_event_loop)
        checker.register("opt", failing, critical=False)
        assert (await checker.check()).status == Status.DEGRADED

    @pytest.mark.asyncio
    async def test_cached(self):
        """Reports are cached for ttl seconds."""
        checker = HealthChecker(ttl=60)
        checker.register("loop", check_event_loop)
        assert await checker.check() is await checker.check()

    def test_singleton_follows_ttl(self):
        """A new ttl replaces the shared checker, the same ttl reuses it."""
        first = get_health_checker(2.5)
        assert get_health_checker(2.5) is first
        second = get_health_checker(0.5)
        assert second is not first
        assert second._ttl == 0.5


class TestChecks:
    """Tests for individual checks."""

    @pytest.mark.asyncio
    async def test_entropy_ok(self):
        """Entropy check passes with a working source."""
        assert (await check_entropy()).status == Status.OK

    @pytest.mark.asyncio
    async def test_entropy_failure(self, monkeypatch):
        """Entropy check fails when the source fails."""
        def broken(n):
            raise OSError("exhausted")

        monkeypatch.setattr("utils.entropy.secrets.token_bytes", broken)
        result = await check_entropy()
        assert result.status == Status.FAIL
        assert "health:entropy" in result.msg

    @pytest.mark.asyncio
    async def test_codec_ok(self):
        """Codec check round-trips a fresh flake."""
        check = create_codec_check(timeflake.random, timeflake.from_base62, timeflake.from_hex)
        result = await check()
        assert result.status == Status.OK
        assert len(result.msg) == 22

    @pytest.mark.asyncio
    async def test_codec_mismatch(self):
        """A decoder returning a different flake fails the check."""
        zero = timeflake.from_bytes(b"\x00" * 16)
        check = create_codec_check(lambda: timeflake.from_values(1000, 5), lambda s: zero, timeflake.from_hex)
        result = await check()
        assert result.status == Status.FAIL
        assert result.msg.startswith("mismatch@")

    @pytest.mark.asyncio
    async def test_codec_error(self):
        """Errors from generation fail the check."""
        def generate():
            raise RandomSourceError("exhausted", op="timeflake:random")

        check = create_codec_check(generate, timeflake.from_base62, timeflake.from_hex)
        result = await check()
        assert result.status == Status.FAIL
        assert result.msg == "timeflake:random: exhausted"
