"""FastAPI application factory."""

from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

import timeflake
from config import load_config
from core.errors import BaseTimeflakeError, RandomSourceError
from core.health import check_entropy, check_event_loop, create_codec_check, get_health_checker
from internal.logging import StructuredLogger, get_logger, parse_level
from ui.routes import flakes, health


def create_app(config=None):
    """Create and configure the FastAPI application."""
    config = config or load_config()

    StructuredLogger.configure(min_level=parse_level(config.logging.level))
    logger_instance = get_logger()

    health_checker = get_health_checker(config.health.ttl)
    health_checker.register("event_loop", check_event_loop, critical=True)
    health_checker.register("entropy", check_entropy, critical=True)
    health_checker.register("codec", create_codec_check(timeflake.random, timeflake.from_base62, timeflake.from_hex),
                            critical=True)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        logger_instance.info("Application starting", version="1.0.0", encoding=config.flake.encoding)
        yield
        logger_instance.info("Application shutdown complete")

    app = FastAPI(
        title="Timeflake",
        version="1.0.0",
        description="128-bit time-sortable identifiers",
        lifespan=lifespan,
    )

    @app.exception_handler(BaseTimeflakeError)
    async def timeflake_error_handler(request: Request, exc: BaseTimeflakeError):
        # random source failures are transient, everything else is bad input
        status_code = 503 if isinstance(exc, RandomSourceError) else 400
        logger_instance.warn("Request failed", error=exc, path=request.url.path, status=status_code)
        return JSONResponse(content=exc.to_dict(), status_code=status_code)

    flakes.init(config.flake)
    health.init(health_checker)

    app.include_router(flakes.router)
    app.include_router(health.router)

    return app
