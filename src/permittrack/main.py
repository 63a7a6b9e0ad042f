import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

import structlog
import uvicorn
from fastapi import FastAPI

from permittrack.config import settings
from permittrack.middleware.errors import register_exception_handlers
from permittrack.middleware.request_validation import RequestValidationMiddleware
from permittrack.routes.permits import router as permits_router

structlog.configure(
    processors=[
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.JSONRenderer(),
    ],
    wrapper_class=structlog.make_filtering_bound_logger(
        logging.getLevelName(settings.log_level)
    ),
    logger_factory=structlog.PrintLoggerFactory(),
)

log = structlog.get_logger()


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    log.info("starting", env=settings.app_env)
    yield
    log.info("shutdown")


app = FastAPI(title="PermitTrack", version="0.1.0", lifespan=lifespan)

register_exception_handlers(app)

# Runs outside the exception handlers: rejected requests never reach routing
app.add_middleware(RequestValidationMiddleware)

app.include_router(permits_router)


def run() -> None:
    """Serve the app with uvicorn, bound to the configured host and port."""
    uvicorn.run(
        "permittrack.main:app",
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )
