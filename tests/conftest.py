import logging
from collections.abc import AsyncGenerator, Iterator

import pytest
import structlog
from httpx import ASGITransport, AsyncClient
from starlette.responses import PlainTextResponse
from starlette.types import Receive, Scope, Send

from permittrack.main import app
from permittrack.middleware.request_validation import RequestValidationMiddleware
from permittrack.services.permit_registry import PermitRegistry, get_permit_registry


class DownstreamApp:
    """Stand-in for the routed application: records calls and echoes the body size."""

    def __init__(self) -> None:
        self.calls: list[Scope] = []
        self.bodies: list[bytes] = []

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        self.calls.append(scope)
        if scope["type"] != "http":
            return
        body = b""
        more_body = True
        while more_body:
            message = await receive()
            body += message.get("body", b"")
            more_body = message.get("more_body", False)
        self.bodies.append(body)
        await PlainTextResponse(f"received {len(body)} bytes")(scope, receive, send)


@pytest.fixture
def debug_logging() -> Iterator[None]:
    previous = structlog.get_config()["wrapper_class"]
    structlog.configure(wrapper_class=structlog.make_filtering_bound_logger(logging.DEBUG))
    yield
    structlog.configure(wrapper_class=previous)


@pytest.fixture
def registry() -> PermitRegistry:
    return PermitRegistry()


@pytest.fixture
async def client(registry: PermitRegistry) -> AsyncGenerator[AsyncClient]:
    app.dependency_overrides[get_permit_registry] = lambda: registry

    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test",
    ) as ac:
        yield ac

    app.dependency_overrides.clear()


@pytest.fixture
def downstream() -> DownstreamApp:
    return DownstreamApp()


@pytest.fixture
def guarded_app(downstream: DownstreamApp) -> RequestValidationMiddleware:
    return RequestValidationMiddleware(downstream)


@pytest.fixture
async def guarded_client(
    guarded_app: RequestValidationMiddleware,
) -> AsyncGenerator[AsyncClient]:
    async with AsyncClient(
        transport=ASGITransport(app=guarded_app),
        base_url="http://test",
    ) as ac:
        yield ac
