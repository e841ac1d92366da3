"""Shared fixtures: a fresh registry per test and an ASGI client wired to it."""

import os

# Keep test runs from writing a log file or reaching a chain
os.environ.setdefault("LOG_FILE", "")
os.environ.setdefault("NETWORK", "local")

import pytest
from httpx import ASGITransport, AsyncClient

from estate_registry import app
from estate_registry.core.registry import Registry
from estate_registry.routes.documents import get_registry

ALICE = "0x" + "a1" * 20
BOB = "0x" + "b2" * 20
CAROL = "0x" + "c3" * 20


@pytest.fixture
def registry() -> Registry:
    return Registry()


@pytest.fixture
def deed(registry: Registry) -> int:
    """Document 1, owned by ALICE."""
    return registry.register(ALICE, "Deed123", 5000, "Lot 7 deed", ["deed", "lot7"])


@pytest.fixture
async def client(registry: Registry):
    """Async HTTP client against the FastAPI app, backed by the test registry."""
    app.dependency_overrides[get_registry] = lambda: registry
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
    app.dependency_overrides.clear()
