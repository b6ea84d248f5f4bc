"""
Hello Server — Test Configuration (conftest.py)
=================================================

What:  Shared pytest fixtures for the entire test suite.
How:   pytest auto-discovers conftest.py and makes fixtures available to all tests.

Fixture Hierarchy (all function-scoped):
    ├── static_dir:        Temporary static root with a couple of files
    ├── test_settings:     Settings pointing at static_dir
    ├── middleware_style:  Parametrized over both say-hi implementations
    ├── app:               Fresh create_app() instance (own counter)
    └── test_client:       HTTPX AsyncClient bound to `app` via ASGITransport
"""

import os
import tempfile

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

# ══════════════════════════════════════════════════════════════════════════
# Environment Setup
# ══════════════════════════════════════════════════════════════════════════

# Must happen before hello_server.config builds its singleton
os.environ["LOG_LEVEL"] = "WARNING"
os.environ["STATIC_ROOT"] = tempfile.mkdtemp(prefix="hello_server_test_")

from hello_server.config import Settings  # noqa: E402
from hello_server.main import create_app  # noqa: E402


# ══════════════════════════════════════════════════════════════════════════
# Function-Scoped Fixtures
# ══════════════════════════════════════════════════════════════════════════

@pytest.fixture
def static_dir(tmp_path):
    """
    A static root containing:
        index.html       served for GET /static/
        hello.txt        served for GET /static/hello.txt
        docs/index.html  served for GET /static/docs/
    """
    root = tmp_path / "static"
    (root / "docs").mkdir(parents=True)
    (root / "index.html").write_text("<h1>static index</h1>")
    (root / "hello.txt").write_text("hello from disk")
    (root / "docs" / "index.html").write_text("<h1>docs</h1>")
    return root


@pytest.fixture
def test_settings(static_dir):
    return Settings(static_root=str(static_dir), log_level="WARNING")


@pytest.fixture(params=["dispatch", "asgi"])
def middleware_style(request):
    """Runs the dependent test once per say-hi middleware implementation."""
    return request.param


@pytest.fixture
def app(test_settings, middleware_style):
    config = test_settings.model_copy(update={"middleware_style": middleware_style})
    return create_app(config)


@pytest_asyncio.fixture
async def test_client(app):
    """
    HTTPX AsyncClient talking to `app` in-process.

    Usage:
        async def test_health(test_client):
            response = await test_client.get("/health")
            assert response.status_code == 200
    """
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
