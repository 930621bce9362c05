"""Pytest configuration and fixtures.

Every test gets its own SQLite site store under ``tmp_path`` so no rows
leak between tests through the module-level engine cache.
"""

from __future__ import annotations

import sys
from pathlib import Path

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))


@pytest.fixture(autouse=True)
def _isolated_site_store(tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
    from releasesite.services import site_store

    monkeypatch.delenv("DATABASE_URL", raising=False)
    monkeypatch.delenv("SITE_DB_PATH", raising=False)
    monkeypatch.setenv("SITE_DATABASE_URL", f"sqlite+pysqlite:///{tmp_path / 'site_test.db'}")
    site_store.reset_engine_cache()
    yield
    site_store.reset_engine_cache()


@pytest_asyncio.fixture
async def client():
    """ASGI client with raise_app_exceptions=False so 4xx/5xx return response body."""
    from releasesite.main import app

    transport = ASGITransport(app=app, raise_app_exceptions=False)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac


@pytest.fixture
def project_payload() -> dict:
    return {
        "slug": "test-project",
        "name": "Test Project",
        "description": "A project for testing",
        "github_url": "https://github.com/test/project",
        "github_stars": 42,
        "github_forks": 7,
        "license": "MIT",
        "is_featured": False,
    }


@pytest.fixture
def page_payload() -> dict:
    return {
        "slug": "test-page",
        "title": "Test Page",
        "content": "# Test Page\n\nSome markdown content.",
        "meta_description": "A page for testing",
        "is_published": True,
    }
