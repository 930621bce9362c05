from __future__ import annotations

import pytest
from httpx import AsyncClient

from releasesite.models.error import ErrorDetail


@pytest.mark.asyncio
async def test_create_get_list_projects(client: AsyncClient, project_payload: dict) -> None:
    resp = await client.post("/api/projects", json=project_payload)
    assert resp.status_code == 201
    created = resp.json()
    assert created["slug"] == "test-project"
    assert created["github_stars"] == 42
    assert isinstance(created["id"], int)

    by_slug = await client.get("/api/projects/test-project")
    assert by_slug.status_code == 200
    assert by_slug.json() == created

    listed = await client.get("/api/projects")
    assert listed.status_code == 200
    assert [row["slug"] for row in listed.json()] == ["test-project"]


@pytest.mark.asyncio
async def test_create_project_defaults(client: AsyncClient) -> None:
    resp = await client.post(
        "/api/projects",
        json={
            "slug": "cli",
            "name": "CLI",
            "description": "Release tools for bash workflows",
            "github_url": "https://github.com/releasetools/cli",
        },
    )
    assert resp.status_code == 201
    body = resp.json()
    assert body["github_stars"] == 0
    assert body["github_forks"] == 0
    assert body["license"] == "Apache-2.0"
    assert body["is_featured"] is False


@pytest.mark.asyncio
async def test_create_project_duplicate_slug_409(client: AsyncClient, project_payload: dict) -> None:
    first = await client.post("/api/projects", json=project_payload)
    assert first.status_code == 201

    second = await client.post("/api/projects", json={**project_payload, "name": "Copy"})
    assert second.status_code == 409
    assert second.json() == {"detail": "Project with slug 'test-project' already exists"}


@pytest.mark.asyncio
async def test_create_project_422(client: AsyncClient, project_payload: dict) -> None:
    bad_url = await client.post("/api/projects", json={**project_payload, "github_url": "nope"})
    assert bad_url.status_code == 422
    negative = await client.post("/api/projects", json={**project_payload, "github_forks": -3})
    assert negative.status_code == 422
    missing = await client.post("/api/projects", json={"slug": "x"})
    assert missing.status_code == 422


@pytest.mark.asyncio
async def test_featured_projects_filter(client: AsyncClient, project_payload: dict) -> None:
    await client.post("/api/projects", json={**project_payload, "slug": "plain"})
    await client.post("/api/projects", json={**project_payload, "slug": "star", "is_featured": True})

    featured = await client.get("/api/projects", params={"featured": "true"})
    assert featured.status_code == 200
    assert [row["slug"] for row in featured.json()] == ["star"]

    listed = await client.get("/api/projects")
    assert [row["slug"] for row in listed.json()] == ["star", "plain"]


@pytest.mark.asyncio
async def test_get_project_404(client: AsyncClient) -> None:
    resp = await client.get("/api/projects/nonexistent")
    assert resp.status_code == 404
    assert resp.json() == {"detail": "Project not found"}


@pytest.mark.asyncio
async def test_patch_project(client: AsyncClient, project_payload: dict) -> None:
    created = (await client.post("/api/projects", json=project_payload)).json()

    resp = await client.patch(f"/api/projects/{created['id']}", json={"github_stars": 500, "is_featured": True})
    assert resp.status_code == 200
    body = resp.json()
    assert body["github_stars"] == 500
    assert body["is_featured"] is True
    assert body["name"] == created["name"]
    assert body["created_at"] == created["created_at"]

    reread = await client.get("/api/projects/test-project")
    assert reread.json() == body


@pytest.mark.asyncio
async def test_patch_project_empty_body_returns_current_row(client: AsyncClient, project_payload: dict) -> None:
    created = (await client.post("/api/projects", json=project_payload)).json()

    resp = await client.patch(f"/api/projects/{created['id']}", json={})
    assert resp.status_code == 200
    assert resp.json() == created


@pytest.mark.asyncio
async def test_patch_project_errors(client: AsyncClient, project_payload: dict) -> None:
    await client.post("/api/projects", json={**project_payload, "slug": "taken"})
    other = (await client.post("/api/projects", json={**project_payload, "slug": "other"})).json()

    missing = await client.patch("/api/projects/9999", json={"name": "x"})
    assert missing.status_code == 404
    assert missing.json() == {"detail": "Project not found"}

    conflict = await client.patch(f"/api/projects/{other['id']}", json={"slug": "taken"})
    assert conflict.status_code == 409

    null_name = await client.patch(f"/api/projects/{other['id']}", json={"name": None})
    assert null_name.status_code == 422


@pytest.mark.asyncio
async def test_project_slug_featured_is_fetchable(client: AsyncClient, project_payload: dict) -> None:
    created = await client.post("/api/projects", json={**project_payload, "slug": "featured"})
    assert created.status_code == 201

    resp = await client.get("/api/projects/featured")
    assert resp.status_code == 200
    assert resp.json() == created.json()


@pytest.mark.asyncio
async def test_create_project_keeps_github_url_as_sent(client: AsyncClient, project_payload: dict) -> None:
    created = await client.post("/api/projects", json={**project_payload, "github_url": "https://GitHub.com"})
    assert created.status_code == 201
    assert created.json()["github_url"] == "https://GitHub.com"

    fetched = await client.get(f"/api/projects/{project_payload['slug']}")
    assert fetched.json()["github_url"] == "https://GitHub.com"


@pytest.mark.asyncio
async def test_not_found_body_matches_error_schema(client: AsyncClient) -> None:
    resp = await client.get("/api/projects/nope")
    assert resp.status_code == 404
    assert ErrorDetail.model_validate(resp.json()).detail == "Project not found"

    schema = (await client.get("/openapi.json")).json()
    assert "ErrorDetail" in schema["components"]["schemas"]
