"""Integration tests for policy, job and health endpoints."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest


if TYPE_CHECKING:
    import httpx

    from meal_planner.core.config import ConfigManager


pytestmark = pytest.mark.integration


class TestRecipeSourceConfig:
    """Tests for /config/recipe-sources."""

    async def test_get_defaults(self, client: httpx.AsyncClient) -> None:
        """Should return the policy in camelCase."""
        response = await client.get("/config/recipe-sources")

        assert response.status_code == 200
        assert response.json() == {
            "preferApi": True,
            "enhanceAiRecipes": True,
            "fallbackToAi": True,
            "validateResults": True,
            "defaultApiSource": "spoonacular",
            "cacheTtl": 3600000,
        }

    async def test_patch(
        self,
        client: httpx.AsyncClient,
        config_manager: ConfigManager,
    ) -> None:
        """Should merge the changes into the active policy."""
        response = await client.patch(
            "/config/recipe-sources", json={"fallbackToAi": False, "cacheTtl": 500}
        )

        assert response.status_code == 200
        assert response.json()["fallbackToAi"] is False
        assert config_manager.get_config().cache_ttl == 500

    async def test_patch_invalid_source(
        self,
        client: httpx.AsyncClient,
        config_manager: ConfigManager,
    ) -> None:
        """Should answer 400 and keep the old policy."""
        response = await client.patch(
            "/config/recipe-sources", json={"defaultApiSource": "allrecipes"}
        )

        assert response.status_code == 400
        body = response.json()
        assert body["error"] == "BAD_REQUEST"
        assert body["details"][0]["code"] == "enum"
        assert config_manager.get_config().default_api_source == "spoonacular"

    async def test_reset(
        self,
        client: httpx.AsyncClient,
        config_manager: ConfigManager,
    ) -> None:
        """Should restore the defaults."""
        config_manager.set_config(prefer_api=False)

        response = await client.delete("/config/recipe-sources")

        assert response.status_code == 200
        assert response.json()["preferApi"] is True


class TestJobs:
    """Tests for /jobs."""

    async def test_lifecycle(self, client: httpx.AsyncClient) -> None:
        """Should create, update and complete a job."""
        created = await client.post("/jobs", json={"jobId": "job-1", "message": "Queued"})
        assert created.status_code == 201
        assert created.json()["status"] == "analyzing"

        updated = await client.patch("/jobs/job-1", json={"status": "saving", "progress": 80})
        assert updated.status_code == 200
        assert updated.json()["progress"] == 80

        done = await client.patch(
            "/jobs/job-1", json={"status": "completed", "data": {"title": "Soup"}}
        )
        assert done.json()["progress"] == 100

        fetched = await client.get("/jobs/job-1")
        assert fetched.json()["data"] == {"title": "Soup"}

    async def test_duplicate(self, client: httpx.AsyncClient) -> None:
        """Should answer 409 for an id in use."""
        await client.post("/jobs", json={"jobId": "job-1"})

        response = await client.post("/jobs", json={"jobId": "job-1"})

        assert response.status_code == 409

    async def test_unknown_job(self, client: httpx.AsyncClient) -> None:
        """Should answer 404 for unknown ids."""
        assert (await client.get("/jobs/missing")).status_code == 404
        assert (await client.patch("/jobs/missing", json={"progress": 1})).status_code == 404

    async def test_update_after_finish(self, client: httpx.AsyncClient) -> None:
        """Should answer 409 once the job finished."""
        await client.post("/jobs", json={"jobId": "job-1"})
        await client.patch("/jobs/job-1", json={"status": "failed"})

        response = await client.patch("/jobs/job-1", json={"progress": 10})

        assert response.status_code == 409

    async def test_invalid_progress(self, client: httpx.AsyncClient) -> None:
        """Should answer 400 for progress outside 0-100."""
        await client.post("/jobs", json={"jobId": "job-1"})

        response = await client.patch("/jobs/job-1", json={"progress": 150})

        assert response.status_code == 400

    async def test_wait_returns_latest_status_on_timeout(
        self, client: httpx.AsyncClient
    ) -> None:
        """Should answer with the current status when the wait elapses."""
        await client.post("/jobs", json={"jobId": "job-1"})

        response = await client.get("/jobs/job-1", params={"wait": 0.01})

        assert response.status_code == 200
        assert response.json()["status"] == "analyzing"


class TestHealth:
    """Tests for /health."""

    async def test_health(self, client: httpx.AsyncClient) -> None:
        """Should report service state and echo a request id."""
        response = await client.get("/health", headers={"X-Request-ID": "req-123"})

        assert response.status_code == 200
        body = response.json()
        assert body["status"] == "healthy"
        assert body["environment"] == "test"
        assert body["recipeApiConfigured"] is True
        assert body["aiProvider"] == "openai"
        assert body["cacheEntries"] == 0
        assert response.headers["X-Request-ID"] == "req-123"

    async def test_error_body_carries_request_id(self, client: httpx.AsyncClient) -> None:
        """Should include the request id in error responses."""
        response = await client.get("/jobs/missing", headers={"X-Request-ID": "req-9"})

        assert response.json()["request_id"] == "req-9"
