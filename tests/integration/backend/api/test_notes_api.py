"""
Integration Tests for Notes API.

Tests the read-only notes endpoints against the seeded board.
"""

from types import SimpleNamespace
from unittest.mock import patch

import pytest
from httpx import AsyncClient

from modules.backend.core.config_schema import PaginationSchema


def _pagination_config(default_limit: int, max_limit: int) -> SimpleNamespace:
    pagination = PaginationSchema(default_limit=default_limit, max_limit=max_limit)
    return SimpleNamespace(application=SimpleNamespace(pagination=pagination))


class TestListNotes:
    """Tests for GET /api/v1/notes."""

    @pytest.mark.asyncio
    async def test_lists_all_notes_newest_first(self, client: AsyncClient, api):
        data = api.assert_success(await client.get("/api/v1/notes"))

        assert [note["id"] for note in data["data"]] == [3, 2, 1]
        assert data["pagination"] == {"total": 3, "limit": 20, "offset": 0, "has_more": False}

    @pytest.mark.asyncio
    async def test_limit_and_offset(self, client: AsyncClient, api):
        data = api.assert_success(await client.get("/api/v1/notes?limit=1&offset=1"))

        assert [note["id"] for note in data["data"]] == [2]
        assert data["pagination"]["has_more"] is True

    @pytest.mark.asyncio
    async def test_offset_past_end_is_empty(self, client: AsyncClient, api):
        data = api.assert_success(await client.get("/api/v1/notes?offset=10"))

        assert data["data"] == []
        assert data["pagination"]["has_more"] is False

    @pytest.mark.asyncio
    async def test_limit_above_max_rejected(self, client: AsyncClient, api):
        api.assert_validation_error(await client.get("/api/v1/notes?limit=101"), field="limit")

    @pytest.mark.asyncio
    async def test_configured_default_limit_applies(self, client: AsyncClient, api):
        """Should page by the default limit from application.yaml."""
        with patch(
            "modules.backend.core.pagination.get_app_config",
            return_value=_pagination_config(default_limit=2, max_limit=10),
        ):
            data = api.assert_success(await client.get("/api/v1/notes"))

        assert [note["id"] for note in data["data"]] == [3, 2]
        assert data["pagination"]["limit"] == 2
        assert data["pagination"]["has_more"] is True

    @pytest.mark.asyncio
    async def test_configured_max_limit_applies(self, client: AsyncClient, api):
        with patch(
            "modules.backend.core.pagination.get_app_config",
            return_value=_pagination_config(default_limit=2, max_limit=2),
        ):
            response = await client.get("/api/v1/notes?limit=3")

        api.assert_validation_error(response, field="limit")

    @pytest.mark.asyncio
    async def test_negative_offset_rejected(self, client: AsyncClient, api):
        api.assert_validation_error(await client.get("/api/v1/notes?offset=-1"), field="offset")

    @pytest.mark.asyncio
    async def test_submitted_note_listed_first(self, client: AsyncClient, api):
        await client.post("/api/v1/board/compose")
        await client.put("/api/v1/board/draft", json={"text": "New"})
        await client.post("/api/v1/board/submit")

        data = api.assert_success(await client.get("/api/v1/notes"))
        assert data["data"][0]["text"] == "New"
        assert data["pagination"]["total"] == 4


class TestGetNote:
    """Tests for GET /api/v1/notes/{note_id}."""

    @pytest.mark.asyncio
    async def test_get_existing_note(self, client: AsyncClient, api):
        data = api.assert_success(await client.get("/api/v1/notes/2"))

        assert data["data"] == {"id": 2, "text": "Second", "color": "green", "image_url": None}

    @pytest.mark.asyncio
    async def test_missing_note_is_404(self, client: AsyncClient, api):
        api.assert_error(await client.get("/api/v1/notes/999"), 404, "RES_NOT_FOUND")

    @pytest.mark.asyncio
    async def test_non_integer_id_is_422(self, client: AsyncClient, api):
        api.assert_validation_error(await client.get("/api/v1/notes/abc"), field="note_id")
