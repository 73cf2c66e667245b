"""
QuickNotes Backend: Notes Endpoint Tests
===========================================

What:  HTTP-level tests for GET /notes, GET /notes/{id} and POST /notes.
How:   HTTPX AsyncClient against a fresh app per test (see conftest.py).

What we test:
    ✅ Envelope shape and Content-Type for success and failure
    ✅ Every error code with its HTTP status
    ✅ Malformed bodies never touch the store
    ✅ Create → get → list round trip
"""

from datetime import datetime

import pytest
from httpx import AsyncClient, ASGITransport

from quicknotes.main import create_app
from quicknotes.services.note_store import NoteStore


async def create(client, title="A", content="B"):
    return await client.post("/notes", json={"title": title, "content": content})


def assert_error(response, status, code):
    assert response.status_code == status
    assert response.headers["content-type"].startswith("application/json")
    body = response.json()
    assert body["data"] is None
    assert body["error"]["code"] == code
    assert body["error"]["message"]


class TestListNotes:
    @pytest.mark.asyncio
    async def test_empty_list(self, test_client):
        response = await test_client.get("/notes")
        assert response.status_code == 200
        assert response.headers["content-type"].startswith("application/json")
        assert response.json() == {"data": []}

    @pytest.mark.asyncio
    async def test_lists_in_creation_order(self, test_client):
        await create(test_client, "A", "B")
        await create(test_client, "C", "D")

        body = (await test_client.get("/notes")).json()
        assert [n["id"] for n in body["data"]] == [0, 1]
        assert [n["title"] for n in body["data"]] == ["A", "C"]
        assert "error" not in body

    @pytest.mark.asyncio
    async def test_repeated_reads_identical(self, test_client):
        await create(test_client)
        first = await test_client.get("/notes")
        second = await test_client.get("/notes")
        assert first.json() == second.json()


class TestCreateNote:
    @pytest.mark.asyncio
    async def test_create_returns_note(self, test_client, fixed_clock):
        response = await create(test_client, "A", "B")
        assert response.status_code == 200

        body = response.json()
        assert "error" not in body
        note = body["data"]
        assert set(note) == {"id", "title", "content", "createdAt"}
        assert note["id"] == 0
        assert note["title"] == "A"
        assert note["content"] == "B"
        created_at = datetime.fromisoformat(note["createdAt"].replace("Z", "+00:00"))
        assert created_at == fixed_clock.now

    @pytest.mark.asyncio
    async def test_second_create_gets_next_id(self, test_client):
        await create(test_client)
        response = await create(test_client)
        assert response.json()["data"]["id"] == 1

    @pytest.mark.asyncio
    async def test_empty_title(self, test_client, note_store):
        response = await create(test_client, "", "B")
        assert_error(response, 422, "note_title_invalid")
        assert response.json()["error"]["message"] == "Note title can not be empty"
        assert note_store.count == 0

    @pytest.mark.asyncio
    async def test_empty_title_wins_over_empty_content(self, test_client):
        response = await create(test_client, "", "")
        assert_error(response, 422, "note_title_invalid")

    @pytest.mark.asyncio
    async def test_empty_content(self, test_client, note_store):
        response = await create(test_client, "A", "")
        assert_error(response, 422, "note_content_invalid")
        assert note_store.count == 0

    @pytest.mark.asyncio
    async def test_missing_fields_are_empty(self, test_client):
        response = await test_client.post("/notes", json={"content": "B"})
        assert_error(response, 422, "note_title_invalid")

        response = await test_client.post("/notes", json={"title": "A"})
        assert_error(response, 422, "note_content_invalid")

    @pytest.mark.asyncio
    async def test_unknown_fields_ignored(self, test_client):
        response = await test_client.post(
            "/notes", json={"title": "A", "content": "B", "id": 99, "pinned": True}
        )
        assert response.status_code == 200
        assert response.json()["data"]["id"] == 0

    @pytest.mark.asyncio
    @pytest.mark.parametrize("raw", [
        b"{not json",
        b"",
        b'{"title": "A", "content": "B"',
        b"[]",
        b'"just a string"',
        b'{"title": 5, "content": "B"}',
        b'{"title": "A", "content": ["B"]}',
        b'{"title": "A", "content": "B"} trailing',
        b'{"title": "A", "content": "B"}{"title": "C", "content": "D"}',
    ])
    async def test_malformed_body(self, test_client, note_store, raw):
        before = note_store.count
        response = await test_client.post(
            "/notes", content=raw, headers={"Content-Type": "application/json"}
        )
        assert_error(response, 400, "body_invalid")
        assert response.json()["error"]["message"] == "Request body is not valid JSON"
        assert note_store.count == before

    @pytest.mark.asyncio
    async def test_malformed_body_after_existing_notes(self, test_client, note_store):
        await create(test_client)
        response = await test_client.post("/notes", content=b"oops")
        assert_error(response, 400, "body_invalid")
        assert note_store.count == 1


class TestGetNote:
    @pytest.mark.asyncio
    async def test_round_trip(self, test_client):
        created = (await create(test_client, "Title", "Body")).json()["data"]

        response = await test_client.get(f"/notes/{created['id']}")
        assert response.status_code == 200
        assert response.json() == {"data": created}

        listed = (await test_client.get("/notes")).json()["data"]
        assert listed.count(created) == 1

    @pytest.mark.asyncio
    async def test_non_numeric_id_empty_store(self, test_client):
        response = await test_client.get("/notes/abc")
        assert_error(response, 400, "note_id_invalid")
        assert response.json()["error"]["message"] == "Note ID is invalid: abc"

    @pytest.mark.asyncio
    async def test_non_numeric_id_with_notes(self, test_client):
        await create(test_client)
        response = await test_client.get("/notes/abc")
        assert_error(response, 400, "note_id_invalid")

    @pytest.mark.asyncio
    async def test_unknown_id(self, test_client):
        await create(test_client)
        response = await test_client.get("/notes/5")
        assert_error(response, 404, "note_not_found")
        assert response.json()["error"]["message"] == "Note not found: 5"

    @pytest.mark.asyncio
    async def test_unknown_id_echoes_raw_segment(self, test_client):
        response = await test_client.get("/notes/+05")
        assert_error(response, 404, "note_not_found")
        assert response.json()["error"]["message"] == "Note not found: +05"

    @pytest.mark.asyncio
    async def test_out_of_range_id_is_invalid(self, test_client):
        await create(test_client)
        response = await test_client.get("/notes/99999999999999999999")
        assert_error(response, 400, "note_id_invalid")
        assert response.json()["error"]["message"] == "Note ID is invalid: 99999999999999999999"

    @pytest.mark.asyncio
    async def test_repeated_gets_identical(self, test_client):
        await create(test_client)
        first = await test_client.get("/notes/0")
        second = await test_client.get("/notes/0")
        assert first.json() == second.json()


class TestErrorHandling:
    @pytest.mark.asyncio
    async def test_unexpected_error_is_internal(self, note_store, monkeypatch, caplog):
        app = create_app(store=note_store)

        def explode():
            raise RuntimeError("boom")

        monkeypatch.setattr(app.state.note_service, "list_notes", explode)

        transport = ASGITransport(app=app)
        async with AsyncClient(transport=transport, base_url="http://test") as client:
            with caplog.at_level("ERROR", logger="quicknotes.main"):
                response = await client.get(
                    "/notes",
                    headers={"X-Request-ID": "rid-500", "Origin": "http://localhost:3000"},
                )

        assert_error(response, 500, "internal")
        assert response.json()["error"]["message"] == "Internal error"
        assert "boom" not in response.text

        # The 500 still passes back through the application middleware
        assert response.headers["X-Request-ID"] == "rid-500"
        assert response.headers["access-control-allow-origin"] == "*"
        assert "[rid-500] Unexpected error: boom" in caplog.text
        assert "[rid-500] API request error: internal: Internal error [500]" in caplog.text

    @pytest.mark.asyncio
    async def test_fresh_app_per_store(self, test_client):
        await create(test_client)
        other = create_app(store=NoteStore())
        transport = ASGITransport(app=other)
        async with AsyncClient(transport=transport, base_url="http://test") as client:
            response = await client.get("/notes")
        assert response.json() == {"data": []}


class TestMiddleware:
    @pytest.mark.asyncio
    async def test_request_id_generated(self, test_client):
        response = await test_client.get("/notes")
        assert len(response.headers["X-Request-ID"]) == 8

    @pytest.mark.asyncio
    async def test_request_id_echoed(self, test_client):
        response = await test_client.get("/notes", headers={"X-Request-ID": "abc123"})
        assert response.headers["X-Request-ID"] == "abc123"

    @pytest.mark.asyncio
    async def test_request_id_on_errors(self, test_client):
        response = await test_client.get("/notes/abc", headers={"X-Request-ID": "err-1"})
        assert response.headers["X-Request-ID"] == "err-1"

    @pytest.mark.asyncio
    async def test_errors_are_logged_with_status(self, test_client, caplog):
        with caplog.at_level("WARNING", logger="quicknotes.main"):
            await test_client.get("/notes/7")
        assert "note_not_found: Note not found: 7 [404]" in caplog.text


class TestHealth:
    @pytest.mark.asyncio
    async def test_health_reports_note_count(self, test_client):
        await create(test_client)
        response = await test_client.get("/health")
        assert response.status_code == 200
        body = response.json()
        assert body["status"] == "healthy"
        assert body["notes"] == 1
        assert body["version"] == "1.0.0"
