"""
Noteful API - Note Endpoint Tests
===================================

What:  HTTP-level tests for /api/note against a real (SQLite) store.
How:   httpx AsyncClient over ASGITransport; tables are recreated per test.

`modified` is assigned by the store, so comparisons against seeded rows
leave it out (see fixtures.without_modified).
"""

import pytest

from noteful.config import settings
from noteful.models import Folder, Note

from fixtures import (
    XSS_CONTENT_SANITIZED,
    XSS_NAME_SANITIZED,
    make_folders,
    make_malicious_note,
    make_notes,
    without_modified,
)

NOT_FOUND = {"error": {"message": "note doesn't exist"}}


class TestListNotes:

    @pytest.mark.asyncio
    async def test_empty_list(self, test_client):
        response = await test_client.get("/api/note")

        assert response.status_code == 200
        assert response.json() == []

    @pytest.mark.asyncio
    async def test_all_notes(self, test_client, seed):
        await seed(Folder, make_folders())
        await seed(Note, make_notes())

        response = await test_client.get("/api/note")

        assert response.status_code == 200
        body = response.json()
        assert [without_modified(note) for note in body] == make_notes()
        assert all(note["modified"] for note in body)

    @pytest.mark.asyncio
    async def test_xss_note_sanitized(self, test_client, seed):
        await seed(Folder, make_folders())
        await seed(Note, [make_malicious_note()])

        response = await test_client.get("/api/note")

        assert response.status_code == 200
        note = response.json()[0]
        assert note["note_name"] == XSS_NAME_SANITIZED
        assert note["content"] == XSS_CONTENT_SANITIZED


class TestGetNote:

    @pytest.mark.asyncio
    async def test_not_found(self, test_client):
        response = await test_client.get("/api/note/123456")

        assert response.status_code == 404
        assert response.json() == NOT_FOUND

    @pytest.mark.asyncio
    async def test_specified_note(self, test_client, seed):
        await seed(Folder, make_folders())
        await seed(Note, make_notes())

        response = await test_client.get("/api/note/2")

        assert response.status_code == 200
        assert without_modified(response.json()) == make_notes()[1]

    @pytest.mark.asyncio
    async def test_xss_note_sanitized(self, test_client, seed):
        await seed(Folder, make_folders())
        await seed(Note, [make_malicious_note(folder_id=2)])

        response = await test_client.get("/api/note/911")

        assert response.status_code == 200
        assert response.json()["note_name"] == XSS_NAME_SANITIZED
        assert response.json()["content"] == XSS_CONTENT_SANITIZED


class TestCreateNote:

    @pytest.mark.asyncio
    async def test_creates_note(self, test_client, seed):
        await seed(Folder, make_folders())
        new_note = {
            "note_name": "Test new note",
            "folder_id": 2,
            "content": "Test new note content...",
        }

        response = await test_client.post("/api/note", json=new_note)

        assert response.status_code == 201
        body = response.json()
        assert body["note_name"] == new_note["note_name"]
        assert body["folder_id"] == new_note["folder_id"]
        assert body["content"] == new_note["content"]
        assert "id" in body
        assert body["modified"]
        assert response.headers["location"] == f"/api/note/{body['id']}"

        fetched = await test_client.get(response.headers["location"])
        assert fetched.status_code == 200
        assert fetched.json() == body

    @pytest.mark.asyncio
    async def test_content_is_optional(self, test_client, seed):
        await seed(Folder, make_folders())

        response = await test_client.post("/api/note", json={"note_name": "Bare", "folder_id": 1})

        assert response.status_code == 201
        assert response.json()["content"] is None

    @pytest.mark.parametrize("field", ["note_name", "folder_id"])
    @pytest.mark.asyncio
    async def test_missing_required_field(self, test_client, seed, field):
        await seed(Folder, make_folders())
        new_note = {
            "note_name": "Test new note",
            "folder_id": 2,
            "content": "Test new note content...",
        }
        del new_note[field]

        response = await test_client.post("/api/note", json=new_note)

        assert response.status_code == 400
        assert response.json() == {"error": {"message": f"Missing '{field}' in request body"}}

    @pytest.mark.asyncio
    async def test_xss_removed_from_response(self, test_client, seed):
        await seed(Folder, make_folders())

        response = await test_client.post("/api/note", json=make_malicious_note())

        assert response.status_code == 201
        assert response.json()["note_name"] == XSS_NAME_SANITIZED
        assert response.json()["content"] == XSS_CONTENT_SANITIZED

    @pytest.mark.asyncio
    async def test_modified_not_user_settable(self, test_client, seed):
        await seed(Folder, make_folders())

        response = await test_client.post(
            "/api/note",
            json={"note_name": "n", "folder_id": 1, "modified": "1999-01-01T00:00:00"},
        )

        assert response.status_code == 201
        assert not response.json()["modified"].startswith("1999")

    @pytest.mark.asyncio
    async def test_wrong_type_folder_id(self, test_client, seed):
        await seed(Folder, make_folders())

        response = await test_client.post("/api/note", json={"note_name": "n", "folder_id": "abc"})

        assert response.status_code == 400
        assert "'folder_id'" in response.json()["error"]["message"]

    @pytest.mark.asyncio
    async def test_unknown_folder_is_store_error(self, test_client, seed):
        await seed(Folder, make_folders())

        response = await test_client.post("/api/note", json={"note_name": "orphan", "folder_id": 999})

        assert response.status_code == 500
        assert response.json() == {"error": {"message": "Could not insert note. Please try again."}}
        assert (await test_client.get("/api/note")).json() == []

    @pytest.mark.asyncio
    async def test_store_error_hidden_in_production(self, test_client, seed, monkeypatch):
        await seed(Folder, make_folders())
        monkeypatch.setattr(settings, "environment", "production")

        response = await test_client.post("/api/note", json={"note_name": "orphan", "folder_id": 999})

        assert response.status_code == 500
        assert response.json() == {"error": {"message": "server error"}}


class TestDeleteNote:

    @pytest.mark.asyncio
    async def test_not_found(self, test_client):
        response = await test_client.delete("/api/note/123456")

        assert response.status_code == 404
        assert response.json() == NOT_FOUND

    @pytest.mark.asyncio
    async def test_removes_note(self, test_client, seed):
        await seed(Folder, make_folders())
        await seed(Note, make_notes())

        response = await test_client.delete("/api/note/2")

        assert response.status_code == 204
        listing = (await test_client.get("/api/note")).json()
        assert [without_modified(n) for n in listing] == [
            n for n in make_notes() if n["id"] != 2
        ]
        folders = (await test_client.get("/api/folder")).json()
        assert len(folders) == len(make_folders())


class TestUpdateNote:

    @pytest.mark.asyncio
    async def test_not_found(self, test_client):
        response = await test_client.patch("/api/note/123456")

        assert response.status_code == 404
        assert response.json() == NOT_FOUND

    @pytest.mark.asyncio
    async def test_updates_note(self, test_client, seed):
        await seed(Folder, make_folders())
        await seed(Note, make_notes())
        before = (await test_client.get("/api/note/2")).json()
        update = {
            "note_name": "updated note name",
            "folder_id": 2,
            "content": "updated note content",
        }

        response = await test_client.patch("/api/note/2", json=update)

        assert response.status_code == 204
        assert response.content == b""
        after = (await test_client.get("/api/note/2")).json()
        assert after == {**before, **update}

    @pytest.mark.asyncio
    async def test_no_required_fields(self, test_client, seed):
        await seed(Folder, make_folders())
        await seed(Note, make_notes())

        response = await test_client.patch("/api/note/2", json={"irrelevantField": "foo"})

        assert response.status_code == 400
        assert response.json() == {
            "error": {
                "message": "Request body must contain either 'note_name', 'folder_id' or 'content'"
            }
        }

    @pytest.mark.asyncio
    async def test_subset_of_fields(self, test_client, seed):
        await seed(Folder, make_folders())
        await seed(Note, make_notes())
        before = (await test_client.get("/api/note/2")).json()

        response = await test_client.patch(
            "/api/note/2",
            json={
                "note_name": "updated note title",
                "fieldToIgnore": "should not be in GET response",
            },
        )

        assert response.status_code == 204
        after = (await test_client.get("/api/note/2")).json()
        assert after == {**before, "note_name": "updated note title"}
        assert "fieldToIgnore" not in after

    @pytest.mark.asyncio
    async def test_empty_content_clears_text(self, test_client, seed):
        await seed(Folder, make_folders())
        await seed(Note, make_notes())

        response = await test_client.patch("/api/note/1", json={"content": ""})

        assert response.status_code == 204
        assert (await test_client.get("/api/note/1")).json()["content"] == ""

    @pytest.mark.asyncio
    async def test_null_fields_do_not_count(self, test_client, seed):
        await seed(Folder, make_folders())
        await seed(Note, make_notes())

        response = await test_client.patch(
            "/api/note/1", json={"note_name": None, "content": None}
        )

        assert response.status_code == 400
        assert (await test_client.get("/api/note/1")).json()["note_name"] == "Dogs"

    @pytest.mark.asyncio
    async def test_move_to_other_folder(self, test_client, seed):
        await seed(Folder, make_folders())
        await seed(Note, make_notes())

        response = await test_client.patch("/api/note/1", json={"folder_id": 3})

        assert response.status_code == 204
        note = (await test_client.get("/api/note/1")).json()
        assert note["folder_id"] == 3
        assert note["content"] == "Corgis are the best."

    @pytest.mark.asyncio
    async def test_unknown_folder_on_patch_is_store_error(self, test_client, seed):
        await seed(Folder, make_folders())
        await seed(Note, make_notes())
        before = (await test_client.get("/api/note/1")).json()

        response = await test_client.patch(
            "/api/note/1", json={"folder_id": 999, "note_name": "moved"}
        )

        assert response.status_code == 500
        assert response.json() == {"error": {"message": "Could not update note. Please try again."}}
        assert (await test_client.get("/api/note/1")).json() == before
