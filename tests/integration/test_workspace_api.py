"""Integration tests for the /workspace editor endpoints."""

from __future__ import annotations

import pytest
from httpx import ASGITransport, AsyncClient

from jsonworkbench.api.app import create_app
from jsonworkbench.api.deps import init_document_store, reset_document_store
from jsonworkbench.models.policy import Policy
from jsonworkbench.service.document_store import DocumentStore
from jsonworkbench.service.samples import get_sample
from jsonworkbench.settings import Settings
from jsonworkbench.storage import InMemoryRepository
from tests.conftest import MISSING_VALUE_JSON, FailingRepository


@pytest.fixture
def app():
    settings = Settings(_env_file=None)
    app = create_app(settings=settings)
    init_document_store(DocumentStore(InMemoryRepository()), default_policy=Policy())
    yield app
    reset_document_store()


@pytest.fixture
async def client(app):
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as c:
        yield c


async def _set(client: AsyncClient, content: str) -> dict:
    response = await client.put("/workspace/content", json={"content": content})
    assert response.status_code == 200
    return response.json()


class TestState:
    async def test_starts_with_first_sample(self, client: AsyncClient) -> None:
        response = await client.get("/workspace")
        assert response.status_code == 200
        data = response.json()
        first = get_sample(0)
        assert first is not None
        assert data["content"] == first.content
        assert data["valid"] is True
        assert data["can_save"] is True
        assert data["character_count"] == len(first.content)
        assert data["is_over_limit"] is False
        assert data["last_saved"] is None

    async def test_starts_with_saved_document(self, app) -> None:
        store = DocumentStore(InMemoryRepository())
        store.save('{"saved": true}')
        init_document_store(store)
        async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as c:
            data = (await c.get("/workspace")).json()
        assert data["content"] == '{"saved": true}'
        assert data["last_saved"] is not None

    async def test_edit_revalidates(self, client: AsyncClient) -> None:
        data = await _set(client, MISSING_VALUE_JSON)
        assert data["valid"] is False
        assert data["can_save"] is False
        assert data["error"]["code"] == "SYNTAX_ERROR"
        assert (data["error"]["line"], data["error"]["column"]) == (2, 8)
        assert data["error_message"].endswith("(Line 2, Column 8)")

    async def test_empty_buffer_cannot_be_saved(self, client: AsyncClient) -> None:
        data = await _set(client, "")
        assert data["can_save"] is False


class TestPolicy:
    async def test_flag_change_revalidates(self, client: AsyncClient) -> None:
        assert (await _set(client, '{"a":1,}'))["valid"] is False
        response = await client.patch("/workspace/policy", json={"allow_trailing_commas": True})
        data = response.json()
        assert data["policy"]["allow_trailing_commas"] is True
        assert data["valid"] is True

    @pytest.mark.parametrize("raw", ["abc", "0", "-3", ""])
    async def test_bad_character_limit_ignored(self, client: AsyncClient, raw: str) -> None:
        response = await client.patch("/workspace/policy", json={"max_characters": raw})
        assert response.json()["policy"]["max_characters"] == Policy().max_characters

    async def test_character_limit_applied(self, client: AsyncClient) -> None:
        await _set(client, "[1, 2, 3]")
        response = await client.patch("/workspace/policy", json={"max_characters": "5"})
        data = response.json()
        assert data["policy"]["max_characters"] == 5
        assert data["is_over_limit"] is True
        assert data["error"]["code"] == "LIMIT_EXCEEDED"

    async def test_depth_limit_set_and_cleared(self, client: AsyncClient) -> None:
        await _set(client, '{"a": {}}')
        data = (await client.patch("/workspace/policy", json={"max_depth": 1})).json()
        assert data["error"]["code"] == "DEPTH_EXCEEDED"
        data = (await client.patch("/workspace/policy", json={"max_depth": ""})).json()
        assert data["policy"]["max_depth"] is None
        assert data["valid"] is True

    async def test_omitted_fields_untouched(self, client: AsyncClient) -> None:
        await client.patch("/workspace/policy", json={"max_depth": 4})
        data = (await client.patch("/workspace/policy", json={"allow_comments": True})).json()
        assert data["policy"]["max_depth"] == 4
        assert data["policy"]["allow_comments"] is True


class TestSamples:
    async def test_apply_sample(self, client: AsyncClient) -> None:
        response = await client.post("/workspace/samples/1")
        assert response.status_code == 200
        data = response.json()
        assert data["valid"] is False
        assert data["error"]["code"] == "TRAILING_COMMAS_NOT_ALLOWED"

    @pytest.mark.parametrize("index", [5, -1])
    async def test_missing_sample(self, client: AsyncClient, index: int) -> None:
        before = (await client.get("/workspace")).json()["content"]
        response = await client.post(f"/workspace/samples/{index}")
        assert response.status_code == 404
        assert (await client.get("/workspace")).json()["content"] == before


class TestActions:
    async def test_format(self, client: AsyncClient) -> None:
        await _set(client, '{"a":1}')
        data = (await client.post("/workspace/format")).json()
        assert data["ok"] is True
        assert data["message"] == "JSON formatted successfully"
        assert data["workspace"]["content"] == '{\n  "a": 1\n}'

    async def test_format_invalid_leaves_buffer(self, client: AsyncClient) -> None:
        await _set(client, "[1,")
        data = (await client.post("/workspace/format")).json()
        assert data["ok"] is False
        assert data["level"] == "error"
        assert data["message"] == "Cannot format invalid JSON"
        assert data["workspace"]["content"] == "[1,"

    async def test_save(self, client: AsyncClient) -> None:
        await _set(client, '{"b": 2}')
        data = (await client.post("/workspace/save")).json()
        assert data["ok"] is True
        assert data["message"] == "JSON saved successfully!"
        assert data["workspace"]["last_saved"] is not None
        document = (await client.get("/document")).json()
        assert document["content"] == '{"b": 2}'

    async def test_save_invalid_refused(self, client: AsyncClient) -> None:
        await _set(client, MISSING_VALUE_JSON)
        data = (await client.post("/workspace/save")).json()
        assert data["ok"] is False
        assert data["message"] == "Only valid, non-empty JSON can be saved"
        assert (await client.get("/document")).json()["content"] is None

    async def test_save_failure(self, client: AsyncClient) -> None:
        init_document_store(DocumentStore(FailingRepository()))
        data = (await client.post("/workspace/save")).json()
        assert data["ok"] is False
        assert data["message"] == "Failed to save JSON"
