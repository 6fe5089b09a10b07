"""Tests for the REST API."""

import pytest
from fastapi.testclient import TestClient

from promptimize import encode
from promptimize.api import create_app
from promptimize.core.exceptions import ClipboardError


@pytest.fixture
def client(core):
    return TestClient(create_app(core=core))


class TestHealth:
    """Tests for health and root endpoints."""

    def test_health(self, client):
        response = client.get("/health")
        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "healthy"
        assert data["history_size"] == 0

    def test_root(self, client):
        data = client.get("/").json()
        assert data["endpoints"]["improve"] == "/api/v1/improve"


class TestEnhancementRoutes:
    """Tests for improve, analyze and diff."""

    def test_improve(self, client, short_prompt, short_prompt_improved):
        response = client.post("/api/v1/improve", json={"prompt": short_prompt})
        assert response.status_code == 200
        data = response.json()
        assert data["success"] is True
        assert data["improved_prompt"] == short_prompt_improved
        assert data["analysis"]["score"] == 1
        assert data["chat"]["versions"] == [short_prompt_improved]

    def test_improve_twice_merges(self, client, short_prompt):
        first = client.post("/api/v1/improve", json={"prompt": short_prompt}).json()
        second = client.post("/api/v1/improve", json={"prompt": short_prompt + "  "}).json()
        assert second["chat"]["id"] == first["chat"]["id"]
        assert len(second["chat"]["versions"]) == 2

    def test_improve_blank(self, client):
        response = client.post("/api/v1/improve", json={"prompt": "   "})
        assert response.status_code == 400
        assert response.json()["detail"] == "The prompt field cannot be empty"

    def test_improve_missing_field(self, client):
        assert client.post("/api/v1/improve", json={}).status_code == 422

    def test_analyze(self, client, rich_prompt):
        data = client.post("/api/v1/analyze", json={"prompt": rich_prompt}).json()
        assert data == {"score": 8, "percent": 80, "suggestions": []}

    def test_analyze_empty(self, client):
        data = client.post("/api/v1/analyze", json={}).json()
        assert data["score"] == 1
        assert len(data["suggestions"]) == 4

    def test_diff(self, client):
        data = client.post(
            "/api/v1/diff",
            json={"original": "hello world", "improved": "hello there world"}
        ).json()
        assert data["added_count"] == 1
        assert "".join(t["text"] for t in data["tokens"]) == "hello there world"

    def test_rules(self, client):
        data = client.get("/api/v1/rules").json()
        assert data["total"] == 5
        assert data["rules"][0]["name"] == "add_detail_prefix"


class TestHistoryRoutes:
    """Tests for history endpoints."""

    def _improve(self, client, prompt):
        return client.post("/api/v1/improve", json={"prompt": prompt}).json()["chat"]

    def test_list(self, client):
        self._improve(client, "A")
        self._improve(client, "B")
        data = client.get("/api/v1/history").json()
        assert data["total"] == 2
        assert [c["prompt"] for c in data["chats"]] == ["B", "A"]

    def test_favorite_and_list(self, client):
        chat = self._improve(client, "A")
        response = client.post(f"/api/v1/history/{chat['id']}/favorite")
        assert response.json()["favorited"] is True

        data = client.get("/api/v1/history/favorites").json()
        assert [c["id"] for c in data["chats"]] == [chat["id"]]

    def test_favorite_unknown(self, client):
        assert client.post("/api/v1/history/missing/favorite").status_code == 404

    def test_delete(self, client):
        chat = self._improve(client, "A")
        assert client.delete(f"/api/v1/history/{chat['id']}").json() == {"deleted": True}
        assert client.delete(f"/api/v1/history/{chat['id']}").json() == {"deleted": False}
        assert client.get("/api/v1/history").json()["total"] == 0

    def test_versions(self, client):
        chat = self._improve(client, "Write a poem")
        self._improve(client, "Write a poem")
        data = client.get(f"/api/v1/history/{chat['id']}/versions").json()
        assert data["prompt"] == "Write a poem"
        assert [v["index"] for v in data["versions"]] == [1, 2]

    def test_versions_unknown(self, client):
        assert client.get("/api/v1/history/missing/versions").status_code == 404


class TestShareRoutes:
    """Tests for share endpoints."""

    def test_create_link(self, client, short_prompt):
        chat = client.post("/api/v1/improve", json={"prompt": short_prompt}).json()["chat"]
        data = client.post("/api/v1/share", json={"chat_id": chat["id"]}).json()
        assert data["url"] == f"http://localhost:8000/?share={data['token']}"
        assert data["copied"] is False

    def test_create_link_unknown(self, client):
        response = client.post("/api/v1/share", json={"chat_id": "missing"})
        assert response.status_code == 404

    def test_create_link_clipboard_failure(self, client, core, monkeypatch):
        chat = client.post("/api/v1/improve", json={"prompt": "A"}).json()["chat"]

        def unavailable(text):
            raise ClipboardError("Failed to copy to clipboard")

        monkeypatch.setattr(core, "copy", unavailable)
        response = client.post(
            "/api/v1/share",
            json={"chat_id": chat["id"], "copy_to_clipboard": True}
        )
        assert response.status_code == 502

    def test_open_link(self, client):
        response = client.get("/api/v1/share", params={"share": encode("Shared", "Better")})
        data = response.json()
        assert data["loaded"] is True
        assert data["chat"]["prompt"] == "Shared"
        assert data["chat"]["improved"] == "Better"
        assert client.get("/api/v1/history").json()["total"] == 1

    @pytest.mark.parametrize("params", [{}, {"share": ""}, {"share": "%%%"}, {"share": "abcd"}])
    def test_open_bad_link(self, client, params):
        data = client.get("/api/v1/share", params=params).json()
        assert data == {"loaded": False, "chat": None}
        assert client.get("/api/v1/history").json()["total"] == 0
