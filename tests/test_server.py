"""Tests for the Flask routes."""
import json

from lumen.replies import FALLBACK_REPLY, GREETINGS, SUGGESTIONS, TAKE_YOUR_TIME
from lumen.server import DEFAULT_SUGGESTIONS, parse_messages


class TestIndex:
    """Tests for the chat page."""

    def test_serves_page(self, client):
        res = client.get("/")

        assert res.status_code == 200
        assert res.mimetype == "text/html"
        assert b"<h1>Lumen</h1>" in res.data

    def test_page_carries_default_suggestions(self, client):
        body = client.get("/").get_data(as_text=True)

        for suggestion in DEFAULT_SUGGESTIONS:
            assert suggestion in body


class TestParseMessages:
    """Tests for request body coercion."""

    def test_keeps_role_and_content(self):
        messages = parse_messages({"messages": [{"role": "user", "content": "hi"}]})

        assert len(messages) == 1
        assert messages[0].role == "user"
        assert messages[0].content == "hi"

    def test_non_object_body(self):
        assert parse_messages(["not", "an", "object"]) == []
        assert parse_messages(None) == []

    def test_missing_or_non_array_messages(self):
        assert parse_messages({}) == []
        assert parse_messages({"messages": "not-an-array"}) == []

    def test_drops_unknown_roles(self):
        messages = parse_messages({"messages": [
            {"role": "system", "content": "x"},
            "junk",
            {"role": "assistant", "content": "hello"},
        ]})

        assert [m.role for m in messages] == ["assistant"]

    def test_non_string_content_is_empty(self):
        messages = parse_messages({"messages": [{"role": "user", "content": 5}]})
        assert messages[0].content == ""


class TestChatEndpoint:
    """Tests for POST /api/chat."""

    def test_reply_and_suggestions(self, client):
        res = client.post("/api/chat", json={"messages": [
            {"role": "user", "content": "I need help planning my week"},
        ]})

        assert res.status_code == 200
        data = res.get_json()
        assert data["reply"].startswith("You've got my full attention.")
        assert data["suggestions"] == SUGGESTIONS["planning"]

    def test_name_question(self, client):
        res = client.post("/api/chat", json={"messages": [
            {"role": "assistant", "content": "Hey there!"},
            {"role": "user", "content": "What's your name?"},
        ]})

        assert res.status_code == 200
        assert "Lumen" in res.get_json()["reply"]

    def test_non_array_messages_greets(self, client):
        res = client.post("/api/chat", json={"messages": "not-an-array"})

        assert res.status_code == 200
        data = res.get_json()
        assert data["reply"] in GREETINGS
        assert data["suggestions"] == SUGGESTIONS["general"]

    def test_missing_messages_greets(self, client):
        res = client.post("/api/chat", json={})

        assert res.status_code == 200
        assert res.get_json()["reply"] in GREETINGS

    def test_blank_message(self, client):
        res = client.post("/api/chat", json={"messages": [{"role": "user", "content": "  "}]})
        assert res.get_json()["reply"] == TAKE_YOUR_TIME

    def test_json_without_content_type(self, client):
        res = client.post("/api/chat", data=json.dumps({"messages": [
            {"role": "user", "content": "I'm exhausted and stressed"},
        ]}))

        assert res.status_code == 200
        assert res.get_json()["suggestions"] == SUGGESTIONS["mood"]

    def test_invalid_json_falls_back(self, client, caplog):
        res = client.post("/api/chat", data="{not json", content_type="application/json")

        assert res.status_code == 500
        data = res.get_json()
        assert data["reply"] == FALLBACK_REPLY
        assert data["suggestions"] == SUGGESTIONS["general"]
        assert "chat request failed" in caplog.text

    def test_empty_body_falls_back(self, client):
        res = client.post("/api/chat")

        assert res.status_code == 500
        assert res.get_json()["reply"] == FALLBACK_REPLY

    def test_get_not_allowed(self, client):
        assert client.get("/api/chat").status_code == 405
