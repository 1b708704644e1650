"""
FastAPI endpoint tests for the Numerizer API.

Uses httpx + FastAPI TestClient — no real server needed.
"""

from __future__ import annotations

import api
import pytest
from api import app
from fastapi.testclient import TestClient

client = TestClient(app)


class TestHealthEndpoint:
    def test_health_returns_200(self) -> None:
        resp = client.get("/health")
        assert resp.status_code == 200

    def test_health_response_shape(self) -> None:
        data = client.get("/health").json()
        assert data["status"] == "healthy"
        assert data["version"] == "1.0.0"
        assert data["profiles"] == ["currency", "plain"]


class TestParseEndpoint:
    def test_plain_phrase(self) -> None:
        resp = client.post("/parse", json={"text": "four thousand, four hundred thirty-two"})
        assert resp.status_code == 200
        data = resp.json()
        assert data["value"] == 4432
        assert data["error"] is None
        assert data["profile"] == "plain"

    def test_currency_phrase(self) -> None:
        data = client.post(
            "/parse",
            json={"text": "two hundred four dollars and eighteen cents", "profile": "currency"},
        ).json()
        assert data["value"] == 20418

    def test_parse_failure_in_body(self) -> None:
        resp = client.post("/parse", json={"text": "six thousand hundred"})
        assert resp.status_code == 200
        data = resp.json()
        assert data["value"] is None
        assert data["error"]["code"] == "GRAMMAR_VIOLATION"
        assert data["error"]["token"] == "hundred"
        assert data["error"]["after"] == "thousand"

    def test_empty_text_is_empty_input(self) -> None:
        data = client.post("/parse", json={"text": ""}).json()
        assert data["error"]["code"] == "EMPTY_INPUT"


class TestRequestValidation:
    def test_empty_body_returns_422(self) -> None:
        resp = client.post("/parse", json={})
        assert resp.status_code == 422

    def test_unknown_profile_returns_422(self) -> None:
        resp = client.post("/parse", json={"text": "five", "profile": "euro"})
        assert resp.status_code == 422

    def test_overlong_text_returns_422(self) -> None:
        resp = client.post("/parse", json={"text": "one " * 300})
        assert resp.status_code == 422


class TestBatchEndpoint:
    def test_batch_preserves_order(self) -> None:
        data = client.post(
            "/parse/batch",
            json={"texts": ["one", "five three", "ninety nine"]},
        ).json()
        assert [r["value"] for r in data["results"]] == [1, None, 99]
        assert data["error_count"] == 1

    def test_batch_too_large(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setattr(api, "MAX_BATCH", 2)
        resp = client.post("/parse/batch", json={"texts": ["one", "two", "three"]})
        assert resp.status_code == 413

    def test_empty_batch_returns_422(self) -> None:
        resp = client.post("/parse/batch", json={"texts": []})
        assert resp.status_code == 422
