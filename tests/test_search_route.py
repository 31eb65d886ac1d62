"""Tests for the search endpoint."""
import pytest
from fastapi.testclient import TestClient

from app.main import app
from app.routes.search import get_search_service
from core.services.search.retry_controller import RetryPolicy
from core.services.search.search_service import QuizSearchService
from tests.fakes import VALID_REPLY, FakeSearchClient, FakeVerificationClient, RecordingSleep


@pytest.fixture
def client_with_replies():
    """Return a factory: scripted search replies -> (TestClient, fakes)."""
    def _make(replies, verification_reply=VALID_REPLY):
        search_client = FakeSearchClient(replies)
        verification_client = FakeVerificationClient(verification_reply)
        app.dependency_overrides[get_search_service] = lambda: QuizSearchService(
            search_client=search_client,
            verification_client=verification_client,
            retry_policy=RetryPolicy(max_retries=2, retry_delay_ms=0),
            sleep=RecordingSleep()
        )
        return TestClient(app), search_client, verification_client

    yield _make
    app.dependency_overrides.clear()


class TestSearchEndpoint:
    """Test cases for POST /api/search."""

    def test_fast_mode_end_to_end(self, client_with_replies):
        client, search_client, verification_client = client_with_replies([VALID_REPLY])
        response = client.post("/api/search", json={"question": "Q1", "mode": "fast"})
        assert response.status_code == 200
        assert response.json() == {
            "answer": "B",
            "supporting_text": "**B** is correct",
            "source": "[doc](http://x)"
        }
        assert search_client.questions == ["Q1"]
        assert verification_client.calls == []

    def test_accurate_mode_uses_verified_answer(self, client_with_replies):
        verified = '{"answer":"C","supporting_text":"**C**","source":"[v](http://v)"}'
        client, _, verification_client = client_with_replies([VALID_REPLY], verified)
        response = client.post("/api/search", json={"question": "Q1", "mode": "accurate"})
        assert response.status_code == 200
        assert response.json()["answer"] == "C"
        assert len(verification_client.calls) == 1

    def test_mode_defaults_to_fast(self, client_with_replies):
        client, _, verification_client = client_with_replies([VALID_REPLY])
        response = client.post("/api/search", json={"question": "Q1"})
        assert response.status_code == 200
        assert verification_client.calls == []

    def test_exhausted_retries_return_500(self, client_with_replies):
        client, search_client, _ = client_with_replies(["no json", "still none"])
        response = client.post("/api/search", json={"question": "Q1", "mode": "fast"})
        assert response.status_code == 500
        assert response.json() == {"error": "Unable to get a valid answer. Please try again later."}
        assert len(search_client.questions) == 2

    def test_chinese_question_gets_chinese_error(self, client_with_replies):
        client, _, _ = client_with_replies([ConnectionError("x"), ConnectionError("y")])
        response = client.post("/api/search", json={"question": "以下哪项正确？", "mode": "fast"})
        assert response.status_code == 500
        assert response.json() == {"error": "多次尝试获取答案失败"}

    def test_malformed_answer_returns_500(self, client_with_replies):
        client, _, _ = client_with_replies(['{"answer": "B"}'])
        response = client.post("/api/search", json={"question": "Q1", "mode": "fast"})
        assert response.status_code == 500
        assert "error" in response.json()

    @pytest.mark.parametrize("method", ["get", "put", "delete", "patch"])
    def test_non_post_is_rejected(self, client_with_replies, method):
        client, search_client, _ = client_with_replies([VALID_REPLY])
        response = client.request(method.upper(), "/api/search")
        assert response.status_code == 405
        assert response.json() == {"error": "Method not allowed"}
        assert search_client.questions == []

    def test_missing_question_is_reported_as_error(self, client_with_replies):
        client, _, _ = client_with_replies([VALID_REPLY])
        response = client.post("/api/search", json={"mode": "fast"})
        assert response.status_code == 422
        assert "question" in response.json()["error"]

    def test_unknown_mode_is_reported_as_error(self, client_with_replies):
        client, _, _ = client_with_replies([VALID_REPLY])
        response = client.post("/api/search", json={"question": "Q1", "mode": "slow"})
        assert response.status_code == 422
        assert "mode" in response.json()["error"]


class TestHealthEndpoints:
    """Test cases for health and info endpoints."""

    def test_health(self):
        client = TestClient(app)
        assert client.get("/health").json() == {"status": "healthy"}
        assert client.get("/api/health").json()["service"] == "search"

    def test_info_lists_search_endpoint(self):
        client = TestClient(app)
        assert client.get("/api/info").json()["endpoints"]["search"] == "POST /api/search"
