"""
API tests for watchlist endpoints.
"""

import pytest
from fastapi.testclient import TestClient

from tests.conftest import auth_headers


@pytest.fixture
def watched(client: TestClient) -> dict:
    response = client.post("/watchlist", json={"ticker_symbol": "aapl"}, headers=auth_headers())
    assert response.status_code == 201
    return response.json()


class TestWatchlistAPI:
    """Tests for /watchlist."""

    def test_add_and_list(self, client: TestClient, watched):
        """
        GIVEN a ticker was added
        WHEN I GET /watchlist
        THEN it is listed upper-cased
        """
        response = client.get("/watchlist", headers=auth_headers())

        assert response.status_code == 200
        assert watched["ticker_symbol"] == "AAPL"
        assert [i["ticker_symbol"] for i in response.json()] == ["AAPL"]

    def test_list_signed_out_is_empty(self, client: TestClient, watched):
        response = client.get("/watchlist")

        assert response.status_code == 200
        assert response.json() == []

    def test_add_requires_auth(self, client: TestClient):
        response = client.post("/watchlist", json={"ticker_symbol": "AAPL"})
        assert response.status_code == 401

    def test_add_duplicate(self, client: TestClient, watched):
        response = client.post("/watchlist", json={"ticker_symbol": "AAPL"}, headers=auth_headers())

        assert response.status_code == 400
        assert response.json()["error"] == "VALIDATION_ERROR"

    def test_add_rejects_empty_ticker(self, client: TestClient):
        response = client.post("/watchlist", json={"ticker_symbol": ""}, headers=auth_headers())
        assert response.status_code == 422

    def test_remove(self, client: TestClient, watched):
        response = client.delete("/watchlist/aapl", headers=auth_headers())

        assert response.status_code == 204
        assert client.get("/watchlist", headers=auth_headers()).json() == []

    def test_remove_unknown(self, client: TestClient):
        response = client.delete("/watchlist/ZZZZ", headers=auth_headers())

        assert response.status_code == 404
        assert response.json()["error"] == "NOT_FOUND"

    def test_other_user_list_is_separate(self, client: TestClient, watched):
        response = client.get("/watchlist", headers=auth_headers("user-2"))
        assert response.json() == []
