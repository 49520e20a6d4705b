"""Tests for the FastAPI layer."""

from __future__ import annotations

from fastapi.testclient import TestClient

from lottomatch.engine.matcher import TargetParseError
from lottomatch.service import api


class StubService:
    """Simple fake service for API contract tests."""

    def match(self, entry) -> dict[str, object]:
        if 91 in entry:
            raise TargetParseError("Invalid lottery pick entry: number 91 out of lottery range 1~90")
        return {
            "meta": {
                "number_of_picks": 5,
                "min_matches": 2,
                "total_winners": 2,
                "pool_size": 3,
                "elapsed_ms": 0.5,
            },
            "winners": [
                {"matches": 5, "winners": 0},
                {"matches": 4, "winners": 2},
                {"matches": 3, "winners": 0},
                {"matches": 2, "winners": 0},
            ],
        }

    def pool_status(self) -> dict[str, object]:
        return {"accepted": 3, "rejected": 1, "representation": "bitset"}


def test_match_endpoint_returns_expected_shape(monkeypatch) -> None:
    monkeypatch.setattr(api, "get_service", lambda: StubService())
    client = TestClient(api.app)

    response = client.post("/api/match", json={"numbers": [1, 2, 3, 4, 90]})

    assert response.status_code == 200
    payload = response.json()
    assert payload["meta"]["total_winners"] == 2
    assert payload["winners"][1] == {"matches": 4, "winners": 2}
    assert [row["matches"] for row in payload["winners"]] == [5, 4, 3, 2]


def test_match_endpoint_rejects_invalid_target(monkeypatch) -> None:
    monkeypatch.setattr(api, "get_service", lambda: StubService())
    client = TestClient(api.app)

    response = client.post("/api/match", json={"numbers": [1, 2, 3, 4, 91]})

    assert response.status_code == 400
    assert "out of lottery range" in response.json()["detail"]


def test_match_endpoint_validates_payload() -> None:
    client = TestClient(api.app)

    assert client.post("/api/match", json={"numbers": "1 2 3 4 5"}).status_code == 422
    assert client.post("/api/match", json={"numbers": []}).status_code == 422


def test_match_endpoint_reports_missing_picks(monkeypatch) -> None:
    def missing_service():
        raise FileNotFoundError("Player picks file not found: picks.txt")

    monkeypatch.setattr(api, "get_service", missing_service)
    client = TestClient(api.app)

    response = client.post("/api/match", json={"numbers": [1, 2, 3, 4, 5]})

    assert response.status_code == 500
    assert "picks.txt" in response.json()["detail"]


def test_pool_status_endpoint_returns_status(monkeypatch) -> None:
    monkeypatch.setattr(api, "get_service", lambda: StubService())
    client = TestClient(api.app)

    response = client.get("/api/pool-status")

    assert response.status_code == 200
    assert response.json()["pool"]["accepted"] == 3


def test_cors_preflight_allows_local_dev_origin() -> None:
    client = TestClient(api.app)

    response = client.options(
        "/api/match",
        headers={
            "Origin": "http://localhost:3000",
            "Access-Control-Request-Method": "POST",
        },
    )

    assert response.status_code == 200
    assert response.headers["access-control-allow-origin"] == "*"


def test_get_service_builds_from_environment(monkeypatch, tmp_path) -> None:
    picks_path = tmp_path / "picks.txt"
    picks_path.write_text("1 2 3 4 5 6\n", encoding="utf-8")
    monkeypatch.setenv("NUMBER_OF_PICKS", "6")
    monkeypatch.setenv("MAX_LOTTERY_PICK", "45")
    monkeypatch.setenv("PLAYER_NUMBERS_FILE_PATH", str(picks_path))
    api.get_service.cache_clear()

    try:
        service = api.get_service()
        assert service.config.number_of_picks == 6
        assert service.pool_status()["accepted"] == 1
    finally:
        api.get_service.cache_clear()
