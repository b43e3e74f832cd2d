"""Test the /summaries endpoint and the app-level routes."""

import pytest
from fastapi.testclient import TestClient

from planner.app.env_loader import get_suppress_final_rest


def test_summary_endpoint(client: TestClient):
    response = client.post(
        "/summaries",
        json={
            "sequences": [
                {
                    "distance": 100,
                    "paceLabel": "A2",
                    "style": "Freestyle",
                    "repetitionCount": 4,
                    "intraRestInterval": "1'20\"",
                    "terminalRestInterval": "3'",
                },
                {
                    "distance": 50,
                    "paceLabel": "A3",
                    "style": "Backstroke",
                    "repetitionCount": 2,
                    "intraRestInterval": "30",
                },
            ]
        },
    )

    assert response.status_code == 200
    assert response.json() == {
        "summary": "4×100 A2 Freestyle 1'20\", 2×50 A3 Backstroke 30\"",
        "total_repetitions": 6,
    }


def test_summary_of_nothing(client: TestClient):
    response = client.post("/summaries", json={"sequences": []})
    assert response.json()["summary"] == "Empty moveframe"


def test_summary_rejects_invalid_sequences(client: TestClient):
    response = client.post(
        "/summaries",
        json={
            "sequences": [
                {
                    "distance": 100,
                    "paceLabel": "A2",
                    "repetitionCount": 0,
                    "intraRestInterval": "30",
                }
            ]
        },
    )

    assert response.status_code == 422
    detail = response.json()["detail"]
    assert detail["code"] == "invalid_sequence"
    assert detail["errors"] == ["Sequence 1: Repetitions must be at least 1"]


def test_summary_rejects_unparsable_rest(client: TestClient):
    response = client.post(
        "/summaries",
        json={
            "sequences": [
                {
                    "distance": 100,
                    "paceLabel": "A2",
                    "repetitionCount": 4,
                    "intraRestInterval": "2 min",
                }
            ]
        },
    )

    assert response.status_code == 422
    assert response.json()["detail"]["code"] == "parse_error"


def test_health_endpoint(client: TestClient):
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json() == {"status": "healthy"}


def test_environment_endpoint(client: TestClient, monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setenv("ENV", "staging")
    response = client.get("/environment")
    assert response.json() == {"environment": "staging"}


class TestSuppressFinalRestSetting:
    """Test reading SUPPRESS_FINAL_REST."""

    def test_defaults_to_false(self, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.delenv("SUPPRESS_FINAL_REST", raising=False)
        assert get_suppress_final_rest() is False

    @pytest.mark.parametrize("value", ["true", "TRUE", "1", "yes"])
    def test_truthy(self, value: str, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.setenv("SUPPRESS_FINAL_REST", value)
        assert get_suppress_final_rest() is True

    def test_invalid(self, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.setenv("SUPPRESS_FINAL_REST", "sometimes")
        with pytest.raises(ValueError):
            get_suppress_final_rest()
