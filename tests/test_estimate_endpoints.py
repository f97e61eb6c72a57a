"""Tests for estimate and history endpoints."""

from fastapi.testclient import TestClient

from calorie_estimator.api.app import create_app
from calorie_estimator.containers import AppContainer
from calorie_estimator.services.validation import EMPTY_INPUT_MESSAGE


def test_health(container: AppContainer) -> None:
    client = TestClient(create_app(container))

    response = client.get("/health")

    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


def test_create_estimate(container: AppContainer) -> None:
    client = TestClient(create_app(container))

    response = client.post(
        "/estimates", json={"text": "2 eggs, toast with butter, black coffee"}
    )

    assert response.status_code == 200
    data = response.json()
    assert data["total_calories"] == 233
    assert data["items"] == [
        {"label": "2 eggs", "calories": 156},
        {"label": "toast with butter", "calories": 75},
        {"label": "black coffee", "calories": 2},
    ]


def test_create_estimate_records_trimmed_input(container: AppContainer) -> None:
    client = TestClient(create_app(container))

    client.post("/estimates", json={"text": "  mystery snack \n"})

    entries = container.history_service.list_entries()
    assert [entry.input for entry in entries] == ["mystery snack"]
    assert entries[0].result.total_calories == 120


def test_blank_estimate_is_rejected(container: AppContainer) -> None:
    client = TestClient(create_app(container))

    response = client.post("/estimates", json={"text": "   "})

    assert response.status_code == 422
    assert response.json() == {"detail": EMPTY_INPUT_MESSAGE}
    assert container.history_service.list_entries() == []


def test_list_history_newest_first(container: AppContainer) -> None:
    client = TestClient(create_app(container))
    client.post("/estimates", json={"text": "apple"})
    client.post("/estimates", json={"text": "1 banana\n8 oz orange juice"})

    response = client.get("/history")

    assert response.status_code == 200
    history = response.json()["history"]
    assert [entry["index"] for entry in history] == [0, 1]
    assert history[0]["input"] == "1 banana\n8 oz orange juice"
    assert history[0]["result"]["total_calories"] == 1001
    assert history[1]["result"]["total_calories"] == 95

    limited = client.get("/history", params={"limit": 1}).json()["history"]
    assert len(limited) == 1


def test_rerun_history_entry(container: AppContainer) -> None:
    client = TestClient(create_app(container))
    client.post("/estimates", json={"text": "yogurt"})
    client.post("/estimates", json={"text": "oatmeal"})

    response = client.post("/history/1/rerun")

    assert response.status_code == 200
    assert response.json()["total_calories"] == 150
    inputs = [entry.input for entry in container.history_service.list_entries()]
    assert inputs == ["yogurt", "oatmeal", "yogurt"]


def test_rerun_unknown_entry_returns_404(container: AppContainer) -> None:
    client = TestClient(create_app(container))

    response = client.post("/history/5/rerun")

    assert response.status_code == 404


def test_clear_history(container: AppContainer) -> None:
    client = TestClient(create_app(container))
    client.post("/estimates", json={"text": "rice"})

    response = client.delete("/history")

    assert response.status_code == 200
    assert client.get("/history").json() == {"history": []}
