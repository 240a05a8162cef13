"""Tests for the HTTP API."""

from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from fixturecalc.api.main import create_app
from fixturecalc.models import EXAMPLE_PRESETS


@pytest.fixture
def client() -> TestClient:
    return TestClient(create_app())


ROAD_FRAME = {
    "hta": 72,
    "sta": 73,
    "stack": 560,
    "reach": 385,
    "htlength": 150,
    "cslength": 420,
    "bbdrop": 70,
}


def test_health(client: TestClient) -> None:
    response = client.get("/api/health")
    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


def test_evaluate_stack_reach(client: TestClient) -> None:
    response = client.post("/api/evaluate", json={"mode": "stack_reach", "params": ROAD_FRAME})
    assert response.status_code == 200
    body = response.json()
    assert body["mode"] == "stack_reach"
    assert body["outputs"]["htx"]["value"] == 539.21
    assert body["outputs"]["htx"]["status"] == "ok"
    assert body["outputs"]["st_ht_angle"]["value"] == 1.0
    assert body["stats"]["ok"] == 5


def test_evaluate_reports_incomplete_and_input_errors(client: TestClient) -> None:
    params = {**ROAD_FRAME, "reach": None, "bbdrop": 500}
    response = client.post("/api/evaluate", json={"mode": "stack_reach", "params": params})
    body = response.json()
    assert body["outputs"]["htx"]["status"] == "incomplete"
    assert body["outputs"]["htx"]["waiting_on"] == ["reach"]
    assert body["outputs"]["dax"]["status"] == "incomplete"
    assert "bbdrop" in body["input_errors"]
    assert body["outputs"]["st_ht_angle"]["status"] == "ok"


def test_evaluate_accepts_camel_case_axle_to_crown(client: TestClient) -> None:
    params = {
        "hta": 71,
        "frontcenter": 610,
        "bbdrop": 72,
        "forklength": 40,
        "isAxleToCrown": True,
        "forkoffset": 50,
        "lhsh": 12,
    }
    response = client.post("/api/evaluate", json={"mode": "front_center", "params": params})
    body = response.json()
    assert body["input_errors"] == {
        "forkoffset": (
            "Must be a number that is less than or equal to fork length in magnitude "
            "when fork length is axle-to-crown"
        ),
    }
    assert body["outputs"]["htx"]["waiting_on"] == ["forkoffset"]
    assert body["outputs"]["hty"]["status"] == "incomplete"


def test_evaluate_with_config(client: TestClient) -> None:
    response = client.post(
        "/api/evaluate",
        json={"params": ROAD_FRAME, "config": {"enabled_outputs": ["htx"]}},
    )
    assert list(response.json()["outputs"]) == ["htx"]


def test_unknown_mode_rejected(client: TestClient) -> None:
    response = client.post("/api/evaluate", json={"mode": "wheelbase", "params": {}})
    assert response.status_code == 422


def test_list_modes(client: TestClient) -> None:
    response = client.get("/api/modes")
    assert [m["id"] for m in response.json()] == [
        "stack_reach", "front_center", "ett_taiwanese", "ett_tt",
    ]


def test_list_outputs(client: TestClient) -> None:
    response = client.get("/api/outputs")
    assert [o["name"] for o in response.json()] == ["ST-HT angle", "HTX", "HTY", "DAX", "DAY"]


def test_examples(client: TestClient) -> None:
    response = client.get("/api/examples")
    assert len(response.json()) == len(EXAMPLE_PRESETS)

    name = EXAMPLE_PRESETS[0].name
    response = client.get(f"/api/examples/{name}")
    assert response.status_code == 200
    assert response.json()["name"] == name


def test_evaluate_example(client: TestClient) -> None:
    name = EXAMPLE_PRESETS[0].name
    response = client.post(f"/api/examples/{name}/evaluate")
    assert response.status_code == 200
    assert response.json()["mode"] == EXAMPLE_PRESETS[0].mode.value


def test_missing_example_is_404(client: TestClient) -> None:
    assert client.get("/api/examples/no-such-frame").status_code == 404
    assert client.post("/api/examples/no-such-frame/evaluate").status_code == 404
