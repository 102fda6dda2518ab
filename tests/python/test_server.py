from __future__ import annotations

import pytest

from gasketforge.config import GasketConfig
from gasketforge.server import create_app

QUERY = {
    "A": "200",
    "B": "100",
    "C": "190",
    "D": "90",
    "E": "20",
    "F": "15",
    "I": "20",
    "H": "10",
    "holeDiameter": "8",
    "holeConfiguration": "centered",
}


@pytest.fixture()
def client(monkeypatch):
    monkeypatch.delenv("GASKETFORGE_API_KEY", raising=False)
    app = create_app(GasketConfig.from_dict({"api_key": "secret"}))
    app.config["TESTING"] = True
    return app.test_client()


def test_health(client) -> None:
    response = client.get("/health")
    assert response.status_code == 200
    assert response.get_json() == {"status": "ok"}


def test_returns_dxf_attachment(client) -> None:
    response = client.get("/gasket", query_string={**QUERY, "key": "secret"})
    assert response.status_code == 200
    assert response.mimetype == "application/dxf"
    assert response.headers["X-Hole-Count"] == "28"
    disposition = response.headers["Content-Disposition"]
    assert "gasket_28holes_A200_B100_C190_D90_E20_F15_I20_H10_d8_centered.dxf" in disposition
    assert b"CIRCLE" in response.data


def test_key_can_come_from_header(client) -> None:
    response = client.get("/gasket", query_string=QUERY, headers={"X-API-Key": "secret"})
    assert response.status_code == 200


@pytest.mark.parametrize("key", [None, "", "wrong"])
def test_rejects_bad_key(client, key) -> None:
    query = dict(QUERY)
    if key is not None:
        query["key"] = key
    response = client.get("/gasket", query_string=query)
    assert response.status_code == 401
    assert response.get_json()["error"] == "Unauthorized"


@pytest.mark.parametrize(
    ("patch", "kind"),
    [
        ({"C": None}, "MissingParameter"),
        ({"holeConfiguration": "offset"}, "InvalidHoleConfiguration"),
        ({"holeDiameter": "30"}, "HoleDiameterTooLarge"),
        ({"B": "300"}, "OrderingViolation"),
    ],
)
def test_geometry_errors_map_to_400(client, patch: dict, kind: str) -> None:
    query = {**QUERY, "key": "secret"}
    for name, value in patch.items():
        if value is None:
            query.pop(name)
        else:
            query[name] = value
    response = client.get("/gasket", query_string=query)
    assert response.status_code == 400
    body = response.get_json()
    assert body["error"] == kind
    assert body["message"]


def test_open_gate_without_configured_key(monkeypatch) -> None:
    monkeypatch.delenv("GASKETFORGE_API_KEY", raising=False)
    app = create_app(GasketConfig.from_dict({}))
    response = app.test_client().get("/gasket", query_string=QUERY)
    assert response.status_code == 200
