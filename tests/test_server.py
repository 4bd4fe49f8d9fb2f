import importlib

import pytest
from fastapi.testclient import TestClient

import server
from server import app


@pytest.fixture
def client():
    return TestClient(app)


def _payload(player, dealer, **rules):
    game_rules = {"dasAllowed": False, "surrenderAllowed": False, "decks": 6}
    game_rules.update(rules)
    return {"player": player, "dealer": dealer, "gameRules": game_rules}


def test_advice_returns_action_and_hand_summary(client):
    resp = client.post("/api/advice", json=_payload(["A", "7"], ["4"]))
    assert resp.status_code == 200
    body = resp.json()
    assert body["action"] == "DOUBLE"
    assert body["insurance"] is False
    assert body["rule"] == "Soft 18 vs 3-6"
    assert body["hand"] == {"cards": ["A", "7"], "total": 18, "soft": True, "canSplit": False}
    assert body["dealerCard"] == "4"
    assert body["advice"].startswith("Soft 18 vs dealer 4: DOUBLE DOWN")


def test_advice_natural_blackjack(client):
    resp = client.post("/api/advice", json=_payload(["A", "K"], ["6"]))
    assert resp.status_code == 200
    assert resp.json()["action"] == "BLACKJACK"


def test_advice_surrender_flag_changes_outcome(client):
    allowed = client.post("/api/advice", json=_payload(["10", "6"], ["10"], surrenderAllowed=True))
    denied = client.post("/api/advice", json=_payload(["10", "6"], ["10"], surrenderAllowed=False))
    assert allowed.json()["action"] == "SURRENDER"
    assert denied.json()["action"] == "HIT"


def test_dealer_ace_sets_insurance(client):
    body = client.post("/api/advice", json=_payload(["10", "9"], ["A"])).json()
    assert body["insurance"] is True
    assert body["action"] == "STAND"
    assert "insurance" in body["advice"]


def test_game_rules_are_optional(client):
    resp = client.post("/api/advice", json={"player": "8 8", "dealer": ["k"]})
    assert resp.status_code == 200
    body = resp.json()
    assert body["action"] == "SPLIT"
    assert body["gameRules"] == {"dasAllowed": False, "surrenderAllowed": False, "decks": 6}


def test_invalid_card_rejected(client):
    resp = client.post("/api/advice", json=_payload(["X", "7"], ["6"]))
    assert resp.status_code == 400
    error = resp.json()["error"]
    assert error["code"] == "INVALID_CARD"
    assert error["details"] == {"card": "X"}


def test_insufficient_cards_rejected(client):
    resp = client.post("/api/advice", json=_payload(["A"], ["6"]))
    assert resp.status_code == 400
    assert resp.json()["error"]["code"] == "INSUFFICIENT_CARDS"

    resp = client.post("/api/advice", json=_payload(["A", "5"], []))
    assert resp.status_code == 400
    assert resp.json()["error"]["details"]["role"] == "dealer"


def test_malformed_request_rejected(client):
    resp = client.post("/api/advice", json={"dealer": ["6"]})
    assert resp.status_code == 400
    assert resp.json()["error"]["code"] == "INVALID_REQUEST"

    resp = client.post("/api/advice", json=_payload(["A", "5"], ["6"], decks=0))
    assert resp.status_code == 400
    assert resp.json()["error"]["code"] == "INVALID_REQUEST"


def test_method_not_allowed(client):
    resp = client.get("/api/advice")
    assert resp.status_code == 405
    assert resp.json()["error"]["code"] == "METHOD_NOT_ALLOWED"


def test_token_required_when_configured(client, monkeypatch):
    monkeypatch.setenv("SECRET_TOKEN", "s3cret")

    resp = client.post("/api/advice", json=_payload(["A", "K"], ["6"]))
    assert resp.status_code == 401
    assert resp.json()["error"]["code"] == "UNAUTHORIZED"

    resp = client.post(
        "/api/advice",
        json=_payload(["A", "K"], ["6"]),
        headers={"Authorization": "Bearer wrong"},
    )
    assert resp.status_code == 401

    resp = client.post(
        "/api/advice",
        json=_payload(["A", "K"], ["6"]),
        headers={"Authorization": "Bearer s3cret"},
    )
    assert resp.status_code == 200


def test_rules_view_lists_table_in_priority_order(client):
    rules = client.get("/api/rules").json()["rules"]
    assert rules[0]["name"] == "Blackjack natural"
    assert rules[-1]["action"] == "HIT"
    assert all(row["priority"] == idx for idx, row in enumerate(rules, start=1))


def test_health(client):
    resp = client.get("/health")
    assert resp.status_code == 200
    assert resp.json()["status"] == "healthy"


def test_card_names_rejected_with_token_as_sent(client):
    resp = client.post("/api/advice", json=_payload(["ace", "king"], ["6"]))
    assert resp.status_code == 400
    assert resp.json()["error"]["details"] == {"card": "ace"}

    resp = client.post("/api/advice", json=_payload(["A", "7"], [" t"]))
    assert resp.status_code == 400
    assert resp.json()["error"]["details"] == {"card": " t"}


@pytest.fixture
def extension_client(monkeypatch):
    # CORS origins are fixed when the app is built, so rebuild it
    monkeypatch.setenv("EXTENSION_ID", "abc")
    module = importlib.reload(server)
    yield TestClient(module.app)
    monkeypatch.delenv("EXTENSION_ID")
    importlib.reload(server)


def _preflight(client, origin):
    return client.options(
        "/api/advice",
        headers={
            "Origin": origin,
            "Access-Control-Request-Method": "POST",
            "Access-Control-Request-Headers": "Authorization, Content-Type",
        },
    )


def test_preflight_from_extension_origin_allowed(extension_client):
    resp = _preflight(extension_client, "chrome-extension://abc")
    assert resp.status_code == 200
    assert resp.headers["access-control-allow-origin"] == "chrome-extension://abc"


def test_preflight_from_foreign_origin_rejected(extension_client):
    resp = _preflight(extension_client, "https://evil.example")
    assert resp.status_code == 400
    assert "access-control-allow-origin" not in resp.headers


def test_advice_response_carries_extension_origin(extension_client):
    resp = extension_client.post(
        "/api/advice",
        json=_payload(["A", "K"], ["6"]),
        headers={"Origin": "chrome-extension://abc"},
    )
    assert resp.status_code == 200
    assert resp.headers["access-control-allow-origin"] == "chrome-extension://abc"
