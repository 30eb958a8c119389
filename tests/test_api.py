from __future__ import annotations

import pytest

from web import create_app
from othello import AlphaBetaAgent, RandomAgent


@pytest.fixture
def client():
    app = create_app(AlphaBetaAgent(max_depth=2, time_limit_s=2.0))
    return app.test_client()


def test_index_describes_engine(client):
    data = client.get("/").get_json()
    assert data["engine"] == "AlphaBetaAgent"
    assert data["max_depth"] == 2


def test_new_game_as_black(client):
    r = client.post("/api/new", json={"color": "black"})
    assert r.status_code == 200
    data = r.get_json()
    assert data["turn"] == "black"
    assert data["human"] == "black"
    assert data["ai_moves"] == []
    assert data["legal_moves"] == ["d3", "c4", "f5", "e6"]


def test_new_game_as_white_ai_opens(client):
    data = client.post("/api/new", json={"color": "white"}).get_json()
    assert data["turn"] == "white"
    assert data["ai_moves"] == ["d3"]
    assert data["search"]["nodes_examined"] > 0


def test_new_game_bad_color(client):
    r = client.post("/api/new", json={"color": "purple"})
    assert r.status_code == 400


def test_move_gets_ai_reply(client):
    client.post("/api/new", json={})
    r = client.post("/api/move", json={"move": "d3"})
    assert r.status_code == 200
    data = r.get_json()
    assert data["history"][0] == "d3"
    assert data["ai_moves"][0] in ("c3", "e3", "c5")
    assert data["turn"] == "black"
    stats = data["search"]
    assert stats["max_depth_reached"] == 2
    assert stats["leaf_nodes"] <= stats["nodes_examined"]


def test_move_errors(client):
    client.post("/api/new", json={})
    assert client.post("/api/move", json={}).status_code == 400
    assert client.post("/api/move", json={"move": "a1"}).status_code == 400
    assert client.post("/api/move", json={"move": "q9"}).status_code == 400
    r = client.post("/api/move", json={"move": "d3", "time_limit": "soon"})
    assert r.status_code == 400
    assert client.post("/api/move", json={"move": 19}).status_code == 400
    assert client.post("/api/move", json={"move": ["d3"]}).status_code == 400
    assert client.get("/api/state").get_json()["history"] == []


def test_non_object_body_is_rejected(client):
    assert client.post("/api/new", json=["white"]).status_code == 400
    client.post("/api/new", json={})
    assert client.post("/api/move", json=["d3"]).status_code == 400
    assert client.post("/api/move", json="d3").status_code == 400


def test_state_endpoint(client):
    client.post("/api/new", json={})
    data = client.get("/api/state").get_json()
    assert data["score"] == {"black": 2, "white": 2}
    assert data["search"] is None


def test_random_agent_can_host_game():
    app = create_app(RandomAgent(seed=7))
    client = app.test_client()
    client.post("/api/new", json={})
    data = client.post("/api/move", json={"move": "f5"}).get_json()
    assert data["ai_moves"][0] in ("d6", "f4", "f6")
    assert data["search"]["nodes_examined"] == 0
