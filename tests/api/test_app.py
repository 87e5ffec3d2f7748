"""HTTP tests for the FastAPI application."""

from fastapi.testclient import TestClient

from checkie.api.main import (
    ILLEGAL_MOVE_MESSAGE,
    MOVE_APPLIED_MESSAGE,
    NEW_GAME_MESSAGE,
    create_app,
)
from checkie.game.registry import GameRegistry


def _start(client: TestClient, single_player: bool = True) -> str:
    resp = client.post("/api/game/new", json={"singlePlayer": single_player})
    assert resp.status_code == 200
    return resp.json()["gameId"]


def _move(client: TestClient, game_id: str, *coords: int):
    from_row, from_col, to_row, to_col = coords
    return client.post(
        "/api/game/move",
        json={
            "gameId": game_id,
            "fromRow": from_row,
            "fromCol": from_col,
            "toRow": to_row,
            "toCol": to_col,
        },
    )


class TestCreateApp:
    def test_keeps_empty_registry(self) -> None:
        registry = GameRegistry()
        assert len(registry) == 0
        assert create_app(registry).state.registry is registry

    def test_fresh_registry_by_default(self) -> None:
        assert isinstance(create_app().state.registry, GameRegistry)


class TestNewGame:
    def test_returns_id_and_message(self, client: TestClient) -> None:
        resp = client.post("/api/game/new", json={"singlePlayer": True})
        assert resp.status_code == 200
        body = resp.json()
        assert body["gameId"]
        assert body["message"] == NEW_GAME_MESSAGE

    def test_body_is_optional(self, client: TestClient, registry: GameRegistry) -> None:
        resp = client.post("/api/game/new")
        assert resp.status_code == 200
        assert registry.get(resp.json()["gameId"]).single_player

    def test_two_player(self, client: TestClient, registry: GameRegistry) -> None:
        game_id = _start(client, single_player=False)
        assert not registry.get(game_id).single_player


class TestMove:
    def test_legal_move(self, client: TestClient) -> None:
        game_id = _start(client)
        resp = _move(client, game_id, 2, 1, 3, 0)
        assert resp.status_code == 200
        assert resp.json() == {"gameId": game_id, "message": MOVE_APPLIED_MESSAGE}

    def test_illegal_move(self, client: TestClient) -> None:
        game_id = _start(client)
        resp = _move(client, game_id, 2, 1, 4, 3)
        assert resp.status_code == 400
        assert resp.json() == {"gameId": game_id, "message": ILLEGAL_MOVE_MESSAGE}

    def test_unknown_game(self, client: TestClient) -> None:
        resp = _move(client, "non-existent-id", 2, 1, 3, 2)
        assert resp.status_code == 404
        body = resp.json()
        assert body["gameId"] == "non-existent-id"
        assert "Game with id 'non-existent-id' not found" in body["message"]

    def test_blank_game_id(self, client: TestClient) -> None:
        resp = _move(client, "   ", 2, 1, 3, 0)
        assert resp.status_code == 422

    def test_missing_coordinate(self, client: TestClient) -> None:
        game_id = _start(client)
        resp = client.post(
            "/api/game/move",
            json={"gameId": game_id, "fromRow": 2, "fromCol": 1, "toRow": 3},
        )
        assert resp.status_code == 422


class TestState:
    def test_fresh_game(self, client: TestClient) -> None:
        game_id = _start(client)
        resp = client.get("/api/game/state", params={"gameId": game_id})
        assert resp.status_code == 200
        body = resp.json()
        assert body["gameId"] == game_id
        assert len(body["pieces"]) == 24
        assert body["currentTurn"] == "BLACK"
        assert body["gameOver"] is False
        assert body["winner"] is None
        assert body["singlePlayer"] is True
        assert body["pieces"][0] == {"color": "BLACK", "king": False, "row": 0, "col": 1}

    def test_after_computer_reply(self, client: TestClient) -> None:
        game_id = _start(client)
        _move(client, game_id, 2, 1, 3, 0)
        body = client.get("/api/game/state", params={"gameId": game_id}).json()
        squares = {(p["row"], p["col"]): p["color"] for p in body["pieces"]}
        assert squares[(3, 0)] == "BLACK"
        assert squares[(4, 1)] == "RED"
        assert body["currentTurn"] == "BLACK"

    def test_unknown_game(self, client: TestClient) -> None:
        resp = client.get("/api/game/state", params={"gameId": "non-existent-id"})
        assert resp.status_code == 404
        assert resp.json()["message"] == "Game with id 'non-existent-id' not found"

    def test_missing_query(self, client: TestClient) -> None:
        assert client.get("/api/game/state").status_code == 422


class TestHealth:
    def test_counts_games(self, client: TestClient) -> None:
        _start(client)
        _start(client)
        resp = client.get("/health")
        assert resp.status_code == 200
        assert resp.json() == {"status": "ok", "games": 2}
