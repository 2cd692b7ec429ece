# backend/tests/test_api.py
# Test cases for the HTTP endpoints

import pytest
from fastapi.testclient import TestClient

from tictactoe_bot.core.config import settings
from tictactoe_bot.main import app

API = settings.API_V1_STR


@pytest.fixture
def client():
    return TestClient(app)


def test_health(client):
    response = client.get(f"{API}/health")
    assert response.status_code == 200
    assert response.json() == {"status": "healthy"}


def test_ai_move_wins(client):
    payload = {
        "board": ["X", "O", "X", "O", "X", "O", None, None, None],
        "player": "X",
        "difficulty": "UNBEATABLE",
    }
    response = client.post(f"{API}/ai/move", json=payload)
    assert response.status_code == 200
    body = response.json()
    assert body["move"] == 8
    assert (body["row"], body["col"]) == (2, 2)
    assert body["board"][8] == "X"
    assert body["status"] == "win"
    assert body["winner"] == "X"
    assert body["winning_line"] == [0, 4, 8]


def test_ai_move_in_progress(client):
    payload = {"board": [None] * 9, "player": "X", "difficulty": "medium", "seed": 7}
    response = client.post(f"{API}/ai/move", json=payload)
    assert response.status_code == 200
    body = response.json()
    assert body["status"] == "in_progress"
    assert body["winner"] is None
    assert body["board"].count("X") == 1


def test_ai_move_on_full_board_is_rejected(client):
    payload = {
        "board": ["X", "O", "X", "O", "X", "O", "O", "X", "O"],
        "player": "X",
    }
    response = client.post(f"{API}/ai/move", json=payload)
    assert response.status_code == 400


def test_ai_move_with_wrong_board_length_is_rejected(client):
    response = client.post(f"{API}/ai/move", json={"board": [None] * 8, "player": "O"})
    assert response.status_code == 400


def test_ai_move_with_bad_config_is_rejected(client):
    payload = {"board": [None] * 9, "player": "O", "win_length": 5}
    assert client.post(f"{API}/ai/move", json=payload).status_code == 400

    payload = {"board": [None] * 9, "player": "O", "difficulty": "impossible"}
    assert client.post(f"{API}/ai/move", json=payload).status_code == 400


def test_ai_move_with_bad_player_is_unprocessable(client):
    response = client.post(f"{API}/ai/move", json={"board": [None] * 9, "player": "Z"})
    assert response.status_code == 422


def test_render_board(client):
    payload = {
        "board": ["X", None, None, "O"],
        "size": 2,
        "player": "Alice",
        "disable_used": True,
    }
    response = client.post(f"{API}/board/render", json=payload)
    assert response.status_code == 200
    body = response.json()
    assert body["content"] == "Alice, select your move:"
    assert len(body["components"]) == 2
    first_row = body["components"][0]["components"]
    assert first_row[0]["label"] == "X"
    assert first_row[0]["disabled"] is True
    assert first_row[1]["disabled"] is False


def test_render_board_for_ai_turn(client):
    payload = {"board": [None] * 9, "player": "AI", "emojis": [":dog:", ":cat:"]}
    body = client.post(f"{API}/board/render", json=payload).json()
    assert body["content"] == ":robot: AI is playing, please wait..."


def test_render_finished_board(client):
    payload = {"board": ["X", "X", "X", "O", "O", None, None, None, None], "embed_color": 255}
    body = client.post(f"{API}/board/render", json=payload).json()
    assert "content" not in body
    assert body["embeds"][0]["color"] == 255
    assert all(b["disabled"] for row in body["components"] for b in row["components"])
