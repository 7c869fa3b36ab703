import uuid
from datetime import datetime, timedelta, timezone

import pytest

from daily_quiz.models.user_db.user_db import User


def test_login_registers_new_user_with_defaults(login):
    user = login("alice")

    assert user["name"] == "alice"
    assert user["score"] == 0
    assert user["isAdmin"] is False
    assert user["latestQuizDate"] is None
    assert user["loginId"].startswith("alice")
    assert "password" not in user
    assert "passwordHash" not in user


def test_login_is_idempotent_by_name(login):
    first = login("bob")
    second = login("bob")
    assert first["id"] == second["id"]


def test_login_strips_surrounding_whitespace(login):
    assert login("  carol ")["id"] == login("carol")["id"]


@pytest.mark.parametrize("body", [{"name": ""}, {"name": "   "}, {}])
def test_login_requires_a_name(client, body):
    response = client.post("/api/users/login", json=body)
    assert response.status_code == 400


def test_get_user(client, login):
    user = login("dave")
    response = client.get(f"/api/users/{user['id']}")
    assert response.status_code == 200
    assert response.json()["name"] == "dave"


def test_get_unknown_user_is_404(client):
    assert client.get(f"/api/users/{uuid.uuid4()}").status_code == 404


@pytest.mark.parametrize("user_id", ["not-a-uuid", "5f8d0d55b54764421b7156c9"])
def test_unparseable_user_id_is_404(client, user_id):
    assert client.get(f"/api/users/{user_id}").status_code == 404
    assert client.put(f"/api/users/{user_id}", json={"name": "x"}).status_code == 404


def test_rename_user(client, login):
    user = login("erin")
    response = client.put(f"/api/users/{user['id']}", json={"name": "erin2"})

    assert response.status_code == 200
    assert response.json()["name"] == "erin2"
    assert response.json()["id"] == user["id"]
    assert client.get(f"/api/users/{user['id']}").json()["name"] == "erin2"


def test_rename_unknown_user_is_404(client):
    response = client.put(f"/api/users/{uuid.uuid4()}", json={"name": "x"})
    assert response.status_code == 404


def test_rename_to_empty_name_is_400(client, login):
    user = login("frank")
    response = client.put(f"/api/users/{user['id']}", json={"name": " "})
    assert response.status_code == 400


@pytest.mark.parametrize("new_name", ["root", "gina", "", "quizmaster"])
def test_admin_identity_cannot_be_renamed(client, login, promote, new_name):
    user = login("gina")
    promote(user["id"])

    response = client.put(f"/api/users/{user['id']}", json={"name": new_name})

    assert response.status_code == 403
    assert client.get(f"/api/users/{user['id']}").json()["name"] == "gina"


def test_leaderboard_orders_by_score_then_earliest_solver(client, login, promote, db_session):
    early, late, low = login("early"), login("late"), login("low")
    admin = login("boss")
    promote(admin["id"])

    t1 = datetime(2024, 1, 1, 9, 0, tzinfo=timezone.utc)
    t2 = t1 + timedelta(hours=1)
    for user_id, score, when in [
        (late["id"], 3, t2),
        (early["id"], 3, t1),
        (low["id"], 1, t1 - timedelta(days=1)),
    ]:
        row = db_session.get(User, uuid.UUID(user_id))
        row.score = score
        row.latest_quiz_at = when
    db_session.commit()

    response = client.get("/api/users")

    assert response.status_code == 200
    names = [u["name"] for u in response.json()]
    assert names == ["early", "late", "low"]


def test_leaderboard_excludes_admin(client, login, promote):
    login("player")
    admin = login("boss")
    promote(admin["id"])

    names = [u["name"] for u in client.get("/api/users").json()]
    assert names == ["player"]
