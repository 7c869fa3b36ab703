import os

os.environ["DATABASE_URL"] = "sqlite://"
os.environ["ADMIN_ID"] = "quizmaster"
os.environ["ADMIN_PASSWORD"] = "s3cret!"
os.environ["CREATE_TABLES"] = "false"

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.orm import sessionmaker

from daily_quiz.core.database import Base, build_engine, get_db
from main import app

ADMIN_ID = os.environ["ADMIN_ID"]
ADMIN_PASSWORD = os.environ["ADMIN_PASSWORD"]

SAMPLE_QUESTION = {"text": "2+2?", "options": [{"text": "3"}, {"text": "4"}]}


@pytest.fixture
def engine(tmp_path):
    engine = build_engine(f"sqlite:///{tmp_path / 'quiz.db'}")
    Base.metadata.create_all(bind=engine)
    yield engine
    engine.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture
def db_session(session_factory):
    db = session_factory()
    yield db
    db.close()


@pytest.fixture
def client(session_factory):
    def override_get_db():
        db = session_factory()
        try:
            yield db
        finally:
            db.close()

    app.dependency_overrides[get_db] = override_get_db
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def login(client):
    def _login(name):
        response = client.post("/api/users/login", json={"name": name})
        assert response.status_code == 200, response.text
        return response.json()
    return _login


@pytest.fixture
def make_problem(client):
    def _make(date="2024-01-01", question=None, answer=2):
        response = client.post(
            "/api/problems",
            json={"date": date, "question": question or SAMPLE_QUESTION, "answer": answer},
        )
        assert response.status_code == 201, response.text
        return response.json()
    return _make


@pytest.fixture
def promote(client):
    def _promote(user_id):
        response = client.post(
            "/api/admin/auth",
            json={"id": ADMIN_ID, "password": ADMIN_PASSWORD, "currentUserId": user_id},
        )
        assert response.status_code == 200, response.text
        return response.json()
    return _promote
