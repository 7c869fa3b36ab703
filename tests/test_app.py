import logging

from daily_quiz.client.api_client import ApiError, QuizApiClient
from daily_quiz.core.logging_config import configure_logging


def test_health(client):
    assert client.get("/health").json() == {"status": "ok"}


def test_validation_errors_are_400_with_detail(client):
    response = client.post("/api/problems/2024-01-01/solve", json={"answer": 1})

    assert response.status_code == 400
    assert "userId" in response.json()["detail"]


def test_api_client_surfaces_error_detail(client):
    api = QuizApiClient(client)
    try:
        api.delete_problem("2030-01-01")
    except ApiError as exc:
        assert exc.status_code == 404
        assert "2030-01-01" in exc.message
    else:
        raise AssertionError("expected ApiError")


def test_connect_builds_an_http_client():
    api = QuizApiClient.connect("http://quiz.example", prefix="/api/")
    assert api._prefix == "/api"
    assert api._http.base_url.host == "quiz.example"


def test_configure_logging_returns_package_logger():
    logger = configure_logging("debug")
    assert logger.name == "daily_quiz"
    assert isinstance(logger, logging.Logger)
