"""HTTP client for the daily quiz API."""

from __future__ import annotations

from typing import Any

import httpx


class ApiError(Exception):
    """Non-2xx response from the quiz API."""

    def __init__(self, status_code: int, message: str):
        super().__init__(message)
        self.status_code = status_code
        self.message = message


class QuizApiClient:
    """One method per endpoint; returns decoded JSON."""

    def __init__(self, http: httpx.Client, prefix: str = "/api") -> None:
        self._http = http
        self._prefix = prefix.rstrip("/")

    @classmethod
    def connect(cls, base_url: str, prefix: str = "/api", timeout: float = 10.0) -> QuizApiClient:
        return cls(httpx.Client(base_url=base_url, timeout=timeout), prefix=prefix)

    def _request(self, method: str, path: str, json: Any = None) -> Any:
        response = self._http.request(method, f"{self._prefix}{path}", json=json)
        if response.is_error:
            raise ApiError(response.status_code, _error_message(response))
        if not response.content:
            return None
        return response.json()

    def login(self, name: str) -> dict:
        return self._request("POST", "/users/login", {"name": name})

    def get_user(self, user_id: str) -> dict:
        return self._request("GET", f"/users/{user_id}")

    def rename_user(self, user_id: str, name: str) -> dict:
        return self._request("PUT", f"/users/{user_id}", {"name": name})

    def authenticate_admin(self, admin_id: str, password: str, current_user_id: str) -> dict:
        return self._request(
            "POST",
            "/admin/auth",
            {"id": admin_id, "password": password, "currentUserId": current_user_id},
        )

    def list_users(self) -> list[dict]:
        return self._request("GET", "/users")

    def list_problems(self) -> list[dict]:
        return self._request("GET", "/problems")

    def create_problem(self, date: str, question: Any, answer: int) -> dict:
        return self._request("POST", "/problems", {"date": date, "question": question, "answer": answer})

    def delete_problem(self, date: str) -> dict:
        return self._request("DELETE", f"/problems/{date}")

    def solve(self, date: str, user_id: str, answer: int) -> dict:
        return self._request("POST", f"/problems/{date}/solve", {"userId": user_id, "answer": answer})


def _error_message(response: httpx.Response) -> str:
    try:
        body = response.json()
    except ValueError:
        return response.text or response.reason_phrase
    if isinstance(body, dict) and body.get("detail"):
        return str(body["detail"])
    return response.text
