"""
HTTP client for the quiz REST API, used by the browser pages.

With no base URL configured the client calls the running Flask app
in-process through httpx's WSGI transport; otherwise it talks to a remote
backend. There is no retry: a failed call surfaces as QuizApiError.
"""
from typing import Optional

import httpx
from flask import current_app

IN_PROCESS_BASE_URL = "http://quizbox.local"


class QuizApiError(Exception):
    """Non-2xx response or transport failure."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code

    @property
    def not_found(self) -> bool:
        return self.status_code == 404


class QuizApiClient:
    """Thin wrapper over the /quizzes endpoints."""

    def __init__(self, base_url: str, api_prefix: str = "/api", transport: Optional[httpx.BaseTransport] = None,
                 timeout: float = 10.0):
        self.api_url = base_url.rstrip("/") + api_prefix.rstrip("/") + "/quizzes"
        self._client = httpx.Client(
            transport=transport,
            timeout=timeout,
            headers={"Content-Type": "application/json"},
        )

    @classmethod
    def from_app(cls, app=None) -> "QuizApiClient":
        """Build a client from the app config, in-process when API_BASE_URL is empty."""
        app = app or current_app._get_current_object()
        base_url = app.config.get("API_BASE_URL") or ""
        transport = None
        if not base_url:
            base_url = IN_PROCESS_BASE_URL
            transport = httpx.WSGITransport(app=app)
        return cls(
            base_url,
            api_prefix=app.config.get("API_PREFIX", "/api"),
            transport=transport,
            timeout=app.config.get("API_TIMEOUT_SECONDS", 10.0),
        )

    def close(self):
        self._client.close()

    def __enter__(self):
        return self

    def __exit__(self, *exc_info):
        self.close()

    def _request(self, method: str, url: str, fallback_error: str, **kwargs) -> httpx.Response:
        try:
            response = self._client.request(method, url, **kwargs)
        except httpx.HTTPError as e:
            raise QuizApiError(f"{fallback_error}: {e}") from e

        if response.is_success:
            return response

        message = fallback_error
        try:
            body = response.json()
        except ValueError:
            body = None
        if isinstance(body, dict) and body.get("error"):
            message = body["error"]
        raise QuizApiError(message, response.status_code)

    def create_quiz(self, title: str, description: str, questions: list) -> dict:
        """Create a quiz; questions are REST payload dicts."""
        response = self._request(
            "POST", self.api_url, "Failed to create quiz",
            json={"title": title, "description": description, "questions": questions},
        )
        return response.json()

    def list_quizzes(self) -> list:
        return self._request("GET", self.api_url, "Failed to fetch quizzes").json()

    def get_quiz(self, quiz_id: int) -> dict:
        return self._request("GET", f"{self.api_url}/{quiz_id}", "Failed to fetch quiz").json()

    def delete_quiz(self, quiz_id: int) -> None:
        self._request("DELETE", f"{self.api_url}/{quiz_id}", "Failed to delete quiz")
