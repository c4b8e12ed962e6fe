import logging
from typing import Any, Dict, List, Optional

import requests

logger = logging.getLogger(__name__)

DEFAULT_API_URL = "http://localhost:4000/api"


class ApiError(Exception):
    """A request to the puzzle server failed (network error or non-2xx reply)."""

    def __init__(self, message: str, status: Optional[int] = None):
        super().__init__(message)
        self.status = status


class ApiClient:
    """Thin HTTP client for the auth/score endpoints."""

    def __init__(self, base_url: str = DEFAULT_API_URL, session: Optional[requests.Session] = None, timeout: float = 10.0):
        self.base_url = base_url.rstrip("/")
        self.session = session or requests.Session()
        self.timeout = timeout

    def _request(self, method: str, path: str, **kwargs) -> Any:
        url = f"{self.base_url}{path}"
        try:
            response = self.session.request(method, url, timeout=self.timeout, **kwargs)
        except requests.RequestException as exc:
            raise ApiError(f"{method} {path} failed: {exc}") from exc
        try:
            data = response.json()
        except ValueError:
            data = None
        if not response.ok:
            message = None
            if isinstance(data, dict):
                message = data.get("message") or data.get("error")
            raise ApiError(message or f"{method} {path} returned HTTP {response.status_code}", response.status_code)
        return data

    def login_or_register(self, username: str) -> str:
        data = self._request("POST", "/auth/login-or-register", json={"username": username})
        token = data.get("token") if isinstance(data, dict) else None
        if not token:
            raise ApiError("Login/Register failed")
        return token

    def submit_score(self, token: str, score: int, name: Optional[str] = None) -> Dict[str, Any]:
        payload: Dict[str, Any] = {"score": score}
        if name:
            payload["name"] = name
        headers = {"Authorization": f"Bearer {token}"}
        return self._request("POST", "/score", json=payload, headers=headers)

    def leaderboard(self) -> List[Dict[str, Any]]:
        return self._request("GET", "/leaderboard") or []
