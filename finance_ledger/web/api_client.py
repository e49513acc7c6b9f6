"""HTTP client the web frontend uses to talk to the ledger API."""
import logging
from typing import Any, Optional

import httpx

logger = logging.getLogger(__name__)


class ApiError(Exception):
    """The API answered with an error status."""

    def __init__(self, status_code: int, message: str):
        super().__init__(message)
        self.status_code = status_code
        self.message = message


class ApiUnavailableError(Exception):
    """The API could not be reached."""


class ApiClient:
    """Thin JSON wrapper around an ``httpx.Client`` pointed at ``/api/v1``.

    Args:
        base_url: Root URL of the API service, e.g. ``http://127.0.0.1:3000``.
        client: Optional pre-built client (tests pass the API's TestClient).
    """

    def __init__(self, base_url: str = "", client: Optional[httpx.Client] = None):
        self.client = client or httpx.Client(base_url=base_url, timeout=30.0)

    def get(self, endpoint: str, params: Optional[dict] = None) -> Any:
        return self._request("GET", endpoint, params=params)

    def post(self, endpoint: str, payload: Optional[dict] = None) -> Any:
        return self._request("POST", endpoint, json=payload)

    def put(self, endpoint: str, payload: dict) -> Any:
        return self._request("PUT", endpoint, json=payload)

    def delete(self, endpoint: str) -> None:
        self._request("DELETE", endpoint)

    def close(self) -> None:
        self.client.close()

    def _request(self, method: str, endpoint: str, **kwargs) -> Any:
        url = f"/api/v1{endpoint}"
        try:
            response = self.client.request(method, url, **kwargs)
        except httpx.RequestError as e:
            logger.error(f"Request error calling {method} {url}: {e}")
            raise ApiUnavailableError(f"Failed to reach API: {e}")

        if response.status_code >= 400:
            try:
                body = response.json()
            except ValueError:
                body = None
            message = body.get("detail", response.text) if isinstance(body, dict) else response.text
            logger.warning(f"API returned {response.status_code} for {method} {url}: {message}")
            raise ApiError(response.status_code, str(message))

        if response.status_code == 204 or not response.content:
            return None
        return response.json()
