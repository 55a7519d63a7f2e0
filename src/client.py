"""Minimal HTTP client for the weather endpoint.

Wraps ``POST /api/weather`` and turns error replies into
:class:`WeatherClientError` so callers only deal with observations.
"""

from typing import Any, Dict, Optional
import requests

from climate.observation import ObservationResult


class WeatherClientError(Exception):
    """Raised when the weather endpoint cannot produce an observation."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code


class WeatherHttpClient:
    """Very small JSON client targeting the /api/weather endpoint."""

    def __init__(self, base_url: str, timeout: float = 20):
        """Initialize the weather HTTP client.

        Parameters
        ----------
        base_url : str
            Base URL where the FastAPI app is listening (e.g., http://localhost:8000)
        timeout : float
            Seconds to wait for the server, simulated delay included
        """
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout

    def _headers(self) -> Dict[str, str]:
        return {"Content-Type": "application/json", "Accept": "application/json"}

    def fetch_weather(self, city: str, state: str) -> ObservationResult:
        """Request a synthetic observation for a city."""
        payload = {"city": city, "state": state}
        try:
            r = requests.post(
                f"{self.base_url}/api/weather", json=payload, headers=self._headers(), timeout=self.timeout
            )
        except requests.RequestException as e:
            raise WeatherClientError(f"Unable to reach weather service: {e}") from e

        data = self._json(r)
        if not r.ok or "error" in data:
            message = str(data.get("error") or f"HTTP {r.status_code}")
            raise WeatherClientError(message, status_code=r.status_code)
        try:
            return ObservationResult.from_wire(data)
        except (KeyError, TypeError, ValueError) as e:
            raise WeatherClientError(f"Malformed weather response: {e}", status_code=r.status_code) from e

    @staticmethod
    def _json(r: requests.Response) -> Dict[str, Any]:
        try:
            data = r.json()
        except ValueError:
            return {}
        return data if isinstance(data, dict) else {}
