from typing import Any, Optional

import requests

from huecontrol.errors import TransportError
from huecontrol.utils.logging_mixin import LoggingMixin

DEFAULT_TIMEOUT = 5

JSON_HEADERS = {"Content-Type": "application/json"}


class HttpClient(LoggingMixin):
    """Thin wrapper around a requests session talking to the v1 bridge API.

    Every call carries a bounded timeout. Network failures, non-2xx answers and
    bodies that are not JSON all surface as ``TransportError``; there is no
    retry here.
    """

    def __init__(self, headers: Optional[dict[str, str]] = None, *, timeout: float = DEFAULT_TIMEOUT):
        self.session = requests.Session()
        self.headers = headers or {}
        self.timeout = timeout

    def __enter__(self) -> "HttpClient":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def close(self) -> None:
        self.session.close()

    def get(self, url: str, *, timeout: Optional[float] = None) -> Any:
        try:
            r = self.session.get(url, headers=self.headers, timeout=timeout or self.timeout)
            r.raise_for_status()
        except requests.RequestException as e:
            raise TransportError(f"GET {url} failed: {e}", url) from e

        try:
            return r.json()
        except ValueError as e:
            raise TransportError(f"GET {url} returned a body that is not JSON", url) from e

    def put(self, url: str, body: str, *, timeout: Optional[float] = None) -> Any:
        headers = {**self.headers, **JSON_HEADERS}
        try:
            r = self.session.put(url, data=body, headers=headers, timeout=timeout or self.timeout)
            r.raise_for_status()
        except requests.RequestException as e:
            raise TransportError(f"PUT {url} failed: {e}", url) from e

        try:
            js = r.json()
        except ValueError:
            return None

        # v1 answers 200 with a list of {"success": ...} / {"error": ...} entries
        if isinstance(js, list):
            errors = [entry["error"] for entry in js if isinstance(entry, dict) and "error" in entry]
            if errors:
                self.logger.warning("Bridge reported errors for %s: %s", url, errors)
        return js
