# petstore/client.py
"""
Client for a remote pet store exposing the same three endpoints as this
service. It is not wired to the local store.

Every call returns ``(status_code, decoded_body)``. An error status from
the remote side is ordinary data; only a failed exchange (connection
refused, DNS, transport timeout) raises ``PetStoreTransportError``.
"""

import json
import logging
from typing import Any, Dict, Mapping, Optional, Tuple

import httpx

from petstore.exceptions import PetStoreTransportError

logger = logging.getLogger(__name__)

ApiResponse = Tuple[int, Any]


def _decode(content: bytes) -> Any:
    if not content:
        return None
    try:
        return json.loads(content)
    except ValueError:
        logger.warning("Response body is not JSON (%d bytes)", len(content))
        return None


def send_request(
    url: str,
    method: str,
    headers: Mapping[str, str],
    body: Optional[Any] = None,
    http: Optional[httpx.Client] = None,
) -> ApiResponse:
    """
    Perform one HTTP exchange and return the status with the decoded body.

    ``body`` is JSON-encoded when given. Pass ``http`` to reuse a client;
    otherwise a short-lived one is opened for this call.
    """
    content = json.dumps(body).encode() if body is not None else None

    owned = http is None
    if owned:
        http = httpx.Client()

    try:
        response = http.request(method, url, headers=dict(headers), content=content)
    except httpx.TransportError as exc:
        raise PetStoreTransportError(method, url, str(exc) or type(exc).__name__) from exc
    finally:
        if owned:
            http.close()

    logger.debug("%s %s -> %s", method, url, response.status_code)
    return response.status_code, _decode(response.content)


class PetStoreClient:
    """
    Usage:
        with PetStoreClient("https://api.example.com", "my-key") as client:
            status, pets = client.list_all()
    """

    def __init__(self, base_url: str, api_key: str, http: Optional[httpx.Client] = None):
        self.base_url = base_url.rstrip("/")
        self.api_key = api_key
        self._owns_http = http is None
        self._http = http if http is not None else httpx.Client()

    def __enter__(self) -> "PetStoreClient":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def close(self) -> None:
        if self._owns_http:
            self._http.close()

    @property
    def headers(self) -> Dict[str, str]:
        return {
            "api-key": self.api_key,
            "Content-Type": "application/json",
            "Accept": "application/json",
        }

    def _request(self, endpoint: str, method: str = "GET", data: Optional[dict] = None) -> ApiResponse:
        return send_request(self.base_url + endpoint, method, self.headers, data, http=self._http)

    def list_all(self) -> ApiResponse:
        return self._request("/pets")

    def get_by_id(self, pet_id: int) -> ApiResponse:
        return self._request(f"/pets/{pet_id}")

    def create(self, name: str, tag: Optional[str] = None) -> ApiResponse:
        data = {"name": name}
        if tag:
            data["tag"] = tag
        return self._request("/pets", "POST", data)
