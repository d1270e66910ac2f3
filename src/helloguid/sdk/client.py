from __future__ import annotations

import logging
from typing import Any

import httpx

from ..core.entries import RegistryEntry, is_canonical_identifier, validate_name
from ..core.errors import IdentifierCollision, InvalidName, RegistryUnavailable

logger = logging.getLogger(__name__)


class HelloClient:
    """HTTP client for the identifier registry of a running helloguid server.

    Implements the same `retrieve` / `generate` contract as `InMemoryRegistry`,
    so an `Application` can run against a remote server unchanged.

    Contract:
    - GET  /api/identifier?name=...   -> {"identifier": str | null}
    - POST /api/identifier  (JSON {"name": ...}) -> {"identifier": str}

    Calls are blocking and never retried. Transport errors surface as
    `RegistryUnavailable`.
    """

    def __init__(
        self,
        base_url: str = "http://127.0.0.1:8000",
        *,
        timeout_s: float = 10.0,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self.timeout_s = float(timeout_s)
        self._transport = transport

    def _client(self) -> httpx.Client:
        return httpx.Client(base_url=self.base_url, timeout=self.timeout_s, transport=self._transport)

    def _request(self, method: str, url: str, *, name: str | None = None, **kwargs: Any) -> Any:
        try:
            with self._client() as client:
                res = client.request(method, url, **kwargs)
        except httpx.HTTPError as ex:
            logger.warning("%s %s%s failed: %s", method, self.base_url, url, ex)
            raise RegistryUnavailable(f"Cannot reach registry at {self.base_url}: {ex}") from ex

        if res.status_code >= 400:
            detail = _error_detail(res)
            if res.status_code == 400:
                raise InvalidName(name, detail)
            if res.status_code == 409:
                raise IdentifierCollision(None, message=detail)
            raise RegistryUnavailable(f"{method} {url} failed: {res.status_code} {detail}")

        try:
            return res.json()
        except ValueError as ex:
            raise RegistryUnavailable(f"{method} {url} returned invalid JSON: {res.text!r}") from ex

    def retrieve(self, name: str) -> str | None:
        validate_name(name)
        data = self._request("GET", "/api/identifier", name=name, params={"name": name})
        identifier = data.get("identifier") if isinstance(data, dict) else None
        if identifier is None:
            if not isinstance(data, dict) or "identifier" not in data:
                raise RegistryUnavailable(f"Retrieve returned invalid response: {data}")
            return None
        return _checked_identifier(identifier, data)

    def generate(self, name: str) -> str:
        validate_name(name)
        data = self._request("POST", "/api/identifier", name=name, json={"name": name})
        identifier = data.get("identifier") if isinstance(data, dict) else None
        return _checked_identifier(identifier, data)

    def entries(self) -> list[RegistryEntry]:
        data = self._request("GET", "/api/identifiers")
        if not isinstance(data, list):
            raise RegistryUnavailable(f"Listing returned invalid response: {data}")
        try:
            return [
                RegistryEntry(
                    name=str(item["name"]),
                    identifier=str(item["identifier"]),
                    created_at=float(item.get("createdAt", 0.0)),
                )
                for item in data
            ]
        except (KeyError, TypeError, ValueError, AttributeError) as ex:
            raise RegistryUnavailable(f"Listing returned invalid entry: {data}") from ex

    def healthy(self, *, timeout_s: float = 0.2) -> bool:
        """Best-effort probe of `/healthz`."""
        try:
            with httpx.Client(base_url=self.base_url, timeout=timeout_s, transport=self._transport) as client:
                r = client.get("/healthz")
                if r.status_code != 200:
                    return False
                return bool(r.json().get("ok"))
        except (httpx.HTTPError, ValueError, AttributeError):
            return False


def _error_detail(res: httpx.Response) -> str:
    try:
        data = res.json()
    except ValueError:
        return res.text
    if isinstance(data, dict) and "detail" in data:
        return str(data["detail"])
    return res.text


def _checked_identifier(identifier: object, data: object) -> str:
    if not is_canonical_identifier(identifier):
        raise RegistryUnavailable(f"Registry returned invalid identifier: {data}")
    return str(identifier)
