"""Hetzner DNS API client — zone lookup and TXT record create/list/delete."""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Self, TypeVar

import httpx

from hetzner_webhook.errors import AmbiguousZone, DecodeError, TransportError, UnexpectedStatus
from hetzner_webhook.models import Record, Zone

logger = logging.getLogger(__name__)

API_BASE = "https://dns.hetzner.com/api/v1"
_DEFAULT_TIMEOUT = 30

T = TypeVar("T")


class HetznerDnsClient:
    """Thin client for the Hetzner DNS REST API, bound to a single API token."""

    def __init__(
        self,
        api_key: str,
        base_url: str = API_BASE,
        timeout: float = _DEFAULT_TIMEOUT,
        _http_client: httpx.Client | None = None,
    ) -> None:
        self._base_url = base_url.rstrip("/")
        self._client = _http_client or httpx.Client(
            headers={"Auth-API-Token": api_key},
            timeout=timeout,
        )

    def __enter__(self) -> Self:
        return self

    def __exit__(self, *exc: object) -> None:
        self.close()

    def close(self) -> None:
        """Close the underlying HTTP client."""
        self._client.close()

    def _request(self, method: str, path: str, **kwargs) -> httpx.Response:
        url = f"{self._base_url}{path}"
        try:
            resp = self._client.request(method, url, **kwargs)
        except httpx.HTTPError as exc:
            raise TransportError(f"{method} {url} failed: {exc}") from exc
        logger.debug("%s %s -> %s", method, url, resp.status_code)
        return resp

    @staticmethod
    def _decode(resp: httpx.Response, field: str, parse: Callable[[dict], T]) -> list[T]:
        """Parse ``{"<field>": [...]}`` from a JSON response body."""
        try:
            items = resp.json()[field]
            return [parse(item) for item in items]
        except (ValueError, KeyError, TypeError) as exc:
            raise DecodeError(f"error decoding JSON: {exc!r}") from exc

    def get_zone_id(self, apex: str) -> str:
        """Look up the Hetzner zone ID for an exact zone name."""
        resp = self._request("GET", "/zones", params={"name": apex})
        if resp.status_code != 200:
            raise UnexpectedStatus(resp.status_code, resp.reason_phrase)
        zones = self._decode(resp, "zones", Zone.from_dict)
        if len(zones) != 1:
            raise AmbiguousZone(apex, zones)
        logger.debug("Resolved %s", zones[0])
        return zones[0].id

    def create_record(self, record: Record) -> httpx.Response:
        """POST a new record. The response is returned as-is; its status is not checked."""
        return self._request(
            "POST",
            "/records",
            json=record.to_dict(),
            headers={"Content-Type": "application/json"},
        )

    def list_records(self, zone_id: str) -> list[Record]:
        """Return every record in the zone, in the order the API lists them."""
        resp = self._request("GET", "/records", params={"zone_id": zone_id})
        return self._decode(resp, "records", Record.from_dict)

    def delete_record(self, record_id: str) -> httpx.Response:
        return self._request("DELETE", f"/records/{record_id}")
