"""HTTP dataset provider backed by httpx."""

import logging
from typing import Any, Optional

import httpx

from txn_report.core.exceptions import UpstreamError

logger = logging.getLogger(__name__)


def ensure_records(payload: Any, source: str) -> list[dict[str, Any]]:
    if not isinstance(payload, list):
        raise UpstreamError(source, f"expected a JSON array, got {type(payload).__name__}")
    if not all(isinstance(item, dict) for item in payload):
        raise UpstreamError(source, "array items must be JSON objects")
    return payload


class HttpDatasetProvider:
    """Fetches the dataset as a JSON array from a fixed URL."""

    def __init__(
        self,
        url: str,
        timeout_seconds: float = 30.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self._url = url
        self._timeout = timeout_seconds
        self._transport = transport

    @property
    def source(self) -> str:
        return self._url

    async def fetch(self) -> list[dict[str, Any]]:
        logger.info("Fetching dataset from %s", self._url)
        try:
            async with httpx.AsyncClient(timeout=self._timeout, transport=self._transport) as client:
                response = await client.get(self._url)
                response.raise_for_status()
                payload = response.json()
        except httpx.HTTPError as exc:
            raise UpstreamError(self._url, str(exc)) from exc
        except ValueError as exc:
            raise UpstreamError(self._url, f"invalid JSON: {exc}") from exc

        return ensure_records(payload, self._url)
