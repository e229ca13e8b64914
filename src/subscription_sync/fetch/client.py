"""HTTP client for the spreadsheet web endpoint (Apps Script web app).

Keep all network calls here; everything downstream of fetch_rows() is pure.

Response contract:
    {"success": true, "data": [[...header...], [...], ...]}
    {"success": false, "error": "message"}
"""

from __future__ import annotations

import logging
import time
from typing import Any

import httpx

from ..config.loader import ConfigError
from ..models.config_models import SyncConfig
from .errors import DEFAULT_FETCH_ERROR, UpstreamUnavailable

__all__ = [
    "SheetClient",
    "redact_url",
]

logger = logging.getLogger(__name__)


def redact_url(url: str) -> str:
    """Reduce an endpoint URL to scheme and host for logs and error records.

    The Apps Script path carries the deployment ID and is never logged.

    Examples:
        >>> redact_url("https://script.google.com/macros/s/AKfy/exec")
        'https://script.google.com'
    """
    try:
        parsed = httpx.URL(url)
    except httpx.InvalidURL:
        return "<invalid url>"
    if not parsed.host:
        return "<invalid url>"
    return f"{parsed.scheme}://{parsed.host}"


class SheetClient:
    def __init__(
        self,
        *,
        endpoint_url: str,
        timeout_seconds: float = 30.0,
        client: httpx.Client | None = None,
    ) -> None:
        self._endpoint_url = endpoint_url
        self._timeout_seconds = timeout_seconds
        self._owns_client = client is None
        self._client = client or httpx.Client(timeout=timeout_seconds, follow_redirects=True)

    @classmethod
    def from_config(cls, config: SyncConfig, *, client: httpx.Client | None = None) -> SheetClient:
        if not config.endpoint_url:
            raise ConfigError("Google Script URL is not defined")
        return cls(
            endpoint_url=config.endpoint_url,
            timeout_seconds=config.timeout_seconds,
            client=client,
        )

    @property
    def source_name(self) -> str:
        return redact_url(self._endpoint_url)

    def fetch_rows(self, sheet: str) -> list[list[Any]]:
        """Fetch every row of `sheet`, header row included.

        Raises:
            UpstreamUnavailable: transport error, non-2xx status, unreadable payload,
                success=false, or `data` that is not a list
        """
        # _t: cache buster (Apps Script responses are cached by proxies)
        params = {"sheet": sheet, "_t": str(int(time.time() * 1000))}
        logger.debug(f"fetching sheet={sheet} from {self.source_name}")
        try:
            resp = self._client.get(self._endpoint_url, params=params, timeout=self._timeout_seconds)
            resp.raise_for_status()
        except httpx.HTTPStatusError as e:
            # httpx のメッセージは URL 全体を含むのでステータスのみ
            raise UpstreamUnavailable(
                f"request failed: HTTP {e.response.status_code}", source=self.source_name
            ) from e
        except httpx.HTTPError as e:
            raise UpstreamUnavailable(f"request failed: {e}", source=self.source_name) from e

        try:
            payload = resp.json()
        except ValueError as e:
            raise UpstreamUnavailable("response is not valid JSON", source=self.source_name) from e

        if not isinstance(payload, dict):
            raise UpstreamUnavailable("unexpected response shape", source=self.source_name)
        if not payload.get("success"):
            raise UpstreamUnavailable(str(payload.get("error") or DEFAULT_FETCH_ERROR), source=self.source_name)

        rows = payload.get("data")
        if not isinstance(rows, list):
            raise UpstreamUnavailable(
                f"expected a list of rows, got {type(rows).__name__}", source=self.source_name
            )
        logger.debug(f"fetched {len(rows)} rows (header included)")
        return rows

    def close(self) -> None:
        if self._owns_client:
            self._client.close()

    def __enter__(self) -> SheetClient:
        return self

    def __exit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        self.close()
