# qr_api/services/shorten.py
"""Client for the Kutt URL shortener."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Optional

import httpx
from loguru import logger

from qr_api.core.config import Settings

LINKS_PATH = "/api/v2/links"


class ShortenError(Exception):
    """The shortener failed or answered with something unusable."""


class ShortenNotConfiguredError(ShortenError):
    """No KUTT_API_KEY is configured."""


@dataclass(frozen=True)
class ShortenResult:
    short_url: str


class ShortenClient:
    """
    Creates short links through Kutt's `POST /api/v2/links`.

    One blocking request per call: no retries, no caching. `transport` lets
    tests plug in an httpx.MockTransport.
    """

    def __init__(
        self,
        settings: Settings,
        transport: Optional[httpx.BaseTransport] = None,
    ) -> None:
        self.api_key = (settings.KUTT_API_KEY or "").strip() or None
        self.base_url = settings.kutt_base
        self.short_domain = settings.short_domain_base
        self.domain = settings.short_domain_host
        self.transport = transport

    @property
    def configured(self) -> bool:
        return self.api_key is not None

    def _payload(self, target_url: str, custom_slug: Optional[str]) -> Dict[str, Any]:
        payload: Dict[str, Any] = {"target": target_url, "domain": self.domain}
        if custom_slug:
            payload["customurl"] = custom_slug
        return payload

    def _absolute(self, link: str) -> str:
        if link.startswith("http"):
            return link
        return f"{self.short_domain}/{link.lstrip('/')}"

    def shorten(self, target_url: str, custom_slug: Optional[str] = None) -> ShortenResult:
        """
        Raises:
            ShortenNotConfiguredError: KUTT_API_KEY is not set.
            ShortenError: upstream unreachable, non-2xx, or no link in the answer.
        """
        if not self.configured:
            raise ShortenNotConfiguredError("KUTT_API_KEY is not configured")

        try:
            with httpx.Client(transport=self.transport) as client:
                res = client.post(
                    f"{self.base_url}{LINKS_PATH}",
                    json=self._payload(target_url, custom_slug),
                    headers={"X-API-Key": self.api_key},
                )
        except httpx.HTTPError as e:
            logger.warning("Kutt request failed: {}", e)
            raise ShortenError(f"Kutt API request failed: {e}") from e

        if not res.is_success:
            raise ShortenError(f"Kutt API error {res.status_code}: {res.text}")

        try:
            data = res.json()
        except ValueError as e:
            raise ShortenError("Kutt API returned invalid JSON") from e
        if not isinstance(data, dict):
            data = {}

        link = data.get("link")
        if link is None and data.get("id"):
            link = f"{self.short_domain}/{data['id']}"
        if not link:
            raise ShortenError("Kutt API did not return a short URL")

        return ShortenResult(short_url=self._absolute(str(link)))
