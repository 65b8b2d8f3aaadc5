"""
Digimon catalog client.

Lists catalog summaries by tier and fetches full card definitions by id.
Every transport, status, or payload problem surfaces as
CatalogUnavailableError; nothing is retried here.

API: https://digi-api.com/api/v1/digimon
"""

import logging
from types import TracebackType
from typing import Any, Protocol

import httpx
from pydantic import ValidationError

from digivault.config import settings
from digivault.models.catalog import CatalogCardDetail, CatalogPage
from digivault.models.failure import CatalogUnavailableError

logger = logging.getLogger(__name__)

USER_AGENT = "DigiVault/1.0"

# Upstream noise field on detail payloads, never read
LEGACY_FIELDS = frozenset({"priorEvolutions"})


class CatalogClient(Protocol):
    """What the gacha composer and evolution resolver need from a catalog."""

    async def list_by_tier(self, tier_name: str, page_size: int | None = None) -> CatalogPage: ...

    async def get_by_id(self, card_id: int) -> CatalogCardDetail: ...


def normalize_detail(payload: dict[str, Any]) -> dict[str, Any]:
    """Drop legacy fields from a raw detail payload."""
    return {key: value for key, value in payload.items() if key not in LEGACY_FIELDS}


class HttpCatalogClient:
    """
    CatalogClient backed by the public catalog HTTP API.

    Usage:
        async with HttpCatalogClient() as client:
            page = await client.list_by_tier("Child", 100)

    An injected httpx.AsyncClient is used as-is and never closed here.
    """

    def __init__(
        self,
        base_url: str | None = None,
        timeout: float | None = None,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        self.base_url = (base_url or settings.catalog_api_url).rstrip("/")
        self._owns_client = client is None
        self._client = client or httpx.AsyncClient(
            timeout=timeout if timeout is not None else settings.catalog_timeout,
            headers={"User-Agent": USER_AGENT, "Content-Type": "application/json"},
        )

    async def __aenter__(self) -> "HttpCatalogClient":
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        if self._owns_client:
            await self._client.aclose()

    async def _get_json(self, url: str, params: dict[str, str] | None = None) -> dict[str, Any]:
        try:
            response = await self._client.get(url, params=params)
            response.raise_for_status()
            data = response.json()
        except httpx.TimeoutException as e:
            logger.error("catalog_request_timeout", extra={"url": url})
            raise CatalogUnavailableError("Request timeout - please try again", str(e)) from e
        except httpx.HTTPStatusError as e:
            logger.error(
                "catalog_http_error",
                extra={"url": url, "status_code": e.response.status_code},
            )
            raise CatalogUnavailableError(
                f"HTTP error! status: {e.response.status_code}", str(e)
            ) from e
        except httpx.RequestError as e:
            logger.error("catalog_request_failed", extra={"url": url, "error": str(e)})
            raise CatalogUnavailableError(f"Failed to fetch: {e}", str(e)) from e
        except ValueError as e:
            logger.error("catalog_invalid_json", extra={"url": url})
            raise CatalogUnavailableError("Invalid response format", str(e)) from e

        if not isinstance(data, dict):
            logger.error("catalog_invalid_payload", extra={"url": url})
            raise CatalogUnavailableError("Invalid response format")

        return data

    async def list_by_tier(self, tier_name: str, page_size: int | None = None) -> CatalogPage:
        """
        Fetch one page of summaries for a tier.

        Args:
            tier_name: Raw catalog tier (e.g. "Child", "Adult")
            page_size: Maximum summaries to return; server default if None

        Raises:
            CatalogUnavailableError: If the request or payload is bad
        """
        params: dict[str, str] = {}
        if tier_name:
            params["level"] = tier_name
        if page_size is not None:
            params["pageSize"] = str(page_size)

        data = await self._get_json(self.base_url, params=params)
        try:
            page = CatalogPage.model_validate(data)
        except ValidationError as e:
            logger.error("catalog_invalid_page", extra={"tier": tier_name})
            raise CatalogUnavailableError("Invalid response format", str(e)) from e

        logger.debug(
            "catalog_page_fetched",
            extra={"tier": tier_name, "count": len(page.content)},
        )
        return page

    async def get_by_id(self, card_id: int) -> CatalogCardDetail:
        """
        Fetch the full definition of one card.

        Raises:
            ValueError: If card_id is not a positive integer
            CatalogUnavailableError: If the request or payload is bad
        """
        if isinstance(card_id, bool) or not isinstance(card_id, int) or card_id <= 0:
            raise ValueError("Invalid Digimon ID")

        data = await self._get_json(f"{self.base_url}/{card_id}")
        try:
            return CatalogCardDetail.model_validate(normalize_detail(data))
        except ValidationError as e:
            logger.error("catalog_invalid_detail", extra={"card_id": card_id})
            raise CatalogUnavailableError("Invalid response format", str(e)) from e
