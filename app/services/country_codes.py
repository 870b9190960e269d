import asyncio
import logging
import time
from typing import Dict, Optional, Protocol

import httpx

from app.core.cache import CacheService
from app.core.config import settings
from app.core.constants import COUNTRY_CODES_CACHE_KEY
from app.core.country_codes import FALLBACK_COUNTRY_CODES

logger = logging.getLogger(__name__)


class CountryCodeLookup(Protocol):
    """Capability the validation layer depends on."""

    async def is_valid_code(self, code: str) -> bool: ...


class CountryCodeService:
    """Read-through cache of ISO 3166-1 alpha-2 codes.

    Codes are fetched from the REST Countries API and kept in-process for
    *ttl* seconds.  When a :class:`CacheService` backed by Redis is
    supplied, the fetched map is also shared across worker processes.
    If the API cannot be reached the static fallback dataset is used so
    validation keeps working.
    """

    def __init__(
        self,
        cache: Optional[CacheService] = None,
        api_url: Optional[str] = None,
        ttl: Optional[int] = None,
        timeout: Optional[float] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        self._cache: CacheService = cache or CacheService()
        self._api_url = api_url if api_url is not None else settings.COUNTRY_CODES_API_URL
        self._ttl = ttl if ttl is not None else settings.COUNTRY_CODES_CACHE_TTL
        self._timeout = timeout if timeout is not None else settings.COUNTRY_CODES_TIMEOUT
        self._transport = transport
        self._codes: Optional[Dict[str, str]] = None
        self._fetched_at: float = 0.0
        self._lock = asyncio.Lock()

    def _is_fresh(self) -> bool:
        return (
            self._codes is not None
            and time.monotonic() - self._fetched_at < self._ttl
        )

    async def _fetch_country_codes(self) -> Dict[str, str]:
        """Download the code → name map, falling back to static data."""
        logger.info("Fetching country codes from %s", self._api_url)
        try:
            async with httpx.AsyncClient(
                timeout=self._timeout, transport=self._transport
            ) as client:
                response = await client.get(self._api_url)
                response.raise_for_status()
                payload = response.json()
        except httpx.TimeoutException:
            logger.error("Country code service timed out: %s", self._api_url)
            return self._fallback()
        except httpx.HTTPStatusError as exc:
            logger.error(
                "Country code service returned %s: %s",
                exc.response.status_code,
                self._api_url,
            )
            return self._fallback()
        except (httpx.HTTPError, ValueError) as exc:
            logger.error("Country code service unreachable: %s (%s)", self._api_url, exc)
            return self._fallback()

        codes: Dict[str, str] = {}
        for country in payload if isinstance(payload, list) else []:
            code = country.get("cca2")
            name = (country.get("name") or {}).get("common")
            if code and name:
                codes[code] = name

        if not codes:
            logger.error("Country code service returned no usable entries")
            return self._fallback()

        logger.info("Fetched %d country codes", len(codes))
        return codes

    @staticmethod
    def _fallback() -> Dict[str, str]:
        logger.warning("Using fallback country codes")
        return dict(FALLBACK_COUNTRY_CODES)

    async def get_country_codes(self) -> Dict[str, str]:
        """Return the cached code map, refreshing it when expired."""
        if self._is_fresh():
            return self._codes  # type: ignore[return-value]

        async with self._lock:
            # Another coroutine may have refreshed while we waited
            if self._is_fresh():
                return self._codes  # type: ignore[return-value]

            codes = await self._cache.get_json(COUNTRY_CODES_CACHE_KEY)
            if not codes:
                codes = await self._fetch_country_codes()
                await self._cache.set_json(
                    COUNTRY_CODES_CACHE_KEY, codes, ttl=self._ttl
                )

            self._codes = codes
            self._fetched_at = time.monotonic()
            return codes

    async def is_valid_code(self, code: str) -> bool:
        codes = await self.get_country_codes()
        return code in codes

    async def get_country_name(self, code: str) -> Optional[str]:
        codes = await self.get_country_codes()
        return codes.get(code)

    async def refresh_cache(self) -> Dict[str, str]:
        """Drop both cache tiers and fetch a fresh map."""
        async with self._lock:
            self._codes = None
            self._fetched_at = 0.0
            await self._cache.delete(COUNTRY_CODES_CACHE_KEY)
        return await self.get_country_codes()
