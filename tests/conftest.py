from typing import TYPE_CHECKING, AsyncGenerator, Iterable
from unittest.mock import AsyncMock

if TYPE_CHECKING:
    from app.core.cache import CacheService

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from app.main import app
from app.schemas.routing_rules import RoutingRules


class FakeCountryCodes:
    """In-memory stand-in for the country-code lookup capability."""

    def __init__(self, codes: Iterable[str] = ("US", "CA", "GB", "FR", "DE", "IL")):
        self.codes = set(codes)
        self.calls = []

    async def is_valid_code(self, code: str) -> bool:
        self.calls.append(code)
        return code in self.codes


@pytest.fixture
def country_codes() -> FakeCountryCodes:
    return FakeCountryCodes()


@pytest_asyncio.fixture
async def async_client() -> AsyncGenerator[AsyncClient, None]:
    """Yield an ``httpx.AsyncClient`` wired to the FastAPI app."""
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
    app.dependency_overrides.clear()


@pytest.fixture
def mock_redis() -> AsyncMock:
    """Return an ``AsyncMock`` that behaves like ``redis.asyncio.Redis``."""
    redis = AsyncMock()
    redis.get = AsyncMock(return_value=None)
    redis.set = AsyncMock()
    redis.setex = AsyncMock()
    redis.delete = AsyncMock()
    redis.ping = AsyncMock()
    return redis


@pytest.fixture
def mock_cache(mock_redis) -> "CacheService":
    """Return a ``CacheService`` backed by the mock Redis client."""
    from app.core.cache import CacheService

    return CacheService(redis_client=mock_redis)


@pytest.fixture
def sample_routing_rules() -> RoutingRules:
    """Rule set used by the documented routing scenarios.

    rule-1 (priority 0): contact_country = US OR company_name = WIX -> member 2
    rule-2 (priority 1): company_industry = ACCOUNTING -> member 3
    default: member 1
    """
    return RoutingRules.model_validate(
        {
            "id": "rules-set-1",
            "name": "Default sales routing",
            "default_member_id": 1,
            "default_member_name": "Moshe",
            "rules": [
                {
                    "id": "rule-1",
                    "name": "Eldad - US contacts or WIX",
                    "member_id": 2,
                    "priority": 0,
                    "conditions": [
                        {"field": "contact_country", "operator": "=", "value": "US"},
                        {"field": "company_name", "operator": "=", "value": "WIX"},
                    ],
                },
                {
                    "id": "rule-2",
                    "name": "Alon - accounting firms",
                    "member_id": 3,
                    "priority": 1,
                    "conditions": [
                        {
                            "field": "company_industry",
                            "operator": "=",
                            "value": "ACCOUNTING",
                        }
                    ],
                },
            ],
        }
    )
