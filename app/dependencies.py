import logging
from typing import Optional

from fastapi import Depends, Request
from redis.asyncio import Redis
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.config import settings
from app.core.database import get_db
from app.services.contact_validation import ContactValidator
from app.services.country_codes import CountryCodeService
from app.services.member_service import MemberService
from app.services.routing_engine import RoutingEngine
from app.services.routing_rules_service import RoutingRulesService

logger = logging.getLogger(__name__)

# Used when the app was started without its lifespan (e.g. ASGITransport tests)
_default_country_code_service: Optional[CountryCodeService] = None


# ---------------------------------------------------------------------------
# Redis client factory
# ---------------------------------------------------------------------------


async def get_redis_client() -> Optional[Redis]:
    """Return a connected async Redis client, or ``None`` if unreachable."""
    try:
        client = Redis.from_url(
            settings.REDIS_URL,
            decode_responses=True,
        )
        await client.ping()
        return client
    except Exception:
        logger.warning("Redis unavailable – country-code cache is process-local")
        return None


# ---------------------------------------------------------------------------
# Repository factory functions (each gets the shared db session)
# ---------------------------------------------------------------------------


async def get_member_repo(
    db: AsyncSession = Depends(get_db),
):
    from app.repositories.member_repository import MemberRepository

    return MemberRepository(db)


async def get_routing_rules_repo(
    db: AsyncSession = Depends(get_db),
):
    from app.repositories.routing_rules_repository import RoutingRulesRepository

    return RoutingRulesRepository(db)


# ---------------------------------------------------------------------------
# Service factory functions
# ---------------------------------------------------------------------------


async def get_country_code_service(request: Request) -> CountryCodeService:
    """Return the process-wide :class:`CountryCodeService`.

    The lifespan handler stores a Redis-backed instance on ``app.state``;
    otherwise a process-local instance is created on first use.
    """
    global _default_country_code_service

    service = getattr(request.app.state, "country_codes", None)
    if service is not None:
        return service
    if _default_country_code_service is None:
        _default_country_code_service = CountryCodeService()
    return _default_country_code_service


async def get_contact_validator(
    country_codes: CountryCodeService = Depends(get_country_code_service),
) -> ContactValidator:
    return ContactValidator(country_codes=country_codes)


async def get_routing_engine() -> RoutingEngine:
    return RoutingEngine()


async def get_routing_rules_service(
    engine: RoutingEngine = Depends(get_routing_engine),
    validator: ContactValidator = Depends(get_contact_validator),
) -> RoutingRulesService:
    """Build a :class:`RoutingRulesService` with injected dependencies."""
    return RoutingRulesService(engine=engine, validator=validator)


async def get_member_service() -> MemberService:
    return MemberService()
