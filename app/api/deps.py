"""API-layer dependency functions.

Re-exports all dependency factories from ``app.dependencies`` so that
endpoint modules only need to import from ``app.api.deps``.
"""

from app.dependencies import (
    # Repository factories
    get_member_repo,
    get_routing_rules_repo,
    # Service factories
    get_country_code_service,
    get_contact_validator,
    get_routing_engine,
    get_routing_rules_service,
    get_member_service,
    # Redis
    get_redis_client,
)

__all__ = [
    "get_member_repo",
    "get_routing_rules_repo",
    "get_country_code_service",
    "get_contact_validator",
    "get_routing_engine",
    "get_routing_rules_service",
    "get_member_service",
    "get_redis_client",
]
