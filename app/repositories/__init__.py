"""Repository layer – all database access goes through here.

Repositories encapsulate SQLAlchemy queries so that the service layer
only contains business logic.
"""

from app.repositories.member_repository import MemberRepository
from app.repositories.routing_rules_repository import RoutingRulesRepository

__all__ = [
    "MemberRepository",
    "RoutingRulesRepository",
]
