from app.models.base import Base
from app.models.member import Member
from app.models.routing_rules import RoutingRuleSet, RoutingRule

__all__ = [
    "Base",
    "Member",
    "RoutingRuleSet",
    "RoutingRule",
]
