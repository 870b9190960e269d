"""Pydantic schemas package – re-exports for convenience."""

# Common enums
from app.schemas.common import (
    Operator as Operator,
    CompanyIndustry as CompanyIndustry,
    ContactDevice as ContactDevice,
    SuccessResponse as SuccessResponse,
)

# Rule conditions
from app.schemas.condition import (
    Condition as Condition,
    StringCondition as StringCondition,
    CountryCondition as CountryCondition,
    NumberCondition as NumberCondition,
    EnumCondition as EnumCondition,
    DateCondition as DateCondition,
)

# Routing rule sets
from app.schemas.routing_rules import (
    RuleCreate as RuleCreate,
    Rule as Rule,
    RoutingRulesCreate as RoutingRulesCreate,
    RoutingRulesUpdate as RoutingRulesUpdate,
    RoutingRules as RoutingRules,
    RoutingRulesResponse as RoutingRulesResponse,
    RoutingRulesListResponse as RoutingRulesListResponse,
)

# Contacts and routing results
from app.schemas.contact import (
    ContactInfo as ContactInfo,
    RouteContactRequest as RouteContactRequest,
    RouteContactResponse as RouteContactResponse,
)

# Members
from app.schemas.member import (
    MemberCreate as MemberCreate,
    MemberUpdate as MemberUpdate,
    MemberOut as MemberOut,
)
