"""Routing rule-set schemas (create, update, response)."""

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, Field, model_validator
from typing_extensions import Self

from app.schemas.common import SuccessResponse
from app.schemas.condition import Condition


# ---------------------------------------------------------------------------
# Request schemas
# ---------------------------------------------------------------------------


class RuleCreate(BaseModel):
    """A single rule as submitted by the client (no id yet).

    Conditions are OR-combined: the rule applies when any one of them
    matches.  An empty list makes the rule a catch-all at its priority.
    """

    name: str = Field(..., min_length=1, max_length=255)
    conditions: List[Condition] = Field(default_factory=list)
    member_id: int = Field(..., gt=0)
    priority: int = 0


class RoutingRulesCreate(BaseModel):
    """Request body for POST /api/v1/routing-rules."""

    name: str = Field(..., min_length=1, max_length=255)
    rules: List[RuleCreate] = Field(default_factory=list)
    default_member_id: int = Field(..., gt=0)


class RoutingRulesUpdate(BaseModel):
    """Request body for PUT /api/v1/routing-rules/{id}.

    When ``rules`` is given it replaces the stored rules wholesale.
    """

    name: Optional[str] = Field(None, min_length=1, max_length=255)
    rules: Optional[List[RuleCreate]] = None
    default_member_id: Optional[int] = Field(None, gt=0)

    @model_validator(mode="after")
    def require_at_least_one_field(self) -> Self:
        if self.name is None and self.rules is None and self.default_member_id is None:
            raise ValueError("Update data is required")
        return self


# ---------------------------------------------------------------------------
# Domain / response schemas
# ---------------------------------------------------------------------------


class Rule(RuleCreate):
    """A stored rule, as consumed by the routing engine."""

    id: str


class RoutingRules(BaseModel):
    """A named, prioritised collection of rules plus the default owner."""

    id: str
    name: str
    rules: List[Rule] = Field(default_factory=list)
    default_member_id: int
    default_member_name: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class RoutingRulesResponse(SuccessResponse):
    data: RoutingRules


class Pagination(BaseModel):
    page: int
    limit: int
    total: int


class RoutingRulesListResponse(SuccessResponse):
    data: List[RoutingRules]
    pagination: Pagination


class DeleteResponse(SuccessResponse):
    message: str
