from sqlalchemy import Column, DateTime, ForeignKey, Index, Integer, String
from sqlalchemy.dialects.postgresql import JSONB, UUID
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func

from app.models.base import Base


class RoutingRuleSet(Base):
    """Named collection of routing rules with a mandatory default owner."""

    __tablename__ = "routing_rules"
    id = Column(
        UUID(as_uuid=True), primary_key=True, server_default=func.gen_random_uuid()
    )
    name = Column(String(255), nullable=False)
    default_member_id = Column(
        Integer, ForeignKey("members.id", ondelete="RESTRICT"), nullable=False
    )
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(
        DateTime(timezone=True), server_default=func.now(), onupdate=func.now()
    )

    default_member = relationship("Member", lazy="selectin")
    rules = relationship(
        "RoutingRule",
        back_populates="rule_set",
        cascade="all, delete-orphan",
        order_by="RoutingRule.position",
        lazy="selectin",
    )


class RoutingRule(Base):
    """One prioritised rule inside a rule set.

    ``conditions`` holds the JSON-serialised condition list; the
    repository rebuilds the typed condition variants when loading.
    """

    __tablename__ = "rules"
    id = Column(
        UUID(as_uuid=True), primary_key=True, server_default=func.gen_random_uuid()
    )
    routing_rules_id = Column(
        UUID(as_uuid=True),
        ForeignKey("routing_rules.id", ondelete="CASCADE"),
        nullable=False,
    )
    name = Column(String(255), nullable=False)
    conditions = Column(JSONB, nullable=False, server_default="[]")
    member_id = Column(
        Integer, ForeignKey("members.id", ondelete="RESTRICT"), nullable=False
    )
    priority = Column(Integer, nullable=False, server_default="0")
    # Index of the rule in the submitted list; keeps equal priorities stable
    position = Column(Integer, nullable=False, server_default="0")
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(
        DateTime(timezone=True), server_default=func.now(), onupdate=func.now()
    )

    rule_set = relationship("RoutingRuleSet", back_populates="rules")

    __table_args__ = (
        Index("idx_rules_routing_rules_priority", "routing_rules_id", "priority"),
    )
