"""Routing-rule condition schemas.

A condition is one ``field`` / ``operator`` / ``value`` predicate.  The
value type depends on the field, so conditions are modelled as a closed
set of variants discriminated on ``field``:

=================  =======================================  ===========
Variant            Fields                                   Operators
=================  =======================================  ===========
StringCondition    company_name, first_page                 =
CountryCondition   contact_country, company_hq_country      =
NumberCondition    company_size                             =, >, <
EnumCondition      company_industry, contact_device         =
DateCondition      first_seen, last_seen                    =, >, <
=================  =======================================  ===========
"""

from typing import ClassVar, FrozenSet, Literal, Union

from pydantic import (
    BaseModel,
    Field,
    StrictFloat,
    StrictInt,
    field_validator,
    model_validator,
)
from typing_extensions import Annotated, Self

from app.core.dates import parse_iso_datetime
from app.schemas.common import CompanyIndustry, ContactDevice, Operator

_EQUALITY_ONLY: FrozenSet[Operator] = frozenset({Operator.EQUALS})
_ORDERED: FrozenSet[Operator] = frozenset(
    {Operator.EQUALS, Operator.GREATER_THAN, Operator.LESS_THAN}
)


class _ConditionBase(BaseModel):
    allowed_operators: ClassVar[FrozenSet[Operator]] = _EQUALITY_ONLY

    operator: Operator = Operator.EQUALS

    @field_validator("operator")
    @classmethod
    def check_operator_supported(cls, value: Operator) -> Operator:
        if value not in cls.allowed_operators:
            allowed = ", ".join(sorted(op.value for op in cls.allowed_operators))
            raise ValueError(
                f"Operator '{value.value}' is not supported for this field "
                f"(allowed: {allowed})"
            )
        return value


class StringCondition(_ConditionBase):
    field: Literal["company_name", "first_page"]
    value: str


class CountryCondition(_ConditionBase):
    field: Literal["contact_country", "company_hq_country"]
    value: str = Field(..., min_length=2, max_length=2)


class NumberCondition(_ConditionBase):
    allowed_operators: ClassVar[FrozenSet[Operator]] = _ORDERED

    field: Literal["company_size"]
    value: Union[StrictInt, StrictFloat]


class EnumCondition(_ConditionBase):
    field: Literal["company_industry", "contact_device"]
    value: Union[CompanyIndustry, ContactDevice]

    @model_validator(mode="after")
    def check_value_matches_field(self) -> Self:
        expected = (
            CompanyIndustry if self.field == "company_industry" else ContactDevice
        )
        if not isinstance(self.value, expected):
            raise ValueError(
                f"Value '{self.value.value}' is not a valid {self.field}"
            )
        return self


class DateCondition(_ConditionBase):
    allowed_operators: ClassVar[FrozenSet[Operator]] = _ORDERED

    field: Literal["first_seen", "last_seen"]
    value: str

    @field_validator("value")
    @classmethod
    def check_iso_date(cls, value: str) -> str:
        if parse_iso_datetime(value) is None:
            raise ValueError(
                "Value must be a valid ISO date string (YYYY-MM-DD or ISO 8601 format)"
            )
        return value


Condition = Annotated[
    Union[
        StringCondition,
        CountryCondition,
        NumberCondition,
        EnumCondition,
        DateCondition,
    ],
    Field(discriminator="field"),
]
