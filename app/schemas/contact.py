"""Contact information and routing result schemas."""

from typing import Optional, Union

from pydantic import (
    BaseModel,
    StrictFloat,
    StrictInt,
    ValidationInfo,
    field_validator,
    model_validator,
)
from typing_extensions import Self

from app.core.constants import DATE_FIELDS
from app.core.dates import parse_iso_datetime
from app.schemas.common import CompanyIndustry, ContactDevice, SuccessResponse


class ContactInfo(BaseModel):
    """Sparse attribute bag describing the contact to be routed.

    Every field is optional; a missing field never satisfies a rule
    condition.  Country codes are checked against the reference list by
    :class:`~app.services.contact_validation.ContactValidator`, which
    needs the async country-code service and so cannot run here.
    """

    contact_country: Optional[str] = None
    company_size: Optional[Union[StrictInt, StrictFloat]] = None
    company_hq_country: Optional[str] = None
    company_industry: Optional[CompanyIndustry] = None
    company_name: Optional[str] = None
    contact_device: Optional[ContactDevice] = None
    first_page: Optional[str] = None
    first_seen: Optional[str] = None
    last_seen: Optional[str] = None

    @field_validator("company_size")
    @classmethod
    def check_company_size(cls, value):
        if value is not None and value < 0:
            raise ValueError("Company size must be a positive number")
        return value

    @field_validator(*sorted(DATE_FIELDS))
    @classmethod
    def check_iso_date(
        cls, value: Optional[str], info: ValidationInfo
    ) -> Optional[str]:
        if value is not None and parse_iso_datetime(value) is None:
            label = info.field_name.replace("_", " ").capitalize()
            raise ValueError(
                f"{label} must be a valid ISO date string "
                "(YYYY-MM-DD or ISO 8601 format)"
            )
        return value

    @model_validator(mode="after")
    def check_seen_order(self) -> Self:
        if self.first_seen and self.last_seen:
            first = parse_iso_datetime(self.first_seen)
            last = parse_iso_datetime(self.last_seen)
            if first is not None and last is not None and first > last:
                raise ValueError(
                    "First seen date must be before or equal to last seen date"
                )
        return self


class RouteContactRequest(BaseModel):
    """Request body for POST /api/v1/routing-rules/{id}/route."""

    contact_info: ContactInfo


class RouteContactResponse(BaseModel):
    """Outcome of routing one contact.

    ``applied_rule_id`` and ``applied_rule_name`` are only set when a rule
    produced the decision; their absence means the default owner was used.
    """

    member_id: int
    member_name: Optional[str] = None
    applied_rule_id: Optional[str] = None
    applied_rule_name: Optional[str] = None


class RouteContactEnvelope(SuccessResponse):
    data: RouteContactResponse
