from enum import Enum
from pydantic import BaseModel


class Operator(str, Enum):
    EQUALS = "="
    GREATER_THAN = ">"
    LESS_THAN = "<"


class CompanyIndustry(str, Enum):
    ACCOUNTING = "ACCOUNTING"
    AIRLINES_AVIATION = "AIRLINES_AVIATION"
    ANIMATION = "ANIMATION"
    APPAREL_FASHION = "APPAREL_FASHION"
    ARCHITECTURE_PLANNING = "ARCHITECTURE_PLANNING"
    ARTS_AND_CRAFTS = "ARTS_AND_CRAFTS"
    AUTOMOTIVE = "AUTOMOTIVE"
    AVIATION_AEROSPACE = "AVIATION_AEROSPACE"
    BANKING = "BANKING"
    BIOTECHNOLOGY = "BIOTECHNOLOGY"
    BROADCAST_MEDIA = "BROADCAST_MEDIA"
    BUILDING_MATERIALS = "BUILDING_MATERIALS"
    BUSINESS_SUPPLIES_AND_EQUIPMENT = "BUSINESS_SUPPLIES_AND_EQUIPMENT"
    CAPITAL_MARKETS = "CAPITAL_MARKETS"
    CHEMICALS = "CHEMICALS"
    CIVIC_SOCIAL_ORGANIZATION = "CIVIC_SOCIAL_ORGANIZATION"
    CIVIL_ENGINEERING = "CIVIL_ENGINEERING"


class ContactDevice(str, Enum):
    TABLET = "Tablet"
    PC = "PC"
    MOBILE = "Mobile"


class SuccessResponse(BaseModel):
    """Generic success response base."""

    success: bool = True
