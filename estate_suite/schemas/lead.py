"""
Lead schemas
Leads arrive pre-scored from the CRM; score and probability are inputs here.
"""

from datetime import datetime
from enum import Enum
from pydantic import BaseModel, Field, ConfigDict


class LeadScore(str, Enum):
    """Lead temperature"""
    HOT = "Hot"
    WARM = "Warm"
    COLD = "Cold"


class LeadCategory(str, Enum):
    """Lead list filter"""
    ALL = "All"
    HOT = "Hot"
    WARM = "Warm"
    COLD = "Cold"

    @classmethod
    def _missing_(cls, value):
        # accept "all", "hot", ... from query strings
        if isinstance(value, str):
            for member in cls:
                if member.value.lower() == value.lower():
                    return member
        return None


class Lead(BaseModel):
    """CRM lead"""
    model_config = ConfigDict(use_enum_values=True, frozen=True)

    # === Contact ===
    id: str
    name: str
    email: str
    phone: str = ""

    # === Engagement ===
    inquiries: int = Field(default=0, ge=0, description="Number of inquiries")
    property_views: int = Field(default=0, ge=0, description="Number of property views")
    budget: float = Field(default=0, ge=0, allow_inf_nan=False, description="Stated budget (AED)")
    budget_fit: int = Field(ge=0, le=100, description="Budget fit (0-100)")
    responsiveness: int = Field(ge=0, le=100, description="Responsiveness (0-100)")

    # === Classification (assigned upstream) ===
    score: LeadScore
    probability: int = Field(ge=0, le=100, description="Conversion probability (%)")
    last_activity: datetime
