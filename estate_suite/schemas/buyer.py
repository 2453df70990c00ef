"""
Buyer profile schema
"""

from enum import Enum
from typing import Optional
from pydantic import BaseModel, Field, ConfigDict

from .property import PropertyType


class Purpose(str, Enum):
    """Purchase purpose"""
    INVESTMENT = "investment"
    SELF_USE = "self-use"


class BuyerProfile(BaseModel):
    """
    Buyer profile

    Built per query from the recommender form and never stored.
    Nationality is free text compared by exact match.
    """
    model_config = ConfigDict(
        use_enum_values=True,
        frozen=True,
        allow_inf_nan=False,
        json_schema_extra={
            "example": {
                "budget": 5000000,
                "nationality": "Emirati",
                "family_size": 4,
                "purpose": "self-use",
                "preferred_location": "Emirates Hills",
                "preferred_property_type": "villa",
            }
        }
    )

    budget: float = Field(gt=0, description="Budget (AED)", examples=[5000000])
    nationality: str = Field(default="", description="Nationality", examples=["Emirati"])
    family_size: int = Field(default=1, ge=1, description="Family size", examples=[4])
    purpose: Purpose = Field(default=Purpose.SELF_USE, description="Purchase purpose")
    preferred_location: Optional[str] = Field(default=None, description="Preferred district")
    preferred_property_type: Optional[PropertyType] = Field(
        default=None,
        description="Preferred property type"
    )
