"""
Result schemas
Derived values; recomputed on every call and never persisted.
"""

from enum import Enum
from typing import Optional
from pydantic import BaseModel, Field, ConfigDict

from .property import Property
from .lead import Lead


class MatchLevel(str, Enum):
    """Match score band"""
    EXCELLENT = "excellent"
    GOOD = "good"
    FAIR = "fair"


class PropertyRecommendation(BaseModel):
    """
    Property Matcher output
    One scored property with the explanation of the rules it triggered.
    """
    model_config = ConfigDict(use_enum_values=True, frozen=True)

    property: Property
    score: float = Field(ge=0, le=100, description="Match score (0-100)")
    reasoning: str = Field(
        description="Why the property fits",
        examples=["Perfect family home in Arabian Ranches. 4 bedrooms accommodate your family size"]
    )
    match_level: MatchLevel = Field(description="Score band")


class PricingPrediction(BaseModel):
    """
    Pricing Predictor output
    """
    model_config = ConfigDict(frozen=True)

    suggested_price: int = Field(ge=0, description="Suggested sale price (AED)")
    rent_price: int = Field(ge=0, description="Annual rent (AED)")
    roi: float = Field(description="Return on investment (%)")
    rental_yield: float = Field(description="Rental yield (%)")
    confidence: int = Field(ge=0, le=100, description="Confidence (%)")
    factors: list[str] = Field(
        default_factory=list,
        description="Value factors",
        examples=[["Prime location in Dubai Marina", "Waterfront lifestyle appeal"]]
    )


class LeadSummary(BaseModel):
    """
    Lead list aggregate
    """
    total: int = Field(ge=0)
    hot_count: int = Field(ge=0)
    warm_count: int = Field(ge=0)
    cold_count: int = Field(ge=0)
    average_probability: int = Field(
        ge=0,
        le=100,
        description="Mean conversion probability, 0 for an empty lead set"
    )
    top_lead: Optional[Lead] = Field(
        default=None,
        description="Lead with the highest conversion probability"
    )
