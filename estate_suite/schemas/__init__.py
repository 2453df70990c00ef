"""
Estate Suite schema package
Input records and derived results shared by every engine.
"""

from .property import Property, PropertyType, Furnishing, PropertyAttributes
from .buyer import BuyerProfile, Purpose
from .lead import Lead, LeadScore, LeadCategory
from .results import (
    MatchLevel,
    PropertyRecommendation,
    PricingPrediction,
    LeadSummary,
)

__all__ = [
    "Property",
    "PropertyType",
    "Furnishing",
    "PropertyAttributes",
    "BuyerProfile",
    "Purpose",
    "Lead",
    "LeadScore",
    "LeadCategory",
    "MatchLevel",
    "PropertyRecommendation",
    "PricingPrediction",
    "LeadSummary",
]
