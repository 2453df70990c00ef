"""
Estate Suite domain package
Rule-based matching, pricing and lead classification.
Every engine is synchronous and keeps no state between calls.
"""

from .errors import InvalidInputError
from .randomness import RandomSource, UniformRandomSource, FixedRandomSource
from .rules import MatchingRules, PricingRules, BudgetBand, NationalityAffinity
from .matcher import PropertyMatcher
from .pricing import PricingPredictor
from .leads import LeadClassifier

__all__ = [
    "InvalidInputError",
    "RandomSource",
    "UniformRandomSource",
    "FixedRandomSource",
    "MatchingRules",
    "PricingRules",
    "BudgetBand",
    "NationalityAffinity",
    "PropertyMatcher",
    "PricingPredictor",
    "LeadClassifier",
]
