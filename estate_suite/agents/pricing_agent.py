"""
Pricing Agent
Estimates price and returns for submitted property attributes.
"""

from typing import Optional

from .base import BaseAgent
from estate_suite.schemas.property import PropertyAttributes
from estate_suite.schemas.results import PricingPrediction
from estate_suite.domain.pricing import PricingPredictor


class PricingAgent(BaseAgent[PropertyAttributes, PricingPrediction]):
    """
    Pricing Agent

    Uses the rule-based PricingPredictor.
    """

    name = "PricingAgent"

    def __init__(self, predictor: Optional[PricingPredictor] = None):
        super().__init__()
        self.predictor = predictor or PricingPredictor()

    def _process(self, attributes: PropertyAttributes) -> PricingPrediction:
        """Run pricing"""
        return self.predictor.predict(attributes)
