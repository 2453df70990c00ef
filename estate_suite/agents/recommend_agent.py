"""
Recommend Agent
Ranks catalog properties for a buyer.
"""

from typing import Optional, Sequence

from .base import BaseAgent
from estate_suite.config import settings
from estate_suite.schemas.buyer import BuyerProfile
from estate_suite.schemas.property import Property
from estate_suite.schemas.results import PropertyRecommendation
from estate_suite.domain.matcher import PropertyMatcher


class RecommendInput:
    """Recommend Agent input"""
    def __init__(
        self,
        profile: BuyerProfile,
        catalog: Sequence[Property],
        top_n: Optional[int] = None,
    ):
        self.profile = profile
        self.catalog = catalog
        self.top_n = settings.DEFAULT_TOP_N if top_n is None else top_n


class RecommendAgent(BaseAgent[RecommendInput, list[PropertyRecommendation]]):
    """
    Recommendation Agent

    Uses the rule-based PropertyMatcher.
    """

    name = "RecommendAgent"

    def __init__(self, matcher: Optional[PropertyMatcher] = None):
        super().__init__()
        self.matcher = matcher or PropertyMatcher()

    def _process(self, input_data: RecommendInput) -> list[PropertyRecommendation]:
        """Run matching"""
        return self.matcher.recommend(
            profile=input_data.profile,
            catalog=input_data.catalog,
            top_n=input_data.top_n,
        )
