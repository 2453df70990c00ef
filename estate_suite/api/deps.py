"""
API dependencies
Engines are built per request; override these in tests to inject a
deterministic randomness source.
"""

from estate_suite.agents import RecommendAgent, PricingAgent, LeadAgent
from estate_suite.config import settings
from estate_suite.domain import (
    PropertyMatcher,
    PricingPredictor,
    UniformRandomSource,
)
from estate_suite.domain.randomness import RandomSource


def get_random_source() -> RandomSource:
    # seeded per request so that a configured seed gives repeatable responses
    return UniformRandomSource(settings.RANDOM_SEED)


def build_recommend_agent(rng: RandomSource) -> RecommendAgent:
    return RecommendAgent(matcher=PropertyMatcher(rng=rng))


def build_pricing_agent(rng: RandomSource) -> PricingAgent:
    return PricingAgent(predictor=PricingPredictor(rng=rng))


def get_lead_agent() -> LeadAgent:
    return LeadAgent()
