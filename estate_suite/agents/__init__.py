"""
Estate Suite agent package
Each agent wraps one engine behind the same run() entry point.
"""

from .base import BaseAgent
from .recommend_agent import RecommendAgent, RecommendInput
from .pricing_agent import PricingAgent
from .lead_agent import LeadAgent, LeadInput, LeadView

__all__ = [
    "BaseAgent",
    "RecommendAgent",
    "RecommendInput",
    "PricingAgent",
    "LeadAgent",
    "LeadInput",
    "LeadView",
]
