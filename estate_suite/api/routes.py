"""
Estate Suite API router
"""

import asyncio
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query
from pydantic import BaseModel, Field

from estate_suite.agents import LeadAgent, LeadInput, RecommendInput
from estate_suite.config import settings
from estate_suite.data_sources import get_reference_data, sample_leads, sample_properties
from estate_suite.domain import InvalidInputError
from estate_suite.domain.randomness import RandomSource
from estate_suite.schemas import (
    BuyerProfile,
    Lead,
    LeadSummary,
    PricingPrediction,
    Property,
    PropertyAttributes,
    PropertyRecommendation,
)
from .deps import (
    build_pricing_agent,
    build_recommend_agent,
    get_lead_agent,
    get_random_source,
)

router = APIRouter()


class RecommendRequest(BaseModel):
    """Recommendation request"""
    profile: BuyerProfile
    top_n: Optional[int] = Field(default=None, ge=0)
    catalog: Optional[list[Property]] = Field(
        default=None,
        description="Properties to rank; the sample catalog when omitted"
    )

    model_config = {
        "json_schema_extra": {
            "example": {
                "profile": {
                    "budget": 5000000,
                    "nationality": "Emirati",
                    "family_size": 4,
                    "purpose": "self-use",
                },
                "top_n": 3,
            }
        }
    }


class LeadListResponse(BaseModel):
    """Filtered leads plus the summary of the full list"""
    leads: list[Lead]
    summary: LeadSummary


async def _simulated_latency() -> None:
    if settings.SIMULATED_LATENCY_SECONDS > 0:
        await asyncio.sleep(settings.SIMULATED_LATENCY_SECONDS)


@router.get("/properties", response_model=list[Property])
async def list_properties() -> list[Property]:
    """Sample property catalog"""
    return sample_properties()


@router.post("/recommendations", response_model=list[PropertyRecommendation])
async def recommend_properties(
    request: RecommendRequest,
    rng: RandomSource = Depends(get_random_source),
) -> list[PropertyRecommendation]:
    """
    Property recommendations

    Scores every catalog property against the buyer profile and
    returns the best matches with their reasoning.
    """
    catalog = request.catalog if request.catalog is not None else sample_properties()
    agent = build_recommend_agent(rng)

    try:
        recommendations = agent.run(
            RecommendInput(profile=request.profile, catalog=catalog, top_n=request.top_n)
        )
    except InvalidInputError as e:
        raise HTTPException(status_code=422, detail=str(e))

    await _simulated_latency()
    return recommendations


@router.post("/pricing", response_model=PricingPrediction)
async def predict_pricing(
    attributes: PropertyAttributes,
    rng: RandomSource = Depends(get_random_source),
) -> PricingPrediction:
    """
    Price and ROI estimate

    Missing attributes fall back to the documented defaults.
    """
    agent = build_pricing_agent(rng)

    try:
        prediction = agent.run(attributes)
    except InvalidInputError as e:
        raise HTTPException(status_code=422, detail=str(e))

    await _simulated_latency()
    return prediction


@router.get("/leads", response_model=LeadListResponse)
async def list_leads(
    category: str = Query("All", description="All, Hot, Warm or Cold"),
    search: str = Query("", description="Name or email substring"),
    agent: LeadAgent = Depends(get_lead_agent),
) -> LeadListResponse:
    """Sample leads filtered by category and search term"""
    try:
        view = agent.run(
            LeadInput(leads=sample_leads(), category=category, search_term=search)
        )
    except InvalidInputError as e:
        raise HTTPException(status_code=422, detail=str(e))

    return LeadListResponse(leads=view.leads, summary=view.summary)


@router.get("/leads/summary", response_model=LeadSummary)
async def summarize_leads(
    agent: LeadAgent = Depends(get_lead_agent),
) -> LeadSummary:
    """Lead counters and average conversion probability"""
    return agent.classifier.summarize(sample_leads())


@router.get("/reference")
async def get_reference():
    """Form reference lists"""
    return get_reference_data()


@router.get("/schema/buyer-profile")
async def get_buyer_profile_schema():
    """Buyer profile schema"""
    return BuyerProfile.model_json_schema()


@router.get("/schema/pricing-prediction")
async def get_pricing_prediction_schema():
    """Pricing prediction schema"""
    return PricingPrediction.model_json_schema()
