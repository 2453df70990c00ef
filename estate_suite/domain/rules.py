"""
Rule tables

Lookup tables used by the engines. They are data, not code: pass a
modified copy to an engine to change the rules, e.g.

    rules = MatchingRules().model_copy(update={"family_fit_bonus": 20})
    matcher = PropertyMatcher(rules=rules)
"""

from typing import Optional
from pydantic import BaseModel, Field

from estate_suite.schemas.buyer import BuyerProfile, Purpose
from estate_suite.schemas.property import Property, PropertyType, Furnishing


class BudgetBand(BaseModel):
    """Points awarded when price / budget <= max_ratio (None = no upper bound)."""
    max_ratio: Optional[float] = None
    points: float


class NationalityAffinity(BaseModel):
    """
    Bonus for a nationality paired with a property type and/or location

    Every condition that is set must hold. `note` is added to the
    reasoning when the affinity fires.
    """
    nationality: str
    property_type: Optional[PropertyType] = None
    location: Optional[str] = None
    bonus: float
    note: Optional[str] = None

    def matches(self, prop: Property, profile: BuyerProfile) -> bool:
        if profile.nationality != self.nationality:
            return False
        if self.property_type is not None and prop.property_type != self.property_type:
            return False
        if self.location is not None and prop.location != self.location:
            return False
        return True


class MatchingRules(BaseModel):
    """Property Matcher rule set"""

    # === Score ===
    base_score: float = 60
    min_score: float = 0
    max_score: float = 100
    noise_max: float = Field(default=10, ge=0, description="Noise is drawn from [0, noise_max)")

    # === Budget fit (evaluated in order, first match wins) ===
    budget_bands: list[BudgetBand] = Field(default_factory=lambda: [
        BudgetBand(max_ratio=0.9, points=20),
        BudgetBand(max_ratio=1.1, points=10),
        BudgetBand(max_ratio=None, points=-20),
    ])

    # === Family fit ===
    family_fit_bonus: float = 15
    family_fit_note: str = "{bedrooms} bedrooms accommodate your family size"

    # === Purpose / location affinity ===
    purpose_locations: dict[str, list[str]] = Field(default_factory=lambda: {
        Purpose.INVESTMENT.value: ["Dubai Marina", "Downtown Dubai"],
        Purpose.SELF_USE.value: ["Arabian Ranches", "Emirates Hills"],
    })
    purpose_location_bonus: float = 10
    purpose_openers: dict[str, str] = Field(default_factory=lambda: {
        Purpose.INVESTMENT.value: "Excellent investment potential in {location}",
        Purpose.SELF_USE.value: "Perfect family home in {location}",
    })

    # === Nationality affinity ===
    nationality_affinities: list[NationalityAffinity] = Field(default_factory=lambda: [
        NationalityAffinity(
            nationality="Emirati",
            property_type=PropertyType.VILLA,
            bonus=15,
            note="Traditional villa lifestyle preferred by Emirati families",
        ),
        NationalityAffinity(
            nationality="British",
            location="Dubai Marina",
            bonus=10,
        ),
    ])

    # === Amenity highlights (reasoning only, checked in order) ===
    amenity_highlights: dict[str, str] = Field(default_factory=lambda: {
        "Private Pool": "Private pool adds luxury and family value",
    })

    # === Match level bands ===
    excellent_threshold: float = 80
    good_threshold: float = 60


class PricingRules(BaseModel):
    """Pricing Predictor rule set"""

    # === Base price ===
    price_per_sqft: float = Field(default=1200, gt=0, description="AED per sqft")
    default_sqft: float = Field(default=1000, gt=0)

    # === Location ===
    location_multipliers: dict[str, float] = Field(default_factory=lambda: {
        "Emirates Hills": 3.2,
        "Downtown Dubai": 2.8,
        "Dubai Marina": 2.2,
        "Arabian Ranches": 1.8,
        "JBR": 2.5,
        "Palm Jumeirah": 3.0,
    })
    default_location_multiplier: float = 1.5
    default_location_label: str = "Dubai"

    # === Bonuses ===
    amenity_bonus: float = 50000
    furnishing_bonuses: dict[str, float] = Field(default_factory=lambda: {
        Furnishing.FURNISHED.value: 200000,
        Furnishing.SEMI_FURNISHED.value: 100000,
        Furnishing.UNFURNISHED.value: 0,
    })

    # === Returns ===
    rent_ratio: float = 0.08
    roi_range: tuple[float, float] = (12, 20)
    rental_yield_range: tuple[float, float] = (6, 10)
    confidence_base: int = 85
    confidence_spread: int = 10

    # === Value factors (checked in order) ===
    location_factor: str = "Prime location in {location}"
    amenity_factors: dict[str, str] = Field(default_factory=lambda: {
        "Private Pool": "Private pool adds 8% value",
        "Burj Khalifa View": "Iconic view premium",
        "Beach Access": "Waterfront lifestyle appeal",
    })

    def location_multiplier(self, location: Optional[str]) -> float:
        if not location:
            return self.default_location_multiplier
        return self.location_multipliers.get(location, self.default_location_multiplier)

    def furnishing_bonus(self, furnishing: Optional[str]) -> float:
        if furnishing is None:
            return 0
        return self.furnishing_bonuses.get(furnishing, 0)
