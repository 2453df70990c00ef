"""
Pricing Predictor
Estimates sale price, rent and returns from partial property attributes.
"""

from typing import Optional, Union
from loguru import logger

from estate_suite.schemas.property import Property, PropertyAttributes
from estate_suite.schemas.results import PricingPrediction
from .numeric import round_half_up, require_finite
from .randomness import RandomSource, UniformRandomSource
from .rules import PricingRules


class PricingPredictor:
    """
    Rule-based pricing engine

    suggested = sqft * price_per_sqft * location multiplier
                + amenity bonus + furnishing bonus
    rent      = suggested * rent_ratio

    ROI, rental yield and confidence are drawn from fixed ranges.
    """

    def __init__(
        self,
        rules: Optional[PricingRules] = None,
        rng: Optional[RandomSource] = None,
    ):
        self.rules = rules or PricingRules()
        self.rng = rng or UniformRandomSource()

    def predict(
        self, attributes: Union[PropertyAttributes, Property, dict]
    ) -> PricingPrediction:
        """
        Estimates pricing for a property.

        Args:
            attributes: partial property attributes; a catalog Property
                or a plain dict is accepted as well

        Returns:
            PricingPrediction
        """
        attributes = self._coerce(attributes)
        rules = self.rules

        suggested_price = round_half_up(self.estimate_price(attributes))
        rent_price = round_half_up(suggested_price * rules.rent_ratio)

        roi = round(self.rng.uniform(*rules.roi_range), 2)
        rental_yield = round(self.rng.uniform(*rules.rental_yield_range), 2)
        confidence = rules.confidence_base + round_half_up(
            self.rng.uniform(0, rules.confidence_spread)
        )

        prediction = PricingPrediction(
            suggested_price=suggested_price,
            rent_price=rent_price,
            roi=roi,
            rental_yield=rental_yield,
            confidence=min(confidence, 100),
            factors=self.value_factors(attributes),
        )

        logger.info(
            f"Priced {attributes.location or 'unknown location'}: "
            f"AED {suggested_price:,} (rent {rent_price:,})"
        )
        return prediction

    def estimate_price(self, attributes: PropertyAttributes) -> float:
        """Unrounded suggested price."""
        rules = self.rules

        sqft = attributes.sqft or rules.default_sqft
        sqft = require_finite("sqft", sqft)

        base_price = sqft * rules.price_per_sqft
        multiplier = rules.location_multiplier(attributes.location)
        amenities_bonus = len(attributes.amenities) * rules.amenity_bonus
        furnishing_bonus = rules.furnishing_bonus(attributes.furnishing)

        logger.debug(
            f"base={base_price:.0f} x{multiplier} "
            f"+amenities={amenities_bonus:.0f} +furnishing={furnishing_bonus:.0f}"
        )
        return base_price * multiplier + amenities_bonus + furnishing_bonus

    def value_factors(self, attributes: PropertyAttributes) -> list[str]:
        rules = self.rules
        location = attributes.location or rules.default_location_label

        factors = [rules.location_factor.format(location=location)]
        for amenity, factor in rules.amenity_factors.items():
            if amenity in attributes.amenities:
                factors.append(factor)
        return factors

    @staticmethod
    def _coerce(attributes) -> PropertyAttributes:
        if isinstance(attributes, PropertyAttributes):
            return attributes
        if isinstance(attributes, Property):
            return PropertyAttributes.model_validate(
                attributes.model_dump(include=set(PropertyAttributes.model_fields))
            )
        # dicts and anything else go through validation and fail fast
        return PropertyAttributes.model_validate(attributes)
