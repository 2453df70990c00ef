"""
Property Matcher
Scores catalog properties against a buyer profile and explains the fit.
"""

from typing import Optional, Sequence
from loguru import logger

from estate_suite.schemas.buyer import BuyerProfile
from estate_suite.schemas.property import Property
from estate_suite.schemas.results import MatchLevel, PropertyRecommendation
from .errors import InvalidInputError
from .numeric import clamp, require_finite
from .randomness import RandomSource, UniformRandomSource
from .rules import MatchingRules


class PropertyMatcher:
    """
    Rule-based property matcher

    Every property starts from the base score and collects points for
    budget fit, bedroom fit, purpose/location affinity and nationality
    affinity. A small random perturbation breaks ties, then the score
    is clamped to [0, 100].
    """

    def __init__(
        self,
        rules: Optional[MatchingRules] = None,
        rng: Optional[RandomSource] = None,
    ):
        self.rules = rules or MatchingRules()
        self.rng = rng or UniformRandomSource()

    def recommend(
        self,
        profile: BuyerProfile,
        catalog: Sequence[Property],
        top_n: int = 3,
    ) -> list[PropertyRecommendation]:
        """
        Ranks the catalog for a buyer.

        Args:
            profile: buyer profile
            catalog: candidate properties
            top_n: maximum number of recommendations

        Returns:
            list[PropertyRecommendation]: best matches first, at most top_n.
            Equal scores keep catalog order.
        """
        if top_n < 0:
            raise InvalidInputError("top_n", f"must not be negative, got {top_n}")

        self._require_budget(profile)

        if not catalog:
            logger.info("Empty catalog, no recommendations")
            return []

        scored = []
        for prop in catalog:
            score = self.score(prop, profile)
            scored.append(
                PropertyRecommendation(
                    property=prop,
                    score=score,
                    reasoning=self.reasoning(prop, profile),
                    match_level=self.match_level(score),
                )
            )

        # sorted() is stable, so ties stay in catalog order
        ranked = sorted(scored, key=lambda r: -r.score)[:top_n]

        logger.info(
            f"Ranked {len(catalog)} properties, returning {len(ranked)} "
            f"(top score {ranked[0].score if ranked else 0})"
        )
        return ranked

    def score(self, prop: Property, profile: BuyerProfile) -> float:
        """Match score in [0, 100] for one property."""
        rules = self.rules
        budget = self._require_budget(profile)
        price = require_finite("price", prop.price)

        score = rules.base_score

        # Budget fit
        score += self._budget_points(price / budget)

        # Family size vs bedrooms
        if prop.bedrooms >= profile.family_size:
            score += rules.family_fit_bonus

        # Purpose / location
        if prop.location in rules.purpose_locations.get(profile.purpose, []):
            score += rules.purpose_location_bonus

        # Nationality
        for affinity in rules.nationality_affinities:
            if affinity.matches(prop, profile):
                score += affinity.bonus

        noise = self.rng.uniform(0, rules.noise_max) if rules.noise_max else 0.0
        final = round(clamp(score + noise, rules.min_score, rules.max_score), 2)

        logger.debug(f"Match score for {prop.id}: {final} (rules {score}, noise {noise:.2f})")
        return final

    def reasoning(self, prop: Property, profile: BuyerProfile) -> str:
        """Explanation fragments for the rules the property triggers, in rule order."""
        rules = self.rules
        reasons = []

        opener = rules.purpose_openers.get(profile.purpose)
        if opener:
            reasons.append(opener.format(location=prop.location))

        if prop.bedrooms >= profile.family_size:
            reasons.append(rules.family_fit_note.format(bedrooms=prop.bedrooms))

        for affinity in rules.nationality_affinities:
            if affinity.note and affinity.matches(prop, profile):
                reasons.append(affinity.note)

        for amenity, highlight in rules.amenity_highlights.items():
            if prop.has_amenity(amenity):
                reasons.append(highlight)

        return ". ".join(reasons)

    def match_level(self, score: float) -> MatchLevel:
        if score >= self.rules.excellent_threshold:
            return MatchLevel.EXCELLENT
        if score >= self.rules.good_threshold:
            return MatchLevel.GOOD
        return MatchLevel.FAIR

    def _budget_points(self, ratio: float) -> float:
        for band in self.rules.budget_bands:
            if band.max_ratio is None or ratio <= band.max_ratio:
                return band.points
        return 0

    def _require_budget(self, profile: BuyerProfile) -> float:
        # budget is the divisor of the budget ratio
        budget = getattr(profile, "budget", None)
        if budget is None:
            raise InvalidInputError("budget", "a buyer budget is required")
        budget = require_finite("budget", budget)
        if budget <= 0:
            raise InvalidInputError("budget", f"must be positive, got {budget}")
        return budget
