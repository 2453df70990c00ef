"""
Estate Suite tests - Property Matcher
"""

import pytest

from estate_suite.data_sources import sample_properties, sample_buyer_profiles
from estate_suite.domain import (
    FixedRandomSource,
    InvalidInputError,
    MatchingRules,
    PropertyMatcher,
    UniformRandomSource,
)
from estate_suite.schemas import BuyerProfile, MatchLevel, Property


class TestPropertyMatcher:
    """Property Matcher tests"""

    def setup_method(self):
        self.matcher = PropertyMatcher(rng=FixedRandomSource(0.0))
        self.catalog = sample_properties()
        self.emirati, self.british = sample_buyer_profiles()

    def test_scenario_family_townhouse(self):
        """Base 60 + budget 20 + bedrooms 15 + location 10 clamps to 100"""
        profile = BuyerProfile(
            budget=5000000,
            nationality="Indian",
            family_size=4,
            purpose="self-use",
        )
        prop = Property(
            id="x",
            title="Townhouse",
            location="Arabian Ranches",
            bedrooms=4,
            bathrooms=4,
            sqft=3000,
            price=4000000,
            property_type="townhouse",
            year_built=2019,
        )

        assert self.matcher.score(prop, profile) == 100

    def test_emirati_family_ranking(self):
        """Emirati self-use buyer: townhouse first, ties keep catalog order"""
        result = self.matcher.recommend(self.emirati, self.catalog, top_n=3)

        assert [r.property.id for r in result] == ["3", "1", "4"]
        assert [r.score for r in result] == [100, 80, 80]

    def test_british_investor_ranking(self):
        """British investor: Marina apartment gets every bonus"""
        result = self.matcher.recommend(self.british, self.catalog, top_n=3)

        assert [r.property.id for r in result] == ["4", "2", "1"]
        assert [r.score for r in result] == [100, 65, 55]

    def test_budget_bands(self):
        """<=0.9 +20, <=1.1 +10, above -20"""
        profile = BuyerProfile(budget=1000000, family_size=9, purpose="self-use")

        def score_at(price):
            prop = self.catalog[3].model_copy(update={"price": price})
            return self.matcher.score(prop, profile)

        assert score_at(900000) == 80
        assert score_at(1100000) == 70
        assert score_at(1100001) == 40

    def test_noise_is_added(self):
        """Noise comes from the injected source"""
        matcher = PropertyMatcher(rng=FixedRandomSource(0.5))
        penthouse = self.catalog[1]

        assert matcher.score(penthouse, self.emirati) == 75

    def test_score_clamped_low(self):
        """Scores never drop below 0"""
        rules = MatchingRules().model_copy(update={"base_score": -100})
        matcher = PropertyMatcher(rules=rules, rng=FixedRandomSource(0.0))

        for prop in self.catalog:
            assert matcher.score(prop, self.british) == 0

    def test_score_range_with_real_noise(self):
        """Any noise keeps the score in [0, 100]"""
        matcher = PropertyMatcher(rng=UniformRandomSource(seed=7))

        for _ in range(50):
            for profile in (self.emirati, self.british):
                for prop in self.catalog:
                    assert 0 <= matcher.score(prop, profile) <= 100

    def test_reasoning_order(self):
        """Fragments follow rule order, period separated"""
        villa = self.catalog[0]

        reasoning = self.matcher.reasoning(villa, self.emirati)

        assert reasoning == (
            "Perfect family home in Emirates Hills. "
            "5 bedrooms accommodate your family size. "
            "Traditional villa lifestyle preferred by Emirati families. "
            "Private pool adds luxury and family value"
        )

    def test_reasoning_investment_opener(self):
        """Investment buyers get the investment opener only"""
        apartment = self.catalog[3]

        reasoning = self.matcher.reasoning(apartment, self.british)

        assert reasoning == "Excellent investment potential in Dubai Marina"

    def test_match_levels(self):
        """Score bands"""
        assert self.matcher.match_level(100) == MatchLevel.EXCELLENT
        assert self.matcher.match_level(80) == MatchLevel.EXCELLENT
        assert self.matcher.match_level(65) == MatchLevel.GOOD
        assert self.matcher.match_level(59.99) == MatchLevel.FAIR

    def test_custom_affinity_rules(self):
        """Rule tables can be extended without engine changes"""
        rules = MatchingRules()
        rules = rules.model_copy(update={
            "purpose_locations": {**rules.purpose_locations, "investment": ["JBR"]},
        })
        matcher = PropertyMatcher(rules=rules, rng=FixedRandomSource(0.0))

        # Marina no longer counts for investors
        assert matcher.score(self.catalog[3], self.british) == 90


class TestPropertyMatcherEdgeCases:
    """Property Matcher edge cases"""

    def setup_method(self):
        self.matcher = PropertyMatcher(rng=FixedRandomSource(0.0))
        self.catalog = sample_properties()
        self.profile = sample_buyer_profiles()[0]

    def test_empty_catalog(self):
        """Empty catalog is not an error"""
        assert self.matcher.recommend(self.profile, [], top_n=3) == []

    @pytest.mark.parametrize("top_n", [0, 1, 2, 4, 10])
    def test_result_length(self, top_n):
        """At most min(top_n, catalog size), sorted by score"""
        result = self.matcher.recommend(self.profile, self.catalog, top_n=top_n)

        assert len(result) == min(top_n, len(self.catalog))
        scores = [r.score for r in result]
        assert scores == sorted(scores, reverse=True)

    def test_negative_top_n(self):
        with pytest.raises(InvalidInputError):
            self.matcher.recommend(self.profile, self.catalog, top_n=-1)

    @pytest.mark.parametrize("budget", [0, -5, None, float("nan")])
    def test_invalid_budget(self, budget):
        """Budget is a divisor and must be positive"""
        profile = BuyerProfile.model_construct(
            budget=budget,
            nationality="",
            family_size=1,
            purpose="self-use",
        )

        with pytest.raises(InvalidInputError) as exc:
            self.matcher.recommend(profile, self.catalog, top_n=3)

        assert exc.value.field == "budget"

    def test_invalid_budget_with_empty_catalog(self):
        """Budget is checked before the catalog"""
        profile = BuyerProfile.model_construct(
            budget=0, nationality="", family_size=1, purpose="self-use"
        )

        with pytest.raises(InvalidInputError):
            self.matcher.recommend(profile, [], top_n=3)

    def test_repeatable_with_seed(self):
        """Same seed, same output"""
        first = PropertyMatcher(rng=UniformRandomSource(seed=42))
        second = PropertyMatcher(rng=UniformRandomSource(seed=42))

        assert first.recommend(self.profile, self.catalog) == second.recommend(
            self.profile, self.catalog
        )

    def test_unknown_nationality(self):
        """Unknown nationality just gets no bonus"""
        profile = self.profile.model_copy(update={"nationality": "Martian"})

        result = self.matcher.recommend(profile, self.catalog, top_n=4)

        assert len(result) == 4
        assert self.matcher.score(self.catalog[0], profile) == 65


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
