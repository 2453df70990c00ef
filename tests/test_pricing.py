"""
Estate Suite tests - Pricing Predictor
"""

import pytest
from pydantic import ValidationError

from estate_suite.data_sources import sample_properties
from estate_suite.domain import (
    FixedRandomSource,
    PricingPredictor,
    PricingRules,
    UniformRandomSource,
)
from estate_suite.schemas import PropertyAttributes


class TestPricingPredictor:
    """Pricing Predictor tests"""

    def setup_method(self):
        self.predictor = PricingPredictor(rng=FixedRandomSource(0.0))

    def test_marina_scenario(self):
        """2000 sqft furnished Marina flat with two amenities"""
        attributes = PropertyAttributes(
            sqft=2000,
            location="Dubai Marina",
            amenities=["Gym", "Pool"],
            furnishing="furnished",
        )

        result = self.predictor.predict(attributes)

        assert result.suggested_price == 5580000
        assert result.rent_price == 446400

    def test_defaults(self):
        """Missing attributes fall back to the defaults"""
        result = self.predictor.predict(PropertyAttributes())

        # 1000 sqft * 1200 * 1.5
        assert result.suggested_price == 1800000
        assert result.rent_price == 144000
        assert result.factors == ["Prime location in Dubai"]

    def test_zero_sqft_uses_default(self):
        """0 sqft is treated as missing"""
        zero = self.predictor.predict(PropertyAttributes(sqft=0))
        missing = self.predictor.predict(PropertyAttributes())

        assert zero.suggested_price == missing.suggested_price

    def test_unknown_location(self):
        """Unlisted districts use the 1.5 multiplier"""
        result = self.predictor.predict(
            PropertyAttributes(sqft=1000, location="Business Bay")
        )

        assert result.suggested_price == 1800000
        assert result.factors[0] == "Prime location in Business Bay"

    @pytest.mark.parametrize("furnishing,bonus", [
        ("furnished", 200000),
        ("semi-furnished", 100000),
        ("unfurnished", 0),
        (None, 0),
    ])
    def test_furnishing_bonus(self, furnishing, bonus):
        """Furnishing adds a flat bonus"""
        result = self.predictor.predict(
            PropertyAttributes(sqft=1000, location="JBR", furnishing=furnishing)
        )

        assert result.suggested_price == 3000000 + bonus

    def test_factor_order(self):
        """Factors follow the fixed check order, not the input order"""
        result = self.predictor.predict(
            PropertyAttributes(
                location="Downtown Dubai",
                amenities=["Beach Access", "Garden", "Private Pool", "Burj Khalifa View"],
            )
        )

        assert result.factors == [
            "Prime location in Downtown Dubai",
            "Private pool adds 8% value",
            "Iconic view premium",
            "Waterfront lifestyle appeal",
        ]

    def test_price_increases_with_sqft(self):
        """Suggested price strictly increases with floor area"""
        prices = [
            self.predictor.predict(
                PropertyAttributes(sqft=sqft, location="Palm Jumeirah")
            ).suggested_price
            for sqft in (1, 500, 999, 1000, 1001, 2500, 10000)
        ]

        assert all(a < b for a, b in zip(prices, prices[1:]))

    def test_rent_is_eight_percent(self):
        """rent_price == round(0.08 * suggested_price)"""
        for prop in sample_properties():
            result = self.predictor.predict(prop)
            assert result.rent_price == round(result.suggested_price * 0.08)

    def test_random_outputs_at_low_end(self):
        """Fraction 0.0 gives the range minimums"""
        result = self.predictor.predict(PropertyAttributes())

        assert result.roi == 12.0
        assert result.rental_yield == 6.0
        assert result.confidence == 85

    def test_random_outputs_midpoint(self):
        predictor = PricingPredictor(rng=FixedRandomSource(0.5))

        result = predictor.predict(PropertyAttributes())

        assert result.roi == 16.0
        assert result.rental_yield == 8.0
        assert result.confidence == 90

    def test_random_outputs_ranges(self):
        """Real randomness stays inside the documented ranges"""
        predictor = PricingPredictor(rng=UniformRandomSource(seed=3))

        for _ in range(200):
            result = predictor.predict(PropertyAttributes(sqft=1500))
            assert 12 <= result.roi <= 20
            assert 6 <= result.rental_yield <= 10
            assert 85 <= result.confidence <= 95
            assert isinstance(result.confidence, int)

    def test_repeatable_with_seed(self):
        attributes = PropertyAttributes(sqft=1500, location="JBR")

        first = PricingPredictor(rng=UniformRandomSource(seed=11)).predict(attributes)
        second = PricingPredictor(rng=UniformRandomSource(seed=11)).predict(attributes)

        assert first == second


class TestPricingInputs:
    """Accepted input shapes"""

    def setup_method(self):
        self.predictor = PricingPredictor(rng=FixedRandomSource(0.0))

    def test_catalog_property(self):
        """A catalog Property can be priced directly"""
        apartment = sample_properties()[3]

        result = self.predictor.predict(apartment)

        # 1800 * 1200 * 2.2 + 4 * 50000 + 100000
        assert result.suggested_price == 5052000
        assert "Waterfront lifestyle appeal" in result.factors

    def test_dict_input(self):
        result = self.predictor.predict({"sqft": 2000, "location": "Dubai Marina"})

        assert result.suggested_price == 5280000

    @pytest.mark.parametrize("bad", [
        {"sqft": "large"},
        {"sqft": float("nan")},
        {"sqft": -10},
        {"furnishing": "half"},
    ])
    def test_malformed_input_fails_fast(self, bad):
        with pytest.raises(ValidationError):
            self.predictor.predict(bad)

    def test_duplicate_amenities_count_once(self):
        result = self.predictor.predict(
            PropertyAttributes(amenities=["Gym", "Gym", "Garden"])
        )

        assert result.suggested_price == 1800000 + 2 * 50000

    def test_custom_rules(self):
        """Multiplier table is swappable"""
        rules = PricingRules()
        rules = rules.model_copy(update={
            "location_multipliers": {**rules.location_multipliers, "Business Bay": 2.0},
        })
        predictor = PricingPredictor(rules=rules, rng=FixedRandomSource(0.0))

        result = predictor.predict(PropertyAttributes(sqft=1000, location="Business Bay"))

        assert result.suggested_price == 2400000


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
