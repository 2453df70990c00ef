"""
Sample dataset
Demo catalog, leads and buyer profiles used by the API and the tests.
"""

from datetime import datetime

from estate_suite.schemas.buyer import BuyerProfile
from estate_suite.schemas.lead import Lead
from estate_suite.schemas.property import Property


def sample_properties() -> list[Property]:
    return [
        Property(
            id="1",
            title="Luxury Villa in Emirates Hills",
            location="Emirates Hills",
            bedrooms=5,
            bathrooms=6,
            sqft=8500,
            price=12500000,
            property_type="villa",
            amenities=["Private Pool", "Garden", "Maid's Room", "Driver's Room", "Garage"],
            furnishing="furnished",
            year_built=2020,
            image_url="/placeholder.svg",
        ),
        Property(
            id="2",
            title="Modern Penthouse in Downtown Dubai",
            location="Downtown Dubai",
            bedrooms=3,
            bathrooms=4,
            sqft=3200,
            price=4800000,
            property_type="penthouse",
            amenities=["Burj Khalifa View", "Gym", "Pool", "Concierge"],
            furnishing="furnished",
            year_built=2018,
        ),
        Property(
            id="3",
            title="Family Townhouse in Arabian Ranches",
            location="Arabian Ranches",
            bedrooms=4,
            bathrooms=5,
            sqft=4200,
            price=3200000,
            property_type="townhouse",
            amenities=["Community Pool", "Playground", "Golf Course Access"],
            furnishing="unfurnished",
            year_built=2019,
        ),
        Property(
            id="4",
            title="Waterfront Apartment in Dubai Marina",
            location="Dubai Marina",
            bedrooms=2,
            bathrooms=3,
            sqft=1800,
            price=2100000,
            property_type="apartment",
            amenities=["Marina View", "Gym", "Pool", "Beach Access"],
            furnishing="semi-furnished",
            year_built=2017,
        ),
    ]


def sample_leads() -> list[Lead]:
    return [
        Lead(
            id="1",
            name="Ahmed Al-Mansouri",
            email="ahmed.mansouri@email.com",
            phone="+971 50 123 4567",
            inquiries=8,
            property_views=15,
            budget=5000000,
            budget_fit=85,
            responsiveness=92,
            score="Hot",
            probability=88,
            last_activity=datetime(2024, 1, 15),
        ),
        Lead(
            id="2",
            name="Sarah Johnson",
            email="sarah.johnson@email.com",
            phone="+971 55 987 6543",
            inquiries=3,
            property_views=8,
            budget=2500000,
            budget_fit=70,
            responsiveness=65,
            score="Warm",
            probability=62,
            last_activity=datetime(2024, 1, 12),
        ),
        Lead(
            id="3",
            name="David Kim",
            email="david.kim@email.com",
            phone="+971 52 456 7890",
            inquiries=1,
            property_views=3,
            budget=1500000,
            budget_fit=45,
            responsiveness=30,
            score="Cold",
            probability=25,
            last_activity=datetime(2024, 1, 8),
        ),
        Lead(
            id="4",
            name="Fatima Hassan",
            email="fatima.hassan@email.com",
            phone="+971 56 789 0123",
            inquiries=12,
            property_views=22,
            budget=8000000,
            budget_fit=95,
            responsiveness=88,
            score="Hot",
            probability=94,
            last_activity=datetime(2024, 1, 16),
        ),
    ]


def sample_buyer_profiles() -> list[BuyerProfile]:
    return [
        BuyerProfile(
            budget=5000000,
            nationality="Emirati",
            family_size=4,
            purpose="self-use",
            preferred_location="Emirates Hills",
            preferred_property_type="villa",
        ),
        BuyerProfile(
            budget=2500000,
            nationality="British",
            family_size=3,
            purpose="investment",
            preferred_location="Dubai Marina",
            preferred_property_type="apartment",
        ),
    ]
