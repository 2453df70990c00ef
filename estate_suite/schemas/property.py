"""
Property schemas
Catalog records and the partial attribute set submitted for pricing.
"""

from enum import Enum
from typing import Optional
from pydantic import BaseModel, Field, ConfigDict, field_validator


class PropertyType(str, Enum):
    """Property type"""
    VILLA = "villa"
    APARTMENT = "apartment"
    TOWNHOUSE = "townhouse"
    PENTHOUSE = "penthouse"


class Furnishing(str, Enum):
    """Furnishing level"""
    FURNISHED = "furnished"
    SEMI_FURNISHED = "semi-furnished"
    UNFURNISHED = "unfurnished"


def _unique_amenities(amenities: list[str]) -> list[str]:
    # amenities behave as a set; first occurrence keeps its position
    seen = set()
    unique = []
    for amenity in amenities:
        name = amenity.strip()
        if name and name not in seen:
            seen.add(name)
            unique.append(name)
    return unique


class Property(BaseModel):
    """
    Catalog property

    Supplied by an external catalog and read-only inside the engines.
    """
    model_config = ConfigDict(
        use_enum_values=True,
        frozen=True,
        allow_inf_nan=False,
    )

    # === Identity ===
    id: str = Field(
        description="Unique property ID",
        examples=["1"]
    )
    title: str = Field(
        description="Listing title",
        examples=["Luxury Villa in Emirates Hills"]
    )
    location: str = Field(
        description="District name",
        examples=["Emirates Hills"]
    )

    # === Layout ===
    bedrooms: int = Field(ge=0, description="Number of bedrooms", examples=[5])
    bathrooms: int = Field(ge=0, description="Number of bathrooms", examples=[6])
    sqft: float = Field(gt=0, description="Floor area (sqft)", examples=[8500])

    # === Commercial ===
    price: float = Field(gt=0, description="Asking price (AED)", examples=[12500000])
    property_type: PropertyType = Field(description="Property type")
    amenities: list[str] = Field(
        default_factory=list,
        description="Amenities (unique, unordered)",
        examples=[["Private Pool", "Garden", "Garage"]]
    )
    furnishing: Furnishing = Field(
        default=Furnishing.UNFURNISHED,
        description="Furnishing level"
    )
    year_built: int = Field(description="Year of completion", examples=[2020])
    image_url: Optional[str] = Field(
        default=None,
        description="Image reference"
    )

    @field_validator("amenities")
    @classmethod
    def _dedupe_amenities(cls, value: list[str]) -> list[str]:
        return _unique_amenities(value)

    def has_amenity(self, name: str) -> bool:
        return name in self.amenities

    def to_summary(self) -> str:
        """One-line property summary"""
        return (
            f"{self.title} | {self.location} | {self.bedrooms}BR "
            f"| {self.sqft:,.0f} sqft | AED {self.price:,.0f}"
        )


class PropertyAttributes(BaseModel):
    """
    Partial property attributes submitted for a price estimate

    Every field is optional; the pricing engine fills the gaps
    with its documented defaults.
    """
    model_config = ConfigDict(
        use_enum_values=True,
        allow_inf_nan=False,
        json_schema_extra={
            "example": {
                "location": "Dubai Marina",
                "bedrooms": 2,
                "bathrooms": 3,
                "sqft": 2000,
                "amenities": ["Gym", "Beach Access"],
                "furnishing": "furnished",
                "year_built": 2020,
            }
        }
    )

    location: Optional[str] = Field(default=None, description="District name")
    bedrooms: Optional[int] = Field(default=None, ge=0)
    bathrooms: Optional[int] = Field(default=None, ge=0)
    sqft: Optional[float] = Field(
        default=None,
        ge=0,
        description="Floor area (sqft); missing or 0 falls back to the default"
    )
    amenities: list[str] = Field(default_factory=list)
    furnishing: Optional[Furnishing] = Field(default=None)
    year_built: Optional[int] = Field(default=None)

    @field_validator("amenities")
    @classmethod
    def _dedupe_amenities(cls, value: list[str]) -> list[str]:
        return _unique_amenities(value)
