"""
Data source module
"""

from .reference import LOCATIONS, AMENITIES, NATIONALITIES, get_reference_data
from .sample_data import sample_properties, sample_leads, sample_buyer_profiles

__all__ = [
    "LOCATIONS",
    "AMENITIES",
    "NATIONALITIES",
    "get_reference_data",
    "sample_properties",
    "sample_leads",
    "sample_buyer_profiles",
]
