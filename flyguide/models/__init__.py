"""
Models package - Pydantic schemas for data validation
"""

from .flight import (
    Destination,
    DepartureLocation,
    CabinClass,
    Airline,
    TimeRange,
    SearchParams,
    FlightOption,
    FlightResponse
)
from .travel import (
    TravelMode,
    TravelCategory,
    AccommodationType,
    PriceLevel,
    FoodTag,
    TravelParams,
    TravelRecommendation,
    TravelResponse
)

__all__ = [
    "Destination",
    "DepartureLocation",
    "CabinClass",
    "Airline",
    "TimeRange",
    "SearchParams",
    "FlightOption",
    "FlightResponse",
    "TravelMode",
    "TravelCategory",
    "AccommodationType",
    "PriceLevel",
    "FoodTag",
    "TravelParams",
    "TravelRecommendation",
    "TravelResponse"
]
