"""
Services package - Provider integration and search pipelines
"""

from .extractor import (
    extract_structured_block,
    parse_structured_block,
    map_flight_response,
    map_travel_response
)
from .gemini import GeminiSearchProvider
from .search import SearchProvider, TravelSearchService

__all__ = [
    "extract_structured_block",
    "parse_structured_block",
    "map_flight_response",
    "map_travel_response",
    "GeminiSearchProvider",
    "SearchProvider",
    "TravelSearchService"
]
