"""
API v1 Endpoints
Contains:
- /flights/search
- /guide/search
- /health
"""

import logging
from typing import Any, Dict, Iterator

from fastapi import APIRouter, Depends

from flyguide.core.config import Settings, get_settings
from flyguide.models.flight import FlightResponse, SearchParams
from flyguide.models.travel import TravelParams, TravelResponse
from flyguide.services.gemini import GeminiSearchProvider
from flyguide.services.search import TravelSearchService

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/v1", tags=["FlyGuide"])


def get_search_service(settings: Settings = Depends(get_settings)) -> Iterator[TravelSearchService]:
    """
    Build a search service for one request and close its provider afterwards

    Raises:
        MissingCredentialError: If GOOGLE_GEMINI_API_KEY is not configured
    """
    provider = GeminiSearchProvider.from_settings(settings)
    try:
        yield TravelSearchService(provider, language=settings.display_language)
    finally:
        provider.close()


@router.post(
    "/flights/search",
    response_model=FlightResponse,
    summary="Find the cheapest nonstop round-trip fares"
)
def search_flights(
    params: SearchParams,
    service: TravelSearchService = Depends(get_search_service),
) -> FlightResponse:
    """An empty flights list with a summary means no nonstop option matched."""
    return service.search_flights(params)


@router.post(
    "/guide/search",
    response_model=TravelResponse,
    summary="Recommend sights, food or places to stay"
)
def search_guide(
    params: TravelParams,
    service: TravelSearchService = Depends(get_search_service),
) -> TravelResponse:
    return service.search_travel_info(params)


@router.get("/health", summary="Service health")
def health(settings: Settings = Depends(get_settings)) -> Dict[str, Any]:
    return {
        "status": "ok",
        "version": settings.app_version,
        "model": settings.default_model_name,
        "gemini_configured": settings.google_gemini_api_key is not None,
    }
