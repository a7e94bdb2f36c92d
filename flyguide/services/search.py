"""
Travel Search Service - runs the flight and guide pipelines
compile -> invoke -> extract -> parse -> map, strictly in that order
"""

import logging
from typing import Callable, Protocol, TypeVar

from flyguide.core.exceptions import MalformedPayloadError, ResponseFormatError
from flyguide.models.flight import FlightResponse, SearchParams
from flyguide.models.travel import TravelParams, TravelResponse
from flyguide.prompts.base import DEFAULT_DISPLAY_LANGUAGE
from flyguide.prompts.flight_query import compile_flight_query
from flyguide.prompts.guide_query import city_of, compile_guide_query
from flyguide.services.extractor import (
    extract_structured_block,
    map_flight_response,
    map_travel_response,
    parse_structured_block
)

logger = logging.getLogger(__name__)

T = TypeVar("T")

RAW_PREVIEW_CHARS = 500


class SearchProvider(Protocol):
    """Anything that turns one instruction into answer text"""

    def invoke(self, instruction: str) -> str:
        ...


class TravelSearchService:
    """
    Flight and guide search over a caller-owned provider

    The service holds no state besides its collaborators, so concurrent
    callers never share results.
    """

    def __init__(self, provider: SearchProvider, language: str = DEFAULT_DISPLAY_LANGUAGE):
        self.provider = provider
        self.language = language

    def _understand(self, raw_text: str, list_key: str, mapper: Callable[[dict], T]) -> T:
        block = extract_structured_block(raw_text)
        if block is None:
            logger.warning(f"No fenced block in provider answer: {raw_text[:RAW_PREVIEW_CHARS]!r}")
            raise ResponseFormatError(raw_text, "no fenced structured block found")

        try:
            return mapper(parse_structured_block(block, list_key))
        except MalformedPayloadError as e:
            logger.warning(f"Malformed structured block ({e}): {block[:RAW_PREVIEW_CHARS]!r}")
            raise ResponseFormatError(raw_text, str(e)) from e

    def search_flights(self, params: SearchParams) -> FlightResponse:
        """
        Find nonstop round-trip fares

        Raises:
            RateLimitedError, ProviderError: From the provider call
            ResponseFormatError: If the answer could not be understood
        """
        query = compile_flight_query(params, self.language)
        logger.info(
            f"Flight search: {params.departure.value} -> {params.destination.value}, "
            f"{params.start_month}, {params.min_days}-{params.max_days} days, {params.airline.value}"
        )

        raw_text = self.provider.invoke(query.instruction)
        result = self._understand(raw_text, "flights", map_flight_response)

        logger.info(f"Flight search returned {len(result.flights)} options")
        return result

    def search_travel_info(self, params: TravelParams) -> TravelResponse:
        """
        Recommend places for the selected guide mode

        Raises:
            RateLimitedError, ProviderError: From the provider call
            ResponseFormatError: If the answer could not be understood
        """
        city = city_of(params)
        query = compile_guide_query(params, self.language)
        logger.info(f"Guide search: {params.mode.value} in {city}")

        raw_text = self.provider.invoke(query.instruction)
        result = self._understand(
            raw_text,
            "recommendations",
            lambda payload: map_travel_response(payload, city)
        )

        logger.info(f"Guide search returned {len(result.recommendations)} recommendations")
        return result
