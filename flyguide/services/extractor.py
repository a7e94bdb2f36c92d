"""
Response extraction - recovers typed results from free-form provider text

The provider is asked for a ```json fenced block but may not comply, so
every step here either returns a value or raises MalformedPayloadError.
"""

import json
import logging
import re
from typing import Any, Dict, Optional

from pydantic import ValidationError

from flyguide.core.exceptions import MalformedPayloadError
from flyguide.models.flight import FlightOption, FlightResponse
from flyguide.models.travel import TravelRecommendation, TravelResponse

logger = logging.getLogger(__name__)

FLIGHT_SUMMARY_FALLBACK = "Search completed; see the options listed, if any."

_LABELED_FENCE = re.compile(r"```json(?!\w)[ \t]*\r?\n?(.*?)```", re.DOTALL | re.IGNORECASE)
_ANY_FENCE = re.compile(r"```(?:[\w+-]*[ \t]*\r?\n)?(.*?)```", re.DOTALL)
_TRAILING_COMMA = re.compile(r",\s*([\]}])")


def extract_structured_block(raw_text: str) -> Optional[str]:
    """
    Locate the structured block inside provider text

    A fence labelled json wins; otherwise the first fenced block of any
    label is used. Returns None when the text has no fenced block at all.
    """
    if not raw_text:
        return None

    match = _LABELED_FENCE.search(raw_text) or _ANY_FENCE.search(raw_text)
    if not match:
        return None
    return match.group(1).strip()


def parse_structured_block(block: str, list_key: str) -> Dict[str, Any]:
    """
    Parse a structured block into a JSON object holding a list under list_key

    Raises:
        MalformedPayloadError: If the block is not a JSON object or the list is missing
    """
    text = block.replace("\ufeff", "").strip()
    parse_variants = [
        text,
        _TRAILING_COMMA.sub(r"\1", text),
    ]

    parsed = None
    parse_error: Optional[Exception] = None
    for candidate in parse_variants:
        try:
            parsed = json.loads(candidate)
            break
        except json.JSONDecodeError as e:
            parse_error = e

    if parsed is None:
        raise MalformedPayloadError(f"Invalid JSON: {parse_error}")
    if not isinstance(parsed, dict):
        raise MalformedPayloadError("Structured block is not a JSON object")
    if not isinstance(parsed.get(list_key), list):
        raise MalformedPayloadError(f"Required list field '{list_key}' is missing")
    return parsed


def _with_ids(items: list, prefix: str) -> list:
    """Attach <prefix>-<index> ids in provider order"""
    tagged = []
    for index, item in enumerate(items):
        if not isinstance(item, dict):
            raise MalformedPayloadError(f"{prefix} entry {index} is not an object")
        tagged.append({**item, "id": f"{prefix}-{index}"})
    return tagged


def _text_or_none(value: Any) -> Optional[str]:
    if isinstance(value, str) and value.strip():
        return value
    return None


def map_flight_response(payload: Dict[str, Any]) -> FlightResponse:
    """Map a parsed flight payload to FlightResponse"""
    try:
        flights = [FlightOption.model_validate(item) for item in _with_ids(payload["flights"], "flight")]
    except ValidationError as e:
        raise MalformedPayloadError(f"Invalid flight entry: {e}")

    logger.debug("Mapped %d flight options", len(flights))
    return FlightResponse(
        flights=flights,
        summary=_text_or_none(payload.get("summary")) or FLIGHT_SUMMARY_FALLBACK
    )


def map_travel_response(payload: Dict[str, Any], city: str) -> TravelResponse:
    """
    Map a parsed guide payload to TravelResponse

    mapCenter falls back to the first recommendation's location, then the city.
    """
    try:
        recommendations = [
            TravelRecommendation.model_validate(item)
            for item in _with_ids(payload["recommendations"], "rec")
        ]
    except ValidationError as e:
        raise MalformedPayloadError(f"Invalid recommendation entry: {e}")

    map_center = _text_or_none(payload.get("mapCenter"))
    if map_center is None and recommendations:
        map_center = _text_or_none(recommendations[0].location)

    logger.debug("Mapped %d recommendations, map center %s", len(recommendations), map_center or city)
    return TravelResponse(
        recommendations=recommendations,
        map_center=map_center or city
    )
