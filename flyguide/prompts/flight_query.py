"""
Flight query compiler - turns SearchParams into a provider instruction

The compiler is a pure function of its input: it never calls the provider
and never reads the answer. SearchParams are assumed to be validated.
"""

from flyguide.models.flight import Airline, DepartureLocation, KOREA_DESTINATIONS, SearchParams, TimeRange
from flyguide.prompts.base import CompiledQuery, DEFAULT_DISPLAY_LANGUAGE, OUTPUT_RULES, join_instruction
from flyguide.prompts.tables import CABIN_DIRECTIVES, KOREA_ROUTE_CARRIERS, ORIGIN_CARRIERS, airport_code


SEARCH_WINDOW_MONTHS = 3

KOREA_ROUTE_PREFIX = "Korea route priority carriers"

FLIGHT_SCHEMA = """
{
  "summary": "One-sentence market summary. If the flights list is empty, explain why.",
  "flights": [
    {
      "airline": "Airline name",
      "price": "Total round-trip price, e.g. NT$8,500",
      "dates": "Display date range, e.g. 5/12 - 5/16",
      "outboundDate": "Outbound date, YYYY-MM-DD",
      "returnDate": "Return date, YYYY-MM-DD",
      "duration": "Flight time, e.g. 3h 20m",
      "type": "direct",
      "tags": ["cheapest", "early outbound / late return"],
      "notes": "Notes, e.g. economy outbound / business return, baggage included"
    }
  ]
}
""".strip()

FLIGHT_TEMPLATE = """
Role: You are Taiwan's most experienced airfare comparison specialist.

Task: Find the cheapest NONSTOP (direct) round-trip fares from "{departure}" to "{destination}".

Hard rules:
1. Nonstop flights only. Never offer an itinerary with a transfer or layover.
2. If no nonstop flight satisfies every condition below, return an empty "flights" list and explain why in "summary". Never substitute a transfer itinerary.

Search conditions:
1. Departure airport: {departure}.
2. Airlines: {airline_directive}
3. Travel period: search the {window_months} months starting from {start_month}.
4. Trip length: between {min_days} and {max_days} days, inclusive.
5. Baggage: {baggage_directive}
6. Departure times: {time_directive}
7. Cabin: {cabin_directive}

Search strategy:
1. Use Google Search to find real fares departing from this airport in this period.
2. Filter strictly on origin airport, nonstop, trip length, departure times, airline and cabin.
3. Return the 4-5 best nonstop options on different dates.
"""


def format_hour(hour: int) -> str:
    """6 -> '06:00'"""
    return f"{hour:02d}:00"


def _time_directive(outbound: TimeRange, inbound: TimeRange) -> str:
    return (
        f"Outbound flights must depart between {format_hour(outbound.start)} and {format_hour(outbound.end)}. "
        f"Return flights must depart between {format_hour(inbound.start)} and {format_hour(inbound.end)}. "
        "Discard every flight departing outside its window."
    )


def _baggage_directive(has_luggage: bool) -> str:
    if has_luggage:
        return "Quoted prices MUST include 20kg of checked baggage."
    return "Quote basic fares with carry-on baggage only."


def _airline_directive(params: SearchParams) -> str:
    if params.airline != Airline.ALL:
        return (
            f"Strict airline restriction: search and show only flights operated by {params.airline.value}. "
            "Do not substitute any other carrier. "
            f"If {params.airline.value} has no nonstop service on this route, return an empty "
            "flights list and explain this in summary."
        )

    if params.destination in KOREA_DESTINATIONS:
        return f"{KOREA_ROUTE_PREFIX}: {', '.join(KOREA_ROUTE_CARRIERS)}."

    origin = params.departure
    others = [airport_code(loc) for loc in DepartureLocation if loc != origin]
    return (
        f"Focus on carriers flying nonstop from {origin.value}: {', '.join(ORIGIN_CARRIERS[origin])}. "
        f"Strictly exclude flights departing from other Taiwanese airports ({', '.join(others)})."
    )


def flight_schema_hint(language: str = DEFAULT_DISPLAY_LANGUAGE) -> str:
    return f"{OUTPUT_RULES.format(language=language)}\n{FLIGHT_SCHEMA}"


def compile_flight_query(params: SearchParams, language: str = DEFAULT_DISPLAY_LANGUAGE) -> CompiledQuery:
    """
    Compile flight search parameters into a provider instruction

    Args:
        params: Validated search parameters
        language: Language the provider should write display values in

    Returns:
        CompiledQuery whose instruction embeds the schema hint
    """
    body = FLIGHT_TEMPLATE.format(
        departure=params.departure.value,
        destination=params.destination.value,
        airline_directive=_airline_directive(params),
        window_months=SEARCH_WINDOW_MONTHS,
        start_month=params.start_month,
        min_days=params.min_days,
        max_days=params.max_days,
        baggage_directive=_baggage_directive(params.has_luggage),
        time_directive=_time_directive(params.outbound_time, params.return_time),
        cabin_directive=CABIN_DIRECTIVES[params.cabin_class],
    )
    return join_instruction(body, flight_schema_hint(language))
