"""
Guide query compiler - turns TravelParams into a provider instruction
One branch per TravelMode: inspiration, accommodation, explore
"""

from flyguide.models.travel import AccommodationType, FoodTag, PriceLevel, TravelCategory, TravelMode, TravelParams
from flyguide.prompts.base import CompiledQuery, DEFAULT_DISPLAY_LANGUAGE, OUTPUT_RULES, join_instruction
from flyguide.prompts.tables import accommodation_requirement


DEFAULT_ACCOMMODATION_KEYWORD = "clean, well reviewed"
DEFAULT_EXPLORE_KEYWORD = "popular picks"

RECOMMENDATION_FIELDS = """
      "name": "Place name (display language + original name)",
      "category": "{category}",
      "description": "{description}",
      "location": "Full address or exact Google Maps search name",
      "subway": "{subway}",
      "priceLevel": "{price}",
      "rating": "Rating, e.g. 4.5",
      "tags": ["..."]"""

INSPIRATION_TEMPLATE = """
Role: You are a veteran travel blogger based in {city}.

Task: Put together a must-see and must-eat guide for first-time independent travellers to {city}.

Search strategy:
1. Search for the 5 most popular sights and the 5 most talked-about food experiences in {city} right now.
2. Do not personalise: ignore any user keyword and give the classic must-visit list.
3. Return 8-10 items in total, mixing sights and food.
"""

ACCOMMODATION_TEMPLATE = """
Role: You are a local hotel-booking expert in {city}.

Task: Recommend 5-6 places to stay in {city} of type "{accom_type}".
User keyword: "{keyword}"
{constraints}
Requirements:
1. Focus on good value options with genuine good reviews.
2. Give the nightly price range.
3. Suggest a booking platform for each (e.g. Booking.com, Agoda, Airbnb).
"""

EXPLORE_TEMPLATE = """
Role: You are a local guide in {city}.

Task: Using "{anchor}" as the centre point, recommend 5-6 nearby places in the "{category}" category.
{constraints}
User keyword: "{keyword}"

Requirements:
1. Location limit: every place must be within walking distance or a short subway ride of "{anchor}". Do not recommend places far away.
2. Give a precise place name or address suitable for a Google Maps search.
"""


def city_of(params: TravelParams) -> str:
    return params.destination.city


def explore_anchor(params: TravelParams) -> str:
    """Supplied anchor, else '<city> Station'"""
    return params.center_location or f"{city_of(params)} Station"


def _schema(map_center: str, fields: str, language: str, booking: bool = False) -> str:
    item = fields
    if booking:
        item += ',\n      "bookingPlatform": "Suggested booking platform (Agoda/Booking.com/Airbnb)"'
    return (
        f"{OUTPUT_RULES.format(language=language)}\n"
        "{\n"
        f'  "mapCenter": "{map_center}",\n'
        '  "recommendations": [\n'
        "    {"
        f"{item}\n"
        "    }\n"
        "  ]\n"
        "}"
    )


def _compile_inspiration(params: TravelParams, language: str) -> CompiledQuery:
    city = city_of(params)
    fields = RECOMMENDATION_FIELDS.format(
        category="Sight or Food",
        description="One-line highlight",
        subway="Nearest station",
        price="Estimated spend",
    )
    body = INSPIRATION_TEMPLATE.format(city=city)
    return join_instruction(body, _schema(city, fields, language))


def _compile_accommodation(params: TravelParams, language: str) -> CompiledQuery:
    city = city_of(params)
    accom_type = params.accom_type or AccommodationType.BUDGET_HOTEL

    constraints = []
    if params.price_level and params.price_level != PriceLevel.ANY:
        constraints.append(f"Strict budget: the nightly rate must be {params.price_level.value}.")
    requirement = accommodation_requirement(accom_type)
    if requirement:
        constraints.append(requirement)

    body = ACCOMMODATION_TEMPLATE.format(
        city=city,
        accom_type=accom_type.value,
        keyword=params.keyword or DEFAULT_ACCOMMODATION_KEYWORD,
        constraints="".join(f"{line}\n" for line in constraints),
    )
    fields = RECOMMENDATION_FIELDS.format(
        category=accom_type.value,
        description="Highlights: minutes to the subway, room size, nearby conveniences",
        subway="Nearest station and exit",
        price="Estimated nightly price, e.g. NT$1,500-2,000/night",
    )
    return join_instruction(body, _schema(f"{city} Station", fields, language, booking=True))


def _compile_explore(params: TravelParams, language: str) -> CompiledQuery:
    city = city_of(params)
    anchor = explore_anchor(params)
    category = params.category or TravelCategory.FOOD
    is_food = category == TravelCategory.FOOD

    constraints = []
    if is_food and params.food_tag and params.food_tag != FoodTag.ANY:
        constraints.append(f'Only recommend places serving "{params.food_tag.value}".')
    if is_food:
        constraints.append("Include the average spend per person for every place.")

    body = EXPLORE_TEMPLATE.format(
        city=city,
        anchor=anchor,
        category=category.value,
        constraints="\n".join(constraints),
        keyword=params.keyword or DEFAULT_EXPLORE_KEYWORD,
    )
    fields = RECOMMENDATION_FIELDS.format(
        category=category.value,
        description="Short introduction: signature items, highlights, opening hours",
        subway="How to get there (walking minutes)",
        price="Spend per person, e.g. NT$300-500/person" if is_food else "Typical spend",
    )
    return join_instruction(body, _schema(anchor, fields, language))


def compile_guide_query(params: TravelParams, language: str = DEFAULT_DISPLAY_LANGUAGE) -> CompiledQuery:
    """
    Compile guide parameters into a provider instruction

    Args:
        params: Validated guide parameters
        language: Language the provider should write display values in

    Returns:
        CompiledQuery whose instruction embeds the schema hint
    """
    if params.mode == TravelMode.INSPIRATION:
        return _compile_inspiration(params, language)
    if params.mode == TravelMode.ACCOMMODATION:
        return _compile_accommodation(params, language)
    return _compile_explore(params, language)
