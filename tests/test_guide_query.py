import pytest

from flyguide.models.travel import AccommodationType, FoodTag, PriceLevel, TravelParams
from flyguide.prompts.guide_query import compile_guide_query
from flyguide.prompts.tables import ACCOMMODATION_REQUIREMENTS


def _accommodation(**overrides):
    data = {"mode": "accommodation", "destination": "Tokyo (NRT/HND)"}
    data.update(overrides)
    return TravelParams(**data)


def test_inspiration_ignores_keyword_and_category():
    plain = TravelParams(mode="inspiration", destination="Fukuoka (FUK)")
    noisy = TravelParams(mode="inspiration", destination="Fukuoka (FUK)", keyword="cheap sushi", category="Shopping")
    assert compile_guide_query(plain) == compile_guide_query(noisy)

    instruction = compile_guide_query(plain).instruction
    assert "8-10 items" in instruction
    assert "cheap sushi" not in instruction
    assert '"mapCenter": "Fukuoka"' in instruction
    assert "bookingPlatform" not in instruction


def test_accommodation_with_any_price_has_no_price_clause():
    instruction = compile_guide_query(_accommodation(priceLevel=PriceLevel.ANY)).instruction
    assert "Strict budget" not in instruction
    assert PriceLevel.ANY.value not in instruction


def test_accommodation_price_tier_is_enforced():
    instruction = compile_guide_query(_accommodation(priceLevel=PriceLevel.MID)).instruction
    assert f"Strict budget: the nightly rate must be {PriceLevel.MID.value}." in instruction


@pytest.mark.parametrize("accom_type", list(ACCOMMODATION_REQUIREMENTS))
def test_mapped_lodging_types_add_their_requirement(accom_type):
    instruction = compile_guide_query(_accommodation(accomType=accom_type)).instruction
    assert ACCOMMODATION_REQUIREMENTS[accom_type] in instruction


def test_unmapped_lodging_type_adds_no_requirement():
    instruction = compile_guide_query(_accommodation(accomType=AccommodationType.CAPSULE)).instruction
    assert "Key requirement" not in instruction
    assert f'of type "{AccommodationType.CAPSULE.value}"' in instruction


def test_accommodation_defaults_and_booking_field():
    query = compile_guide_query(_accommodation())
    assert f'"{AccommodationType.BUDGET_HOTEL.value}"' in query.instruction
    assert '"bookingPlatform"' in query.schema_hint
    assert '"mapCenter": "Tokyo Station"' in query.schema_hint
    assert "5-6 places to stay in Tokyo" in query.instruction


def test_explore_anchor_defaults_to_city_station(explore_params):
    instruction = compile_guide_query(explore_params).instruction
    assert 'Using "Osaka Station" as the centre point' in instruction
    assert '"mapCenter": "Osaka Station"' in instruction


def test_explore_uses_supplied_anchor():
    params = TravelParams(mode="explore", destination="Osaka (KIX)", category="Attractions",
                          centerLocation="Hotel Nikko Osaka")
    instruction = compile_guide_query(params).instruction
    assert 'Using "Hotel Nikko Osaka" as the centre point' in instruction
    assert "within walking distance or a short subway ride" in instruction


def test_explore_food_tag_and_per_person_price():
    params = TravelParams(mode="explore", destination="Osaka (KIX)", category="Food", foodTag="Ramen")
    instruction = compile_guide_query(params).instruction
    assert 'Only recommend places serving "Ramen"' in instruction
    assert "average spend per person" in instruction


def test_explore_any_food_tag_adds_no_restriction(explore_params):
    params = explore_params.model_copy(update={"food_tag": FoodTag.ANY})
    instruction = compile_guide_query(params).instruction
    assert "Only recommend places serving" not in instruction
    assert "average spend per person" in instruction


def test_explore_food_tag_ignored_outside_food():
    params = TravelParams(mode="explore", destination="Osaka (KIX)", category="Shopping", foodTag="Ramen")
    instruction = compile_guide_query(params).instruction
    assert "Ramen" not in instruction
    assert "average spend per person" not in instruction


def test_explore_keyword_is_passed_through(explore_params):
    params = explore_params.model_copy(update={"keyword": "open late"})
    assert 'User keyword: "open late"' in compile_guide_query(params).instruction
