import json

import pytest

from flyguide.core.exceptions import MalformedPayloadError
from flyguide.services.extractor import (
    FLIGHT_SUMMARY_FALLBACK,
    extract_structured_block,
    map_flight_response,
    map_travel_response,
    parse_structured_block
)


def test_extract_labeled_block():
    assert extract_structured_block('```json\n{"a":1}\n```') == '{"a":1}'


def test_extract_without_fence_is_not_found():
    assert extract_structured_block('{"a":1}') is None
    assert extract_structured_block("") is None


def test_extract_prefers_json_label_over_earlier_fence():
    text = "Notes:\n```\nnot this\n```\nResult:\n```json\n{\"flights\": []}\n```"
    assert extract_structured_block(text) == '{"flights": []}'


def test_extract_falls_back_to_any_fence():
    text = 'Here you go\n```\n{"a": 1}\n```\nand ```{"b": 2}```'
    assert extract_structured_block(text) == '{"a": 1}'


def test_extract_strips_other_labels_and_handles_inline_fence():
    assert extract_structured_block('```javascript\n{"a": 1}\n```') == '{"a": 1}'
    assert extract_structured_block('```{"a": 1}```') == '{"a": 1}'


def test_extract_uses_first_labeled_block():
    text = '```json\n{"n": 1}\n```\n```json\n{"n": 2}\n```'
    assert extract_structured_block(text) == '{"n": 1}'


def test_parse_malformed_json_raises():
    with pytest.raises(MalformedPayloadError):
        parse_structured_block('{"flights": [{"airline": "A"', "flights")


def test_parse_requires_object_with_list():
    with pytest.raises(MalformedPayloadError):
        parse_structured_block('[{"airline": "A"}]', "flights")
    with pytest.raises(MalformedPayloadError):
        parse_structured_block('{"summary": "none"}', "flights")
    with pytest.raises(MalformedPayloadError):
        parse_structured_block('{"flights": "none"}', "flights")


def test_parse_tolerates_trailing_commas():
    payload = parse_structured_block('{"flights": [{"airline": "A",},],}', "flights")
    assert payload == {"flights": [{"airline": "A"}]}


def test_ids_follow_provider_order_not_price():
    payload = parse_structured_block(
        '{"flights":[{"airline":"A","price":"NT$9,000"},{"airline":"B","price":"NT$5,000"}]}',
        "flights"
    )
    response = map_flight_response(payload)
    assert [f.id for f in response.flights] == ["flight-0", "flight-1"]
    assert [f.airline for f in response.flights] == ["A", "B"]


def test_duplicates_are_kept():
    response = map_flight_response({"flights": [{"airline": "A"}, {"airline": "A"}], "summary": "x"})
    assert len(response.flights) == 2


def test_missing_summary_uses_fallback():
    response = map_flight_response({"flights": [{"airline": "A"}, {"airline": "B"}]})
    assert response.summary == FLIGHT_SUMMARY_FALLBACK
    assert map_flight_response({"flights": [], "summary": "  "}).summary == FLIGHT_SUMMARY_FALLBACK


def test_empty_result_keeps_explanation():
    response = map_flight_response({"flights": [], "summary": "No nonstop service on this route."})
    assert response.flights == []
    assert response.summary == "No nonstop service on this route."


def test_flight_round_trip_reproduces_fields():
    flights = [
        {
            "airline": "星宇航空",
            "price": "NT$12,300",
            "dates": "11/3 - 11/8",
            "outboundDate": "2026-11-03",
            "returnDate": "2026-11-08",
            "duration": "2h 45m",
            "type": "直飛",
            "tags": ["最低價"],
            "notes": "含行李",
        },
        {"airline": "樂桃航空", "price": "NT$7,800", "tags": [], "seatsLeft": "3"},
    ]
    raw = "Results:\n```json\n" + json.dumps({"summary": "ok", "flights": flights}, ensure_ascii=False) + "\n```"

    response = map_flight_response(parse_structured_block(extract_structured_block(raw), "flights"))

    dumped = [f.model_dump(by_alias=True, exclude_unset=True) for f in response.flights]
    assert dumped == [
        {**flights[0], "id": "flight-0"},
        {**flights[1], "id": "flight-1"},
    ]
    assert response.summary == "ok"


def test_numeric_display_values_become_strings():
    response = map_flight_response({"flights": [{"airline": "A", "price": 8500}], "summary": "s"})
    assert response.flights[0].price == "8500"


def test_non_object_entry_is_malformed():
    with pytest.raises(MalformedPayloadError):
        map_flight_response({"flights": ["A"]})


def test_wrong_field_type_is_malformed():
    with pytest.raises(MalformedPayloadError):
        map_flight_response({"flights": [{"airline": "A", "tags": "cheap"}]})


def test_travel_ids_and_round_trip():
    recs = [
        {"name": "一蘭拉麵", "category": "Food", "location": "Dotonbori", "subway": "Namba 5 min",
         "priceLevel": "NT$300", "rating": "4.5", "tags": ["宵夜"]},
        {"name": "Hotel X", "bookingPlatform": "Agoda"},
    ]
    response = map_travel_response({"mapCenter": "Namba Station", "recommendations": recs}, "Osaka")

    assert response.map_center == "Namba Station"
    dumped = [r.model_dump(by_alias=True, exclude_unset=True) for r in response.recommendations]
    assert dumped == [{**recs[0], "id": "rec-0"}, {**recs[1], "id": "rec-1"}]


def test_map_center_falls_back_to_first_location_then_city():
    recs = [{"name": "A", "location": "Tenjin, Fukuoka"}, {"name": "B", "location": "Hakata"}]
    assert map_travel_response({"recommendations": recs}, "Fukuoka").map_center == "Tenjin, Fukuoka"
    assert map_travel_response({"recommendations": [{"name": "A"}]}, "Fukuoka").map_center == "Fukuoka"
    assert map_travel_response({"recommendations": []}, "Fukuoka").map_center == "Fukuoka"


def test_null_tags_and_type_take_defaults():
    response = map_flight_response({"flights": [{"airline": "A", "tags": None, "type": None}], "summary": "s"})
    assert response.flights[0].tags == []
    assert response.flights[0].type == "direct"

    travel = map_travel_response({"recommendations": [{"name": "B", "tags": None}]}, "Osaka")
    assert travel.recommendations[0].tags == []


def test_mixed_type_tags_become_strings():
    response = map_flight_response({"flights": [{"airline": "A", "tags": ["cheapest", 1, None]}], "summary": "s"})
    assert response.flights[0].tags == ["cheapest", "1"]

    travel = map_travel_response({"recommendations": [{"name": "B", "tags": ["late night", 24]}]}, "Osaka")
    assert travel.recommendations[0].tags == ["late night", "24"]


def test_json_prefixed_labels_are_not_the_json_label():
    assert extract_structured_block('```jsonc\n{"a": 1}\n```') == '{"a": 1}'
    assert extract_structured_block('```json5\n{"a": 1,}\n```') == '{"a": 1,}'


def test_summary_fallback_is_neutral_for_empty_list():
    assert map_flight_response({"flights": []}).summary == FLIGHT_SUMMARY_FALLBACK
    assert "best" not in FLIGHT_SUMMARY_FALLBACK
