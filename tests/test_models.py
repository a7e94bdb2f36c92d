"""
Parameter validation happens in the models, before any query is compiled
"""

import pytest
from pydantic import ValidationError

from flyguide.models.flight import Destination, SearchParams, TimeRange
from flyguide.models.travel import TravelParams


def _params(**overrides):
    data = {
        "departure": "Taoyuan (TPE)",
        "destination": "Tokyo (NRT/HND)",
        "startMonth": "2026-11",
        "minDays": 3,
        "maxDays": 5,
        "outboundTime": {"start": 6, "end": 12},
        "returnTime": {"start": 14, "end": 22},
    }
    data.update(overrides)
    return SearchParams(**data)


def test_defaults_are_economy_any_airline_no_luggage():
    params = _params()
    assert params.cabin_class.value == "Economy"
    assert params.airline.value == "All airlines"
    assert params.has_luggage is False


def test_snake_case_names_are_accepted():
    params = SearchParams(
        departure="Taoyuan (TPE)",
        destination="Seoul (ICN/GMP)",
        start_month="2026-11",
        min_days=2,
        max_days=2,
        outbound_time=TimeRange(start=0, end=24),
        return_time=TimeRange(start=8, end=9),
    )
    assert params.min_days == params.max_days == 2


def test_min_days_above_max_days_is_rejected():
    with pytest.raises(ValidationError):
        _params(minDays=8, maxDays=5)


@pytest.mark.parametrize("days", [0, 31])
def test_day_counts_outside_range_are_rejected(days):
    with pytest.raises(ValidationError):
        _params(minDays=days, maxDays=days)


@pytest.mark.parametrize("window", [{"start": 12, "end": 12}, {"start": 18, "end": 6}, {"start": -1, "end": 5}, {"start": 3, "end": 25}])
def test_bad_time_windows_are_rejected(window):
    with pytest.raises(ValidationError):
        _params(outboundTime=window)


def test_start_month_must_be_year_and_month():
    with pytest.raises(ValidationError):
        _params(startMonth="November")


def test_destination_city_strips_airport_suffix():
    assert Destination.OSAKA.city == "Osaka"
    assert Destination.SEOUL.city == "Seoul"


def test_blank_anchor_means_not_provided():
    params = TravelParams(mode="explore", destination="Osaka (KIX)", centerLocation="   ")
    assert params.center_location is None
