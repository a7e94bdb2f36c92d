import pytest

from flyguide.models.flight import SearchParams
from flyguide.models.travel import TravelParams


class FakeProvider:
    """Returns canned answer text and records every instruction it receives"""

    def __init__(self, answer="", error=None):
        self.answer = answer
        self.error = error
        self.instructions = []

    def invoke(self, instruction):
        self.instructions.append(instruction)
        if self.error is not None:
            raise self.error
        return self.answer


@pytest.fixture
def flight_params():
    return SearchParams(
        departure="Taoyuan (TPE)",
        destination="Osaka (KIX)",
        startMonth="2026-11",
        minDays=4,
        maxDays=6,
        hasLuggage=True,
        outboundTime={"start": 6, "end": 12},
        returnTime={"start": 14, "end": 22},
        cabinClass="Economy",
        airline="All airlines",
    )


@pytest.fixture
def busan_params():
    return SearchParams(
        departure="Kaohsiung (KHH)",
        destination="Busan (PUS)",
        startMonth="2026-12",
        minDays=3,
        maxDays=7,
        hasLuggage=False,
        outboundTime={"start": 6, "end": 12},
        returnTime={"start": 16, "end": 23},
        cabinClass="Economy",
        airline="All airlines",
    )


@pytest.fixture
def explore_params():
    return TravelParams(mode="explore", destination="Osaka (KIX)", category="Food")
