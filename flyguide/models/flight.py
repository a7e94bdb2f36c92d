"""
Flight data models - Pydantic schemas for fare search input and results
Input models validate user parameters; output models hold what the
provider returned, keyed by the camel-case vocabulary requested in the prompt
"""

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator
from typing import Any, Optional, List
from enum import Enum


class Destination(str, Enum):
    """Supported destinations (display name with airport codes)"""
    OSAKA = "Osaka (KIX)"
    TOKYO = "Tokyo (NRT/HND)"
    FUKUOKA = "Fukuoka (FUK)"
    OKINAWA = "Okinawa (OKA)"
    SAPPORO = "Sapporo (CTS)"
    NAGOYA = "Nagoya (NGO)"
    KUMAMOTO = "Kumamoto (KMJ)"
    SENDAI = "Sendai (SDJ)"
    HAKODATE = "Hakodate (HKD)"
    HIROSHIMA = "Hiroshima (HIJ)"
    SEOUL = "Seoul (ICN/GMP)"
    BUSAN = "Busan (PUS)"
    JEJU = "Jeju (CJU)"

    @property
    def city(self) -> str:
        """City name without the airport suffix ("Osaka (KIX)" -> "Osaka")"""
        return self.value.split("(")[0].strip()


KOREA_DESTINATIONS = frozenset({Destination.SEOUL, Destination.BUSAN, Destination.JEJU})


class DepartureLocation(str, Enum):
    """Taiwanese origin airports"""
    TPE = "Taoyuan (TPE)"
    TSA = "Taipei Songshan (TSA)"
    RMQ = "Taichung (RMQ)"
    KHH = "Kaohsiung (KHH)"


class CabinClass(str, Enum):
    """Cabin selection for the round trip"""
    ECONOMY = "Economy"
    BUSINESS = "Business"
    MIXED = "Mixed (economy outbound / business return)"


class Airline(str, Enum):
    """Airline filter; ALL lets the route decide the carrier shortlist"""
    ALL = "All airlines"
    CI = "China Airlines (CI)"
    BR = "EVA Air (BR)"
    JX = "Starlux (JX)"
    IT = "Tigerair Taiwan (IT)"
    AE = "Mandarin Airlines (AE)"
    MM = "Peach Aviation (MM)"
    TR = "Scoot (TR)"
    GK = "Jetstar Japan (GK)"
    OD = "Batik Air (OD)"
    VZ = "Thai Vietjet (VZ)"
    AK = "AirAsia (AK)"
    KE = "Korean Air (KE)"
    OZ = "Asiana Airlines (OZ)"
    C7 = "Jeju Air (7C)"
    TW = "T'way Air (TW)"
    LJ = "Jin Air (LJ)"
    BX = "Air Busan (BX)"
    CX = "Cathay Pacific (CX)"
    JL = "Japan Airlines (JL)"
    NH = "All Nippon Airways (NH)"


def coerce_display_text(v: Any) -> Any:
    """Render numeric display values ("price": 8500) as strings"""
    if isinstance(v, bool):
        return v
    if isinstance(v, (int, float)):
        return str(v)
    return v


def coerce_tag_list(v: Any) -> Any:
    """null tags become an empty list; numeric tags become strings, null items are dropped"""
    if v is None:
        return []
    if isinstance(v, list):
        return [coerce_display_text(tag) for tag in v if tag is not None]
    return v


class TimeRange(BaseModel):
    """Departure time-of-day window, whole hours"""
    start: int = Field(..., ge=0, le=24, description="Window start hour")
    end: int = Field(..., ge=0, le=24, description="Window end hour")

    @model_validator(mode="after")
    def check_order(self):
        """Start hour must be before end hour"""
        if self.start >= self.end:
            raise ValueError("time window start must be earlier than its end")
        return self


class SearchParams(BaseModel):
    """
    Flight search parameters

    Validated here so the query compiler can assume:
    - 1 <= min_days <= max_days <= 30
    - every time window has start < end
    """

    model_config = ConfigDict(
        populate_by_name=True,
        json_schema_extra={
            "example": {
                "departure": "Taoyuan (TPE)",
                "destination": "Osaka (KIX)",
                "startMonth": "2026-11",
                "minDays": 4,
                "maxDays": 6,
                "hasLuggage": True,
                "outboundTime": {"start": 6, "end": 12},
                "returnTime": {"start": 14, "end": 22},
                "cabinClass": "Economy",
                "airline": "All airlines"
            }
        }
    )

    departure: DepartureLocation = Field(..., description="Origin airport")
    destination: Destination = Field(..., description="Destination")
    start_month: str = Field(
        ...,
        alias="startMonth",
        pattern=r"^\d{4}-(0[1-9]|1[0-2])$",
        description="First month of the 3-month search window (YYYY-MM)"
    )
    min_days: int = Field(..., alias="minDays", ge=1, le=30, description="Shortest trip length in days")
    max_days: int = Field(..., alias="maxDays", ge=1, le=30, description="Longest trip length in days")
    has_luggage: bool = Field(default=False, alias="hasLuggage", description="Fare must include checked baggage")
    outbound_time: TimeRange = Field(..., alias="outboundTime", description="Outbound departure window")
    return_time: TimeRange = Field(..., alias="returnTime", description="Return departure window")
    cabin_class: CabinClass = Field(default=CabinClass.ECONOMY, alias="cabinClass")
    airline: Airline = Field(default=Airline.ALL, description="Airline filter")

    @model_validator(mode="after")
    def check_day_range(self):
        """min_days may not exceed max_days"""
        if self.min_days > self.max_days:
            raise ValueError("minDays cannot be greater than maxDays")
        return self


class FlightOption(BaseModel):
    """
    One nonstop round-trip fare as returned by the provider

    Unknown keys are kept as extra fields so nothing the provider sent is lost.
    """

    model_config = ConfigDict(populate_by_name=True, extra="allow")

    id: str = Field(..., description="Synthetic identifier, flight-<index>")
    airline: Optional[str] = Field(None, description="Carrier name")
    price: Optional[str] = Field(None, description="Display price, e.g. NT$8,500")
    dates: Optional[str] = Field(None, description="Display date range, e.g. 5/12 - 5/16")
    outbound_date: Optional[str] = Field(None, alias="outboundDate", description="Outbound date (YYYY-MM-DD)")
    return_date: Optional[str] = Field(None, alias="returnDate", description="Return date (YYYY-MM-DD)")
    duration: Optional[str] = Field(None, description="Flight duration")
    type: str = Field(default="direct", description="Itinerary type, always nonstop")
    tags: List[str] = Field(default_factory=list, description="Ordered tags, may include a cheapest marker")
    notes: Optional[str] = Field(None, description="Free-text notes")

    @field_validator("airline", "price", "dates", "duration", "notes", mode="before")
    @classmethod
    def render_display_text(cls, v):
        return coerce_display_text(v)

    @field_validator("type", mode="before")
    @classmethod
    def default_type(cls, v):
        if v is None:
            return "direct"
        return coerce_display_text(v)

    @field_validator("tags", mode="before")
    @classmethod
    def render_tags(cls, v):
        return coerce_tag_list(v)


class FlightResponse(BaseModel):
    """Fare search result; summary explains an empty list"""
    flights: List[FlightOption] = Field(default_factory=list)
    summary: str = Field(..., description="One-paragraph market summary")
