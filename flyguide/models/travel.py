"""
Travel guide models - Pydantic schemas for guide search input and results
"""

from pydantic import BaseModel, ConfigDict, Field, field_validator
from typing import Optional, List
from enum import Enum

from .flight import Destination, coerce_display_text, coerce_tag_list


class TravelMode(str, Enum):
    """Guide sub-mode"""
    INSPIRATION = "inspiration"
    ACCOMMODATION = "accommodation"
    EXPLORE = "explore"


class TravelCategory(str, Enum):
    """What to look for around the anchor in explore mode"""
    FOOD = "Food"
    SPOT = "Attractions"
    SHOPPING = "Shopping"


class AccommodationType(str, Enum):
    """Lodging type for accommodation mode"""
    BUDGET_HOTEL = "Budget business hotel"
    HOMESTAY = "Homestay / Airbnb"
    NEAR_SUBWAY = "Near subway station"
    NEAR_AIRPORT = "Near airport"
    RESORT = "Onsen / resort hotel"
    CAPSULE = "Capsule hotel"
    LUXURY = "Luxury hotel"


class PriceLevel(str, Enum):
    """Nightly budget tier; ANY means no price constraint"""
    ANY = "Any budget"
    LOW = "under NT$2,000 per night"
    MID = "NT$2,000-4,000 per night"
    HIGH = "over NT$4,000 per night"


class FoodTag(str, Enum):
    """Food sub-type for explore mode; ANY means no restriction"""
    ANY = "Any"
    YAKINIKU = "Yakiniku"
    HOTPOT = "Hotpot / Sukiyaki"
    RAMEN = "Ramen"
    SUSHI = "Sushi / Seafood"
    IZAKAYA = "Izakaya"
    CAFE = "Dessert / Cafe"
    STREET_FOOD = "Street food"


class TravelParams(BaseModel):
    """
    Travel guide parameters

    Mode-specific fields:
    - accommodation: accom_type, price_level, keyword
    - explore: category, food_tag, center_location, keyword
    - inspiration: destination only
    """

    model_config = ConfigDict(
        populate_by_name=True,
        json_schema_extra={
            "example": {
                "mode": "explore",
                "destination": "Osaka (KIX)",
                "category": "Food",
                "foodTag": "Ramen",
                "centerLocation": "Namba Oriental Hotel",
                "keyword": "open late"
            }
        }
    )

    mode: TravelMode = Field(..., description="Guide sub-mode")
    destination: Destination = Field(..., description="Destination")
    accom_type: Optional[AccommodationType] = Field(None, alias="accomType")
    price_level: Optional[PriceLevel] = Field(None, alias="priceLevel")
    category: Optional[TravelCategory] = Field(None)
    food_tag: Optional[FoodTag] = Field(None, alias="foodTag")
    center_location: Optional[str] = Field(
        None,
        alias="centerLocation",
        description="Anchor location, set when a lodging was picked as base"
    )
    keyword: Optional[str] = Field(None, description="Free-text preference keyword")

    @field_validator("center_location", "keyword")
    @classmethod
    def blank_is_none(cls, v):
        """Empty free-text fields mean 'not provided'"""
        if v is not None and not v.strip():
            return None
        return v


class TravelRecommendation(BaseModel):
    """One recommended place as returned by the provider"""

    model_config = ConfigDict(populate_by_name=True, extra="allow")

    id: str = Field(..., description="Synthetic identifier, rec-<index>")
    name: Optional[str] = Field(None, description="Place name")
    category: Optional[str] = Field(None, description="Category label")
    description: Optional[str] = Field(None, description="One-paragraph description")
    location: Optional[str] = Field(None, description="Address or map search name")
    subway: Optional[str] = Field(None, description="Nearest transit")
    price_level: Optional[str] = Field(None, alias="priceLevel", description="Price level")
    rating: Optional[str] = Field(None, description="Rating, e.g. 4.5")
    tags: List[str] = Field(default_factory=list)
    booking_platform: Optional[str] = Field(
        None,
        alias="bookingPlatform",
        description="Suggested booking platform (accommodation mode)"
    )

    @field_validator(
        "name", "category", "description", "location", "subway",
        "price_level", "rating", "booking_platform", mode="before"
    )
    @classmethod
    def render_display_text(cls, v):
        return coerce_display_text(v)

    @field_validator("tags", mode="before")
    @classmethod
    def render_tags(cls, v):
        return coerce_tag_list(v)


class TravelResponse(BaseModel):
    """Guide search result"""
    model_config = ConfigDict(populate_by_name=True)

    recommendations: List[TravelRecommendation] = Field(default_factory=list)
    map_center: str = Field(..., alias="mapCenter", description="Location to center the map on")
