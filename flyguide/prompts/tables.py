"""
Static lookup tables used by the query compilers
All tables are read-only mappings so the compilers stay pure
"""

from types import MappingProxyType
from typing import Tuple

from flyguide.models.flight import CabinClass, DepartureLocation
from flyguide.models.travel import AccommodationType


# Carriers worth searching on any Taiwan-Korea route, whatever the origin
KOREA_ROUTE_CARRIERS: Tuple[str, ...] = (
    "Korean Air (KE)",
    "Asiana Airlines (OZ)",
    "Tigerair Taiwan (IT)",
    "China Airlines (CI)",
    "EVA Air (BR)",
    "T'way Air (TW)",
    "Jeju Air (7C)",
    "Air Busan (BX)",
    "Jin Air (LJ)",
)

# Carriers operating nonstop service out of each Taiwanese origin airport
ORIGIN_CARRIERS = MappingProxyType({
    DepartureLocation.TPE: (
        "Starlux (JX)",
        "EVA Air (BR)",
        "China Airlines (CI)",
        "Cathay Pacific (CX)",
        "Peach Aviation (MM)",
        "Scoot (TR)",
        "Jetstar Japan (GK)",
        "Thai Vietjet (VZ)",
        "Batik Air (OD)",
        "AirAsia (AK)",
        "Korean Air (KE)",
        "Asiana Airlines (OZ)",
    ),
    DepartureLocation.TSA: (
        "China Airlines (CI)",
        "EVA Air (BR)",
        "Japan Airlines (JL)",
        "All Nippon Airways (NH)",
        "T'way Air (TW)",
    ),
    DepartureLocation.RMQ: (
        "Mandarin Airlines (AE)",
        "Tigerair Taiwan (IT)",
        "Thai Vietjet (VZ)",
    ),
    DepartureLocation.KHH: (
        "Tigerair Taiwan (IT)",
        "Peach Aviation (MM)",
        "China Airlines (CI)",
        "EVA Air (BR)",
        "Cathay Pacific (CX)",
        "AirAsia (AK)",
        "Batik Air (OD)",
        "T'way Air (TW)",
        "Jeju Air (7C)",
    ),
})

CABIN_DIRECTIVES = MappingProxyType({
    CabinClass.ECONOMY: "Quote economy class fares for both the outbound and the return leg.",
    CabinClass.BUSINESS: "Quote business class fares for both the outbound and the return leg.",
    CabinClass.MIXED: (
        "Mixed cabin: the outbound leg must be in economy class and the return leg "
        "must be in business class. Compute and quote the total price of this "
        "economy-outbound / business-return combination."
    ),
})

# Extra requirement per lodging type; types not listed add nothing
ACCOMMODATION_REQUIREMENTS = MappingProxyType({
    AccommodationType.NEAR_SUBWAY: (
        "Key requirement: within a 5-minute walk of a major subway station. "
        "State the station exit and walking minutes in the subway field."
    ),
    AccommodationType.NEAR_AIRPORT: (
        "Key requirement: a free airport shuttle, or located right next to an "
        "airport express station. Describe the shuttle in the description field."
    ),
    AccommodationType.RESORT: (
        "Key requirement: a large communal bath, onsen hot spring or spa/resort facilities."
    ),
})


def accommodation_requirement(accom_type: AccommodationType) -> str:
    return ACCOMMODATION_REQUIREMENTS.get(accom_type, "")


def airport_code(location: DepartureLocation) -> str:
    """'Kaohsiung (KHH)' -> 'KHH'"""
    return location.value.rsplit("(", 1)[-1].rstrip(")")
