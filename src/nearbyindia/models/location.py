"""Location-related models for the nearby locations API."""

from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class Region(str, Enum):
    """Coarse geographic buckets used to pick a vocabulary table"""

    NORTH = "north"
    SOUTH = "south"
    EAST = "east"
    WEST = "west"


class PlaceType(str, Enum):
    TEMPLE = "temple"
    MONUMENT = "monument"
    PARK = "park"
    MARKET = "market"
    VIEWPOINT = "viewpoint"
    MUSEUM = "museum"
    FORT = "fort"
    PALACE = "palace"


class HotelType(str, Enum):
    HOTEL = "hotel"
    GUESTHOUSE = "guesthouse"
    RESORT = "resort"
    HOMESTAY = "homestay"
    LODGE = "lodge"


class RestaurantType(str, Enum):
    RESTAURANT = "restaurant"
    DHABA = "dhaba"
    STREET_FOOD = "street_food"
    CAFE = "cafe"
    SWEET_SHOP = "sweet_shop"
    LOCAL_EATERY = "local_eatery"


class TransportType(str, Enum):
    AUTO_RICKSHAW = "auto_rickshaw"
    TAXI = "taxi"
    BUS = "bus"
    LOCAL_TRANSPORT = "local_transport"
    BIKE_RENTAL = "bike_rental"


class CamelModel(BaseModel):
    """Base model that serializes to the camelCase keys the frontend reads"""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class NearbyPlace(CamelModel):
    """Attraction near the queried coordinate"""

    id: str
    name: str
    type: PlaceType
    latitude: str
    longitude: str
    description: str
    image_url: str
    rating: int = Field(..., ge=30, le=50, description="Rating in tenths, 30-50 for 3.0-5.0")
    review_count: int = Field(0, ge=0)
    entry_fee: Optional[int] = Field(None, description="Entry fee in rupees, 0 for free")
    opening_hours: Optional[str] = None
    special_features: List[str]
    best_time_to_visit: Optional[str] = None
    local_name: Optional[str] = None
    cultural_significance: Optional[str] = None


class NearbyHotel(CamelModel):
    """Accommodation near the queried coordinate"""

    id: str
    name: str
    type: HotelType
    latitude: str
    longitude: str
    description: str
    image_url: str
    price_per_night: int
    rating: int = Field(..., ge=30, le=50)
    review_count: int = Field(0, ge=0)
    amenities: List[str]
    room_types: List[str]
    max_guests: int
    check_in_time: str = "14:00"
    check_out_time: str = "11:00"
    contact_number: Optional[str] = None
    available: bool = True
    distance_from_center: Optional[str] = Field(None, description="Distance in km")


class NearbyRestaurant(CamelModel):
    """Eatery near the queried coordinate"""

    id: str
    name: str
    type: RestaurantType
    latitude: str
    longitude: str
    description: str
    image_url: str
    cuisine: List[str]
    specialties: List[str]
    average_cost_for_two: int
    rating: int = Field(..., ge=30, le=50)
    review_count: int = Field(0, ge=0)
    opening_hours: Optional[str] = None
    vegan_friendly: bool = False
    local_favorite: bool = False
    must_try_dishes: List[str]
    contact_number: Optional[str] = None


class TransportationOption(CamelModel):
    """Way of getting around near the queried coordinate"""

    id: str
    type: TransportType
    latitude: str
    longitude: str
    name: str
    description: str
    price_range: str
    availability: str
    contact_info: Optional[str] = None
    routes: Optional[List[str]] = None
    tips: Optional[List[str]] = None
    booking_required: bool = False


class LocationSummary(CamelModel):
    """Synthesized address for the queried coordinate"""

    latitude: float
    longitude: float
    address: str
    city: str
    state: str


class TotalResults(CamelModel):
    places: int
    hotels: int
    restaurants: int
    transportation: int


class LocationBundle(CamelModel):
    """Everything generated for one map click"""

    location: LocationSummary
    places: List[NearbyPlace]
    hotels: List[NearbyHotel]
    restaurants: List[NearbyRestaurant]
    transportation: List[TransportationOption]
    total_results: TotalResults

    @property
    def total_count(self) -> int:
        """Number of entities across all four lists."""
        totals = self.total_results
        return totals.places + totals.hotels + totals.restaurants + totals.transportation
