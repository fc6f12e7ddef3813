"""Synthetic nearby-location data for map clicks in India."""

import logging
import random
import re
import uuid
from typing import List, Optional

from ..models.location import (
    HotelType,
    LocationBundle,
    LocationSummary,
    NearbyHotel,
    NearbyPlace,
    NearbyRestaurant,
    PlaceType,
    Region,
    RestaurantType,
    TotalResults,
    TransportationOption,
    TransportType,
)
from ..utils.geo_utils import get_region
from .vocabulary import (
    BASE_HOTEL_AMENITIES,
    HOTEL_AMENITIES,
    HOTEL_BASE_PRICES,
    HOTEL_DESCRIPTIONS,
    HOTEL_NAME_SUFFIXES,
    HOTEL_ROOM_TYPES,
    LOCAL_NAME_PREFIXES,
    PLACE_BEST_TIME,
    PLACE_CULTURAL_SIGNIFICANCE,
    PLACE_DESCRIPTIONS,
    PLACE_FEATURES,
    PLACE_OPENING_HOURS,
    REGIONAL_VOCABULARY,
    RESTAURANT_BASE_COSTS,
    RESTAURANT_DESCRIPTIONS,
    RESTAURANT_HOURS,
    SETTLEMENT_NAMES,
    TRANSPORT_AVAILABILITY,
    TRANSPORT_BOOKING_REQUIRED,
    TRANSPORT_DESCRIPTIONS,
    TRANSPORT_NAMES,
    TRANSPORT_PRICE_RANGES,
    TRANSPORT_ROUTES,
    TRANSPORT_TIPS,
    TRANSPORT_WITHOUT_CONTACT,
)

logger = logging.getLogger(__name__)

DEFAULT_PLACE_COUNT = 8
DEFAULT_HOTEL_COUNT = 6
DEFAULT_RESTAURANT_COUNT = 10
DEFAULT_TRANSPORT_COUNT = 5

# Full width of the jitter box in degrees, centered on the clicked point
PLACE_JITTER_SPAN = 0.02
HOTEL_JITTER_SPAN = 0.015
RESTAURANT_JITTER_SPAN = 0.01
TRANSPORT_JITTER_SPAN = 0.008

IMAGE_URL_TEMPLATE = (
    "https://images.unsplash.com/photo-{photo_id}"
    "?ixlib=rb-4.0.3&auto=format&fit=crop&w=800&h=600"
)

_SETTLEMENT_SUFFIX = re.compile(r"(pur|nagar|garh)$")


class LocationDataGenerator:
    """Builds plausible places, hotels, restaurants and transport around a coordinate.

    All randomness goes through ``rng`` so a seeded ``random.Random`` gives
    repeatable output. Without one, every call produces fresh, unrelated data.
    """

    def __init__(self, rng: Optional[random.Random] = None):
        self._rng = rng or random.Random()

    def _new_id(self) -> str:
        return str(uuid.UUID(int=self._rng.getrandbits(128), version=4))

    def _jitter(self, value: float, span: float) -> float:
        return value + (self._rng.random() - 0.5) * span

    def _rating(self) -> int:
        return self._rng.randint(30, 50)

    def _image_url(self) -> str:
        return IMAGE_URL_TEMPLATE.format(photo_id=self._rng.randint(0, 999999999))

    def _phone_number(self) -> str:
        return f"+91 {self._rng.randint(70000, 99999)}{self._rng.randint(10000, 99999)}"

    def _settlement(self) -> str:
        return self._rng.choice(SETTLEMENT_NAMES)

    def generate_place_name(self, region: Region) -> str:
        """Settlement stem without its -pur/-nagar/-garh ending plus a regional suffix."""
        base_name = _SETTLEMENT_SUFFIX.sub("", self._settlement())
        suffix = self._rng.choice(REGIONAL_VOCABULARY[region].place_suffixes)
        return f"{base_name} {suffix}"

    def generate_local_name(self, name: str, region: Region) -> str:
        prefix = self._rng.choice(LOCAL_NAME_PREFIXES[region])
        return f"{prefix} {name}"

    def generate_address(self, latitude: float, longitude: float) -> LocationSummary:
        """Synthesize a display address for the clicked point.

        Args:
            latitude: Latitude of the clicked point
            longitude: Longitude of the clicked point

        Returns:
            LocationSummary with a street-style address, a city and a state
        """
        region = get_region(latitude, longitude)
        vocabulary = REGIONAL_VOCABULARY[region]
        state = self._rng.choice(vocabulary.states)
        city = self._settlement()
        area_name = self.generate_place_name(region).split(" ")[0]
        street_number = self._rng.randint(1, 99)
        landmark = self.generate_place_name(region)

        return LocationSummary(
            latitude=latitude,
            longitude=longitude,
            address=f"{street_number}, {area_name} Road, Near {landmark}",
            city=city,
            state=state,
        )

    def generate_places(
        self, latitude: float, longitude: float, region: Region, count: int = DEFAULT_PLACE_COUNT
    ) -> List[NearbyPlace]:
        """Generate attractions within ±0.01° of the point."""
        places = []

        for _ in range(count):
            place_type = self._rng.choice(list(PlaceType))
            name = self.generate_place_name(region)

            places.append(
                NearbyPlace(
                    id=self._new_id(),
                    name=name,
                    type=place_type,
                    latitude=str(self._jitter(latitude, PLACE_JITTER_SPAN)),
                    longitude=str(self._jitter(longitude, PLACE_JITTER_SPAN)),
                    description=PLACE_DESCRIPTIONS[place_type].format(name=name),
                    image_url=self._image_url(),
                    rating=self._rating(),
                    review_count=self._rng.randint(50, 549),
                    entry_fee=0 if place_type == PlaceType.TEMPLE else self._rng.randint(50, 249),
                    opening_hours=PLACE_OPENING_HOURS[place_type],
                    special_features=list(PLACE_FEATURES[place_type]),
                    best_time_to_visit=PLACE_BEST_TIME[place_type],
                    local_name=self.generate_local_name(name, region),
                    cultural_significance=PLACE_CULTURAL_SIGNIFICANCE[place_type],
                )
            )

        return places

    def generate_hotels(
        self, latitude: float, longitude: float, region: Region, count: int = DEFAULT_HOTEL_COUNT
    ) -> List[NearbyHotel]:
        """Generate accommodation within ±0.0075° of the point."""
        vocabulary = REGIONAL_VOCABULARY[region]
        hotels = []

        for _ in range(count):
            hotel_type = self._rng.choice(list(HotelType))
            prefix = self._rng.choice(vocabulary.hotel_prefixes)
            stem = self._settlement()[-3:]
            name = f"{prefix} {stem}{HOTEL_NAME_SUFFIXES[hotel_type]}"

            base_price = HOTEL_BASE_PRICES[hotel_type]

            hotels.append(
                NearbyHotel(
                    id=self._new_id(),
                    name=name,
                    type=hotel_type,
                    latitude=str(self._jitter(latitude, HOTEL_JITTER_SPAN)),
                    longitude=str(self._jitter(longitude, HOTEL_JITTER_SPAN)),
                    description=HOTEL_DESCRIPTIONS[hotel_type].format(name=name),
                    image_url=self._image_url(),
                    price_per_night=base_price + int(self._rng.random() * base_price),
                    rating=self._rating(),
                    review_count=self._rng.randint(25, 324),
                    amenities=[*BASE_HOTEL_AMENITIES, *HOTEL_AMENITIES[hotel_type]],
                    room_types=list(HOTEL_ROOM_TYPES[hotel_type]),
                    max_guests=self._rng.randint(2, 5),
                    contact_number=self._phone_number(),
                    # 90% of hotels show as bookable
                    available=self._rng.random() > 0.1,
                    distance_from_center=f"{self._rng.random() * 3 + 0.5:.2f}",
                )
            )

        return hotels

    def generate_restaurants(
        self,
        latitude: float,
        longitude: float,
        region: Region,
        count: int = DEFAULT_RESTAURANT_COUNT,
    ) -> List[NearbyRestaurant]:
        """Generate eateries within ±0.005° of the point."""
        vocabulary = REGIONAL_VOCABULARY[region]
        restaurants = []

        for _ in range(count):
            restaurant_type = self._rng.choice(list(RestaurantType))
            type_word = self._rng.choice(vocabulary.restaurant_types)
            name = f"{self._settlement()[:4]} {type_word}"

            base_cost = RESTAURANT_BASE_COSTS[restaurant_type]

            restaurants.append(
                NearbyRestaurant(
                    id=self._new_id(),
                    name=name,
                    type=restaurant_type,
                    latitude=str(self._jitter(latitude, RESTAURANT_JITTER_SPAN)),
                    longitude=str(self._jitter(longitude, RESTAURANT_JITTER_SPAN)),
                    description=RESTAURANT_DESCRIPTIONS[restaurant_type].format(name=name),
                    image_url=self._image_url(),
                    cuisine=[self._rng.choice(vocabulary.cuisines)],
                    specialties=list(vocabulary.local_dishes[:3]),
                    average_cost_for_two=base_cost + int(self._rng.random() * base_cost),
                    rating=self._rating(),
                    review_count=self._rng.randint(15, 214),
                    opening_hours=RESTAURANT_HOURS[restaurant_type],
                    vegan_friendly=self._rng.random() > 0.6,
                    local_favorite=self._rng.random() > 0.7,
                    must_try_dishes=list(vocabulary.local_dishes[:2]),
                    contact_number=self._phone_number(),
                )
            )

        return restaurants

    def generate_transportation(
        self,
        latitude: float,
        longitude: float,
        region: Region,
        count: int = DEFAULT_TRANSPORT_COUNT,
    ) -> List[TransportationOption]:
        """Generate transport options within ±0.004° of the point.

        Transport names come from fixed per-type templates, so ``region`` is not consulted.
        """
        options = []

        for _ in range(count):
            transport_type = self._rng.choice(list(TransportType))

            options.append(
                TransportationOption(
                    id=self._new_id(),
                    type=transport_type,
                    latitude=str(self._jitter(latitude, TRANSPORT_JITTER_SPAN)),
                    longitude=str(self._jitter(longitude, TRANSPORT_JITTER_SPAN)),
                    name=TRANSPORT_NAMES[transport_type],
                    description=TRANSPORT_DESCRIPTIONS[transport_type],
                    price_range=TRANSPORT_PRICE_RANGES[transport_type],
                    availability=TRANSPORT_AVAILABILITY[transport_type],
                    contact_info=(
                        None
                        if transport_type in TRANSPORT_WITHOUT_CONTACT
                        else self._phone_number()
                    ),
                    routes=list(TRANSPORT_ROUTES[transport_type]),
                    tips=list(TRANSPORT_TIPS[transport_type]),
                    booking_required=transport_type in TRANSPORT_BOOKING_REQUIRED,
                )
            )

        return options

    def generate_nearby_location_data(
        self, latitude: float, longitude: float, radius: float = 5
    ) -> LocationBundle:
        """Generate the full bundle shown for a map click.

        Args:
            latitude: Latitude of the clicked point, already checked with validate_coordinates
            longitude: Longitude of the clicked point
            radius: Search radius in km. Accepted for API compatibility; the jitter
                spans are fixed and do not depend on it.

        Returns:
            LocationBundle with address, the four entity lists and their counts
        """
        region = get_region(latitude, longitude)
        logger.debug(f"Generating location data for ({latitude}, {longitude}), radius={radius}km")

        location = self.generate_address(latitude, longitude)
        places = self.generate_places(latitude, longitude, region)
        hotels = self.generate_hotels(latitude, longitude, region)
        restaurants = self.generate_restaurants(latitude, longitude, region)
        transportation = self.generate_transportation(latitude, longitude, region)

        bundle = LocationBundle(
            location=location,
            places=places,
            hotels=hotels,
            restaurants=restaurants,
            transportation=transportation,
            total_results=TotalResults(
                places=len(places),
                hotels=len(hotels),
                restaurants=len(restaurants),
                transportation=len(transportation),
            ),
        )
        logger.info(
            f"Generated {bundle.total_count} locations near ({latitude}, {longitude}) "
            f"in the {region.value} region"
        )
        return bundle


def generate_nearby_location_data(
    latitude: float,
    longitude: float,
    radius: float = 5,
    generator: Optional[LocationDataGenerator] = None,
) -> LocationBundle:
    """Generate a bundle with a fresh unseeded generator unless one is given."""
    generator = generator or LocationDataGenerator()
    return generator.generate_nearby_location_data(latitude, longitude, radius)
