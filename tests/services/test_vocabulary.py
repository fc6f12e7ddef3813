"""Unit tests for the vocabulary and category lookup tables."""

import pytest

from nearbyindia.models.location import HotelType, PlaceType, Region, RestaurantType, TransportType
from nearbyindia.services import vocabulary


@pytest.mark.parametrize(
    "table,enum",
    [
        (vocabulary.REGIONAL_VOCABULARY, Region),
        (vocabulary.LOCAL_NAME_PREFIXES, Region),
        (vocabulary.PLACE_DESCRIPTIONS, PlaceType),
        (vocabulary.PLACE_OPENING_HOURS, PlaceType),
        (vocabulary.PLACE_FEATURES, PlaceType),
        (vocabulary.PLACE_BEST_TIME, PlaceType),
        (vocabulary.PLACE_CULTURAL_SIGNIFICANCE, PlaceType),
        (vocabulary.HOTEL_DESCRIPTIONS, HotelType),
        (vocabulary.HOTEL_AMENITIES, HotelType),
        (vocabulary.HOTEL_ROOM_TYPES, HotelType),
        (vocabulary.HOTEL_BASE_PRICES, HotelType),
        (vocabulary.HOTEL_NAME_SUFFIXES, HotelType),
        (vocabulary.RESTAURANT_DESCRIPTIONS, RestaurantType),
        (vocabulary.RESTAURANT_HOURS, RestaurantType),
        (vocabulary.RESTAURANT_BASE_COSTS, RestaurantType),
        (vocabulary.TRANSPORT_NAMES, TransportType),
        (vocabulary.TRANSPORT_DESCRIPTIONS, TransportType),
        (vocabulary.TRANSPORT_PRICE_RANGES, TransportType),
        (vocabulary.TRANSPORT_AVAILABILITY, TransportType),
        (vocabulary.TRANSPORT_ROUTES, TransportType),
        (vocabulary.TRANSPORT_TIPS, TransportType),
    ],
)
def test_tables_cover_every_category(table, enum):
    """Every category must have an entry, so the generators never need a fallback."""
    assert set(table.keys()) == set(enum)


@pytest.mark.parametrize("region", list(Region))
def test_regional_word_lists_are_populated(region):
    words = vocabulary.REGIONAL_VOCABULARY[region]
    assert words.states
    assert words.place_suffixes
    assert words.hotel_prefixes
    assert words.restaurant_types
    assert len(words.local_dishes) >= 3
    assert words.cuisines


def test_tables_are_read_only():
    with pytest.raises(TypeError):
        vocabulary.REGIONAL_VOCABULARY[Region.NORTH] = None
    with pytest.raises(TypeError):
        vocabulary.HOTEL_BASE_PRICES[HotelType.RESORT] = 1


def test_description_templates_take_a_name():
    for table in (
        vocabulary.PLACE_DESCRIPTIONS,
        vocabulary.HOTEL_DESCRIPTIONS,
        vocabulary.RESTAURANT_DESCRIPTIONS,
    ):
        for template in table.values():
            assert "Test Name" in template.format(name="Test Name")
