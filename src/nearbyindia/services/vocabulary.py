"""Static word lists and per-category lookup tables used by the location generator.

Everything here is read-only. Category tables are keyed by the category enums
and cover every member, which tests/services/test_vocabulary.py checks.
"""

from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping, Tuple

from ..models.location import HotelType, PlaceType, Region, RestaurantType, TransportType


@dataclass(frozen=True)
class RegionalVocabulary:
    """Word lists for one region"""

    states: Tuple[str, ...]
    place_suffixes: Tuple[str, ...]
    hotel_prefixes: Tuple[str, ...]
    restaurant_types: Tuple[str, ...]
    local_dishes: Tuple[str, ...]
    cuisines: Tuple[str, ...]


REGIONAL_VOCABULARY: Mapping[Region, RegionalVocabulary] = MappingProxyType(
    {
        Region.NORTH: RegionalVocabulary(
            states=(
                "Punjab",
                "Haryana",
                "Himachal Pradesh",
                "Uttarakhand",
                "Uttar Pradesh",
                "Rajasthan",
                "Delhi",
            ),
            place_suffixes=("Ghat", "Mandir", "Fort", "Palace", "Garden", "Bazaar", "Gate", "Chowk"),
            hotel_prefixes=("Hotel", "Royal", "Heritage", "Palace", "Grand", "The", "Crown"),
            restaurant_types=("Dhaba", "Restaurant", "Punjabi", "Tandoor", "Mughlai"),
            local_dishes=(
                "Dal Makhani",
                "Butter Chicken",
                "Naan",
                "Paratha",
                "Lassi",
                "Chole Bhature",
                "Rajma",
            ),
            cuisines=("North Indian", "Punjabi", "Mughlai", "Tandoor", "Chinese", "Continental"),
        ),
        Region.SOUTH: RegionalVocabulary(
            states=("Tamil Nadu", "Karnataka", "Kerala", "Andhra Pradesh", "Telangana"),
            place_suffixes=("Temple", "Kovil", "Palace", "Beach", "Hills", "Falls", "Backwaters"),
            hotel_prefixes=("Hotel", "Resort", "Beach", "Heritage", "The", "Royal", "Paradise"),
            restaurant_types=("Restaurant", "Mess", "Hotel", "Udupi", "Chettinad"),
            local_dishes=(
                "Dosa",
                "Idli",
                "Sambar",
                "Rasam",
                "Biryani",
                "Fish Curry",
                "Payasam",
                "Uttapam",
            ),
            cuisines=(
                "South Indian",
                "Tamil",
                "Kerala",
                "Udupi",
                "Chettinad",
                "Andhra",
                "Hyderabadi",
            ),
        ),
        Region.EAST: RegionalVocabulary(
            states=("West Bengal", "Odisha", "Jharkhand", "Bihar", "Assam", "Tripura"),
            place_suffixes=("Kali Mandir", "Ghat", "Bazaar", "Museum", "Park", "Bridge"),
            hotel_prefixes=("Hotel", "The", "Royal", "Heritage", "Bengal", "Eastern"),
            restaurant_types=("Restaurant", "Bengali", "Fish", "Sweet Shop"),
            local_dishes=(
                "Fish Curry",
                "Rice",
                "Mishti Doi",
                "Rosogolla",
                "Sandesh",
                "Hilsa",
                "Panta Bhat",
            ),
            cuisines=("Bengali", "Odia", "Assamese", "Chinese", "Mughlai"),
        ),
        Region.WEST: RegionalVocabulary(
            states=("Maharashtra", "Gujarat", "Goa", "Rajasthan"),
            place_suffixes=("Beach", "Fort", "Market", "Temple", "Gardens", "Chowpatty"),
            hotel_prefixes=("Hotel", "Beach", "Sea", "Heritage", "The", "Royal", "Taj"),
            restaurant_types=("Restaurant", "Gujarati", "Maharashtrian", "Goan", "Seafood"),
            local_dishes=(
                "Vada Pav",
                "Pav Bhaji",
                "Dhokla",
                "Thali",
                "Fish Curry",
                "Modak",
                "Puran Poli",
            ),
            cuisines=(
                "Gujarati",
                "Maharashtrian",
                "Goan",
                "Rajasthani",
                "Street Food",
                "Seafood",
            ),
        ),
    }
)

# Settlement names shared by every region
SETTLEMENT_NAMES: Tuple[str, ...] = (
    "Anandpur",
    "Suryapur",
    "Shantinagar",
    "Ramgarh",
    "Kamalpura",
    "Mayurbhanj",
    "Chandanpur",
    "Sukhdevpur",
    "Narsinghpur",
    "Rajendranagar",
    "Krishnapura",
    "Govindpur",
    "Balarampur",
    "Shivapur",
    "Ganeshnagar",
    "Lakshmipur",
    "Saraswatipur",
    "Hanumangarh",
    "Bhimpur",
)

LOCAL_NAME_PREFIXES: Mapping[Region, Tuple[str, ...]] = MappingProxyType(
    {
        Region.NORTH: ("श्री", "गुरु", "राजा"),
        Region.SOUTH: ("श्री", "स्वामी", "राजा"),
        Region.EAST: ("श्री", "महा", "बाबा"),
        Region.WEST: ("श्री", "छत्रपति", "राजा"),
    }
)

# Places

PLACE_DESCRIPTIONS: Mapping[PlaceType, str] = MappingProxyType(
    {
        PlaceType.TEMPLE: (
            "Ancient {name} is a revered spiritual site known for its stunning architecture "
            "and peaceful atmosphere. Daily prayers and festivals attract devotees from "
            "across the region."
        ),
        PlaceType.MONUMENT: (
            "Historic {name} stands as a testament to India's rich heritage, featuring "
            "intricate carvings and remarkable craftsmanship from centuries past."
        ),
        PlaceType.PARK: (
            "Beautiful {name} offers a serene escape with lush greenery, walking trails, "
            "and scenic spots perfect for families and nature lovers."
        ),
        PlaceType.MARKET: (
            "Bustling {name} is the heart of local commerce, offering everything from "
            "traditional handicrafts to fresh produce and local delicacies."
        ),
        PlaceType.VIEWPOINT: (
            "Scenic {name} provides breathtaking panoramic views of the surrounding "
            "landscape, especially during sunrise and sunset."
        ),
        PlaceType.MUSEUM: (
            "Fascinating {name} showcases regional history, art, and culture through "
            "carefully curated exhibits and artifacts."
        ),
        PlaceType.FORT: (
            "Majestic {name} is a well-preserved fortress that offers insights into "
            "India's military history and architectural brilliance."
        ),
        PlaceType.PALACE: (
            "Grand {name} exemplifies royal architecture with ornate decorations, "
            "sprawling courtyards, and historical significance."
        ),
    }
)

PLACE_OPENING_HOURS: Mapping[PlaceType, str] = MappingProxyType(
    {
        PlaceType.TEMPLE: "5:00 AM - 8:00 PM",
        PlaceType.MONUMENT: "9:00 AM - 6:00 PM",
        PlaceType.PARK: "6:00 AM - 7:00 PM",
        PlaceType.MARKET: "8:00 AM - 10:00 PM",
        PlaceType.VIEWPOINT: "24 Hours",
        PlaceType.MUSEUM: "10:00 AM - 5:00 PM",
        PlaceType.FORT: "9:00 AM - 6:00 PM",
        PlaceType.PALACE: "9:00 AM - 5:00 PM",
    }
)

PLACE_FEATURES: Mapping[PlaceType, Tuple[str, ...]] = MappingProxyType(
    {
        PlaceType.TEMPLE: (
            "Ancient Architecture",
            "Daily Prayers",
            "Festival Celebrations",
            "Peaceful Environment",
        ),
        PlaceType.MONUMENT: (
            "Historical Significance",
            "Architectural Marvel",
            "Photo Opportunities",
            "Guided Tours",
        ),
        PlaceType.PARK: ("Nature Trails", "Family Friendly", "Picnic Areas", "Bird Watching"),
        PlaceType.MARKET: ("Local Products", "Bargaining", "Street Food", "Cultural Experience"),
        PlaceType.VIEWPOINT: (
            "Panoramic Views",
            "Sunset Point",
            "Photography",
            "Peaceful Atmosphere",
        ),
        PlaceType.MUSEUM: (
            "Historical Artifacts",
            "Educational",
            "Guided Tours",
            "Cultural Learning",
        ),
        PlaceType.FORT: ("Historical Tours", "Architecture", "Panoramic Views", "Cultural Heritage"),
        PlaceType.PALACE: (
            "Royal Architecture",
            "Historical Tours",
            "Art Collections",
            "Cultural Heritage",
        ),
    }
)

_ANYTIME = "Anytime during operating hours"

PLACE_BEST_TIME: Mapping[PlaceType, str] = MappingProxyType(
    {
        PlaceType.TEMPLE: "Early morning for peaceful prayers",
        PlaceType.MONUMENT: _ANYTIME,
        PlaceType.PARK: _ANYTIME,
        PlaceType.MARKET: "Evening hours when most active",
        PlaceType.VIEWPOINT: "Early morning or evening for best views",
        PlaceType.MUSEUM: _ANYTIME,
        PlaceType.FORT: _ANYTIME,
        PlaceType.PALACE: _ANYTIME,
    }
)

_LANDMARK_SIGNIFICANCE = (
    "An important cultural landmark that reflects the heritage and traditions of the region."
)

PLACE_CULTURAL_SIGNIFICANCE: Mapping[PlaceType, str] = MappingProxyType(
    {
        PlaceType.TEMPLE: (
            "This sacred site holds deep spiritual significance for the local community "
            "and has been a center of worship for centuries."
        ),
        PlaceType.MONUMENT: (
            "A testament to the architectural and cultural achievements of ancient "
            "Indian civilizations."
        ),
        PlaceType.PARK: _LANDMARK_SIGNIFICANCE,
        PlaceType.MARKET: (
            "Traditional trading center that has preserved local commerce and cultural practices."
        ),
        PlaceType.VIEWPOINT: _LANDMARK_SIGNIFICANCE,
        PlaceType.MUSEUM: _LANDMARK_SIGNIFICANCE,
        PlaceType.FORT: (
            "Represents the military heritage and strategic importance of the region "
            "throughout history."
        ),
        PlaceType.PALACE: (
            "Showcases the royal lifestyle and artistic patronage of former rulers."
        ),
    }
)

# Hotels

HOTEL_DESCRIPTIONS: Mapping[HotelType, str] = MappingProxyType(
    {
        HotelType.HOTEL: (
            "Comfortable {name} offers modern amenities and excellent service in the heart "
            "of the city. Popular among both business and leisure travelers."
        ),
        HotelType.GUESTHOUSE: (
            "Cozy {name} provides a homely atmosphere with personalized service and local "
            "hospitality. Perfect for budget-conscious travelers."
        ),
        HotelType.RESORT: (
            "Luxurious {name} features world-class facilities, spa services, and "
            "recreational activities in a stunning natural setting."
        ),
        HotelType.HOMESTAY: (
            "Authentic {name} offers an intimate experience of local culture and "
            "traditional hospitality with home-cooked meals."
        ),
        HotelType.LODGE: (
            "Simple yet comfortable {name} provides basic amenities and clean "
            "accommodations for travelers seeking budget-friendly options."
        ),
    }
)

BASE_HOTEL_AMENITIES: Tuple[str, ...] = ("Free Wi-Fi", "24/7 Front Desk", "Room Service")

HOTEL_AMENITIES: Mapping[HotelType, Tuple[str, ...]] = MappingProxyType(
    {
        HotelType.RESORT: ("Swimming Pool", "Spa", "Restaurant", "Gym", "Conference Hall"),
        HotelType.HOTEL: ("Restaurant", "Business Center", "Parking", "Laundry"),
        HotelType.HOMESTAY: ("Home-cooked Meals", "Local Tours", "Cultural Activities"),
        HotelType.GUESTHOUSE: ("Common Kitchen", "Travel Assistance", "Luggage Storage"),
        HotelType.LODGE: ("Basic Amenities", "Shared Facilities", "Budget Friendly"),
    }
)

HOTEL_ROOM_TYPES: Mapping[HotelType, Tuple[str, ...]] = MappingProxyType(
    {
        HotelType.RESORT: ("Deluxe Room", "Suite", "Villa", "Premium Room"),
        HotelType.HOTEL: ("Standard Room", "Deluxe Room", "Executive Room"),
        HotelType.HOMESTAY: ("Private Room", "Shared Room", "Family Room"),
        HotelType.GUESTHOUSE: ("Single Room", "Double Room", "Dormitory"),
        HotelType.LODGE: ("Basic Room", "Shared Room"),
    }
)

# Nightly price in rupees before the random markup
HOTEL_BASE_PRICES: Mapping[HotelType, int] = MappingProxyType(
    {
        HotelType.RESORT: 3000,
        HotelType.HOTEL: 1500,
        HotelType.HOMESTAY: 800,
        HotelType.GUESTHOUSE: 1200,
        HotelType.LODGE: 1200,
    }
)

HOTEL_NAME_SUFFIXES: Mapping[HotelType, str] = MappingProxyType(
    {
        HotelType.HOTEL: "",
        HotelType.GUESTHOUSE: "",
        HotelType.RESORT: " Resort",
        HotelType.HOMESTAY: " Homestay",
        HotelType.LODGE: "",
    }
)

# Restaurants

RESTAURANT_DESCRIPTIONS: Mapping[RestaurantType, str] = MappingProxyType(
    {
        RestaurantType.RESTAURANT: (
            "Popular {name} serves authentic regional cuisine in a comfortable setting "
            "with excellent service and traditional recipes."
        ),
        RestaurantType.DHABA: (
            "Traditional {name} offers hearty, home-style cooking popular with locals and "
            "truckers. Known for generous portions and authentic flavors."
        ),
        RestaurantType.STREET_FOOD: (
            "Famous {name} stall serves delicious street food favorites that locals have "
            "been enjoying for generations."
        ),
        RestaurantType.CAFE: (
            "Trendy {name} provides a relaxed atmosphere perfect for coffee, light meals, "
            "and socializing with friends."
        ),
        RestaurantType.SWEET_SHOP: (
            "Renowned {name} specializes in traditional sweets and snacks, using "
            "time-honored recipes and quality ingredients."
        ),
        RestaurantType.LOCAL_EATERY: (
            "Beloved {name} is a neighborhood favorite known for fresh ingredients, "
            "reasonable prices, and friendly service."
        ),
    }
)

RESTAURANT_HOURS: Mapping[RestaurantType, str] = MappingProxyType(
    {
        RestaurantType.STREET_FOOD: "6:00 PM - 11:00 PM",
        RestaurantType.DHABA: "24 Hours",
        RestaurantType.CAFE: "8:00 AM - 10:00 PM",
        RestaurantType.SWEET_SHOP: "9:00 AM - 9:00 PM",
        RestaurantType.RESTAURANT: "11:00 AM - 11:00 PM",
        RestaurantType.LOCAL_EATERY: "7:00 AM - 10:00 PM",
    }
)

# Average cost for two in rupees before the random markup
RESTAURANT_BASE_COSTS: Mapping[RestaurantType, int] = MappingProxyType(
    {
        RestaurantType.STREET_FOOD: 200,
        RestaurantType.DHABA: 400,
        RestaurantType.CAFE: 600,
        RestaurantType.SWEET_SHOP: 800,
        RestaurantType.RESTAURANT: 800,
        RestaurantType.LOCAL_EATERY: 800,
    }
)

# Transportation

TRANSPORT_NAMES: Mapping[TransportType, str] = MappingProxyType(
    {
        TransportType.AUTO_RICKSHAW: "Local Auto Stand",
        TransportType.TAXI: "City Taxi Service",
        TransportType.BUS: "Regional Bus Stop",
        TransportType.LOCAL_TRANSPORT: "Local Transport Hub",
        TransportType.BIKE_RENTAL: "Bike Rental Center",
    }
)

TRANSPORT_DESCRIPTIONS: Mapping[TransportType, str] = MappingProxyType(
    {
        TransportType.AUTO_RICKSHAW: (
            "Convenient three-wheeler service for short to medium distance travel within the city."
        ),
        TransportType.TAXI: (
            "Comfortable car service for city tours and longer distances with experienced drivers."
        ),
        TransportType.BUS: (
            "Public transportation connecting to various parts of the city and nearby areas."
        ),
        TransportType.LOCAL_TRANSPORT: (
            "Local transportation hub offering various options for getting around the area."
        ),
        TransportType.BIKE_RENTAL: (
            "Self-drive bike rental service for exploring the area at your own pace."
        ),
    }
)

TRANSPORT_PRICE_RANGES: Mapping[TransportType, str] = MappingProxyType(
    {
        TransportType.AUTO_RICKSHAW: "₹10-15 per km",
        TransportType.TAXI: "₹500-800 for city tour",
        TransportType.BUS: "₹5-20 per trip",
        TransportType.LOCAL_TRANSPORT: "₹10-50 per trip",
        TransportType.BIKE_RENTAL: "₹300-500 per day",
    }
)

TRANSPORT_AVAILABILITY: Mapping[TransportType, str] = MappingProxyType(
    {
        TransportType.AUTO_RICKSHAW: "6:00 AM - 11:00 PM",
        TransportType.TAXI: "24/7",
        TransportType.BUS: "5:00 AM - 10:00 PM",
        TransportType.LOCAL_TRANSPORT: "6:00 AM - 9:00 PM",
        TransportType.BIKE_RENTAL: "8:00 AM - 8:00 PM",
    }
)

TRANSPORT_ROUTES: Mapping[TransportType, Tuple[str, ...]] = MappingProxyType(
    {
        TransportType.AUTO_RICKSHAW: ("City Center", "Railway Station", "Bus Stand", "Market Area"),
        TransportType.TAXI: ("Airport", "Railway Station", "Tourist Places", "Hotels"),
        TransportType.BUS: ("City Center", "Outskirts", "Nearby Towns", "Transport Hub"),
        TransportType.LOCAL_TRANSPORT: ("Local Areas", "Nearby Villages", "Market", "Schools"),
        TransportType.BIKE_RENTAL: ("City Tour", "Nearby Attractions", "Scenic Routes"),
    }
)

TRANSPORT_TIPS: Mapping[TransportType, Tuple[str, ...]] = MappingProxyType(
    {
        TransportType.AUTO_RICKSHAW: (
            "Always ask for meter rate",
            "Negotiate fare beforehand",
            "Keep exact change",
        ),
        TransportType.TAXI: (
            "Book through reliable operators",
            "Confirm rate before starting",
            "Ask for local driver recommendations",
        ),
        TransportType.BUS: ("Check schedule in advance", "Keep exact change", "Validate ticket"),
        TransportType.LOCAL_TRANSPORT: (
            "Ask locals for best routes",
            "Be prepared for delays",
            "Keep small denominations",
        ),
        TransportType.BIKE_RENTAL: (
            "Check bike condition",
            "Carry license",
            "Follow traffic rules",
            "Wear helmet",
        ),
    }
)

TRANSPORT_BOOKING_REQUIRED = frozenset({TransportType.TAXI, TransportType.BIKE_RENTAL})
TRANSPORT_WITHOUT_CONTACT = frozenset({TransportType.BUS})
