import logging
import os
import random
from functools import lru_cache
from typing import Optional

from ..services.location_data import LocationDataGenerator

logger = logging.getLogger(__name__)


def get_location_data_seed() -> Optional[int]:
    """Read the optional LOCATION_DATA_SEED environment variable.

    Returns:
        The seed as an int, or None when unset or not a valid integer
    """
    seed = os.environ.get("LOCATION_DATA_SEED")
    if not seed:
        return None

    try:
        return int(seed)
    except ValueError:
        logger.warning(f"Ignoring non-integer LOCATION_DATA_SEED: {seed}")
        return None


@lru_cache
def get_location_data_generator() -> LocationDataGenerator:
    """Get a cached location data generator.

    Returns a single instance for the lifetime of the Lambda container. When
    LOCATION_DATA_SEED is set the generator is seeded, which makes responses
    repeatable across cold starts.
    """
    seed = get_location_data_seed()
    if seed is not None:
        logger.info(f"Seeding location data generator with {seed}")
    return LocationDataGenerator(random.Random(seed))
