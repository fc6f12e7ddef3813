"""
Sample Data Generator for nearbyindia

This script generates location bundles for a fixed set of Indian cities in the same
format the get_nearby handler returns, so the map's default views can load stable
sample data. It offers options to:
1. Seed the generator so repeated runs produce identical files
2. Save the bundles to the content bucket under a /sample path
3. Save the bundles to local files instead (dry run)
"""

import argparse
import concurrent.futures
import logging
import os
import random
from typing import Dict, Optional

from dotenv import load_dotenv

from nearbyindia.models.location import LocationBundle
from nearbyindia.services.location_data import LocationDataGenerator
from nearbyindia.utils.aws import upload_to_s3
from nearbyindia.utils.geo_utils import validate_coordinates

# Load environment variables from .env file
load_dotenv()

logger = logging.getLogger(__name__)

# City centers used by the map's quick-jump buttons
CITY_COORDINATES = {
    "delhi": {"lat": 28.6139, "lng": 77.2090},
    "jaipur": {"lat": 26.9124, "lng": 75.7873},
    "srinagar": {"lat": 34.0837, "lng": 74.7973},
    "varanasi": {"lat": 25.3176, "lng": 82.9739},
    "mumbai": {"lat": 19.0760, "lng": 72.8777},
    "goa": {"lat": 15.4909, "lng": 73.8278},
    "kolkata": {"lat": 22.5726, "lng": 88.3639},
    "hyderabad": {"lat": 17.3850, "lng": 78.4867},
    "bengaluru": {"lat": 12.9716, "lng": 77.5946},
    "kochi": {"lat": 9.9312, "lng": 76.2673},
}

# Constants
SAMPLE_PATH_PREFIX = "sample"
DEFAULT_OUTPUT_DIR = "sample_data"
DEFAULT_SEED = 42
CONTENT_BUCKET = os.environ.get("CONTENT_BUCKET")
CLOUDFRONT_DOMAIN = os.environ.get("CLOUDFRONT_DOMAIN")


def generate_city_bundle(
    city_name: str, coordinates: Dict[str, float], seed: Optional[int] = DEFAULT_SEED
) -> LocationBundle:
    """
    Generate the location bundle for one city.

    Each city gets its own generator seeded from the run seed and the city name,
    so the output does not depend on which worker thread runs first.

    Args:
        city_name: Name of the city
        coordinates: Dictionary with lat and lng keys
        seed: Run seed, or None for unseeded output

    Returns:
        LocationBundle for the city center
    """
    rng = random.Random(f"{seed}:{city_name}") if seed is not None else random.Random()
    generator = LocationDataGenerator(rng)
    return generator.generate_nearby_location_data(coordinates["lat"], coordinates["lng"])


def save_to_local_file(city_name: str, bundle: LocationBundle, output_dir: str = DEFAULT_OUTPUT_DIR) -> bool:
    """
    Save a city's bundle to a local JSON file (dry-run mode).

    Args:
        city_name: Name of the city
        bundle: Bundle to write
        output_dir: Directory to write into, created if missing

    Returns:
        Boolean indicating success
    """
    try:
        os.makedirs(output_dir, exist_ok=True)
        file_path = os.path.join(output_dir, f"{city_name}.json")

        with open(file_path, "w", encoding="utf-8") as f:
            f.write(bundle.model_dump_json(by_alias=True, indent=2))

        logger.info(f"Saved sample data for {city_name} to {file_path}")
        return True
    except OSError as e:
        logger.error(f"Error saving sample data for {city_name}: {str(e)}")
        return False


def save_to_content_bucket(city_name: str, bundle: LocationBundle) -> bool:
    """
    Save a city's bundle to the content bucket under the sample path.

    Args:
        city_name: Name of the city
        bundle: Bundle to upload

    Returns:
        Boolean indicating success
    """
    if not CONTENT_BUCKET:
        logger.error("CONTENT_BUCKET environment variable not set")
        return False

    key = f"{SAMPLE_PATH_PREFIX}/{city_name}.json"
    uploaded = upload_to_s3(
        bucket_name=CONTENT_BUCKET,
        key=key,
        data=bundle.model_dump_json(by_alias=True, indent=2),
        content_type="application/json",
    )
    if not uploaded:
        return False

    if CLOUDFRONT_DOMAIN:
        logger.info(f"Sample data available at: https://{CLOUDFRONT_DOMAIN}/{key}")

    logger.info(f"Saved sample data for {city_name} to s3://{CONTENT_BUCKET}/{key}")
    return True


def process_city(
    city_name: str,
    coordinates: Dict[str, float],
    seed: Optional[int] = DEFAULT_SEED,
    dry_run: bool = False,
    output_dir: str = DEFAULT_OUTPUT_DIR,
) -> Dict:
    """
    Generate and save the bundle for one city.

    Returns:
        Dictionary with results
    """
    result = {"city": city_name, "locations_count": 0, "saved": False}

    if not validate_coordinates(coordinates["lat"], coordinates["lng"]):
        logger.warning(f"Skipping {city_name}: coordinates are outside India")
        return result

    bundle = generate_city_bundle(city_name, coordinates, seed)
    result["locations_count"] = bundle.total_count

    if dry_run:
        result["saved"] = save_to_local_file(city_name, bundle, output_dir)
    else:
        result["saved"] = save_to_content_bucket(city_name, bundle)

    return result


def main(argv=None):
    logging.basicConfig(level=logging.INFO, format="%(asctime)s - %(name)s - %(levelname)s - %(message)s")

    parser = argparse.ArgumentParser(description="Generate sample location data for nearbyindia")
    parser.add_argument("--cities", nargs="+", help="Specific cities to generate data for (default: all)")
    parser.add_argument("--seed", type=int, default=DEFAULT_SEED, help="Seed for repeatable output")
    parser.add_argument("--unseeded", action="store_true", help="Ignore --seed and generate fresh data")
    parser.add_argument("--dry-run", action="store_true", help="Save to local files instead of S3 bucket")
    parser.add_argument("--output-dir", default=DEFAULT_OUTPUT_DIR, help="Directory for --dry-run output")

    args = parser.parse_args(argv)

    cities_to_process = args.cities if args.cities else list(CITY_COORDINATES.keys())
    seed = None if args.unseeded else args.seed

    logger.info(f"Generating sample data for cities: {', '.join(cities_to_process)}")

    all_results = []

    with concurrent.futures.ThreadPoolExecutor(max_workers=5) as executor:
        future_to_city = {}

        for city_name in cities_to_process:
            if city_name not in CITY_COORDINATES:
                logger.warning(f"City {city_name} not found in CITY_COORDINATES")
                continue

            future = executor.submit(
                process_city,
                city_name,
                CITY_COORDINATES[city_name],
                seed,
                args.dry_run,
                args.output_dir,
            )
            future_to_city[city_name] = future

        for city, future in future_to_city.items():
            try:
                result = future.result()
                all_results.append(result)
                logger.info(f"Completed {city}: {result['locations_count']} locations")
            except Exception as e:
                logger.error(f"Error processing {city}: {str(e)}")

    logger.info("=== SUMMARY ===")
    logger.info(f"Total cities processed: {len(all_results)}")
    logger.info(f"Total locations generated: {sum(r['locations_count'] for r in all_results)}")
    saved = sum(1 for r in all_results if r["saved"])
    if args.dry_run:
        logger.info(f"Cities saved to local files: {saved}")
        logger.info(f"Output directory: {os.path.abspath(args.output_dir)}")
    else:
        logger.info(f"Cities saved to S3 bucket: {saved}")

    return all_results


if __name__ == "__main__":
    main()
