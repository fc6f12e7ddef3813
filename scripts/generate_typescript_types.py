#!/usr/bin/env python3
"""
Generate TypeScript types from the Pydantic models for the map frontend.
This script leverages pydantic-to-typescript so the frontend interfaces for
the nearby locations API stay in step with the backend models.

Usage:
    python scripts/generate_typescript_types.py [--output path/to/api-types.ts]
"""

import argparse
import os
import sys
from pathlib import Path

from pydantic2ts import generate_typescript_defs

script_dir = Path(__file__).resolve().parent
backend_dir = script_dir.parent

# Frontend checkouts we know about, relative to the backend
FRONTEND_DIR_CANDIDATES = [
    backend_dir.parent / "nearbyindia-frontend",
    backend_dir.parent / "client",
]


def find_frontend_dir():
    """Return the first frontend checkout that exists, or None."""
    for dir_path in FRONTEND_DIR_CANDIDATES:
        if dir_path.exists() and dir_path.is_dir():
            return dir_path
    return None


def main():
    """Generate TypeScript definitions from Pydantic models."""
    parser = argparse.ArgumentParser(description="Generate TypeScript types from Pydantic models")
    parser.add_argument("--output", "-o", help="Output file path")
    parser.add_argument("--module", "-m", default="nearbyindia.models.api",
                        help="Python module containing Pydantic models (default: nearbyindia.models.api)")
    args = parser.parse_args()

    if args.output:
        output_file = Path(args.output)
        output_dir = output_file.parent
    else:
        frontend_dir = find_frontend_dir()

        if frontend_dir:
            output_dir = frontend_dir / "src" / "types"
            print(f"Frontend directory detected: {frontend_dir}")
        else:
            output_dir = Path.cwd()
            print("Frontend directory not found. Using current directory.")
        output_file = output_dir / "nearby-api-types.ts"

    os.makedirs(output_dir, exist_ok=True)

    try:
        print(f"Generating TypeScript types from module: {args.module}")
        print(f"Output file: {output_file}")

        generate_typescript_defs(
            args.module,
            str(output_file),
            json2ts_cmd="json2ts"
        )

        print(f"TypeScript definitions generated successfully at {output_file}")
    except Exception as e:
        print(f"Error generating TypeScript definitions: {e}")
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
