#!/usr/bin/env python
"""Run all tests and code quality checks."""
import subprocess
import sys

CHECKED_PATHS = "src tests scripts"


def run_command(command, description):
    """Run a command and print its output."""
    print(f"\n\n{'=' * 80}")
    print(f"Running {description}...")
    print(f"{'=' * 80}\n")

    result = subprocess.run(command, shell=True, capture_output=True, text=True)
    print(result.stdout)

    if result.stderr:
        print("Errors:")
        print(result.stderr)

    return result.returncode == 0


def main():
    """Run all tests and code quality checks."""
    checks = [
        (f"black --check {CHECKED_PATHS}", "black code style check"),
        (f"isort --check-only --profile black {CHECKED_PATHS}", "isort import order check"),
        (f"flake8 --max-line-length 110 {CHECKED_PATHS}", "flake8 code style check"),
        ("pytest", "pytest tests"),
    ]

    # Run every check even after a failure so all problems are reported at once
    results = [run_command(command, description) for command, description in checks]

    if not all(results):
        print("\n\nSome checks failed. Please fix the issues before committing.")
        sys.exit(1)
    else:
        print("\n\nAll checks passed!")


if __name__ == "__main__":
    main()
