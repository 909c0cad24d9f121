#!/usr/bin/env python3
"""
Catalog Validation Script

Loads a university catalog file with the same rules the API applies at
startup and prints its statistics. Use it before shipping a new data file.

Usage:
    python -m scripts.validate_catalog                       # Packaged catalog
    python -m scripts.validate_catalog --path data/new.json  # Another file
"""

import argparse
import logging
import sys

# Add parent directory to path for imports
from pathlib import Path
sys.path.insert(0, str(Path(__file__).parent.parent))

from unicompare.config.settings import settings
from unicompare.domain.services import UniversityService
from unicompare.infrastructure.catalog import load_catalog
from unicompare.infrastructure.exceptions import CatalogError

logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)


def validate(path: Path) -> int:
    """Return a process exit code: 0 valid, 1 invalid."""
    try:
        catalog = load_catalog(path)
    except CatalogError as e:
        logger.error(f"Invalid catalog: {e.message} {e.details}")
        if e.original_error:
            logger.error(str(e.original_error))
        return 1

    stats = UniversityService(catalog).get_statistics()
    options = catalog.filter_options

    print("\n=== Catalog OK ===")
    print(f"Universities: {stats.total_universities}")
    print(f"Countries: {stats.countries} ({', '.join(options.countries)})")
    print(f"Cities: {len(options.cities)}")
    print(f"Programs: {len(options.programs)}")
    print(f"Unranked: {sum(1 for u in catalog if u.ranking is None)}")
    print(f"Average tuition: {stats.avg_tuition_fee}")
    print("Top ranked:")
    for university in stats.top_ranked:
        print(f"  #{university.ranking} {university.name}")
    return 0


def main():
    parser = argparse.ArgumentParser(description="Validate a university catalog file")
    parser.add_argument(
        "--path",
        type=Path,
        default=settings.resolved_catalog_path,
        help="Catalog JSON file (default: configured catalog)"
    )
    args = parser.parse_args()
    sys.exit(validate(args.path))


if __name__ == "__main__":
    main()
