"""
Seed Script

Clears the catalog tables and image bucket, then loads sample categories,
customizations and menu items with their images.
Run from project root: python scripts/seed.py
"""

import argparse
import asyncio
import logging
import sys
from typing import Optional

from app.core.config import settings
from app.core.logging import setup_logging
from app.services.backend.client import BackendClient, BackendError
from app.services.seed.seeder import Seeder, SeedError, load_seed_data

logger = logging.getLogger("seed")


async def run(data_file: Optional[str], clear: bool) -> int:
    data = load_seed_data(data_file or settings.seed_data_file)
    client = BackendClient(settings)
    try:
        summary = await Seeder(client, settings).seed(data, clear=clear)
    except (BackendError, SeedError) as e:
        logger.error(f"Seeding failed: {e}")
        return 1
    finally:
        await client.close()

    print(
        f"Seeded {summary.categories} categories, "
        f"{summary.customizations} customizations, {summary.menu_items} menu items"
    )
    return 0


def main() -> None:
    parser = argparse.ArgumentParser(description="Seed the backend with sample data")
    parser.add_argument("--data", default=None, help="Path to a seed YAML file")
    parser.add_argument(
        "--no-clear",
        action="store_true",
        help="Keep existing rows and files instead of clearing them first",
    )
    args = parser.parse_args()

    setup_logging()
    sys.exit(asyncio.run(run(args.data, clear=not args.no_clear)))


if __name__ == "__main__":
    main()
