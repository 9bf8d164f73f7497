"""
Database Seed Script

Loads menu items and reviews from a JSON file into the configured database.
Reviews have no write endpoint, so this is how they get there.

Run from project root: python scripts/seed.py [--file scripts/seed_data.json] [--replace]

Author: Khalil_Bannouri
Version: 4.0.0
"""

import argparse
import asyncio
import json
import os
import sys
from pathlib import Path

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from sqlalchemy import delete

from app.core.config import get_settings, setup_logging
from app.database import Database
from app.models import MenuItem, Review
from app.repositories import MenuRepository, ReviewRepository
from app.schemas import MenuItemCreate

DEFAULT_FILE = Path(__file__).with_name("seed_data.json")


async def seed(path: Path, replace: bool) -> dict[str, int]:
    """Insert every menu item and review found in ``path``."""
    data = json.loads(path.read_text(encoding="utf-8"))
    database = Database.from_settings(get_settings())
    await database.init_db()

    counts = {"menu": 0, "reviews": 0}
    try:
        async with database.session_maker() as session:
            if replace:
                await session.execute(delete(MenuItem))
                await session.execute(delete(Review))
                await session.commit()

            menu = MenuRepository(session)
            for raw in data.get("menu", []):
                item = MenuItemCreate(**raw)
                await menu.create(item.model_dump(), commit=False)
                counts["menu"] += 1

            reviews = ReviewRepository(session)
            for raw in data.get("reviews", []):
                await reviews.create(
                    {
                        "name": raw["name"],
                        "details": raw["details"],
                        "rating": float(raw["rating"]),
                        "image": raw.get("image"),
                    },
                    commit=False,
                )
                counts["reviews"] += 1

            await session.commit()
    finally:
        await database.dispose()

    return counts


def main() -> None:
    parser = argparse.ArgumentParser(description="Seed menu items and reviews")
    parser.add_argument("--file", type=Path, default=DEFAULT_FILE, help="JSON seed file")
    parser.add_argument("--replace", action="store_true", help="Delete existing menu and reviews first")
    args = parser.parse_args()

    setup_logging()

    print("=" * 60)
    print("🌱 DATABASE SEED")
    print("=" * 60)
    print(f"📄 File: {args.file}")

    counts = asyncio.run(seed(args.file, args.replace))

    print(f"✅ Menu items inserted: {counts['menu']}")
    print(f"✅ Reviews inserted: {counts['reviews']}")
    print("=" * 60)


if __name__ == "__main__":
    main()
