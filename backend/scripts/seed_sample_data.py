"""Seed the configured store with the sample catalogue (database backend).

Idempotent: records that already exist are left alone.
"""
import asyncio
import logging
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))

from app.infra.seed import seed_sample_data
from app.infra.storage import build_repositories
from app.settings import settings


async def main() -> None:
    repos = build_repositories(settings)
    try:
        await repos.init_schema()
        await seed_sample_data(repos, currency=settings.default_currency)
        products = await repos.products.list_all()
        print(f"Seeded {repos.backend} storage: {len(products)} products")
    finally:
        await repos.close()


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    asyncio.run(main())
