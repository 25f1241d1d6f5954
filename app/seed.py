"""Create the tables and load the sample drones and ducks.

Usage: python -m app.seed
"""

import asyncio
import logging

from app.database import AsyncSessionLocal, create_tables, engine
from app.main import configure_logging
from app.services.seed_service import seed_drones, seed_ducks

logger = logging.getLogger(__name__)


async def main() -> None:
    await create_tables()
    async with AsyncSessionLocal() as db:
        drones = await seed_drones(db)
        ducks = await seed_ducks(db)
    await engine.dispose()
    logger.info("Seed complete: %d drones, %d ducks created", drones, ducks)


if __name__ == "__main__":
    configure_logging()
    asyncio.run(main())
