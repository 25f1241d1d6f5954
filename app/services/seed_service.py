import logging

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from app.data.sample_records import sample_drones, sample_ducks
from app.models.drone import Drone
from app.models.duck import Duck

logger = logging.getLogger(__name__)


async def _count(db: AsyncSession, model: type) -> int:
    result = await db.execute(select(func.count()).select_from(model))
    return result.scalar_one()


async def seed_drones(db: AsyncSession) -> int:
    """Insert the sample drones into an empty table; returns rows created."""
    existing = await _count(db, Drone)
    if existing:
        logger.info("Database already has %d drones, skipping drone seed", existing)
        return 0
    drones = [Drone(**fields) for fields in sample_drones()]
    db.add_all(drones)
    await db.commit()
    logger.info("Seeded %d drones", len(drones))
    return len(drones)


async def seed_ducks(db: AsyncSession) -> int:
    """Insert the sample ducks into an empty table; returns rows created."""
    existing = await _count(db, Duck)
    if existing:
        logger.info("Database contains %d ducks, skipping duck seed", existing)
        return 0
    ducks = [Duck(**fields) for fields in sample_ducks()]
    db.add_all(ducks)
    await db.commit()
    logger.info("Seeded %d ducks", len(ducks))
    return len(ducks)
