"""Lifecycle of duck records on top of the record store.

Responsibilities:
  - CRUD for ducks, accepting nested, flat or mixed payloads
  - Capturing a duck (last write wins on repeated captures)
  - Searching for a random duck with one of the active drones
"""

import logging
import random
from datetime import datetime, timezone
from typing import Any, Mapping, Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.models.duck import Duck
from app.services.drone_service import list_active_drones
from app.services.duck_generator import generate_random_duck, select_drone
from app.services.duck_transformer import to_display, to_storage, validate_storage_row

logger = logging.getLogger(__name__)


async def list_ducks(db: AsyncSession) -> list[Duck]:
    result = await db.execute(select(Duck).order_by(Duck.registered_at.desc(), Duck.id.desc()))
    return list(result.scalars().all())


async def list_captured_ducks(db: AsyncSession) -> list[Duck]:
    result = await db.execute(
        select(Duck)
        .where(Duck.is_captured.is_(True))
        .order_by(Duck.captured_at.desc(), Duck.id.desc())
    )
    return list(result.scalars().all())


async def get_duck(db: AsyncSession, duck_id: int) -> Duck | None:
    result = await db.execute(select(Duck).where(Duck.id == duck_id))
    return result.scalar_one_or_none()


async def _insert(db: AsyncSession, row: dict[str, Any]) -> Duck:
    validate_storage_row(row)
    duck = Duck(**row)
    db.add(duck)
    await db.commit()
    await db.refresh(duck)
    return duck


async def create_duck(db: AsyncSession, payload: Mapping[str, Any]) -> Duck:
    """Create a duck from a nested, flat or mixed payload.

    Raises ValueError when the resolved row violates a duck constraint.
    """
    duck = await _insert(db, to_storage(payload))
    logger.info("Registered duck %s (drone %s)", duck.id, duck.drone_serial)
    return duck


async def update_duck(db: AsyncSession, duck: Duck, payload: Mapping[str, Any]) -> Duck:
    """Apply the fields a payload supplies on top of the stored duck.

    The merged row is validated as a whole before anything is written.
    """
    changes = to_storage(payload, partial=True)
    merged = {column: getattr(duck, column) for column in Duck.__table__.columns.keys()}
    merged.update(changes)
    validate_storage_row(merged)

    for column, value in changes.items():
        setattr(duck, column, value)
    await db.commit()
    await db.refresh(duck)
    return duck


async def delete_duck(db: AsyncSession, duck: Duck) -> None:
    await db.delete(duck)
    await db.commit()


async def capture_duck(db: AsyncSession, duck: Duck) -> Duck:
    """Mark the duck captured.  Capturing again refreshes captured_at."""
    duck.is_captured = True
    duck.captured_at = datetime.now(timezone.utc)
    await db.commit()
    await db.refresh(duck)
    logger.info("Captured duck %s", duck.id)
    return duck


async def search_random_duck(
    db: AsyncSession,
    drone_id: Optional[int] = None,
    rng: random.Random | None = None,
) -> Duck:
    """Send an active drone out and register whatever duck it finds.

    Raises NoActiveDronesError (a ValueError) before writing anything when
    the active pool is empty.
    """
    active = await list_active_drones(db)
    drone = select_drone(active, drone_id, rng)
    duck = await _insert(db, generate_random_duck(drone, rng))
    logger.info("Drone %s found duck %s in %s", drone.serial, duck.id, duck.location_city)
    return duck


def display_ducks(ducks: list[Duck]) -> list[dict[str, Any]]:
    return [to_display(duck) for duck in ducks]
