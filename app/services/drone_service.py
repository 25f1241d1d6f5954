from typing import Any

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.models.drone import Drone, DroneStatus


async def list_drones(db: AsyncSession) -> list[Drone]:
    result = await db.execute(select(Drone).order_by(Drone.created_at.desc(), Drone.id.desc()))
    return list(result.scalars().all())


async def list_active_drones(db: AsyncSession) -> list[Drone]:
    result = await db.execute(
        select(Drone).where(Drone.status == DroneStatus.active).order_by(Drone.id)
    )
    return list(result.scalars().all())


async def get_drone(db: AsyncSession, drone_id: int) -> Drone | None:
    result = await db.execute(select(Drone).where(Drone.id == drone_id))
    return result.scalar_one_or_none()


async def get_drone_by_serial(db: AsyncSession, serial: str) -> Drone | None:
    result = await db.execute(select(Drone).where(Drone.serial == serial))
    return result.scalar_one_or_none()


async def create_drone(db: AsyncSession, **fields: Any) -> Drone:
    if await get_drone_by_serial(db, fields["serial"]) is not None:
        raise ValueError(f"Drone serial '{fields['serial']}' already registered")
    drone = Drone(**fields)
    db.add(drone)
    await db.commit()
    await db.refresh(drone)
    return drone


async def update_drone(db: AsyncSession, drone: Drone, **changes: Any) -> Drone:
    new_serial = changes.get("serial")
    if new_serial is not None and new_serial != drone.serial:
        if await get_drone_by_serial(db, new_serial) is not None:
            raise ValueError(f"Drone serial '{new_serial}' already registered")
    for field, value in changes.items():
        setattr(drone, field, value)
    await db.commit()
    await db.refresh(drone)
    return drone


async def delete_drone(db: AsyncSession, drone: Drone) -> None:
    # Ducks keep their own snapshot of the drone, nothing cascades.
    await db.delete(drone)
    await db.commit()
