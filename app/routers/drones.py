"""Plain CRUD over the scouting drone fleet."""

from fastapi import APIRouter, Depends, HTTPException, Response, status
from sqlalchemy.ext.asyncio import AsyncSession

from app.database import get_db
from app.models.drone import Drone
from app.schemas.drone import DroneCreate, DroneResponse, DroneStatsResponse, DroneUpdate
from app.services.analytics import summarize_drones
from app.services.drone_service import (
    create_drone,
    delete_drone,
    get_drone,
    list_drones,
    update_drone,
)

router = APIRouter(prefix="/api/drones", tags=["drones"])


async def _get_drone_or_404(db: AsyncSession, drone_id: int) -> Drone:
    drone = await get_drone(db, drone_id)
    if drone is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Drone not found")
    return drone


@router.get("", response_model=list[DroneResponse])
async def get_drones(db: AsyncSession = Depends(get_db)):
    return await list_drones(db)


@router.get("/stats", response_model=DroneStatsResponse)
async def get_drone_stats(db: AsyncSession = Depends(get_db)):
    drones = await list_drones(db)
    return summarize_drones({"status": d.status.value} for d in drones)


@router.post("", response_model=DroneResponse, status_code=status.HTTP_201_CREATED)
async def create_new_drone(body: DroneCreate, db: AsyncSession = Depends(get_db)):
    try:
        return await create_drone(db, **body.model_dump())
    except ValueError as exc:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(exc)) from exc


@router.get("/{drone_id}", response_model=DroneResponse)
async def get_drone_info(drone_id: int, db: AsyncSession = Depends(get_db)):
    return await _get_drone_or_404(db, drone_id)


@router.put("/{drone_id}", response_model=DroneResponse)
async def update_existing_drone(
    drone_id: int, body: DroneUpdate, db: AsyncSession = Depends(get_db)
):
    drone = await _get_drone_or_404(db, drone_id)
    try:
        return await update_drone(db, drone, **body.model_dump(exclude_unset=True))
    except ValueError as exc:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(exc)) from exc


@router.delete("/{drone_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_existing_drone(drone_id: int, db: AsyncSession = Depends(get_db)):
    drone = await _get_drone_or_404(db, drone_id)
    await delete_drone(db, drone)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
