"""Duck CRUD, capture, random search and analytics endpoints."""

import logging
import random
from typing import Any, Optional

from fastapi import APIRouter, Body, Depends, HTTPException, Response, status
from sqlalchemy.ext.asyncio import AsyncSession

from app.database import get_db
from app.dependencies import get_rng
from app.models.duck import Duck
from app.schemas.duck import (
    DuckAnalysisResponse,
    DuckResponse,
    DuckStatsResponse,
    SearchRandomRequest,
)
from app.services.analytics import analyze_duck, summarize_ducks
from app.services.duck_generator import NoActiveDronesError
from app.services.duck_service import (
    capture_duck,
    create_duck,
    delete_duck,
    display_ducks,
    get_duck,
    list_captured_ducks,
    list_ducks,
    search_random_duck,
    update_duck,
)
from app.services.duck_transformer import to_display

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/ducks", tags=["ducks"])


async def _get_duck_or_404(db: AsyncSession, duck_id: int) -> Duck:
    duck = await get_duck(db, duck_id)
    if duck is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Duck not found")
    return duck


@router.get("", response_model=list[DuckResponse])
async def get_ducks(db: AsyncSession = Depends(get_db)):
    """All ducks, most recently registered first."""
    return display_ducks(await list_ducks(db))


@router.get("/stats", response_model=DuckStatsResponse)
async def get_duck_stats(db: AsyncSession = Depends(get_db)):
    return summarize_ducks(display_ducks(await list_ducks(db)))


@router.get("/list/captured", response_model=list[DuckResponse])
async def get_captured_ducks(db: AsyncSession = Depends(get_db)):
    """Captured ducks, most recently captured first."""
    return display_ducks(await list_captured_ducks(db))


@router.post("/search-random", response_model=DuckResponse, status_code=status.HTTP_201_CREATED)
async def search_random(
    body: Optional[SearchRandomRequest] = None,
    db: AsyncSession = Depends(get_db),
    rng: random.Random = Depends(get_rng),
):
    drone_id = body.drone_id if body is not None else None
    try:
        duck = await search_random_duck(db, drone_id=drone_id, rng=rng)
    except NoActiveDronesError as exc:
        logger.warning("Random duck search refused: %s", exc)
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc
    return to_display(duck)


@router.post("", response_model=DuckResponse, status_code=status.HTTP_201_CREATED)
async def create_new_duck(
    body: dict[str, Any] = Body(...),
    db: AsyncSession = Depends(get_db),
):
    """Register a duck from a nested, flat or mixed payload."""
    try:
        duck = await create_duck(db, body)
    except ValueError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc
    return to_display(duck)


@router.get("/{duck_id}", response_model=DuckResponse)
async def get_duck_info(duck_id: int, db: AsyncSession = Depends(get_db)):
    return to_display(await _get_duck_or_404(db, duck_id))


@router.get("/{duck_id}/analysis", response_model=DuckAnalysisResponse)
async def get_duck_analysis(duck_id: int, db: AsyncSession = Depends(get_db)):
    """Mission figures for one duck: cost, risk, firepower, knowledge, sequencing."""
    duck = await _get_duck_or_404(db, duck_id)
    return analyze_duck(to_display(duck))


@router.put("/{duck_id}", response_model=DuckResponse)
async def update_existing_duck(
    duck_id: int,
    body: dict[str, Any] = Body(...),
    db: AsyncSession = Depends(get_db),
):
    duck = await _get_duck_or_404(db, duck_id)
    try:
        duck = await update_duck(db, duck, body)
    except ValueError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc
    return to_display(duck)


@router.delete("/{duck_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_existing_duck(duck_id: int, db: AsyncSession = Depends(get_db)):
    duck = await _get_duck_or_404(db, duck_id)
    await delete_duck(db, duck)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.patch("/{duck_id}/capture", response_model=DuckResponse)
async def capture(duck_id: int, db: AsyncSession = Depends(get_db)):
    duck = await _get_duck_or_404(db, duck_id)
    return to_display(await capture_duck(db, duck))
