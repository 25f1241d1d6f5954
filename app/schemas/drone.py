from datetime import datetime
from typing import Optional

from pydantic import Field

from app.models.drone import DroneStatus
from app.schemas.common import CamelModel


class DroneCreate(CamelModel):
    serial: str = Field(min_length=1)
    brand: str = Field(min_length=1)
    manufacturer: str = Field(min_length=1)
    country: str = Field(min_length=1)
    model: Optional[str] = None
    status: DroneStatus = DroneStatus.active
    notes: Optional[str] = None


class DroneUpdate(CamelModel):
    serial: Optional[str] = Field(default=None, min_length=1)
    brand: Optional[str] = Field(default=None, min_length=1)
    manufacturer: Optional[str] = Field(default=None, min_length=1)
    country: Optional[str] = Field(default=None, min_length=1)
    model: Optional[str] = None
    status: Optional[DroneStatus] = None
    notes: Optional[str] = None


class DroneResponse(CamelModel):
    id: int
    serial: str
    brand: str
    manufacturer: str
    country: str
    model: Optional[str]
    status: DroneStatus
    notes: Optional[str]
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class DroneStatsResponse(CamelModel):
    total: int
    active: int
    inactive: int
    maintenance: int
