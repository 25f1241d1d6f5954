from datetime import datetime
from typing import Optional

from pydantic import BaseModel, StrictBool, StrictFloat, StrictInt

from app.models.duck import HibernationStatus, SuperpowerRarity
from app.schemas.common import CamelModel


class DroneSnapshot(CamelModel):
    serial: str
    brand: str
    manufacturer: str
    country: str


class GpsPoint(CamelModel):
    lat: float
    lon: float


class DuckLocation(CamelModel):
    city: str
    country: str
    gps: GpsPoint
    precision: Optional[float] = None
    reference_point: Optional[str] = None


class SuperpowerClassification(CamelModel):
    type: str
    rarity: SuperpowerRarity
    risk: int


class Superpower(CamelModel):
    name: str
    description: str
    classification: SuperpowerClassification


class DuckResponse(CamelModel):
    """Display shape of a duck, as produced by duck_transformer.to_display."""

    id: str
    drone: DroneSnapshot
    height: float
    weight: float
    location: DuckLocation
    status: HibernationStatus
    heart_rate: Optional[int] = None
    mutations: int = 0
    superpower: Optional[Superpower] = None
    is_captured: bool = False
    captured_at: Optional[datetime] = None
    registered_at: Optional[datetime] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class DuckRecord(BaseModel):
    """Type check of a flat storage row before it is written.

    Numbers are strict: strings and fractional counts are rejected, not
    coerced.
    """

    model_config = {"extra": "ignore"}

    drone_serial: str
    drone_brand: str
    drone_manufacturer: str
    drone_country: str
    height: StrictFloat
    weight: StrictFloat
    location_city: str
    location_country: str
    gps_lat: StrictFloat
    gps_lon: StrictFloat
    precision: Optional[StrictFloat] = None
    reference_point: Optional[str] = None
    status: HibernationStatus = HibernationStatus.awake
    heart_rate: Optional[StrictInt] = None
    mutations: StrictInt = 0
    superpower_name: Optional[str] = None
    superpower_description: Optional[str] = None
    superpower_type: Optional[str] = None
    superpower_rarity: Optional[SuperpowerRarity] = None
    superpower_risk: Optional[StrictInt] = None
    is_captured: StrictBool = False
    captured_at: Optional[datetime] = None


class SearchRandomRequest(CamelModel):
    drone_id: Optional[int] = None


class DuckAnalysisResponse(CamelModel):
    id: Optional[str]
    distance_from_base_km: float
    operational_cost: float
    risk_level: int
    military_power_needed: int
    knowledge_gain: int
    genome_sequencing_cost: int


class DuckStatsResponse(CamelModel):
    total: int
    awake: int
    hibernating: int
    captured: int
    total_operational_cost: float
    average_risk: float
