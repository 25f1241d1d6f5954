import enum
from datetime import datetime, timezone
from typing import Optional

from sqlalchemy import Boolean, DateTime, Enum, Float, Integer, String, Text, func
from sqlalchemy.orm import Mapped, mapped_column

from app.models.base import Base


class HibernationStatus(str, enum.Enum):
    awake = "awake"
    trance = "trance"
    deep_hibernation = "deep-hibernation"


class SuperpowerRarity(str, enum.Enum):
    common = "common"
    uncommon = "uncommon"
    rare = "rare"
    epic = "epic"
    legendary = "legendary"


def _enum_values(enum_cls: type[enum.Enum]) -> list[str]:
    return [member.value for member in enum_cls]


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Duck(Base):
    __tablename__ = "ducks"

    id: Mapped[int] = mapped_column(primary_key=True, index=True)

    # Snapshot of the discovering drone, copied at creation time
    drone_serial: Mapped[str] = mapped_column(String(100), nullable=False, index=True)
    drone_brand: Mapped[str] = mapped_column(String(255), nullable=False)
    drone_manufacturer: Mapped[str] = mapped_column(String(255), nullable=False)
    drone_country: Mapped[str] = mapped_column(String(255), nullable=False)

    height: Mapped[float] = mapped_column(Float, nullable=False)  # cm
    weight: Mapped[float] = mapped_column(Float, nullable=False)  # g

    location_city: Mapped[str] = mapped_column(String(255), nullable=False)
    location_country: Mapped[str] = mapped_column(String(255), nullable=False)
    gps_lat: Mapped[float] = mapped_column(Float, nullable=False)
    gps_lon: Mapped[float] = mapped_column(Float, nullable=False)
    precision: Mapped[Optional[float]] = mapped_column(Float, nullable=True, default=None)  # cm
    reference_point: Mapped[Optional[str]] = mapped_column(String(255), nullable=True, default=None)

    status: Mapped[HibernationStatus] = mapped_column(
        Enum(HibernationStatus, values_callable=_enum_values),
        nullable=False,
        default=HibernationStatus.awake,
    )
    heart_rate: Mapped[Optional[int]] = mapped_column(Integer, nullable=True, default=None)  # bpm
    mutations: Mapped[int] = mapped_column(Integer, nullable=False, default=0)

    superpower_name: Mapped[Optional[str]] = mapped_column(String(255), nullable=True, default=None)
    superpower_description: Mapped[Optional[str]] = mapped_column(Text, nullable=True, default=None)
    superpower_type: Mapped[Optional[str]] = mapped_column(String(100), nullable=True, default=None)
    superpower_rarity: Mapped[Optional[SuperpowerRarity]] = mapped_column(
        Enum(SuperpowerRarity, values_callable=_enum_values), nullable=True, default=None
    )
    superpower_risk: Mapped[Optional[int]] = mapped_column(Integer, nullable=True, default=None)

    is_captured: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False, index=True)
    captured_at: Mapped[Optional[datetime]] = mapped_column(
        DateTime(timezone=True), nullable=True, default=None
    )

    registered_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=_utcnow, index=True
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), nullable=False
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), onupdate=func.now(), nullable=False
    )
