"""Synthesizes a randomly discovered duck for a scouting drone.

Every draw goes through the ``rng`` argument (a ``random.Random``), so a
seeded generator reproduces the same duck.  Nothing is persisted here; the
result is a storage-flat dict ready for ``Duck(**payload)``.
"""

import random
from datetime import datetime, timezone
from typing import Any, Optional, Sequence

from app.data.locations import REFERENCE_LOCATIONS
from app.data.superpowers import SUPERPOWER_CATALOG
from app.models.drone import Drone
from app.models.duck import HibernationStatus

GPS_JITTER_DEGREES = 0.05
SUPERPOWER_CHANCE = 0.7

HEIGHT_RANGE_CM = (60, 150)
WEIGHT_RANGE_G = (1800, 4500)
MAX_MUTATIONS = 24
PRECISION_RANGE_CM = (8, 25)

# Half-open heart rate ranges (bpm); awake ducks carry no reading
HEART_RATE_RANGES: dict[HibernationStatus, tuple[int, int]] = {
    HibernationStatus.trance: (40, 60),
    HibernationStatus.deep_hibernation: (5, 15),
}


class NoActiveDronesError(ValueError):
    """Raised when a duck search is requested but no drone is active."""

    def __init__(self) -> None:
        super().__init__("No active drones available")


def select_drone(
    active_drones: Sequence[Drone],
    drone_id: Optional[int] = None,
    rng: random.Random | None = None,
) -> Drone:
    """Pick the drone that performs the search.

    A requested drone_id missing from the active pool falls back to the first
    active drone rather than failing.
    """
    if not active_drones:
        raise NoActiveDronesError()
    if drone_id is not None:
        match = next((d for d in active_drones if d.id == drone_id), None)
        return match if match is not None else active_drones[0]
    _rand = rng or random
    return _rand.choice(list(active_drones))


def generate_random_duck(
    drone: Drone,
    rng: random.Random | None = None,
    now: datetime | None = None,
) -> dict[str, Any]:
    """Return a storage-flat payload for a freshly discovered, uncaptured duck."""
    _rand = rng or random
    now = now or datetime.now(timezone.utc)

    location = _rand.choice(REFERENCE_LOCATIONS)
    status = _rand.choice(list(HibernationStatus))

    height = _rand.randrange(*HEIGHT_RANGE_CM)
    weight = _rand.randrange(*WEIGHT_RANGE_G)
    mutations = _rand.randint(0, MAX_MUTATIONS)
    precision = _rand.randrange(*PRECISION_RANGE_CM)

    heart_rate = None
    if status in HEART_RATE_RANGES:
        heart_rate = _rand.randrange(*HEART_RATE_RANGES[status])

    superpower = None
    if _rand.random() < SUPERPOWER_CHANCE:
        superpower = _rand.choice(SUPERPOWER_CATALOG)

    serial = drone.serial or f"DR-{now.year}-{_rand.randrange(10000):04d}"

    return {
        "drone_serial": serial,
        "drone_brand": drone.brand,
        "drone_manufacturer": drone.manufacturer,
        "drone_country": drone.country,
        "height": height,
        "weight": weight,
        "location_city": location.city,
        "location_country": location.country,
        "gps_lat": location.lat + _rand.uniform(-GPS_JITTER_DEGREES, GPS_JITTER_DEGREES),
        "gps_lon": location.lon + _rand.uniform(-GPS_JITTER_DEGREES, GPS_JITTER_DEGREES),
        "precision": precision,
        "reference_point": location.reference_point,
        "status": status,
        "heart_rate": heart_rate,
        "mutations": mutations,
        "superpower_name": superpower.name if superpower else None,
        "superpower_description": superpower.description if superpower else None,
        "superpower_type": superpower.type if superpower else None,
        "superpower_rarity": superpower.rarity if superpower else None,
        "superpower_risk": superpower.risk if superpower else None,
        "is_captured": False,
        "captured_at": None,
    }
