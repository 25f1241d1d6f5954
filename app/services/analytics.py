"""Pure analytics functions over display-shape ducks.

Nothing here touches the database.  Inputs are the nested dicts produced by
duck_transformer.to_display (or the same shape coming back from the API).
"""

import math
from typing import Any, Iterable, Mapping, Optional

EARTH_RADIUS_KM = 6371

# Field operations base; every cost estimate is measured from here.
BASE_POINT = {"lat": -15.7942, "lon": -47.8822}

BASE_OPERATION_COST = 100
COST_PER_KM = 0.5

MIN_MILITARY_POWER = 50
RARITY_POWER_BONUS: dict[str, int] = {
    "legendary": 500,
    "rare": 200,
    "epic": 100,
}

KNOWLEDGE_PER_MUTATION = 50
DEEP_HIBERNATION_KNOWLEDGE = 30
SEQUENCING_COST_PER_MUTATION = 2500

GRAMS_PER_POUND = 453.592
CM_PER_FOOT = 30.48
CM_PER_INCH = 2.54
CM_PER_YARD = 91.44


# ---------------------------------------------------------------------------
# Geometry
# ---------------------------------------------------------------------------

def great_circle_distance_km(
    a: Optional[Mapping[str, Any]], b: Optional[Mapping[str, Any]]
) -> float:
    """Haversine distance in km; 0 when either point or any coordinate is missing."""
    if not a or not b:
        return 0
    coords = (a.get("lat"), a.get("lon"), b.get("lat"), b.get("lon"))
    if any(c is None for c in coords):
        return 0
    lat1, lon1, lat2, lon2 = (math.radians(c) for c in coords)
    dlat = lat2 - lat1
    dlon = lon2 - lon1
    h = math.sin(dlat / 2) ** 2 + math.cos(lat1) * math.cos(lat2) * math.sin(dlon / 2) ** 2
    return EARTH_RADIUS_KM * 2 * math.atan2(math.sqrt(h), math.sqrt(1 - h))


def _gps(duck: Mapping[str, Any]) -> Optional[Mapping[str, Any]]:
    location = duck.get("location") or {}
    return location.get("gps")


def _classification(duck: Mapping[str, Any]) -> Mapping[str, Any]:
    superpower = duck.get("superpower") or {}
    return superpower.get("classification") or {}


# ---------------------------------------------------------------------------
# Per-duck metrics
# ---------------------------------------------------------------------------

def distance_from_base_km(duck: Mapping[str, Any]) -> float:
    return great_circle_distance_km(BASE_POINT, _gps(duck))


def operational_cost(duck: Mapping[str, Any]) -> float:
    """Capture cost: base fee + $1/m of height + $1/kg of weight + $0.5/km travelled."""
    height = duck.get("height")
    weight = duck.get("weight")
    if not height or not weight:
        return 0
    return (
        BASE_OPERATION_COST
        + height / 100
        + weight / 1000
        + distance_from_base_km(duck) * COST_PER_KM
    )


def risk_level(duck: Mapping[str, Any]) -> int:
    """Danger score in [0, 100].

    A classified superpower dictates the risk outright.  Otherwise it is
    derived from the hibernation status, with a racing heart making a
    trance more dangerous.
    """
    if not duck.get("status"):
        return 0

    risk = _classification(duck).get("risk")
    if risk is None:
        risk = duck.get("superpowerRisk")
    if risk is not None:
        return risk

    status = duck["status"]
    score = 0
    if status == "awake":
        score = 25
    elif status == "trance":
        score = 15
        heart_rate = duck.get("heartRate") or 0
        if heart_rate > 60:
            score += 10
        if heart_rate > 100:
            score += 15
    elif status == "deep-hibernation":
        score = 5
    return max(0, min(score, 100))


def military_power_needed(duck: Mapping[str, Any]) -> int:
    weight_kg = (duck.get("weight") or 0) / 1000
    height_m = (duck.get("height") or 0) / 100
    power = math.floor(risk_level(duck) * 2 + weight_kg / 100 + height_m * 10)

    if duck.get("superpower"):
        rarity = _classification(duck).get("rarity") or "common"
        power += RARITY_POWER_BONUS.get(rarity, 0)

    return max(power, MIN_MILITARY_POWER)


def knowledge_gain(duck: Mapping[str, Any]) -> int:
    bonus = DEEP_HIBERNATION_KNOWLEDGE if duck.get("status") == "deep-hibernation" else 0
    return (duck.get("mutations") or 0) * KNOWLEDGE_PER_MUTATION + bonus


def genome_sequencing_cost(duck: Mapping[str, Any]) -> int:
    return (duck.get("mutations") or 0) * SEQUENCING_COST_PER_MUTATION


def analyze_duck(duck: Mapping[str, Any]) -> dict[str, Any]:
    return {
        "id": duck.get("id"),
        "distanceFromBaseKm": distance_from_base_km(duck),
        "operationalCost": operational_cost(duck),
        "riskLevel": risk_level(duck),
        "militaryPowerNeeded": military_power_needed(duck),
        "knowledgeGain": knowledge_gain(duck),
        "genomeSequencingCost": genome_sequencing_cost(duck),
    }


# ---------------------------------------------------------------------------
# Aggregates
# ---------------------------------------------------------------------------

def summarize_ducks(ducks: Iterable[Mapping[str, Any]]) -> dict[str, Any]:
    ducks = list(ducks)
    total = len(ducks)
    return {
        "total": total,
        "awake": sum(1 for d in ducks if d.get("status") == "awake"),
        "hibernating": sum(1 for d in ducks if d.get("status") == "deep-hibernation"),
        "captured": sum(1 for d in ducks if d.get("isCaptured")),
        "totalOperationalCost": sum(operational_cost(d) for d in ducks),
        "averageRisk": sum(risk_level(d) for d in ducks) / total if total else 0,
    }


def summarize_drones(drones: Iterable[Mapping[str, Any]]) -> dict[str, int]:
    statuses = [d.get("status") for d in drones]
    return {
        "total": len(statuses),
        "active": statuses.count("active"),
        "inactive": statuses.count("inactive"),
        "maintenance": statuses.count("maintenance"),
    }


# ---------------------------------------------------------------------------
# Unit conversions
# ---------------------------------------------------------------------------

def grams_to_pounds(grams: float) -> float:
    return grams / GRAMS_PER_POUND


def pounds_to_grams(pounds: float) -> float:
    return pounds * GRAMS_PER_POUND


def cm_to_feet(cm: float) -> float:
    return cm / CM_PER_FOOT


def feet_to_cm(feet: float) -> float:
    return feet * CM_PER_FOOT


def cm_to_inches(cm: float) -> float:
    return cm / CM_PER_INCH


def inches_to_cm(inches: float) -> float:
    return inches * CM_PER_INCH


def cm_to_yards(cm: float) -> float:
    return cm / CM_PER_YARD


def yards_to_cm(yards: float) -> float:
    return yards * CM_PER_YARD
