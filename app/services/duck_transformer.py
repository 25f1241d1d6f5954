"""Maps ducks between the nested display shape and the flat storage row.

Display shape (API / client boundary):
  {id, drone{serial, brand, manufacturer, country}, height, weight,
   location{city, country, gps{lat, lon}, precision, referencePoint},
   status, heartRate, mutations,
   superpower{name, description, classification{type, rarity, risk}} | null,
   isCaptured, capturedAt, registeredAt, createdAt, updatedAt}

Storage shape: the flat column names of app.models.duck.Duck.

Inbound payloads may mix the two: every storage column is resolved through an
ordered rule (nested path, then flat camelCase alias, then default) and the
first non-empty value wins.  Empty means None or "".
"""

import time
from dataclasses import dataclass
from datetime import datetime, timezone
from enum import Enum
from typing import Any, Callable, Mapping, Optional, Union

from pydantic import ValidationError

from app.models.duck import HibernationStatus, SuperpowerRarity
from app.schemas.duck import DuckRecord

UNKNOWN = "Unknown"

SUPERPOWER_COLUMNS = (
    "superpower_name",
    "superpower_description",
    "superpower_type",
    "superpower_rarity",
    "superpower_risk",
)

REQUIRED_COLUMNS = (
    "drone_serial",
    "drone_brand",
    "drone_manufacturer",
    "drone_country",
    "height",
    "weight",
    "location_city",
    "location_country",
    "gps_lat",
    "gps_lon",
)


def fallback_drone_serial() -> str:
    """Serial used when a payload carries no drone serial at all."""
    return f"DR-{int(time.time() * 1000)}"


@dataclass(frozen=True)
class FieldRule:
    column: str
    nested: tuple[str, ...]
    flat: Optional[str] = None
    default: Union[Any, Callable[[], Any]] = None

    def resolve(self, data: Mapping[str, Any]) -> tuple[Any, bool]:
        """Return (value, supplied); supplied is False when the default was used."""
        value = _lookup(data, self.nested)
        if not _is_empty(value):
            return value, True
        if self.flat is not None:
            value = data.get(self.flat)
            if not _is_empty(value):
                return value, True
        default = self.default() if callable(self.default) else self.default
        return default, False


FIELD_RULES: list[FieldRule] = [
    FieldRule("drone_serial", ("drone", "serial"), "droneSerial", fallback_drone_serial),
    FieldRule("drone_brand", ("drone", "brand"), "droneBrand", UNKNOWN),
    FieldRule("drone_manufacturer", ("drone", "manufacturer"), "droneManufacturer", UNKNOWN),
    FieldRule("drone_country", ("drone", "country"), "droneCountry", UNKNOWN),
    FieldRule("height", ("height",)),
    FieldRule("weight", ("weight",)),
    FieldRule("location_city", ("location", "city"), "locationCity", UNKNOWN),
    FieldRule("location_country", ("location", "country"), "locationCountry", UNKNOWN),
    FieldRule("gps_lat", ("location", "gps", "lat"), "gpsLat", 0),
    FieldRule("gps_lon", ("location", "gps", "lon"), "gpsLon", 0),
    FieldRule("precision", ("location", "precision"), "precision"),
    FieldRule("reference_point", ("location", "referencePoint"), "referencePoint"),
    FieldRule("status", ("status",), None, HibernationStatus.awake),
    FieldRule("heart_rate", ("heartRate",)),
    FieldRule("mutations", ("mutations",), None, 0),
]

SUPERPOWER_RULES: list[FieldRule] = [
    FieldRule("superpower_name", ("superpower", "name"), "superpowerName"),
    FieldRule("superpower_description", ("superpower", "description"), "superpowerDescription"),
    FieldRule("superpower_type", ("superpower", "classification", "type"), "superpowerType"),
    FieldRule("superpower_rarity", ("superpower", "classification", "rarity"), "superpowerRarity"),
    FieldRule("superpower_risk", ("superpower", "classification", "risk"), "superpowerRisk"),
]


def _is_empty(value: Any) -> bool:
    return value is None or (isinstance(value, str) and value == "")


def _lookup(data: Mapping[str, Any], path: tuple[str, ...]) -> Any:
    node: Any = data
    for key in path:
        if not isinstance(node, Mapping):
            return None
        node = node.get(key)
    return node


def _field(row: Any, name: str) -> Any:
    if isinstance(row, Mapping):
        return row.get(name)
    return getattr(row, name, None)


def _plain(value: Any) -> Any:
    return value.value if isinstance(value, Enum) else value


def _coerce_enum(enum_cls: type[Enum], value: Any, label: str) -> Any:
    if value is None or isinstance(value, enum_cls):
        return value
    try:
        return enum_cls(value)
    except ValueError:
        allowed = ", ".join(member.value for member in enum_cls)
        raise ValueError(f"Invalid {label} '{value}' (expected one of: {allowed})") from None


def _parse_timestamp(value: Any) -> Optional[datetime]:
    if value is None or isinstance(value, datetime):
        return value
    if isinstance(value, str):
        try:
            return datetime.fromisoformat(value.replace("Z", "+00:00"))
        except ValueError:
            raise ValueError(f"Invalid timestamp '{value}'") from None
    raise ValueError(f"Invalid timestamp {value!r}")


# ---------------------------------------------------------------------------
# Storage -> display
# ---------------------------------------------------------------------------

def to_display(row: Any) -> dict[str, Any]:
    """Build the nested display shape from a Duck row (ORM object or mapping)."""
    duck_id = _field(row, "id")
    superpower = None
    if _field(row, "superpower_name") is not None:
        superpower = {
            "name": _field(row, "superpower_name"),
            "description": _field(row, "superpower_description"),
            "classification": {
                "type": _field(row, "superpower_type"),
                "rarity": _plain(_field(row, "superpower_rarity")),
                "risk": _field(row, "superpower_risk"),
            },
        }

    return {
        "id": str(duck_id) if duck_id is not None else None,
        "drone": {
            "serial": _field(row, "drone_serial"),
            "brand": _field(row, "drone_brand"),
            "manufacturer": _field(row, "drone_manufacturer"),
            "country": _field(row, "drone_country"),
        },
        "height": _field(row, "height"),
        "weight": _field(row, "weight"),
        "location": {
            "city": _field(row, "location_city"),
            "country": _field(row, "location_country"),
            "gps": {
                "lat": _field(row, "gps_lat"),
                "lon": _field(row, "gps_lon"),
            },
            "precision": _field(row, "precision"),
            "referencePoint": _field(row, "reference_point"),
        },
        "status": _plain(_field(row, "status")),
        "heartRate": _field(row, "heart_rate"),
        "mutations": _field(row, "mutations") or 0,
        "superpower": superpower,
        "isCaptured": bool(_field(row, "is_captured") or False),
        "capturedAt": _field(row, "captured_at"),
        "registeredAt": _field(row, "registered_at"),
        "createdAt": _field(row, "created_at"),
        "updatedAt": _field(row, "updated_at"),
    }


# ---------------------------------------------------------------------------
# Display (or flat, or mixed) -> storage
# ---------------------------------------------------------------------------

def _mentions_superpower(data: Mapping[str, Any]) -> bool:
    return "superpower" in data or any(
        rule.flat in data for rule in SUPERPOWER_RULES
    )


def _resolve_superpower(data: Mapping[str, Any]) -> dict[str, Any]:
    values = {rule.column: rule.resolve(data)[0] for rule in SUPERPOWER_RULES}
    if _is_empty(values["superpower_name"]):
        return {column: None for column in SUPERPOWER_COLUMNS}
    values["superpower_rarity"] = _coerce_enum(
        SuperpowerRarity, values["superpower_rarity"], "superpower rarity"
    )
    return values


def _resolve_capture(data: Mapping[str, Any]) -> dict[str, Any]:
    is_captured = data.get("isCaptured")
    if is_captured is None:
        is_captured = False
    elif not isinstance(is_captured, bool):
        raise ValueError(f"isCaptured must be true or false, got {is_captured!r}")
    captured_at = _parse_timestamp(data.get("capturedAt")) if is_captured else None
    if is_captured and captured_at is None:
        captured_at = datetime.now(timezone.utc)
    return {"is_captured": is_captured, "captured_at": captured_at}


def to_storage(data: Mapping[str, Any], partial: bool = False) -> dict[str, Any]:
    """Flatten a display-shape (or flat, or mixed) payload into Duck columns.

    With partial=False every column is present, unresolved ones defaulted.
    With partial=True only columns the payload actually supplies are returned,
    so the result can be merged onto an existing row.

    The superpower columns are resolved as one unit: all five are emitted
    together whenever the payload mentions a superpower (or always, when not
    partial).  Capture columns are emitted only when the payload names
    ``isCaptured``.
    """
    row: dict[str, Any] = {}
    for rule in FIELD_RULES:
        value, supplied = rule.resolve(data)
        if partial and not supplied:
            continue
        row[rule.column] = value

    if "status" in row:
        row["status"] = _coerce_enum(HibernationStatus, row["status"], "status")

    if not partial or _mentions_superpower(data):
        row.update(_resolve_superpower(data))

    if "isCaptured" in data:
        row.update(_resolve_capture(data))

    return row


def validate_storage_row(row: Mapping[str, Any]) -> None:
    """Check a complete storage row before it is written.

    Raises ValueError describing the first violated constraint.
    """
    missing = [column for column in REQUIRED_COLUMNS if _is_empty(row.get(column))]
    if missing:
        raise ValueError(f"Missing required duck fields: {', '.join(missing)}")

    try:
        DuckRecord.model_validate(dict(row))
    except ValidationError as exc:
        problems = "; ".join(
            f"{'.'.join(str(part) for part in error['loc'])}: {error['msg']}"
            for error in exc.errors()
        )
        raise ValueError(f"Invalid duck field types: {problems}") from None

    mutations = row.get("mutations") or 0
    if mutations < 0:
        raise ValueError("mutations must be a non-negative integer")

    present = [row.get(column) is not None for column in SUPERPOWER_COLUMNS]
    if any(present) and not all(present):
        raise ValueError(
            "Superpower requires name, description, type, rarity and risk together"
        )
    risk = row.get("superpower_risk")
    if risk is not None and not 0 <= risk <= 100:
        raise ValueError("Superpower risk must be between 0 and 100")

    if bool(row.get("is_captured")) != (row.get("captured_at") is not None):
        raise ValueError("capturedAt must be set if and only if the duck is captured")
