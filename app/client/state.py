"""Client-side state containers mirroring the ducks and drones lists.

Each container owns its list and talks to the API through an injected
``httpx.AsyncClient``.  Duck writes degrade gracefully: when the API call
fails the container applies the change locally so the UI keeps working.
Drone writes propagate the failure to the caller.
"""

import logging
import time
import uuid
from datetime import datetime, timezone
from typing import Any, Optional

import httpx

from app.services.analytics import operational_cost, risk_level

logger = logging.getLogger(__name__)


def _same_id(a: Any, b: Any) -> bool:
    return str(a) == str(b)


def _local_id() -> str:
    return f"{int(time.time() * 1000)}{uuid.uuid4().hex[:6]}"


def _now_iso() -> str:
    return datetime.now(timezone.utc).isoformat()


class DuckState:
    def __init__(self, http: httpx.AsyncClient, base_path: str = "/api/ducks") -> None:
        self._http = http
        self._base = base_path
        self.ducks: list[dict[str, Any]] = []

    # -- loading ------------------------------------------------------------

    async def load_ducks(self) -> list[dict[str, Any]]:
        try:
            response = await self._http.get(self._base)
            response.raise_for_status()
            data = response.json()
            self.ducks = data if isinstance(data, list) else []
        except httpx.HTTPError as exc:
            logger.error("Error loading ducks: %s", exc)
            self.ducks = []
        return self.ducks

    async def load_captured_ducks(self) -> list[dict[str, Any]]:
        """Fetch captured ducks without touching the cached list."""
        try:
            response = await self._http.get(f"{self._base}/list/captured")
            response.raise_for_status()
            data = response.json()
        except httpx.HTTPError as exc:
            logger.error("Error loading captured ducks: %s", exc)
            return []
        return data if isinstance(data, list) else []

    # -- writes ---------------------------------------------------------------

    def _index_of(self, duck_id: Any) -> Optional[int]:
        return next((i for i, d in enumerate(self.ducks) if _same_id(d.get("id"), duck_id)), None)

    async def add_duck(self, duck: dict[str, Any]) -> str:
        """Create a duck and return its id (a local id if the API is unreachable)."""
        try:
            response = await self._http.post(self._base, json=duck)
            response.raise_for_status()
        except httpx.HTTPError as exc:
            logger.error("Error adding duck, keeping it locally: %s", exc)
            local = {"id": _local_id(), **duck, "registeredAt": _now_iso()}
            self.ducks.append(local)
            return local["id"]
        created = response.json()
        self.ducks.append(created)
        return created["id"]

    async def update_duck(self, duck_id: Any, data: dict[str, Any]) -> None:
        try:
            response = await self._http.put(f"{self._base}/{duck_id}", json=data)
            response.raise_for_status()
        except httpx.HTTPError as exc:
            logger.error("Error updating duck %s, applying locally: %s", duck_id, exc)
            index = self._index_of(duck_id)
            if index is not None:
                self.ducks[index] = {**self.ducks[index], **data}
            return
        index = self._index_of(duck_id)
        if index is not None:
            self.ducks[index] = response.json()

    async def delete_duck(self, duck_id: Any) -> None:
        try:
            response = await self._http.delete(f"{self._base}/{duck_id}")
            response.raise_for_status()
        except httpx.HTTPError as exc:
            logger.error("Error deleting duck %s, removing locally: %s", duck_id, exc)
        index = self._index_of(duck_id)
        if index is not None:
            del self.ducks[index]

    async def mark_as_captured(self, duck_id: Any) -> Optional[dict[str, Any]]:
        index = self._index_of(duck_id)
        try:
            response = await self._http.patch(f"{self._base}/{duck_id}/capture")
            response.raise_for_status()
        except httpx.HTTPError as exc:
            logger.error("Error capturing duck %s, capturing locally: %s", duck_id, exc)
            if index is None:
                return None
            self.ducks[index] = {
                **self.ducks[index],
                "isCaptured": True,
                "capturedAt": _now_iso(),
            }
            return self.ducks[index]
        updated = response.json()
        if index is not None:
            self.ducks[index] = updated
        else:
            logger.warning("Captured duck %s was not in the local list", duck_id)
        return updated

    async def search_random_duck(self, drone_id: Any = None) -> dict[str, Any]:
        """Ask the API to send a drone searching; failures are re-raised."""
        body = {"droneId": drone_id} if drone_id else {}
        response = await self._http.post(f"{self._base}/search-random", json=body)
        response.raise_for_status()
        duck = response.json()
        self.ducks.append(duck)
        return duck

    def get_duck(self, duck_id: Any) -> Optional[dict[str, Any]]:
        index = self._index_of(duck_id)
        return self.ducks[index] if index is not None else None

    # -- derived views -------------------------------------------------------

    @property
    def total(self) -> int:
        return len(self.ducks)

    @property
    def awake_count(self) -> int:
        return sum(1 for d in self.ducks if d.get("status") == "awake")

    @property
    def hibernating_count(self) -> int:
        return sum(1 for d in self.ducks if d.get("status") == "deep-hibernation")

    @property
    def total_operational_cost(self) -> float:
        return sum(operational_cost(d) for d in self.ducks)

    @property
    def average_risk(self) -> float:
        if not self.ducks:
            return 0
        return sum(risk_level(d) for d in self.ducks) / len(self.ducks)


class DroneState:
    def __init__(self, http: httpx.AsyncClient, base_path: str = "/api/drones") -> None:
        self._http = http
        self._base = base_path
        self.drones: list[dict[str, Any]] = []

    async def load_drones(self) -> list[dict[str, Any]]:
        try:
            response = await self._http.get(self._base)
            response.raise_for_status()
            data = response.json()
            self.drones = data if isinstance(data, list) else []
        except httpx.HTTPError as exc:
            logger.error("Error loading drones: %s", exc)
            self.drones = []
        return self.drones

    def _index_of(self, drone_id: Any) -> Optional[int]:
        return next(
            (i for i, d in enumerate(self.drones) if _same_id(d.get("id"), drone_id)), None
        )

    async def add_drone(self, drone: dict[str, Any]) -> dict[str, Any]:
        response = await self._http.post(self._base, json=drone)
        response.raise_for_status()
        created = response.json()
        self.drones.append(created)
        return created

    async def update_drone(self, drone_id: Any, data: dict[str, Any]) -> dict[str, Any]:
        response = await self._http.put(f"{self._base}/{drone_id}", json=data)
        response.raise_for_status()
        updated = response.json()
        index = self._index_of(drone_id)
        if index is not None:
            self.drones[index] = updated
        return updated

    async def delete_drone(self, drone_id: Any) -> None:
        response = await self._http.delete(f"{self._base}/{drone_id}")
        response.raise_for_status()
        index = self._index_of(drone_id)
        if index is not None:
            del self.drones[index]

    def get_drone(self, drone_id: Any) -> Optional[dict[str, Any]]:
        index = self._index_of(drone_id)
        return self.drones[index] if index is not None else None

    @property
    def total(self) -> int:
        return len(self.drones)

    def _count(self, status: str) -> int:
        return sum(1 for d in self.drones if d.get("status") == status)

    @property
    def active_count(self) -> int:
        return self._count("active")

    @property
    def inactive_count(self) -> int:
        return self._count("inactive")

    @property
    def maintenance_count(self) -> int:
        return self._count("maintenance")
