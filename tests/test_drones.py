from httpx import AsyncClient


# ---- helpers ----------------------------------------------------------------

def drone_payload(serial: str = "DR-2024-001", **overrides) -> dict:
    payload = {
        "serial": serial,
        "brand": "DJI",
        "manufacturer": "DJI Technology Co. Ltd.",
        "country": "China",
        "model": "Mavic 3",
        "notes": "Foldable pro drone",
    }
    payload.update(overrides)
    return payload


async def create_drone(client: AsyncClient, serial: str = "DR-2024-001", **overrides) -> dict:
    resp = await client.post("/api/drones", json=drone_payload(serial, **overrides))
    assert resp.status_code == 201, resp.text
    return resp.json()


# ---- create -----------------------------------------------------------------

class TestCreateDrone:
    async def test_create_defaults_to_active(self, db_client: AsyncClient):
        drone = await create_drone(db_client)
        assert drone["id"] is not None
        assert drone["serial"] == "DR-2024-001"
        assert drone["status"] == "active"
        assert drone["model"] == "Mavic 3"
        assert drone["createdAt"] is not None

    async def test_duplicate_serial_conflicts(self, db_client: AsyncClient):
        await create_drone(db_client)
        resp = await db_client.post("/api/drones", json=drone_payload())
        assert resp.status_code == 409

    async def test_missing_required_field(self, db_client: AsyncClient):
        payload = drone_payload()
        del payload["brand"]
        resp = await db_client.post("/api/drones", json=payload)
        assert resp.status_code == 422

    async def test_invalid_status(self, db_client: AsyncClient):
        resp = await db_client.post("/api/drones", json=drone_payload(status="flying"))
        assert resp.status_code == 422


# ---- read -------------------------------------------------------------------

class TestReadDrones:
    async def test_list(self, db_client: AsyncClient):
        await create_drone(db_client, "DR-A")
        await create_drone(db_client, "DR-B")
        resp = await db_client.get("/api/drones")
        assert resp.status_code == 200
        assert {d["serial"] for d in resp.json()} == {"DR-A", "DR-B"}

    async def test_get_one(self, db_client: AsyncClient):
        drone = await create_drone(db_client)
        resp = await db_client.get(f"/api/drones/{drone['id']}")
        assert resp.status_code == 200
        assert resp.json()["serial"] == drone["serial"]

    async def test_get_missing(self, db_client: AsyncClient):
        resp = await db_client.get("/api/drones/99999")
        assert resp.status_code == 404
        assert resp.json()["detail"] == "Drone not found"

    async def test_stats(self, db_client: AsyncClient):
        await create_drone(db_client, "DR-A")
        await create_drone(db_client, "DR-B", status="maintenance")
        await create_drone(db_client, "DR-C", status="inactive")
        resp = await db_client.get("/api/drones/stats")
        assert resp.status_code == 200
        assert resp.json() == {"total": 3, "active": 1, "inactive": 1, "maintenance": 1}


# ---- update / delete --------------------------------------------------------

class TestUpdateDrone:
    async def test_update_status(self, db_client: AsyncClient):
        drone = await create_drone(db_client)
        resp = await db_client.put(f"/api/drones/{drone['id']}", json={"status": "maintenance"})
        assert resp.status_code == 200
        body = resp.json()
        assert body["status"] == "maintenance"
        assert body["brand"] == "DJI"

    async def test_update_to_taken_serial(self, db_client: AsyncClient):
        await create_drone(db_client, "DR-A")
        other = await create_drone(db_client, "DR-B")
        resp = await db_client.put(f"/api/drones/{other['id']}", json={"serial": "DR-A"})
        assert resp.status_code == 409

    async def test_update_missing(self, db_client: AsyncClient):
        resp = await db_client.put("/api/drones/99999", json={"status": "inactive"})
        assert resp.status_code == 404

    async def test_store_rejection_is_reported(self, db_client: AsyncClient):
        drone = await create_drone(db_client)
        resp = await db_client.put(f"/api/drones/{drone['id']}", json={"brand": None})
        assert resp.status_code == 400
        body = resp.json()
        assert body["detail"] == "Record violates a database constraint"
        assert body["error"]


class TestDeleteDrone:
    async def test_delete_keeps_duck_snapshot(self, db_client: AsyncClient):
        drone = await create_drone(db_client, "DR-SNAP")
        duck = (
            await db_client.post("/api/ducks/search-random", json={"droneId": drone["id"]})
        ).json()

        resp = await db_client.delete(f"/api/drones/{drone['id']}")
        assert resp.status_code == 204
        assert (await db_client.get(f"/api/drones/{drone['id']}")).status_code == 404

        resp = await db_client.get(f"/api/ducks/{duck['id']}")
        assert resp.status_code == 200
        assert resp.json()["drone"]["serial"] == "DR-SNAP"

    async def test_delete_missing(self, db_client: AsyncClient):
        resp = await db_client.delete("/api/drones/99999")
        assert resp.status_code == 404
