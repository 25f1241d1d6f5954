from httpx import AsyncClient


# ---- helpers ----------------------------------------------------------------

def display_duck(**overrides) -> dict:
    duck = {
        "drone": {
            "serial": "DR-2024-001",
            "brand": "DJI",
            "manufacturer": "DJI Technology Co. Ltd.",
            "country": "China",
        },
        "height": 120,
        "weight": 3000,
        "location": {
            "city": "Recife",
            "country": "Brasil",
            "gps": {"lat": -8.0476, "lon": -34.877},
            "precision": 12,
            "referencePoint": "Marco Zero",
        },
        "status": "trance",
        "heartRate": 48,
        "mutations": 6,
        "superpower": {
            "name": "Telecinese",
            "description": "Move objetos com o poder da mente",
            "classification": {"type": "psíquico", "rarity": "rare", "risk": 65},
        },
    }
    duck.update(overrides)
    return duck


async def create_duck(client: AsyncClient, **overrides) -> dict:
    resp = await client.post("/api/ducks", json=display_duck(**overrides))
    assert resp.status_code == 201, resp.text
    return resp.json()


async def create_drone(client: AsyncClient, serial: str = "DR-T-1", status: str = "active") -> dict:
    resp = await client.post(
        "/api/drones",
        json={"serial": serial, "brand": "X", "manufacturer": "Y", "country": "Z", "status": status},
    )
    assert resp.status_code == 201, resp.text
    return resp.json()


# ---- health -----------------------------------------------------------------

class TestHealth:
    async def test_health(self, client: AsyncClient):
        resp = await client.get("/health")
        assert resp.status_code == 200
        assert resp.json()["status"] == "ok"


# ---- create -----------------------------------------------------------------

class TestCreateDuck:
    async def test_create_nested(self, db_client: AsyncClient):
        duck = await create_duck(db_client)
        assert isinstance(duck["id"], str)
        assert duck["drone"]["serial"] == "DR-2024-001"
        assert duck["location"]["gps"]["lat"] == -8.0476
        assert duck["location"]["referencePoint"] == "Marco Zero"
        assert duck["status"] == "trance"
        assert duck["superpower"]["classification"]["rarity"] == "rare"
        assert duck["isCaptured"] is False
        assert duck["capturedAt"] is None
        assert duck["registeredAt"] is not None

    async def test_create_flat(self, db_client: AsyncClient):
        resp = await db_client.post(
            "/api/ducks",
            json={
                "droneSerial": "DR-FLAT",
                "droneBrand": "Parrot",
                "droneManufacturer": "Parrot SA",
                "droneCountry": "França",
                "height": 80,
                "weight": 2150,
                "locationCity": "Brasília",
                "locationCountry": "Brasil",
                "gpsLat": -15.79,
                "gpsLon": -47.88,
                "status": "deep-hibernation",
                "heartRate": 8,
            },
        )
        assert resp.status_code == 201, resp.text
        duck = resp.json()
        assert duck["drone"]["serial"] == "DR-FLAT"
        assert duck["location"]["city"] == "Brasília"
        assert duck["status"] == "deep-hibernation"
        assert duck["superpower"] is None
        assert duck["mutations"] == 0

    async def test_nested_serial_wins_over_flat(self, db_client: AsyncClient):
        payload = display_duck(droneSerial="B")
        payload["drone"]["serial"] = "A"
        resp = await db_client.post("/api/ducks", json=payload)
        assert resp.status_code == 201
        assert resp.json()["drone"]["serial"] == "A"

    async def test_missing_drone_identity_defaults(self, db_client: AsyncClient):
        resp = await db_client.post("/api/ducks", json={"height": 90, "weight": 2000})
        assert resp.status_code == 201, resp.text
        duck = resp.json()
        assert duck["drone"]["brand"] == "Unknown"
        assert duck["drone"]["serial"].startswith("DR-")
        assert duck["location"]["gps"] == {"lat": 0, "lon": 0}
        assert duck["status"] == "awake"

    async def test_missing_weight_rejected(self, db_client: AsyncClient):
        resp = await db_client.post("/api/ducks", json=display_duck(weight=None))
        assert resp.status_code == 400
        assert "weight" in resp.json()["detail"]

    async def test_incomplete_superpower_rejected(self, db_client: AsyncClient):
        payload = display_duck()
        del payload["superpower"]["description"]
        resp = await db_client.post("/api/ducks", json=payload)
        assert resp.status_code == 400

    async def test_invalid_status_rejected(self, db_client: AsyncClient):
        resp = await db_client.post("/api/ducks", json=display_duck(status="dreaming"))
        assert resp.status_code == 400


# ---- read -------------------------------------------------------------------

class TestReadDucks:
    async def test_list_newest_first(self, db_client: AsyncClient):
        first = await create_duck(db_client, mutations=1)
        second = await create_duck(db_client, mutations=2)
        resp = await db_client.get("/api/ducks")
        assert resp.status_code == 200
        ids = [d["id"] for d in resp.json()]
        assert ids == [second["id"], first["id"]]

    async def test_list_empty(self, db_client: AsyncClient):
        resp = await db_client.get("/api/ducks")
        assert resp.status_code == 200
        assert resp.json() == []

    async def test_get_one(self, db_client: AsyncClient):
        duck = await create_duck(db_client)
        resp = await db_client.get(f"/api/ducks/{duck['id']}")
        assert resp.status_code == 200
        assert resp.json()["id"] == duck["id"]

    async def test_get_missing(self, db_client: AsyncClient):
        resp = await db_client.get("/api/ducks/99999")
        assert resp.status_code == 404
        assert resp.json()["detail"] == "Duck not found"


# ---- update -----------------------------------------------------------------

class TestUpdateDuck:
    async def test_partial_update_keeps_other_fields(self, db_client: AsyncClient):
        duck = await create_duck(db_client)
        resp = await db_client.put(f"/api/ducks/{duck['id']}", json={"mutations": 11})
        assert resp.status_code == 200, resp.text
        updated = resp.json()
        assert updated["mutations"] == 11
        assert updated["drone"] == duck["drone"]
        assert updated["superpower"] == duck["superpower"]

    async def test_update_with_flat_field(self, db_client: AsyncClient):
        duck = await create_duck(db_client)
        resp = await db_client.put(f"/api/ducks/{duck['id']}", json={"locationCity": "Olinda"})
        assert resp.status_code == 200
        assert resp.json()["location"]["city"] == "Olinda"

    async def test_update_clears_superpower(self, db_client: AsyncClient):
        duck = await create_duck(db_client)
        resp = await db_client.put(f"/api/ducks/{duck['id']}", json={"superpower": None})
        assert resp.status_code == 200
        assert resp.json()["superpower"] is None

    async def test_full_display_update(self, db_client: AsyncClient):
        duck = await create_duck(db_client)
        payload = display_duck(status="awake", heartRate=None)
        payload["location"]["city"] = "Natal"
        resp = await db_client.put(f"/api/ducks/{duck['id']}", json=payload)
        assert resp.status_code == 200
        body = resp.json()
        assert body["status"] == "awake"
        assert body["location"]["city"] == "Natal"

    async def test_update_invalid_risk(self, db_client: AsyncClient):
        duck = await create_duck(db_client)
        payload = {"superpower": display_duck()["superpower"]}
        payload["superpower"]["classification"]["risk"] = 250
        resp = await db_client.put(f"/api/ducks/{duck['id']}", json=payload)
        assert resp.status_code == 400

    async def test_update_missing(self, db_client: AsyncClient):
        resp = await db_client.put("/api/ducks/99999", json={"mutations": 1})
        assert resp.status_code == 404


# ---- field types ------------------------------------------------------------

class TestFieldTypes:
    async def test_wrong_types_rejected_on_create(self, db_client: AsyncClient):
        string_risk = display_duck()
        string_risk["superpower"]["classification"]["risk"] = "50"
        payloads = [
            display_duck(mutations="3"),
            display_duck(mutations=2.5),
            display_duck(height="tall"),
            string_risk,
        ]
        for payload in payloads:
            resp = await db_client.post("/api/ducks", json=payload)
            assert resp.status_code == 400, resp.text
            assert "Invalid duck field types" in resp.json()["detail"]

        resp = await db_client.get("/api/ducks")
        assert resp.status_code == 200
        assert resp.json() == []

    async def test_wrong_types_rejected_on_update(self, db_client: AsyncClient):
        duck = await create_duck(db_client)
        for body in ({"mutations": "3"}, {"mutations": 2.5}, {"weight": "heavy"}):
            resp = await db_client.put(f"/api/ducks/{duck['id']}", json=body)
            assert resp.status_code == 400, resp.text

        resp = await db_client.get("/api/ducks")
        assert resp.status_code == 200
        assert resp.json()[0]["mutations"] == duck["mutations"]
        assert resp.json()[0]["weight"] == duck["weight"]

    async def test_string_capture_flag_does_not_capture(self, db_client: AsyncClient):
        duck = await create_duck(db_client)
        resp = await db_client.put(f"/api/ducks/{duck['id']}", json={"isCaptured": "false"})
        assert resp.status_code == 400
        assert "isCaptured" in resp.json()["detail"]

        resp = await db_client.get(f"/api/ducks/{duck['id']}")
        assert resp.json()["isCaptured"] is False
        assert resp.json()["capturedAt"] is None


# ---- delete -----------------------------------------------------------------

class TestDeleteDuck:
    async def test_delete(self, db_client: AsyncClient):
        duck = await create_duck(db_client)
        resp = await db_client.delete(f"/api/ducks/{duck['id']}")
        assert resp.status_code == 204
        resp = await db_client.get(f"/api/ducks/{duck['id']}")
        assert resp.status_code == 404

    async def test_delete_missing(self, db_client: AsyncClient):
        resp = await db_client.delete("/api/ducks/99999")
        assert resp.status_code == 404


# ---- capture ----------------------------------------------------------------

class TestCaptureDuck:
    async def test_capture_sets_flag_and_timestamp(self, db_client: AsyncClient):
        duck = await create_duck(db_client)
        resp = await db_client.patch(f"/api/ducks/{duck['id']}/capture")
        assert resp.status_code == 200
        body = resp.json()
        assert body["isCaptured"] is True
        assert body["capturedAt"] is not None

    async def test_recapture_last_write_wins(self, db_client: AsyncClient):
        duck = await create_duck(db_client)
        first = (await db_client.patch(f"/api/ducks/{duck['id']}/capture")).json()
        second = (await db_client.patch(f"/api/ducks/{duck['id']}/capture")).json()
        assert second["isCaptured"] is True
        assert second["capturedAt"] >= first["capturedAt"]

    async def test_capture_missing(self, db_client: AsyncClient):
        resp = await db_client.patch("/api/ducks/99999/capture")
        assert resp.status_code == 404

    async def test_put_does_not_touch_capture_state(self, db_client: AsyncClient):
        duck = await create_duck(db_client)
        await db_client.patch(f"/api/ducks/{duck['id']}/capture")
        resp = await db_client.put(f"/api/ducks/{duck['id']}", json={"mutations": 3})
        assert resp.json()["isCaptured"] is True

    async def test_captured_list_newest_capture_first(self, db_client: AsyncClient):
        a = await create_duck(db_client)
        b = await create_duck(db_client)
        await create_duck(db_client)
        await db_client.patch(f"/api/ducks/{b['id']}/capture")
        await db_client.patch(f"/api/ducks/{a['id']}/capture")

        resp = await db_client.get("/api/ducks/list/captured")
        assert resp.status_code == 200
        assert [d["id"] for d in resp.json()] == [a["id"], b["id"]]


# ---- random search ----------------------------------------------------------

class TestSearchRandom:
    async def test_no_active_drones(self, db_client: AsyncClient):
        await create_drone(db_client, serial="DR-OFF", status="maintenance")
        resp = await db_client.post("/api/ducks/search-random", json={})
        assert resp.status_code == 400
        assert resp.json()["detail"] == "No active drones available"

        listing = await db_client.get("/api/ducks")
        assert listing.json() == []

    async def test_with_requested_drone(self, db_client: AsyncClient):
        drone = await create_drone(db_client, serial="DR-T-1")
        resp = await db_client.post("/api/ducks/search-random", json={"droneId": drone["id"]})
        assert resp.status_code == 201, resp.text
        duck = resp.json()
        assert duck["drone"]["serial"] == "DR-T-1"
        assert duck["drone"]["brand"] == "X"
        assert duck["isCaptured"] is False

    async def test_unknown_drone_falls_back_to_first_active(self, db_client: AsyncClient):
        await create_drone(db_client, serial="DR-INACTIVE", status="inactive")
        first = await create_drone(db_client, serial="DR-FIRST")
        await create_drone(db_client, serial="DR-SECOND")
        resp = await db_client.post("/api/ducks/search-random", json={"droneId": 4242})
        assert resp.status_code == 201
        assert resp.json()["drone"]["serial"] == first["serial"]

    async def test_without_body(self, db_client: AsyncClient):
        await create_drone(db_client)
        resp = await db_client.post("/api/ducks/search-random")
        assert resp.status_code == 201
        duck = resp.json()
        assert 60 <= duck["height"] < 150
        assert 1800 <= duck["weight"] < 4500

    async def test_generated_duck_is_persisted(self, db_client: AsyncClient):
        await create_drone(db_client)
        created = (await db_client.post("/api/ducks/search-random", json={})).json()
        resp = await db_client.get(f"/api/ducks/{created['id']}")
        assert resp.status_code == 200
        assert resp.json() == created


# ---- analytics --------------------------------------------------------------

class TestDuckAnalytics:
    async def test_analysis(self, db_client: AsyncClient):
        duck = await create_duck(db_client)
        resp = await db_client.get(f"/api/ducks/{duck['id']}/analysis")
        assert resp.status_code == 200
        report = resp.json()
        assert report["riskLevel"] == 65
        assert report["genomeSequencingCost"] == 15000
        assert report["knowledgeGain"] == 300
        assert report["militaryPowerNeeded"] >= 50
        assert report["operationalCost"] > 100

    async def test_analysis_missing(self, db_client: AsyncClient):
        resp = await db_client.get("/api/ducks/99999/analysis")
        assert resp.status_code == 404

    async def test_stats(self, db_client: AsyncClient):
        await create_duck(db_client, status="awake", heartRate=None, superpower=None)
        captured = await create_duck(db_client, status="deep-hibernation", heartRate=9)
        await db_client.patch(f"/api/ducks/{captured['id']}/capture")

        resp = await db_client.get("/api/ducks/stats")
        assert resp.status_code == 200
        stats = resp.json()
        assert stats["total"] == 2
        assert stats["awake"] == 1
        assert stats["hibernating"] == 1
        assert stats["captured"] == 1
        assert stats["averageRisk"] == (25 + 65) / 2
