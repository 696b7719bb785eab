"""End-to-end tests of the v1 HTTP surface against a temporary store."""

import io
from datetime import datetime, timedelta, timezone

import pytest
from PIL import Image as PILImage

from rent_inspector.application.services import InspectionStore
from rent_inspector.infrastructure.database import create_store_engine


async def _create_record(client, **payload) -> dict:
    response = await client.post("/api/v1/records", json=payload)
    assert response.status_code == 201, response.text
    return response.json()


# ── Properties ───────────────────────────────────────────────────────


@pytest.mark.asyncio
async def test_property_crud(client):
    response = await client.post("/api/v1/properties", json={"name": "Riverside", "address": "1 Quay Rd"})
    assert response.status_code == 201
    prop = response.json()
    assert prop["display_name"] == "Riverside"
    assert prop["record_count"] == 0

    listed = (await client.get("/api/v1/properties", params={"search": "quay"})).json()
    assert [p["id"] for p in listed] == [prop["id"]]

    assert (await client.get(f"/api/v1/properties/{prop['id']}")).status_code == 200
    assert (await client.delete(f"/api/v1/properties/{prop['id']}")).status_code == 204
    assert (await client.get(f"/api/v1/properties/{prop['id']}")).status_code == 404
    assert (await client.delete(f"/api/v1/properties/{prop['id']}")).status_code == 404


@pytest.mark.asyncio
async def test_deleting_property_keeps_its_records(client):
    prop = (await client.post("/api/v1/properties", json={"name": "Home"})).json()
    record = await _create_record(client, title="Linked", property_id=prop["id"])

    await client.delete(f"/api/v1/properties/{prop['id']}")

    fetched = (await client.get(f"/api/v1/records/{record['id']}")).json()
    assert fetched["property_id"] is None


@pytest.mark.asyncio
async def test_disabled_stages(client):
    prop = (await client.post("/api/v1/properties", json={"name": "Home"})).json()
    await _create_record(client, stage="move_in", property_id=prop["id"])

    response = await client.get(f"/api/v1/properties/{prop['id']}/disabled-stages")
    assert response.json()["disabled_stages"] == ["move_in"]

    duplicate = await client.post(
        "/api/v1/records", json={"stage": "move_in", "property_id": prop["id"]}
    )
    assert duplicate.status_code == 422


# ── Records ──────────────────────────────────────────────────────────


@pytest.mark.asyncio
async def test_create_record_from_plan(client):
    record = await _create_record(
        client,
        title="Flat 12",
        plan={"room_count": 2, "has_balcony": True, "storage_count": 1},
    )

    names = [room["custom_name"] for room in record["rooms"]]
    assert names == ["Bedroom 1", "Bedroom 2", "Kitchen", "Bathroom 1", "Balcony 1", "Storage 1"]
    assert record["display_title"] == "Flat 12"


@pytest.mark.asyncio
async def test_create_record_with_explicit_rooms(client):
    record = await _create_record(
        client,
        rooms=[{"room_type": "kitchen", "custom_name": "Galley", "comment": "Tap drips"}],
    )
    assert [r["display_name"] for r in record["rooms"]] == ["Galley"]
    assert record["title"] == ""
    assert record["display_title"].startswith("Record ")


@pytest.mark.asyncio
async def test_room_plan_preview_saves_nothing(client):
    response = await client.post("/api/v1/records/room-plan", json={"room_count": 1, "has_loggia": True})

    assert [r["custom_name"] for r in response.json()] == ["Bedroom 1", "Kitchen", "Bathroom 1", "Loggia 1"]
    assert (await client.get("/api/v1/records")).json() == []


@pytest.mark.asyncio
async def test_record_validation_errors(client):
    too_long = await client.post("/api/v1/records", json={"title": "x" * 101})
    assert too_long.status_code == 422
    assert too_long.json()["detail"]["code"] == "too_long"

    bad_reminder = await client.post("/api/v1/records", json={"reminder_interval": 400})
    assert bad_reminder.status_code == 422

    unknown_property = await client.post("/api/v1/records", json={"property_id": "missing"})
    assert unknown_property.status_code == 404


@pytest.mark.asyncio
async def test_list_records_search_and_sort(client):
    await _create_record(client, title="Kitchen check")
    await _create_record(client, title="Bathroom check")
    await _create_record(client, title="Garden")

    found = (await client.get("/api/v1/records", params={"search": "CHECK", "sort_order": "ascending"})).json()

    assert sorted(r["title"] for r in found) == ["Bathroom check", "Kitchen check"]
    week = (await client.get("/api/v1/records", params={"date_filter": "week"})).json()
    assert len(week) == 3


@pytest.mark.asyncio
async def test_patch_and_unlink_record(client):
    prop = (await client.post("/api/v1/properties", json={"name": "Home"})).json()
    record = await _create_record(client, title="Old")

    patched = await client.patch(
        f"/api/v1/records/{record['id']}",
        json={"title": "New", "stage": "living", "property_id": prop["id"]},
    )
    assert patched.status_code == 200
    assert patched.json()["property_id"] == prop["id"]

    # Omitting property_id keeps the link
    kept = await client.patch(f"/api/v1/records/{record['id']}", json={"title": "Newer"})
    assert kept.json()["property_id"] == prop["id"]

    unlinked = await client.post(f"/api/v1/records/{record['id']}/unlink")
    assert unlinked.json()["property_id"] is None
    assert (await client.patch("/api/v1/records/missing", json={"title": "x"})).status_code == 404


@pytest.mark.asyncio
async def test_reminder_lifecycle(client, app):
    scheduler = app.state.reminder_scheduler
    record = await _create_record(client, reminder_interval=30)
    assert scheduler.pending_identifiers() == [f"report_reminder_{record['id']}"]
    assert record["next_reminder_date"] is not None

    response = await client.put(f"/api/v1/records/{record['id']}/reminder", json={"days": 0})
    assert response.status_code == 200
    assert response.json()["next_reminder_date"] is None
    assert scheduler.pending_identifiers() == []

    await client.put(f"/api/v1/records/{record['id']}/reminder", json={"days": 7})
    assert (await client.delete(f"/api/v1/records/{record['id']}")).status_code == 204
    assert scheduler.pending_identifiers() == []


@pytest.mark.asyncio
async def test_list_records_by_created_range(client):
    await _create_record(client, title="Now")
    now = datetime.now(timezone.utc)
    hour = timedelta(hours=1)

    inside = await client.get(
        "/api/v1/records",
        params={"created_from": (now - hour).isoformat(), "created_to": (now + hour).isoformat()},
    )
    before = await client.get("/api/v1/records", params={"created_to": (now - 24 * hour).isoformat()})
    inverted = await client.get(
        "/api/v1/records",
        params={"created_from": now.isoformat(), "created_to": (now - hour).isoformat()},
    )

    assert [r["title"] for r in inside.json()] == ["Now"]
    assert before.json() == []
    assert inverted.status_code == 422


@pytest.mark.asyncio
async def test_export_record_as_pdf(client):
    record = await _create_record(client, title="Export me", plan={"room_count": 1})
    buffer = io.BytesIO()
    PILImage.new("RGB", (64, 48), color=(10, 120, 200)).save(buffer, format="JPEG")
    await client.post(
        f"/api/v1/rooms/{record['rooms'][0]['id']}/photos",
        files={"file": ("door.jpg", buffer.getvalue(), "image/jpeg")},
    )

    response = await client.get(f"/api/v1/records/{record['id']}/export")

    assert response.status_code == 200
    assert response.headers["content-type"] == "application/pdf"
    assert response.content.startswith(b"%PDF")
    assert (await client.get("/api/v1/records/missing/export")).status_code == 404


# ── Rooms and photos ─────────────────────────────────────────────────


@pytest.mark.asyncio
async def test_room_lifecycle(client):
    record = await _create_record(client, plan={"room_count": 1})
    record_id = record["id"]

    bathroom = await client.post(f"/api/v1/records/{record_id}/rooms/bathroom")
    assert bathroom.json()["custom_name"] == "Bathroom 2"

    extra = await client.post(
        f"/api/v1/records/{record_id}/rooms", json={"room_type": "storage", "custom_name": "Attic"}
    )
    assert extra.status_code == 201
    room_id = extra.json()["id"]

    renamed = await client.patch(f"/api/v1/rooms/{room_id}", json={"comment": "Dusty"})
    assert renamed.json()["comment"] == "Dusty"
    assert renamed.json()["custom_name"] == "Attic"

    assert (await client.delete(f"/api/v1/records/{record_id}/rooms/{room_id}")).status_code == 204
    names = [r["custom_name"] for r in (await client.get(f"/api/v1/records/{record_id}")).json()["rooms"]]
    assert names == ["Bedroom 1", "Kitchen", "Bathroom 1", "Bathroom 2"]


@pytest.mark.asyncio
async def test_fixed_rooms_cannot_be_deleted(client):
    record = await _create_record(client, plan={"room_count": 1})
    kitchen = record["rooms"][1]

    response = await client.delete(f"/api/v1/records/{record['id']}/rooms/{kitchen['id']}")

    assert response.status_code == 422


@pytest.mark.asyncio
async def test_photo_upload_fetch_and_remove(client):
    record = await _create_record(client, plan={"room_count": 1})
    room_id = record["rooms"][0]["id"]

    uploaded = await client.post(
        f"/api/v1/rooms/{room_id}/photos",
        files={"file": ("door.jpg", b"\xff\xd8fake-jpeg", "image/jpeg")},
    )
    assert uploaded.status_code == 201
    token = uploaded.json()["photo_paths"][0]

    fetched = await client.get(f"/api/v1/photos/{token}")
    assert fetched.status_code == 200
    assert fetched.content == b"\xff\xd8fake-jpeg"
    assert fetched.headers["content-type"] == "image/jpeg"

    untouched = await client.delete(f"/api/v1/rooms/{room_id}/photos/3")
    assert untouched.json()["photo_paths"] == [token]

    removed = await client.delete(f"/api/v1/rooms/{room_id}/photos/0")
    assert removed.json()["photo_paths"] == []
    assert (await client.get(f"/api/v1/photos/{token}")).status_code == 404


@pytest.mark.asyncio
async def test_photo_upload_to_missing_room(client):
    response = await client.post(
        "/api/v1/rooms/missing/photos",
        files={"file": ("door.jpg", b"data", "image/jpeg")},
    )
    assert response.status_code == 404


# ── Data and profile ─────────────────────────────────────────────────


@pytest.mark.asyncio
async def test_clear_all(client):
    assert (await client.delete("/api/v1/data")).status_code == 409

    await client.post("/api/v1/properties", json={"name": "Home"})
    await _create_record(client, title="One")

    assert (await client.delete("/api/v1/data")).status_code == 204
    assert (await client.get("/api/v1/records")).json() == []
    assert (await client.get("/api/v1/properties")).json() == []


@pytest.mark.asyncio
async def test_profile_name_validation(client):
    await _create_record(client, plan={"room_count": 1})

    profile = (await client.get("/api/v1/profile")).json()
    assert profile["user_name"] == "User"
    assert profile["record_count"] == 1

    updated = await client.put("/api/v1/profile", json={"user_name": "  Олена "})
    assert updated.json()["user_name"] == "Олена"

    rejected = await client.put("/api/v1/profile", json={"user_name": "R2D2"})
    assert rejected.status_code == 422
    assert rejected.json()["detail"]["code"] == "contains_digits"


@pytest.mark.asyncio
async def test_unopened_store_maps_to_503(client, app, tmp_path):
    unopened = InspectionStore(create_store_engine(f"sqlite:///{tmp_path / 'other.db'}"))
    app.state.store = unopened

    response = await client.post("/api/v1/properties", json={"name": "x"})

    assert response.status_code == 503
    await unopened.close()
