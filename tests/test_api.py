import uuid

import pytest

from app.platform.adapters.storage_local import LocalFilesystemStorage
from app.platform.provider_registry import get_object_storage


async def test_health(client):
    resp = await client.get("/api/health")
    assert resp.status_code == 200
    assert resp.json() == {"status": "ok"}


async def test_request_id_is_echoed(client):
    resp = await client.get("/api/health", headers={"x-request-id": "req-42"})
    assert resp.headers["x-request-id"] == "req-42"


# ============================================================================
# USERS
# ============================================================================


async def _create_user(client, **kw):
    body = {"cognitoUserId": "cog-1", "email": "asha@famlink.in", "firstName": "Asha", "lastName": "Rao"}
    body.update(kw)
    return await client.post("/api/users", json=body)


async def test_create_user_returns_camel_case(client):
    resp = await _create_user(client, zipCode="560001")
    assert resp.status_code == 201
    data = resp.json()
    assert data["firstName"] == "Asha"
    assert data["zipCode"] == "560001"
    assert data["country"] == "India"
    assert data["createdAt"] == "2024-07-15T09:00:00"
    assert "first_name" not in data


async def test_duplicate_user_is_409(client):
    await _create_user(client)
    resp = await _create_user(client, cognitoUserId="cog-2")
    assert resp.status_code == 409
    assert resp.json() == {"error": "CONFLICT", "message": "User with this email already exists"}


async def test_invalid_body_is_400(client):
    resp = await _create_user(client, email="not-an-email")
    assert resp.status_code == 400
    body = resp.json()
    assert body["error"] == "INVALID_ARGUMENT"
    assert any(d["field"].endswith("email") for d in body["details"])


async def test_unknown_user_is_404(client):
    resp = await client.get(f"/api/users/{uuid.uuid4()}")
    assert resp.status_code == 404
    assert resp.json() == {"error": "NOT_FOUND", "message": "User not found"}


async def test_malformed_id_is_400(client):
    resp = await client.get("/api/users/not-a-uuid")
    assert resp.status_code == 400


async def test_user_lifecycle(client):
    user = (await _create_user(client)).json()
    resp = await client.put(f"/api/users/{user['id']}", json={"city": "Pune"})
    assert resp.status_code == 200
    assert resp.json()["city"] == "Pune"

    by_cognito = await client.get("/api/users/cognito/cog-1")
    assert by_cognito.json()["children"] == []

    assert (await client.delete(f"/api/users/{user['id']}")).status_code == 204
    assert (await client.get(f"/api/users/{user['id']}")).status_code == 404
    assert (await client.get("/api/users")).json() == []


# ============================================================================
# CHILDREN, RECORDS AND APPOINTMENTS
# ============================================================================


async def test_family_flow(client, factory):
    parent = await factory.user()
    hospital = await factory.hospital(name="Cloudnine")

    resp = await client.post("/api/children", json={
        "parentId": str(parent.id), "firstName": "Meera", "lastName": "Rao",
        "dateOfBirth": "2024-01-15", "gender": "Female",
    })
    assert resp.status_code == 201
    child = resp.json()
    assert child["ageInMonths"] == 6
    assert child["fullName"] == "Meera Rao"

    resp = await client.post("/api/medical-records", json={
        "childId": child["id"], "recordType": "Vaccination", "title": "DTaP dose 2",
        "recordDate": "2024-03-15T10:00:00Z",
    })
    assert resp.status_code == 201

    booking = {
        "userId": str(parent.id), "childId": child["id"],
        "appointmentDate": "2024-08-01T10:00:00Z", "appointmentType": "Vaccination",
    }
    resp = await client.post(f"/api/hospitals/{hospital.id}/appointments", json=booking)
    assert resp.status_code == 201
    appointment = resp.json()
    assert appointment["isUpcoming"] is True
    assert appointment["hospital"]["name"] == "Cloudnine"

    resp = await client.post(f"/api/hospitals/{hospital.id}/appointments", json=booking)
    assert resp.status_code == 409

    resp = await client.put(f"/api/appointments/{appointment['id']}/status", json={"status": "Nope"})
    assert resp.status_code == 400

    dashboard = (await client.get(f"/api/children/{child['id']}/dashboard")).json()
    assert dashboard["healthSummary"]["totalMedicalRecords"] == 1
    assert dashboard["healthSummary"]["lastVaccination"]["title"] == "DTaP dose 2"
    assert dashboard["upcomingAppointments"][0]["hospital"]["name"] == "Cloudnine"

    records = (await client.get(f"/api/medical-records/child/{child['id']}", params={"recordType": "Vaccination"})).json()
    assert records["totalCount"] == 1
    assert records["items"][0]["child"]["id"] == child["id"]

    listed = (await client.get(f"/api/children/parent/{parent.id}")).json()
    assert listed[0]["medicalRecordsCount"] == 1
    assert listed[0]["appointmentsCount"] == 1


async def test_static_lists(client):
    assert "Checkup" in (await client.get("/api/medical-records/types")).json()
    assert "Pediatrics" in (await client.get("/api/hospitals/specialties")).json()
    assert (await client.get("/api/community/categories")).status_code == 200
    assert (await client.get("/api/appointments/types")).status_code == 200
    tips = (await client.get("/api/chatbot/health-tips", params={"ageInMonths": 6})).json()
    assert tips[0]["ageGroup"] == "0-12 months"


# ============================================================================
# HOSPITALS
# ============================================================================


async def test_hospital_list_with_origin(client, factory):
    await factory.hospital(name="Near", latitude=12.98, longitude=77.60)
    await factory.hospital(name="Far", latitude=19.07, longitude=72.87)

    resp = await client.get("/api/hospitals", params={"latitude": 12.97, "longitude": 77.59, "radiusKm": 10})
    assert resp.status_code == 200
    page = resp.json()
    assert [h["name"] for h in page["items"]] == ["Near"]
    assert page["items"][0]["distanceKm"] < 10
    assert page["totalCount"] == 2

    assert (await client.get("/api/hospitals/search", params={"query": "  "})).status_code == 400


# ============================================================================
# COMMUNITY AND CHATBOT
# ============================================================================


async def test_community_flow(client, factory):
    user = await factory.user()
    post = (await client.post("/api/community/posts", json={
        "userId": str(user.id), "title": "Teething", "content": "Any tips?", "tags": ["teeth"],
    })).json()

    resp = await client.post(f"/api/community/posts/{post['id']}/like", json={"userId": str(user.id)})
    assert resp.json() == {"liked": True, "likesCount": 1}
    resp = await client.post(f"/api/community/posts/{post['id']}/like", json={"userId": str(user.id)})
    assert resp.json() == {"liked": False, "likesCount": 0}

    resp = await client.post(f"/api/community/posts/{post['id']}/comments",
                             json={"userId": str(user.id), "content": "Cold spoon"})
    assert resp.status_code == 201

    detail = (await client.get(f"/api/community/posts/{post['id']}")).json()
    assert detail["commentsCount"] == 1
    assert detail["comments"][0]["replies"] == []

    page = (await client.get("/api/community/posts", params={"pageSize": 5})).json()
    assert page["pageSize"] == 5
    assert page["items"][0]["tags"] == ["teeth"]


async def test_chatbot_flow(client, factory):
    user = await factory.user()
    started = await client.post("/api/chatbot/conversations", json={"userId": str(user.id)})
    assert started.status_code == 201
    conv_id = started.json()["id"]

    resp = await client.post(f"/api/chatbot/conversations/{conv_id}/messages", json={"message": "fever at night"})
    assert resp.status_code == 200
    assert resp.json()["assistantMessage"]["sources"] == ["American Academy of Pediatrics", "CDC Guidelines"]

    resp = await client.post(f"/api/chatbot/conversations/{conv_id}/messages", json={"message": ""})
    assert resp.status_code == 400

    listed = (await client.get(f"/api/chatbot/conversations/user/{user.id}")).json()
    assert listed["items"][0]["messageCount"] == 3

    assert (await client.delete(f"/api/chatbot/conversations/{conv_id}")).status_code == 204
    assert (await client.get(f"/api/chatbot/conversations/{conv_id}")).status_code == 404


# ============================================================================
# MEDIA
# ============================================================================


@pytest.fixture
def local_storage(tmp_path):
    from app.main import app

    storage = LocalFilesystemStorage(str(tmp_path))
    app.dependency_overrides[get_object_storage] = lambda: storage
    return storage


async def test_media_upload_and_delete(client, local_storage, tmp_path):
    resp = await client.post("/api/media/upload", files={"file": ("scan.PNG", b"\x89PNG-data", "image/png")})
    assert resp.status_code == 201
    body = resp.json()
    assert body["key"].startswith("uploads/2024/07/15/")
    assert body["sizeBytes"] == 9
    assert (tmp_path / body["key"]).read_bytes() == b"\x89PNG-data"

    assert (await client.delete("/api/media", params={"key": body["key"]})).status_code == 204
    assert not (tmp_path / body["key"]).exists()

    resp = await client.post("/api/media/upload", files={"file": ("empty.txt", b"", "text/plain")})
    assert resp.status_code == 400
