"""
Tests for the procedure surface: routing, error mapping and the
placeholder actor.
"""
import pytest

from ic_court.api import deps
from ic_court.core.config import settings
from ic_court.core.security import ActorContext
from ic_court.main import app
from ic_court.models.enums import UserRole

API = settings.API_V1_STR

USER = {
    "username": "admin",
    "email": "admin@komisiinformasi.go.id",
    "full_name": "Administrator Komisi Informasi",
    "role": "staf_komisi",
    "phone": None,
    "password": "password123",
}

DISPUTE = {
    "dispute_number": "001/REG-PSI/I/2024",
    "dispute_type": "sengketa_informasi",
    "registration_date": "2024-01-02T09:00:00",
    "description": "Permohonan informasi anggaran",
}


async def create_admin(client):
    response = await client.post(f"{API}/createUser", json=USER)
    assert response.status_code == 200
    return response.json()


async def create_dispute(client, **overrides):
    response = await client.post(f"{API}/createDispute", json={**DISPUTE, **overrides})
    assert response.status_code == 200
    return response.json()


@pytest.mark.asyncio
async def test_healthcheck(client):
    response = await client.get("/healthcheck")
    assert response.status_code == 200
    assert response.json()["status"] == "ok"


@pytest.mark.asyncio
async def test_create_user_hides_credential(client):
    body = await create_admin(client)

    assert body["id"] == settings.DEFAULT_ACTOR_ID
    assert body["role"] == "staf_komisi"
    assert body["is_active"] is True
    assert "password" not in body
    assert "password_hash" not in body


@pytest.mark.asyncio
async def test_validation_error_names_field(client):
    response = await client.post(f"{API}/createUser", json={**USER, "email": "nope"})

    assert response.status_code == 422
    body = response.json()
    assert body["error"] == "validation_error"
    assert body["status_code"] == 422
    assert body["message"]
    assert [d["field"] for d in body["details"]] == ["email"]


@pytest.mark.asyncio
async def test_query_validation_uses_error_shape(client):
    response = await client.get(f"{API}/getDisputeById", params={"id": "abc"})

    assert response.status_code == 422
    body = response.json()
    assert set(body) == {"error", "message", "status_code", "details"}
    assert body["details"][0]["field"] == "id"


@pytest.mark.asyncio
async def test_null_on_required_column_is_validation_error(client):
    response = await client.post(f"{API}/updateDispute", json={"id": 1, "status": None})

    assert response.status_code == 422
    assert response.json()["error"] == "validation_error"


@pytest.mark.asyncio
async def test_duplicate_user_is_conflict(client):
    await create_admin(client)
    response = await client.post(f"{API}/createUser", json={**USER, "email": "other@komisiinformasi.go.id"})

    assert response.status_code == 409
    assert response.json()["error"] == "conflict"

    users = await client.get(f"{API}/getUsers")
    assert len(users.json()) == 1


@pytest.mark.asyncio
async def test_dispute_procedures(client):
    await create_admin(client)
    created = await create_dispute(client)
    assert created["status"] == "baru"
    assert created["created_by"] == settings.DEFAULT_ACTOR_ID

    listed = await client.get(f"{API}/getDisputes")
    assert [d["id"] for d in listed.json()] == [created["id"]]

    fetched = await client.get(f"{API}/getDisputeById", params={"id": created["id"]})
    assert fetched.json() == created

    missing = await client.get(f"{API}/getDisputeById", params={"id": 999})
    assert missing.status_code == 200
    assert missing.json() is None

    updated = await client.post(f"{API}/updateDispute", json={"id": created["id"], "status": "selesai"})
    assert updated.status_code == 200
    body = updated.json()
    assert body["status"] == "selesai"
    assert body["description"] == created["description"]


@pytest.mark.asyncio
async def test_update_missing_dispute_is_not_found(client):
    response = await client.post(f"{API}/updateDispute", json={"id": 99999, "status": "selesai"})

    assert response.status_code == 404
    assert response.json()["message"] == "Dispute with id 99999 not found"


@pytest.mark.asyncio
async def test_invalid_status_rejected_before_handler(client):
    response = await client.post(f"{API}/updateDispute", json={"id": 1, "status": "archived"})
    assert response.status_code == 422


@pytest.mark.asyncio
async def test_party_and_hearing_procedures(client):
    await create_admin(client)
    dispute = await create_dispute(client)

    party = await client.post(f"{API}/createParty", json={
        "name": "Budi Santoso",
        "party_type": "individu",
        "role": "pemohon",
        "dispute_id": dispute["id"],
    })
    assert party.status_code == 200

    parties = await client.get(f"{API}/getPartiesByDispute", params={"dispute_id": dispute["id"]})
    assert [p["name"] for p in parties.json()] == ["Budi Santoso"]

    for date in ("2024-02-15T10:00:00", "2024-01-15T10:00:00"):
        response = await client.post(f"{API}/createHearing", json={
            "dispute_id": dispute["id"],
            "hearing_date": date,
            "agenda": "Sidang",
            "attendees": ["Komisioner A"],
        })
        assert response.status_code == 200

    hearings = (await client.get(f"{API}/getHearingsByDispute", params={"dispute_id": dispute["id"]})).json()
    assert [h["hearing_date"][:10] for h in hearings] == ["2024-01-15", "2024-02-15"]
    assert hearings[0]["attendees"] == '["Komisioner A"]'

    updated = await client.post(f"{API}/updateHearing", json={"id": hearings[0]["id"], "result": "Selesai"})
    assert updated.json()["result"] == "Selesai"
    assert updated.json()["agenda"] == "Sidang"


@pytest.mark.asyncio
async def test_children_of_unknown_dispute(client):
    parties = await client.get(f"{API}/getPartiesByDispute", params={"dispute_id": 5})
    hearings = await client.get(f"{API}/getHearingsByDispute", params={"dispute_id": 5})
    assert parties.json() == []
    assert hearings.json() == []


@pytest.mark.asyncio
async def test_party_for_unknown_dispute_is_not_found(client):
    response = await client.post(f"{API}/createParty", json={
        "name": "Budi",
        "party_type": "individu",
        "role": "pemohon",
        "dispute_id": 12,
    })
    assert response.status_code == 404
    assert response.json()["error"] == "not_found"


@pytest.mark.asyncio
async def test_role_policy_is_enforced_server_side(client):
    await create_admin(client)

    async def public_body_actor():
        return ActorContext(actor_id=1, role=UserRole.PUBLIC_BODY)

    app.dependency_overrides[deps.get_current_actor] = public_body_actor
    response = await client.post(f"{API}/createDispute", json=DISPUTE)

    assert response.status_code == 403
    assert response.json()["error"] == "forbidden"
    assert (await client.get(f"{API}/getDisputes")).json() == []


@pytest.mark.asyncio
async def test_hearing_offset_returned_as_utc(client):
    await create_admin(client)
    dispute = await create_dispute(client)

    for agenda, date in (("late", "2024-01-15T05:00:00Z"), ("early", "2024-01-15T10:00:00+07:00")):
        response = await client.post(f"{API}/createHearing", json={
            "dispute_id": dispute["id"],
            "hearing_date": date,
            "agenda": agenda,
        })
        assert response.status_code == 200

    hearings = (await client.get(f"{API}/getHearingsByDispute", params={"dispute_id": dispute["id"]})).json()
    assert [h["agenda"] for h in hearings] == ["early", "late"]
    assert hearings[0]["hearing_date"] == "2024-01-15T03:00:00Z"
