"""Tenant endpoints: CRUD, verification and property assignment."""

import uuid

from httpx import AsyncClient

from baribhara.domain.events import Topic
from tests.fakes import RecordingPublisher


async def _create(client: AsyncClient, headers: dict[str, str]) -> dict:
    response = await client.post(
        "/api/v1/tenants",
        json={"name": "Nusrat", "phone_number": "+8801811000000", "user_id": str(uuid.uuid4())},
        headers=headers,
    )
    assert response.status_code == 201, response.text
    return response.json()["data"]


async def test_create_missing_body_returns_422(
    client: AsyncClient, auth_headers: dict[str, str]
) -> None:
    response = await client.post("/api/v1/tenants", json={}, headers=auth_headers)
    assert response.status_code == 422


async def test_invalid_phone_returns_422(
    client: AsyncClient, auth_headers: dict[str, str]
) -> None:
    response = await client.post(
        "/api/v1/tenants",
        json={"name": "X", "phone_number": "call me", "user_id": str(uuid.uuid4())},
        headers=auth_headers,
    )
    assert response.status_code == 422


async def test_assign_and_remove_property(
    client: AsyncClient, auth_headers: dict[str, str], publisher: RecordingPublisher
) -> None:
    tenant = await _create(client, auth_headers)
    property_id = str(uuid.uuid4())

    assigned = await client.post(
        f"/api/v1/tenants/{tenant['id']}/assign-property",
        json={
            "property_id": property_id,
            "caretaker_id": str(uuid.uuid4()),
            "lease_start_date": "2026-01-01",
            "lease_end_date": "2026-12-31",
            "monthly_rent": "15000",
        },
        headers=auth_headers,
    )
    assert assigned.status_code == 200

    by_property = await client.get(
        f"/api/v1/tenants/by-property/{property_id}", headers=auth_headers
    )
    assert [t["id"] for t in by_property.json()["data"]] == [tenant["id"]]

    removed = await client.post(
        f"/api/v1/tenants/{tenant['id']}/remove-property", headers=auth_headers
    )
    assert removed.status_code == 200
    assert publisher.last(Topic.TENANT_PROPERTY_REMOVED)["property_id"] == property_id


async def test_assign_with_inverted_lease_dates_returns_422(
    client: AsyncClient, auth_headers: dict[str, str]
) -> None:
    tenant = await _create(client, auth_headers)
    response = await client.post(
        f"/api/v1/tenants/{tenant['id']}/assign-property",
        json={
            "property_id": str(uuid.uuid4()),
            "caretaker_id": str(uuid.uuid4()),
            "lease_start_date": "2026-12-31",
            "lease_end_date": "2026-01-01",
            "monthly_rent": "15000",
        },
        headers=auth_headers,
    )
    assert response.status_code == 422


async def test_verify_and_list_verified(
    client: AsyncClient, auth_headers: dict[str, str]
) -> None:
    tenant = await _create(client, auth_headers)
    await client.post(f"/api/v1/tenants/{tenant['id']}/verify", headers=auth_headers)
    response = await client.get("/api/v1/tenants/verified", headers=auth_headers)
    assert [t["id"] for t in response.json()["data"]] == [tenant["id"]]


async def test_by_user_unknown_returns_404(
    client: AsyncClient, auth_headers: dict[str, str]
) -> None:
    response = await client.get(
        f"/api/v1/tenants/by-user/{uuid.uuid4()}", headers=auth_headers
    )
    assert response.status_code == 404
