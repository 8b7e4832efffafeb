"""Property endpoints over in-memory services."""

import uuid

from httpx import AsyncClient

from baribhara.domain.events import Topic
from tests.fakes import RecordingPublisher


def _body(**overrides) -> dict:
    body = {
        "name": "Lake View",
        "type": "apartment",
        "street": "12 Road 5",
        "city": "Dhaka",
        "district": "Dhaka",
        "division": "Dhaka",
        "rent_amount": "15000",
        "bedrooms": 2,
        "caretaker_id": str(uuid.uuid4()),
    }
    body.update(overrides)
    return body


async def test_create_get_update_delete(
    client: AsyncClient, auth_headers: dict[str, str], publisher: RecordingPublisher
) -> None:
    created = await client.post("/api/v1/properties", json=_body(), headers=auth_headers)
    assert created.status_code == 201
    data = created.json()["data"]
    assert created.json()["success"] is True
    assert data["status"] == "available"
    pid = data["id"]

    got = await client.get(f"/api/v1/properties/{pid}", headers=auth_headers)
    assert got.status_code == 200
    assert got.json()["data"]["id"] == pid

    updated = await client.put(
        f"/api/v1/properties/{pid}", json={"rent_amount": "20000"}, headers=auth_headers
    )
    assert updated.status_code == 200
    assert float(updated.json()["data"]["rent_amount"]) == 20000

    deleted = await client.delete(f"/api/v1/properties/{pid}", headers=auth_headers)
    assert deleted.status_code == 200
    assert deleted.json()["data"] is None

    missing = await client.get(f"/api/v1/properties/{pid}", headers=auth_headers)
    assert missing.status_code == 404
    assert missing.json()["error_code"] == "RESOURCE_NOT_FOUND"
    assert publisher.topics() == [
        Topic.PROPERTY_CREATED,
        Topic.PROPERTY_UPDATED,
        Topic.PROPERTY_DELETED,
    ]


async def test_create_invalid_body_returns_422(
    client: AsyncClient, auth_headers: dict[str, str]
) -> None:
    response = await client.post(
        "/api/v1/properties", json=_body(type="castle"), headers=auth_headers
    )
    assert response.status_code == 422
    body = response.json()
    assert body["error_code"] == "VALIDATION_ERROR"
    assert any("type" in e for e in body["errors"])


async def test_list_includes_pagination_meta(
    client: AsyncClient, auth_headers: dict[str, str]
) -> None:
    for i in range(3):
        await client.post(
            "/api/v1/properties", json=_body(name=f"P{i}"), headers=auth_headers
        )
    response = await client.get(
        "/api/v1/properties", params={"page": 2, "limit": 2}, headers=auth_headers
    )
    assert response.status_code == 200
    body = response.json()
    assert len(body["data"]) == 1
    assert body["meta"] == {"page": 2, "limit": 2, "total": 3, "total_pages": 2}


async def test_search_with_filters(client: AsyncClient, auth_headers: dict[str, str]) -> None:
    await client.post(
        "/api/v1/properties", json=_body(name="cheap", rent_amount="5000"), headers=auth_headers
    )
    await client.post(
        "/api/v1/properties", json=_body(name="dear", rent_amount="50000"), headers=auth_headers
    )
    response = await client.get(
        "/api/v1/properties/search",
        params={"max_rent": "10000", "city": "Dhaka"},
        headers=auth_headers,
    )
    assert response.status_code == 200
    assert [p["name"] for p in response.json()["data"]] == ["cheap"]


async def test_unknown_sort_column_returns_400(
    client: AsyncClient, auth_headers: dict[str, str]
) -> None:
    response = await client.get(
        "/api/v1/properties", params={"sort_by": "secret"}, headers=auth_headers
    )
    assert response.status_code == 400
    assert response.json()["error_code"] == "VALIDATION_ERROR"


async def test_list_by_caretaker(client: AsyncClient, auth_headers: dict[str, str]) -> None:
    caretaker_id = str(uuid.uuid4())
    await client.post(
        "/api/v1/properties", json=_body(caretaker_id=caretaker_id), headers=auth_headers
    )
    await client.post("/api/v1/properties", json=_body(), headers=auth_headers)
    response = await client.get(
        f"/api/v1/properties/by-caretaker/{caretaker_id}", headers=auth_headers
    )
    assert response.json()["meta"]["total"] == 1


async def test_malformed_id_returns_422(
    client: AsyncClient, auth_headers: dict[str, str]
) -> None:
    response = await client.get("/api/v1/properties/not-a-uuid", headers=auth_headers)
    assert response.status_code == 422


async def test_update_with_null_for_required_field_returns_422(
    client: AsyncClient, auth_headers: dict[str, str], publisher: RecordingPublisher
) -> None:
    created = await client.post("/api/v1/properties", json=_body(), headers=auth_headers)
    pid = created.json()["data"]["id"]

    response = await client.put(
        f"/api/v1/properties/{pid}", json={"name": None}, headers=auth_headers
    )
    assert response.status_code == 422
    body = response.json()
    assert body["error_code"] == "VALIDATION_ERROR"
    assert any("name" in e for e in body["errors"])

    got = await client.get(f"/api/v1/properties/{pid}", headers=auth_headers)
    assert got.json()["data"]["name"] == "Lake View"
    assert publisher.topics() == [Topic.PROPERTY_CREATED]


async def test_update_may_clear_nullable_field(
    client: AsyncClient, auth_headers: dict[str, str]
) -> None:
    created = await client.post(
        "/api/v1/properties", json=_body(landmark="Near the mosque"), headers=auth_headers
    )
    pid = created.json()["data"]["id"]

    response = await client.put(
        f"/api/v1/properties/{pid}", json={"landmark": None}, headers=auth_headers
    )
    assert response.status_code == 200
    assert response.json()["data"]["landmark"] is None
