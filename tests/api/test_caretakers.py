"""Caretaker endpoints: search, top rated and status transitions."""

import uuid

from httpx import AsyncClient


async def _create(
    client: AsyncClient, headers: dict[str, str], phone: str, **fields
) -> dict:
    body = {"name": "Karim", "phone_number": phone, "user_id": str(uuid.uuid4())}
    body.update(fields)
    response = await client.post("/api/v1/caretakers", json=body, headers=headers)
    assert response.status_code == 201, response.text
    return response.json()["data"]


async def test_top_rated_only_verified(
    client: AsyncClient, auth_headers: dict[str, str]
) -> None:
    verified = await _create(client, auth_headers, "+8801911000001")
    await _create(client, auth_headers, "+8801911000002")
    await client.put(
        f"/api/v1/caretakers/{verified['id']}", json={"rating": "4.5"}, headers=auth_headers
    )
    await client.post(f"/api/v1/caretakers/{verified['id']}/verify", headers=auth_headers)

    response = await client.get(
        "/api/v1/caretakers/top-rated", params={"limit": 5}, headers=auth_headers
    )

    assert response.status_code == 200
    assert [c["id"] for c in response.json()["data"]] == [verified["id"]]


async def test_search_by_specialty(client: AsyncClient, auth_headers: dict[str, str]) -> None:
    plumber = await _create(
        client, auth_headers, "+8801911000003", specialties=["plumbing"]
    )
    await _create(client, auth_headers, "+8801911000004", specialties=["painting"])
    response = await client.get(
        "/api/v1/caretakers/search",
        params=[("specialties", "plumbing"), ("specialties", "wiring")],
        headers=auth_headers,
    )
    assert [c["id"] for c in response.json()["data"]] == [plumber["id"]]


async def test_suspended_caretaker_is_hidden_from_search(
    client: AsyncClient, auth_headers: dict[str, str]
) -> None:
    caretaker = await _create(client, auth_headers, "+8801911000005")
    await client.post(
        f"/api/v1/caretakers/{caretaker['id']}/suspend", headers=auth_headers
    )
    response = await client.get("/api/v1/caretakers/search", headers=auth_headers)
    assert response.json()["meta"]["total"] == 0


async def test_rating_out_of_range_returns_422(
    client: AsyncClient, auth_headers: dict[str, str]
) -> None:
    caretaker = await _create(client, auth_headers, "+8801911000006")
    response = await client.put(
        f"/api/v1/caretakers/{caretaker['id']}", json={"rating": "7"}, headers=auth_headers
    )
    assert response.status_code == 422
