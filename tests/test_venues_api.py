"""Venue endpoints."""

import pytest


@pytest.mark.asyncio
async def test_create_and_list_venues(client, auth_headers, admin_identity):
    headers = auth_headers(admin_identity)
    r = await client.post(
        "/api/v1/venues",
        json={
            "name": "Seminar Hall",
            "location": "Block B",
            "capacity": 120,
            "mapLink": "https://maps.example/hall",
        },
        headers=headers,
    )
    assert r.status_code == 201
    venue = r.json()["data"]
    assert len(venue["id"]) == 24
    assert venue["mapLink"] == "https://maps.example/hall"

    await client.post("/api/v1/venues", json={"name": "Auditorium"}, headers=headers)

    r = await client.get("/api/v1/venues")
    assert [v["name"] for v in r.json()["data"]] == ["Auditorium", "Seminar Hall"]


@pytest.mark.asyncio
async def test_create_venue_requires_auth(client):
    r = await client.post("/api/v1/venues", json={"name": "Nowhere"})
    assert r.status_code == 401


@pytest.mark.asyncio
async def test_event_created_with_new_venue(client, auth_headers, admin_identity):
    headers = auth_headers(admin_identity)
    venue = (
        await client.post("/api/v1/venues", json={"name": "Lab 3"}, headers=headers)
    ).json()["data"]

    r = await client.post(
        "/api/v1/events",
        json={"title": "Code Sprint", "venueId": venue["id"]},
        headers=headers,
    )
    data = r.json()["data"]
    assert data["venueId"] == venue["id"]
    assert data["venue"] == venue
