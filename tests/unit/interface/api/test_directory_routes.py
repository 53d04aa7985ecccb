"""API tests for the server directory endpoints."""

from datetime import timedelta

import pytest

from toplist.adapter.clock import FrozenClock
from toplist.domain.repository import ProfileRepository
from toplist.domain.value import ServerStatus
from tests.conftest import make_profile, seed_server
from tests.harness import create_client_fixture

api = create_client_fixture()


@pytest.mark.asyncio
async def test_list_servers_with_filters(api):
    client, container = api
    match = await seed_server(container, name="Lost Kingdom", type="PvP", votes_count=3)
    await seed_server(container, name="Lost Tower", type="PvE")
    await seed_server(container, name="Lost Pending", type="PvP", status=ServerStatus.PENDING)

    response = await client.get("/servers", params={"name": "lost", "type": "PvP"})

    assert response.status_code == 200
    servers = response.json()["servers"]
    assert [s["id"] for s in servers] == [match.id]
    assert servers[0]["status"] == "approved"
    assert servers[0]["votes_count"] == 3


@pytest.mark.asyncio
async def test_list_servers_opening_soon(api):
    client, container = api
    clock = await container.get(FrozenClock)
    upcoming = await seed_server(container, opening_date=clock.now() + timedelta(days=3))
    await seed_server(container, opening_date=clock.now() - timedelta(days=3))

    response = await client.get("/servers", params={"sort": "opening_soon"})

    assert [s["id"] for s in response.json()["servers"]] == [upcoming.id]


@pytest.mark.asyncio
async def test_list_servers_rejects_unknown_sort(api):
    client, _ = api

    response = await client.get("/servers", params={"sort": "random"})

    assert response.status_code == 400


@pytest.mark.asyncio
async def test_ranking(api):
    client, container = api
    for votes in (5, 50, 25):
        await seed_server(container, votes_count=votes)

    response = await client.get("/servers/ranking", params={"page": 1, "page_size": 2})

    assert response.status_code == 200
    body = response.json()
    assert body["total"] == 3
    assert body["page"] == 1
    assert body["page_size"] == 2
    assert [(s["rank"], s["votes_count"]) for s in body["servers"]] == [(1, 50), (2, 25)]


@pytest.mark.asyncio
async def test_ranking_page_size_is_bounded(api):
    client, _ = api

    response = await client.get("/servers/ranking", params={"page_size": 500})

    assert response.status_code == 400


@pytest.mark.asyncio
async def test_get_server(api):
    client, container = api
    server = await seed_server(container, name="Noria", status=ServerStatus.PENDING)

    response = await client.get(f"/servers/{server.id}")

    assert response.status_code == 200
    assert response.json()["name"] == "Noria"


@pytest.mark.asyncio
async def test_get_unknown_server_is_404(api):
    client, _ = api

    response = await client.get("/servers/777777")

    assert response.status_code == 404
    assert response.json() == {"error": "Server not found: 777777"}


@pytest.mark.asyncio
async def test_get_server_with_non_numeric_id_is_400(api):
    client, _ = api

    response = await client.get("/servers/abc")

    assert response.status_code == 400


@pytest.mark.asyncio
async def test_stats(api):
    client, container = api
    await seed_server(container, votes_count=10)
    await seed_server(container, votes_count=5)
    async with container() as request_container:
        profiles = await request_container.get(ProfileRepository)
        await profiles.save(make_profile("stats_user"))

    response = await client.get("/stats")

    assert response.json() == {"total_servers": 2, "total_users": 1, "total_votes": 15}


@pytest.mark.asyncio
async def test_health(api):
    client, _ = api

    response = await client.get("/health")

    assert response.status_code == 200
    assert response.json()["status"] == "healthy"
