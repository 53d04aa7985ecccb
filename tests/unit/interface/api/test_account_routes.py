"""API tests for the status probe and username lookup endpoints."""

import pytest

from toplist.adapter.status import MockStatusProbe
from toplist.domain.repository import ProfileRepository
from tests.conftest import make_profile
from tests.harness import create_client_fixture

api = create_client_fixture()


class TestCheckStatus:
    """Tests for POST /check-status."""

    @pytest.mark.asyncio
    async def test_online(self, api):
        client, container = api
        probe = await container.get(MockStatusProbe)
        probe.set_online("https://server.example")

        response = await client.post("/check-status", json={"url": "https://server.example"})

        assert response.status_code == 200
        assert response.json() == {"status": "online"}

    @pytest.mark.asyncio
    async def test_offline(self, api):
        client, _ = api

        response = await client.post("/check-status", json={"url": "https://down.example"})

        assert response.json() == {"status": "offline"}

    @pytest.mark.asyncio
    @pytest.mark.parametrize("body", [{}, {"url": ""}, {"url": "server.example"}])
    async def test_invalid_url_is_400(self, api, body):
        client, _ = api

        response = await client.post("/check-status", json=body)

        assert response.status_code == 400
        assert response.json() == {"error": "A valid URL is required."}


class TestGetEmailFromUsername:
    """Tests for POST /get-email-from-username."""

    @pytest.mark.asyncio
    async def test_found(self, api):
        client, container = api
        async with container() as request_container:
            repo = await request_container.get(ProfileRepository)
            await repo.save(make_profile("elf_archer", email="archer@example.com"))

        response = await client.post(
            "/get-email-from-username", json={"username": "elf_archer"}
        )

        assert response.status_code == 200
        assert response.json() == {"email": "archer@example.com"}

    @pytest.mark.asyncio
    async def test_missing_username_is_400(self, api):
        client, _ = api

        response = await client.post("/get-email-from-username", json={})

        assert response.status_code == 400
        assert response.json() == {"error": "A username is required."}

    @pytest.mark.asyncio
    async def test_unknown_username_is_404(self, api):
        client, _ = api

        response = await client.post(
            "/get-email-from-username", json={"username": "nobody_here"}
        )

        assert response.status_code == 404

    @pytest.mark.asyncio
    async def test_profile_without_email_is_500(self, api):
        client, container = api
        async with container() as request_container:
            repo = await request_container.get(ProfileRepository)
            await repo.save(make_profile("no_mail", email=None))

        response = await client.post("/get-email-from-username", json={"username": "no_mail"})

        assert response.status_code == 500
        assert response.json() == {"error": "Could not load user information."}

    @pytest.mark.asyncio
    async def test_get_is_405(self, api):
        client, _ = api

        response = await client.get("/get-email-from-username")

        assert response.status_code == 405
