"""Unit tests for ProfileService."""

import pytest

from toplist.domain.error import InternalError, NotFoundError
from toplist.domain.repository import ProfileRepository
from toplist.domain.service import ProfileService
from toplist.domain.value import Username
from tests.conftest import make_profile
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


@pytest.mark.asyncio
async def test_get_email_for_username(unit_env):
    service = await unit_env.get(ProfileService)
    repo = await unit_env.get(ProfileRepository)
    await repo.save(make_profile("dark_knight", email="dk@example.com"))

    email = await service.get_email_for_username(Username("dark_knight"))

    assert email == "dk@example.com"


@pytest.mark.asyncio
async def test_unknown_username_is_not_found(unit_env):
    service = await unit_env.get(ProfileService)

    with pytest.raises(NotFoundError, match="Profile not found: nobody"):
        await service.get_email_for_username(Username("nobody"))


@pytest.mark.asyncio
async def test_profile_without_email_is_internal_error(unit_env):
    service = await unit_env.get(ProfileService)
    repo = await unit_env.get(ProfileRepository)
    await repo.save(make_profile("ghost", email=None))

    with pytest.raises(InternalError, match="Could not load user information"):
        await service.get_email_for_username(Username("ghost"))


@pytest.mark.asyncio
async def test_count_profiles(unit_env):
    service = await unit_env.get(ProfileService)
    repo = await unit_env.get(ProfileRepository)
    await repo.save(make_profile("alpha"))
    await repo.save(make_profile("beta"))

    assert await service.count_profiles() == 2
