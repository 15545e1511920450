"""Public profile assembly: only active users, only their active links."""

import uuid

import pytest

from src.shared.services import LinkService, ProfileService, UserService


@pytest.fixture
def service(session):
    return ProfileService(session)


async def test_unknown_username_has_no_profile(service):
    assert await service.get_public_profile("nobody") is None


async def test_inactive_user_has_no_profile(service, session, make_user, make_link):
    alice = await make_user("alice")
    await make_link(alice, "A")
    await UserService(session).update_user(alice.id, is_active=False)

    assert await service.get_public_profile("alice") is None


async def test_active_user_without_links(service, make_user):
    await make_user("alice", display_name="Alice")

    profile = await service.get_public_profile("alice")

    assert profile is not None
    assert profile.user.display_name == "Alice"
    assert profile.links == []


async def test_only_active_links_in_position_order(service, session, make_user, make_link):
    alice = await make_user("alice")
    await make_link(alice, "Third", position=5)
    hidden = await make_link(alice, "Hidden", position=0)
    await make_link(alice, "First", position=1)
    await make_link(alice, "Second", position=2)
    await LinkService(session).update_link(hidden.id, is_active=False)

    profile = await service.get_public_profile("alice")

    assert [link.title for link in profile.links] == ["First", "Second", "Third"]


async def test_profile_excludes_other_users_links(service, make_user, make_link):
    alice = await make_user("alice")
    bob = await make_user("bob")
    await make_link(alice, "Mine")
    await make_link(bob, "Not mine")

    profile = await service.get_public_profile("alice")

    assert [link.title for link in profile.links] == ["Mine"]


async def test_find_visible_link(service, make_user, make_link):
    alice = await make_user("alice")
    link = await make_link(alice, "A")

    found = await service.find_visible_link("alice", link.id)

    assert found is not None
    assert found.id == link.id


async def test_find_visible_link_hides_inactive_and_foreign(service, session, make_user, make_link):
    alice = await make_user("alice")
    bob = await make_user("bob")
    inactive = await make_link(alice, "Off")
    await LinkService(session).update_link(inactive.id, is_active=False)
    foreign = await make_link(bob, "Bob's")

    assert await service.find_visible_link("alice", inactive.id) is None
    assert await service.find_visible_link("alice", foreign.id) is None
    assert await service.find_visible_link("alice", uuid.uuid4()) is None
    assert await service.find_visible_link("nobody", foreign.id) is None
