"""Link ordering: append on create, close gaps on delete, batch reorder."""

import uuid

import pytest

from src.shared.core.exceptions import (
    InvalidArgumentError,
    LinkNotFoundError,
    UserNotFoundError,
)
from src.shared.services import ClickService, LinkService


@pytest.fixture
def service(session):
    return LinkService(session)


async def positions(service, user):
    return [(link.title, link.position) for link in await service.list_links(user.id)]


async def test_create_without_position_appends(service, make_user, make_link):
    alice = await make_user("alice")

    for title in ["A", "B", "C", "D"]:
        await make_link(alice, title)

    assert await positions(service, alice) == [("A", 0), ("B", 1), ("C", 2), ("D", 3)]


async def test_first_link_starts_at_zero(service, make_user):
    alice = await make_user("alice")

    assert await service.next_position(alice.id) == 0


async def test_explicit_position_is_kept_verbatim(service, make_user, make_link):
    alice = await make_user("alice")
    await make_link(alice, "A")

    link = await make_link(alice, "Far", position=10)

    assert link.position == 10
    assert await service.next_position(alice.id) == 11


async def test_explicit_position_allows_duplicates(service, make_user, make_link):
    alice = await make_user("alice")
    await make_link(alice, "A")

    dup = await make_link(alice, "Dup", position=0)

    assert dup.position == 0
    assert [p for _, p in await positions(service, alice)] == [0, 0]


async def test_sequences_are_independent_per_user(service, make_user, make_link):
    alice = await make_user("alice")
    bob = await make_user("bob")

    await make_link(alice, "A", position=7)
    first_for_bob = await make_link(bob, "B")

    assert first_for_bob.position == 0
    assert await service.next_position(alice.id) == 8


async def test_create_for_unknown_user_fails(service):
    with pytest.raises(UserNotFoundError):
        await service.create_link(uuid.uuid4(), title="A", url="https://a.example.com")


async def test_delete_keeps_order_dense(service, make_user, make_link):
    alice = await make_user("alice")
    links = [await make_link(alice, title) for title in ["A", "B", "C", "D", "E"]]

    assert await service.delete_link(links[2].id) is True

    assert await positions(service, alice) == [("A", 0), ("B", 1), ("D", 2), ("E", 3)]


async def test_delete_only_shifts_owner_links(service, make_user, make_link):
    alice = await make_user("alice")
    bob = await make_user("bob")
    a0 = await make_link(alice, "A0")
    await make_link(alice, "A1")
    await make_link(bob, "B0")
    await make_link(bob, "B1")

    await service.delete_link(a0.id)

    assert await positions(service, alice) == [("A1", 0)]
    assert await positions(service, bob) == [("B0", 0), ("B1", 1)]


async def test_delete_leaves_existing_gaps(service, make_user, make_link):
    alice = await make_user("alice")
    await make_link(alice, "A", position=0)
    b = await make_link(alice, "B", position=3)
    await make_link(alice, "C", position=7)

    await service.delete_link(b.id)

    assert await positions(service, alice) == [("A", 0), ("C", 6)]


async def test_delete_unknown_link_fails(service):
    with pytest.raises(LinkNotFoundError):
        await service.delete_link(uuid.uuid4())


async def test_reorder_applies_every_position(service, make_user, make_link):
    alice = await make_user("alice")
    a = await make_link(alice, "A")
    b = await make_link(alice, "B")
    c = await make_link(alice, "C")

    assert await service.reorder_links(alice.id, [(c.id, 0), (a.id, 1), (b.id, 2)]) is True

    assert await positions(service, alice) == [("C", 0), ("A", 1), ("B", 2)]


async def test_reorder_accepts_duplicate_positions(service, make_user, make_link):
    alice = await make_user("alice")
    a = await make_link(alice, "A")
    b = await make_link(alice, "B")

    await service.reorder_links(alice.id, [(a.id, 1), (b.id, 1)])

    assert [p for _, p in await positions(service, alice)] == [1, 1]


async def test_reorder_with_foreign_link_changes_nothing(service, make_user, make_link):
    alice = await make_user("alice")
    bob = await make_user("bob")
    a = await make_link(alice, "A")
    b = await make_link(alice, "B")
    foreign = await make_link(bob, "Bob's")

    with pytest.raises(InvalidArgumentError) as exc_info:
        await service.reorder_links(alice.id, [(b.id, 0), (foreign.id, 1), (a.id, 2)])

    assert exc_info.value.error_code == "INVALID_ARGUMENT"
    assert exc_info.value.details["invalid_link_ids"] == [str(foreign.id)]
    assert await positions(service, alice) == [("A", 0), ("B", 1)]
    assert await positions(service, bob) == [("Bob's", 0)]


async def test_reorder_with_unknown_link_fails(service, make_user, make_link):
    alice = await make_user("alice")
    a = await make_link(alice, "A")

    with pytest.raises(InvalidArgumentError):
        await service.reorder_links(alice.id, [(a.id, 3), (uuid.uuid4(), 0)])

    assert await positions(service, alice) == [("A", 0)]


async def test_reorder_with_repeated_link_fails(service, make_user, make_link):
    alice = await make_user("alice")
    a = await make_link(alice, "A")

    with pytest.raises(InvalidArgumentError):
        await service.reorder_links(alice.id, [(a.id, 1), (a.id, 2)])


async def test_empty_reorder_succeeds(service):
    assert await service.reorder_links(uuid.uuid4(), []) is True


async def test_update_position_does_not_shift_others(service, make_user, make_link):
    alice = await make_user("alice")
    a = await make_link(alice, "A")
    await make_link(alice, "B")

    updated = await service.update_link(a.id, position=1)

    assert updated.position == 1
    assert [p for _, p in await positions(service, alice)] == [1, 1]


async def test_update_only_touches_given_fields(service, session, make_user, make_link):
    alice = await make_user("alice")
    link = await make_link(alice, "A", description="old", icon="star")
    await session.refresh(link)
    before = link.updated_at

    updated = await service.update_link(link.id, title="New", description=None)
    await session.refresh(updated)

    assert updated.title == "New"
    assert updated.description is None
    assert updated.icon == "star"
    assert updated.url == "https://a.example.com"
    assert updated.updated_at > before


async def test_update_with_no_fields_refreshes_timestamp(service, session, make_user, make_link):
    alice = await make_user("alice")
    link = await make_link(alice, "A")
    await session.refresh(link)
    before = link.updated_at

    updated = await service.update_link(link.id)
    await session.refresh(updated)

    assert updated.updated_at > before


async def test_update_unknown_link_fails(service):
    with pytest.raises(LinkNotFoundError):
        await service.update_link(uuid.uuid4(), title="x")


async def test_list_includes_inactive_links(service, make_user, make_link):
    alice = await make_user("alice")
    a = await make_link(alice, "A")
    await make_link(alice, "B")
    await service.update_link(a.id, is_active=False)

    assert [title for title, _ in await positions(service, alice)] == ["A", "B"]


async def test_alice_walkthrough(service, make_user, make_link):
    alice = await make_user("alice")
    a = await make_link(alice, "A")
    b = await make_link(alice, "B")
    c = await make_link(alice, "C")
    assert [a.position, b.position, c.position] == [0, 1, 2]

    await service.delete_link(b.id)
    assert await positions(service, alice) == [("A", 0), ("C", 1)]

    await service.reorder_links(alice.id, [(c.id, 0), (a.id, 1)])
    assert await positions(service, alice) == [("C", 0), ("A", 1)]


async def test_update_rejects_owner_and_counter_fields(service, session, make_user, make_link):
    alice = await make_user("alice")
    bob = await make_user("bob")
    link = await make_link(alice, "A")
    clicks = ClickService(session)
    for _ in range(3):
        await clicks.track_click(link.id)

    with pytest.raises(InvalidArgumentError) as exc_info:
        await service.update_link(link.id, click_count=0, user_id=bob.id, title="Moved")

    assert exc_info.value.details == {"fields": ["click_count", "user_id"]}
    await session.refresh(link)
    assert link.click_count == 3
    assert link.user_id == alice.id
    assert link.title == "A"
