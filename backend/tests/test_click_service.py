import uuid

from src.shared.services import ClickService, LinkService


async def test_click_increments_count_and_timestamp(session, make_user, make_link):
    alice = await make_user("alice")
    link = await make_link(alice, "A")
    clicks = ClickService(session)
    for _ in range(5):
        await clicks.track_click(link.id)
    await session.refresh(link)
    assert link.click_count == 5
    before = link.updated_at

    assert await clicks.track_click(link.id) is True

    await session.refresh(link)
    assert link.click_count == 6
    assert link.updated_at > before


async def test_clicks_accumulate(session, make_user, make_link):
    alice = await make_user("alice")
    link = await make_link(alice, "A")
    clicks = ClickService(session)

    for _ in range(3):
        await clicks.track_click(link.id)

    await session.refresh(link)
    assert link.click_count == 3


async def test_click_on_unknown_link_is_not_an_error(session, make_user, make_link):
    alice = await make_user("alice")
    link = await make_link(alice, "A")

    assert await ClickService(session).track_click(uuid.uuid4()) is False

    await session.refresh(link)
    assert link.click_count == 0


async def test_click_counts_inactive_links(session, make_user, make_link):
    alice = await make_user("alice")
    link = await make_link(alice, "A")
    await LinkService(session).update_link(link.id, is_active=False)

    assert await ClickService(session).track_click(link.id) is True
