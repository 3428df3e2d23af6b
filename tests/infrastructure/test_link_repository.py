"""SQL Link Repository — storage-level guarantees the service relies on.

Invariants:
    - The UNIQUE index rejects a duplicate even when the pre-check is bypassed
    - Records leave the repository with UTC timestamps
    - delete() reports whether a row was removed
"""

from datetime import datetime, timedelta, timezone
from uuid import uuid4

import pytest

from telegram_links.core.domain_types import LinkId
from telegram_links.core.errors import DuplicateLinkError
from telegram_links.infrastructure.link_repository import SqlAlchemyLinkRepository

T0 = datetime(2025, 3, 1, 12, 0, tzinfo=timezone.utc)


@pytest.fixture
def sql_repo(test_db):
    return SqlAlchemyLinkRepository(test_db)


async def test_unique_index_rejects_concurrent_duplicate(sql_repo):
    """Two writers that both passed find_by_link: the second insert is a 409."""
    await sql_repo.insert("https://t.me/race", "Alice", T0)
    with pytest.raises(DuplicateLinkError):
        await sql_repo.insert("https://t.me/race", "Bob", T0)

    records, total = await sql_repo.find_page(None, 0, 10)
    assert total == 1
    assert records[0].owner_name == "Alice"


async def test_unique_index_rejects_update_into_taken_link(sql_repo):
    await sql_repo.insert("https://t.me/taken", "Alice", T0)
    mine = await sql_repo.insert("https://t.me/mine", "Bob", T0)
    with pytest.raises(DuplicateLinkError):
        await sql_repo.update(mine.id, "https://t.me/taken", "Bob", T0)


async def test_get_by_id_returns_utc_timestamps(sql_repo, test_session_factory):
    created = await sql_repo.insert("https://t.me/abc", "Alice", T0)

    async with test_session_factory() as fresh:
        fetched = await SqlAlchemyLinkRepository(fresh).get_by_id(created.id)

    assert fetched.created_at == T0
    assert fetched.created_at.tzinfo is not None


async def test_find_page_orders_newest_first_and_counts(sql_repo):
    for i in range(4):
        await sql_repo.insert(f"https://t.me/{i}", "Alice", T0 + timedelta(minutes=i))

    records, total = await sql_repo.find_page(None, 1, 2)

    assert total == 4
    assert [r.telegram_link for r in records] == ["https://t.me/2", "https://t.me/1"]


async def test_find_by_link_excludes_given_id(sql_repo):
    created = await sql_repo.insert("https://t.me/abc", "Alice", T0)
    assert await sql_repo.find_by_link("https://t.me/abc") == created
    assert await sql_repo.find_by_link("https://t.me/abc", exclude_id=created.id) is None


async def test_update_missing_row_returns_none(sql_repo):
    assert await sql_repo.update(LinkId(uuid4()), "https://t.me/x", "Al", T0) is None


async def test_delete_reports_removal(sql_repo):
    created = await sql_repo.insert("https://t.me/abc", "Alice", T0)
    assert await sql_repo.delete(created.id) is True
    assert await sql_repo.delete(created.id) is False


async def test_find_page_search_folds_non_ascii_case(sql_repo):
    await sql_repo.insert("https://t.me/one", "Алиса", T0)
    await sql_repo.insert("https://t.me/two", "Борис", T0)

    records, total = await sql_repo.find_page("алиса", 0, 10)

    assert total == 1
    assert records[0].owner_name == "Алиса"


async def test_insert_accepts_link_longer_than_varchar_limit(sql_repo):
    link = "https://t.me/" + "a" * 3000
    created = await sql_repo.insert(link, "Alice", T0)
    assert (await sql_repo.get_by_id(created.id)).telegram_link == link
