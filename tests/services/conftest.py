"""Service test fixtures — in-memory LinkRepository fake and a pinned clock.

Invariants:
    - InMemoryLinkRepository honours the LinkRepository contract, including the
      storage-level uniqueness of telegram_link
    - fail_on lets a test turn any repository method into a StoreError

Design Decisions:
    - Plain dict store over SQLite: service tests exercise logic, not SQL
"""

import uuid
from datetime import datetime, timedelta, timezone

import pytest

from telegram_links.core.domain_types import LinkId, LinkRecord
from telegram_links.core.errors import DuplicateLinkError, StoreError


class InMemoryLinkRepository:
    """Dict-backed LinkRepository for service tests."""

    def __init__(self):
        self.records: dict[LinkId, LinkRecord] = {}
        self.fail_on: set[str] = set()

    def _check(self, operation: str) -> None:
        if operation in self.fail_on:
            raise StoreError(operation)

    async def find_page(self, search, skip, limit):
        self._check("find_page")
        needle = (search or "").lower()
        matching = [
            r for r in self.records.values()
            if not needle
            or needle in r.telegram_link.lower()
            or needle in r.owner_name.lower()
        ]
        matching.sort(key=lambda r: r.created_at, reverse=True)
        return matching[skip:skip + limit], len(matching)

    async def distinct_owner_names(self):
        self._check("distinct_owner_names")
        return sorted({r.owner_name for r in self.records.values()})

    async def get_by_id(self, link_id):
        self._check("get_by_id")
        return self.records.get(link_id)

    async def find_by_link(self, telegram_link, exclude_id=None):
        self._check("find_by_link")
        for r in self.records.values():
            if r.telegram_link == telegram_link and r.id != exclude_id:
                return r
        return None

    async def insert(self, telegram_link, owner_name, now):
        self._check("insert")
        if any(r.telegram_link == telegram_link for r in self.records.values()):
            raise DuplicateLinkError(telegram_link)
        record = LinkRecord(
            id=LinkId(uuid.uuid4()), telegram_link=telegram_link,
            owner_name=owner_name, created_at=now, updated_at=now,
        )
        self.records[record.id] = record
        return record

    async def update(self, link_id, telegram_link, owner_name, now):
        self._check("update")
        current = self.records.get(link_id)
        if current is None:
            return None
        record = LinkRecord(
            id=current.id, telegram_link=telegram_link, owner_name=owner_name,
            created_at=current.created_at, updated_at=now,
        )
        self.records[link_id] = record
        return record

    async def delete(self, link_id):
        self._check("delete")
        return self.records.pop(link_id, None) is not None


class TickingClock:
    """Returns a strictly increasing UTC instant on every call."""

    def __init__(self, start: datetime | None = None):
        self.current = start or datetime(2025, 1, 1, tzinfo=timezone.utc)

    def __call__(self) -> datetime:
        self.current += timedelta(seconds=1)
        return self.current


@pytest.fixture
def repo():
    return InMemoryLinkRepository()


@pytest.fixture
def clock():
    return TickingClock()
