"""Boundary Protocols — contract between the link service and the record store.

Invariants:
    - Service NEVER imports a concrete store — it receives a LinkRepository explicitly
    - Implementations raise only LinkServiceError subclasses (DuplicateLinkError, StoreError)
    - Returned records are immutable LinkRecord values, never ORM rows

Design Decisions:
    - Protocol over ABC: structural subtyping, the in-memory test fake needs no base class
    - Async in Protocol: implementations do IO
"""

from datetime import datetime
from typing import Protocol

from telegram_links.core.domain_types import LinkId, LinkRecord


class LinkRepository(Protocol):
    """Contract for Telegram link persistence."""

    async def find_page(
        self, search: str | None, skip: int, limit: int,
    ) -> tuple[list[LinkRecord], int]:
        """Newest-first page matching search (case-insensitive, link OR owner) and the total."""
        ...

    async def distinct_owner_names(self) -> list[str]: ...

    async def get_by_id(self, link_id: LinkId) -> LinkRecord | None: ...

    async def find_by_link(
        self, telegram_link: str, exclude_id: LinkId | None = None,
    ) -> LinkRecord | None: ...

    async def insert(
        self, telegram_link: str, owner_name: str, now: datetime,
    ) -> LinkRecord: ...

    async def update(
        self, link_id: LinkId, telegram_link: str, owner_name: str, now: datetime,
    ) -> LinkRecord | None: ...

    async def delete(self, link_id: LinkId) -> bool: ...
