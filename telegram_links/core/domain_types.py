"""Domain Types — rich types that replace bare primitives across the codebase.

Invariants:
    - LinkId wraps UUID — never use bare UUID in domain logic
    - LinkRecord is immutable; updated_at >= created_at
    - LinkPage.total_pages == ceil(total / limit)
    - page <= MAX_PAGE and limit <= MAX_PAGE_SIZE keep the row offset within a 64-bit integer

Design Decisions:
    - NewType over dataclass wrappers for ids: zero runtime cost, full type-checker support
    - Frozen dataclasses for records: repositories hand out values, never live ORM rows
"""

import math
from dataclasses import dataclass
from datetime import datetime
from typing import NewType
from uuid import UUID


# ─── Identity Types ──────────────────────────────────────────────

LinkId = NewType("LinkId", UUID)


def parse_link_id(raw: str) -> LinkId | None:
    """Parse a path identifier. None when it cannot name any record."""
    try:
        return LinkId(UUID(str(raw)))
    except ValueError:
        return None


# ─── Pagination bounds ───────────────────────────────────────────

MAX_PAGE: int = 1_000_000
MAX_PAGE_SIZE: int = 100


# ─── Records ─────────────────────────────────────────────────────

@dataclass(frozen=True)
class LinkRecord:
    """One stored Telegram link and its owner."""
    id: LinkId
    telegram_link: str
    owner_name: str
    created_at: datetime
    updated_at: datetime


@dataclass(frozen=True)
class LinkPage:
    """One page of a filtered listing plus the pre-pagination total."""
    items: list[LinkRecord]
    total: int
    page: int
    limit: int

    @property
    def total_pages(self) -> int:
        return math.ceil(self.total / self.limit)

    def pagination(self) -> dict:
        return {
            "currentPage": self.page,
            "totalPages": self.total_pages,
            "totalItems": self.total,
            "itemsPerPage": self.limit,
        }
