"""TelegramLink ORM — persists one Telegram link and its owner's display name.

Invariants:
    - id is a UUID primary key assigned on insert, never updated
    - telegram_link carries a UNIQUE index: the store rejects duplicates even when
      two requests pass the application-level pre-check concurrently
    - telegram_link is unbounded Text: the link pattern puts no limit on its length
    - owner_name is indexed for search and the distinct-owners listing
    - created_at and updated_at are always set by the service clock, never by clients

Design Decisions:
    - Generic Uuid type over postgresql.UUID: same model runs on PostgreSQL and SQLite
    - to_record() normalizes naive timestamps to UTC (SQLite drops tzinfo)
"""

import uuid
from datetime import datetime, timezone

from sqlalchemy import String, Text, DateTime, Index, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from telegram_links.core.domain_types import LinkId, LinkRecord
from telegram_links.db.base import Base


def _as_utc(value: datetime) -> datetime:
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


class TelegramLink(Base):
    """A stored Telegram link."""
    __tablename__ = "telegram_links"
    __table_args__ = (
        Index("ix_telegram_links_telegram_link", "telegram_link", unique=True),
        Index("ix_telegram_links_owner_name", "owner_name"),
    )

    id: Mapped[uuid.UUID] = mapped_column(
        Uuid, primary_key=True, default=uuid.uuid4,
    )
    telegram_link: Mapped[str] = mapped_column(Text, nullable=False)
    owner_name: Mapped[str] = mapped_column(String(100), nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )

    def to_record(self) -> LinkRecord:
        return LinkRecord(
            id=LinkId(self.id),
            telegram_link=self.telegram_link,
            owner_name=self.owner_name,
            created_at=_as_utc(self.created_at),
            updated_at=_as_utc(self.updated_at),
        )
