"""SQL Link Repository — LinkRepository implementation over an async SQLAlchemy session.

Invariants:
    - Only LinkRecord values leave this module, never ORM rows
    - A UNIQUE violation on telegram_link surfaces as DuplicateLinkError
    - Any other SQLAlchemy failure is rolled back and surfaces as StoreError
    - Search matches literally: LIKE wildcards in user input are escaped

Design Decisions:
    - One repository per request session (get_link_repository dependency)
    - Commit inside each mutating method: every store operation is a single write
"""

import logging
from contextlib import asynccontextmanager
from datetime import datetime
from typing import AsyncIterator

from fastapi import Depends
from sqlalchemy import delete, func, or_, select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from telegram_links.core.domain_types import LinkId, LinkRecord
from telegram_links.core.errors import DuplicateLinkError, StoreError
from telegram_links.core.repository_protocols import LinkRepository
from telegram_links.infrastructure.database import get_db
from telegram_links.models.telegram_link import TelegramLink

logger = logging.getLogger(__name__)


class SqlAlchemyLinkRepository:
    """Telegram link persistence backed by the telegram_links table."""

    def __init__(self, db: AsyncSession):
        self._db = db

    @asynccontextmanager
    async def _translate_errors(
        self, operation: str, telegram_link: str | None = None,
    ) -> AsyncIterator[None]:
        """Roll back and re-raise SQLAlchemy failures as domain errors."""
        try:
            yield
        except IntegrityError as e:
            await self._db.rollback()
            if telegram_link is not None:
                logger.warning(
                    f"Unique index rejected {telegram_link!r} during {operation}",
                    extra={"error_code": "DUPLICATE_LINK", "operation": operation},
                )
                raise DuplicateLinkError(telegram_link) from e
            logger.error(f"DB integrity error during {operation}: {e}")
            raise StoreError(operation) from e
        except SQLAlchemyError as e:
            await self._db.rollback()
            logger.error(
                f"DB error during {operation}: {e}",
                extra={"operation": operation},
            )
            raise StoreError(operation) from e

    async def find_page(
        self, search: str | None, skip: int, limit: int,
    ) -> tuple[list[LinkRecord], int]:
        query = select(TelegramLink)
        count_query = select(func.count()).select_from(TelegramLink)
        if search:
            condition = or_(
                TelegramLink.telegram_link.icontains(search, autoescape=True),
                TelegramLink.owner_name.icontains(search, autoescape=True),
            )
            query = query.where(condition)
            count_query = count_query.where(condition)
        query = (
            query.order_by(TelegramLink.created_at.desc(), TelegramLink.id.desc())
            .offset(skip)
            .limit(limit)
        )
        async with self._translate_errors("find_page"):
            rows = (await self._db.execute(query)).scalars().all()
            total = (await self._db.execute(count_query)).scalar_one()
        return [row.to_record() for row in rows], total

    async def distinct_owner_names(self) -> list[str]:
        async with self._translate_errors("distinct_owner_names"):
            result = await self._db.execute(
                select(TelegramLink.owner_name).distinct(),
            )
            return list(result.scalars().all())

    async def get_by_id(self, link_id: LinkId) -> LinkRecord | None:
        async with self._translate_errors("get_by_id"):
            row = await self._db.get(TelegramLink, link_id)
        return row.to_record() if row else None

    async def find_by_link(
        self, telegram_link: str, exclude_id: LinkId | None = None,
    ) -> LinkRecord | None:
        query = select(TelegramLink).where(
            TelegramLink.telegram_link == telegram_link,
        )
        if exclude_id is not None:
            query = query.where(TelegramLink.id != exclude_id)
        async with self._translate_errors("find_by_link"):
            row = (await self._db.execute(query.limit(1))).scalar_one_or_none()
        return row.to_record() if row else None

    async def insert(
        self, telegram_link: str, owner_name: str, now: datetime,
    ) -> LinkRecord:
        row = TelegramLink(
            telegram_link=telegram_link,
            owner_name=owner_name,
            created_at=now,
            updated_at=now,
        )
        async with self._translate_errors("insert", telegram_link):
            self._db.add(row)
            await self._db.commit()
        return row.to_record()

    async def update(
        self, link_id: LinkId, telegram_link: str, owner_name: str, now: datetime,
    ) -> LinkRecord | None:
        async with self._translate_errors("update", telegram_link):
            row = await self._db.get(TelegramLink, link_id)
            if row is None:
                return None
            row.telegram_link = telegram_link
            row.owner_name = owner_name
            row.updated_at = now
            await self._db.commit()
        return row.to_record()

    async def delete(self, link_id: LinkId) -> bool:
        async with self._translate_errors("delete"):
            result = await self._db.execute(
                delete(TelegramLink).where(TelegramLink.id == link_id),
            )
            await self._db.commit()
        return result.rowcount > 0


async def get_link_repository(
    db: AsyncSession = Depends(get_db),
) -> LinkRepository:
    """FastAPI dependency: repository bound to the request's DB session."""
    return SqlAlchemyLinkRepository(db)
