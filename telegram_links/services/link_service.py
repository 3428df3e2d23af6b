"""Link Service — the six Telegram link operations over an injected LinkRepository.

Invariants:
    - Every operation takes the repository explicitly and returns a Result, never raises
      LinkServiceError to the caller
    - Fields are trimmed and validated before any uniqueness check or write
    - Uniqueness pre-check excludes the record being updated
    - Store failures are reported with an operation-specific message, internals only logged

Design Decisions:
    - Pre-check before write gives a clean 409 in the common case; the UNIQUE index on
      telegram_link (models/telegram_link.py) closes the race between concurrent writers
    - clock parameter: tests pin timestamps without patching datetime
"""

import logging
from datetime import datetime, timezone
from typing import Callable

from telegram_links.core.domain_types import LinkPage, LinkRecord, parse_link_id
from telegram_links.core.errors import (
    DuplicateLinkError, LinkNotFoundError, LinkServiceError, StoreError,
)
from telegram_links.core.repository_protocols import LinkRepository
from telegram_links.core.result import Err, Ok, Result
from telegram_links.core.validation import require_fields, validate_link_fields

logger = logging.getLogger(__name__)

Clock = Callable[[], datetime]

FETCH_LINKS_FAILED = "Failed to fetch telegram links"
FETCH_OWNERS_FAILED = "Failed to fetch owner names"
FETCH_LINK_FAILED = "Failed to fetch telegram link"
CREATE_FAILED = "Failed to create telegram link"
UPDATE_FAILED = "Failed to update telegram link"
DELETE_FAILED = "Failed to delete telegram link"


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def _store_failure(exc: StoreError, message: str) -> Err:
    logger.error(
        f"{message}: {exc.message}",
        exc_info=exc,
        extra={"error_code": exc.code, "operation": exc.operation},
    )
    return Err(StoreError(exc.operation, message, exc.context))


async def list_links(
    repo: LinkRepository, page: int = 1, limit: int = 10, search: str = "",
) -> Result[LinkPage]:
    """Newest-first page of links whose link or owner contains search (case-insensitive)."""
    skip = (page - 1) * limit
    try:
        items, total = await repo.find_page(search or None, skip, limit)
    except StoreError as e:
        return _store_failure(e, FETCH_LINKS_FAILED)
    return Ok(LinkPage(items=items, total=total, page=page, limit=limit))


async def list_owner_names(repo: LinkRepository) -> Result[list[str]]:
    try:
        return Ok(await repo.distinct_owner_names())
    except StoreError as e:
        return _store_failure(e, FETCH_OWNERS_FAILED)


async def get_link(repo: LinkRepository, raw_id: str) -> Result[LinkRecord]:
    link_id = parse_link_id(raw_id)
    if link_id is None:
        return Err(LinkNotFoundError(raw_id))
    try:
        record = await repo.get_by_id(link_id)
    except StoreError as e:
        return _store_failure(e, FETCH_LINK_FAILED)
    if record is None:
        return Err(LinkNotFoundError(raw_id))
    return Ok(record)


async def create_link(
    repo: LinkRepository,
    telegram_link: str | None,
    owner_name: str | None,
    clock: Clock = utc_now,
) -> Result[LinkRecord]:
    """Validate, reject duplicates, insert. Timestamps both set to the same instant."""
    try:
        require_fields(telegram_link, owner_name)
        fields = validate_link_fields(telegram_link, owner_name)
        if await repo.find_by_link(fields.telegram_link):
            raise DuplicateLinkError(fields.telegram_link)
        record = await repo.insert(fields.telegram_link, fields.owner_name, clock())
    except StoreError as e:
        return _store_failure(e, CREATE_FAILED)
    except LinkServiceError as e:
        return Err(e)
    logger.info(
        f"Created telegram link {record.telegram_link}",
        extra={"record_id": str(record.id)},
    )
    return Ok(record)


async def update_link(
    repo: LinkRepository,
    raw_id: str,
    telegram_link: str | None,
    owner_name: str | None,
    clock: Clock = utc_now,
) -> Result[LinkRecord]:
    """Replace both fields of an existing record and bump updated_at."""
    try:
        require_fields(telegram_link, owner_name)
        fields = validate_link_fields(telegram_link, owner_name)
        link_id = parse_link_id(raw_id)
        if link_id is None or await repo.get_by_id(link_id) is None:
            raise LinkNotFoundError(raw_id)
        if await repo.find_by_link(fields.telegram_link, exclude_id=link_id):
            raise DuplicateLinkError(fields.telegram_link)
        record = await repo.update(
            link_id, fields.telegram_link, fields.owner_name, clock(),
        )
        if record is None:
            raise LinkNotFoundError(raw_id)
    except StoreError as e:
        return _store_failure(e, UPDATE_FAILED)
    except LinkServiceError as e:
        return Err(e)
    logger.info(
        f"Updated telegram link {record.telegram_link}",
        extra={"record_id": str(record.id)},
    )
    return Ok(record)


async def delete_link(repo: LinkRepository, raw_id: str) -> Result[None]:
    link_id = parse_link_id(raw_id)
    if link_id is None:
        return Err(LinkNotFoundError(raw_id))
    try:
        deleted = await repo.delete(link_id)
    except StoreError as e:
        return _store_failure(e, DELETE_FAILED)
    if not deleted:
        return Err(LinkNotFoundError(raw_id))
    logger.info(f"Deleted telegram link {raw_id}", extra={"record_id": raw_id})
    return Ok(None)
