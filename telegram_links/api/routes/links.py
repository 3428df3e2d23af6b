"""Telegram Links — list, search, create, update and delete stored links.

Invariants:
    - /owners is registered before /{link_id} so it is never captured as an id
    - Handlers only shape input and call link_service; respond() maps every outcome
    - Both "" and "/" accepted for the collection routes (no redirect on trailing slash)

Design Decisions:
    - link_id taken as str: a malformed id cannot name a record and yields 404, not 400
"""

from fastapi import APIRouter, Depends, Query, status

from telegram_links.api.responses import respond
from telegram_links.core.domain_types import (
    MAX_PAGE, MAX_PAGE_SIZE, LinkPage, LinkRecord,
)
from telegram_links.core.repository_protocols import LinkRepository
from telegram_links.infrastructure.link_repository import get_link_repository
from telegram_links.schemas.telegram_link import (
    TelegramLinkInput, TelegramLinkResponse,
)
from telegram_links.services import link_service

router = APIRouter(prefix="/api/telegram-links", tags=["telegram-links"])


def _render_record(record: LinkRecord) -> dict:
    return TelegramLinkResponse.from_record(record).to_json()


def _render_page(page: LinkPage) -> list[dict]:
    return [_render_record(r) for r in page.items]


@router.get("")
@router.get("/", include_in_schema=False)
async def list_telegram_links(
    page: int = Query(1, ge=1, le=MAX_PAGE),
    limit: int = Query(10, ge=1, le=MAX_PAGE_SIZE),
    search: str = Query(""),
    repo: LinkRepository = Depends(get_link_repository),
):
    """List links newest first, optionally filtered by a substring of link or owner."""
    result = await link_service.list_links(repo, page, limit, search)
    return respond(
        result,
        render=_render_page,
        meta=lambda p: {"pagination": p.pagination()},
    )


@router.get("/owners")
async def list_owner_names(repo: LinkRepository = Depends(get_link_repository)):
    """Distinct owner names across all links."""
    result = await link_service.list_owner_names(repo)
    return respond(result, render=list)


@router.get("/{link_id}")
async def get_telegram_link(
    link_id: str, repo: LinkRepository = Depends(get_link_repository),
):
    result = await link_service.get_link(repo, link_id)
    return respond(result, render=_render_record)


@router.post("", status_code=status.HTTP_201_CREATED)
@router.post("/", status_code=status.HTTP_201_CREATED, include_in_schema=False)
async def create_telegram_link(
    body: TelegramLinkInput | None = None,
    repo: LinkRepository = Depends(get_link_repository),
):
    body = body or TelegramLinkInput()
    result = await link_service.create_link(
        repo, body.telegram_link, body.owner_name,
    )
    return respond(
        result,
        status.HTTP_201_CREATED,
        render=_render_record,
        message="Telegram link created successfully",
    )


@router.put("/{link_id}")
async def update_telegram_link(
    link_id: str,
    body: TelegramLinkInput | None = None,
    repo: LinkRepository = Depends(get_link_repository),
):
    body = body or TelegramLinkInput()
    result = await link_service.update_link(
        repo, link_id, body.telegram_link, body.owner_name,
    )
    return respond(
        result,
        render=_render_record,
        message="Telegram link updated successfully",
    )


@router.delete("/{link_id}")
async def delete_telegram_link(
    link_id: str, repo: LinkRepository = Depends(get_link_repository),
):
    result = await link_service.delete_link(repo, link_id)
    return respond(result, message="Telegram link deleted successfully")
