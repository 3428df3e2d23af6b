"""Domain Types — id parsing and pagination arithmetic."""

from uuid import uuid4

from telegram_links.core.domain_types import LinkPage, parse_link_id


def test_parse_link_id_accepts_uuid_strings():
    uid = uuid4()
    assert parse_link_id(str(uid)) == uid


def test_parse_link_id_rejects_garbage():
    assert parse_link_id("507f1f77bcf86cd799439011") is None
    assert parse_link_id("") is None


def test_total_pages_rounds_up():
    assert LinkPage(items=[], total=12, page=1, limit=5).total_pages == 3
    assert LinkPage(items=[], total=10, page=1, limit=5).total_pages == 2
    assert LinkPage(items=[], total=0, page=1, limit=10).total_pages == 0


def test_pagination_block_keys():
    block = LinkPage(items=[], total=7, page=3, limit=2).pagination()
    assert block == {
        "currentPage": 3, "totalPages": 4, "totalItems": 7, "itemsPerPage": 2,
    }
