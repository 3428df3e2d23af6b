"""Telegram Link Schemas — optional input fields and camelCase timestamps on output."""

from datetime import datetime, timezone
from uuid import uuid4

import pytest
from pydantic import ValidationError

from telegram_links.core.domain_types import LinkId, LinkRecord
from telegram_links.schemas.telegram_link import (
    TelegramLinkInput, TelegramLinkResponse,
)


def test_input_fields_default_to_none():
    body = TelegramLinkInput()
    assert body.telegram_link is None
    assert body.owner_name is None


def test_input_rejects_non_string_values():
    with pytest.raises(ValidationError):
        TelegramLinkInput(telegram_link=["https://t.me/a"], owner_name="Alice")


def test_response_serializes_camel_case_timestamps():
    ts = datetime(2025, 1, 2, 3, 4, 5, tzinfo=timezone.utc)
    record = LinkRecord(
        id=LinkId(uuid4()), telegram_link="https://t.me/a", owner_name="Alice",
        created_at=ts, updated_at=ts,
    )

    data = TelegramLinkResponse.from_record(record).to_json()

    assert set(data) == {"id", "telegram_link", "owner_name", "createdAt", "updatedAt"}
    assert data["id"] == str(record.id)
    assert data["createdAt"].startswith("2025-01-02T03:04:05")
