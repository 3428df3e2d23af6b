"""Telegram Link Schemas — request body and record/envelope shapes for the link API.

Invariants:
    - TelegramLinkInput fields are optional at the type level: an absent field is a
      domain error (MissingFieldsError, 400) with its own message, not a schema error
    - Non-string field values are schema errors (400 Validation error)
    - TelegramLinkResponse serializes timestamps as createdAt/updatedAt

Design Decisions:
    - serialization_alias over renaming attributes: Python side stays snake_case
"""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, Field

from telegram_links.core.domain_types import LinkRecord


class TelegramLinkInput(BaseModel):
    """Body of POST / and PUT /{id}."""
    telegram_link: str | None = None
    owner_name: str | None = None


class TelegramLinkResponse(BaseModel):
    """Public representation of a stored link."""
    id: UUID
    telegram_link: str
    owner_name: str
    created_at: datetime = Field(serialization_alias="createdAt")
    updated_at: datetime = Field(serialization_alias="updatedAt")

    @classmethod
    def from_record(cls, record: LinkRecord) -> "TelegramLinkResponse":
        return cls(
            id=record.id,
            telegram_link=record.telegram_link,
            owner_name=record.owner_name,
            created_at=record.created_at,
            updated_at=record.updated_at,
        )

    def to_json(self) -> dict:
        return self.model_dump(mode="json", by_alias=True)

