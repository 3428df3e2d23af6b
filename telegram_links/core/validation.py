"""Field Validation — pure rules for telegram_link and owner_name.

Invariants:
    - Both fields are trimmed before any rule runs; the trimmed value is what gets stored
    - One message per violated rule, link rules before owner rules
    - TELEGRAM_LINK_PATTERN and OWNER_NAME_* are the single source of truth for the rules

Design Decisions:
    - Raise ValidationError with all messages at once: clients fix every field in one round trip
    - Required check (MissingFieldsError) separate from format check: absent field and
      whitespace-only field produce different messages
"""

import re
from dataclasses import dataclass

from telegram_links.core.errors import MissingFieldsError, ValidationError


TELEGRAM_LINK_PATTERN = re.compile(r"^https?://(t\.me|telegram\.me)/.+")
OWNER_NAME_MIN_LENGTH: int = 2
OWNER_NAME_MAX_LENGTH: int = 100

LINK_REQUIRED = "Telegram link is required"
LINK_INVALID = "Please provide a valid Telegram link"
OWNER_REQUIRED = "Owner name is required"
OWNER_TOO_SHORT = (
    f"Owner name must be at least {OWNER_NAME_MIN_LENGTH} characters long"
)
OWNER_TOO_LONG = f"Owner name cannot exceed {OWNER_NAME_MAX_LENGTH} characters"


@dataclass(frozen=True)
class LinkFields:
    """Trimmed, validated field values ready for storage."""
    telegram_link: str
    owner_name: str


def require_fields(telegram_link: str | None, owner_name: str | None) -> None:
    """Reject requests that omit either field (or send it empty)."""
    if not telegram_link or not owner_name:
        raise MissingFieldsError()


def link_errors(telegram_link: str) -> list[str]:
    if not telegram_link:
        return [LINK_REQUIRED]
    if not TELEGRAM_LINK_PATTERN.match(telegram_link):
        return [LINK_INVALID]
    return []


def owner_name_errors(owner_name: str) -> list[str]:
    if not owner_name:
        return [OWNER_REQUIRED]
    if len(owner_name) < OWNER_NAME_MIN_LENGTH:
        return [OWNER_TOO_SHORT]
    if len(owner_name) > OWNER_NAME_MAX_LENGTH:
        return [OWNER_TOO_LONG]
    return []


def validate_link_fields(telegram_link: str, owner_name: str) -> LinkFields:
    """Trim and validate both fields. Raises ValidationError listing every violation."""
    fields = LinkFields(
        telegram_link=telegram_link.strip(), owner_name=owner_name.strip(),
    )
    details = link_errors(fields.telegram_link) + owner_name_errors(fields.owner_name)
    if details:
        raise ValidationError(details)
    return fields
