"""ORM Models — SQLAlchemy declarative models for stored entities.

Invariants:
    - All models inherit from Base (db/base.py)
    - Importing this package registers every table on Base.metadata

Design Decisions:
    - One file per entity for locality
"""

from telegram_links.models.telegram_link import TelegramLink  # noqa: F401
