"""Telegram Links Service — stores Telegram links and their owners behind a JSON API.

Invariants:
    - Package root contains no executable code (import side-effects prohibited)

Design Decisions:
    - Empty __init__.py: explicit imports only, no star exports
"""
