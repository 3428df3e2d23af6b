"""Pydantic Schemas — request/response shapes for the Telegram link API.

Invariants:
    - Schemas validate types at the system boundary; field rules live in core/validation.py

Design Decisions:
    - Separate from models: schemas are API contracts, models are persistence
"""
