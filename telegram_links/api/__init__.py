"""API Layer — FastAPI routes, response envelopes and error handlers.

Invariants:
    - Routes registered explicitly in main.py (no auto-discovery)
    - Every response body is a {success, ...} envelope

Design Decisions:
    - Thin routes delegate to services/link_service.py
"""
