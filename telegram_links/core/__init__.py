"""Core — pure domain logic for Telegram links: types, validation rules, errors, results.

Invariants:
    - Core NEVER imports from infrastructure, api or services
    - No IO in this package; persistence is reached through repository_protocols
"""
