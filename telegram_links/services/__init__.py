"""Services — link operations orchestrating validation and the injected repository.

Invariants:
    - Services receive their repository as an argument (no module-level store)
    - Every operation returns a core.result.Result
"""
