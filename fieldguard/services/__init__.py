"""Services Layer — the imperative shell around the pure validation core.

Invariants:
    - Services call core/ functions and add logging; no validation logic lives here
"""
