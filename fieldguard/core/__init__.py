"""Core Layer — the validation engine itself: pure logic, no IO, no logging.

Invariants:
    - No module in core/ imports from services/, api/, or infrastructure/
    - All functions are pure and deterministic; the only mutable value touched
      is a caller-owned CallContext

Design Decisions:
    - Functional core separated from imperative shell: services/ logs and
      wires the request, core/ only computes
"""
