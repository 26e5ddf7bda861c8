"""Infrastructure Layer — cross-cutting concerns (logging setup).

Invariants:
    - Infrastructure never imports from core/ validation logic
"""
