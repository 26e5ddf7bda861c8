"""API Layer — FastAPI glue: registration, request params, dependencies, error handlers.

Invariants:
    - No validation logic here; routes get a RequestValidation and call validate()
    - Transport details stop at collect_params(): the core only sees a plain mapping
"""
