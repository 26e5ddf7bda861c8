"""fieldguard — declarative field validation for request parameters.

Invariants:
    - Package root contains no executable code (import side-effects prohibited)

Design Decisions:
    - Empty __init__.py: explicit imports from the defining module, no re-exports
      (FieldValidator lives in fieldguard.services.field_validator,
      register_validation in fieldguard.api.plugin)
"""
