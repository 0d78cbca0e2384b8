"""Infrastructure Layer — database sessions, bearer auth, and structured logging.

Invariants:
    - Infrastructure never imports from core/ domain logic beyond errors and types
    - All driver exceptions mapped to core/errors.py types
"""
