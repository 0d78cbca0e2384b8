"""Services Layer — persistence per resource on top of an AsyncSession.

Invariants:
    - Services never commit; controllers call commit_changes() once per request
    - SQLAlchemy errors are logged and re-raised as DatabaseError
"""
