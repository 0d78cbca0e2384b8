"""Core Layer — pure domain logic, no IO, no async, no DB.

Invariants:
    - No module in core/ imports from services/, controllers/, api/, infrastructure/, or db/
    - Functions are pure; new_object_id() is the one source of randomness

Design Decisions:
    - Functional core separated from imperative shell: controllers read rows,
      call core rules, and hand results to services
"""
