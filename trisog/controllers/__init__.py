"""Controllers — validate, authorize and orchestrate one request per function.

Invariants:
    - Checks run in a fixed order: user id, path id, existence, payload, references
    - Every failure is a TrisogError; controllers never build HTTP responses
    - Mutations end with exactly one commit_changes()
"""
