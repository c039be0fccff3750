"""Core Layer — pure tasting logic, no IO, no async, no DB.

Invariants:
    - No module in core/ imports from services/, api/, infrastructure/, or db/
    - All functions are pure and deterministic over a snapshot

Design Decisions:
    - Functional core separated from imperative shell: routes fetch a snapshot,
      core computes, routes serialize
"""
