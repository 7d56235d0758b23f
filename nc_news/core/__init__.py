"""Core Layer: validation, outcomes and error mapping. No IO, no async, no DB.

Invariants:
    - No module in core/ imports from services/, api/, infrastructure/, or db/
    - All functions are pure and deterministic

Design Decisions:
    - Functional core separated from imperative shell: services await the
      repository, core decides what the result means
"""
