"""Services Layer: orchestrates validation, repository IO, and result mapping.

Invariants:
    - Every service returns an Outcome (Success | Failure), never raises for
      expected failures
    - Validation happens before any repository call

Design Decisions:
    - One module per resource for locality
    - Repository injected as an argument, never imported as a global
"""
