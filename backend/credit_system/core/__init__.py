"""Core Layer — domain rules, types and error taxonomy. No IO, no DB sessions.

Invariants:
    - No module in core/ imports from services/, api/ or infrastructure/
    - Validation functions are pure and deterministic (the clock is a parameter)

Design Decisions:
    - Functional core separated from imperative shell: core returns messages,
      services raise typed errors, api/ translates them
"""
