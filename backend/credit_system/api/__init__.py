"""API Layer — FastAPI routes, dependencies and error handlers.

Invariants:
    - Routes registered explicitly in main.py (no auto-discovery)
    - All failures leave through api/error_handlers.py

Design Decisions:
    - Thin routes delegate to services
"""
