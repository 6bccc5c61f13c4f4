"""Credit Application System — customers and their credit requests over a REST API.

Invariants:
    - Package root contains no executable code (import side-effects prohibited)
"""
