"""Services Layer — request handlers orchestrating validation, repositories and commits.

Invariants:
    - One service per aggregate (customers, credits)
    - Repositories and unit of work arrive through the constructor

Design Decisions:
    - Services raise typed core errors; they never build HTTP responses
"""
