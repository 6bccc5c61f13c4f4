"""Domain Types — rich types that replace bare primitives across the codebase.

Invariants:
    - CustomerId wraps int, CreditCode wraps UUID — never mix them in domain logic
    - All valid credit states encoded as an Enum — no raw string matching

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
    - str Enum: serializes to JSON without custom encoders
"""

from enum import Enum
from typing import NewType
from uuid import UUID


# ─── Identity Types ──────────────────────────────────────────────

CustomerId = NewType("CustomerId", int)
CreditCode = NewType("CreditCode", UUID)


# ─── Enums ───────────────────────────────────────────────────────

class CreditStatus(str, Enum):
    """Credit request lifecycle — maps to DB `status` column."""
    PENDING = "PENDING"
    APPROVED = "APPROVED"
    REJECTED = "REJECTED"
