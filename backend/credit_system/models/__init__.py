"""ORM Models — SQLAlchemy declarative models for all domain entities.

Invariants:
    - All models inherit from Base (db/base.py)
    - Customer is the aggregate root; every Credit is scoped by customer_id

Design Decisions:
    - One file per entity for locality
    - All models imported here so SQLAlchemy resolves string-based relationship()
      references before any query runs
"""

from credit_system.models.customer import Customer  # noqa: F401
from credit_system.models.credit import Credit  # noqa: F401
