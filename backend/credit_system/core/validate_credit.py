"""Credit Validation — pure checks for credit requests and credit lookups.

Invariants:
    - Every check is PURE: returns None when valid, a violation message otherwise
    - Checks never raise; the service shell turns messages into typed errors
    - MAX_INSTALLMENTS / MAX_FIRST_INSTALLMENT_DAYS are the single source of truth for the limits

Design Decisions:
    - `today` is a parameter, not date.today(): callers own the clock, tests stay deterministic
    - Field checks (value, installments) are aggregated; cross-field rules are reported one at a time
"""

import re
from datetime import date, timedelta
from decimal import Decimal
from uuid import UUID

from credit_system.core.validate_money import check_money_digits


MIN_INSTALLMENTS: int = 1
MAX_INSTALLMENTS: int = 48
MAX_FIRST_INSTALLMENT_DAYS: int = 90

# Ids are INTEGER (int32) columns; anything outside can never be stored.
MIN_STORABLE_ID: int = 1
MAX_STORABLE_ID: int = 2**31 - 1

_CANONICAL_UUID = re.compile(
    r"[0-9a-fA-F]{8}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{12}"
)

INVALID_DATE_MESSAGE = "Invalid Date"
OWNERSHIP_MISMATCH_MESSAGE = "Contact admin"


def check_number_of_installments(number_of_installments: int) -> str | None:
    """Installments must be within [MIN_INSTALLMENTS, MAX_INSTALLMENTS]."""
    if number_of_installments < MIN_INSTALLMENTS:
        return f"must be greater than or equal to {MIN_INSTALLMENTS}"
    if number_of_installments > MAX_INSTALLMENTS:
        return f"must be less than or equal to {MAX_INSTALLMENTS}"
    return None


def check_credit_value(credit_value: Decimal) -> str | None:
    if credit_value <= 0:
        return "must be greater than 0"
    return check_money_digits(credit_value)


def collect_credit_violations(
    credit_value: Decimal, number_of_installments: int,
) -> list[str]:
    """All field-level violations of a credit request, in field order."""
    checks = (
        check_credit_value(credit_value),
        check_number_of_installments(number_of_installments),
    )
    return [violation for violation in checks if violation]


def latest_first_installment(today: date) -> date:
    return today + timedelta(days=MAX_FIRST_INSTALLMENT_DAYS)


def check_first_installment(day_first_installment: date, today: date) -> str | None:
    """First installment may be at most MAX_FIRST_INSTALLMENT_DAYS after submission."""
    if day_first_installment > latest_first_installment(today):
        return INVALID_DATE_MESSAGE
    return None


def parse_credit_code(raw: str) -> UUID | None:
    """Parse a credit code from a path segment. None when malformed.

    Only the canonical 36-character hyphenated form is accepted; braces,
    urn:uuid: prefixes, bare hex and surrounding whitespace are rejected.
    """
    if not _CANONICAL_UUID.fullmatch(raw):
        return None
    return UUID(raw)


def is_storable_id(customer_id: int) -> bool:
    """True when the id fits the id column; anything else cannot exist."""
    return MIN_STORABLE_ID <= customer_id <= MAX_STORABLE_ID


def check_credit_owner(owner_id: int, requested_customer_id: int) -> str | None:
    """Credit must belong to the customer asking for it.

    The message is deliberately generic: it does not tell the caller that
    the code exists for someone else.
    """
    if owner_id != requested_customer_id:
        return OWNERSHIP_MISMATCH_MESSAGE
    return None


def customer_not_found_message(customer_id: int) -> str:
    return f"Id {customer_id} not found"


def credit_not_found_message(credit_code: UUID) -> str:
    return f"Creditcode {credit_code} not found"


def format_credit_saved(credit_code: UUID, email: str) -> str:
    """Confirmation body returned after a credit request is persisted."""
    return f"Credit {credit_code} - Customer {email} saved!"
