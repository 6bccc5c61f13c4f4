"""Customer Validation — pure field checks for customer registration and updates.

Invariants:
    - Every check is PURE: returns None when valid, a violation message otherwise
    - Tax ids are Brazilian CPFs: 11 digits, not all equal, both check digits valid
    - Email syntax only — no DNS / deliverability lookups

Design Decisions:
    - email-validator over a hand-written regex: same engine pydantic's EmailStr uses
    - Punctuation in tax ids ("284.759.346-25") accepted; only digits are compared
"""

from decimal import Decimal

from email_validator import EmailNotValidError, validate_email

from credit_system.core.validate_money import check_money_digits


BLANK_MESSAGE = "Invalid input"
TAX_ID_MESSAGE = "Invalid tax id"
EMAIL_MESSAGE = "Invalid email"
INCOME_MESSAGE = "must be greater than or equal to 0"

TAX_ID_LENGTH = 11


def check_not_blank(value: str | None) -> str | None:
    if value is None or not value.strip():
        return BLANK_MESSAGE
    return None


def normalize_tax_id(tax_id: str) -> str:
    return "".join(ch for ch in tax_id if ch.isdigit())


def _cpf_check_digit(digits: list[int]) -> int:
    weight = len(digits) + 1
    total = sum(d * (weight - i) for i, d in enumerate(digits))
    remainder = total % 11
    return 0 if remainder < 2 else 11 - remainder


def is_valid_tax_id(tax_id: str) -> bool:
    """CPF check-digit validation."""
    raw = normalize_tax_id(tax_id)
    if len(raw) != TAX_ID_LENGTH or len(set(raw)) == 1:
        return False
    digits = [int(ch) for ch in raw]
    first = _cpf_check_digit(digits[:9])
    second = _cpf_check_digit(digits[:9] + [first])
    return digits[9] == first and digits[10] == second


def check_tax_id(tax_id: str | None) -> str | None:
    if not tax_id or not is_valid_tax_id(tax_id):
        return TAX_ID_MESSAGE
    return None


def check_email(email: str | None) -> str | None:
    if not email:
        return EMAIL_MESSAGE
    try:
        validate_email(email, check_deliverability=False)
    except EmailNotValidError:
        return EMAIL_MESSAGE
    return None


def check_income(income: Decimal | None) -> str | None:
    if income is None or income < 0:
        return INCOME_MESSAGE
    return check_money_digits(income)


def collect_customer_violations(
    first_name: str,
    last_name: str,
    tax_id: str,
    income: Decimal,
    email: str,
    password: str,
    zip_code: str,
    street: str,
) -> list[str]:
    """All violations of a registration request, in field order."""
    checks = (
        check_not_blank(first_name),
        check_not_blank(last_name),
        check_tax_id(tax_id),
        check_income(income),
        check_email(email),
        check_not_blank(password),
        check_not_blank(zip_code),
        check_not_blank(street),
    )
    return [violation for violation in checks if violation]


def collect_customer_update_violations(
    first_name: str,
    last_name: str,
    income: Decimal,
    zip_code: str,
    street: str,
) -> list[str]:
    """All violations of a profile update request, in field order."""
    checks = (
        check_not_blank(first_name),
        check_not_blank(last_name),
        check_income(income),
        check_not_blank(zip_code),
        check_not_blank(street),
    )
    return [violation for violation in checks if violation]


def customer_saved_message(email: str) -> str:
    return f"Customer {email} saved!"
