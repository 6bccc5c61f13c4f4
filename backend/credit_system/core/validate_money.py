"""Money Validation — amounts must fit the NUMERIC(15, 2) columns they land in.

Invariants:
    - At most MONEY_INTEGER_DIGITS digits before the point
    - At most MONEY_FRACTION_DIGITS digits after it (trailing zeros don't count)
    - No silent rounding: 100.999 is rejected, never stored as 101.00
"""

from decimal import Decimal


MONEY_INTEGER_DIGITS: int = 13
MONEY_FRACTION_DIGITS: int = 2

MONEY_DIGITS_MESSAGE = (
    f"numeric value out of bounds "
    f"(<{MONEY_INTEGER_DIGITS} digits>.<{MONEY_FRACTION_DIGITS} digits> expected)"
)

_CENT = Decimal(1).scaleb(-MONEY_FRACTION_DIGITS)


def check_money_digits(amount: Decimal) -> str | None:
    if len(str(int(abs(amount)))) > MONEY_INTEGER_DIGITS:
        return MONEY_DIGITS_MESSAGE
    if amount != amount.quantize(_CENT):
        return MONEY_DIGITS_MESSAGE
    return None
