import re
from decimal import Decimal, InvalidOperation
from typing import Optional

# Integers and decimals with optional sign and exponent, e.g. "10", "-2", ".5", "7.5", "1e2"
NUMERIC_RE = re.compile(r"^[+-]?(\d+(\.\d*)?|\.\d+)([eE][+-]?\d+)?$")

# CartFee.amount holds 12 integer digits, larger percentages can never produce a storable fee
MAX_PERCENTAGE_EXPONENT = 11


def is_numeric(value) -> bool:
    if value is None:
        return False
    return bool(NUMERIC_RE.match(str(value).strip()))


def parse_percentage(value) -> Optional[Decimal]:
    """
    Parse stored or submitted text into a Decimal.

    Returns ``None`` when the text is not numeric, or when the number is
    not finite or too large to ever yield a storable fee.
    """
    if not is_numeric(value):
        return None
    try:
        percentage = Decimal(str(value).strip())
    except InvalidOperation:
        return None
    if not percentage.is_finite() or percentage.adjusted() > MAX_PERCENTAGE_EXPONENT:
        return None
    return percentage
