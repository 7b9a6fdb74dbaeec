from decimal import Decimal, InvalidOperation, ROUND_HALF_UP, getcontext
from typing import Any, Optional

from employee_directory.utils.constants import DEFAULT_CURRENCY_SYMBOL


# ============================================================================
# PRECISION CONSTANTS
# ============================================================================

# Salary precision (cents)
USD_PRECISION = Decimal('0.01')

ZERO = Decimal('0')

# Whole-number digits an amount may carry and still quantize to cents
# within the 28-digit context
MAX_AMOUNT_DIGITS = 26


# ============================================================================
# PAYROLL ROUNDING (ROUND_HALF_UP)
# ============================================================================

def set_payroll_rounding_context() -> None:
    """
    Set global Decimal context for salary arithmetic.
    Uses ROUND_HALF_UP (0.5 always rounds up).
    Call this once at application startup.
    """
    ctx = getcontext()
    ctx.rounding = ROUND_HALF_UP
    ctx.prec = 28


# Initialize rounding on module load
set_payroll_rounding_context()


# ============================================================================
# DECIMAL COERCION HELPER
# ============================================================================

def to_decimal(value: Any, default: Decimal = Decimal(0)) -> Decimal:
    """
    Safely coerce any value to a Decimal, preserving precision for salaries.

    Args:
        value: Any value to convert. Supports int, float, str, Decimal, None.
        default: Decimal fallback if conversion fails. Defaults to Decimal(0).

    Returns:
        Decimal: Precise numeric value, or default if conversion fails.

    Examples:
        >>> to_decimal('75000.50')
        Decimal('75000.50')
        >>> to_decimal(1.5) == Decimal('1.5')
        True
        >>> to_decimal('invalid') == Decimal(0)
        True

    Note:
        - Floats are coerced via str() to preserve precision
        - Existing Decimals are passed through unchanged
        - None and invalid strings return default (no exception)
        - NaN and infinities are treated as invalid
    """
    try:
        if isinstance(value, Decimal):
            result = value
        elif isinstance(value, bool) or value is None:
            return default
        else:
            result = Decimal(str(value).strip())
    except (InvalidOperation, TypeError, ValueError):
        return default
    if not result.is_finite():
        return default
    return result


def parse_amount(text: Any) -> Optional[Decimal]:
    """
    Parse user input as a non-negative money amount.

    Returns None for anything that is not a finite number >= 0, or that is
    too large to render in cents, which is what the console prompt loops on.
    """
    sentinel = Decimal('-1')
    amount = to_decimal(text, sentinel)
    if amount is sentinel or amount < ZERO or not is_representable(amount):
        return None
    # normalizes -0 to 0
    return amount + ZERO


def is_representable(amount: Decimal) -> bool:
    """True when amount fits in MAX_AMOUNT_DIGITS whole digits."""
    return amount.is_zero() or amount.adjusted() < MAX_AMOUNT_DIGITS


def round_usd(value: Any) -> Decimal:
    """Round to cents with ROUND_HALF_UP."""
    return to_decimal(value).quantize(USD_PRECISION, rounding=ROUND_HALF_UP)


def format_currency(value: Any, symbol: str = DEFAULT_CURRENCY_SYMBOL) -> str:
    """Render an amount as e.g. $75000.00"""
    return f"{symbol}{round_usd(value)}"
