"""Helpers for Decimal normalization and guarded arithmetic."""

from decimal import ROUND_HALF_UP, Decimal

ZERO = Decimal("0")
HUNDRED = Decimal("100")


def coerce_decimal(value) -> Decimal:
    """Normalize numeric values to Decimal.

    Args:
        value: Raw numeric value from a JSON document or adapter.

    Returns:
        Decimal: Normalized numeric value.
    """
    if value is None:
        return Decimal("0")
    if isinstance(value, Decimal):
        return value
    return Decimal(str(value))


def safe_divide(numerator, denominator) -> Decimal:
    """Divide two numbers, returning 0 when the denominator is not positive.

    Args:
        numerator: Dividend.
        denominator: Divisor; values <= 0 short-circuit to zero.

    Returns:
        Decimal: Quotient or zero.
    """
    denominator = coerce_decimal(denominator)
    if denominator <= 0:
        return ZERO
    return coerce_decimal(numerator) / denominator


def percent_of(part, whole) -> Decimal:
    """Return part as a percentage of whole, 0 when whole is not positive."""
    return safe_divide(part, whole) * HUNDRED


def round_half_up(value: Decimal, places: int = 0) -> Decimal:
    """Round a Decimal half away from zero to the given places."""
    exponent = Decimal(1).scaleb(-places)
    return coerce_decimal(value).quantize(exponent, rounding=ROUND_HALF_UP)


__all__ = [
    "ZERO",
    "HUNDRED",
    "coerce_decimal",
    "safe_divide",
    "percent_of",
    "round_half_up",
]
