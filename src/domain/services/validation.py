"""Domain validation helpers for user settings."""

from decimal import Decimal, InvalidOperation

from src.domain.constants import MAX_BILLING_DAY, MIN_BILLING_DAY
from src.domain.exceptions import ConfigurationError


def validate_billing_day(value) -> int:
    """Validate the billing start day configured by the user.

    Days 29-31 are rejected because not every month has them.

    Args:
        value: Raw day of month, as an int or numeric string.

    Returns:
        int: Validated day of month.

    Raises:
        ConfigurationError: If the value is not an integer in 1..28.
    """
    try:
        day = int(str(value).strip())
    except (TypeError, ValueError) as exc:
        raise ConfigurationError(
            f"Billing start day must be an integer, got {value!r}"
        ) from exc
    if not MIN_BILLING_DAY <= day <= MAX_BILLING_DAY:
        raise ConfigurationError(
            f"Billing start day must be between {MIN_BILLING_DAY} and "
            f"{MAX_BILLING_DAY}, got {day}"
        )
    return day


def validate_budget_limit(value) -> Decimal:
    """Validate the monthly budget limit.

    Args:
        value: Raw budget limit.

    Returns:
        Decimal: Non-negative budget limit.

    Raises:
        ConfigurationError: If the value is not a non-negative number.
    """
    try:
        limit = Decimal(str(value).strip())
    except (InvalidOperation, ValueError) as exc:
        raise ConfigurationError(
            f"Monthly limit must be a number, got {value!r}"
        ) from exc
    if not limit.is_finite() or limit < 0:
        raise ConfigurationError(
            f"Monthly limit must be a non-negative amount, got {value!r}"
        )
    return limit


__all__ = ["validate_billing_day", "validate_budget_limit"]
