"""Domain services mapping billing cycles to stable string identifiers."""

from datetime import datetime

from src.domain.exceptions import InvalidCycleIdError
from src.domain.models import BillingCycle
from src.domain.services.billing_cycle import compute_billing_cycle


def cycle_id(cycle: BillingCycle) -> str:
    """Return the ``YYYY-MM-DD`` identifier of the cycle start date.

    Args:
        cycle: Billing cycle to identify.

    Returns:
        str: Zero-padded start date identifier.
    """
    start = cycle.start_date
    return f"{start.year:04d}-{start.month:02d}-{start.day:02d}"


def parse_cycle_id(value: str, anchor_day: int) -> BillingCycle:
    """Rebuild the billing cycle identified by a ``YYYY-MM-DD`` string.

    Args:
        value: Identifier produced by ``cycle_id``.
        anchor_day: Day of month on which cycles start.

    Returns:
        BillingCycle: Cycle containing the identified day.

    Raises:
        InvalidCycleIdError: If the identifier is not a valid date.
    """
    parts = value.strip().split("-") if value else []
    if len(parts) != 3:
        raise InvalidCycleIdError(
            f"Invalid cycle id '{value}'. Expected format YYYY-MM-DD."
        )
    try:
        year, month, day = (int(part) for part in parts)
        moment = datetime(year, month, day)
    except (ValueError, OverflowError) as exc:
        raise InvalidCycleIdError(f"Invalid cycle id '{value}': {exc}") from exc
    return compute_billing_cycle(anchor_day, moment)


__all__ = ["cycle_id", "parse_cycle_id"]
