"""Read-only expense source backed by a JSON export."""

from collections.abc import Mapping
from datetime import date, datetime, time
from decimal import Decimal, InvalidOperation
import json
from pathlib import Path
from typing import Any

from src.domain.exceptions import InvalidExpenseError
from src.domain.models import Expense
from src.domain.services.normalization import (
    normalize_category_id,
    normalize_text,
)
from src.infrastructure.logging.logger import get_app_logger

_KNOWN_FIELDS = {"amount", "category", "date", "merchant", "note", "id"}


class JsonExpenseRepository:
    """Expense source reading records from a JSON file.

    The file holds either a JSON array of expense objects or an object with
    an ``expenses`` array. Each record needs ``amount``, ``category`` and an
    ISO ``date``; other keys are kept in ``Expense.extra``.
    """

    def __init__(self, path: Path | str, logger=None) -> None:
        """Initialize the repository.

        Args:
            path: Location of the JSON export.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._path = Path(path)
        self._logger = logger or get_app_logger()
        self._cache: list[Expense] | None = None

    def fetch_expenses(
        self,
        start: datetime,
        end: datetime,
    ) -> list[Expense]:
        """Return expenses dated in ``[start, end]``, oldest first."""
        start_naive = _strip_tz(start)
        end_naive = _strip_tz(end)
        selected = [
            expense
            for expense in self._load()
            if start_naive <= _strip_tz(expense.date) <= end_naive
        ]
        self._logger.info(
            f"Fetched {len(selected)} expenses between "
            f"{start.date()} and {end.date()}"
        )
        return selected

    def _load(self) -> list[Expense]:
        if self._cache is not None:
            return self._cache
        if not self._path.exists():
            self._logger.warning(f"Expenses file not found at {self._path}")
            self._cache = []
            return self._cache
        with self._path.open(encoding="utf-8") as fp:
            payload = json.load(fp)
        if isinstance(payload, Mapping):
            payload = payload.get("expenses", [])
        if not isinstance(payload, list):
            raise InvalidExpenseError(
                f"Expenses file {self._path} must contain a JSON array"
            )
        records = [parse_expense(item) for item in payload]
        records.sort(key=lambda expense: _strip_tz(expense.date))
        self._cache = records
        return records


def parse_expense(raw: Mapping[str, Any]) -> Expense:
    """Build an Expense from a JSON object.

    Args:
        raw: Decoded JSON object.

    Returns:
        Expense: Parsed expense record.

    Raises:
        InvalidExpenseError: If required fields are missing or invalid.
    """
    if not isinstance(raw, Mapping):
        raise InvalidExpenseError(f"Expense record must be an object: {raw!r}")
    try:
        amount = Decimal(str(raw["amount"]))
    except KeyError as exc:
        raise InvalidExpenseError(f"Expense is missing amount: {raw!r}") from exc
    except InvalidOperation as exc:
        raise InvalidExpenseError(
            f"Expense amount is not a number: {raw['amount']!r}"
        ) from exc
    if not amount.is_finite() or amount <= 0:
        raise InvalidExpenseError(f"Expense amount must be positive: {amount}")

    category = normalize_category_id(raw.get("category"))
    if category is None:
        raise InvalidExpenseError(f"Expense is missing category: {raw!r}")

    return Expense(
        amount=amount,
        category=category,
        date=_parse_moment(raw.get("date")),
        merchant=normalize_text(raw.get("merchant")),
        note=normalize_text(raw.get("note")),
        id=normalize_text(raw.get("id")),
        extra={k: v for k, v in raw.items() if k not in _KNOWN_FIELDS},
    )


def _parse_moment(value) -> datetime:
    if not value:
        raise InvalidExpenseError("Expense is missing date")
    text = str(value).strip()
    if text.endswith("Z"):
        text = text[:-1] + "+00:00"
    try:
        return datetime.fromisoformat(text)
    except ValueError:
        pass
    try:
        return datetime.combine(date.fromisoformat(text), time.min)
    except ValueError as exc:
        raise InvalidExpenseError(f"Invalid expense date {value!r}") from exc


def _strip_tz(moment: datetime) -> datetime:
    return moment.replace(tzinfo=None)


__all__ = ["JsonExpenseRepository", "parse_expense"]
