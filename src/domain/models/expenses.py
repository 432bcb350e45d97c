"""Domain models for expense records and the category catalog."""

from collections.abc import Mapping
from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal
from typing import Any


@dataclass(frozen=True)
class Category:
    """Category catalog entry configured by the user.

    Identifiers are stored trimmed and lower-cased, the same way expense
    sources normalize the category of each record.
    """

    id: str
    name: str
    icon: str = ""
    color: str = ""

    def __post_init__(self) -> None:
        cleaned = self.id.strip().lower()
        if cleaned:
            object.__setattr__(self, "id", cleaned)


@dataclass(frozen=True)
class Expense:
    """Expense record consumed by the analytics services.

    Attributes:
        amount: Positive amount spent.
        category: Category identifier.
        date: Moment the expense happened.
        merchant: Optional merchant or store name.
        note: Optional free-form note.
        id: Optional identifier assigned by the storage layer.
        extra: Stored fields the analytics never read (user id, audit
            timestamps, source tag), passed through untouched.
    """

    amount: Decimal
    category: str
    date: datetime
    merchant: str | None = None
    note: str | None = None
    id: str | None = None
    extra: Mapping[str, Any] = field(default_factory=dict, compare=False)


__all__ = ["Category", "Expense"]
