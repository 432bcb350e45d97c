"""Settings helpers for infrastructure adapters."""

from dataclasses import dataclass, field
from decimal import Decimal
import json
import os
from pathlib import Path

from src.domain.constants import (
    DEFAULT_ALERT_THRESHOLDS,
    DEFAULT_BILLING_DAY,
    DEFAULT_CATEGORIES,
    DEFAULT_CURRENCY_SYMBOL,
    DEFAULT_MONTHLY_LIMIT,
)
from src.domain.exceptions import ConfigurationError
from src.domain.models import Category
from src.domain.services.validation import (
    validate_billing_day,
    validate_budget_limit,
)
from src.infrastructure.logging.logger import get_app_logger
from src.utils.utils import get_project_root


def default_categories() -> tuple[Category, ...]:
    """Return the category catalog new users start with."""
    return tuple(
        Category(id=category_id, name=name, icon=icon, color=color)
        for category_id, name, icon, color in DEFAULT_CATEGORIES
    )


@dataclass(frozen=True)
class BudgetSettings:
    """User budget settings passed explicitly into every computation.

    Attributes:
        billing_day: Day of month on which billing cycles start (1-28).
        monthly_limit: Budget limit for one billing cycle.
        currency_symbol: Symbol used when formatting amounts.
        expenses_file: Optional path to the JSON expense source.
        categories: Category catalog used to resolve display names.
        alert_thresholds: Percent-used levels that raise budget alerts.
    """

    billing_day: int = DEFAULT_BILLING_DAY
    monthly_limit: Decimal = DEFAULT_MONTHLY_LIMIT
    currency_symbol: str = DEFAULT_CURRENCY_SYMBOL
    expenses_file: Path | None = None
    categories: tuple[Category, ...] = field(default_factory=default_categories)
    alert_thresholds: tuple[int, ...] = DEFAULT_ALERT_THRESHOLDS

    def __post_init__(self) -> None:
        validate_billing_day(self.billing_day)
        validate_budget_limit(self.monthly_limit)

    @classmethod
    def from_env(cls) -> "BudgetSettings":
        """Build settings from environment variables.

        Returns:
            BudgetSettings: Settings sourced from environment variables.

        Raises:
            ConfigurationError: If a configured value is invalid.
        """
        logger = get_app_logger()
        billing_day = validate_billing_day(
            os.getenv("BILLING_START_DAY", str(DEFAULT_BILLING_DAY))
        )
        monthly_limit = validate_budget_limit(
            os.getenv("MONTHLY_LIMIT", str(DEFAULT_MONTHLY_LIMIT))
        )
        currency_symbol = (
            os.getenv("CURRENCY_SYMBOL", DEFAULT_CURRENCY_SYMBOL).strip()
            or DEFAULT_CURRENCY_SYMBOL
        )

        raw_expenses = os.getenv("EXPENSES_FILE")
        if raw_expenses:
            expenses_file = cls._normalize_path(raw_expenses, logger=logger)
        else:
            expenses_file = cls._default_expenses_file()

        raw_categories = os.getenv("CATEGORIES_FILE")
        categories = (
            cls._load_categories(cls._normalize_path(raw_categories, logger))
            if raw_categories
            else default_categories()
        )

        return cls(
            billing_day=billing_day,
            monthly_limit=monthly_limit,
            currency_symbol=currency_symbol,
            expenses_file=expenses_file,
            categories=categories,
            alert_thresholds=cls._parse_thresholds(
                os.getenv("ALERT_THRESHOLDS")
            ),
        )

    @staticmethod
    def _normalize_path(raw_path: str, logger) -> Path:
        """Resolve a user supplied file path.

        Args:
            raw_path: Raw file path string.
            logger: Logger used for warnings.

        Returns:
            Path: Absolute, user-expanded path.
        """
        path = Path(raw_path).expanduser().resolve()
        if not path.exists():
            logger.warning(f"Configured file does not exist at {path}")
        return path

    @staticmethod
    def _default_expenses_file() -> Path | None:
        """Return data/expenses.json when it exists."""
        candidate = get_project_root() / "data" / "expenses.json"
        return candidate.resolve() if candidate.exists() else None

    @staticmethod
    def _load_categories(path: Path) -> tuple[Category, ...]:
        """Load a category catalog from a JSON array.

        Args:
            path: JSON file with ``{"id", "name", "icon"?, "color"?}`` items.

        Returns:
            tuple[Category, ...]: Parsed catalog.

        Raises:
            ConfigurationError: If the file is unreadable or malformed.
        """
        try:
            payload = json.loads(path.read_text(encoding="utf-8"))
        except (OSError, json.JSONDecodeError) as exc:
            raise ConfigurationError(
                f"Unable to read categories file {path}: {exc}"
            ) from exc
        if not isinstance(payload, list):
            raise ConfigurationError(
                f"Categories file {path} must contain a JSON array"
            )
        categories = []
        for item in payload:
            if not isinstance(item, dict) or not item.get("id"):
                raise ConfigurationError(
                    f"Invalid category entry in {path}: {item!r}"
                )
            categories.append(
                Category(
                    id=str(item["id"]),
                    name=str(item.get("name") or item["id"]),
                    icon=str(item.get("icon", "")),
                    color=str(item.get("color", "")),
                )
            )
        return tuple(categories)

    @staticmethod
    def _parse_thresholds(raw: str | None) -> tuple[int, ...]:
        """Parse comma-separated alert thresholds.

        Raises:
            ConfigurationError: If a threshold is not a positive integer.
        """
        if not raw or not raw.strip():
            return DEFAULT_ALERT_THRESHOLDS
        thresholds = []
        for part in raw.split(","):
            try:
                value = int(part.strip())
            except ValueError as exc:
                raise ConfigurationError(
                    f"Invalid alert threshold {part.strip()!r}"
                ) from exc
            if value <= 0:
                raise ConfigurationError(
                    f"Alert thresholds must be positive, got {value}"
                )
            thresholds.append(value)
        return tuple(sorted(set(thresholds)))


__all__ = ["BudgetSettings", "default_categories"]
