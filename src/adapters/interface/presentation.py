"""Presentation lookups for categories, trends and amounts.

Category icons are stored as icon-library names in the user catalog. They
are resolved here, at the display boundary, through an explicit enum with a
guaranteed fallback entry.
"""

from collections.abc import Sequence
from decimal import Decimal
from enum import Enum

from src.domain.constants import DEFAULT_CURRENCY_SYMBOL
from src.domain.models import BudgetHealth, Category, Trend
from src.domain.services.normalization import normalize_category_id


class CategoryIcon(str, Enum):
    """Icon names available to category catalog entries."""

    SHOPPING_CART = "ShoppingCart"
    UTENSILS = "Utensils"
    FUEL = "Fuel"
    SHOPPING_BAG = "ShoppingBag"
    CREDIT_CARD = "CreditCard"
    HEART = "Heart"
    GAMEPAD = "Gamepad2"
    CAR = "Car"
    ZAP = "Zap"
    MORE = "MoreHorizontal"


DEFAULT_ICON = CategoryIcon.MORE

ICON_GLYPHS: dict[CategoryIcon, str] = {
    CategoryIcon.SHOPPING_CART: "🛒",
    CategoryIcon.UTENSILS: "🍽️",
    CategoryIcon.FUEL: "⛽",
    CategoryIcon.SHOPPING_BAG: "🛍️",
    CategoryIcon.CREDIT_CARD: "💳",
    CategoryIcon.HEART: "❤️",
    CategoryIcon.GAMEPAD: "🎮",
    CategoryIcon.CAR: "🚗",
    CategoryIcon.ZAP: "⚡",
    CategoryIcon.MORE: "•••",
}

CATEGORY_COLORS = (
    "#3b82f6",
    "#ef4444",
    "#10b981",
    "#f59e0b",
    "#8b5cf6",
    "#ec4899",
    "#06b6d4",
    "#f97316",
    "#14b8a6",
    "#a855f7",
    "#84cc16",
    "#f43f5e",
    "#0ea5e9",
    "#eab308",
)

TREND_LABELS: dict[Trend, str] = {
    Trend.IMPROVED: "▼ improved",
    Trend.STABLE: "▬ stable",
    Trend.WORSENED: "▲ worsened",
}

STATUS_LABELS: dict[BudgetHealth, str] = {
    BudgetHealth.GOOD: "On track",
    BudgetHealth.WARNING: "Running low",
    BudgetHealth.DANGER: "Over budget",
}


def resolve_icon(icon_name: str | None) -> str:
    """Return the display glyph for an icon name, falling back to default.

    Args:
        icon_name: Icon name stored on the category.

    Returns:
        str: Glyph for the icon or the default glyph.
    """
    try:
        icon = CategoryIcon(icon_name)
    except ValueError:
        icon = DEFAULT_ICON
    return ICON_GLYPHS[icon]


def category_color(category: Category | None, index: int) -> str:
    """Return a hex color for a category.

    Catalog colors are used when they are hex values; anything else (for
    example utility class names) falls back to the palette by position.

    Args:
        category: Catalog entry, or None when the category is unknown.
        index: Position used to pick a palette color.

    Returns:
        str: Hex color string.
    """
    color = category.color if category else ""
    if color and color.startswith("#"):
        return color
    return CATEGORY_COLORS[index % len(CATEGORY_COLORS)]


def category_color_by_id(
    category_id: str,
    categories: Sequence[Category],
) -> str:
    """Return the color of a category looked up by identifier."""
    wanted = normalize_category_id(category_id)
    for index, category in enumerate(categories):
        if category.id == wanted:
            return category_color(category, index)
    return category_color(None, -1)


def format_currency(
    value: Decimal,
    currency_symbol: str = DEFAULT_CURRENCY_SYMBOL,
) -> str:
    """Format currency values for display."""
    return f"{currency_symbol} {value:,.2f}"


def format_delta(value: Decimal, currency_symbol: str | None = None) -> str:
    """Format signed deltas, with an optional currency symbol."""
    sign = "+" if value >= 0 else "-"
    amount = f"{abs(value):,.2f}"
    if currency_symbol:
        return f"{sign}{currency_symbol} {amount}"
    return f"{sign}{amount}"


def format_percent(value: Decimal | None) -> str:
    """Format signed percent changes; None renders as "-"."""
    if value is None:
        return "-"
    sign = "+" if value >= 0 else ""
    return f"{sign}{value:.1f}%"


__all__ = [
    "CategoryIcon",
    "DEFAULT_ICON",
    "ICON_GLYPHS",
    "CATEGORY_COLORS",
    "TREND_LABELS",
    "STATUS_LABELS",
    "resolve_icon",
    "category_color",
    "category_color_by_id",
    "format_currency",
    "format_delta",
    "format_percent",
]
