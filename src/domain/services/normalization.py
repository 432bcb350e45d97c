"""Domain normalization helpers."""


def normalize_category_id(category: str | None) -> str | None:
    """Normalize category identifiers.

    Args:
        category: Raw category identifier from an expense record.

    Returns:
        str | None: Lower-cased identifier, or None when blank.
    """
    if not category:
        return None
    cleaned = category.strip()
    return cleaned.lower() if cleaned else None


def normalize_text(value: str | None) -> str | None:
    """Normalize optional free-text fields such as merchant and note.

    Args:
        value: Raw text value.

    Returns:
        str | None: Stripped text, or None when blank.
    """
    if value is None:
        return None
    cleaned = str(value).strip()
    return cleaned or None


__all__ = ["normalize_category_id", "normalize_text"]
