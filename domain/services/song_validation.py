"""Domain rules for song and genre field values."""

from __future__ import annotations

from domain.exceptions import ValidationError

MIN_RELEASE_YEAR = 1
MAX_RELEASE_YEAR = 9999


def require_text(field_name: str, value: str | None) -> str:
    """Return ``value`` stripped, or raise if it is missing or blank.

    Raises:
        ValidationError: If the value is None or only whitespace

    """
    if value is None or not value.strip():
        msg = f"{field_name} must be provided"
        raise ValidationError(msg)
    return value.strip()


def check_release_year(release_year: int | None) -> int | None:
    if release_year is None:
        return None
    if not MIN_RELEASE_YEAR <= release_year <= MAX_RELEASE_YEAR:
        msg = f"release_year must be between {MIN_RELEASE_YEAR} and {MAX_RELEASE_YEAR}"
        raise ValidationError(msg)
    return release_year
