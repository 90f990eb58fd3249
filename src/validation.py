"""Batch validation and age summaries for person records."""

from collections.abc import Iterable
from datetime import date

from models import AgeCategory, PersonRecord


def validate_records(records: Iterable[PersonRecord], today: date | None = None) -> list[str]:
    """
    Validate every record for:
    - Blank first or last names
    - Birth dates in the future

    Returns a list of warning messages, one per failed check.
    """
    warnings: list[str] = []

    for record in records:
        errors: list[str] = []
        if record.is_valid_person(errors, today=today):
            continue
        for error in errors:
            warnings.append(f"Invalid: {record}: {error}")

    return warnings


def categorize_records(
    records: Iterable[PersonRecord], today: date | None = None
) -> dict[AgeCategory, int]:
    """Count records per age category; every category is present, in enum order."""
    counts = {category: 0 for category in AgeCategory}
    for record in records:
        counts[record.age_category(today)] += 1
    return counts
