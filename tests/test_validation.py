from datetime import date

from models import AgeCategory, PersonRecord
from validation import categorize_records, validate_records


def test_validate_records_reports_each_failure(today):
    records = [
        PersonRecord(1, "Ana", "Lopez", date(1990, 1, 1)),
        PersonRecord(2, "", "", None),
        PersonRecord(3, "Luis", "Perez", date(2025, 1, 1)),
    ]

    warnings = validate_records(records, today)

    assert warnings == [
        "Invalid: [personId=2, firstName=, lastName=, birthDate=null]: "
        "First name must contain minimum one character.",
        "Invalid: [personId=2, firstName=, lastName=, birthDate=null]: "
        "Last name must contain minimum one character.",
        "Invalid: [personId=3, firstName=Luis, lastName=Perez, birthDate=2025-01-01]: "
        "Birth date must not be in future.",
    ]


def test_validate_records_empty():
    assert validate_records([]) == []


def test_categorize_records_counts_every_category(today):
    records = [
        PersonRecord(birth_date=date(2023, 1, 1)),
        PersonRecord(birth_date=date(1960, 1, 1)),
        PersonRecord(birth_date=date(1950, 3, 4)),
        PersonRecord(),
    ]

    counts = categorize_records(records, today)

    assert list(counts) == list(AgeCategory)
    assert counts == {
        AgeCategory.BABY: 1,
        AgeCategory.CHILD: 0,
        AgeCategory.TEEN: 0,
        AgeCategory.ADULT: 0,
        AgeCategory.SENIOR: 2,
        AgeCategory.UNKNOWN: 1,
    }
