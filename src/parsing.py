"""GEDCOM intake: read individuals into person records."""

from datetime import date
from pathlib import Path
import re

from ged4py import GedcomReader

from models import PersonRecord


MONTH_MAP = {
    "JAN": 1,
    "JANUARY": 1,
    "FEB": 2,
    "FEBRUARY": 2,
    "MAR": 3,
    "MARCH": 3,
    "APR": 4,
    "APRIL": 4,
    "MAY": 5,
    "JUN": 6,
    "JUNE": 6,
    "JUL": 7,
    "JULY": 7,
    "AUG": 8,
    "AUGUST": 8,
    "SEP": 9,
    "SEPT": 9,
    "SEPTEMBER": 9,
    "OCT": 10,
    "OCTOBER": 10,
    "NOV": 11,
    "NOVEMBER": 11,
    "DEC": 12,
    "DECEMBER": 12,
}

QUALIFIER_RE = re.compile(
    r"^(ABOUT|ABT\.?|BEFORE|BEF\.?|AFTER|AFT\.?|ESTIMATED|EST\.?|CALCULATED|CAL\.?"
    r"|BETWEEN|BET\.?|INTERPRETED|INT\.?|FROM|TO|AND|CIRCA|CA\.?|AROUND)(?![A-Za-z]):?\s*",
    flags=re.IGNORECASE,
)
# Second half of "BETWEEN x AND y" or "FROM x TO y"
RANGE_END_RE = re.compile(r"\s+(?:AND|TO)\s+.*$", flags=re.IGNORECASE)
# Trailing phrase of an interpreted date, "INT 1990 (as recorded)"
PHRASE_RE = re.compile(r"\s*\([^()]*\)$")


def extract_numeric_id(xref_id: str) -> int:
    """Extract numeric part from a GEDCOM xref_id like '@I_347421849@' or 'I674624289'."""
    digits = re.sub(r"[^0-9]", "", xref_id)
    if not digits:
        raise ValueError(f"No numeric ID found in: {xref_id}")
    return int(digits)


def _month(name: str) -> int | None:
    return MONTH_MAP.get(name.upper().rstrip("."))


def _make_date(year: int, month: int | None, day: int) -> date | None:
    if month is None:
        return None
    try:
        return date(year, month, day)
    except ValueError:
        return None


def parse_date_string(date_str: str | None) -> date | None:
    """
    Parse a genealogy date string into a date.
    Returns None if the date cannot be parsed or does not exist.

    Handles formats like:
    - "25 NOV 1954", "08 March 1893", "11 Aug. 1968", "02 May1838"
    - "NOV 1954", "May, 1837" (first of the month)
    - "1698" (first of January)
    - "01-27-1920", "1/15/1957", "04 05 1911" (month first)
    - "April 17, 1850", "SEPT. 17,1910"
    - "1839-08-29", "1746-00-00" (00 month or day read as 1)
    - qualifiers and decorations: "ABT 1905", "AFTER 1990", "(around 1855)", "(1789?)"
    - ranges, read as their first date: "BETWEEN 1990 AND 1992", "FROM 1901 TO 1905"
    - interpreted dates with a phrase: "INT 1990 (as recorded)"
    """
    if not date_str:
        return None

    s = date_str.strip()
    if s.startswith("(") and s.endswith(")"):
        s = s[1:-1]
    else:
        s = PHRASE_RE.sub("", s)
    s = s.strip().rstrip("?")
    s = QUALIFIER_RE.sub("", s)
    # Ranges resolve to their first date
    s = RANGE_END_RE.sub("", s).strip()
    if not s:
        return None

    # ISO, with 00 placeholders
    match = re.match(r"^(\d{4})-(\d{2})-(\d{2})$", s)
    if match:
        year, month, day = (int(g) for g in match.groups())
        return _make_date(year, month or 1, day or 1)

    # Day, month name, year
    match = re.match(r"^(\d{1,2})\s+([A-Za-z]+)\.?\s*(\d{4})$", s)
    if match:
        return _make_date(int(match.group(3)), _month(match.group(2)), int(match.group(1)))

    # Month name, year
    match = re.match(r"^([A-Za-z]+)\.?,?\s*(\d{4})$", s)
    if match:
        return _make_date(int(match.group(2)), _month(match.group(1)), 1)

    match = re.match(r"^(\d{4})$", s)
    if match:
        return _make_date(int(match.group(1)), 1, 1)

    # Numeric month, day, year
    match = re.match(r"^(\d{1,2})(?:[-/]|\s+)(\d{1,2})(?:[-/]|\s+)(\d{4})$", s)
    if match:
        return _make_date(int(match.group(3)), int(match.group(1)), int(match.group(2)))

    # Month name, day, year
    match = re.match(r"^([A-Za-z]+)\.?\s*(\d{1,2}),?\s*(\d{4})$", s)
    if match:
        return _make_date(int(match.group(3)), _month(match.group(1)), int(match.group(2)))

    return None


def parse_gedcom(filepath: Path) -> GedcomReader:
    """Parse a GEDCOM file and return the reader object."""
    return GedcomReader(str(filepath))


def extract_name_parts(indi) -> tuple[str | None, str | None]:
    """Extract given name and surname from an individual record."""
    name_rec = indi.sub_tag("NAME")
    if name_rec is None or name_rec.value is None:
        return (None, None)

    # ged4py returns NAME as tuple: (given, surname, suffix)
    if isinstance(name_rec.value, tuple):
        given, surname, _suffix = name_rec.value
        return (given or None, surname or None)

    givn = name_rec.sub_tag("GIVN")
    surn = name_rec.sub_tag("SURN")
    return (givn.value if givn else None, surn.value if surn else None)


def extract_birth_date(indi) -> date | None:
    """Extract the birth date from an individual's BIRT event."""
    event = indi.sub_tag("BIRT")
    if event is None:
        return None

    date_rec = event.sub_tag("DATE")
    if not date_rec or not date_rec.value:
        return None
    # ged4py may hand back DateValue objects
    return parse_date_string(str(date_rec.value))


def load_records(reader: GedcomReader) -> list[PersonRecord]:
    """
    Build a person record for every INDI record with an xref id.
    Family records are not read.
    """
    records: list[PersonRecord] = []

    for rec in reader.records0("INDI"):
        if rec.xref_id is None:
            continue

        given_name, surname = extract_name_parts(rec)
        records.append(
            PersonRecord(
                person_id=extract_numeric_id(rec.xref_id),
                first_name=given_name,
                last_name=surname,
                birth_date=extract_birth_date(rec),
            )
        )

    return records
