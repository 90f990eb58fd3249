"""Data classes for person records and their age categories."""

from dataclasses import dataclass
from datetime import date
from enum import Enum
import itertools
import threading


FIRST_NAME_ERROR = "First name must contain minimum one character."
LAST_NAME_ERROR = "Last name must contain minimum one character."
BIRTH_DATE_ERROR = "Birth date must not be in future."


_person_sequence = itertools.count()
_person_sequence_lock = threading.Lock()


def next_person_id() -> int:
    """Return the next value of the shared person id sequence (starts at 0)."""
    with _person_sequence_lock:
        return next(_person_sequence)


class AgeCategory(Enum):
    BABY = "BABY"
    CHILD = "CHILD"
    TEEN = "TEEN"
    ADULT = "ADULT"
    SENIOR = "SENIOR"
    UNKNOWN = "UNKNOWN"


def years_between(start: date, end: date) -> int:
    """
    Number of completed years from start to end.

    Truncates toward zero, so a start less than a year after end gives 0
    and only a full year or more gives a negative value.
    """
    if start <= end:
        years = end.year - start.year
        if (end.month, end.day) < (start.month, start.day):
            years -= 1
        return years
    return -years_between(end, start)


def _has_text(value: str | None) -> bool:
    return value is not None and value.strip() != ""


def _render(value) -> str:
    return "null" if value is None else str(value)


@dataclass
class PersonRecord:
    person_id: int = 0
    first_name: str | None = None
    last_name: str | None = None
    birth_date: date | None = None  # no time component

    @classmethod
    def create(
        cls,
        first_name: str | None = None,
        last_name: str | None = None,
        birth_date: date | None = None,
    ) -> "PersonRecord":
        """Build a record whose id is drawn from the shared sequence."""
        return cls(next_person_id(), first_name, last_name, birth_date)

    def is_valid_birth_date(
        self,
        bdate: date | None,
        error_list: list[str] | None = None,
        today: date | None = None,
    ) -> bool:
        """
        Check that a birth date is not in the future.

        A missing date is valid. On failure the message is appended to
        error_list when one is given.
        """
        if bdate is None:
            return True
        if today is None:
            today = date.today()
        if bdate > today:
            if error_list is not None:
                error_list.append(BIRTH_DATE_ERROR)
            return False
        return True

    def is_valid_person(
        self,
        error_list: list[str] | None = None,
        person: "PersonRecord | None" = None,
        today: date | None = None,
    ) -> bool:
        """
        Validate names and birth date of person (defaults to this record).

        Every check runs even after a failure, so error_list collects all
        messages in the order first name, last name, birth date.
        """
        if person is None:
            person = self
        if error_list is None:
            error_list = []

        is_valid = True
        if not _has_text(person.first_name):
            error_list.append(FIRST_NAME_ERROR)
            is_valid = False
        if not _has_text(person.last_name):
            error_list.append(LAST_NAME_ERROR)
            is_valid = False
        if not self.is_valid_birth_date(person.birth_date, error_list, today):
            is_valid = False
        return is_valid

    def validate(self, today: date | None = None) -> list[str]:
        """Return the validation messages for this record (empty when valid)."""
        errors: list[str] = []
        self.is_valid_person(errors, today=today)
        return errors

    def age_in_years(self, today: date | None = None) -> int | None:
        if self.birth_date is None:
            return None
        if today is None:
            today = date.today()
        return years_between(self.birth_date, today)

    def age_category(self, today: date | None = None) -> AgeCategory:
        """Bucket the record by completed years of age."""
        years = self.age_in_years(today)
        if years is None:
            return AgeCategory.UNKNOWN

        if 0 <= years < 2:
            return AgeCategory.BABY
        elif 2 <= years < 13:
            return AgeCategory.CHILD
        elif 13 <= years <= 19:
            return AgeCategory.TEEN
        elif 19 < years <= 50:
            return AgeCategory.ADULT
        elif years > 50:
            return AgeCategory.SENIOR
        # Future birth date that skipped validation
        return AgeCategory.UNKNOWN

    def save(self, error_list: list[str] | None = None, today: date | None = None) -> bool:
        """
        Print the record if it is valid.

        Returns whether the record was saved. Nothing is printed for an
        invalid record; its messages go to error_list.
        """
        if not self.is_valid_person(error_list, today=today):
            return False
        print(f"Saved {self}")
        return True

    def __str__(self) -> str:
        return (
            f"[personId={_render(self.person_id)}, firstName={_render(self.first_name)}, "
            f"lastName={_render(self.last_name)}, birthDate={_render(self.birth_date)}]"
        )
