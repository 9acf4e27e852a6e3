"""Standalone checks that do not fit the single-field Rule model.

Each function is pure and returns an error message or None.
"""

import re
from datetime import date, datetime
from typing import Iterable, Optional, Union

from crmforms.validators.models import UploadedFile

MIN_AGE = 18
MAX_AGE = 120
BYTES_PER_MB = 1024 * 1024

INVALID_BIRTH_DATE_MESSAGE = "Please enter a valid birth date"

_PARTIAL_ISO_DATE = re.compile(r"^([0-9]{4})(?:-([0-9]{2}))?\Z")


def validate_password_confirmation(password: str, confirm_password: str) -> Optional[str]:
    if password != confirm_password:
        return "Passwords do not match"
    return None


def _parse_birth_date(birth_date: Union[date, datetime, str]) -> Optional[date]:
    if isinstance(birth_date, datetime):
        return birth_date.date()
    if isinstance(birth_date, date):
        return birth_date
    try:
        text = birth_date.strip()
    except AttributeError:
        return None

    # Year-only and year-month forms start on the first of the period
    partial = _PARTIAL_ISO_DATE.match(text)
    try:
        if partial:
            return date(int(partial.group(1)), int(partial.group(2) or 1), 1)
        return datetime.fromisoformat(text).date()
    except ValueError:
        return None


def validate_age(
    birth_date: Union[date, datetime, str],
    today: Optional[date] = None,
) -> Optional[str]:
    """Check that the person is an adult and the birth date is plausible.

    Age is the difference of calendar years only. Month and day are ignored,
    so someone born on 31 December counts a year older from 1 January.

    Args:
        birth_date: A date, datetime or ISO 8601 string. Year-only and
            year-month strings count from the first day of the period.
        today: Reference date. Defaults to the current local date.
    """
    birth = _parse_birth_date(birth_date)
    if birth is None:
        return INVALID_BIRTH_DATE_MESSAGE

    today = today or date.today()
    age = today.year - birth.year

    if age < MIN_AGE:
        return f"You must be at least {MIN_AGE} years old"

    if age > MAX_AGE:
        return INVALID_BIRTH_DATE_MESSAGE

    return None


def validate_file_size(file: UploadedFile, max_size_mb: float) -> Optional[str]:
    max_size_bytes = max_size_mb * BYTES_PER_MB

    if file.size > max_size_bytes:
        return f"File size must be less than {max_size_mb:g}MB"

    return None


def validate_file_type(file: UploadedFile, allowed_types: Iterable[str]) -> Optional[str]:
    allowed = list(allowed_types)

    if file.content_type not in allowed:
        return f"File type must be one of: {', '.join(allowed)}"

    return None
