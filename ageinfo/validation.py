"""Validation of raw birth-date input before any age arithmetic runs.

Every rule raises its own ``AgeInfoError`` subclass with a message that can
be shown to the user as-is.  ``compute_age`` never sees unparseable input.
"""

import datetime
import logging
import re

from pydantic import BaseModel, ConfigDict

from ageinfo.calculator import Clock, as_instant, system_clock
from ageinfo.config import settings
from ageinfo.errors import FutureBirthDate, InvalidDateInput, InvalidNameInput, InvalidTimeInput

logger: logging.Logger = logging.getLogger(__name__)

_DATE_PATTERN = re.compile(r"[0-9]{4}-[0-9]{2}-[0-9]{2}")
_TIME_PATTERN = re.compile(r"[0-9]{2}:[0-9]{2}(:[0-9]{2})?")
_MIN_NAME_LEN = 2

INVALID_DATE_MESSAGE = "Please enter a valid date."
INVALID_TIME_MESSAGE = "Please enter a valid time (HH:MM)."
FUTURE_DATE_MESSAGE = "Birth date cannot be in the future."
SHORT_NAME_MESSAGE = f"Name must be at least {_MIN_NAME_LEN} characters."


class BirthInput(BaseModel):
    """Validated user input for an age calculation."""

    model_config = ConfigDict(frozen=True)

    birth: datetime.datetime
    has_time: bool = False
    name: str | None = None


def parse_birth_date(raw: str) -> datetime.date:
    """Parse a ``YYYY-MM-DD`` string.

    Raises:
        InvalidDateInput: If ``raw`` is not a string, is not shaped like
            ``YYYY-MM-DD``, or is not a real calendar date.
    """
    if not isinstance(raw, str) or not _DATE_PATTERN.fullmatch(raw.strip()):
        raise InvalidDateInput(INVALID_DATE_MESSAGE)
    try:
        return datetime.date.fromisoformat(raw.strip())
    except ValueError as exc:
        raise InvalidDateInput(INVALID_DATE_MESSAGE) from exc


def parse_birth_time(raw: str | None) -> datetime.time | None:
    """Parse an optional ``HH:MM`` or ``HH:MM:SS`` string.

    Blank input means no time was given.

    Raises:
        InvalidTimeInput: If the string is not a valid wall-clock time.
    """
    if raw is None or not raw.strip():
        return None
    value = raw.strip()
    if not _TIME_PATTERN.fullmatch(value):
        raise InvalidTimeInput(INVALID_TIME_MESSAGE)
    try:
        return datetime.time.fromisoformat(value)
    except ValueError as exc:
        raise InvalidTimeInput(INVALID_TIME_MESSAGE) from exc


def parse_birth_input(
    birth_date: str,
    birth_time: str | None = None,
    *,
    name: str | None = None,
    now: datetime.datetime | None = None,
    tz: datetime.tzinfo | None = None,
    clock: Clock = system_clock,
) -> BirthInput:
    """Validate raw form input and combine it into a birth instant.

    Args:
        birth_date: Date string in ``YYYY-MM-DD`` format.
        birth_time: Optional time of birth, ``HH:MM`` or ``HH:MM:SS``.
        name: Optional display name; at least two characters when given.
        now: Evaluation instant used for the future-date check.
        tz: Zone the birth date and time are read in.
        clock: Source of ``now`` when it is not given.

    Returns:
        A ``BirthInput`` carrying an aware ``birth`` datetime.

    Raises:
        InvalidDateInput: The date does not parse.
        InvalidTimeInput: The time does not parse.
        InvalidNameInput: The name is shorter than two characters.
        FutureBirthDate: The birth instant is after ``now``.
    """
    # Log input lengths, not raw values.
    logger.debug(
        "parse_birth_input called with %d-char date, %d-char time",
        len(birth_date) if isinstance(birth_date, str) else -1,
        len(birth_time or ""),
    )

    date_value = parse_birth_date(birth_date)
    time_value = parse_birth_time(birth_time)

    if name is not None and len(name.strip()) < _MIN_NAME_LEN:
        raise InvalidNameInput(SHORT_NAME_MESSAGE)

    zone = tz or settings.tzinfo
    birth = as_instant(
        datetime.datetime.combine(date_value, time_value or datetime.time.min),
        zone,
    )
    evaluation = as_instant(now if now is not None else clock(), zone)
    if birth > evaluation:
        raise FutureBirthDate(FUTURE_DATE_MESSAGE)

    return BirthInput(
        birth=birth,
        has_time=time_value is not None,
        name=name.strip() if name is not None else None,
    )
