"""Calendar-aware age arithmetic.

``compute_age`` turns a birth instant and an evaluation instant into an
``AgeBreakdown``: a mixed-radix breakdown (years, months, days, hours,
minutes, seconds) plus cumulative totals (days, hours, minutes, seconds).

The two halves are computed independently.  Totals are the absolute elapsed
duration floored to each unit; the breakdown subtracts calendar fields with
an explicit day borrow followed by a month borrow.  Because months and years
vary in length the two representations only agree approximately.

Clock fields (hours, minutes, seconds) are subtracted on their own and
wrapped into range.  They never borrow from the day field.
"""

import calendar
import datetime
import logging
from collections.abc import Callable

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from ageinfo.config import settings

logger: logging.Logger = logging.getLogger(__name__)

Clock = Callable[[], datetime.datetime]

_MS_PER_SECOND = 1000


class AgeBreakdown(BaseModel):
    """Elapsed time between a birth instant and an evaluation instant.

    Attributes:
        years: Completed calendar years (unbounded).
        months: Completed months after ``years``, in ``[0, 11]``.
        days: Remaining days, at most
            ``max(days_in_previous_month(now) - 1, now.day)`` and never
            above 30.
        hours: Clock-hour difference wrapped into ``[0, 23]``.
        minutes: Clock-minute difference wrapped into ``[0, 59]``.
        seconds: Clock-second difference wrapped into ``[0, 59]``.
        total_days: Elapsed duration floored to whole days.
        total_hours: Elapsed duration floored to whole hours.
        total_minutes: Elapsed duration floored to whole minutes.
        total_seconds: Elapsed duration floored to whole seconds.
    """

    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )

    years: int = Field(ge=0)
    months: int = Field(ge=0, le=11)
    days: int = Field(ge=0, le=30)
    hours: int = Field(ge=0, le=23)
    minutes: int = Field(ge=0, le=59)
    seconds: int = Field(ge=0, le=59)
    total_days: int = Field(ge=0)
    total_hours: int = Field(ge=0)
    total_minutes: int = Field(ge=0)
    total_seconds: int = Field(ge=0)

    @classmethod
    def zero(cls) -> "AgeBreakdown":
        return cls(
            years=0,
            months=0,
            days=0,
            hours=0,
            minutes=0,
            seconds=0,
            total_days=0,
            total_hours=0,
            total_minutes=0,
            total_seconds=0,
        )

    def to_wire(self) -> dict[str, int]:
        """Return the flat camelCase dict used in JSON responses."""
        return self.model_dump(by_alias=True)


def system_clock() -> datetime.datetime:
    """Return the current instant as an aware UTC datetime."""
    return datetime.datetime.now(datetime.timezone.utc)


def as_instant(
    value: datetime.date | datetime.datetime,
    tz: datetime.tzinfo | None = None,
) -> datetime.datetime:
    """Coerce ``value`` to an aware datetime.

    Plain dates become midnight.  Naive datetimes are interpreted in ``tz``
    (the configured zone when omitted); aware datetimes are returned as-is.
    """
    zone = tz or settings.tzinfo
    if not isinstance(value, datetime.datetime):
        value = datetime.datetime.combine(value, datetime.time.min)
    if value.tzinfo is None or value.utcoffset() is None:
        value = value.replace(tzinfo=zone)
    return value


def days_in_previous_month(year: int, month: int) -> int:
    """Length of the month before ``year``-``month``, wrapping January to December."""
    year, month = (year - 1, 12) if month == 1 else (year, month - 1)
    if year < datetime.MINYEAR:
        # December of year 0 does not exist in ``datetime``; all Decembers have 31 days.
        return 31
    return calendar.monthrange(year, month)[1]


def compute_age(
    birth: datetime.date | datetime.datetime,
    now: datetime.date | datetime.datetime | None = None,
    *,
    tz: datetime.tzinfo | None = None,
    clock: Clock = system_clock,
) -> AgeBreakdown:
    """Compute the age breakdown between ``birth`` and ``now``.

    Args:
        birth: Birth instant.  Dates and naive datetimes are read in ``tz``.
        now: Evaluation instant.  Defaults to ``clock()`` at call time.
        tz: Zone used to read naive inputs and to decompose both instants
            into calendar fields.  Defaults to ``settings.timezone``.
        clock: Zero-argument callable returning the current instant.

    Returns:
        A fresh ``AgeBreakdown``.  A birth instant after ``now`` yields the
        all-zero breakdown instead of negative fields.
    """
    zone = tz or settings.tzinfo
    birth_at = as_instant(birth, zone)
    now_at = as_instant(now if now is not None else clock(), zone)

    # Same-zone datetimes subtract as wall-clock times; compare and subtract in UTC.
    birth_utc = birth_at.astimezone(datetime.timezone.utc)
    now_utc = now_at.astimezone(datetime.timezone.utc)

    if birth_utc > now_utc:
        logger.debug("compute_age: birth instant after evaluation instant, clamping to zero")
        return AgeBreakdown.zero()

    elapsed_ms = (now_utc - birth_utc) // datetime.timedelta(milliseconds=1)
    total_seconds = elapsed_ms // _MS_PER_SECOND
    total_minutes = total_seconds // 60
    total_hours = total_minutes // 60
    total_days = total_hours // 24

    b = birth_at.astimezone(zone)
    n = now_at.astimezone(zone)

    years = n.year - b.year
    months = n.month - b.month
    days = n.day - b.day

    if days < 0:
        months -= 1
        # A borrowed month shorter than the birth day contributes nothing,
        # so days == now.day here and may exceed the borrowed month's length.
        days = n.day + max(days_in_previous_month(n.year, n.month) - b.day, 0)

    if months < 0:
        years -= 1
        months += 12

    hours = n.hour - b.hour
    minutes = n.minute - b.minute
    seconds = n.second - b.second

    breakdown = AgeBreakdown(
        years=years,
        months=months,
        days=days,
        hours=hours if hours >= 0 else hours + 24,
        minutes=minutes if minutes >= 0 else minutes + 60,
        seconds=seconds if seconds >= 0 else seconds + 60,
        total_days=total_days,
        total_hours=total_hours,
        total_minutes=total_minutes,
        total_seconds=total_seconds,
    )
    logger.debug("compute_age result: %d years, %d total days", breakdown.years, total_days)
    return breakdown
