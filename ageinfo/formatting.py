"""Locale-aware number and date formatting for English and Indonesian.

Each supported locale has one read-only ``LocaleFormat`` in
``LOCALE_FORMATS``.  Grouping is done with Python's format mini-language
(``{:,}``) and the separators are then swapped for the locale's own, so
``1234567`` renders as ``1,234,567`` in ``en`` and ``1.234.567`` in ``id``.
"""

import datetime
import decimal
import logging
from dataclasses import dataclass

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from ageinfo.calculator import AgeBreakdown, Clock, as_instant, system_clock
from ageinfo.errors import UnsupportedLocale

logger: logging.Logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class LocaleFormat:
    """Number and date conventions for a single locale.

    Attributes:
        tag: Primary language subtag used in URLs (``"en"``, ``"id"``).
        region_tag: Full BCP 47 tag the conventions come from.
        group_separator: Thousands separator.
        decimal_separator: Separator between integer and fractional digits.
        month_names: Full month names, January first.
        ordinal_days: Whether day numbers get an English ordinal suffix.
        date_pattern: ``str.format`` pattern with ``day``, ``month`` and
            ``year`` fields.
    """

    tag: str
    region_tag: str
    group_separator: str
    decimal_separator: str
    month_names: tuple[str, ...]
    ordinal_days: bool
    date_pattern: str

    def group(self, value: int) -> str:
        return f"{value:,}".replace(",", self.group_separator)

    def group_decimal(self, value: decimal.Decimal, decimals: int) -> str:
        text = f"{value:,.{decimals}f}"
        return text.translate(
            str.maketrans({",": self.group_separator, ".": self.decimal_separator})
        )


ENGLISH = LocaleFormat(
    tag="en",
    region_tag="en-US",
    group_separator=",",
    decimal_separator=".",
    month_names=(
        "January", "February", "March", "April", "May", "June",
        "July", "August", "September", "October", "November", "December",
    ),
    ordinal_days=True,
    date_pattern="{month} {day}, {year}",
)

INDONESIAN = LocaleFormat(
    tag="id",
    region_tag="id-ID",
    group_separator=".",
    decimal_separator=",",
    month_names=(
        "Januari", "Februari", "Maret", "April", "Mei", "Juni",
        "Juli", "Agustus", "September", "Oktober", "November", "Desember",
    ),
    ordinal_days=False,
    date_pattern="{day} {month} {year}",
)

LOCALE_FORMATS: dict[str, LocaleFormat] = {
    ENGLISH.tag: ENGLISH,
    INDONESIAN.tag: INDONESIAN,
}


class FormattedAgeBreakdown(BaseModel):
    """An ``AgeBreakdown`` with its totals rendered for display."""

    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )

    years: int
    months: int
    days: int
    hours: int
    minutes: int
    seconds: int
    total_days: str
    total_hours: str
    total_minutes: str
    total_seconds: str

    def to_wire(self) -> dict[str, int | str]:
        return self.model_dump(by_alias=True)


def get_locale_format(locale: str) -> LocaleFormat:
    """Return the ``LocaleFormat`` for ``locale``.

    Both the short tag (``"id"``) and a regional tag (``"id-ID"``, ``"id_ID"``)
    are accepted; only the primary subtag is used for the lookup.

    Raises:
        UnsupportedLocale: If no table exists for the primary subtag.
    """
    primary = locale.strip().replace("_", "-").split("-")[0].lower()
    try:
        return LOCALE_FORMATS[primary]
    except KeyError:
        raise UnsupportedLocale(
            f"Locale {locale!r} is not supported. "
            f"Supported locales: {', '.join(sorted(LOCALE_FORMATS))}."
        ) from None


def format_locale_number(value: int, locale: str) -> str:
    """Format an integer with the locale's thousands separator.

    >>> format_locale_number(1234567, "id")
    '1.234.567'
    >>> format_locale_number(1234567, "en")
    '1,234,567'
    """
    return get_locale_format(locale).group(value)


def format_locale_decimal(value: float | int | decimal.Decimal, locale: str, decimals: int = 2) -> str:
    """Format a number with a fixed number of decimal places.

    Halves round away from zero.

    >>> format_locale_decimal(1234.5678, "id")
    '1.234,57'
    >>> format_locale_decimal(1234.5678, "en")
    '1,234.57'
    """
    if decimals < 0:
        raise ValueError("decimals must not be negative.")
    fmt = get_locale_format(locale)
    exponent = decimal.Decimal(1).scaleb(-decimals)
    rounded = decimal.Decimal(str(value)).quantize(exponent, rounding=decimal.ROUND_HALF_UP)
    return fmt.group_decimal(rounded, decimals)


def _english_ordinal(day: int) -> str:
    if 11 <= day % 100 <= 13:
        suffix = "th"
    else:
        suffix = {1: "st", 2: "nd", 3: "rd"}.get(day % 10, "th")
    return f"{day}{suffix}"


def format_locale_date(value: datetime.date, locale: str) -> str:
    """Format a calendar date in the locale's long style.

    >>> format_locale_date(datetime.date(1945, 8, 17), "id")
    '17 Agustus 1945'
    >>> format_locale_date(datetime.date(1945, 8, 17), "en")
    'August 17th, 1945'
    """
    fmt = get_locale_format(locale)
    day = _english_ordinal(value.day) if fmt.ordinal_days else str(value.day)
    return fmt.date_pattern.format(
        day=day,
        month=fmt.month_names[value.month - 1],
        year=value.year,
    )


def format_breakdown(breakdown: AgeBreakdown, locale: str) -> FormattedAgeBreakdown:
    """Render the totals of ``breakdown`` with the locale's grouping.

    The mixed-radix fields are small and passed through unchanged so that
    callers can interpolate them into translated sentences.
    """
    fmt = get_locale_format(locale)
    logger.debug("format_breakdown called for locale %s", fmt.tag)
    return FormattedAgeBreakdown(
        years=breakdown.years,
        months=breakdown.months,
        days=breakdown.days,
        hours=breakdown.hours,
        minutes=breakdown.minutes,
        seconds=breakdown.seconds,
        total_days=fmt.group(breakdown.total_days),
        total_hours=fmt.group(breakdown.total_hours),
        total_minutes=fmt.group(breakdown.total_minutes),
        total_seconds=fmt.group(breakdown.total_seconds),
    )


_RELATIVE_PHRASES: dict[str, dict] = {
    "en": {
        "past": "{value} {unit} ago",
        "future": "in {value} {unit}",
        "now": "now",
        "yesterday": "yesterday",
        "tomorrow": "tomorrow",
        "units": {
            "day": ("day", "days"),
            "hour": ("hour", "hours"),
            "minute": ("minute", "minutes"),
            "second": ("second", "seconds"),
        },
    },
    "id": {
        "past": "{value} {unit} yang lalu",
        "future": "dalam {value} {unit}",
        "now": "sekarang",
        "yesterday": "kemarin",
        "tomorrow": "besok",
        "units": {
            "day": ("hari", "hari"),
            "hour": ("jam", "jam"),
            "minute": ("menit", "menit"),
            "second": ("detik", "detik"),
        },
    },
}


def _relative_phrase(fmt: LocaleFormat, unit: str, amount: int) -> str:
    phrases = _RELATIVE_PHRASES[fmt.tag]
    if unit == "day" and amount in (-1, 1):
        return phrases["yesterday"] if amount < 0 else phrases["tomorrow"]
    if amount == 0:
        return phrases["now"]
    singular, plural = phrases["units"][unit]
    template = phrases["past"] if amount < 0 else phrases["future"]
    return template.format(
        value=fmt.group(abs(amount)),
        unit=singular if abs(amount) == 1 else plural,
    )


def format_relative_time(
    value: datetime.date | datetime.datetime,
    locale: str,
    *,
    now: datetime.datetime | None = None,
    clock: Clock = system_clock,
) -> str:
    """Describe ``value`` relative to ``now``, e.g. "1 hour ago" or "dalam 3 hari".

    The largest non-zero unit among days, hours and minutes is used, falling
    back to seconds.  Each unit is truncated toward zero, so one hour in the
    past reads "1 hour ago" rather than "yesterday".  Exactly one day reads
    "yesterday"/"tomorrow" and zero seconds reads "now".
    """
    fmt = get_locale_format(locale)
    value_at = as_instant(value).astimezone(datetime.timezone.utc)
    now_at = as_instant(now if now is not None else clock()).astimezone(datetime.timezone.utc)

    diff_ms = (value_at - now_at) // datetime.timedelta(milliseconds=1)
    sign = -1 if diff_ms < 0 else 1
    seconds = abs(diff_ms) // 1000
    minutes = seconds // 60
    hours = minutes // 60
    days = hours // 24

    for unit, amount in (("day", days), ("hour", hours), ("minute", minutes)):
        if amount:
            return _relative_phrase(fmt, unit, sign * amount)
    return _relative_phrase(fmt, "second", sign * seconds)
