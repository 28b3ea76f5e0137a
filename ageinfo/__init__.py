"""ageinfo — calendar-aware age calculation with English and Indonesian formatting.

Public API
----------
compute_age
    Age breakdown and totals between a birth instant and "now".
format_breakdown
    Render an ``AgeBreakdown`` with locale-specific number grouping.
format_locale_number
    Group an integer by thousands for a supported locale.
format_relative_time
    Describe an instant relative to now ("1 hour ago", "dalam 3 hari").
parse_accept_language
    Choose a supported locale from an ``Accept-Language`` header.
parse_birth_input
    Validate raw birth date/time input before computing an age.
create_agent
    Factory function that builds and returns a configured ``strands.Agent``.

Example
-------
>>> import datetime
>>> from ageinfo import compute_age, format_breakdown
>>> age = compute_age(datetime.date(2000, 1, 31), datetime.date(2000, 3, 1))
>>> (age.years, age.months, age.days)
(0, 1, 1)
>>> format_breakdown(age, "id").total_hours
'720'
"""

from ageinfo.agent import create_agent
from ageinfo.calculator import AgeBreakdown, compute_age
from ageinfo.errors import (
    AgeInfoError,
    FutureBirthDate,
    InvalidDateInput,
    InvalidNameInput,
    InvalidTimeInput,
    UnsupportedLocale,
)
from ageinfo.formatting import (
    FormattedAgeBreakdown,
    LocaleFormat,
    format_breakdown,
    format_locale_date,
    format_locale_decimal,
    format_locale_number,
    format_relative_time,
)
from ageinfo.locale_detection import get_locale_from_pathname, is_indonesian_user, parse_accept_language
from ageinfo.validation import BirthInput, parse_birth_input

__all__: list[str] = [
    "AgeBreakdown",
    "AgeInfoError",
    "BirthInput",
    "FormattedAgeBreakdown",
    "FutureBirthDate",
    "InvalidDateInput",
    "InvalidNameInput",
    "InvalidTimeInput",
    "LocaleFormat",
    "UnsupportedLocale",
    "compute_age",
    "create_agent",
    "format_breakdown",
    "format_locale_date",
    "format_locale_decimal",
    "format_locale_number",
    "format_relative_time",
    "get_locale_from_pathname",
    "is_indonesian_user",
    "parse_accept_language",
    "parse_birth_input",
]
