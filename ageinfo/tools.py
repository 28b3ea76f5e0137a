"""Strands tools that expose the age calculator to the agent.

Each function is decorated with ``@tool`` so the Strands framework can
expose it to the language model.  Input validation happens in
``ageinfo.validation`` before any computation so that the model receives a
clear error message rather than a cryptic Python traceback.
"""

import datetime
import logging

from strands import tool

from ageinfo.calculator import compute_age, system_clock
from ageinfo.config import settings
from ageinfo.formatting import format_breakdown, get_locale_format
from ageinfo.locale_detection import parse_accept_language
from ageinfo.validation import parse_birth_input

logger: logging.Logger = logging.getLogger(__name__)


@tool
def get_current_datetime() -> str:
    """Get the current date and time in ISO 8601 format (YYYY-MM-DDTHH:MM:SS+HH:MM).

    Use this tool to find out what "now" is before reasoning about a
    birthdate, for example to tell the user how long until their next
    birthday.  The value is expressed in the site's configured time zone.

    Returns:
        The current instant as an ISO 8601 string with a UTC offset,
        truncated to whole seconds.
    """
    now = system_clock().astimezone(settings.tzinfo).replace(microsecond=0).isoformat()
    logger.debug("get_current_datetime called, returning %s", now)
    return now


@tool
def calculate_age(birth_date: str, birth_time: str = "", locale: str = "en") -> dict:
    """Calculate a person's exact age from their birthdate.

    Use this tool whenever the user gives a birthdate and wants to know how
    old they are, in years/months/days or as total days, hours, minutes or
    seconds.  Totals are returned as strings already grouped for the
    requested locale (e.g. "1,234,567" for en, "1.234.567" for id).

    Args:
        birth_date: The birthdate in YYYY-MM-DD format.
        birth_time: Optional time of birth in HH:MM or HH:MM:SS format.
            Pass an empty string when the user did not give one.
        locale: "en" for English or "id" for Indonesian number formatting.

    Returns:
        A flat dict with years, months, days, hours, minutes, seconds,
        totalDays, totalHours, totalMinutes, totalSeconds, the locale used
        and the birthDate echoed back.

    Raises:
        ValueError: If the birthdate or time is not valid, the birthdate is
            in the future, or the locale is not supported.
    """
    locale_format = get_locale_format(locale)
    now = system_clock()
    birth = parse_birth_input(birth_date, birth_time or None, now=now)
    breakdown = compute_age(birth.birth, now)
    payload: dict = format_breakdown(breakdown, locale_format.tag).to_wire()
    payload["locale"] = locale_format.tag
    payload["birthDate"] = birth.birth.date().isoformat()
    logger.debug("calculate_age result: %d years", breakdown.years)
    return payload


@tool
def detect_locale(accept_language: str) -> str:
    """Pick the site language from a browser Accept-Language header.

    Use this tool when you are given a raw Accept-Language header (for
    example "id-ID,id;q=0.9,en-US;q=0.8") and need to decide whether to
    answer in English or Indonesian.

    Args:
        accept_language: The raw Accept-Language header value.

    Returns:
        The locale tag to use, either "en" or "id".
    """
    return parse_accept_language(accept_language)
