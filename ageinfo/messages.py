"""Translated sentence templates for presenting an age result."""

import datetime

from ageinfo.formatting import FormattedAgeBreakdown, format_locale_date, get_locale_format

_TEMPLATES: dict[str, dict[str, str]] = {
    "en": {
        "born": "Born on {date}",
        "greeting": "Hi {name}!",
        "age": "You are {years} years, {months} months and {days} days old.",
        "clock": "Plus {hours} hours, {minutes} minutes and {seconds} seconds.",
        "totals": (
            "That is {total_days} days, {total_hours} hours, "
            "{total_minutes} minutes or {total_seconds} seconds in total."
        ),
    },
    "id": {
        "born": "Lahir pada {date}",
        "greeting": "Halo {name}!",
        "age": "Usia Anda {years} tahun, {months} bulan, dan {days} hari.",
        "clock": "Ditambah {hours} jam, {minutes} menit, dan {seconds} detik.",
        "totals": (
            "Totalnya {total_days} hari, {total_hours} jam, "
            "{total_minutes} menit atau {total_seconds} detik."
        ),
    },
}


def render_summary(
    formatted: FormattedAgeBreakdown,
    locale: str,
    *,
    birth_date: datetime.date | None = None,
    name: str | None = None,
    include_clock: bool = False,
) -> str:
    """Render a multi-line, human-readable age summary in ``locale``."""
    templates = _TEMPLATES[get_locale_format(locale).tag]
    values = formatted.model_dump()
    lines: list[str] = []
    if name:
        lines.append(templates["greeting"].format(name=name))
    if birth_date is not None:
        lines.append(templates["born"].format(date=format_locale_date(birth_date, locale)))
    lines.append(templates["age"].format(**values))
    if include_clock:
        lines.append(templates["clock"].format(**values))
    lines.append(templates["totals"].format(**values))
    return "\n".join(lines)
