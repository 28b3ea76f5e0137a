"""Pick a site locale from request signals.

``parse_accept_language`` is what the front end uses to redirect ``/`` to
``/en`` or ``/id``; the other helpers read the locale back from a path or
guess whether a visitor prefers Indonesian.
"""

import logging
import math
import re
from collections.abc import Iterable

from ageinfo.config import settings

logger: logging.Logger = logging.getLogger(__name__)

_QUALITY_PREFIX = re.compile(r"[+-]?([0-9]+\.?[0-9]*|\.[0-9]+)([eE][+-]?[0-9]+)?")


def _parse_quality(params: list[str]) -> float:
    for param in params:
        key, _, value = param.strip().partition("=")
        if key.strip().lower() != "q":
            continue
        # Only the leading decimal number counts: "0.5abc" is 0.5, "1_0" is 1.
        match = _QUALITY_PREFIX.match(value.strip())
        if match is None:
            return 1.0
        quality = float(match.group())
        return quality if math.isfinite(quality) else 1.0
    return 1.0


def parse_accept_language(
    header: str | None,
    supported: Iterable[str] | None = None,
    default: str | None = None,
) -> str:
    """Return the preferred supported locale for an ``Accept-Language`` header.

    Entries are ``tag;q=weight`` separated by commas.  A missing or
    unparseable weight counts as 1.0.  Entries are ordered by weight, highest
    first, keeping header order among equal weights, and the primary subtag
    of the first entry whose language is supported wins.

    Args:
        header: Raw header value, or ``None`` when the request had none.
        supported: Locale tags to match against.  Defaults to
            ``settings.supported_locales``.
        default: Returned when nothing matches.  Defaults to
            ``settings.default_locale``.

    Returns:
        A lower-case locale tag such as ``"en"`` or ``"id"``.

    >>> parse_accept_language("id-ID,id;q=0.9,en-US;q=0.8", ["en", "id"], "en")
    'id'
    """
    fallback = default if default is not None else settings.default_locale
    if not header:
        return fallback

    candidates = {tag.lower() for tag in (supported if supported is not None else settings.supported_locales)}

    entries: list[tuple[str, float]] = []
    for item in header.split(","):
        tag, *params = item.strip().split(";")
        tag = tag.strip().lower()
        if not tag:
            continue
        entries.append((tag, _parse_quality(params)))

    # sorted() is stable, so equal weights keep their header order.
    for tag, _quality in sorted(entries, key=lambda entry: entry[1], reverse=True):
        primary = tag.replace("_", "-").split("-")[0]
        if primary in candidates:
            logger.debug("parse_accept_language matched %s", primary)
            return primary

    return fallback


def is_indonesian_user(header: str | None) -> bool:
    """Return True when the ``Accept-Language`` header mentions Indonesian."""
    if not header:
        return False
    lowered = header.lower()
    return "id-id" in lowered or "id;" in lowered


def get_locale_from_pathname(pathname: str, supported: Iterable[str] | None = None) -> str | None:
    """Return the locale prefix of ``pathname`` if it is a supported locale.

    >>> get_locale_from_pathname("/en/about", ["en", "id"])
    'en'
    >>> get_locale_from_pathname("/about", ["en", "id"]) is None
    True
    """
    candidates = set(supported if supported is not None else settings.supported_locales)
    segments = [segment for segment in pathname.split("/") if segment]
    if segments and segments[0] in candidates:
        return segments[0]
    return None
