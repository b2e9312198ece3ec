"""Parsing of free-text experience durations such as ``"2015-2020"``."""

import re

# Leading integer, the way form input is read: whitespace and sign allowed, trailing text ignored
LEADING_INT_PATTERN = re.compile(r"^\s*([+-]?\d+)")

DURATION_SEPARATOR = "-"


def parse_leading_int(text: str) -> int | None:
    """Parse the integer at the start of ``text``.

    Examples:
        >>> parse_leading_int("2020")
        2020
        >>> parse_leading_int(" 2020 (contract)")
        2020
        >>> parse_leading_int("Present") is None
        True
    """
    match = LEADING_INT_PATTERN.match(text)
    if match:
        return int(match.group(1))
    return None


def parse_duration_years(duration: str | None) -> int | None:
    """Return ``end - start`` for a ``"<start>-<end>"`` duration.

    Only the first two ``-``-separated tokens are read, so ``"2018-2020-extra"``
    gives 2. Durations without a separator, or whose tokens do not start with an
    integer, return None.

    Args:
        duration: Duration text from an experience entry.

    Returns:
        Whole years between start and end, or None if unparseable.
    """
    if not duration or DURATION_SEPARATOR not in duration:
        return None

    start_token, end_token = duration.split(DURATION_SEPARATOR)[:2]
    start = parse_leading_int(start_token)
    end = parse_leading_int(end_token)
    if start is None or end is None:
        return None
    return end - start
