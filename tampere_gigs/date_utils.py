"""Shared date parsing utilities."""

import re
from datetime import date, datetime
from typing import Optional, Union

# "15.11." — day and month, no year
DATE_TOKEN_RE = re.compile(r'^(\d{1,2})\.(\d{1,2})\.$')


def resolve_date(token: str, now: Union[date, datetime]) -> Optional[date]:
    """Turn a year-less "D.M." token into a calendar date.

    The year is taken from ``now``, then corrected around the new year:
    in December, January dates belong to next year; in January to March,
    October to December dates belong to last year.

    Returns None if the token is malformed or not a real date ("31.2.").
    """
    match = DATE_TOKEN_RE.match(token.strip())
    if not match:
        return None

    day, month = (int(g) for g in match.groups())
    try:
        resolved = date(now.year, month, day)
    except ValueError:
        return None

    if now.month == 12 and resolved.month == 1:
        resolved = resolved.replace(year=resolved.year + 1)
    elif now.month in (1, 2, 3) and resolved.month in (10, 11, 12):
        resolved = resolved.replace(year=resolved.year - 1)

    return resolved
