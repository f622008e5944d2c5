"""Date rules.

Successful outcomes carry a timezone-aware ``datetime`` in UTC, whatever
form the input took. Naive inputs are taken to be UTC.
"""

import math
from datetime import UTC, date as _date, datetime
from numbers import Real
from typing import Any

from doz.messages import literal
from doz.outcome import Invalid, Outcome, invalid, valid


def _to_datetime(value: Any) -> datetime | None:
    """Coerce *value* to an aware UTC datetime, or ``None`` if it is not a date.

    Accepts ``datetime`` and ``date`` objects, ISO-8601 strings and
    epoch timestamps in milliseconds.
    """
    if isinstance(value, datetime):
        parsed = value
    elif isinstance(value, _date):
        parsed = datetime(value.year, value.month, value.day)
    elif isinstance(value, str):
        try:
            parsed = datetime.fromisoformat(value.strip())
        except ValueError:
            return None
    elif isinstance(value, Real) and not isinstance(value, bool):
        if isinstance(value, float) and math.isnan(value):
            return None
        try:
            return datetime.fromtimestamp(value / 1000, tz=UTC)
        except (OverflowError, OSError, ValueError):
            return None
    else:
        return None

    if parsed.tzinfo is None:
        return parsed.replace(tzinfo=UTC)
    try:
        return parsed.astimezone(UTC)
    except OverflowError:
        # Offsets that push a year-1 or year-9999 moment out of range
        return None


def isoformat(moment: datetime) -> str:
    """Render *moment* as ``YYYY-MM-DDTHH:MM:SS.mmmZ``."""
    return moment.astimezone(UTC).isoformat(timespec="milliseconds").replace("+00:00", "Z")


def date(value: Any) -> Outcome:
    """Value must be a date, an ISO-8601 string or an epoch-millisecond number.

    Strings are parsed with ``datetime.fromisoformat`` only. Free-form
    text such as ``"Jan 15 2022"`` or RFC 2822 dates is rejected; parse
    those first (``email.utils.parsedate_to_datetime``) and pass the
    ``datetime``.
    """
    parsed = _to_datetime(value)
    if parsed is None:
        return invalid(value, "must be valid date")
    return valid(parsed)


def date_between(value: Any, start: Any, end: Any) -> Outcome:
    """Value must be a date within the inclusive range ``[start, end]``.

    An unparseable *value* yields the ``date`` rule's own outcome.
    """
    outcome = date(value)
    if isinstance(outcome, Invalid):
        return outcome

    moment = outcome.value
    lower = _to_datetime(start)
    upper = _to_datetime(end)
    if lower is None or upper is None:
        return invalid(value, literal("Invalid start or end date provided"))

    if moment < lower or moment > upper:
        return invalid(value, f"must be between {isoformat(lower)} and {isoformat(upper)}")

    return valid(moment)
