"""English month, weekday and period names from CLDR.

Names are read once from Babel's ``en`` locale data (format context) and
cached. Both the formatter and the component parsers use these tables, so
whatever is rendered can be parsed back.

Python 3.13+. Uses Babel for CLDR data.
"""

from functools import cache

from babel import Locale

from chronolex.enums import Month, Weekday

__all__ = [
    "month_names",
    "period_names",
    "weekday_names",
]

_LOCALE_CODE = "en"


@cache
def _locale() -> Locale:
    return Locale.parse(_LOCALE_CODE)


@cache
def month_names(*, short: bool) -> tuple[tuple[bytes, Month], ...]:
    """Month names in calendar order.

    Example:
        >>> month_names(short=True)[8]
        (b'Sep', <Month.SEPTEMBER: 9>)
    """
    width = "abbreviated" if short else "wide"
    names = _locale().months["format"][width]
    return tuple((names[month.value].encode("ascii"), month) for month in Month)


@cache
def weekday_names(*, short: bool) -> tuple[tuple[bytes, Weekday], ...]:
    """Weekday names, Monday first."""
    width = "abbreviated" if short else "wide"
    names = _locale().days["format"][width]
    return tuple((names[weekday.value].encode("ascii"), weekday) for weekday in Weekday)


@cache
def period_names(*, uppercase: bool) -> tuple[bytes, bytes]:
    """``(am, pm)`` designators in the requested case."""
    periods = _locale().periods
    am, pm = periods["am"], periods["pm"]
    if uppercase:
        return am.upper().encode("ascii"), pm.upper().encode("ascii")
    return am.lower().encode("ascii"), pm.lower().encode("ascii")
