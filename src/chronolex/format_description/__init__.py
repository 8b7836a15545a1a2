"""Format descriptions: the component model, the FormatItem tree and its compilers.

Public API:
    parse                   - compile version 1 source (borrowed literals)
    parse_borrowed          - compile version 1 or 2 source (borrowed literals)
    parse_owned             - compile version 1 or 2 source (owned, memoized)
    parse_strftime_borrowed - compile strftime source (borrowed literals)
    parse_strftime_owned    - compile strftime source (owned, memoized)

Component classes live in the ``component`` module and are referenced as
``component.Month`` etc. to keep them apart from ``chronolex.Month``.

Python 3.13+.
"""

from . import component
from .component import Component, ComponentName
from .format_item import Compound, First, FormatItem, Literal, Optional
from .modifier import (
    MonthRepr,
    Padding,
    SubsecondDigits,
    UnixTimestampPrecision,
    WeekdayRepr,
    WeekNumberRepr,
    YearRange,
    YearRepr,
)
from .parse import (
    parse,
    parse_borrowed,
    parse_owned,
    parse_strftime_borrowed,
    parse_strftime_owned,
)
from .version import FormatDescriptionVersion

__all__ = [
    "Component",
    "ComponentName",
    "Compound",
    "First",
    "FormatDescriptionVersion",
    "FormatItem",
    "Literal",
    "MonthRepr",
    "Optional",
    "Padding",
    "SubsecondDigits",
    "UnixTimestampPrecision",
    "WeekNumberRepr",
    "WeekdayRepr",
    "YearRange",
    "YearRepr",
    "component",
    "parse",
    "parse_borrowed",
    "parse_owned",
    "parse_strftime_borrowed",
    "parse_strftime_owned",
]
