"""Integer Unix-timestamp encodings of OffsetDateTime.

For storage layers and wire formats that keep instants as a single integer.
Encoding floors to the requested precision; decoding always yields a UTC
date-time.

Python 3.13+.
"""

from __future__ import annotations

from chronolex.convert import Unit
from chronolex.core import OffsetDateTime
from chronolex.diagnostics import ComponentRangeError, ErrorTemplate, InvalidValueError
from chronolex.format_description.modifier import UnixTimestampPrecision

__all__ = [
    "from_timestamp",
    "from_timestamp_optional",
    "to_timestamp",
    "to_timestamp_optional",
]

_UNITS: dict[UnixTimestampPrecision, Unit] = {
    UnixTimestampPrecision.SECOND: Unit.SECOND,
    UnixTimestampPrecision.MILLISECOND: Unit.MILLISECOND,
    UnixTimestampPrecision.MICROSECOND: Unit.MICROSECOND,
    UnixTimestampPrecision.NANOSECOND: Unit.NANOSECOND,
}


def to_timestamp(
    value: OffsetDateTime,
    precision: UnixTimestampPrecision = UnixTimestampPrecision.SECOND,
) -> int:
    """Unix timestamp of ``value`` in whole ``precision`` units, floored.

    Example:
        >>> to_timestamp(OffsetDateTime.UNIX_EPOCH, UnixTimestampPrecision.MILLISECOND)
        0
    """
    unit = _UNITS[UnixTimestampPrecision(precision)]
    return value.unix_timestamp_nanos() // Unit.NANOSECOND.per(unit)


def from_timestamp(
    value: int,
    precision: UnixTimestampPrecision = UnixTimestampPrecision.SECOND,
) -> OffsetDateTime:
    """UTC date-time ``value`` ``precision`` units after the Unix epoch.

    Raises:
        InvalidValueError: The instant is outside the representable range;
            ``.value`` is the integer that was passed in
    """
    precision = UnixTimestampPrecision(precision)
    nanoseconds = value * Unit.NANOSECOND.per(_UNITS[precision])
    try:
        return OffsetDateTime.from_unix_timestamp_nanos(nanoseconds)
    except ComponentRangeError as error:
        raise InvalidValueError(
            ErrorTemplate.timestamp_invalid_value(value, str(precision), "out of range"),
            value=value,
        ) from error


def to_timestamp_optional(
    value: OffsetDateTime | None,
    precision: UnixTimestampPrecision = UnixTimestampPrecision.SECOND,
) -> int | None:
    """``to_timestamp`` that passes None through."""
    return None if value is None else to_timestamp(value, precision)


def from_timestamp_optional(
    value: int | None,
    precision: UnixTimestampPrecision = UnixTimestampPrecision.SECOND,
) -> OffsetDateTime | None:
    """``from_timestamp`` that passes None through.

    Raises:
        InvalidValueError: The instant is outside the representable range
    """
    return None if value is None else from_timestamp(value, precision)
