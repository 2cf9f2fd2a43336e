"""Value conversion helper functions.

Controller firmware formats numbers with the invariant culture: a decimal
point, no grouping separators. Every textual value is parsed against that
format here, independent of the host locale. All helpers raise DataTypeError
for values they cannot convert.
"""

import math
import re
from datetime import date, datetime, timedelta, timezone
from typing import Any

from ...const import PLC_DATE_EPOCH_YEAR
from ..exceptions import DataTypeError

_INT_PATTERN = re.compile(r"^\s*[+-]?[0-9]+\s*$")
_FLOAT_PATTERN = re.compile(
    r"^\s*[+-]?(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)(?:[eE][+-]?[0-9]+)?\s*$"
)
_FLOAT_SPECIALS = {
    "nan": math.nan,
    "infinity": math.inf,
    "+infinity": math.inf,
    "-infinity": -math.inf,
}
# [-][d.]hh:mm[:ss[.fffffff]]
_TIMESPAN_PATTERN = re.compile(
    r"^\s*(?P<sign>-)?(?:(?P<days>[0-9]+)\.)?(?P<hours>[0-9]{1,2}):(?P<minutes>[0-9]{1,2})"
    r"(?::(?P<seconds>[0-9]{1,2})(?:\.(?P<fraction>[0-9]{1,7}))?)?\s*$"
)

PLC_DATE_EPOCH = datetime(PLC_DATE_EPOCH_YEAR, 1, 1)


def parse_invariant_int(value: Any, type_name: str = "integer") -> int:
    """Parse an integer using invariant formatting.

    Args:
        value: int, integral float, or decimal text
        type_name: Type name for error message

    Returns:
        Parsed integer

    Raises:
        DataTypeError: If value is not an integer

    Examples:
        >>> parse_invariant_int("42")
        42
        >>> parse_invariant_int(-7.0)
        -7
        >>> parse_invariant_int("1,000")  # doctest: +SKIP
        Traceback (most recent call last):
        ...
        DataTypeError: Value '1,000' is not a valid integer
    """
    if isinstance(value, bool):
        raise DataTypeError(f"Value {value!r} is not a valid {type_name}")
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        if math.isfinite(value) and value.is_integer():
            return int(value)
        raise DataTypeError(f"Value {value!r} is not a valid {type_name}")
    if isinstance(value, str) and _INT_PATTERN.match(value):
        return int(value)
    raise DataTypeError(f"Value {value!r} is not a valid {type_name}")


def parse_invariant_float(value: Any, type_name: str = "real") -> float:
    """Parse a floating point number using invariant formatting.

    Accepts ``NaN``, ``Infinity`` and ``-Infinity`` the way the controller
    tooling prints them.

    Examples:
        >>> parse_invariant_float("1.5")
        1.5
        >>> parse_invariant_float("-2.5e3")
        -2500.0
        >>> parse_invariant_float(3)
        3.0
    """
    if isinstance(value, bool):
        raise DataTypeError(f"Value {value!r} is not a valid {type_name}")
    if isinstance(value, (int, float)):
        try:
            return float(value)
        except OverflowError as err:
            raise DataTypeError(
                f"Value {value!r} is out of range for {type_name}"
            ) from err
    if isinstance(value, str):
        special = _FLOAT_SPECIALS.get(value.strip().lower())
        if special is not None:
            return special
        if _FLOAT_PATTERN.match(value):
            return float(value)
    raise DataTypeError(f"Value {value!r} is not a valid {type_name}")


def check_range(value: int, low: int, high: int, type_name: str) -> int:
    """Ensure an integer fits the target type.

    Raises:
        DataTypeError: If value is outside [low, high]
    """
    if not low <= value <= high:
        raise DataTypeError(
            f"Value {value} is out of range for {type_name} ({low} to {high})"
        )
    return value


def parse_bool(value: Any) -> bool:
    """Parse a boolean.

    Examples:
        >>> parse_bool("TRUE")
        True
        >>> parse_bool(False)
        False
    """
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        text = value.strip().lower()
        if text == "true":
            return True
        if text == "false":
            return False
    raise DataTypeError(f"Value {value!r} is not a valid bool")


def parse_timespan(value: Any) -> timedelta:
    """Parse a duration.

    Args:
        value: timedelta or text ``[-][d.]hh:mm[:ss[.fffffff]]``

    Examples:
        >>> parse_timespan("00:00:01.5")
        datetime.timedelta(seconds=1, microseconds=500000)
        >>> parse_timespan("1.02:00")
        datetime.timedelta(days=1, seconds=7200)
    """
    if isinstance(value, timedelta):
        return value
    if isinstance(value, str):
        match = _TIMESPAN_PATTERN.match(value)
        if match:
            hours = int(match.group("hours"))
            minutes = int(match.group("minutes"))
            seconds = int(match.group("seconds") or 0)
            if hours < 24 and minutes < 60 and seconds < 60:
                fraction = (match.group("fraction") or "0").ljust(7, "0")
                span = timedelta(
                    days=int(match.group("days") or 0),
                    hours=hours,
                    minutes=minutes,
                    seconds=seconds,
                    microseconds=int(fraction) // 10,
                )
                return -span if match.group("sign") else span
    raise DataTypeError(f"Value {value!r} is not a valid time")


def format_timespan(span: timedelta) -> str:
    """Render a duration the way it is parsed.

    Examples:
        >>> format_timespan(timedelta(days=1, seconds=7201, microseconds=5000))
        '1.02:00:01.005'
        >>> format_timespan(timedelta(seconds=90))
        '00:01:30'
    """
    total_us = (span.days * 86400 + span.seconds) * 1_000_000 + span.microseconds
    sign = "-" if total_us < 0 else ""
    total_us = abs(total_us)
    seconds, micro = divmod(total_us, 1_000_000)
    minutes, seconds = divmod(seconds, 60)
    hours, minutes = divmod(minutes, 60)
    days, hours = divmod(hours, 24)
    text = f"{hours:02d}:{minutes:02d}:{seconds:02d}"
    if days:
        text = f"{days}.{text}"
    if micro:
        text += f".{micro:06d}".rstrip("0")
    return sign + text


def parse_date(value: Any) -> datetime:
    """Parse a calendar date/time to a naive UTC datetime.

    Args:
        value: datetime, date, or ISO 8601 text

    Examples:
        >>> parse_date("2024-02-03")
        datetime.datetime(2024, 2, 3, 0, 0)
    """
    if isinstance(value, datetime):
        parsed = value
    elif isinstance(value, date):
        parsed = datetime(value.year, value.month, value.day)
    elif isinstance(value, str):
        text = value.strip()
        if text.endswith("Z"):
            text = text[:-1] + "+00:00"
        try:
            parsed = datetime.fromisoformat(text)
        except ValueError as err:
            raise DataTypeError(f"Value {value!r} is not a valid date") from err
    else:
        raise DataTypeError(f"Value {value!r} is not a valid date")

    if parsed.tzinfo is not None:
        parsed = parsed.astimezone(timezone.utc).replace(tzinfo=None)
    return parsed


def datetime_to_plc_date(value: datetime) -> int:
    """Convert a naive UTC datetime to whole seconds since the PLC epoch.

    Sub-second precision is dropped.
    """
    return int((value - PLC_DATE_EPOCH).total_seconds() // 1)


def plc_date_to_datetime(seconds: int) -> datetime:
    """Convert seconds since the PLC epoch to a naive UTC datetime."""
    return PLC_DATE_EPOCH + timedelta(seconds=seconds)
