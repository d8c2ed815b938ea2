import math
import re
import typing

from weather_xml.models import EMPTY, ProjectedRecord, Query, WeatherRecord

# Decimal literals with optional sign, fraction and exponent, or a signed Infinity
_DECIMAL_RE = re.compile(r"[+-]?(?:Infinity|(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)", re.ASCII)
# Unsigned 0x / 0o / 0b integer literals
_PREFIXED_RE = re.compile(r"0(?:[xX][0-9a-fA-F]+|[oO][0-7]+|[bB][01]+)")


def _int_to_float(value: int) -> float:
    try:
        return float(value)
    except OverflowError:
        return math.inf if value > 0 else -math.inf


def coerce_number(value: typing.Any) -> float:
    """Interpret a loosely-typed value as a number.

    - int / float (but not bool) -> float(value); integers too large for a float become +/-inf
    - str -> stripped, then read as a decimal literal (``1``, ``-2.5``, ``.5``, ``1e3``,
      ``Infinity``) or a ``0x``/``0o``/``0b`` integer; blank or anything else -> NaN
    - anything else (missing, null, bool, list, object) -> NaN

    NaN never compares greater than anything, so callers can use the result
    directly in ``>`` checks.
    """
    if isinstance(value, bool):
        return math.nan
    if isinstance(value, int):
        return _int_to_float(value)
    if isinstance(value, float):
        return value
    if isinstance(value, str):
        text = value.strip()
        if _DECIMAL_RE.fullmatch(text):
            # float() spells overflow as inf for decimal text
            return float(text)
        if _PREFIXED_RE.fullmatch(text):
            return _int_to_float(int(text, 0))
        return math.nan
    return math.nan


def filter_records(records: typing.Sequence[WeatherRecord], query: Query) -> list[WeatherRecord]:
    """Keep records whose Rainfall is strictly above the query threshold.

    Without a threshold every record passes, in order.
    """
    if query.min_rainfall is None:
        return list(records)

    threshold = query.min_rainfall
    return [r for r in records if coerce_number(r.rainfall) > threshold]


def _or_empty(value: typing.Any) -> typing.Any:
    return EMPTY if value is None else value


def project_records(
    records: typing.Sequence[WeatherRecord], query: Query
) -> list[ProjectedRecord]:
    """Rename fields to their output names, substituting empty text for missing values."""
    projected = []
    for r in records:
        projected.append(
            ProjectedRecord(
                rainfall=_or_empty(r.rainfall),
                pressure3pm=_or_empty(r.pressure3pm),
                humidity=_or_empty(r.humidity3pm) if query.show_humidity else None,
            )
        )
    return projected
