import math
from urllib.parse import parse_qs

from weather_xml.models import Query
from weather_xml.records import coerce_number

HUMIDITY_PARAM = "humidity"
MIN_RAINFALL_PARAM = "min_rainfall"


def _single(params: dict[str, list[str]], name: str) -> str | None:
    # A repeated parameter has no single value and counts as invalid
    values = params.get(name)
    if not values or len(values) != 1:
        return None
    return values[0]


def parse_query(raw_query: str) -> Query:
    """Turn the URL query component into a Query.

    ``humidity`` enables the humidity element only for the exact value ``true``.
    ``min_rainfall`` sets the threshold when it is numeric; otherwise no filtering happens.
    """
    params = parse_qs(raw_query, keep_blank_values=True)

    show_humidity = _single(params, HUMIDITY_PARAM) == "true"

    min_rainfall: float | None = None
    raw_threshold = _single(params, MIN_RAINFALL_PARAM)
    if raw_threshold is not None:
        value = coerce_number(raw_threshold)
        if not math.isnan(value):
            min_rainfall = value

    return Query(min_rainfall=min_rainfall, show_humidity=show_humidity)
