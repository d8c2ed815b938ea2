import json
import math
import typing
import xml.etree.ElementTree as ET
from decimal import Decimal

from weather_xml.models import ProjectedRecord

ROOT_TAG = "weather_data"
RECORD_TAG = "record"
INDENT = "  "


def format_float(value: float) -> str:
    """Spell a float the way JSON producers and browsers do (``5``, ``0.5``, ``1e-7``, ``1.5e+21``)."""
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    if value == 0:
        return "0"

    # repr gives the shortest round-tripping digits
    sign, digit_tuple, exponent = Decimal(repr(value)).normalize().as_tuple()
    digits = "".join(str(d) for d in digit_tuple)
    k = len(digits)
    n = int(exponent) + k  # position of the decimal point relative to the digits

    if k <= n <= 21:
        text = digits + "0" * (n - k)
    elif 0 < n <= 21:
        text = f"{digits[:n]}.{digits[n:]}"
    elif -6 < n <= 0:
        text = "0." + "0" * -n + digits
    else:
        e = n - 1
        mantissa = digits if k == 1 else f"{digits[0]}.{digits[1:]}"
        text = f"{mantissa}e{'+' if e >= 0 else '-'}{abs(e)}"

    return f"-{text}" if sign else text


def render_value(value: typing.Any) -> str:
    """Text content for a single value, written the way JSON would spell it."""
    if isinstance(value, str):
        return value
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float):
        return format_float(value)
    if isinstance(value, int):
        return str(value)
    if value is None:
        return ""
    return json.dumps(value, separators=(",", ":"), ensure_ascii=False)


def build_document(projected: typing.Sequence[ProjectedRecord]) -> str:
    """Serialize projected records as an indented ``weather_data`` document."""
    root = ET.Element(ROOT_TAG)
    for item in projected:
        record = ET.SubElement(root, RECORD_TAG)
        for tag, value in item.elements():
            ET.SubElement(record, tag).text = render_value(value)

    ET.indent(root, space=INDENT)
    # Empty values stay as <tag></tag> rather than <tag />
    return ET.tostring(root, encoding="unicode", short_empty_elements=False) + "\n"
