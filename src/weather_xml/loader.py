import asyncio
import json
import typing
from pathlib import Path

import structlog

from weather_xml.errors import InvalidInputError, MissingInputError
from weather_xml.models import WeatherRecord

logger = structlog.get_logger("Loader")


def _reject_constant(name: str) -> typing.NoReturn:
    # NaN / Infinity are not JSON
    raise ValueError(f"Invalid JSON constant: {name}")


def parse_dataset(raw: str) -> list[WeatherRecord]:
    """Parse dataset text into records.

    Accepts a top-level array, an object with a ``records`` array, or any other
    JSON value, which is treated as a single record.
    """
    try:
        data = json.loads(raw, parse_constant=_reject_constant)
    except ValueError as e:
        raise InvalidInputError(str(e)) from e

    if isinstance(data, list):
        items = data
    elif isinstance(data, dict) and isinstance(data.get("records"), list):
        items = data["records"]
    else:
        items = [data]

    return [WeatherRecord.from_source(item) for item in items]


def _read_text(path: Path) -> str:
    try:
        return path.read_text(encoding="utf-8")
    except FileNotFoundError as e:
        raise MissingInputError(str(e)) from e
    except UnicodeDecodeError as e:
        raise InvalidInputError(str(e)) from e


async def load_dataset(path: Path) -> list[WeatherRecord]:
    """Read and parse the dataset. Called fresh for every request."""
    raw = await asyncio.to_thread(_read_text, path)
    records = parse_dataset(raw)
    logger.debug("Dataset loaded", path=str(path), records=len(records))
    return records
