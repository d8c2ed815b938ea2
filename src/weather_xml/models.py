import typing

from pydantic import BaseModel, ConfigDict, Field

# Text stands in for a value the source record does not have
EMPTY = ""


class WeatherRecord(BaseModel):
    """One observation from the dataset. Only the fields the endpoint serves are kept."""

    model_config = ConfigDict(extra="ignore", frozen=True)

    rainfall: typing.Any = Field(default=None, validation_alias="Rainfall")
    pressure3pm: typing.Any = Field(default=None, validation_alias="Pressure3pm")
    humidity3pm: typing.Any = Field(default=None, validation_alias="Humidity3pm")

    @classmethod
    def from_source(cls, item: typing.Any) -> "WeatherRecord":
        """Build a record from one parsed JSON element.

        Anything that is not a JSON object has none of the known fields.
        """
        if not isinstance(item, dict):
            return cls()
        return cls.model_validate(item)


class Query(BaseModel):
    """Filter and projection directive derived from the request URL."""

    model_config = ConfigDict(frozen=True)

    min_rainfall: float | None = Field(default=None, description="Strict lower bound on Rainfall")
    show_humidity: bool = Field(default=False, description="Emit the humidity element")


class ProjectedRecord(BaseModel):
    """Output shape of a record. ``humidity`` is None when it was not requested."""

    model_config = ConfigDict(frozen=True)

    rainfall: typing.Any = EMPTY
    pressure3pm: typing.Any = EMPTY
    humidity: typing.Any = None

    def elements(self) -> list[tuple[str, typing.Any]]:
        """Child elements in document order."""
        items: list[tuple[str, typing.Any]] = [
            ("rainfall", self.rainfall),
            ("pressure3pm", self.pressure3pm),
        ]
        if self.humidity is not None:
            items.append(("humidity", self.humidity))
        return items
