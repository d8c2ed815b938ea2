"""Failures the request pipeline converts into plain-text 500 responses."""


class WeatherXmlError(Exception):
    """Base error of the weather XML service.

    ``message`` is the exact response body sent to the client.
    """

    message: str = "Internal server error"
    status_code: int = 500

    def __init__(self, detail: str | None = None) -> None:
        super().__init__(detail or self.message)
        self.detail = detail or self.message


class InvalidInputError(WeatherXmlError):
    """The dataset source could not be parsed as JSON."""

    message = "Invalid JSON input file"


class MissingInputError(WeatherXmlError):
    """The dataset source disappeared after startup."""

    message = "Cannot find input file"
