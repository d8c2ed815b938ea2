"""Single-endpoint service that serves a JSON weather dataset as filtered XML."""

__version__ = "0.1.0"
