from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Weather XML service configuration.
    Built once at startup from CLI options, environment variables and an optional .env file,
    then passed to the application. Frozen so request handling cannot mutate it.
    """

    # Dataset
    input_path: Path = Field(..., description="Path to the JSON dataset served by the endpoint")

    # Service Configuration
    host: str = Field(default="127.0.0.1", description="Host to bind the service to")
    port: int = Field(default=3000, ge=1, le=65535, description="Port to bind the service to")

    # Output
    artifact_path: Path = Field(
        default=Path("last_response.xml"),
        validate_default=True,
        description="File overwritten with the last successfully built document",
    )

    # Logging
    log_level: str = Field(default="INFO", description="Root log level")
    log_dir: Path | None = Field(default=None, description="Directory for rotated log files")

    model_config = SettingsConfigDict(
        env_prefix="WEATHER_XML_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        frozen=True,
    )

    @field_validator("input_path", "artifact_path", mode="after")
    @classmethod
    def resolve_path(cls, v: Path) -> Path:
        # Relative paths are pinned to the working directory at startup
        return v.expanduser().resolve()

    @field_validator("log_level", mode="after")
    @classmethod
    def normalize_log_level(cls, v: str) -> str:
        level = v.strip().upper()
        if level not in {"CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"}:
            raise ValueError(f"Unknown log level: {v}")
        return level

    @property
    def base_url(self) -> str:
        return f"http://{self.host}:{self.port}/"
