"""Command-line entry point for the weather XML service.

Parses the options, checks the dataset exists, then serves the endpoint with uvicorn.
"""

import sys
from pathlib import Path
from typing import Final

import structlog
import typer
import uvicorn
from pydantic import ValidationError

from weather_xml.config import Settings
from weather_xml.logging import setup_logging
from weather_xml.server import create_app

app = typer.Typer(help="Serve a JSON weather dataset as filtered XML", add_completion=False)

logger: Final = structlog.get_logger("Main")

INPUT_OPTION = typer.Option(..., "--input", "-i", help="Path to input JSON file")
HOST_OPTION = typer.Option(..., "--host", "-h", help="Server host")
PORT_OPTION = typer.Option(..., "--port", "-p", help="Server port")
ARTIFACT_OPTION = typer.Option(None, "--artifact", help="Where to save the last response")
LOG_LEVEL_OPTION = typer.Option(None, "--log-level", help="Log level (default INFO)")


def check_input_file(path: Path) -> bool:
    """Startup precondition: the dataset must exist before the server listens."""
    if not path.exists():
        logger.error("Cannot find input file", path=str(path))
        return False
    return True


@app.command()
def serve(
    input_path: Path = INPUT_OPTION,
    host: str = HOST_OPTION,
    port: int = PORT_OPTION,
    artifact: Path | None = ARTIFACT_OPTION,
    log_level: str | None = LOG_LEVEL_OPTION,
) -> None:
    """Start the HTTP server."""
    overrides: dict[str, object] = {}
    if artifact is not None:
        overrides["artifact_path"] = artifact
    if log_level is not None:
        overrides["log_level"] = log_level

    try:
        settings = Settings(input_path=input_path, host=host, port=port, **overrides)
    except ValidationError as err:
        typer.secho("Config error(s):", fg=typer.colors.RED, err=True)
        for e in err.errors():
            typer.secho(f"  • {e['loc'][0]} - {e['msg']}", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=2) from err

    setup_logging(settings.log_level, settings.log_dir)

    if not check_input_file(settings.input_path):
        raise typer.Exit(code=1)

    uvicorn.run(
        create_app(settings),
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
        log_config=None,
    )


def main() -> None:
    try:
        app()
    except KeyboardInterrupt:
        sys.exit(0)


if __name__ == "__main__":
    main()
