import typing
from contextlib import asynccontextmanager

import structlog
from fastapi import FastAPI, Request
from fastapi.responses import PlainTextResponse, Response

from weather_xml.artifact import write_artifact
from weather_xml.config import Settings
from weather_xml.errors import WeatherXmlError
from weather_xml.loader import load_dataset
from weather_xml.markup import build_document
from weather_xml.query import parse_query
from weather_xml.records import filter_records, project_records

logger = structlog.get_logger("Server")

XML_MEDIA_TYPE = "application/xml; charset=utf-8"
ALL_METHODS = ["GET", "HEAD", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"]
USAGE_HINT = "/?humidity=true  or /?min_rainfall=2  or /?humidity=true&min_rainfall=2"


async def serve_weather(request: Request) -> Response:
    """Filter the dataset by the URL query and return it as XML.

    Every path and method lands here. The dataset is re-read on each call.
    """
    settings: Settings = request.app.state.settings
    try:
        query = parse_query(request.url.query)
        records = await load_dataset(settings.input_path)
        projected = project_records(filter_records(records, query), query)
        document = build_document(projected)
        await write_artifact(settings.artifact_path, document)
    except WeatherXmlError:
        raise
    except Exception as e:
        logger.exception(f"Request failed: {e}", path=request.url.path)
        raise WeatherXmlError(str(e)) from e

    logger.debug("Request served", records=len(projected), query=request.url.query)
    return Response(content=document, media_type=XML_MEDIA_TYPE)


async def handle_service_error(request: Request, exc: Exception) -> Response:
    message = exc.message if isinstance(exc, WeatherXmlError) else WeatherXmlError.message
    status_code = exc.status_code if isinstance(exc, WeatherXmlError) else 500
    logger.error(message, kind=type(exc).__name__, detail=str(exc), path=request.url.path)
    return PlainTextResponse(message, status_code=status_code)


def create_app(settings: Settings) -> FastAPI:
    """Build the ASGI application around an already validated configuration."""

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> typing.AsyncGenerator[None, None]:
        logger.info(f"Server listening at {settings.base_url}")
        logger.info(f"Usage examples: {USAGE_HINT}")
        yield

    # No docs routes: every path belongs to the data endpoint
    app = FastAPI(
        title="Weather XML",
        lifespan=lifespan,
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
    )
    app.state.settings = settings

    app.add_exception_handler(WeatherXmlError, handle_service_error)
    app.add_api_route(
        "/{path:path}",
        serve_weather,
        methods=ALL_METHODS,
        include_in_schema=False,
    )
    return app
