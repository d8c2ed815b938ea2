import logging
import logging.handlers
import sys
import typing
from pathlib import Path

import structlog

LOG_FILE_NAME = "weather_xml.log"

# Applied to structlog events and to plain stdlib records (uvicorn) alike
SHARED_PROCESSORS: list[typing.Any] = [
    structlog.stdlib.add_logger_name,
    structlog.stdlib.add_log_level,
    structlog.processors.TimeStamper(fmt="iso"),
    structlog.processors.StackInfoRenderer(),
    structlog.processors.format_exc_info,
]


def _build_handlers(log_dir: Path | None) -> list[logging.Handler]:
    formatter = structlog.stdlib.ProcessorFormatter(
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            structlog.processors.JSONRenderer(),
        ],
        foreign_pre_chain=SHARED_PROCESSORS,
    )

    stream_handler = logging.StreamHandler(sys.stdout)
    stream_handler.setFormatter(formatter)
    handlers: list[logging.Handler] = [stream_handler]

    if log_dir is None:
        return handlers

    try:
        log_dir.mkdir(parents=True, exist_ok=True)
        file_handler = logging.handlers.TimedRotatingFileHandler(
            log_dir / LOG_FILE_NAME,
            when="midnight",
            interval=1,
            backupCount=30,
            encoding="utf-8",
        )
    except OSError as e:
        print(f"Failed to setup file logging: {e}", file=sys.stderr)
    else:
        file_handler.setFormatter(formatter)
        handlers.append(file_handler)
    return handlers


def setup_logging(level: str = "INFO", log_dir: Path | None = None) -> None:
    """JSON lines on stdout, plus a daily-rotated file when ``log_dir`` is given."""
    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            *SHARED_PROCESSORS,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    logging.basicConfig(level=level, handlers=_build_handlers(log_dir), force=True)

    # Reduce noise from libraries
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
