import asyncio
import os
import uuid
from pathlib import Path

import structlog

logger = structlog.get_logger("Artifact")


def _replace_file(path: Path, text: str) -> None:
    # Unique temp name per writer; concurrent requests race on the final replace only
    tmp_file = path.with_name(f".{path.name}.{uuid.uuid4().hex}.tmp")
    try:
        tmp_file.write_text(text, encoding="utf-8")
        os.replace(tmp_file, path)
    finally:
        if tmp_file.exists():
            tmp_file.unlink()


async def write_artifact(path: Path, text: str) -> None:
    """Overwrite ``path`` with the last response document.

    Last completed write wins. Readers see either the old or the new file, never a partial one.
    """
    await asyncio.to_thread(_replace_file, path, text)
    logger.debug("Artifact written", path=str(path), size=len(text))
