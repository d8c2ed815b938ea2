import json
import os
import sys
from pathlib import Path

import pytest

# Add src to pythonpath
sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), "../src")))

from weather_xml.config import Settings  # noqa: E402

SAMPLE_RECORDS = [
    {"Rainfall": 5, "Pressure3pm": 1010, "Humidity3pm": 80},
    {"Rainfall": 1, "Pressure3pm": 1005, "Humidity3pm": 60},
]


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Keep stray WEATHER_XML_* variables out of the settings under test."""
    for key in list(os.environ):
        if key.startswith("WEATHER_XML_"):
            monkeypatch.delenv(key)


@pytest.fixture
def write_dataset(tmp_path):
    """Returns a helper that writes a dataset file and gives back its path."""

    def _write(content, name: str = "data.json") -> Path:
        path = tmp_path / name
        text = content if isinstance(content, str) else json.dumps(content)
        path.write_text(text, encoding="utf-8")
        return path

    return _write


@pytest.fixture
def dataset_path(write_dataset) -> Path:
    return write_dataset(SAMPLE_RECORDS)


@pytest.fixture
def settings(dataset_path, tmp_path) -> Settings:
    return Settings(input_path=dataset_path, artifact_path=tmp_path / "last_response.xml")
