import os
from pathlib import Path
from unittest.mock import patch

import pytest
from pydantic import ValidationError
from weather_xml.config import Settings


class TestConfig:
    def test_defaults(self, dataset_path):
        """Only the dataset path is required."""
        settings = Settings(input_path=dataset_path)
        assert settings.host == "127.0.0.1"
        assert settings.port == 3000
        assert settings.artifact_path == Path("last_response.xml").resolve()
        assert settings.log_level == "INFO"
        assert settings.log_dir is None

    def test_input_path_required(self):
        with pytest.raises(ValidationError):
            Settings()

    def test_env_override(self, dataset_path):
        """Environment fills fields that were not passed explicitly."""
        with patch.dict(os.environ, {"WEATHER_XML_PORT": "8080", "WEATHER_XML_HOST": "0.0.0.0"}):
            settings = Settings(input_path=dataset_path)
            assert settings.port == 8080
            assert settings.host == "0.0.0.0"

    def test_explicit_values_beat_env(self, dataset_path):
        with patch.dict(os.environ, {"WEATHER_XML_PORT": "8080"}):
            settings = Settings(input_path=dataset_path, port=9000)
            assert settings.port == 9000

    def test_input_from_env(self, dataset_path):
        with patch.dict(os.environ, {"WEATHER_XML_INPUT_PATH": str(dataset_path)}):
            settings = Settings()
            assert settings.input_path == dataset_path.resolve()

    def test_relative_paths_resolved(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        settings = Settings(input_path="data.json", artifact_path="out/last.xml")
        assert settings.input_path == (tmp_path / "data.json").resolve()
        assert settings.artifact_path == (tmp_path / "out" / "last.xml").resolve()

    @pytest.mark.parametrize("port", [0, 70000, -1])
    def test_port_out_of_range(self, dataset_path, port):
        with pytest.raises(ValidationError):
            Settings(input_path=dataset_path, port=port)

    def test_log_level_normalized(self, dataset_path):
        assert Settings(input_path=dataset_path, log_level=" debug ").log_level == "DEBUG"

    def test_log_level_rejected(self, dataset_path):
        with pytest.raises(ValidationError):
            Settings(input_path=dataset_path, log_level="chatty")

    def test_frozen(self, settings):
        """Configuration is immutable once built."""
        with pytest.raises(ValidationError):
            settings.port = 1234

    def test_base_url(self, dataset_path):
        settings = Settings(input_path=dataset_path, host="localhost", port=3001)
        assert settings.base_url == "http://localhost:3001/"
