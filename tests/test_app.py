import logging
from unittest.mock import patch

import pytest
from fastapi.testclient import TestClient

from main import app
from src.services.weather_service import weather_service
from src.utils.logging_config import setup_logging


@pytest.fixture
def log_file(tmp_path, monkeypatch):
    """Configure logging into a temporary working directory."""
    monkeypatch.chdir(tmp_path)

    root_logger = logging.getLogger()
    saved_handlers = list(root_logger.handlers)
    saved_level = root_logger.level

    path = setup_logging()
    added_handlers = list(root_logger.handlers)

    yield tmp_path / path

    for handler in added_handlers:
        root_logger.removeHandler(handler)
        handler.close()
    root_logger.handlers[:] = saved_handlers
    root_logger.setLevel(saved_level)


class TestApplication:
    """Test cases for the application middleware and exception handlers."""

    def test_process_time_header(self, client):
        """Test every response carries the request duration."""
        response = client.post("/tools/getWeather", json={"location": "Oslo"})

        assert response.status_code == 200
        assert float(response.headers["x-process-time"]) >= 0

    def test_process_time_header_on_errors(self, client):
        """Test error responses are timed too."""
        response = client.get("/tools/getWeather")

        assert response.status_code == 405
        assert "x-process-time" in response.headers

    def test_unexpected_exception_returns_plain_500(self):
        """Test unhandled errors are rendered as a plain-text 500."""
        client = TestClient(app, raise_server_exceptions=False)

        with patch.object(weather_service, "get_weather", side_effect=RuntimeError("boom")):
            response = client.post("/tools/getWeather", json={"location": "Oslo"})

        assert response.status_code == 500
        assert response.headers["content-type"].startswith("text/plain")
        assert response.text == "Internal server error"

    def test_route_events_written_to_log_file(self, client, log_file):
        """Test structured route events reach the environment's log file."""
        response = client.post("/tools/getWeather", json={"location": "Valparaiso"})
        assert response.status_code == 200

        for handler in logging.getLogger().handlers:
            handler.flush()

        contents = log_file.read_text(encoding="utf-8")
        assert "event='Weather request received'" in contents
        assert "location='Valparaiso'" in contents
        assert "[INFO] [weather_service]" in contents
        assert "event='HTTP request completed'" in contents
