import os

# Settings are loaded when src.config.config is first imported
os.environ.setdefault("OPENAI_API_KEY", "test-openai-key")

from unittest.mock import AsyncMock, MagicMock, patch

import httpx
import pytest
from fastapi.testclient import TestClient

from main import app
from src.services.openai_service import openai_service
from src.services.session_service import realtime_session_service


@pytest.fixture
def client():
    """Test client for the gateway application (lifespan not run)."""
    return TestClient(app)


@pytest.fixture
def mock_openai_service():
    """Replace the OpenAI relay methods with async mocks."""
    with patch.object(openai_service, "chat", new_callable=AsyncMock) as mock_chat, \
            patch.object(openai_service, "reason", new_callable=AsyncMock) as mock_reason:
        service = MagicMock()
        service.chat = mock_chat
        service.reason = mock_reason
        yield service


@pytest.fixture
def mock_session_service():
    """Replace session key creation with an async mock."""
    with patch.object(
        realtime_session_service, "create_session_key", new_callable=AsyncMock
    ) as mock_create:
        yield mock_create


@pytest.fixture
def mock_config():
    """Mock the config object."""
    mock_config = MagicMock()
    mock_config.openai_api_key = "test-openai-key"
    mock_config.openai_base_url = "https://api.openai.com/v1"
    mock_config.chat_model = "gpt-4o"
    mock_config.reasoning_model = "o3-mini"
    mock_config.realtime_model = "gpt-4o-realtime-preview-2024-12-17"
    mock_config.realtime_voice = "echo"
    mock_config.upstream_timeout = None
    return mock_config


@pytest.fixture
def upstream_request():
    """Request object used to build fake upstream responses and errors."""
    return httpx.Request("POST", "https://api.openai.com/v1/responses")


@pytest.fixture
def index_dir(tmp_path):
    """Directory holding a minimal index page."""
    (tmp_path / "index.html").write_text("<html><body>gateway</body></html>", encoding="utf-8")
    return tmp_path
