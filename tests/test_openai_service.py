from unittest.mock import AsyncMock, MagicMock, patch

import httpx
import openai
import pytest

from src.exceptions.gateway import CompletionError
from src.services.openai_service import OpenAIService


@pytest.fixture
def service(mock_config):
    """Fresh OpenAIService with a mocked SDK client."""
    OpenAIService.reset_instance()

    with patch("src.services.openai_service.config", mock_config), \
            patch("src.services.openai_service.AsyncOpenAI") as mock_client_class:
        mock_client = MagicMock()
        mock_client.responses.create = AsyncMock()
        mock_client.close = AsyncMock()
        mock_client_class.return_value = mock_client

        service = OpenAIService()

        yield service

    OpenAIService.reset_instance()


class TestOpenAIService:
    """Test cases for the OpenAIService class."""

    def test_client_configuration(self, mock_config):
        """Test the SDK client is created without retries."""
        OpenAIService.reset_instance()

        with patch("src.services.openai_service.config", mock_config), \
                patch("src.services.openai_service.AsyncOpenAI") as mock_client_class:
            OpenAIService()

            mock_client_class.assert_called_once_with(
                api_key="test-openai-key",
                base_url="https://api.openai.com/v1",
                timeout=None,
                max_retries=0,
            )

        OpenAIService.reset_instance()

    @pytest.mark.asyncio
    async def test_chat_uses_chat_model(self, service):
        """Test chat prompts go to the chat model as a single string input."""
        service._client.responses.create.return_value = MagicMock(output_text="Hello there")

        result = await service.chat("Hi")

        assert result == "Hello there"
        service._client.responses.create.assert_awaited_once_with(model="gpt-4o", input="Hi")

    @pytest.mark.asyncio
    async def test_reason_uses_reasoning_model(self, service):
        """Test reasoning prompts go to the reasoning model."""
        service._client.responses.create.return_value = MagicMock(output_text="Because.")

        result = await service.reason("Why?")

        assert result == "Because."
        service._client.responses.create.assert_awaited_once_with(model="o3-mini", input="Why?")

    @pytest.mark.asyncio
    async def test_status_error_keeps_upstream_code(self, service, upstream_request):
        """Test upstream error responses keep their status code."""
        upstream_response = httpx.Response(429, request=upstream_request)
        service._client.responses.create.side_effect = openai.RateLimitError(
            "Rate limit reached", response=upstream_response, body=None
        )

        with pytest.raises(CompletionError, match="Rate limit reached") as exc_info:
            await service.chat("Hi")

        assert exc_info.value.status_code == 429

    @pytest.mark.asyncio
    async def test_connection_error_maps_to_500(self, service, upstream_request):
        """Test transport failures become a 500 completion error."""
        service._client.responses.create.side_effect = openai.APIConnectionError(
            request=upstream_request
        )

        with pytest.raises(CompletionError) as exc_info:
            await service.reason("Hi")

        assert exc_info.value.status_code == 500

    @pytest.mark.asyncio
    async def test_close(self, service):
        """Test closing releases the SDK client."""
        await service.close()

        service._client.close.assert_awaited_once()
