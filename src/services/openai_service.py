import openai
import structlog
from fastapi import status
from openai import AsyncOpenAI

from src.config.config import config
from src.exceptions.gateway import CompletionError
from src.utils.singleton import Singleton

logger = structlog.get_logger(__name__)


class OpenAIService(Singleton):
    """
    Relay for text prompts to the OpenAI Responses API.

    A prompt is sent as a single string input and the aggregated output text
    is returned. Requests are made exactly once: the SDK's own retries are
    disabled and no timeout is applied unless one is configured.
    """

    def __init__(self):
        """Initialize the OpenAI service."""
        super().__init__()

        if hasattr(self, "_openai_initialized"):
            return

        self.chat_model = config.chat_model
        self.reasoning_model = config.reasoning_model

        self._client = AsyncOpenAI(
            api_key=config.openai_api_key,
            base_url=config.openai_base_url,
            timeout=config.upstream_timeout,
            max_retries=0,
        )

        self._openai_initialized = True
        logger.info(
            "OpenAI service initialized",
            chat_model=self.chat_model,
            reasoning_model=self.reasoning_model,
        )

    async def create_response(self, model: str, prompt: str) -> str:
        """
        Send a prompt to the given model and return its output text.

        Args:
            model: Model identifier
            prompt: Raw user text

        Returns:
            The model output as plain text

        Raises:
            CompletionError: If the upstream call fails; carries the upstream
                status code when OpenAI returned an error response
        """
        logger.info("Creating response", model=model, prompt_length=len(prompt))

        try:
            response = await self._client.responses.create(model=model, input=prompt)

        except openai.APIStatusError as e:
            logger.warning(
                "OpenAI request failed",
                model=model,
                status_code=e.status_code,
                error=str(e),
            )
            raise CompletionError(str(e), status_code=e.status_code)

        except openai.APIError as e:
            logger.error("OpenAI request error", model=model, error=str(e))
            raise CompletionError(str(e), status_code=status.HTTP_500_INTERNAL_SERVER_ERROR)

        output_text = response.output_text
        logger.info("Response created", model=model, output_length=len(output_text))
        return output_text

    async def chat(self, prompt: str) -> str:
        """Relay a prompt to the chat model."""
        return await self.create_response(self.chat_model, prompt)

    async def reason(self, prompt: str) -> str:
        """Relay a prompt to the reasoning model."""
        return await self.create_response(self.reasoning_model, prompt)

    async def close(self):
        """Release the underlying HTTP connection pool."""
        await self._client.close()


openai_service = OpenAIService()
