import httpx
import structlog
from fastapi import status
from pydantic import ValidationError

from src.config.config import config
from src.exceptions.gateway import SessionKeyError
from src.models.session import ClientSecret, RealtimeSessionRequest, RealtimeSessionResponse
from src.utils.singleton import Singleton

logger = structlog.get_logger(__name__)


class RealtimeSessionService(Singleton):
    """
    Service issuing ephemeral keys for OpenAI realtime sessions.

    The browser never sees the gateway's API key; it receives the short-lived
    client secret of a session created with a fixed model and voice.
    """

    def __init__(self):
        """Initialize the realtime session service."""
        super().__init__()

        if hasattr(self, "_session_initialized"):
            return

        self.url = f"{config.openai_base_url.rstrip('/')}/realtime/sessions"
        self.api_key = config.openai_api_key
        self.payload = RealtimeSessionRequest(
            model=config.realtime_model,
            voice=config.realtime_voice,
        )
        self.timeout = httpx.Timeout(config.upstream_timeout)

        self._session_initialized = True

    def _headers(self) -> dict:
        return {
            "Content-Type": "application/json",
            "Authorization": f"Bearer {self.api_key}",
        }

    async def create_session_key(self) -> str:
        """
        Create a realtime session and return its ephemeral client secret.

        Returns:
            The client secret value

        Raises:
            SessionKeyError: If the request fails, the upstream answers with a
                non-200 status, or the response carries no usable secret
        """
        logger.info(
            "Creating realtime session",
            model=self.payload.model,
            voice=self.payload.voice,
        )

        try:
            async with httpx.AsyncClient(timeout=self.timeout) as client:
                response = await client.post(
                    self.url,
                    json=self.payload.model_dump(),
                    headers=self._headers(),
                )

        except httpx.HTTPError as e:
            logger.error("Realtime session request failed", error=str(e))
            raise SessionKeyError(
                f"request failed: {str(e)}",
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            )

        if response.status_code != status.HTTP_200_OK:
            logger.warning(
                "Realtime session request rejected",
                status_code=response.status_code,
                response_text=response.text,
            )
            raise SessionKeyError(
                f"openai request failed: {response.status_code}",
                status_code=response.status_code,
            )

        secret = self._parse_client_secret(response.content)
        logger.info("Realtime session created", expires_at=secret.expires_at)
        return secret.value

    @staticmethod
    def _parse_client_secret(content: bytes) -> ClientSecret:
        try:
            session = RealtimeSessionResponse.model_validate_json(content)
        except ValidationError as e:
            raise SessionKeyError(f"failed to decode token response: {str(e)}")

        if not session.client_secret.value:
            raise SessionKeyError("received empty client secret from OpenAI API")

        return session.client_secret


realtime_session_service = RealtimeSessionService()
