from typing import Optional

from pydantic import BaseModel, Field


class RealtimeSessionRequest(BaseModel):
    """Payload sent to the OpenAI realtime session endpoint."""

    model: str = Field(..., description="Realtime model identifier")
    voice: str = Field(..., description="Voice used for audio output")


class ClientSecret(BaseModel):
    """Ephemeral credential returned for a realtime session."""

    value: str = Field(default="", description="Ephemeral key handed to the browser")
    expires_at: Optional[int] = Field(default=None, description="Expiry as a Unix timestamp")


class RealtimeSessionResponse(BaseModel):
    """Subset of the OpenAI realtime session response used by the gateway."""

    client_secret: ClientSecret = Field(default_factory=ClientSecret)


class SessionKeyResponse(BaseModel):
    """Response body of the /session endpoint."""

    success: bool = Field(default=True, description="Whether a key was issued")
    key: str = Field(..., description="Ephemeral realtime session key")
