from src.models.session.session import (
    ClientSecret,
    RealtimeSessionRequest,
    RealtimeSessionResponse,
    SessionKeyResponse,
)

__all__ = [
    "ClientSecret",
    "RealtimeSessionRequest",
    "RealtimeSessionResponse",
    "SessionKeyResponse",
]
