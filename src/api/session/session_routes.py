import structlog
from fastapi import APIRouter, HTTPException

from src.exceptions.gateway import SessionKeyError
from src.models.session import SessionKeyResponse
from src.services.session_service import realtime_session_service

logger = structlog.get_logger(__name__)

# Create router
router = APIRouter(tags=["Session"])


@router.get("/session", summary="Issue Realtime Session Key", response_model=SessionKeyResponse)
async def get_session_key():
    """
    Issue an ephemeral key for a browser-side realtime session.

    Returns:
        SessionKeyResponse with the client secret of a freshly created session.

    Raises:
        HTTPException: With the upstream status code when OpenAI rejects the
            request, 500 for any other failure.
    """
    try:
        key = await realtime_session_service.create_session_key()

    except SessionKeyError as e:
        logger.error("Failed to create session key", status_code=e.status_code, error=str(e))
        raise HTTPException(
            status_code=e.status_code,
            detail=f"Error creating session key. {str(e)}",
        )

    return SessionKeyResponse(success=True, key=key)
