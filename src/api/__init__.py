from fastapi import APIRouter

from src.api.chat import chat_router
from src.api.session import session_router
from src.api.static import static_router
from src.api.tools import tools_router

# Create main router
router = APIRouter()

# Include all sub-routers
router.include_router(static_router)
router.include_router(session_router)
router.include_router(chat_router)
router.include_router(tools_router)

__all__ = ["router"]
