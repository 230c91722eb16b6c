from src.api.session.session_routes import router as session_router

__all__ = ["session_router"]
