from src.api.static.index_route import router as static_router

__all__ = ["static_router"]
