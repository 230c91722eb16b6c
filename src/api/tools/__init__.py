from src.api.tools.weather_routes import router as tools_router

__all__ = ["tools_router"]
