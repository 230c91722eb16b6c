from src.models.weather.weather import WeatherRequest, WeatherResponse

__all__ = ["WeatherRequest", "WeatherResponse"]
