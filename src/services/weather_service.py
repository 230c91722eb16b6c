import structlog

from src.models.weather import WeatherResponse
from src.utils.singleton import Singleton

logger = structlog.get_logger(__name__)


class WeatherService(Singleton):
    """
    Stand-in weather provider backing the getWeather demo tool.

    Every location reports the same reading so that tool calling can be
    demonstrated without a weather API.
    """

    FIXED_TEMPERATURE = 18
    FIXED_UNITS = "C"

    def get_weather(self, location: str) -> WeatherResponse:
        """
        Get the weather for the requested location.

        Args:
            location: Location named in the tool call

        Returns:
            WeatherResponse, always 18 degrees Celsius
        """
        logger.info("Weather request received", location=location)

        return WeatherResponse(temperature=self.FIXED_TEMPERATURE, units=self.FIXED_UNITS)


weather_service = WeatherService()
