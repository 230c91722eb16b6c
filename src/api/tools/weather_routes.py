import structlog
from fastapi import APIRouter, HTTPException, Request, status
from pydantic import ValidationError

from src.models.weather import WeatherRequest, WeatherResponse
from src.services.weather_service import weather_service

logger = structlog.get_logger(__name__)

# Create router
router = APIRouter(prefix="/tools", tags=["Tools"])


@router.post("/getWeather", summary="Get Weather Tool", response_model=WeatherResponse)
async def get_weather(request: Request):
    """
    Answer a getWeather tool call.

    The body must be a JSON object such as {"location": "Paris"}. The reply
    is the same for every location.

    Raises:
        HTTPException: 400 if the body is not a valid WeatherRequest.
    """
    body = await request.body()

    try:
        weather_request = WeatherRequest.model_validate_json(body)
    except ValidationError as e:
        logger.warning("Invalid weather request", error=str(e))
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"Error parsing request body: {str(e)}",
        )

    return weather_service.get_weather(weather_request.location)
