from pydantic import BaseModel, Field


class WeatherRequest(BaseModel):
    """Arguments of the getWeather tool call."""

    location: str = Field(default="", description="Location the weather is requested for")


class WeatherResponse(BaseModel):
    """Result of the getWeather tool call."""

    temperature: int = Field(..., description="Temperature in the given units")
    units: str = Field(..., description="Temperature units (C or F)")
