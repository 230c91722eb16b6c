from src.exceptions.base import GatewayError
from src.exceptions.gateway import (
    CompletionError,
    RequestBodyError,
    SessionKeyError,
    UpstreamAPIError,
)
from src.exceptions.openai import ConfigurationError, OpenAIKeyError

__all__ = [
    "GatewayError",
    "CompletionError",
    "RequestBodyError",
    "SessionKeyError",
    "UpstreamAPIError",
    "ConfigurationError",
    "OpenAIKeyError",
]
