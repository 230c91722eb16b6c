from src.exceptions.openai.configuration_error import ConfigurationError
from src.exceptions.openai.openai_key_error import OpenAIKeyError

__all__ = ["ConfigurationError", "OpenAIKeyError"]
