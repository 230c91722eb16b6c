from src.exceptions.openai.configuration_error import ConfigurationError


class OpenAIKeyError(ConfigurationError):
    """Exception raised when the OpenAI API key is missing."""

    pass
