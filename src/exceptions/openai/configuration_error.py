from src.exceptions.base import GatewayError


class ConfigurationError(GatewayError):
    """Exception for invalid or missing application settings."""

    pass
