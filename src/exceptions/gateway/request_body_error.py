from src.exceptions.base import GatewayError


class RequestBodyError(GatewayError):
    """Exception for request bodies that cannot be read or decoded."""

    pass
