from fastapi import status

from src.exceptions.base import GatewayError


class UpstreamAPIError(GatewayError):
    """
    Exception for failed calls to the OpenAI API.

    Carries the HTTP status code that should be returned to the caller: the
    upstream status when OpenAI answered with an error, 500 otherwise.
    """

    def __init__(self, message: str, status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR):
        super().__init__(message)
        self.status_code = status_code
