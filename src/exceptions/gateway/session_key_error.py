from src.exceptions.gateway.upstream_api_error import UpstreamAPIError


class SessionKeyError(UpstreamAPIError):
    """Exception for failures while issuing a realtime session key."""

    pass
