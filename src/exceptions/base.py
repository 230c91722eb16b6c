class GatewayError(Exception):
    """Base exception for all realtime gateway errors."""

    pass
