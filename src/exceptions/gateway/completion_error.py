from src.exceptions.gateway.upstream_api_error import UpstreamAPIError


class CompletionError(UpstreamAPIError):
    """Exception for failed chat or reasoning completions."""

    pass
