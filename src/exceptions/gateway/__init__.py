from src.exceptions.gateway.completion_error import CompletionError
from src.exceptions.gateway.request_body_error import RequestBodyError
from src.exceptions.gateway.session_key_error import SessionKeyError
from src.exceptions.gateway.upstream_api_error import UpstreamAPIError

__all__ = ["CompletionError", "RequestBodyError", "SessionKeyError", "UpstreamAPIError"]
