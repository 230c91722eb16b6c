from fastapi import Request
from starlette.requests import ClientDisconnect

from src.exceptions.gateway import RequestBodyError


async def read_text_body(request: Request) -> str:
    """
    Read the raw request body as UTF-8 text.

    Raises:
        RequestBodyError: If the body cannot be received or is not valid UTF-8
    """
    try:
        body = await request.body()
        return body.decode("utf-8")
    except (UnicodeDecodeError, ClientDisconnect) as e:
        raise RequestBodyError(str(e))
