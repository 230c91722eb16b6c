import structlog
from fastapi import APIRouter, HTTPException, Request, status
from fastapi.responses import PlainTextResponse

from src.api.request_body import read_text_body
from src.exceptions.gateway import CompletionError, RequestBodyError
from src.services.openai_service import openai_service

logger = structlog.get_logger(__name__)

# Create router
router = APIRouter(tags=["Chat"])


async def _read_prompt(request: Request) -> str:
    try:
        return await read_text_body(request)
    except RequestBodyError as e:
        logger.warning("Failed to read request body", path=request.url.path, error=str(e))
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"Error reading request body: {str(e)}",
        )


def _completion_failed(endpoint: str, e: CompletionError) -> HTTPException:
    logger.error(
        "Completion failed",
        endpoint=endpoint,
        status_code=e.status_code,
        error=str(e),
    )
    return HTTPException(
        status_code=e.status_code,
        detail=f"Error creating chat completion: {str(e)}",
    )


@router.post("/chat", summary="Chat Completion", response_class=PlainTextResponse)
async def chat(request: Request):
    """
    Relay the raw request body to the chat model.

    The body is treated as plain text and sent as-is; the model output is
    returned verbatim as text/plain.

    Raises:
        HTTPException: 400 if the body is not UTF-8 text, or the upstream
            status code if the completion fails.
    """
    prompt = await _read_prompt(request)

    try:
        output = await openai_service.chat(prompt)
    except CompletionError as e:
        raise _completion_failed("chat", e)

    return PlainTextResponse(output)


@router.post("/reasoning", summary="Reasoning Completion", response_class=PlainTextResponse)
async def reasoning(request: Request):
    """Relay the raw request body to the reasoning model."""
    prompt = await _read_prompt(request)

    try:
        output = await openai_service.reason(prompt)
    except CompletionError as e:
        raise _completion_failed("reasoning", e)

    return PlainTextResponse(output)
