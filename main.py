import sys
import time
from contextlib import asynccontextmanager

import structlog
import uvicorn
from fastapi import FastAPI, Request
from fastapi.responses import PlainTextResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from src.api import router
from src.config.config import config
from src.services.openai_service import openai_service
from src.utils.logging_config import setup_logging

# Configure logging
setup_logging()
logger = structlog.get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan manager.

    Logs startup and releases the OpenAI client's connections on shutdown.
    """
    logger.info(
        "Starting Realtime Gateway",
        chat_model=config.chat_model,
        reasoning_model=config.reasoning_model,
        realtime_model=config.realtime_model,
    )

    try:
        yield

    finally:
        logger.info("Shutting down Realtime Gateway")
        await openai_service.close()


def create_app() -> FastAPI:
    """
    Create and configure the FastAPI application.

    Returns:
        Configured FastAPI application instance
    """
    # Only the gateway's own routes are served: no docs, no trailing-slash redirects
    app = FastAPI(
        title="Realtime Gateway",
        description="Browser-facing gateway to the OpenAI realtime, chat and reasoning APIs.",
        version="1.0.0",
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
        redirect_slashes=False,
        lifespan=lifespan,
    )

    # Request logging middleware
    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        """Log all HTTP requests with timing information."""
        start_time = time.time()

        logger.info(
            "HTTP request started",
            method=request.method,
            url=str(request.url),
            client_ip=request.client.host if request.client else "unknown",
        )

        try:
            response = await call_next(request)
            process_time = time.time() - start_time

            logger.info(
                "HTTP request completed",
                method=request.method,
                url=str(request.url),
                status_code=response.status_code,
                process_time=process_time,
            )

            response.headers["X-Process-Time"] = str(process_time)
            return response

        except Exception as e:
            process_time = time.time() - start_time
            logger.error(
                "HTTP request failed",
                method=request.method,
                url=str(request.url),
                error=str(e),
                process_time=process_time,
            )
            raise

    # Global exception handler
    @app.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception):
        """Handle unexpected exceptions globally."""
        logger.error(
            "Unhandled exception",
            method=request.method,
            url=str(request.url),
            error=str(exc),
            exc_info=True,
        )

        return PlainTextResponse("Internal server error", status_code=500)

    # HTTP exception handler, also covers router 404/405
    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        """Render HTTP errors as plain text."""
        logger.warning(
            "HTTP exception",
            method=request.method,
            url=str(request.url),
            status_code=exc.status_code,
            detail=exc.detail,
        )

        return PlainTextResponse(
            str(exc.detail),
            status_code=exc.status_code,
            headers=getattr(exc, "headers", None),
        )

    app.include_router(router)

    return app


# Create the application instance
app = create_app()


def main():
    logger.info(
        f"Starting Realtime Gateway in {config.environment} environment",
        host=config.api_host,
        port=config.api_port,
        url=f"http://localhost:{config.api_port}",
    )

    try:
        uvicorn.run(
            app,
            host=config.api_host,
            port=config.api_port,
            log_level=config.log_level.lower(),
            log_config=None,
            access_log=True,
            server_header=False,
            date_header=False,
        )
    except KeyboardInterrupt:
        logger.info("Server shutdown requested")
    except Exception as e:
        logger.error("Server failed to start", error=str(e))
        sys.exit(1)


if __name__ == "__main__":
    main()
