import structlog
from fastapi import APIRouter, HTTPException, status
from fastapi.responses import FileResponse

from src.config.config import config

logger = structlog.get_logger(__name__)

router = APIRouter(tags=["Static"])


@router.api_route("/", methods=["GET", "HEAD"], summary="Index Page", include_in_schema=False)
async def index():
    """Serve the HTML page driving the realtime demo."""
    index_path = config.get_index_path()

    if not index_path.is_file():
        logger.warning("Index page not found", path=str(index_path))
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Not Found")

    return FileResponse(index_path, media_type="text/html")
