from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
import logging
import uvicorn

from app.api.videos import router as videos_router
from app.api.tools import router as tools_router
from app.api.health import router as health_router
from app.deps.common import get_trace_id
from core.config import get_settings
from core.logging import setup_json_logging

# Setup logging
setup_json_logging(get_settings().log_level)
logger = logging.getLogger(__name__)

app = FastAPI(title="Trending Tech Video API", version="0.1.0")

# Include routers
app.include_router(health_router)  # Health at root level
app.include_router(videos_router, prefix="/api/v1")
app.include_router(tools_router, prefix="/api/v1")


@app.exception_handler(Exception)
async def unexpected_error_handler(request: Request, exc: Exception) -> JSONResponse:
    trace_id = get_trace_id()
    logger.error("Unexpected error", exc_info=exc, extra={
        "trace_id": trace_id,
        "error_type": type(exc).__name__,
        "error": str(exc)
    })
    return JSONResponse(
        status_code=500,
        content={
            "detail": {
                "error": {
                    "code": "INTERNAL_ERROR",
                    "message": "Internal server error",
                    "trace_id": trace_id
                }
            }
        }
    )


if __name__ == "__main__":
    uvicorn.run(app, host="0.0.0.0", port=8000)
