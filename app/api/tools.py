import logging
from typing import Any, Dict, List, Optional

from fastapi import APIRouter, Body, Depends, HTTPException
from pydantic import ValidationError

from app.deps.common import get_trace_id, get_video_service
from service.tools import UnknownToolError, describe_tools, invoke_tool
from service.videos_service import VideoService

logger = logging.getLogger(__name__)
router = APIRouter(tags=["tools"])


@router.get("/tools")
def list_tools() -> List[Dict[str, Any]]:
    """Tool descriptors for the assistant integration"""
    return describe_tools()


@router.post("/tools/{name}")
def call_tool(
    name: str,
    arguments: Optional[Dict[str, Any]] = Body(default=None),
    service: VideoService = Depends(get_video_service),
    trace_id: str = Depends(get_trace_id)
) -> Any:
    """Run a tool with JSON arguments"""
    try:
        return invoke_tool(name, arguments, service=service)

    except UnknownToolError as e:
        logger.warning("Unknown tool requested", extra={"trace_id": trace_id, "tool": name})
        raise HTTPException(
            status_code=404,
            detail={
                "error": {
                    "code": "TOOL_NOT_FOUND",
                    "message": str(e),
                    "trace_id": trace_id
                }
            }
        )

    except ValidationError as e:
        logger.warning("Invalid tool arguments", extra={
            "trace_id": trace_id,
            "tool": name,
            "error": str(e)
        })
        raise HTTPException(
            status_code=422,
            detail={
                "error": {
                    "code": "VALIDATION_FAILED",
                    "message": str(e),
                    "trace_id": trace_id
                }
            }
        )
