"""Tool descriptors exposing the video service to the AI assistant"""
import logging
from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Optional, Type

from pydantic import BaseModel, Field, TypeAdapter

from core.catalog import CATEGORIES
from service.dto import VideoFilter, VideoRecord, VideoSummary
from service.videos_service import VideoService, get_default_service

logger = logging.getLogger(__name__)


class UnknownToolError(Exception):
    """Requested tool is not registered"""
    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Unknown tool: {name}")


class NoArguments(BaseModel):
    """Tool takes no input"""


class VideoIdArguments(BaseModel):
    id: str = Field(description="The video ID")


@dataclass
class ToolSpec:
    name: str
    description: str
    input_model: Type[BaseModel]
    output_type: Any
    handler: Callable[[VideoService, BaseModel], Any]

    def describe(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "description": self.description,
            "inputSchema": self.input_model.model_json_schema(by_alias=True),
            "outputSchema": TypeAdapter(self.output_type).json_schema(by_alias=True),
        }


TOOLS: List[ToolSpec] = [
    ToolSpec(
        name="trendingVideos",
        description=(
            "Get trending tech videos from YouTube with optional filtering by category, sorting, "
            f"and limiting results. Categories include: {', '.join(CATEGORIES)}. By default, this "
            "uses the real YouTube API if configured, otherwise falls back to mock data."
        ),
        input_model=VideoFilter,
        output_type=List[VideoRecord],
        handler=lambda service, args: service.list_videos(args),
    ),
    ToolSpec(
        name="videoAnalytics",
        description=(
            "Get analytics summary for YouTube videos including total views, video counts, "
            "ratings, and available categories"
        ),
        input_model=NoArguments,
        output_type=VideoSummary,
        handler=lambda service, args: service.get_summary(),
    ),
    ToolSpec(
        name="getVideo",
        description="Get detailed information about a specific video by its ID",
        input_model=VideoIdArguments,
        output_type=Optional[VideoRecord],
        handler=lambda service, args: service.get_video_by_id(args.id),
    ),
]

_TOOLS_BY_NAME = {tool.name: tool for tool in TOOLS}


def describe_tools() -> List[Dict[str, Any]]:
    return [tool.describe() for tool in TOOLS]


def invoke_tool(name: str, arguments: Optional[Dict[str, Any]] = None, service: Optional[VideoService] = None) -> Any:
    """
    Validate arguments and run a registered tool.

    Raises:
        UnknownToolError: no tool with this name
        pydantic.ValidationError: arguments do not match the tool input schema
    """
    tool = _TOOLS_BY_NAME.get(name)
    if tool is None:
        raise UnknownToolError(name)

    args = tool.input_model.model_validate(arguments or {})
    logger.info("Tool invoked", extra={"tool": name})
    result = tool.handler(service or get_default_service(), args)
    return TypeAdapter(tool.output_type).dump_python(result, mode="json", by_alias=True)
