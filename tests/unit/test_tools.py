"""Unit tests for the assistant tool registry"""
import pytest
from pydantic import ValidationError

from core.catalog import CATEGORIES
from service.tools import TOOLS, UnknownToolError, describe_tools, invoke_tool


class TestToolDescriptors:
    """Descriptors handed to the assistant integration"""

    def test_registered_tool_names(self):
        assert [tool.name for tool in TOOLS] == ["trendingVideos", "videoAnalytics", "getVideo"]

    def test_descriptor_shape(self):
        for descriptor in describe_tools():
            assert set(descriptor) == {"name", "description", "inputSchema", "outputSchema"}
            assert descriptor["description"]

    def test_trending_input_schema_uses_camel_case(self):
        trending = describe_tools()[0]
        properties = trending["inputSchema"]["properties"]

        assert set(properties) == {"category", "limit", "sortBy", "useRealApi"}

    def test_trending_description_lists_categories(self):
        description = describe_tools()[0]["description"]
        assert all(category in description for category in CATEGORIES)

    def test_output_schema_is_array_of_records(self):
        output = describe_tools()[0]["outputSchema"]
        assert output["type"] == "array"


class TestInvokeTool:
    """Tool invocation"""

    def test_trending_videos(self, static_service):
        result = invoke_tool("trendingVideos", {"category": "React", "sortBy": "views"}, service=static_service)

        assert len(result) == 1
        assert result[0]["id"] == "9"
        assert result[0]["rank"] == 1
        assert "timeAgo" in result[0]

    def test_video_analytics(self, static_service):
        result = invoke_tool("videoAnalytics", {}, service=static_service)

        assert result["totalVideos"] == 10
        assert result["categories"] == CATEGORIES

    def test_get_video(self, static_service):
        assert invoke_tool("getVideo", {"id": "2"}, service=static_service)["title"] == "The wild rise of OpenClaw"

    def test_get_video_not_found_is_none(self, static_service):
        assert invoke_tool("getVideo", {"id": "404"}, service=static_service) is None

    def test_unknown_tool(self, static_service):
        with pytest.raises(UnknownToolError):
            invoke_tool("countryPopulation", {}, service=static_service)

    def test_invalid_arguments(self, static_service):
        with pytest.raises(ValidationError):
            invoke_tool("trendingVideos", {"sortBy": "likes"}, service=static_service)

        with pytest.raises(ValidationError):
            invoke_tool("getVideo", {}, service=static_service)
