import json

import pytest
from mcp.shared.exceptions import McpError
from mcp.shared.memory import create_connected_server_and_client_session
from mcp.types import INTERNAL_ERROR, INVALID_PARAMS, METHOD_NOT_FOUND

from tavus_mcp.tools import TOOL_NAMES


@pytest.mark.asyncio
async def test_list_tools_over_session_is_ordered_and_stable(server):
    async with create_connected_server_and_client_session(server.app) as session:
        first = await session.list_tools()
        second = await session.list_tools()

    assert [tool.name for tool in first.tools] == TOOL_NAMES
    assert [tool.name for tool in second.tools] == TOOL_NAMES
    assert len(first.tools) == 29


@pytest.mark.asyncio
async def test_call_tool_over_session_returns_text(server, fake_tavus):
    fake_tavus.respond("GET", "/replicas/r_123", json={"replica_id": "r_123"})

    async with create_connected_server_and_client_session(server.app) as session:
        result = await session.call_tool("get_replica", {"replica_id": "r_123"})

    assert result.isError is False
    assert json.loads(result.content[0].text) == {"replica_id": "r_123"}


@pytest.mark.asyncio
async def test_delete_over_session_returns_confirmation(server):
    async with create_connected_server_and_client_session(server.app) as session:
        result = await session.call_tool("delete_video", {"video_id": "v_9"})

    assert result.content[0].text == "Successfully deleted video v_9"


@pytest.mark.asyncio
async def test_unknown_tool_over_session_is_method_not_found(server, fake_tavus):
    async with create_connected_server_and_client_session(server.app) as session:
        with pytest.raises(McpError) as exc_info:
            await session.call_tool("launch_rocket", {})

    assert exc_info.value.error.code == METHOD_NOT_FOUND
    assert exc_info.value.error.message == "Unknown tool: launch_rocket"
    assert fake_tavus.requests == []


@pytest.mark.asyncio
async def test_upstream_error_over_session_is_internal_error(server, fake_tavus):
    fake_tavus.respond("GET", "/replicas/r_404", status_code=404, json={"error": "Replica not found"})

    async with create_connected_server_and_client_session(server.app) as session:
        with pytest.raises(McpError) as exc_info:
            await session.call_tool("get_replica", {"replica_id": "r_404"})

    assert exc_info.value.error.code == INTERNAL_ERROR
    assert exc_info.value.error.message == "Tavus API error: Replica not found"


@pytest.mark.asyncio
async def test_invalid_arguments_over_session_are_invalid_params(server, fake_tavus):
    async with create_connected_server_and_client_session(server.app) as session:
        with pytest.raises(McpError) as exc_info:
            await session.call_tool("get_persona", {"persona_id": ""})

    assert exc_info.value.error.code == INVALID_PARAMS
    assert fake_tavus.requests == []
