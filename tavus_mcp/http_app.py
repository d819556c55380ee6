"""
HTTP/SSE transport for the Tavus MCP server.

Mirrors the stdio tools over plain HTTP for clients that cannot spawn a
subprocess. Tool results and errors are the same as over stdio.
"""

import json
import logging

import uvicorn
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from mcp.shared.exceptions import McpError
from mcp.types import INVALID_PARAMS, METHOD_NOT_FOUND
from sse_starlette.sse import EventSourceResponse

from . import __version__
from .server import TavusMCPServer

logger = logging.getLogger("tavus-mcp-server")

_STATUS_BY_CODE = {
    METHOD_NOT_FOUND: 404,
    INVALID_PARAMS: 422,
}


def _error_payload(error: McpError) -> dict:
    return {"error": {"code": error.error.code, "message": error.error.message}}


def _status_for(error: McpError) -> int:
    # anything else is an upstream or unexpected failure
    return _STATUS_BY_CODE.get(error.error.code, 502)


def create_http_app(server: TavusMCPServer) -> FastAPI:
    """Build the FastAPI app serving ``server``'s tools"""
    http_app = FastAPI(
        title="Tavus MCP Server",
        description="MCP server exposing Tavus API tools via HTTP/SSE",
        version=__version__
    )

    http_app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @http_app.get("/")
    async def http_root():
        """Root endpoint with server information"""
        return {
            "name": "Tavus MCP Server",
            "version": __version__,
            "transport": "HTTP/SSE",
            "endpoints": {
                "tools": "/tools",
                "call_tool": "/call-tool",
                "call_tool_sse": "/call-tool/sse",
                "health": "/health"
            }
        }

    @http_app.get("/health")
    async def http_health():
        """Health check endpoint"""
        return {
            "status": "healthy",
            "transport": "HTTP/SSE",
            "api_url": server.settings.api_url
        }

    @http_app.get("/tools")
    async def http_list_tools():
        """List available MCP tools via HTTP"""
        return {
            "tools": [
                {
                    "name": tool.name,
                    "description": tool.description,
                    "inputSchema": tool.inputSchema
                }
                for tool in server.get_available_tools()
            ]
        }

    @http_app.post("/call-tool")
    async def http_call_tool(request: Request):
        """Call an MCP tool via HTTP"""
        try:
            body = await request.json()
        except ValueError:
            return JSONResponse(status_code=400, content={"error": {"message": "Request body must be JSON"}})

        tool_name = body.get("name") if isinstance(body, dict) else None
        if not tool_name:
            return JSONResponse(status_code=400, content={"error": {"message": "Tool name is required"}})

        try:
            result = await server.call_tool(tool_name, body.get("arguments") or {})
        except McpError as e:
            return JSONResponse(status_code=_status_for(e), content=_error_payload(e))

        return {
            "result": [
                {"type": item.type, "text": item.text}
                for item in result
            ]
        }

    @http_app.post("/call-tool/sse")
    async def http_call_tool_sse(request: Request):
        """Call an MCP tool with SSE streaming"""

        async def event_generator():
            try:
                body = await request.json()
            except ValueError:
                yield {"event": "error", "data": json.dumps({"message": "Request body must be JSON"})}
                return

            tool_name = body.get("name") if isinstance(body, dict) else None
            if not tool_name:
                yield {"event": "error", "data": json.dumps({"message": "Tool name is required"})}
                return

            yield {"event": "start", "data": json.dumps({"tool": tool_name})}

            try:
                result = await server.call_tool(tool_name, body.get("arguments") or {})
            except McpError as e:
                logger.error(f"Error in SSE call_tool: {e.error.message}")
                yield {"event": "error", "data": json.dumps(_error_payload(e)["error"])}
                return

            for item in result:
                yield {"event": "result", "data": json.dumps({"type": item.type, "text": item.text})}

            yield {"event": "complete", "data": json.dumps({"status": "success"})}

        return EventSourceResponse(event_generator())

    return http_app


async def run_http_server(server: TavusMCPServer):
    """Run MCP server with HTTP/SSE transport"""
    settings = server.settings
    logger.info("Starting Tavus MCP Server with HTTP/SSE transport")
    logger.info(f"Listening on http://{settings.http_host}:{settings.http_port}")

    config = uvicorn.Config(
        create_http_app(server),
        host=settings.http_host,
        port=settings.http_port,
        log_level=settings.log_level.lower()
    )
    await uvicorn.Server(config).serve()
