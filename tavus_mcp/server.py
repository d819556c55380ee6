"""
MCP Server for the Tavus API

Exposes Tavus replica, video, conversation, persona, lipsync and speech
endpoints as MCP tools. Every tool is a single call to the Tavus REST API
whose JSON response is returned as pretty-printed text.
"""

import json
import logging
from typing import Any, Awaitable, Callable, Dict, List, Optional
from urllib.parse import quote

from mcp.server import Server
from mcp.server.stdio import stdio_server
from mcp.shared.exceptions import McpError
from mcp.types import (
    INTERNAL_ERROR,
    INVALID_PARAMS,
    METHOD_NOT_FOUND,
    CallToolRequest,
    CallToolResult,
    ErrorData,
    ServerResult,
    TextContent,
    Tool,
)
from pydantic import ValidationError

from .client import TavusAPIError, TavusClient
from .config import TavusSettings
from .models import (
    ARGUMENT_MODELS,
    ConversationIdArguments,
    CreateConversationArguments,
    CreateLipsyncArguments,
    CreatePersonaArguments,
    CreateReplicaArguments,
    EmptyArguments,
    GenerateSpeechArguments,
    GenerateVideoArguments,
    GetReplicaArguments,
    LipsyncIdArguments,
    PatchPersonaArguments,
    PersonaIdArguments,
    RenameReplicaArguments,
    RenameSpeechArguments,
    RenameVideoArguments,
    ReplicaIdArguments,
    SpeechIdArguments,
    ToolArguments,
    VideoIdArguments,
)
from .tools import TOOLS

logger = logging.getLogger("tavus-mcp-server")

SERVER_NAME = "tavus-mcp"

Handler = Callable[[Any], Awaitable[List[TextContent]]]


def _path(*segments: str) -> str:
    """Join path segments, escaping caller-supplied identifiers"""
    return "/" + "/".join(quote(str(segment), safe="") for segment in segments)


def _text(data: Any) -> List[TextContent]:
    return [TextContent(type="text", text=json.dumps(data, indent=2))]


def _deleted(resource: str, resource_id: str) -> List[TextContent]:
    return [TextContent(type="text", text=f"Successfully deleted {resource} {resource_id}")]


def _format_validation_error(error: ValidationError) -> str:
    problems = []
    for err in error.errors():
        location = ".".join(str(part) for part in err["loc"]) or "arguments"
        problems.append(f"{location}: {err['msg']}")
    return "; ".join(problems)


class TavusMCPServer:
    """MCP Server for the Tavus API"""

    def __init__(self, settings: TavusSettings, client: Optional[TavusClient] = None):
        self.settings = settings
        self.client = client if client is not None else TavusClient(settings)

        self._handlers: Dict[str, Handler] = {
            # Phoenix Replicas
            "create_replica": self.create_replica,
            "get_replica": self.get_replica,
            "list_replicas": self.list_replicas,
            "delete_replica": self.delete_replica,
            "rename_replica": self.rename_replica,
            # Videos
            "generate_video": self.generate_video,
            "get_video": self.get_video,
            "list_videos": self.list_videos,
            "delete_video": self.delete_video,
            "rename_video": self.rename_video,
            # Conversations
            "create_conversation": self.create_conversation,
            "get_conversation": self.get_conversation,
            "list_conversations": self.list_conversations,
            "end_conversation": self.end_conversation,
            "delete_conversation": self.delete_conversation,
            # Personas
            "create_persona": self.create_persona,
            "get_persona": self.get_persona,
            "list_personas": self.list_personas,
            "patch_persona": self.patch_persona,
            "delete_persona": self.delete_persona,
            # Lipsync
            "create_lipsync": self.create_lipsync,
            "get_lipsync": self.get_lipsync,
            "list_lipsyncs": self.list_lipsyncs,
            "delete_lipsync": self.delete_lipsync,
            # Speech
            "generate_speech": self.generate_speech,
            "get_speech": self.get_speech,
            "list_speeches": self.list_speeches,
            "delete_speech": self.delete_speech,
            "rename_speech": self.rename_speech,
        }

        self.app = Server(SERVER_NAME)
        self._register_handlers()

    def _register_handlers(self):
        app = self.app

        @app.list_tools()
        async def list_tools() -> list[Tool]:
            """List available Tavus tools"""
            return self.get_available_tools()

        # McpError raised here reaches the client as a JSON-RPC error, not an
        # isError result, so it is registered without @app.call_tool()
        async def handle_call_tool(request: CallToolRequest) -> ServerResult:
            """Handle tool calls"""
            content = await self.call_tool(request.params.name, request.params.arguments)
            return ServerResult(CallToolResult(content=content, isError=False))

        app.request_handlers[CallToolRequest] = handle_call_tool

    def get_available_tools(self) -> List[Tool]:
        """Return list of available MCP tools"""
        return list(TOOLS)

    async def call_tool(self, name: str, arguments: Any) -> List[TextContent]:
        """Route a tool call to its handler.

        Raises McpError with METHOD_NOT_FOUND for unknown tools, INVALID_PARAMS
        when the arguments do not match the tool's record, and INTERNAL_ERROR
        for upstream or unexpected failures.
        """
        handler = self._handlers.get(name)
        if handler is None:
            logger.error(f"Unknown tool requested: {name}")
            raise McpError(ErrorData(code=METHOD_NOT_FOUND, message=f"Unknown tool: {name}"))

        try:
            params = ARGUMENT_MODELS[name].model_validate(arguments if arguments is not None else {})
        except ValidationError as e:
            message = _format_validation_error(e)
            logger.error(f"Invalid arguments for {name}: {message}")
            raise McpError(ErrorData(code=INVALID_PARAMS, message=f"Invalid arguments for {name}: {message}"))

        logger.info(f"Calling tool {name}")
        try:
            return await handler(params)
        except TavusAPIError as e:
            logger.error(f"Tavus API error calling tool {name}: {e.message}")
            raise McpError(ErrorData(code=INTERNAL_ERROR, message=f"Tavus API error: {e.message}")) from e
        except Exception as e:
            logger.error(f"Error calling tool {name}: {e}")
            raise McpError(ErrorData(code=INTERNAL_ERROR, message=f"Unexpected error: {e}")) from e

    async def _create(self, collection: str, params: ToolArguments) -> List[TextContent]:
        return _text(await self.client.post(_path(collection), json=params.to_body()))

    async def _get(self, collection: str, resource_id: str, query: Optional[Dict[str, Any]] = None) -> List[TextContent]:
        return _text(await self.client.get(_path(collection, resource_id), params=query))

    async def _list(self, collection: str) -> List[TextContent]:
        return _text(await self.client.get(_path(collection)))

    async def _delete(self, collection: str, resource: str, resource_id: str) -> List[TextContent]:
        await self.client.delete(_path(collection, resource_id))
        return _deleted(resource, resource_id)

    async def _rename(self, collection: str, resource_id: str, field: str, value: str) -> List[TextContent]:
        return _text(await self.client.patch(_path(collection, resource_id, "name"), json={field: value}))

    # Phoenix Replicas

    async def create_replica(self, params: CreateReplicaArguments) -> List[TextContent]:
        return await self._create("replicas", params)

    async def get_replica(self, params: GetReplicaArguments) -> List[TextContent]:
        # verbose is omitted from the query unless true
        query = {"verbose": "true"} if params.verbose else None
        return await self._get("replicas", params.replica_id, query)

    async def list_replicas(self, params: EmptyArguments) -> List[TextContent]:
        return await self._list("replicas")

    async def delete_replica(self, params: ReplicaIdArguments) -> List[TextContent]:
        return await self._delete("replicas", "replica", params.replica_id)

    async def rename_replica(self, params: RenameReplicaArguments) -> List[TextContent]:
        return await self._rename("replicas", params.replica_id, "replica_name", params.replica_name)

    # Videos

    async def generate_video(self, params: GenerateVideoArguments) -> List[TextContent]:
        return await self._create("videos", params)

    async def get_video(self, params: VideoIdArguments) -> List[TextContent]:
        return await self._get("videos", params.video_id)

    async def list_videos(self, params: EmptyArguments) -> List[TextContent]:
        return await self._list("videos")

    async def delete_video(self, params: VideoIdArguments) -> List[TextContent]:
        return await self._delete("videos", "video", params.video_id)

    async def rename_video(self, params: RenameVideoArguments) -> List[TextContent]:
        return await self._rename("videos", params.video_id, "video_name", params.video_name)

    # Conversations

    async def create_conversation(self, params: CreateConversationArguments) -> List[TextContent]:
        return await self._create("conversations", params)

    async def get_conversation(self, params: ConversationIdArguments) -> List[TextContent]:
        return await self._get("conversations", params.conversation_id)

    async def list_conversations(self, params: EmptyArguments) -> List[TextContent]:
        return await self._list("conversations")

    async def end_conversation(self, params: ConversationIdArguments) -> List[TextContent]:
        result = await self.client.post(_path("conversations", params.conversation_id, "end"))
        return _text(result)

    async def delete_conversation(self, params: ConversationIdArguments) -> List[TextContent]:
        return await self._delete("conversations", "conversation", params.conversation_id)

    # Personas

    async def create_persona(self, params: CreatePersonaArguments) -> List[TextContent]:
        return await self._create("personas", params)

    async def get_persona(self, params: PersonaIdArguments) -> List[TextContent]:
        return await self._get("personas", params.persona_id)

    async def list_personas(self, params: EmptyArguments) -> List[TextContent]:
        return await self._list("personas")

    async def patch_persona(self, params: PatchPersonaArguments) -> List[TextContent]:
        operations = [operation.to_body() for operation in params.patch]
        result = await self.client.patch(_path("personas", params.persona_id), json=operations)
        return _text(result)

    async def delete_persona(self, params: PersonaIdArguments) -> List[TextContent]:
        return await self._delete("personas", "persona", params.persona_id)

    # Lipsync

    async def create_lipsync(self, params: CreateLipsyncArguments) -> List[TextContent]:
        return await self._create("lipsync", params)

    async def get_lipsync(self, params: LipsyncIdArguments) -> List[TextContent]:
        return await self._get("lipsync", params.lipsync_id)

    async def list_lipsyncs(self, params: EmptyArguments) -> List[TextContent]:
        return await self._list("lipsync")

    async def delete_lipsync(self, params: LipsyncIdArguments) -> List[TextContent]:
        return await self._delete("lipsync", "lipsync", params.lipsync_id)

    # Speech

    async def generate_speech(self, params: GenerateSpeechArguments) -> List[TextContent]:
        return await self._create("speech", params)

    async def get_speech(self, params: SpeechIdArguments) -> List[TextContent]:
        return await self._get("speech", params.speech_id)

    async def list_speeches(self, params: EmptyArguments) -> List[TextContent]:
        return await self._list("speech")

    async def delete_speech(self, params: SpeechIdArguments) -> List[TextContent]:
        return await self._delete("speech", "speech", params.speech_id)

    async def rename_speech(self, params: RenameSpeechArguments) -> List[TextContent]:
        return await self._rename("speech", params.speech_id, "speech_name", params.speech_name)

    async def run_stdio(self):
        """Serve MCP over stdin/stdout until the stream closes"""
        logger.info("Starting Tavus MCP Server with stdio transport")
        logger.info(f"API URL: {self.settings.api_url}")

        async with stdio_server() as (read_stream, write_stream):
            await self.app.run(
                read_stream,
                write_stream,
                self.app.create_initialization_options()
            )

    async def close(self):
        """Close the HTTP client"""
        await self.client.close()
