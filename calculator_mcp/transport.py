"""
MCP Transport Bridge

Wires a ToolRegistry into an MCP low-level Server and exposes that server
over HTTP with two framings:
  - SSE:             GET /sse opens the stream, POST /sse/message carries messages
  - Streamable HTTP: /mcp
Session handling and wire framing are owned by the mcp SDK.
"""

import contextlib
import logging
from typing import Any, AsyncIterator, Awaitable, Callable, Dict, List

from mcp.server import Server
from mcp.server.sse import SseServerTransport
from mcp.server.streamable_http_manager import StreamableHTTPSessionManager
from mcp.types import TextContent, Tool
from starlette.routing import Route
from starlette.types import Receive, Scope, Send

from .registry import ToolRegistry

logger = logging.getLogger(__name__)

SERVER_NAME = "Authless Calculator"
SERVER_VERSION = "1.0.0"

SSE_PATH = "/sse"
SSE_MESSAGE_PATH = "/sse/message"
STREAMABLE_HTTP_PATH = "/mcp"


def create_mcp_server(registry: ToolRegistry) -> Server:
    """Create an MCP server whose tools/list and tools/call use the registry."""
    server = Server(SERVER_NAME, version=SERVER_VERSION)

    @server.list_tools()
    async def list_tools() -> List[Tool]:
        return [definition.to_mcp_tool() for definition in registry.definitions()]

    # Arguments are validated by the registry, not by the SDK's JSON schema check
    @server.call_tool(validate_input=False)
    async def call_tool(name: str, arguments: Dict[str, Any]) -> List[TextContent]:
        result = await registry.invoke(name, arguments)
        return list(result.content)

    return server


class ASGIEndpoint:
    """Wraps an ASGI callable so Starlette routes it as a raw ASGI app."""

    def __init__(self, app: Callable[[Scope, Receive, Send], Awaitable[None]]):
        self.app = app

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        await self.app(scope, receive, send)


class SseStreamEndpoint:
    """Opens an SSE stream and runs one MCP session over it."""

    def __init__(self, server: Server, transport: SseServerTransport):
        self.server = server
        self.transport = transport

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        async with self.transport.connect_sse(scope, receive, send) as (read_stream, write_stream):
            logger.info("SSE session opened")
            await self.server.run(
                read_stream,
                write_stream,
                self.server.create_initialization_options(),
            )
        logger.info("SSE session closed")


class McpHttpTransports:
    """Both HTTP framings for one registry."""

    def __init__(
        self,
        registry: ToolRegistry,
        json_response: bool = False,
        stateless: bool = False,
    ):
        self.registry = registry
        self.server = create_mcp_server(registry)
        self.sse = SseServerTransport(SSE_MESSAGE_PATH)
        self.session_manager = StreamableHTTPSessionManager(
            app=self.server,
            event_store=None,
            json_response=json_response,
            stateless=stateless,
        )

    def routes(self) -> List[Route]:
        return [
            Route(SSE_PATH, endpoint=SseStreamEndpoint(self.server, self.sse), methods=["GET"]),
            Route(SSE_MESSAGE_PATH, endpoint=ASGIEndpoint(self.sse.handle_post_message), methods=["POST"]),
            Route(STREAMABLE_HTTP_PATH, endpoint=ASGIEndpoint(self.session_manager.handle_request)),
        ]

    @contextlib.asynccontextmanager
    async def run(self) -> AsyncIterator[None]:
        """Keep the streamable HTTP session manager running. Enter once."""
        async with self.session_manager.run():
            logger.info("StreamableHTTP session manager started")
            try:
                yield
            finally:
                logger.info("StreamableHTTP session manager stopping")
