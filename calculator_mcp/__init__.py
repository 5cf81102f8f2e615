"""
Calculator MCP Server

Arithmetic and US weather-alert tools served over MCP (SSE and streamable HTTP).
"""

from .base import (
    ConfigurationError,
    MCPTool,
    MCPToolError,
    ToolDefinition,
    ToolResult,
    UnknownToolError,
    ValidationError,
)
from .registry import ToolRegistry, build_registry

__version__ = "1.0.0"

__all__ = [
    "ConfigurationError",
    "MCPTool",
    "MCPToolError",
    "ToolDefinition",
    "ToolRegistry",
    "ToolResult",
    "UnknownToolError",
    "ValidationError",
    "build_registry",
]
