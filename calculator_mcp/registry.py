"""
MCP Tool Registry

Maps tool names to their definitions and dispatches invocations.
A registry is built explicitly at startup, sealed, and passed by reference
to whatever serves invocations.
"""

import logging
from types import MappingProxyType
from typing import Any, Dict, Iterable, List, Mapping, Optional

from pydantic import BaseModel

from .base import (
    ConfigurationError,
    MCPTool,
    MCPToolError,
    ToolDefinition,
    ToolResult,
    UnknownToolError,
    Validation,
)
from .config import Settings

logger = logging.getLogger(__name__)


class ToolRegistry:
    """Name -> ToolDefinition mapping, read-only once sealed."""

    def __init__(self) -> None:
        self._tools: Dict[str, ToolDefinition] = {}
        self._sealed = False

    def register(self, definition: ToolDefinition) -> ToolDefinition:
        """Register a tool definition. Raises ConfigurationError on conflict."""
        if self._sealed:
            raise ConfigurationError(
                f"Registry is sealed, cannot register: {definition.name}",
                tool_name=definition.name,
            )
        if not definition.name:
            raise ConfigurationError("Tool name must not be empty")
        if definition.name in self._tools:
            raise ConfigurationError(
                f"Duplicate tool name: {definition.name}",
                tool_name=definition.name,
            )
        if not (isinstance(definition.arguments, type) and issubclass(definition.arguments, BaseModel)):
            raise ConfigurationError(
                f"Tool {definition.name} has no valid argument schema",
                tool_name=definition.name,
            )
        if not callable(definition.handler):
            raise ConfigurationError(
                f"Tool has no handler: {definition.name}",
                tool_name=definition.name,
            )

        self._tools[definition.name] = definition
        logger.info(f"Registered tool: {definition.name}")
        return definition

    def register_tool(self, tool: MCPTool) -> ToolDefinition:
        return self.register(tool.to_definition())

    def seal(self) -> "ToolRegistry":
        self._sealed = True
        return self

    @property
    def sealed(self) -> bool:
        return self._sealed

    @property
    def tools(self) -> Mapping[str, ToolDefinition]:
        return MappingProxyType(self._tools)

    def get(self, name: str) -> Optional[ToolDefinition]:
        """
        Get a specific tool by name.
        Returns None if tool not found.
        """
        return self._tools.get(name)

    def names(self) -> List[str]:
        """Get list of all registered tool names."""
        return list(self._tools.keys())

    def definitions(self) -> List[ToolDefinition]:
        return list(self._tools.values())

    def __contains__(self, name: object) -> bool:
        return name in self._tools

    def __len__(self) -> int:
        return len(self._tools)

    def validate(self, name: str, arguments: Optional[Dict[str, Any]]) -> Validation:
        """Validate arguments for a tool without raising for bad input."""
        return self._lookup(name).validate(arguments)

    async def invoke(self, name: str, arguments: Optional[Dict[str, Any]] = None) -> ToolResult:
        """
        Execute a tool by name with given arguments.

        Raises UnknownToolError or ValidationError; otherwise returns the
        handler's result envelope verbatim.
        """
        definition = self._lookup(name)
        validation = definition.validate(arguments)
        if not validation.ok:
            logger.warning(f"Validation error in {name}: {validation.error.message}")
            raise validation.error

        logger.info(f"Invoking tool: {name}")
        try:
            return await definition.handler(validation.arguments)
        except MCPToolError:
            raise
        except Exception:
            logger.exception(f"Unexpected error in {name}")
            raise

    def _lookup(self, name: str) -> ToolDefinition:
        definition = self._tools.get(name)
        if definition is None:
            raise UnknownToolError(f"Tool not found: {name}", tool_name=name)
        return definition


def build_registry(
    tools: Optional[Iterable[MCPTool]] = None,
    settings: Optional[Settings] = None,
) -> ToolRegistry:
    """
    Build and seal a registry.

    Uses the default calculator and weather tools when no tools are given.
    """
    if tools is None:
        from .tools import default_tools

        tools = default_tools(settings)

    registry = ToolRegistry()
    for tool in tools:
        registry.register_tool(tool)

    logger.info(f"Tool registry ready. Total tools: {len(registry)}")
    return registry.seal()
