"""
MCP Tools Package

Each tool inherits from MCPTool. default_tools() lists the tools the
server registers at startup.
"""

from typing import List, Optional

from ..base import MCPTool
from ..config import Settings
from .calculator import AddTool, CalculateTool
from .weather import GetAlertsTool


def default_tools(settings: Optional[Settings] = None) -> List[MCPTool]:
    return [AddTool(), CalculateTool(), GetAlertsTool(settings)]


__all__ = ["AddTool", "CalculateTool", "GetAlertsTool", "default_tools"]
