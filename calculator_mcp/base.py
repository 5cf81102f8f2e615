"""
MCP Tool Base Classes

Provides the tool definition, argument validation, result envelope and
error types shared by every calculator tool.
"""

import math
from abc import ABC, abstractmethod
from dataclasses import dataclass
from decimal import Decimal
from typing import Any, Awaitable, Callable, Dict, List, Optional, Type

from mcp.types import TextContent, Tool
from pydantic import BaseModel, ConfigDict
from pydantic import ValidationError as PydanticValidationError


class MCPToolError(Exception):
    """Base exception for MCP tool errors."""
    def __init__(self, message: str, tool_name: str = None, details: Dict = None):
        self.message = message
        self.tool_name = tool_name
        self.details = details or {}
        super().__init__(self.message)


class ConfigurationError(MCPToolError):
    """Raised when a tool cannot be registered. Fatal at startup."""
    pass


class UnknownToolError(MCPToolError):
    """Raised when a call names a tool that is not registered."""
    pass


class ValidationError(MCPToolError):
    """Raised when tool input validation fails."""

    @property
    def fields(self) -> List[str]:
        return self.details.get("fields", [])


class ToolArguments(BaseModel):
    """
    Base class for tool argument schemas.

    Strict mode keeps JSON strings from being coerced into numbers.
    Unknown keys are ignored.
    """
    model_config = ConfigDict(strict=True, extra="ignore")


class ToolResult(BaseModel):
    """Uniform result envelope returned by every tool invocation."""
    content: List[TextContent]

    @classmethod
    def text(cls, text: str) -> "ToolResult":
        return cls(content=[TextContent(type="text", text=text)])


ToolHandler = Callable[[ToolArguments], Awaitable[ToolResult]]


@dataclass(frozen=True)
class Validation:
    """Outcome of validating raw arguments: either arguments or error is set."""
    arguments: Optional[ToolArguments] = None
    error: Optional[ValidationError] = None

    @property
    def ok(self) -> bool:
        return self.error is None


@dataclass(frozen=True)
class ToolDefinition:
    """Complete definition of an MCP tool."""
    name: str
    description: str
    arguments: Type[ToolArguments]
    handler: ToolHandler

    def validate(self, raw: Optional[Dict[str, Any]]) -> Validation:
        """Validate raw call arguments against the tool's schema."""
        if raw is None:
            raw = {}
        if not isinstance(raw, dict):
            return Validation(error=ValidationError(
                "Arguments must be an object",
                tool_name=self.name,
                details={"fields": []},
            ))

        try:
            return Validation(arguments=self.arguments.model_validate(raw))
        except PydanticValidationError as e:
            fields = []
            problems = []
            for err in e.errors():
                field = ".".join(str(part) for part in err["loc"]) or "(root)"
                if field not in fields:
                    fields.append(field)
                problems.append(f"{field}: {err['msg']}")
            return Validation(error=ValidationError(
                f"Invalid arguments for tool {self.name}: " + "; ".join(problems),
                tool_name=self.name,
                details={"fields": fields},
            ))

    def input_schema(self) -> Dict[str, Any]:
        """JSON schema of the tool's arguments."""
        schema = self.arguments.model_json_schema()
        schema.pop("title", None)
        return schema

    def to_mcp_tool(self) -> Tool:
        """Convert to the MCP wire representation used by tools/list."""
        return Tool(
            name=self.name,
            description=self.description,
            inputSchema=self.input_schema(),
        )


class MCPTool(ABC):
    """
    Abstract base class for MCP tools.

    All tools must inherit from this class and implement:
    - name: Tool identifier
    - description: What the tool does
    - arguments: pydantic schema of the accepted arguments
    - execute(): The actual tool logic
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Unique identifier for the tool."""
        pass

    @property
    @abstractmethod
    def description(self) -> str:
        """Human-readable description of what the tool does."""
        pass

    @property
    @abstractmethod
    def arguments(self) -> Type[ToolArguments]:
        """Schema of the arguments the tool accepts."""
        pass

    @abstractmethod
    async def execute(self, args: ToolArguments) -> ToolResult:
        """
        Execute the tool with validated arguments.
        This method should contain the actual tool logic.
        """
        pass

    def to_definition(self) -> ToolDefinition:
        """Convert tool to ToolDefinition for registry."""
        return ToolDefinition(
            name=self.name,
            description=self.description,
            arguments=self.arguments,
            handler=self.execute,
        )


def format_number(value: float) -> str:
    """
    Render a number the way JavaScript's String(n) does.

    Positional notation while the decimal exponent is within [-6, 21),
    exponent notation otherwise. 5.0 renders as "5", 1e-05 as "0.00001",
    inf as "Infinity".
    """
    value = float(value)
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    if value == 0:
        return "0"

    # repr gives the shortest digits that round-trip
    sign, digit_tuple, exponent = Decimal(repr(value)).normalize().as_tuple()
    digits = "".join(str(d) for d in digit_tuple)
    k = len(digits)
    n = exponent + k

    if k <= n <= 21:
        text = digits + "0" * (n - k)
    elif 0 < n <= 21:
        text = digits[:n] + "." + digits[n:]
    elif -6 < n <= 0:
        text = "0." + "0" * -n + digits
    else:
        mantissa = digits[0] + ("." + digits[1:] if k > 1 else "")
        text = f"{mantissa}e{'+' if n - 1 > 0 else '-'}{abs(n - 1)}"

    return ("-" if sign else "") + text
