"""
Calculator Tools

Simple arithmetic exposed as MCP tools.
"""

from typing import Literal, Type

from ..base import MCPTool, ToolArguments, ToolResult, format_number

DIVIDE_BY_ZERO = "Error: Cannot divide by zero"


class AddArguments(ToolArguments):
    a: float
    b: float


class CalculateArguments(ToolArguments):
    operation: Literal["add", "subtract", "multiply", "divide"]
    a: float
    b: float


class AddTool(MCPTool):
    """Add two numbers."""

    @property
    def name(self) -> str:
        return "add"

    @property
    def description(self) -> str:
        return "Add two numbers"

    @property
    def arguments(self) -> Type[ToolArguments]:
        return AddArguments

    async def execute(self, args: AddArguments) -> ToolResult:
        return ToolResult.text(format_number(args.a + args.b))


class CalculateTool(MCPTool):
    """Calculator with add, subtract, multiply and divide."""

    @property
    def name(self) -> str:
        return "calculate"

    @property
    def description(self) -> str:
        return "Perform a basic arithmetic operation (add, subtract, multiply, divide) on two numbers"

    @property
    def arguments(self) -> Type[ToolArguments]:
        return CalculateArguments

    async def execute(self, args: CalculateArguments) -> ToolResult:
        a, b = args.a, args.b

        if args.operation == "add":
            result = a + b
        elif args.operation == "subtract":
            result = a - b
        elif args.operation == "multiply":
            result = a * b
        else:
            # Handled as a result, not an error
            if b == 0:
                return ToolResult.text(DIVIDE_BY_ZERO)
            result = a / b

        return ToolResult.text(format_number(result))
