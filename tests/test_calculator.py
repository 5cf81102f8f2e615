"""
Unit tests for the add and calculate tools.
"""

import pytest

from calculator_mcp.base import format_number
from calculator_mcp.tools.calculator import (
    DIVIDE_BY_ZERO,
    AddArguments,
    AddTool,
    CalculateArguments,
    CalculateTool,
)


def result_text(result) -> str:
    assert len(result.content) == 1
    assert result.content[0].type == "text"
    return result.content[0].text


@pytest.fixture
def add_tool() -> AddTool:
    return AddTool()


@pytest.fixture
def calculate_tool() -> CalculateTool:
    return CalculateTool()


class TestFormatNumber:
    """Number rendering in result text."""

    def test_integral_float_has_no_fraction(self):
        assert format_number(5.0) == "5"
        assert format_number(-3.0) == "-3"
        assert format_number(0.0) == "0"

    def test_fraction_kept(self):
        assert format_number(2.5) == "2.5"
        assert format_number(0.1 + 0.2) == "0.30000000000000004"

    def test_huge_value_uses_exponent(self):
        assert format_number(1e21) == "1e+21"
        assert format_number(1.5e300) == "1.5e+300"
        assert format_number(-2e25) == "-2e+25"

    def test_large_value_below_threshold_is_positional(self):
        assert format_number(1e20) == "100000000000000000000"
        assert format_number(1.5e16) == "15000000000000000"

    def test_small_values_are_positional(self):
        assert format_number(1e-5) == "0.00001"
        assert format_number(-0.00025) == "-0.00025"
        assert format_number(1e-6) == "0.000001"
        assert format_number(123.456) == "123.456"

    def test_tiny_value_uses_exponent(self):
        assert format_number(1e-7) == "1e-7"
        assert format_number(1.25e-10) == "1.25e-10"

    def test_non_finite(self):
        assert format_number(float("inf")) == "Infinity"
        assert format_number(float("-inf")) == "-Infinity"
        assert format_number(float("nan")) == "NaN"

    def test_negative_zero(self):
        assert format_number(-0.0) == "0"


class TestAddTool:
    """Test the add tool."""

    @pytest.mark.asyncio
    @pytest.mark.parametrize("a,b,expected", [
        (2, 3, "5"),
        (-1, 1, "0"),
        (1.5, 2.25, "3.75"),
        (1e10, 1, "10000000001"),
    ])
    async def test_sum(self, add_tool, a, b, expected):
        result = await add_tool.execute(AddArguments(a=a, b=b))
        assert result_text(result) == expected

    def test_definition(self, add_tool):
        definition = add_tool.to_definition()
        assert definition.name == "add"
        schema = definition.input_schema()
        assert set(schema["required"]) == {"a", "b"}
        assert schema["properties"]["a"]["type"] == "number"


class TestCalculateTool:
    """Test the calculate tool."""

    @pytest.mark.asyncio
    @pytest.mark.parametrize("operation,a,b,expected", [
        ("add", 6, 3, "9"),
        ("subtract", 6, 3, "3"),
        ("multiply", 6, 3, "18"),
        ("divide", 6, 3, "2"),
        ("divide", 1, 4, "0.25"),
        ("divide", 1, 3, "0.3333333333333333"),
        ("subtract", 1, 2.5, "-1.5"),
    ])
    async def test_operations(self, calculate_tool, operation, a, b, expected):
        args = CalculateArguments(operation=operation, a=a, b=b)
        result = await calculate_tool.execute(args)
        assert result_text(result) == expected

    @pytest.mark.asyncio
    @pytest.mark.parametrize("a", [0, 1, -7.5, 1e300])
    async def test_divide_by_zero_is_a_result(self, calculate_tool, a):
        args = CalculateArguments(operation="divide", a=a, b=0)
        result = await calculate_tool.execute(args)
        assert result_text(result) == "Error: Cannot divide by zero"
        assert DIVIDE_BY_ZERO == "Error: Cannot divide by zero"

    @pytest.mark.asyncio
    async def test_multiply_by_zero_is_not_an_error(self, calculate_tool):
        args = CalculateArguments(operation="multiply", a=5, b=0)
        result = await calculate_tool.execute(args)
        assert result_text(result) == "0"

    @pytest.mark.asyncio
    async def test_small_quotient_is_positional(self, calculate_tool):
        args = CalculateArguments(operation="divide", a=1, b=100000)
        result = await calculate_tool.execute(args)
        assert result_text(result) == "0.00001"

    @pytest.mark.asyncio
    async def test_overflow_renders_infinity(self, calculate_tool):
        result = await calculate_tool.execute(CalculateArguments(operation="multiply", a=1e200, b=1e200))
        assert result_text(result) == "Infinity"

        result = await calculate_tool.execute(CalculateArguments(operation="multiply", a=-1e200, b=1e200))
        assert result_text(result) == "-Infinity"

    def test_operation_enum_in_schema(self, calculate_tool):
        schema = calculate_tool.to_definition().input_schema()
        assert schema["properties"]["operation"]["enum"] == ["add", "subtract", "multiply", "divide"]
