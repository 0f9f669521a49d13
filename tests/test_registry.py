"""Tool registry tests: discovery, group resolution, building with context."""

import pytest

from tool_builder.errors import ContextValidationError
from tool_builder.tools.registry import ToolRegistry

GREETING_CONTEXT = {"last_name": "Doe", "age": 30}


@pytest.fixture(autouse=True)
def fresh_registry():
    ToolRegistry.clear_cache()
    yield
    ToolRegistry.clear_cache()


def test_discovers_nested_definitions():
    assert set(ToolRegistry.list_all_tools()) == {
        "calculator",
        "greeting",
        "bank_account_api",
    }


def test_groups_include_declared_members():
    groups = ToolRegistry.list_groups()
    assert groups["core"] == ["calculator", "greeting"]
    assert groups["analysis_plus_api"] == ["calculator", "bank_account_api"]


def test_resolve_tool_names_dedupes_in_order():
    resolved = ToolRegistry.resolve_tool_names(
        ["greeting", "calculator"], ["analysis_plus_api"]
    )
    assert resolved == ["calculator", "bank_account_api", "greeting"]


def test_unknown_group_and_tool_rejected():
    with pytest.raises(ValueError, match="Unknown tool group"):
        ToolRegistry.resolve_tool_names([], ["missing"])
    with pytest.raises(ValueError, match="Unknown tool"):
        ToolRegistry.get_tools(["nope"])
    with pytest.raises(ValueError, match="Unknown tool"):
        ToolRegistry.get_spec("nope")


def test_get_tools_builds_with_shared_context():
    tools = ToolRegistry.get_tools(
        ["greeting", "calculator"],
        {**GREETING_CONTEXT, "api_base_url": "https://api.test"},
    )
    assert [tool.name for tool in tools] == ["greeting", "calculator"]
    assert tools[0].invoke({"name": "Jane"}) == {"welcome": "Hello, Jane Doe!"}
    assert tools[1].invoke({"expression": "(12+5)*3"}) == "51"


def test_static_tool_needs_no_context():
    first, = ToolRegistry.get_tools(["calculator"])
    second, = ToolRegistry.get_tools(["calculator"], {"unrelated": True})
    assert first is second


def test_missing_context_fails_build():
    with pytest.raises(ContextValidationError) as exc_info:
        ToolRegistry.get_tools(["greeting"], {"last_name": "Doe"})
    assert exc_info.value.field_paths() == ["age"]


def test_bank_account_api_requires_base_url():
    spec = ToolRegistry.get_spec("bank_account_api")
    assert set(spec.context_schema.model_fields) == {
        "api_base_url",
        "auth_token",
        "session_cookie",
    }
    with pytest.raises(ContextValidationError):
        spec.handle.build({"api_base_url": ""})
    built = spec.handle.build({"api_base_url": "https://api.test/"})
    assert built.name == "bank_account_api"


@pytest.mark.parametrize(
    ("expression", "expected"),
    [
        ("-(2+3)*4", "-20"),
        ("7/2", "3.5"),
        ("1/0", "Calculation error: division by zero"),
        ("__import__('os')", "Invalid expression: only numbers and + - * / ( ) are allowed."),
        ("2**8", "Invalid expression: only numbers and + - * / ( ) are allowed."),
        ("(1+", "Invalid expression: only numbers and + - * / ( ) are allowed."),
    ],
)
def test_calculator_evaluates_arithmetic_only(expression, expected):
    calculator, = ToolRegistry.get_tools(["calculator"])
    assert calculator.invoke({"expression": expression}) == expected
