import ast
import operator

from langchain_core.tools import StructuredTool
from pydantic import BaseModel, Field

from tool_builder.builder import tool_builder
from tool_builder.tools.tool_models import ToolSpec

_OPERATORS = {
    ast.Add: operator.add,
    ast.Sub: operator.sub,
    ast.Mult: operator.mul,
    ast.Div: operator.truediv,
    ast.UAdd: operator.pos,
    ast.USub: operator.neg,
}


class CalculatorInput(BaseModel):
    expression: str = Field(
        description="Simple arithmetic expression, e.g. '(12+5)*3'"
    )


def _evaluate(node: ast.AST) -> float:
    if isinstance(node, ast.Expression):
        return _evaluate(node.body)
    if isinstance(node, ast.Constant) and type(node.value) in (int, float):
        return node.value
    if isinstance(node, ast.BinOp) and type(node.op) in _OPERATORS:
        return _OPERATORS[type(node.op)](_evaluate(node.left), _evaluate(node.right))
    if isinstance(node, ast.UnaryOp) and type(node.op) in _OPERATORS:
        return _OPERATORS[type(node.op)](_evaluate(node.operand))
    raise ValueError(type(node).__name__)


def _calculate(expression: str) -> str:
    try:
        return str(_evaluate(ast.parse(expression, mode="eval")))
    except (SyntaxError, ValueError):
        return "Invalid expression: only numbers and + - * / ( ) are allowed."
    except ArithmeticError as exc:
        return f"Calculation error: {exc}"


# Needs no context, so the definition is built once and shared.
calculator = tool_builder.tool(
    StructuredTool.from_function(
        name="calculator",
        description="Evaluate a basic arithmetic expression",
        func=_calculate,
        args_schema=CalculatorInput,
    )
)

tool = ToolSpec(
    name="calculator",
    handle=calculator,
    intent="Execute mathematical computations for absolute precision.",
    schema_notes="Expects 'expression' string. Returns numerical result.",
)
