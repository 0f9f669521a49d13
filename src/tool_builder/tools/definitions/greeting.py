from langchain_core.tools import StructuredTool
from pydantic import BaseModel, Field

from tool_builder.builder import tool_builder
from tool_builder.tools.tool_models import ToolSpec


class FamilyContext(BaseModel):
    last_name: str = Field(description="Family name appended to every greeting")


class AgeContext(BaseModel):
    age: int = Field(ge=0, description="Age of the person being greeted")


class GreetingInput(BaseModel):
    name: str = Field(description="Input string")


def build_greeting_tool(ctx) -> StructuredTool:
    def _greet(name: str) -> dict[str, str]:
        return {"welcome": f"Hello, {name} {ctx.last_name}!"}

    return StructuredTool.from_function(
        name="greeting",
        description=f"Greet a member of the {ctx.last_name} family (age {ctx.age})",
        func=_greet,
        args_schema=GreetingInput,
    )


greeting = (
    tool_builder.with_context(FamilyContext)
    .with_context(AgeContext)
    .tool(build_greeting_tool)
)

tool = ToolSpec(
    name="greeting",
    handle=greeting,
    intent="Welcome a person by first name using the family name from context.",
    schema_notes="Context needs 'last_name' and 'age'. Expects 'name'. Returns {'welcome': str}.",
)
