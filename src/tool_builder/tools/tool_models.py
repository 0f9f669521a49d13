from dataclasses import dataclass, field
from typing import Any, Type

from pydantic import BaseModel

from tool_builder.builder import BuildHandle


@dataclass(frozen=True)
class ToolSpec:
    """Static definition of a contextual tool.

    Attributes:
        name: The unique identifier for the tool.
        handle: Build handle producing the tool instance from a context value.
        intent: Formal semantic purpose of the tool for developer clarity.
        schema_notes: Expected input/output patterns and semantic constraints.
        groups: Tool groups this tool is listed under.
    """

    name: str
    handle: BuildHandle[Any]
    intent: str = ""
    schema_notes: str = ""
    groups: list[str] = field(default_factory=list)

    @property
    def context_schema(self) -> Type[BaseModel] | None:
        return self.handle.context_schema
