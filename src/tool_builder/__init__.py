"""Immutable builder for context-dependent tool definitions."""

from tool_builder.builder import (
    BuildHandle,
    ContextualBuilder,
    DeferredTool,
    StaticTool,
    tool_builder,
)
from tool_builder.errors import (
    ConfigurationError,
    ContextValidationError,
    ToolBuilderError,
)
from tool_builder.schema import (
    describe_context_schema,
    merge_context_schemas,
    validate_context,
)

__all__ = [
    "BuildHandle",
    "ConfigurationError",
    "ContextValidationError",
    "ContextualBuilder",
    "DeferredTool",
    "StaticTool",
    "ToolBuilderError",
    "describe_context_schema",
    "merge_context_schemas",
    "tool_builder",
    "validate_context",
]
