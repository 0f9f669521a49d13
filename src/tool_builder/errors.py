"""Typed exceptions raised while building contextual tools.

Both errors surface straight to the caller of ``build``. Neither is retried:
a ``ConfigurationError`` is a programming mistake, a ``ContextValidationError``
needs a corrected context value.
"""

from __future__ import annotations

from typing import Any


class ToolBuilderError(Exception):
    """Base exception for all tool builder failures."""

    code = "tool_builder_error"

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ConfigurationError(ToolBuilderError):
    """Raised when ``build`` is called before a tool source was declared."""

    code = "tool_not_configured"


class ContextValidationError(ToolBuilderError):
    """Raised when a context value does not satisfy the accumulated schema.

    Attributes:
        schema_name: Name of the context model the value was checked against.
        errors: Structured pydantic error list (``loc``, ``msg``, ``type``...),
            passed through unmodified.
    """

    code = "invalid_context"

    def __init__(self, schema_name: str, errors: list[dict[str, Any]]):
        self.schema_name = schema_name
        self.errors = errors
        super().__init__(
            f"Context does not match {schema_name}: {_summarize(errors)}"
        )

    def field_paths(self) -> list[str]:
        """Dotted locations of every failing field, in validator order."""
        return [".".join(str(part) for part in error["loc"]) for error in self.errors]


def _summarize(errors: list[dict[str, Any]]) -> str:
    parts = []
    for error in errors:
        loc = ".".join(str(part) for part in error.get("loc", ())) or "<root>"
        parts.append(f"{loc}: {error.get('msg', 'invalid')}")
    return "; ".join(parts)
