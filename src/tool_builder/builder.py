"""Fluent, immutable builder for tools that depend on a validated context.

Usage::

    handle = (
        tool_builder
        .with_context(UserContext)
        .with_context(SessionContext)
        .tool(lambda ctx: build_lookup_tool(ctx.user_id, ctx.session_id))
    )
    lookup = handle.build({"user_id": "u-1", "session_id": "s-9"})

Every step returns a new object; builders and handles can be shared and built
any number of times.
"""

from __future__ import annotations

import functools
import logging
import types
from dataclasses import dataclass, replace
from typing import Any, Callable, Generic, Mapping, Type, TypeVar, Union

from pydantic import BaseModel

from tool_builder.errors import ConfigurationError
from tool_builder.schema import merge_context_schemas, validate_context

logger = logging.getLogger(__name__)

ToolT = TypeVar("ToolT")


@dataclass(frozen=True)
class StaticTool(Generic[ToolT]):
    """A ready-made tool definition, returned as is on every build."""

    tool: ToolT


@dataclass(frozen=True)
class DeferredTool(Generic[ToolT]):
    """A factory producing the tool definition from the context value."""

    factory: Callable[[Any], ToolT]


ToolSource = Union[StaticTool[ToolT], DeferredTool[ToolT]]

# Plain functions, bound methods and partials are factories. Anything else
# (including callable tool objects) is a static definition unless wrapped.
_FACTORY_TYPES = (types.FunctionType, types.MethodType, functools.partial)


def as_tool_source(source: Any) -> ToolSource:
    if isinstance(source, (StaticTool, DeferredTool)):
        return source
    if isinstance(source, _FACTORY_TYPES):
        return DeferredTool(source)
    return StaticTool(source)


@dataclass(frozen=True)
class ContextualBuilder(Generic[ToolT]):
    """Accumulates a context schema and binds a tool source.

    Attributes:
        context_schema: Merged pydantic model of every context fragment added
            so far, or None when no context was declared.
        tool_source: The bound ``StaticTool``/``DeferredTool``; only set on the
            builder held by a ``BuildHandle``.
    """

    context_schema: Type[BaseModel] | None = None
    tool_source: ToolSource | None = None

    def with_context(self, schema: Type[BaseModel]) -> ContextualBuilder[ToolT]:
        """Return a new builder whose context also requires ``schema``'s fields.

        Fields of ``schema`` override previously declared fields of the same
        name. The receiver is left untouched.
        """
        if self.context_schema is None:
            merged = schema
        else:
            merged = merge_context_schemas(self.context_schema, schema)
        return ContextualBuilder(context_schema=merged)

    def tool(self, source: ToolT | Callable[[Any], ToolT] | ToolSource) -> BuildHandle[ToolT]:
        """Bind the tool definition, or a function of the context producing it."""
        return BuildHandle(replace(self, tool_source=as_tool_source(source)))

    def build(self, ctx: Mapping[str, Any] | BaseModel) -> ToolT:
        """Resolve the bound tool source against ``ctx``.

        Raises:
            ConfigurationError: No tool source was bound.
            ContextValidationError: A factory source is bound and ``ctx`` does
                not satisfy the context schema.
        """
        source = self.tool_source
        if source is None:
            raise ConfigurationError("Tool not configured: call tool() before build()")

        # Static definitions never read the context, so it is not validated.
        if isinstance(source, StaticTool):
            return source.tool

        if self.context_schema is not None:
            ctx = validate_context(self.context_schema, ctx)
            logger.debug("Context validated against %s", self.context_schema.__name__)
        return source.factory(ctx)


@dataclass(frozen=True)
class BuildHandle(Generic[ToolT]):
    """Terminal step of a builder chain; only ``build`` is exposed."""

    _builder: ContextualBuilder[ToolT]

    @property
    def context_schema(self) -> Type[BaseModel] | None:
        return self._builder.context_schema

    @property
    def is_static(self) -> bool:
        return isinstance(self._builder.tool_source, StaticTool)

    def build(self, ctx: Mapping[str, Any] | BaseModel) -> ToolT:
        return self._builder.build(ctx)


tool_builder: ContextualBuilder[Any] = ContextualBuilder()
