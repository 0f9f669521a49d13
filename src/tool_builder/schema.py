"""Context schema operations on pydantic models.

A context schema is a ``BaseModel`` subclass. Merging builds a brand new model
class inheriting from every fragment, so field and model validators carry over
and the fragments handed to the builder are never modified.
"""

from __future__ import annotations

import copy
import logging
import types
from typing import Any, Mapping, Type, TypeVar, Union, get_args, get_origin

from pydantic import BaseModel, ConfigDict, ValidationError

from tool_builder.errors import ContextValidationError

logger = logging.getLogger(__name__)

ContextModel = TypeVar("ContextModel", bound=BaseModel)


def merge_context_schemas(
    base: Type[BaseModel], extension: Type[BaseModel]
) -> Type[BaseModel]:
    """Union of both models' fields; ``extension`` wins on a name collision.

    Validators declared on either model keep running on the merged model.
    """
    if issubclass(base, extension):
        bases: tuple[type, ...] = (base,)
    elif issubclass(extension, base):
        bases = (extension,)
    else:
        # Fields are collected base-first, so declaration order is preserved.
        bases = (extension, base)

    annotations: dict[str, Any] = {}
    namespace: dict[str, Any] = {
        "__module__": __name__,
        "__annotations__": annotations,
        "model_config": ConfigDict(**{**base.model_config, **extension.model_config}),
    }
    for name, info in extension.model_fields.items():
        annotations[name] = info.annotation
        namespace[name] = copy.copy(info)

    merged = types.new_class(
        f"{base.__name__}{extension.__name__}",
        bases,
        exec_body=lambda ns: ns.update(namespace),
    )
    logger.debug(
        "Merged context schema %s + %s -> fields %s",
        base.__name__,
        extension.__name__,
        list(merged.model_fields),
    )
    return merged


def validate_context(
    schema: Type[ContextModel], value: Mapping[str, Any] | BaseModel
) -> ContextModel:
    """Parse ``value`` against ``schema`` or raise ``ContextValidationError``."""
    if isinstance(value, BaseModel) and not isinstance(value, schema):
        value = value.model_dump()
    try:
        return schema.model_validate(value)
    except ValidationError as exc:
        raise ContextValidationError(schema.__name__, exc.errors()) from exc


def describe_context_schema(schema: Type[BaseModel] | None) -> dict[str, str]:
    """Field name -> readable type label, e.g. ``{"age": "int"}``."""
    if schema is None:
        return {}
    described: dict[str, str] = {}
    for name, info in schema.model_fields.items():
        label = _type_label(info.annotation)
        if not info.is_required():
            label = f"{label} (optional)"
        described[name] = label
    return described


def _type_label(annotation: Any) -> str:
    if annotation is None or annotation is type(None):
        return "None"
    origin = get_origin(annotation)
    if origin is Union or origin is types.UnionType:
        return " | ".join(_type_label(arg) for arg in get_args(annotation))
    if origin is not None:
        args = ", ".join(_type_label(arg) for arg in get_args(annotation))
        origin = getattr(origin, "__name__", str(origin))
        return f"{origin}[{args}]"
    return getattr(annotation, "__name__", str(annotation))
