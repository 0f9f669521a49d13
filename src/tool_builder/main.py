from __future__ import annotations

import argparse
import json
import logging
from pathlib import Path
from typing import Any

from pydantic import BaseModel

from tool_builder.config import configure_logging, get_settings
from tool_builder.errors import ConfigurationError, ContextValidationError
from tool_builder.schema import describe_context_schema
from tool_builder.tools.registry import ToolRegistry
from tool_builder.tools.tool_models import ToolSpec

logger = logging.getLogger(__name__)


def _read_json_object(text: str, source: str) -> dict[str, Any]:
    try:
        loaded = json.loads(text)
    except json.JSONDecodeError as exc:
        raise SystemExit(f"Context from {source} is not valid JSON: {exc}") from exc
    if not isinstance(loaded, dict):
        raise SystemExit(
            f"Context from {source} must be a JSON object, got {type(loaded).__name__}"
        )
    return loaded


def _load_context(raw: str | None) -> dict[str, Any]:
    """Layer settings defaults, the context file and --context JSON, in that order."""
    settings = get_settings()
    context: dict[str, Any] = {}
    if settings.api_base_url:
        context["api_base_url"] = settings.api_base_url
    if settings.tool_context_file:
        path = Path(settings.tool_context_file)
        try:
            text = path.read_text(encoding="utf-8")
        except OSError as exc:
            raise SystemExit(f"Cannot read TOOL_CONTEXT_FILE {path}: {exc}") from exc
        context.update(_read_json_object(text, str(path)))
    if raw:
        context.update(_read_json_object(raw, "--context"))
    return context


def _get_spec(name: str) -> ToolSpec:
    try:
        return ToolRegistry.get_spec(name)
    except ValueError as exc:
        raise SystemExit(str(exc)) from exc


def _print_fields(title: str, fields: dict[str, str]) -> None:
    print(f"{title}:")
    if not fields:
        print("  (none)")
    for name, label in fields.items():
        print(f"  - {name}: {label}")


def _input_schema(built: Any) -> type[BaseModel] | None:
    schema = getattr(built, "args_schema", None)
    if isinstance(schema, type) and issubclass(schema, BaseModel):
        return schema
    return None


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Inspect and build contextual tools")
    parser.add_argument(
        "--list-tools", action="store_true", help="List registered tools"
    )
    parser.add_argument(
        "--list-tool-groups", action="store_true", help="List available tool groups"
    )
    parser.add_argument(
        "--describe", metavar="NAME", help="Show the context fields a tool requires"
    )
    parser.add_argument(
        "--build", metavar="NAME", help="Build a tool with the supplied context"
    )
    parser.add_argument(
        "--context",
        help="JSON object used as the build context (overrides TOOL_CONTEXT_FILE)",
    )
    args = parser.parse_args(argv)

    configure_logging(get_settings().log_level)

    if args.list_tools:
        for name in ToolRegistry.list_all_tools():
            print(f"- {name}: {ToolRegistry.get_spec(name).intent}")
        return

    if args.list_tool_groups:
        for group_name, tools in ToolRegistry.list_groups().items():
            print(f"- {group_name}: {', '.join(tools)}")
        return

    if args.describe:
        spec = _get_spec(args.describe)
        print(f"{spec.name}: {spec.intent}")
        if spec.schema_notes:
            print(f"Notes: {spec.schema_notes}")
        _print_fields("Context", describe_context_schema(spec.context_schema))
        if spec.handle.is_static:
            static_tool = spec.handle.build({})
            _print_fields("Input", describe_context_schema(_input_schema(static_tool)))
        else:
            print("Input:\n  (depends on the context; use --build to see it)")
        return

    if not args.build:
        raise SystemExit(
            "Provide --build NAME or use --list-tools / --list-tool-groups / --describe"
        )

    spec = _get_spec(args.build)
    context = _load_context(args.context)
    try:
        built = spec.handle.build(context)
    except ContextValidationError as exc:
        print(f"Invalid context for {spec.name} ({exc.schema_name}):")
        for error in exc.errors:
            loc = ".".join(str(part) for part in error["loc"])
            print(f"  - {loc}: {error['msg']}")
        raise SystemExit(1) from exc
    except ConfigurationError as exc:
        raise SystemExit(exc.message) from exc

    logger.info("Built tool %s", spec.name)
    print(f"Built tool: {getattr(built, 'name', spec.name)}")
    description = getattr(built, "description", "")
    if description:
        print(f"Description: {description}")
    _print_fields("Input", describe_context_schema(_input_schema(built)))


if __name__ == "__main__":
    main()
