from __future__ import annotations

from typing import Any

import httpx
from langchain_core.tools import StructuredTool
from pydantic import BaseModel, Field

from tool_builder.builder import tool_builder
from tool_builder.config.settings import get_settings
from tool_builder.tools.tool_models import ToolSpec


class ApiContext(BaseModel):
    api_base_url: str = Field(min_length=1, description="Root URL of the internal API")
    auth_token: str = Field(default="", description="Bearer token, if required")


class SessionContext(BaseModel):
    session_cookie: str = Field(default="", description="Upstream session cookie")


class BankAccountApiInput(BaseModel):
    params: dict[str, Any] = Field(
        default_factory=dict,
        description="Query parameters: bank_name, status, search, date_from, start_date, end_date",
    )


def build_bank_account_api(ctx) -> StructuredTool:
    settings = get_settings()
    base_url = f"{ctx.api_base_url.rstrip('/')}/bank-account/request"
    headers: dict[str, str] = {}

    if ctx.auth_token:
        headers["Authorization"] = f"Bearer {ctx.auth_token}"

    if ctx.session_cookie:
        headers["Cookie"] = f"gopaddi_session={ctx.session_cookie}"

    description = (
        "Fetch bank account requests. Provide optional params dict with keys: "
        "bank_name, status, search, date_from, start_date, end_date."
    )

    def _run(params: dict[str, Any]) -> str:
        try:
            with httpx.Client(
                timeout=settings.default_api_timeout_seconds, headers=headers
            ) as client:
                response = client.get(base_url, params=params)
                response.raise_for_status()
                payload: Any = response.json()
                return str(payload)
        except Exception as exc:  # noqa: BLE001
            return f"bank_account_api tool failed: {exc}"

    return StructuredTool.from_function(
        name="bank_account_api",
        description=description,
        func=_run,
        args_schema=BankAccountApiInput,
    )


bank_account_api = (
    tool_builder.with_context(ApiContext)
    .with_context(SessionContext)
    .tool(build_bank_account_api)
)

tool = ToolSpec(
    name="bank_account_api",
    handle=bank_account_api,
    intent="Access and filter internal bank transaction records.",
    schema_notes="Context needs 'api_base_url' (optional 'auth_token', 'session_cookie'). "
    "Accepts optional 'params' dict (bank_name, status, search, date range).",
    groups=["analysis_plus_api"],
)
