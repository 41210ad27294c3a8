"""MCP tool declarations and dispatch.

Each tool is a thin projection over one RankPathClient method. Input schemas
are written out here as plain JSON Schema so what the host sees is exactly
what is declared, independent of function signatures.

Every tool answers with a single text block: the result as indented JSON on
success, or the error line with ``isError`` set. API failures never escape as
exceptions.
"""

from __future__ import annotations

import json
import logging
from typing import Any, Awaitable, Callable, Optional

from mcp.types import CallToolResult, TextContent, Tool, ToolAnnotations
from pydantic import BaseModel

from .core.clients import RankPathClient
from .core.exceptions import RankPathError

logger = logging.getLogger(__name__)

READ_ONLY = ToolAnnotations(readOnlyHint=True, destructiveHint=False, idempotentHint=True, openWorldHint=True)

PROJECT_ID = {"type": "string", "minLength": 1, "description": "The project UUID"}


def _input_schema(properties: Optional[dict] = None, required: Optional[list[str]] = None) -> dict:
    schema: dict = {"type": "object", "properties": properties or {}}
    if required:
        schema["required"] = required
    return schema


TOOLS: list[Tool] = [
    Tool(
        name="list_projects",
        description="List all RankPath projects for the authenticated user",
        inputSchema=_input_schema(),
        annotations=READ_ONLY,
    ),
    Tool(
        name="get_project",
        description="Get details for a specific RankPath project by its UUID",
        inputSchema=_input_schema({"projectId": PROJECT_ID}, ["projectId"]),
        annotations=READ_ONLY,
    ),
    Tool(
        name="get_crawl_history",
        description="Get paginated crawl history for a RankPath project",
        inputSchema=_input_schema(
            {
                "projectId": PROJECT_ID,
                "limit": {
                    "type": ["integer", "null"],
                    "minimum": 1,
                    "maximum": 100,
                    "description": "Maximum number of results to return (1-100, default: 10)",
                },
                "offset": {
                    "type": ["integer", "null"],
                    "minimum": 0,
                    "description": "Number of results to skip for pagination (default: 0)",
                },
            },
            ["projectId"],
        ),
        annotations=READ_ONLY,
    ),
    Tool(
        name="get_latest_crawl",
        description="Get the latest crawl result with full SEO analysis for a RankPath project",
        inputSchema=_input_schema({"projectId": PROJECT_ID}, ["projectId"]),
        annotations=READ_ONLY,
    ),
    Tool(
        name="get_issues",
        description=(
            "Get SEO issues for a RankPath project, optionally filtered by severity "
            "(critical/warning/info) or status (open/acknowledged/ignored)"
        ),
        inputSchema=_input_schema(
            {
                "projectId": PROJECT_ID,
                "severity": {"type": "string", "description": 'Filter by severity: "critical", "warning", or "info"'},
                "status": {"type": "string", "description": 'Filter by status: "open", "acknowledged", or "ignored"'},
            },
            ["projectId"],
        ),
        annotations=READ_ONLY,
    ),
]


# ─── Handlers ────────────────────────────────────────────────────────────────


async def _list_projects(client: RankPathClient, args: dict) -> Any:
    return await client.list_projects()


async def _get_project(client: RankPathClient, args: dict) -> Any:
    return await client.get_project(args["projectId"])


async def _get_crawl_history(client: RankPathClient, args: dict) -> Any:
    return await client.get_crawl_history(args["projectId"], args.get("limit"), args.get("offset"))


async def _get_latest_crawl(client: RankPathClient, args: dict) -> Any:
    return await client.get_latest_crawl(args["projectId"])


async def _get_issues(client: RankPathClient, args: dict) -> Any:
    return await client.get_issues(args["projectId"], args.get("severity"), args.get("status"))


HANDLERS: dict[str, Callable[[RankPathClient, dict], Awaitable[Any]]] = {
    "list_projects": _list_projects,
    "get_project": _get_project,
    "get_crawl_history": _get_crawl_history,
    "get_latest_crawl": _get_latest_crawl,
    "get_issues": _get_issues,
}


# ─── Rendering ───────────────────────────────────────────────────────────────


def _to_jsonable(result: Any) -> Any:
    """Dump models by wire alias, leaving out fields upstream never sent."""
    if isinstance(result, BaseModel):
        return result.model_dump(mode="json", by_alias=True, exclude_unset=True)
    if isinstance(result, list):
        return [_to_jsonable(item) for item in result]
    return result


def render_result(result: Any) -> CallToolResult:
    text = json.dumps(_to_jsonable(result), indent=2, ensure_ascii=False)
    return CallToolResult(content=[TextContent(type="text", text=text)], isError=False)


def render_error(message: str) -> CallToolResult:
    return CallToolResult(content=[TextContent(type="text", text=message)], isError=True)


async def call_tool(client: RankPathClient, name: str, arguments: Optional[dict] = None) -> CallToolResult:
    """Run one tool call against ``client`` and render its outcome."""
    handler = HANDLERS.get(name)
    if handler is None:
        return render_error(f"Unknown tool: {name}")

    try:
        result = await handler(client, arguments or {})
    except RankPathError as exc:
        logger.info("Tool %s failed: %s", name, exc)
        return render_error(str(exc))
    return render_result(result)
