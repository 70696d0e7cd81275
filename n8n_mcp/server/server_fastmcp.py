import os
from typing import Any

from mcp.server.fastmcp import server as fserver
from mcp.server.fastmcp.resources import Resource
from pydantic import Field

from n8n_mcp.ui.models import MCP_APP_MIME_TYPE, UIAppEntry
from n8n_mcp.ui.registry import UIAppRegistry

from .meta import ui_meta_for_entry


class UIAppResource(Resource):
    """Serves one loaded UI bundle under its ``n8n-mcp://ui/{id}`` address."""

    # MCP app MIME types carry a ``profile`` parameter, so no pattern here
    mime_type: str = Field(default=MCP_APP_MIME_TYPE)
    html: str = ""

    @classmethod
    def from_entry(cls, entry: UIAppEntry) -> "UIAppResource":
        return cls(
            uri=entry.config.uri,
            name=entry.config.id,
            description=entry.config.description,
            mime_type=entry.config.mime_type,
            html=entry.html or "",
        )

    async def read(self) -> str:
        return self.html


def list_apps_payload(registry: UIAppRegistry) -> list[dict[str, Any]]:
    return [entry.summary() for entry in registry.get_all_apps()]


def lookup_payload(registry: UIAppRegistry, tool: str) -> dict[str, Any]:
    entry = registry.get_app_for_tool(tool)
    if entry is None:
        return {"tool": tool, "app": None, "_meta": None}
    return {"tool": tool, "app": entry.summary(), "_meta": ui_meta_for_entry(entry)}


def register_ui_resources(srv: fserver.FastMCP, registry: UIAppRegistry) -> int:
    count = 0
    for entry in registry.get_all_apps():
        if not entry.available:
            continue
        srv.add_resource(UIAppResource.from_entry(entry))
        count += 1
    return count


def create_mcp_server(
    registry: UIAppRegistry,
    host: str | None = None,
    port: int | None = None,
) -> fserver.FastMCP:
    if host is None:
        host = os.environ.get("N8N_MCP_HOST", "127.0.0.1")
    if port is None:
        try:
            port = int(os.environ.get("N8N_MCP_PORT", "3001"))
        except ValueError:
            port = 3001

    log_level = os.environ.get("FASTMCP_LOG_LEVEL", "INFO").upper()
    debug_flag = os.environ.get("FASTMCP_DEBUG", "0") in {
        "1",
        "true",
        "TRUE",
        "yes",
        "on",
    }

    srv = fserver.FastMCP(
        name="n8n-mcp UI apps",
        instructions="Interactive UI bundles for n8n-mcp tool results",
        host=host,
        port=port,
        log_level=log_level,
        debug=debug_flag,
    )
    if not registry.loaded:
        registry.load()
    register_ui_resources(srv, registry)

    @srv.tool(name="ui.list_apps", description="List configured UI apps and asset status")
    def ui_list_apps() -> list[dict[str, Any]]:
        return list_apps_payload(registry)

    @srv.tool(
        name="ui.lookup",
        description="Resolve which UI app, if any, renders a tool's result",
    )
    def ui_lookup(tool: str) -> dict[str, Any]:
        return lookup_payload(registry, tool)

    return srv
