from __future__ import annotations

import asyncio

import pytest

from n8n_mcp.server.server_fastmcp import (
    create_mcp_server,
    list_apps_payload,
    lookup_payload,
)
from n8n_mcp.ui.registry import UIAppRegistry

from ._ui_sources import AbsentSource, MappingSource


@pytest.fixture
def registry() -> UIAppRegistry:
    reg = UIAppRegistry(
        source=MappingSource({"operation-result": "<html>operation</html>"})
    )
    reg.load()
    return reg


def test_only_apps_with_html_become_resources(registry: UIAppRegistry) -> None:
    srv = create_mcp_server(registry)
    resources = asyncio.run(srv.list_resources())

    assert [str(r.uri) for r in resources] == ["n8n-mcp://ui/operation-result"]
    resource = resources[0]
    assert resource.name == "operation-result"
    assert resource.mimeType == "text/html;profile=mcp-app"


def test_resource_read_returns_loaded_html(registry: UIAppRegistry) -> None:
    srv = create_mcp_server(registry)
    contents = list(asyncio.run(srv.read_resource("n8n-mcp://ui/operation-result")))

    assert len(contents) == 1
    assert contents[0].content == "<html>operation</html>"
    assert contents[0].mime_type == "text/html;profile=mcp-app"


def test_server_registers_ui_tools(registry: UIAppRegistry) -> None:
    srv = create_mcp_server(registry)
    names = {tool.name for tool in asyncio.run(srv.list_tools())}
    assert {"ui.list_apps", "ui.lookup"} <= names


def test_server_loads_unloaded_registry() -> None:
    reg = UIAppRegistry(source=AbsentSource())
    create_mcp_server(reg)
    assert reg.loaded


def test_server_reads_host_and_port_from_env(
    monkeypatch: pytest.MonkeyPatch, registry: UIAppRegistry
) -> None:
    monkeypatch.setenv("N8N_MCP_HOST", "0.0.0.0")
    monkeypatch.setenv("N8N_MCP_PORT", "not-a-port")
    srv = create_mcp_server(registry)
    assert srv.settings.host == "0.0.0.0"
    assert srv.settings.port == 3001


def test_lookup_payload(registry: UIAppRegistry) -> None:
    hit = lookup_payload(registry, "n8n_test_workflow")
    assert hit["app"]["id"] == "operation-result"
    assert hit["_meta"] == {"ui": {"app": "n8n-mcp://ui/operation-result"}}

    no_html = lookup_payload(registry, "validate_node")
    assert no_html["app"]["status"] == "missing"
    assert no_html["_meta"] is None

    miss = lookup_payload(registry, "get_node_info")
    assert miss == {"tool": "get_node_info", "app": None, "_meta": None}


def test_list_apps_payload(registry: UIAppRegistry) -> None:
    payload = list_apps_payload(registry)
    assert [item["id"] for item in payload] == [
        "operation-result",
        "validation-summary",
    ]
    assert [item["status"] for item in payload] == ["available", "missing"]
