from __future__ import annotations

import json
from pathlib import Path
from typing import Optional

import typer
from dotenv import load_dotenv

from n8n_mcp.server.meta import ui_meta_for_entry
from n8n_mcp.ui.api import create_registry
from n8n_mcp.ui.app_configs import UI_APP_CONFIGS
from n8n_mcp.ui.registry import UIAppRegistry
from n8n_mcp.ui.validator import validate_app_configs


app = typer.Typer(
    add_completion=False,
    help="Inspect and serve the interactive UI apps attached to n8n-mcp tools.",
)

_DIST_DIR_HELP = "UI build output directory (defaults to N8N_MCP_UI_DIST_DIR)"


@app.callback()
def main() -> None:
    load_dotenv(override=False)


def _registry(dist_dir: Optional[Path]) -> UIAppRegistry:
    return create_registry(dist_dir=dist_dir)


@app.command("list")
def list_cmd(
    dist_dir: Optional[Path] = typer.Option(None, help=_DIST_DIR_HELP),
    indent: int = typer.Option(2, help="Pretty indent"),
) -> None:
    registry = _registry(dist_dir)
    entries = [entry.summary() for entry in registry.get_all_apps()]
    typer.echo(json.dumps(entries, indent=indent))


@app.command()
def show(
    app_id: str,
    dist_dir: Optional[Path] = typer.Option(None, help=_DIST_DIR_HELP),
    html: bool = typer.Option(False, help="Print the loaded HTML instead of metadata"),
    indent: int = typer.Option(2, help="Pretty indent"),
) -> None:
    entry = _registry(dist_dir).get_app_by_id(app_id)
    if entry is None:
        typer.echo(f"unknown UI app: {app_id}", err=True)
        raise typer.Exit(code=1)
    if html:
        if entry.html is None:
            typer.echo(f"UI app {app_id} has no HTML ({entry.status.value})", err=True)
            raise typer.Exit(code=1)
        typer.echo(entry.html)
        return
    payload = entry.summary()
    payload["description"] = entry.config.description
    typer.echo(json.dumps(payload, indent=indent))


@app.command()
def resolve(
    tool: str,
    dist_dir: Optional[Path] = typer.Option(None, help=_DIST_DIR_HELP),
    indent: int = typer.Option(2, help="Pretty indent"),
) -> None:
    entry = _registry(dist_dir).get_app_for_tool(tool)
    if entry is None:
        typer.echo(f"no UI app for tool: {tool}", err=True)
        raise typer.Exit(code=1)
    payload = {"tool": tool, "app": entry.summary(), "_meta": ui_meta_for_entry(entry)}
    typer.echo(json.dumps(payload, indent=indent))


@app.command()
def check(indent: int = typer.Option(2, help="Pretty indent")) -> None:
    report = validate_app_configs(UI_APP_CONFIGS)
    typer.echo(json.dumps(report.model_dump(), indent=indent))
    if not report.ok:
        raise typer.Exit(code=1)


@app.command()
def serve(
    dist_dir: Optional[Path] = typer.Option(None, help=_DIST_DIR_HELP),
    transport: str = typer.Option(
        "stdio", help="MCP transport: stdio|sse|streamable-http"
    ),
    host: Optional[str] = typer.Option(None, help="Bind host (defaults to N8N_MCP_HOST)"),
    port: Optional[int] = typer.Option(None, help="Bind port (defaults to N8N_MCP_PORT)"),
) -> None:
    from n8n_mcp.server.server_fastmcp import create_mcp_server

    srv = create_mcp_server(_registry(dist_dir), host=host, port=port)
    srv.run(transport=transport)  # type: ignore[arg-type]


if __name__ == "__main__":
    app()
