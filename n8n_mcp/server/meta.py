from __future__ import annotations

from typing import Any, Dict, Optional, TypeVar

from mcp.types import CallToolResult

from n8n_mcp.ui.models import UIAppEntry
from n8n_mcp.ui.registry import UIAppRegistry

Response = TypeVar("Response", Dict[str, Any], CallToolResult)


def ui_meta_for_entry(entry: Optional[UIAppEntry]) -> Optional[Dict[str, Any]]:
    if entry is None or not entry.available:
        return None
    return {"ui": {"app": entry.config.uri}}


def ui_meta_for_tool(
    registry: UIAppRegistry, tool_name: str
) -> Optional[Dict[str, Any]]:
    return ui_meta_for_entry(registry.get_app_for_tool(tool_name))


def inject_ui_meta(response: Response, registry: UIAppRegistry, tool_name: str) -> Response:
    """Attach ``_meta.ui`` for ``tool_name`` when its UI app has HTML loaded.

    Works on plain dict envelopes and on ``CallToolResult``. Other ``_meta``
    keys and ``structuredContent`` are kept as they are. When no UI applies
    the response is returned untouched.

    A dict envelope is updated in place and returned. A ``CallToolResult`` is
    never modified; a copy carrying the new ``_meta`` is returned instead, so
    always use the return value.
    """
    ui_meta = ui_meta_for_tool(registry, tool_name)
    if ui_meta is None:
        return response

    if isinstance(response, CallToolResult):
        merged = dict(response.meta or {})
        merged.update(ui_meta)
        return response.model_copy(update={"meta": merged})

    existing = response.get("_meta")
    merged = dict(existing) if isinstance(existing, dict) else {}
    merged.update(ui_meta)
    response["_meta"] = merged
    return response
