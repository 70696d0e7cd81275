from __future__ import annotations

from enum import Enum
from typing import Any, Dict, List, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, computed_field

UI_URI_PREFIX = "n8n-mcp://ui/"
MCP_APP_MIME_TYPE = "text/html;profile=mcp-app"


class AssetStatus(str, Enum):
    AVAILABLE = "available"
    MISSING = "missing"
    UNREADABLE = "unreadable"


class UIAppConfig(BaseModel):
    """Static description of one UI application and the tools it renders."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    id: str = Field(min_length=1)
    display_name: str = Field(min_length=1)
    description: str = Field(min_length=1)
    mime_type: str = Field(default=MCP_APP_MIME_TYPE, min_length=1)
    tool_patterns: Tuple[str, ...] = Field(min_length=1)

    @computed_field  # type: ignore[prop-decorator]
    @property
    def uri(self) -> str:
        return f"{UI_URI_PREFIX}{self.id}"


class UIAppEntry(BaseModel):
    """Runtime pairing of a config with its resolved asset.

    ``html`` is ``None`` whenever ``status`` is not ``AVAILABLE``.
    """

    model_config = ConfigDict(frozen=True)

    config: UIAppConfig
    html: Optional[str] = None
    status: AssetStatus = AssetStatus.MISSING

    @property
    def available(self) -> bool:
        return self.html is not None

    def summary(self) -> Dict[str, Any]:
        return {
            "id": self.config.id,
            "display_name": self.config.display_name,
            "uri": self.config.uri,
            "mime_type": self.config.mime_type,
            "tool_patterns": list(self.config.tool_patterns),
            "status": self.status.value,
        }


class ValidationIssue(BaseModel):
    code: str
    message: str
    app_id: Optional[str] = None
    severity: str = "error"
    metadata: Dict[str, Any] = Field(default_factory=dict)


class ValidationReport(BaseModel):
    ok: bool
    issues: List[ValidationIssue] = Field(default_factory=list)
