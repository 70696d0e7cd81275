from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Protocol

DEFAULT_DIST_DIR = Path(__file__).resolve().parents[2] / "ui-apps" / "dist"
ASSET_FILENAME = "index.html"


class AssetSource(Protocol):
    """Where UI bundles come from. ``read`` may raise; the registry absorbs it."""

    def exists(self, app_id: str) -> bool: ...

    def read(self, app_id: str) -> str: ...


def _parse_dir(raw: str | None, default: Path) -> Path:
    if raw is None or not raw.strip():
        return default
    return Path(raw.strip()).expanduser()


@dataclass(frozen=True)
class FileAssetSource:
    """Reads ``<dist_dir>/<app_id>/index.html`` from the UI build output."""

    dist_dir: Path = DEFAULT_DIST_DIR

    @classmethod
    def from_env(cls) -> "FileAssetSource":
        return cls(
            dist_dir=_parse_dir(os.environ.get("N8N_MCP_UI_DIST_DIR"), DEFAULT_DIST_DIR)
        )

    def path_for(self, app_id: str) -> Path:
        return self.dist_dir / app_id / ASSET_FILENAME

    def exists(self, app_id: str) -> bool:
        return self.path_for(app_id).is_file()

    def read(self, app_id: str) -> str:
        return self.path_for(app_id).read_text(encoding="utf-8")
