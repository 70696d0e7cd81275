from __future__ import annotations

from pathlib import Path
from typing import Optional, Sequence

from .app_configs import UI_APP_CONFIGS
from .assets import AssetSource, FileAssetSource
from .models import UIAppConfig
from .registry import UIAppRegistry


def create_registry(
    *,
    dist_dir: Optional[str | Path] = None,
    source: Optional[AssetSource] = None,
    configs: Sequence[UIAppConfig] = UI_APP_CONFIGS,
    load: bool = True,
) -> UIAppRegistry:
    """Build a registry over ``configs`` and, by default, load it right away.

    ``source`` wins over ``dist_dir``; with neither, the asset directory comes
    from ``N8N_MCP_UI_DIST_DIR``.
    """
    if source is None:
        source = (
            FileAssetSource(dist_dir=Path(dist_dir))
            if dist_dir is not None
            else FileAssetSource.from_env()
        )
    registry = UIAppRegistry(configs=configs, source=source)
    if load:
        registry.load()
    return registry
