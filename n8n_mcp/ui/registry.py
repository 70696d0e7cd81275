from __future__ import annotations

import logging
from typing import Dict, List, Optional, Sequence

from .app_configs import UI_APP_CONFIGS
from .assets import AssetSource, FileAssetSource
from .models import AssetStatus, UIAppConfig, UIAppEntry

logger = logging.getLogger(__name__)


class UIAppRegistry:
    """Maps tool names to pre-built UI apps and their loaded HTML.

    The registry starts unloaded and every lookup answers ``None`` (or an
    empty list) until :meth:`load` runs. ``load`` is the only mutator: call it
    once at startup, then share the instance with readers. Reloading while
    other threads are looking up entries is not supported.

    Tool names are matched by exact equality against each config's
    ``tool_patterns``. When two configs list the same pattern the first one
    in table order wins.
    """

    def __init__(
        self,
        configs: Sequence[UIAppConfig] = UI_APP_CONFIGS,
        source: Optional[AssetSource] = None,
    ) -> None:
        self.configs = tuple(configs)
        self.source: AssetSource = (
            source if source is not None else FileAssetSource.from_env()
        )
        self._entries: List[UIAppEntry] = []
        self._by_id: Dict[str, UIAppEntry] = {}
        self._by_tool: Dict[str, UIAppEntry] = {}
        self._loaded = False

    @property
    def loaded(self) -> bool:
        return self._loaded

    def load(self) -> None:
        entries = [self._resolve(config) for config in self.configs]

        by_id: Dict[str, UIAppEntry] = {}
        by_tool: Dict[str, UIAppEntry] = {}
        for entry in entries:
            by_id.setdefault(entry.config.id, entry)
            for pattern in entry.config.tool_patterns:
                by_tool.setdefault(pattern, entry)

        self._entries = entries
        self._by_id = by_id
        self._by_tool = by_tool
        self._loaded = True

        available = sum(1 for entry in entries if entry.available)
        logger.info("Loaded %d/%d UI apps with HTML", available, len(entries))

    def _resolve(self, config: UIAppConfig) -> UIAppEntry:
        try:
            present = self.source.exists(config.id)
        except Exception as exc:  # noqa: BLE001
            logger.warning("UI app %s: asset check failed: %s", config.id, exc)
            return UIAppEntry(config=config, status=AssetStatus.UNREADABLE)
        if not present:
            logger.debug("UI app %s: no HTML asset found", config.id)
            return UIAppEntry(config=config, status=AssetStatus.MISSING)
        try:
            html = self.source.read(config.id)
        except Exception as exc:  # noqa: BLE001
            logger.warning("UI app %s: failed to read HTML: %s", config.id, exc)
            return UIAppEntry(config=config, status=AssetStatus.UNREADABLE)
        return UIAppEntry(config=config, html=html, status=AssetStatus.AVAILABLE)

    def get_app_for_tool(self, tool_name: str) -> Optional[UIAppEntry]:
        if not self._loaded or not tool_name:
            return None
        return self._by_tool.get(tool_name)

    def get_app_by_id(self, app_id: str) -> Optional[UIAppEntry]:
        if not self._loaded:
            return None
        return self._by_id.get(app_id)

    def get_all_apps(self) -> List[UIAppEntry]:
        return list(self._entries)
