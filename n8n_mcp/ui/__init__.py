from .api import create_registry
from .app_configs import UI_APP_CONFIGS
from .assets import AssetSource, FileAssetSource
from .models import (
    MCP_APP_MIME_TYPE,
    UI_URI_PREFIX,
    AssetStatus,
    UIAppConfig,
    UIAppEntry,
    ValidationIssue,
    ValidationReport,
)
from .registry import UIAppRegistry
from .validator import validate_app_configs

__all__ = [
    "MCP_APP_MIME_TYPE",
    "UI_APP_CONFIGS",
    "UI_URI_PREFIX",
    "AssetSource",
    "AssetStatus",
    "FileAssetSource",
    "UIAppConfig",
    "UIAppEntry",
    "UIAppRegistry",
    "ValidationIssue",
    "ValidationReport",
    "create_registry",
    "validate_app_configs",
]
