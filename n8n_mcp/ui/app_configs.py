from __future__ import annotations

from typing import Tuple

from .models import MCP_APP_MIME_TYPE, UIAppConfig

UI_APP_CONFIGS: Tuple[UIAppConfig, ...] = (
    UIAppConfig(
        id="operation-result",
        display_name="Operation Result",
        description=(
            "Visual summary of workflow operations: created, updated, deleted, "
            "tested or deployed workflows with status and key details."
        ),
        mime_type=MCP_APP_MIME_TYPE,
        tool_patterns=(
            "n8n_create_workflow",
            "n8n_update_full_workflow",
            "n8n_update_partial_workflow",
            "n8n_delete_workflow",
            "n8n_test_workflow",
            "n8n_autofix_workflow",
            "n8n_deploy_template",
        ),
    ),
    UIAppConfig(
        id="validation-summary",
        display_name="Validation Summary",
        description=(
            "Validation results for nodes and workflows, grouped into errors, "
            "warnings and suggestions."
        ),
        mime_type=MCP_APP_MIME_TYPE,
        tool_patterns=(
            "validate_node",
            "validate_workflow",
            "n8n_validate_workflow",
        ),
    ),
)
