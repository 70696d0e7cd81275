from __future__ import annotations

from typing import Dict, Iterable, List

from .models import UI_URI_PREFIX, UIAppConfig, ValidationIssue, ValidationReport

_REQUIRED_TEXT_FIELDS = ("id", "display_name", "description", "mime_type")


def validate_app_configs(configs: Iterable[UIAppConfig]) -> ValidationReport:
    issues: List[ValidationIssue] = []
    seen_ids: set[str] = set()
    pattern_owner: Dict[str, str] = {}

    for config in configs:
        for field in _REQUIRED_TEXT_FIELDS:
            value = getattr(config, field)
            if not isinstance(value, str) or not value.strip():
                issues.append(
                    ValidationIssue(
                        code="config.empty_field",
                        message=f"UI app {config.id!r} has an empty {field}",
                        app_id=config.id,
                        metadata={"field": field},
                    )
                )

        if config.id in seen_ids:
            issues.append(
                ValidationIssue(
                    code="config.duplicate_id",
                    message=f"UI app id {config.id!r} is declared more than once",
                    app_id=config.id,
                )
            )
        seen_ids.add(config.id)

        expected_uri = f"{UI_URI_PREFIX}{config.id}"
        if config.uri != expected_uri:
            issues.append(
                ValidationIssue(
                    code="config.uri_mismatch",
                    message=f"UI app {config.id!r} uri {config.uri!r} != {expected_uri!r}",
                    app_id=config.id,
                )
            )

        if not config.tool_patterns:
            issues.append(
                ValidationIssue(
                    code="config.no_patterns",
                    message=f"UI app {config.id!r} declares no tool patterns",
                    app_id=config.id,
                )
            )

        for pattern in config.tool_patterns:
            if not pattern:
                issues.append(
                    ValidationIssue(
                        code="config.empty_pattern",
                        message=f"UI app {config.id!r} has an empty tool pattern",
                        app_id=config.id,
                    )
                )
                continue
            owner = pattern_owner.get(pattern)
            if owner is not None:
                issues.append(
                    ValidationIssue(
                        code="config.duplicate_pattern",
                        message=(
                            f"Tool pattern {pattern!r} is claimed by both "
                            f"{owner!r} and {config.id!r}"
                        ),
                        app_id=config.id,
                        metadata={"pattern": pattern, "first_owner": owner},
                    )
                )
                continue
            pattern_owner[pattern] = config.id

    return ValidationReport(
        ok=not any(i.severity == "error" for i in issues), issues=issues
    )
