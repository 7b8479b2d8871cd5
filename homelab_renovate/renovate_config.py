"""Assemble the configuration object Renovate consumes.

This config is used by the self-hosted Renovate CE deployment in homelab-k8s.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Mapping, Sequence

import typer

from . import rules
from .config import DEFAULT_LOG_LEVEL, LOG_LEVEL_VAR, WEBHOOK_SECRET_VAR, get_env
from .exceptions import ExportError

logger = logging.getLogger(__name__)

SCHEMA_URL = "https://docs.renovatebot.com/renovate-schema.json"


def build_config(
    repositories: Sequence[str],
    environ: Mapping[str, str] | None = None,
) -> dict[str, Any]:
    config: dict[str, Any] = {
        "platform": "github",
        "endpoint": "https://api.github.com/",
        "repositories": list(repositories),
        # Explicit repo list instead of autodiscovery
        "autodiscover": False,
        "onboarding": True,
        "onboardingConfig": {
            "$schema": SCHEMA_URL,
            "extends": ["config:recommended", ":semanticCommits"],
        },
        "requireConfig": "optional",
        # Webhook-driven, run anytime
        "timezone": "America/Chicago",
        "schedule": ["at any time"],
        "prConcurrentLimit": 10,
        "branchConcurrentLimit": 15,
        "prHourlyLimit": 0,
        # Wait a day for non-security updates
        "stabilityDays": 1,
        "minimumReleaseAge": "1 day",
        "semanticCommits": "enabled",
        "commitMessagePrefix": "chore(deps):",
        "dependencyDashboard": True,
        "dependencyDashboardTitle": "🤖 Renovate Dashboard",
        "dependencyDashboardHeader": "This issue tracks all Renovate updates for this repository.",
        "dependencyDashboardFooter": (
            "Managed by [homelab-renovate](https://github.com/erauner12/homelab-renovate)"
        ),
        "enabledManagers": list(rules.ENABLED_MANAGERS),
        "hostRules": [rule.to_dict() for rule in rules.build_host_rules(environ)],
        "packageRules": rules.thaw(rules.PACKAGE_RULES),
        "customManagers": rules.thaw(rules.CUSTOM_MANAGERS),
        "postUpgradeTasks": rules.thaw(rules.POST_UPGRADE_TASKS),
        "logLevel": get_env(LOG_LEVEL_VAR, environ) or DEFAULT_LOG_LEVEL,
    }
    webhook_secret = get_env(WEBHOOK_SECRET_VAR, environ)
    if webhook_secret is not None:
        config["webhookSecret"] = webhook_secret
    return config


def dump_config(config: Mapping[str, Any], path: str | Path | None = None) -> None:
    """Write the config as JSON to ``path``, or to stdout when omitted."""

    text = json.dumps(config, indent=2, ensure_ascii=False) + "\n"
    if path is None:
        typer.echo(text, nl=False)
        return
    path = Path(path)
    try:
        path.write_text(text, encoding="utf-8")
    except OSError as exc:
        raise ExportError(f"Unable to write config to {path}: {exc.strerror or exc}") from exc
    logger.info("Wrote %d repositories to %s", len(config.get("repositories", [])), path)
