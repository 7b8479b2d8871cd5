"""Policy tables handed to Renovate as-is."""

from __future__ import annotations

import re
from types import MappingProxyType
from typing import Any, Iterable, Mapping

from .config import NEXUS_PASSWORD_VAR, NEXUS_USERNAME_VAR, get_env
from .exceptions import ValidationError
from .models import HostRule

ENABLED_MANAGERS: tuple[str, ...] = (
    "dockerfile",
    "docker-compose",
    "github-actions",
    "gomod",
    "helm-values",
    "kubernetes",
    "kustomize",
    "npm",
    "pip_requirements",
    "regex",
)

# Nexus proxies share one set of credentials; Athens is anonymous.
_NEXUS_HOSTS: tuple[tuple[str, str], ...] = (
    ("docker.nexus.erauner.dev", "docker"),
    ("npm.nexus.erauner.dev", "npm"),
    ("pypi.nexus.erauner.dev", "pypi"),
)
_ATHENS_HOST = ("athens.erauner.dev", "go")
_HELM_HOST = ("helm.nexus.erauner.dev", "helm")


def build_host_rules(environ: Mapping[str, str] | None = None) -> list[HostRule]:
    username = get_env(NEXUS_USERNAME_VAR, environ)
    password = get_env(NEXUS_PASSWORD_VAR, environ)
    rules = [
        HostRule(match_host=host, host_type=kind, username=username, password=password)
        for host, kind in _NEXUS_HOSTS
    ]
    rules.append(HostRule(match_host=_ATHENS_HOST[0], host_type=_ATHENS_HOST[1]))
    rules.append(
        HostRule(match_host=_HELM_HOST[0], host_type=_HELM_HOST[1], username=username, password=password)
    )
    return rules


def _freeze(value: Any) -> Any:
    if isinstance(value, Mapping):
        return MappingProxyType({key: _freeze(item) for key, item in value.items()})
    if isinstance(value, (list, tuple)):
        return tuple(_freeze(item) for item in value)
    return value


def _freeze_all(*entries: Mapping[str, Any]) -> tuple[Mapping[str, Any], ...]:
    return tuple(_freeze(entry) for entry in entries)


def thaw(value: Any) -> Any:
    """Return a fresh JSON-ready copy of a frozen table."""

    if isinstance(value, Mapping):
        return {key: thaw(item) for key, item in value.items()}
    if isinstance(value, (list, tuple)):
        return [thaw(item) for item in value]
    return value


PACKAGE_RULES: tuple[Mapping[str, Any], ...] = _freeze_all(
    {
        "description": "Group homelab decoupled components",
        "matchPackagePatterns": ["^erauner12/homelab-"],
        "groupName": "homelab-components",
        "automerge": False,  # internal components need review
    },
    {
        "description": "Automerge patch updates",
        "matchUpdateTypes": ["patch"],
        "matchCurrentVersion": "!/^0/",
        "automerge": True,
        "automergeType": "pr",
    },
    {
        "description": "Group Kubernetes ecosystem",
        "matchPackagePatterns": ["^kubernetes", "^k8s", "^kubectl", "^helm", "^kustomize"],
        "groupName": "kubernetes-ecosystem",
    },
    {
        "description": "Group GitHub Actions",
        "matchManagers": ["github-actions"],
        "groupName": "github-actions",
        "automerge": True,
    },
    {
        "description": "Group Docker base images",
        "matchDatasources": ["docker"],
        "matchPackagePatterns": ["^ghcr.io/", "^docker.io/"],
        "groupName": "docker-images",
    },
    {
        "description": "Group Go dependencies",
        "matchManagers": ["gomod"],
        "groupName": "go-dependencies",
    },
    {
        "description": "Security updates - immediate",
        "matchUpdateTypes": ["pin", "digest"],
        "groupName": None,
        "automerge": True,
    },
)

CUSTOM_MANAGERS: tuple[Mapping[str, Any], ...] = _freeze_all(
    {
        "customType": "regex",
        "description": "Update docker image tags in versions.yaml",
        "fileMatch": [r"^versions\.yaml$"],
        "matchStrings": [
            r"#\s*renovate:\s*datasource=(?<datasource>[^\s]+)\s+depName=(?<depName>[^\s]+)"
            r"(?:\s+(?<additionalConfig>[^\n]*))?\n\s*\w+:\n\s*repository:[^\n]+\n\s*tag:\s*(?<currentValue>[^\s]+)",
        ],
    },
    {
        "customType": "regex",
        "description": "Update module versions in versions.yaml",
        "fileMatch": [r"^versions\.yaml$"],
        "matchStrings": [
            r"#\s*renovate:\s*datasource=(?<datasource>[^\s]+)\s+depName=(?<depName>[^\s]+)"
            r"(?:\s+versioning=(?<versioning>[^\s]+))?\n\s*[\w-]+:\s*(?<currentValue>(?:pkg/)?v?[0-9][^\s]*)",
        ],
    },
    {
        "customType": "regex",
        "description": "Update CLI tool versions in versions.yaml",
        "fileMatch": [r"^versions\.yaml$"],
        "matchStrings": [
            r"#\s*renovate:\s*datasource=(?<datasource>[^\s]+)\s+depName=(?<depName>[^\s]+)"
            r"(?:\s+extractVersion=(?<extractVersion>[^\n]+))?\n\s*[\w-]+:\s*(?<currentValue>v[0-9][^\s]*)",
        ],
    },
    {
        "customType": "regex",
        "description": "Update Jenkinsfile image tags",
        "fileMatch": ["^Jenkinsfile", "Jenkinsfile$"],
        "matchStrings": [
            r"""image ['"](?<depName>[^:'"]+):(?<currentValue>[^'"]+)['"]""",
        ],
        "datasourceTemplate": "docker",
    },
    {
        "customType": "regex",
        "description": "Update Talos versions in omni configs",
        "fileMatch": [r"\.yaml$"],
        "matchStrings": [
            r"talos\.dev/version:\s*(?<currentValue>v[0-9.]+)",
        ],
        "depNameTemplate": "siderolabs/talos",
        "datasourceTemplate": "github-releases",
    },
)

POST_UPGRADE_TASKS: Mapping[str, Any] = _freeze(
    {
        "commands": ["./scripts/sync-versions.sh || true"],
        "fileFilters": ["**/*"],
        "executionMode": "branch",
    }
)

_NAMED_GROUP = re.compile(r"\(\?<(?=[A-Za-z_])")


def to_python_pattern(pattern: str) -> str:
    """Rewrite Renovate's ``(?<name>...)`` groups as ``(?P<name>...)``."""

    return _NAMED_GROUP.sub("(?P<", pattern)


def check_custom_managers(managers: Iterable[Mapping[str, Any]] = CUSTOM_MANAGERS) -> int:
    """Compile every pattern and return how many were checked."""

    failures: list[tuple[str, str]] = []
    checked = 0
    for manager in managers:
        for pattern in [*manager.get("fileMatch", []), *manager.get("matchStrings", [])]:
            checked += 1
            try:
                re.compile(to_python_pattern(pattern))
            except re.error as exc:
                failures.append((pattern, str(exc)))
    if failures:
        raise ValidationError(failures)
    return checked
