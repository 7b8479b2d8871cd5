"""Repositories managed by this Renovate instance.

Add new repos here to have them automatically onboarded.
"""

from __future__ import annotations

ALL_REPOSITORIES: tuple[str, ...] = (
    # Core infrastructure
    "erauner12/homelab-k8s",
    "erauner12/omni",
    "erauner12/infrastructure",
    # Decoupled components (from homelab-k8s)
    "erauner12/homelab-smoke",
    "erauner12/homelab-validation-image",
    "erauner12/homelab-go-utils",
    "erauner12/homelab-jenkins-library",
    "erauner12/homelab-shadow",
    "erauner12/homelab-manifest-service",
    "erauner12/backstage-plugins",
    # Tools and utilities
    "erauner12/dotfiles",
    "erauner12/taskfiles",
    "erauner12/todoist-mcp",
    # This repo (self-management)
    "erauner12/homelab-renovate",
)

# PR branches only run against this repo itself.
SELF_TEST_REPOSITORY = "erauner12/homelab-renovate"
