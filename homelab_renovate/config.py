"""Environment variables that drive a Renovate run."""

from __future__ import annotations

import logging
import os
from typing import Mapping

from .models import RawEnvironment, SelectionContext

REPO_OVERRIDE_VAR = "RENOVATE_REPO"
SELECT_ALL_VAR = "RENOVATE_ALL"
BRANCH_VAR = "BRANCH_NAME"
NEXUS_USERNAME_VAR = "NEXUS_USERNAME"
NEXUS_PASSWORD_VAR = "NEXUS_PASSWORD"
WEBHOOK_SECRET_VAR = "RENOVATE_WEBHOOK_SECRET"
LOG_LEVEL_VAR = "LOG_LEVEL"

PRIMARY_BRANCHES = ("master", "main")
DEFAULT_BRANCH = "master"
DEFAULT_LOG_LEVEL = "info"
MIN_REPOS_PER_RUN = 5


def configure_logging(verbose: bool) -> None:
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(level=level, format="%(levelname)s: %(message)s")


def load_selection_context(environ: Mapping[str, str] | None = None) -> SelectionContext:
    env = os.environ if environ is None else environ
    return SelectionContext(
        override=parse_override(env.get(REPO_OVERRIDE_VAR)),
        select_all=env.get(SELECT_ALL_VAR) == "true",
        branch=env.get(BRANCH_VAR) or DEFAULT_BRANCH,
    )


def load_raw_environment(environ: Mapping[str, str] | None = None) -> RawEnvironment:
    env = os.environ if environ is None else environ
    return RawEnvironment(
        branch=env.get(BRANCH_VAR) or None,
        override=env.get(REPO_OVERRIDE_VAR) or None,
        select_all=env.get(SELECT_ALL_VAR) or None,
    )


def parse_override(raw: str | None) -> tuple[str, ...]:
    """Split a comma-separated repo list, keeping order and duplicates."""

    if not raw:
        return ()
    return tuple(part.strip() for part in raw.split(","))


def get_env(name: str, environ: Mapping[str, str] | None = None) -> str | None:
    env = os.environ if environ is None else environ
    return env.get(name) or None
