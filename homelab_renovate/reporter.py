"""Console summary of which repos the current run will process.

Used in the Jenkinsfile to provide visibility into each run.
"""

from __future__ import annotations

from typing import Sequence

from rich.console import Console

from .models import RawEnvironment

NOT_SET = "(not set)"

BANNER = (
    "╔═══════════════════════════════════════════════════════════════════╗",
    "║              Homelab Renovate - Repository Selection              ║",
    "╚═══════════════════════════════════════════════════════════════════╝",
)
SEPARATOR = "═" * 71
HINTS = (
    "💡 Tip: Set RENOVATE_ALL=true to process all repos",
    "💡 Tip: Set RENOVATE_REPO=owner/repo to target specific repos",
)


def render_report(
    catalog: Sequence[str],
    selection: Sequence[str],
    env: RawEnvironment,
) -> list[str]:
    lines = ["", *BANNER, ""]
    lines.append("Environment:")
    lines.append(f"  BRANCH_NAME:    {env.branch or NOT_SET}")
    lines.append(f"  RENOVATE_REPO:  {env.override or NOT_SET}")
    lines.append(f"  RENOVATE_ALL:   {env.select_all or NOT_SET}")
    lines.append("")

    lines.append(f"Selected {len(selection)} of {len(catalog)} total repositories:")
    lines.append("")
    for index, repo in enumerate(selection, start=1):
        lines.append(f"  {index:>2}. {repo}")
    lines.append("")

    if len(selection) < len(catalog):
        chosen = set(selection)
        skipped = [repo for repo in catalog if repo not in chosen]
        lines.append(f"Skipped this run ({len(skipped)} repos):")
        lines.extend(f"      - {repo}" for repo in skipped)
        lines.append("")
        lines.extend(HINTS)

    lines.append("")
    lines.append(SEPARATOR)
    return lines


def report(
    catalog: Sequence[str],
    selection: Sequence[str],
    env: RawEnvironment,
    console: Console | None = None,
) -> None:
    console = console or Console(markup=False, emoji=False, highlight=False, soft_wrap=True)
    for line in render_report(catalog, selection, env):
        console.print(line)
