"""Pick the repositories Renovate processes on this run.

Precedence, first match wins:

1. ``RENOVATE_REPO`` override (comma-separated list, taken verbatim)
2. ``RENOVATE_ALL=true`` to force every repo
3. PR branches only test against this repo itself
4. master/main: a shuffled subset, so a single run stays under the timeout
"""

from __future__ import annotations

import logging
import math
import random
from typing import Sequence

from .catalog import SELF_TEST_REPOSITORY
from .config import MIN_REPOS_PER_RUN, PRIMARY_BRANCHES
from .models import SelectionContext

logger = logging.getLogger(__name__)


def repos_per_run(total: int) -> int:
    """With 14 repos, process ~7 at a time (50%), never fewer than 5."""

    return max(MIN_REPOS_PER_RUN, math.ceil(total / 2))


def shuffle_repositories(repos: Sequence[str], rng: random.Random | None = None) -> list[str]:
    """Return a uniformly shuffled copy of ``repos``."""

    rng = rng or random.Random()
    shuffled = list(repos)
    rng.shuffle(shuffled)
    return shuffled


def select_repositories(
    catalog: Sequence[str],
    context: SelectionContext,
    *,
    rng: random.Random | None = None,
    self_test_repo: str = SELF_TEST_REPOSITORY,
) -> tuple[str, ...]:
    """Return the repositories this run processes, in processing order."""

    if context.override:
        logger.info("RENOVATE_REPO override: %s", ", ".join(context.override))
        return tuple(context.override)

    if context.select_all:
        logger.info("RENOVATE_ALL=true: processing all %d repos", len(catalog))
        return tuple(catalog)

    if context.branch not in PRIMARY_BRANCHES:
        logger.info('PR branch "%s": testing on %s only', context.branch, self_test_repo)
        return (self_test_repo,)

    selected = tuple(shuffle_repositories(catalog, rng)[: repos_per_run(len(catalog))])
    logger.info(
        "%s branch: processing %d/%d repos (shuffled)",
        context.branch,
        len(selected),
        len(catalog),
    )
    logger.info("Selected: %s", ", ".join(selected))
    return selected
