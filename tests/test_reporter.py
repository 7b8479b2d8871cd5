"""Tests for the selection report."""

from __future__ import annotations

import io
import unittest

from rich.console import Console

from homelab_renovate.catalog import ALL_REPOSITORIES
from homelab_renovate.models import RawEnvironment
from homelab_renovate.reporter import render_report, report

UNSET = RawEnvironment(branch=None, override=None, select_all=None)


class RenderReportTests(unittest.TestCase):
    def test_subset_lists_selected_and_skipped(self) -> None:
        selection = ALL_REPOSITORIES[7:]

        lines = render_report(ALL_REPOSITORIES, selection, UNSET)

        self.assertIn("Selected 7 of 14 total repositories:", lines)
        numbered = [line for line in lines if line[:5].strip().rstrip(".").isdigit()]
        self.assertEqual(len(numbered), 7)
        self.assertEqual(numbered[0], f"   1. {selection[0]}")
        self.assertIn("Skipped this run (7 repos):", lines)
        skipped = [line for line in lines if line.startswith("      - ")]
        self.assertEqual(skipped, [f"      - {repo}" for repo in ALL_REPOSITORIES[:7]])
        self.assertIn("💡 Tip: Set RENOVATE_ALL=true to process all repos", lines)
        self.assertIn("💡 Tip: Set RENOVATE_REPO=owner/repo to target specific repos", lines)

    def test_unset_environment_is_labelled(self) -> None:
        lines = render_report(ALL_REPOSITORIES, ALL_REPOSITORIES, UNSET)

        self.assertIn("  BRANCH_NAME:    (not set)", lines)
        self.assertIn("  RENOVATE_REPO:  (not set)", lines)
        self.assertIn("  RENOVATE_ALL:   (not set)", lines)

    def test_full_selection_has_no_skipped_section(self) -> None:
        lines = render_report(ALL_REPOSITORIES, ALL_REPOSITORIES, UNSET)

        self.assertIn("Selected 14 of 14 total repositories:", lines)
        self.assertIn("  14. erauner12/homelab-renovate", lines)
        self.assertFalse(any(line.startswith("Skipped") for line in lines))
        self.assertTrue(lines[-1].startswith("═"))

    def test_override_outside_catalog(self) -> None:
        env = RawEnvironment(branch=None, override="erauner12/foo, erauner12/bar", select_all=None)

        lines = render_report(ALL_REPOSITORIES, ("erauner12/foo", "erauner12/bar"), env)

        self.assertIn("Selected 2 of 14 total repositories:", lines)
        self.assertIn("   1. erauner12/foo", lines)
        self.assertIn("   2. erauner12/bar", lines)
        self.assertIn("  RENOVATE_REPO:  erauner12/foo, erauner12/bar", lines)
        self.assertIn("Skipped this run (14 repos):", lines)


class ReportTests(unittest.TestCase):
    def _render(self, selection: tuple[str, ...]) -> str:
        buffer = io.StringIO()
        console = Console(file=buffer, markup=False, emoji=False, highlight=False, soft_wrap=True)
        report(ALL_REPOSITORIES, selection, UNSET, console=console)
        return buffer.getvalue()

    def test_output_is_plain_and_repeatable(self) -> None:
        selection = ALL_REPOSITORIES[:7]

        first = self._render(selection)
        second = self._render(selection)

        self.assertEqual(first, second)
        self.assertNotIn("\x1b[", first)
        self.assertEqual(first, "\n".join(render_report(ALL_REPOSITORIES, selection, UNSET)) + "\n")


if __name__ == "__main__":
    unittest.main()
