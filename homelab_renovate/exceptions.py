"""Custom error hierarchy for homelab-renovate."""

from __future__ import annotations


class RenovateConfigError(RuntimeError):
    """Base error for the CLI."""


class ValidationError(RenovateConfigError):
    """Raised when a custom manager pattern does not compile."""

    def __init__(self, failures: list[tuple[str, str]]):
        self.failures = failures
        lines = [f"{len(failures)} invalid pattern(s):"]
        lines.extend(f"  {pattern}: {reason}" for pattern, reason in failures)
        super().__init__("\n".join(lines))


class ExportError(RenovateConfigError):
    """Raised when the generated config cannot be written."""


__all__ = [
    "RenovateConfigError",
    "ValidationError",
    "ExportError",
]
