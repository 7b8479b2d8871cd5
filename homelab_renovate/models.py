"""Dataclasses shared across modules."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True, slots=True)
class SelectionContext:
    """Inputs to the repository selection, resolved once per run."""

    override: tuple[str, ...]
    select_all: bool
    branch: str


@dataclass(frozen=True, slots=True)
class RawEnvironment:
    """Environment values as the user set them, for display only."""

    branch: str | None
    override: str | None
    select_all: str | None


@dataclass(frozen=True, slots=True)
class HostRule:
    """Registry credentials handed to Renovate untouched."""

    match_host: str
    host_type: str
    username: str | None = None
    password: str | None = None

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {"matchHost": self.match_host, "hostType": self.host_type}
        if self.username is not None:
            data["username"] = self.username
        if self.password is not None:
            data["password"] = self.password
        return data
