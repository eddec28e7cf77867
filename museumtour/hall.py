"""Museum halls."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Hall:
    """A numbered, named hall of a museum."""

    number: int
    name: str

    def describe(self) -> str:
        """Return a one-line description of the hall."""
        return f"Зал {self.number}: {self.name}"