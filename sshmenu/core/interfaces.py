"""Protocol definitions for sshmenu collaborators."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from typing import Protocol, TypeAlias

__all__ = [
    "EndOfInput",
    "Failed",
    "Interrupted",
    "Selected",
    "SelectionResult",
    "Selector",
]


@dataclass(frozen=True, slots=True)
class Selected:
    """The user picked the item at ``index``."""

    index: int


@dataclass(frozen=True, slots=True)
class Interrupted:
    """The user pressed Ctrl-C."""


@dataclass(frozen=True, slots=True)
class EndOfInput:
    """Standard input was closed while waiting for a choice."""


@dataclass(frozen=True, slots=True)
class Failed:
    """The widget itself broke down."""

    reason: str


SelectionResult: TypeAlias = Selected | Interrupted | EndOfInput | Failed


class Selector(Protocol):
    """Protocol for interactive single-choice list widgets."""

    def select(self, label: str, items: Sequence[str]) -> SelectionResult:
        """Present ``items`` under ``label`` and report the outcome."""
