"""Run execution entities."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class LintOutcome:
    """Output contract for one fully successful run."""

    validator: str
    linted_files: tuple[str, ...]
