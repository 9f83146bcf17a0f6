"""Brew result: the quality score handed back to the game."""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping


@dataclass(frozen=True)
class BrewResult:
    """Outcome of one evaluate() call.

    ``breakdown`` maps each applied rule's display name to its rounded score,
    in rule order. It is read-only, like the rest of the result.
    """

    quality: int
    feedback: str
    breakdown: Mapping[str, int] = field(default_factory=lambda: MappingProxyType({}))
    applied_rules: tuple[str, ...] = field(default_factory=tuple)
