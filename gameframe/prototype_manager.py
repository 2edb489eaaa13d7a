"""Registry of prototypes per level, from which objects and components are cloned."""

from __future__ import annotations

from typing import Any

from gameframe.component import Component
from gameframe.enums import Prototype
from gameframe.game_object import GameObject
from gameframe.structs import EngineError


class PrototypeManager:
    """Prototypes keyed by tag, kept separately for each level."""

    def __init__(self, num_levels):
        num_levels = int(num_levels)
        if num_levels < 0:
            raise ValueError(f"number of levels cannot be negative: {num_levels}")
        self.num_levels = num_levels
        self._prototypes: list[dict[str, Any]] = [{} for _ in range(num_levels)]

    def _valid(self, level_index) -> bool:
        return 0 <= int(level_index) < self.num_levels

    def tags(self, level_index) -> list[str]:
        """Tags registered for a level, in sorted order."""
        if not self._valid(level_index):
            return []
        return sorted(self._prototypes[int(level_index)])

    def add_prototype(self, level_index, tag, prototype) -> None:
        """Register ``prototype`` under ``tag`` for a level."""
        if not self._valid(level_index):
            raise EngineError(f"level index {level_index} out of range")
        if prototype is None:
            raise EngineError(f"no prototype given for {tag!r}")
        if self.find_prototype(level_index, tag) is not None:
            raise EngineError(f"prototype {tag!r} already registered")
        self._prototypes[int(level_index)][tag] = prototype

    def find_prototype(self, level_index, tag) -> Any:
        """The prototype under ``tag``, or None."""
        if not self._valid(level_index):
            return None
        return self._prototypes[int(level_index)].get(tag)

    def clone_prototype(self, kind, level_index, tag, arg=None) -> Any:
        """Clone the prototype under ``tag``, which must be of the given kind."""
        prototype = self.find_prototype(level_index, tag)
        if prototype is None:
            raise EngineError(f"no prototype {tag!r} at level {level_index}")
        expected = GameObject if Prototype(kind) is Prototype.GAMEOBJECT else Component
        if not isinstance(prototype, expected):
            raise EngineError(f"prototype {tag!r} is not a {expected.__name__}")
        clone = prototype.clone(arg)
        if clone is None:
            raise EngineError(f"cloning {tag!r} failed")
        return clone

    def clear(self, level_index) -> None:
        """Drop every prototype of a level; an out-of-range level is ignored."""
        if self._valid(level_index):
            self._prototypes[int(level_index)].clear()