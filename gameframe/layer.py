"""A named group of game objects updated together."""

from __future__ import annotations

from typing import Iterator

from gameframe.game_object import GameObject


class Layer:
    """Game objects in the order they were added."""

    def __init__(self):
        self.game_objects: list[GameObject] = []

    def __iter__(self) -> Iterator[GameObject]:
        return iter(self.game_objects)

    def __len__(self) -> int:
        return len(self.game_objects)

    def add_game_object(self, game_object) -> None:
        self.game_objects.append(game_object)

    def _live(self) -> Iterator[GameObject]:
        return (obj for obj in self.game_objects if obj is not None)

    def priority_update(self, time_delta) -> None:
        for obj in self._live():
            obj.priority_update(time_delta)

    def update(self, time_delta) -> None:
        for obj in self._live():
            obj.update(time_delta)

    def late_update(self, time_delta) -> None:
        for obj in self._live():
            obj.late_update(time_delta)