"""Levels and the manager that switches between them."""

from __future__ import annotations

from typing import Any

from gameframe.structs import EngineError


class Level:
    """One stage of the game: builds its objects and updates and renders itself."""

    def __init__(self, device, game_instance=None):
        self.device = device
        self.game_instance = game_instance

    def initialize(self) -> None:
        """Set the level up."""

    def update(self, time_delta) -> None:
        pass

    def render(self) -> None:
        pass


class LevelManager:
    """Holds the current level and clears the old level's resources on a switch."""

    def __init__(self, game_instance):
        self.game_instance = game_instance
        self.current_level: Level | None = None
        self.current_level_id: Any = 0

    def open_level(self, level_id, new_level) -> None:
        """Replace the current level, clearing the resources of the previous one."""
        if self.current_level is not None:
            self.game_instance.clear_resources(self.current_level_id)
        self.current_level = new_level
        self.current_level_id = level_id

    def update(self, time_delta) -> None:
        if self.current_level is not None:
            self.current_level.update(time_delta)

    def render(self) -> None:
        if self.current_level is None:
            raise EngineError("no level open")
        self.current_level.render()