"""Facade owning the device and the engine's managers."""

from __future__ import annotations

from typing import Any

from gameframe.device import GraphicDevice
from gameframe.level import LevelManager
from gameframe.object_manager import ObjectManager
from gameframe.prototype_manager import PrototypeManager
from gameframe.renderer import Renderer
from gameframe.structs import EngineDesc, EngineError


class GameInstance:
    """Entry point of the engine: starts it, runs a frame and reaches every manager."""

    def __init__(self):
        self.graphic_device: GraphicDevice | None = None
        self.level_manager: LevelManager | None = None
        self.prototype_manager: PrototypeManager | None = None
        self.object_manager: ObjectManager | None = None
        self.renderer: Renderer | None = None

    @staticmethod
    def _require(manager: Any, what: str) -> Any:
        if manager is None:
            raise EngineError(f"engine not initialised: no {what}")
        return manager

    def initialize_engine(self, desc: EngineDesc) -> GraphicDevice:
        """Create the device and the managers; return the device."""
        device = GraphicDevice(desc.window, desc.win_mode, desc.win_size_x, desc.win_size_y)
        self.graphic_device = device
        self.level_manager = LevelManager(self)
        self.prototype_manager = PrototypeManager(desc.num_levels)
        self.object_manager = ObjectManager(self, desc.num_levels)
        self.renderer = Renderer(device)
        return device

    def update_engine(self, time_delta) -> None:
        """Run the three object phases, then update the current level."""
        objects = self._require(self.object_manager, "object manager")
        objects.priority_update(time_delta)
        objects.update(time_delta)
        objects.late_update(time_delta)
        self._require(self.level_manager, "level manager").update(time_delta)

    def clear_resources(self, level_id) -> None:
        """Drop the prototypes and objects belonging to a level."""
        self._require(self.prototype_manager, "prototype manager").clear(level_id)
        self._require(self.object_manager, "object manager").clear(level_id)

    def render_begin(self, color) -> None:
        if self.graphic_device is not None:
            self.graphic_device.render_begin(color)

    def draw(self) -> None:
        """Draw the queued objects, then render the current level."""
        level_manager = self._require(self.level_manager, "level manager")
        self._require(self.renderer, "renderer").draw()
        level_manager.render()

    def render_end(self) -> None:
        if self.graphic_device is not None:
            self.graphic_device.render_end()

    def open_level(self, level_id, new_level) -> None:
        self._require(self.level_manager, "level manager").open_level(level_id, new_level)

    def add_prototype(self, level_index, tag, prototype) -> None:
        self._require(self.prototype_manager, "prototype manager").add_prototype(
            level_index, tag, prototype
        )

    def clone_prototype(self, kind, level_index, tag, arg=None) -> Any:
        return self._require(self.prototype_manager, "prototype manager").clone_prototype(
            kind, level_index, tag, arg
        )

    def add_game_object_to_layer(
        self, layer_level, layer_tag, prototype_level, prototype_tag, arg=None
    ):
        return self._require(self.object_manager, "object manager").add_game_object_to_layer(
            layer_level, layer_tag, prototype_level, prototype_tag, arg
        )

    def add_render_group(self, group, render_object) -> None:
        self._require(self.renderer, "renderer").add_render_group(group, render_object)

    def release_engine(self) -> None:
        """Drop the device and every manager."""
        self.level_manager = None
        self.graphic_device = None
        self.prototype_manager = None
        self.object_manager = None
        self.renderer = None