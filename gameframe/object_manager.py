"""Layers of live game objects, kept separately for each level."""

from __future__ import annotations

from typing import Any, Iterator

from gameframe.enums import Prototype
from gameframe.game_object import GameObject
from gameframe.layer import Layer
from gameframe.structs import EngineError


class ObjectManager:
    """Game objects cloned from prototypes, grouped into named layers per level."""

    def __init__(self, game_instance, num_levels):
        num_levels = int(num_levels)
        if num_levels < 0:
            raise ValueError(f"number of levels cannot be negative: {num_levels}")
        self.game_instance = game_instance
        self.num_levels = num_levels
        self._layers: list[dict[str, Layer]] = [{} for _ in range(num_levels)]

    def _valid(self, level_index) -> bool:
        return 0 <= int(level_index) < self.num_levels

    def find_layer(self, level_index, tag) -> Layer | None:
        if not self._valid(level_index):
            return None
        return self._layers[int(level_index)].get(tag)

    def add_game_object_to_layer(
        self, layer_level, layer_tag, prototype_level, prototype_tag, arg=None
    ) -> GameObject:
        """Clone a game object prototype into a layer, creating the layer if needed."""
        if not self._valid(layer_level):
            raise EngineError(f"level index {layer_level} out of range")
        game_object = self.game_instance.clone_prototype(
            Prototype.GAMEOBJECT, prototype_level, prototype_tag, arg
        )
        if not isinstance(game_object, GameObject):
            raise EngineError(f"no game object prototype {prototype_tag!r}")
        layer = self.find_layer(layer_level, layer_tag)
        if layer is None:
            layer = self._layers[int(layer_level)][layer_tag] = Layer()
        layer.add_game_object(game_object)
        return game_object

    def _all_layers(self) -> Iterator[Layer]:
        for layers in self._layers:
            for _, layer in sorted(layers.items()):
                yield layer

    def priority_update(self, time_delta) -> None:
        for layer in self._all_layers():
            layer.priority_update(time_delta)

    def update(self, time_delta) -> None:
        for layer in self._all_layers():
            layer.update(time_delta)

    def late_update(self, time_delta) -> None:
        for layer in self._all_layers():
            layer.late_update(time_delta)

    def clear(self, level_index) -> None:
        """Drop every layer of a level; an out-of-range level is ignored."""
        if self._valid(level_index):
            self._layers[int(level_index)].clear()