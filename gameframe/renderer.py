"""Draws the objects queued for a frame, group by group."""

from __future__ import annotations

from gameframe.enums import RenderGroup
from gameframe.game_object import GameObject
from gameframe.structs import EngineError


class Renderer:
    """Per-frame render queues, drawn in render-group order and then emptied."""

    def __init__(self, device):
        self.device = device
        self.render_objects: dict[RenderGroup, list[GameObject]] = {
            group: [] for group in RenderGroup
        }

    def add_render_group(self, group, render_object) -> None:
        if render_object is None:
            raise EngineError("nothing to render")
        self.render_objects[RenderGroup(group)].append(render_object)

    def draw(self) -> None:
        """Render every queued object; one object failing does not stop the rest."""
        for group in RenderGroup:
            queue = self.render_objects[group]
            self.render_objects[group] = []
            for render_object in queue:
                try:
                    render_object.render()
                except EngineError:
                    continue