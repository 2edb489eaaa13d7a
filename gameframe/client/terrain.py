"""Terrain: a textured grid drawn in wireframe."""

from __future__ import annotations

import math
from typing import Any

from gameframe.client.defines import FILL_WIREFRAME, RS_FILLMODE, LevelId
from gameframe.enums import RenderGroup
from gameframe.game_object import GameObject
from gameframe.transform import TransformDesc


class Terrain(GameObject):
    """A grid drawn in the non-blend group."""

    def __init__(self, device, game_instance=None):
        super().__init__(device, game_instance)
        self.vibuffer = None
        self.texture = None
        self.transform = None

    def initialize_prototype(self) -> None:
        super().initialize_prototype()

    def initialize(self, arg: Any) -> None:
        self._ready_components()

    def priority_update(self, time_delta) -> None:
        pass

    def update(self, time_delta) -> None:
        pass

    def late_update(self, time_delta) -> None:
        self.game_instance.add_render_group(RenderGroup.NONBLEND, self)

    def render(self) -> None:
        self.device.set_render_state(RS_FILLMODE, FILL_WIREFRAME)
        self.transform.bind_matrix()
        self.texture.bind_texture(0)
        self.vibuffer.bind_buffers()
        self.vibuffer.render()

    def _ready_components(self) -> None:
        self.vibuffer = self.add_component(
            LevelId.GAMEPLAY, "Prototype_Component_VIBuffer_Terrain", "Com_VIBuffer"
        )
        self.texture = self.add_component(
            LevelId.GAMEPLAY, "Prototype_Component_Texture_Terrain", "Com_Texture"
        )
        desc = TransformDesc(speed_per_sec=5.0, rotation_per_sec=math.radians(90.0))
        self.transform = self.add_component(
            LevelId.STATIC, "Prototype_Component_Transform", "Com_Transform", desc
        )

    @classmethod
    def create(cls, device, game_instance) -> "Terrain":
        terrain = cls(device, game_instance)
        terrain.initialize_prototype()
        return terrain

    def clone(self, arg: Any) -> "Terrain":
        return super().clone(arg)