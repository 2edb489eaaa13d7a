"""Logo background: a textured quad that can be moved with the arrow keys."""

from __future__ import annotations

import math
from typing import Any

from gameframe.client.defines import (
    CULL_NONE,
    KEY_DOWN,
    KEY_LEFT,
    KEY_RIGHT,
    KEY_UP,
    RS_CULLMODE,
    WIN_SIZE_X,
    WIN_SIZE_Y,
    KeyState,
    LevelId,
)
from gameframe.device import TransformKind
from gameframe.enums import RenderGroup
from gameframe.game_object import GameObject
from gameframe.transform import TransformDesc, look_at_lh, perspective_fov_lh

_UP_AXIS = (0.0, 1.0, 0.0)


class BackGround(GameObject):
    """A quad drawn in the priority group with a fixed camera."""

    def __init__(self, device, game_instance=None, keys=None):
        super().__init__(device, game_instance)
        self.keys = keys if keys is not None else KeyState()
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
        if self.keys.is_down(KEY_UP):
            self.transform.go_straight(time_delta)
        if self.keys.is_down(KEY_DOWN):
            self.transform.go_backward(time_delta)
        if self.keys.is_down(KEY_LEFT):
            self.transform.turn(_UP_AXIS, -time_delta)
        if self.keys.is_down(KEY_RIGHT):
            self.transform.turn(_UP_AXIS, time_delta)

    def late_update(self, time_delta) -> None:
        self.game_instance.add_render_group(RenderGroup.PRIORITY, self)

    def render(self) -> None:
        self.device.set_render_state(RS_CULLMODE, CULL_NONE)
        self.transform.bind_matrix()
        self.device.set_transform(
            TransformKind.VIEW, look_at_lh((0.0, 0.0, -5.0), (0.0, 0.0, 0.0), _UP_AXIS)
        )
        self.device.set_transform(
            TransformKind.PROJECTION,
            perspective_fov_lh(math.radians(60.0), WIN_SIZE_X / WIN_SIZE_Y, 0.1, 1000.0),
        )
        self.texture.bind_texture(0)
        self.vibuffer.bind_buffers()
        self.vibuffer.render()

    def _ready_components(self) -> None:
        self.vibuffer = self.add_component(
            LevelId.STATIC, "Prototype_Component_VIBuffer_Rect", "Com_VIBuffer"
        )
        self.texture = self.add_component(
            LevelId.LOGO, "Prototype_Component_Texture_BackGround", "Com_Texture"
        )
        desc = TransformDesc(speed_per_sec=5.0, rotation_per_sec=math.radians(90.0))
        self.transform = self.add_component(
            LevelId.STATIC, "Prototype_Component_Transform", "Com_Transform", desc
        )

    @classmethod
    def create(cls, device, game_instance, keys) -> "BackGround":
        background = cls(device, game_instance, keys)
        background.initialize_prototype()
        return background

    def clone(self, arg: Any) -> "BackGround":
        return super().clone(arg)