"""Free camera moved with W, A, S and D."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

import numpy as np

from gameframe.client.defines import (
    KEY_A,
    KEY_D,
    KEY_S,
    KEY_W,
    WIN_SIZE_X,
    WIN_SIZE_Y,
    KeyState,
    LevelId,
)
from gameframe.device import TransformKind
from gameframe.enums import State
from gameframe.game_object import GameObject
from gameframe.structs import EngineError
from gameframe.transform import TransformDesc, perspective_fov_lh


@dataclass
class CameraDesc(TransformDesc):
    """Where the camera stands and looks, and its projection."""

    eye: tuple = (0.0, 0.0, 0.0)
    at: tuple = (0.0, 0.0, 1.0)
    fovy: float = 0.0
    near: float = 0.0
    far: float = 0.0


class Camera(GameObject):
    """Sets the view and projection transforms of the device every frame."""

    def __init__(self, device, game_instance=None, keys=None):
        super().__init__(device, game_instance)
        self.keys = keys if keys is not None else KeyState()
        self.transform = None
        self.proj_matrix = np.zeros((4, 4))
        self.fovy = 0.0
        self.aspect = 0.0
        self.near = 0.0
        self.far = 0.0

    def initialize_prototype(self) -> None:
        super().initialize_prototype()

    def initialize(self, arg: Any) -> None:
        if arg is None:
            raise EngineError("a camera needs a camera description")
        self.transform = self.add_component(
            LevelId.STATIC, "Prototype_Component_Transform", "Com_Transform", arg
        )
        self.transform.set_state(State.POSITION, arg.eye)
        self.transform.look_at(arg.at)
        self.fovy = arg.fovy
        self.aspect = WIN_SIZE_X / WIN_SIZE_Y
        self.near = arg.near
        self.far = arg.far

    def priority_update(self, time_delta) -> None:
        if self.keys.is_down(KEY_W):
            self.transform.go_straight(time_delta)
        if self.keys.is_down(KEY_S):
            self.transform.go_backward(time_delta)
        if self.keys.is_down(KEY_A):
            self.transform.go_left(time_delta)
        if self.keys.is_down(KEY_D):
            self.transform.go_right(time_delta)

        self.device.set_transform(TransformKind.VIEW, self.transform.world_matrix_inverse())
        self.proj_matrix = perspective_fov_lh(self.fovy, self.aspect, self.near, self.far)
        self.device.set_transform(TransformKind.PROJECTION, self.proj_matrix)

    def update(self, time_delta) -> None:
        pass

    def late_update(self, time_delta) -> None:
        pass

    def render(self) -> None:
        pass

    @classmethod
    def create(cls, device, game_instance, keys) -> "Camera":
        camera = cls(device, game_instance, keys)
        camera.initialize_prototype()
        return camera

    def clone(self, arg: Any) -> "Camera":
        return super().clone(arg)