"""World transform component and the matrix helpers it relies on."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any

import numpy as np

from gameframe.component import Component
from gameframe.device import TransformKind
from gameframe.enums import State
from gameframe.structs import EngineError


def _vec3(vector) -> np.ndarray:
    return np.asarray(vector, dtype=np.float64).reshape(3)


def normalize(vector) -> np.ndarray:
    """Unit vector in the direction of ``vector``; zero stays zero."""
    v = _vec3(vector)
    length = float(np.linalg.norm(v))
    if length == 0.0:
        return np.zeros(3)
    return v / length


def rotation_axis(axis, radian) -> np.ndarray:
    """Row-vector 4x4 matrix rotating by ``radian`` about ``axis``."""
    x, y, z = normalize(axis)
    c, s = math.cos(radian), math.sin(radian)
    t = 1.0 - c
    return np.array(
        [
            [c + t * x * x, t * x * y + s * z, t * x * z - s * y, 0.0],
            [t * x * y - s * z, c + t * y * y, t * y * z + s * x, 0.0],
            [t * x * z + s * y, t * y * z - s * x, c + t * z * z, 0.0],
            [0.0, 0.0, 0.0, 1.0],
        ]
    )


def look_at_lh(eye, at, up) -> np.ndarray:
    """Left-handed view matrix looking from ``eye`` to ``at``."""
    eye = _vec3(eye)
    z_axis = normalize(_vec3(at) - eye)
    x_axis = normalize(np.cross(_vec3(up), z_axis))
    y_axis = np.cross(z_axis, x_axis)
    view = np.identity(4)
    view[:3, 0] = x_axis
    view[:3, 1] = y_axis
    view[:3, 2] = z_axis
    view[3, :3] = [-x_axis @ eye, -y_axis @ eye, -z_axis @ eye]
    return view


def perspective_fov_lh(fovy, aspect, near, far) -> np.ndarray:
    """Left-handed perspective projection mapping depth to [0, 1]."""
    y_scale = 1.0 / math.tan(fovy / 2.0)
    x_scale = y_scale / aspect
    depth = far / (far - near)
    return np.array(
        [
            [x_scale, 0.0, 0.0, 0.0],
            [0.0, y_scale, 0.0, 0.0],
            [0.0, 0.0, depth, 1.0],
            [0.0, 0.0, -near * depth, 0.0],
        ]
    )


@dataclass
class TransformDesc:
    """Movement and turning speeds given to a transform clone."""

    speed_per_sec: float = 0.0
    rotation_per_sec: float = 0.0


class Transform(Component):
    """World matrix of a game object, with movement and rotation helpers."""

    def __init__(self, device, game_instance=None):
        super().__init__(device, game_instance)
        self.world_matrix = np.zeros((4, 4))
        self.speed_per_sec = 0.0
        self.rotation_per_sec = 0.0

    def get_state(self, state) -> np.ndarray:
        return self.world_matrix[State(state), :3].copy()

    def set_state(self, state, vector) -> None:
        self.world_matrix[State(state), :3] = _vec3(vector)

    def get_scaled(self) -> np.ndarray:
        """Lengths of the right, up and look rows."""
        return np.linalg.norm(self.world_matrix[:3, :3], axis=1)

    def world_matrix_inverse(self) -> np.ndarray:
        try:
            return np.linalg.inv(self.world_matrix)
        except np.linalg.LinAlgError as exc:
            raise EngineError("world matrix is not invertible") from exc

    def initialize_prototype(self) -> None:
        self.world_matrix = np.identity(4)

    def initialize(self, arg: Any) -> None:
        if arg is None:
            return
        self.speed_per_sec = arg.speed_per_sec
        self.rotation_per_sec = arg.rotation_per_sec

    def _move_along(self, state: State, sign: float, time_delta: float) -> None:
        step = normalize(self.get_state(state)) * self.speed_per_sec * time_delta
        self.set_state(State.POSITION, self.get_state(State.POSITION) + sign * step)

    def go_straight(self, time_delta) -> None:
        self._move_along(State.LOOK, 1.0, time_delta)

    def go_backward(self, time_delta) -> None:
        self._move_along(State.LOOK, -1.0, time_delta)

    def go_right(self, time_delta) -> None:
        self._move_along(State.RIGHT, 1.0, time_delta)

    def go_left(self, time_delta) -> None:
        self._move_along(State.RIGHT, -1.0, time_delta)

    def look_at(self, target) -> None:
        """Turn the look axis towards ``target``, keeping the scale."""
        scaled = self.get_scaled()
        look = _vec3(target) - self.get_state(State.POSITION)
        right = np.cross(np.array([0.0, 1.0, 0.0]), look)
        up = np.cross(look, right)
        self.set_state(State.RIGHT, normalize(right) * scaled[0])
        self.set_state(State.UP, normalize(up) * scaled[1])
        self.set_state(State.LOOK, normalize(look) * scaled[2])

    def move_to(self, target, time_delta, limit_range) -> None:
        """Step towards ``target`` unless already closer than ``limit_range``."""
        position = self.get_state(State.POSITION)
        direction = _vec3(target) - position
        if np.linalg.norm(direction) >= limit_range:
            position = position + normalize(direction) * self.speed_per_sec * time_delta
            self.set_state(State.POSITION, position)

    def _rotate_axes(self, axes, matrix) -> None:
        rotation = matrix[:3, :3]
        for state, vector in zip((State.RIGHT, State.UP, State.LOOK), axes):
            self.set_state(state, vector @ rotation)

    def rotation(self, axis, radian) -> None:
        """Set the orientation to the identity axes rotated by ``radian``."""
        scaled = self.get_scaled()
        axes = np.identity(3) * scaled[:, np.newaxis]
        self._rotate_axes(axes, rotation_axis(axis, radian))

    def turn(self, axis, time_delta) -> None:
        """Rotate the current orientation at the turning speed."""
        axes = [self.get_state(s) for s in (State.RIGHT, State.UP, State.LOOK)]
        self._rotate_axes(axes, rotation_axis(axis, self.rotation_per_sec * time_delta))

    def scaling(self, scale_x, scale_y, scale_z) -> None:
        for state, scale in zip((State.RIGHT, State.UP, State.LOOK), (scale_x, scale_y, scale_z)):
            self.set_state(state, normalize(self.get_state(state)) * scale)

    def bind_matrix(self) -> None:
        self.device.set_transform(TransformKind.WORLD, self.world_matrix)

    @classmethod
    def create(cls, device, game_instance) -> "Transform":
        transform = cls(device, game_instance)
        transform.initialize_prototype()
        return transform

    def clone(self, arg: Any) -> "Transform":
        twin = type(self)(self.device, self.game_instance)
        twin.world_matrix = self.world_matrix.copy()
        twin.initialize(arg)
        return twin