"""A software graphics device that records the state and draws it receives."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any

import numpy as np

from gameframe.enums import WinMode
from gameframe.structs import EngineError


class TransformKind(Enum):
    """Transform slots of the device."""

    WORLD = 0
    VIEW = 1
    PROJECTION = 2


@dataclass(frozen=True)
class PresentParameters:
    """How the back buffer is set up and presented."""

    back_buffer_width: int
    back_buffer_height: int
    device_window: Any
    windowed: bool
    back_buffer_format: str = "A8R8G8B8"
    back_buffer_count: int = 1
    multi_sample_type: str = "NONE"
    multi_sample_quality: int = 0
    swap_effect: str = "DISCARD"
    enable_auto_depth_stencil: bool = True
    auto_depth_stencil_format: str = "D24S8"
    full_screen_refresh_rate: int = 0
    presentation_interval: str = "IMMEDIATE"


@dataclass(frozen=True)
class DrawCall:
    """One indexed draw with the state bound when it was issued."""

    primitive_type: Any
    num_vertices: int
    num_primitives: int
    fvf: int
    stride: int
    vertices: Any
    indices: Any
    texture: Any
    world: np.ndarray = field(repr=False)


def make_present_parameters(window, mode, width, height) -> PresentParameters:
    """Build the present parameters for a window of the given size."""
    if width <= 0 or height <= 0:
        raise EngineError(f"invalid back buffer size {width}x{height}")
    return PresentParameters(
        back_buffer_width=int(width),
        back_buffer_height=int(height),
        device_window=window,
        windowed=WinMode(mode) is WinMode.WIN,
    )


class GraphicDevice:
    """Holds transforms, render states, bound resources and recorded draws."""

    def __init__(self, window, mode, width, height):
        self.present_parameters = make_present_parameters(window, mode, width, height)
        self.transforms: dict[TransformKind, np.ndarray] = {
            kind: np.identity(4) for kind in TransformKind
        }
        self.render_states: dict[Any, Any] = {}
        self.textures: dict[int, Any] = {}
        self.vertices: Any = None
        self.stride = 0
        self.indices: Any = None
        self.fvf = 0
        self.clear_color: Any = None
        self.draw_calls: list[DrawCall] = []
        self.frames_presented = 0
        self.in_scene = False

    def render_begin(self, color) -> None:
        """Clear the target with a colour and begin a scene."""
        if self.in_scene:
            raise EngineError("scene already begun")
        self.clear_color = tuple(color)
        self.draw_calls = []
        self.in_scene = True

    def render_end(self) -> None:
        """End the scene and present it."""
        if not self.in_scene:
            raise EngineError("no scene to end")
        self.in_scene = False
        self.frames_presented += 1

    def set_transform(self, kind, matrix) -> None:
        array = np.array(matrix, dtype=np.float64)
        if array.shape != (4, 4):
            raise ValueError("a transform must be a 4x4 matrix")
        self.transforms[TransformKind(kind)] = array

    def set_render_state(self, state, value) -> None:
        self.render_states[state] = value

    def set_texture(self, stage, texture) -> None:
        if texture is None:
            self.textures.pop(stage, None)
        else:
            self.textures[stage] = texture

    def set_stream_source(self, vertices, stride) -> None:
        self.vertices = vertices
        self.stride = stride

    def set_indices(self, indices) -> None:
        self.indices = indices

    def set_fvf(self, fvf) -> None:
        self.fvf = fvf

    def draw_indexed_primitive(self, primitive_type, num_vertices, num_primitives) -> DrawCall:
        """Record an indexed draw using the bound buffers."""
        if self.vertices is None or self.indices is None:
            raise EngineError("no vertex or index buffer bound")
        call = DrawCall(
            primitive_type=primitive_type,
            num_vertices=num_vertices,
            num_primitives=num_primitives,
            fvf=self.fvf,
            stride=self.stride,
            vertices=self.vertices,
            indices=self.indices,
            texture=self.textures.get(0),
            world=self.transforms[TransformKind.WORLD].copy(),
        )
        self.draw_calls.append(call)
        return call