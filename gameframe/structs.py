"""Engine descriptors, vertex layout and the engine error type."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

import numpy as np

from gameframe.enums import WinMode

FLOAT_SIZE = np.dtype(np.float32).itemsize


class EngineError(Exception):
    """Raised when an engine operation fails."""


@dataclass(frozen=True)
class EngineDesc:
    """What the engine needs to start: window, mode, size and level count."""

    window: Any
    win_mode: WinMode
    win_size_x: int
    win_size_y: int
    num_levels: int


@dataclass(frozen=True)
class VertexPosTex:
    """A vertex holding a position and a texture coordinate."""

    position: tuple[float, float, float]
    texcoord: tuple[float, float]

    def __post_init__(self) -> None:
        position = tuple(float(c) for c in self.position)
        texcoord = tuple(float(c) for c in self.texcoord)
        if len(position) != 3:
            raise ValueError("position needs three components")
        if len(texcoord) != 2:
            raise ValueError("texcoord needs two components")
        object.__setattr__(self, "position", position)
        object.__setattr__(self, "texcoord", texcoord)

    @staticmethod
    def stride() -> int:
        """Size in bytes of one vertex in a vertex buffer."""
        return 5 * FLOAT_SIZE