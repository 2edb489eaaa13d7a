"""Texture component loading a numbered series of image files."""

from __future__ import annotations

import copy
import os
from dataclasses import dataclass
from typing import Any

import numpy as np
from PIL import Image

from gameframe.component import Component
from gameframe.enums import TextureKind
from gameframe.structs import EngineError


@dataclass(frozen=True, eq=False)
class TextureImage:
    """Pixels of one loaded texture file, as RGBA rows."""

    path: str
    kind: TextureKind
    pixels: np.ndarray


def _texture_path(pattern: str, index: int) -> str:
    if "%" not in pattern:
        return pattern
    try:
        return pattern % index
    except (TypeError, ValueError) as exc:
        raise EngineError(f"bad texture path pattern {pattern!r}") from exc


def _load(path: str, kind: TextureKind) -> TextureImage:
    try:
        with Image.open(path) as image:
            pixels = np.asarray(image.convert("RGBA"))
    except (OSError, ValueError) as exc:
        raise EngineError(f"cannot load texture {path!r}") from exc
    return TextureImage(path=path, kind=kind, pixels=pixels)


class Texture(Component):
    """A list of textures; one of them is bound to the device at a time."""

    def __init__(self, device, game_instance=None):
        super().__init__(device, game_instance)
        self.kind = TextureKind.RECT
        self.textures: list[TextureImage] = []

    def __len__(self) -> int:
        return len(self.textures)

    def initialize_prototype(self, kind, path_pattern, count) -> None:
        """Load ``count`` files, putting 0, 1, ... into ``%d`` of the pattern."""
        self.kind = TextureKind(kind)
        pattern = os.fspath(path_pattern)
        self.textures = [
            _load(_texture_path(pattern, index), self.kind) for index in range(count)
        ]

    def bind_texture(self, index=0) -> None:
        if not 0 <= index < len(self.textures):
            raise EngineError(f"texture index {index} out of range")
        self.device.set_texture(0, self.textures[index])

    @classmethod
    def create(cls, device, game_instance, kind, path_pattern, count) -> "Texture":
        texture = cls(device, game_instance)
        texture.initialize_prototype(kind, path_pattern, count)
        return texture

    def clone(self, arg: Any) -> "Texture":
        """Return a texture component sharing this prototype's images."""
        twin = copy.copy(self)
        twin.textures = list(self.textures)
        twin.initialize(arg)
        return twin