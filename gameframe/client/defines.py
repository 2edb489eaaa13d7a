"""Client-wide settings: window size, level ids, key names and keyboard state."""

from __future__ import annotations

from enum import IntEnum
from typing import Hashable, Iterable

WIN_SIZE_X = 1280
WIN_SIZE_Y = 720

KEY_UP = "UP"
KEY_DOWN = "DOWN"
KEY_LEFT = "LEFT"
KEY_RIGHT = "RIGHT"
KEY_SPACE = "SPACE"
KEY_RETURN = "RETURN"
KEY_W = "W"
KEY_A = "A"
KEY_S = "S"
KEY_D = "D"

RS_CULLMODE = "CULLMODE"
CULL_NONE = "NONE"
RS_FILLMODE = "FILLMODE"
FILL_WIREFRAME = "WIREFRAME"
RS_LIGHTING = "LIGHTING"


class LevelId(IntEnum):
    """Levels of the client; STATIC holds what every level shares."""

    STATIC = 0
    LOADING = 1
    LOGO = 2
    GAMEPLAY = 3


class KeyState:
    """The set of keys currently held down."""

    def __init__(self, pressed: Iterable[Hashable] = ()):
        self._down = set(pressed)

    def __contains__(self, key) -> bool:
        return key in self._down

    def press(self, key) -> None:
        self._down.add(key)

    def release(self, key) -> None:
        self._down.discard(key)

    def is_down(self, key) -> bool:
        return key in self._down