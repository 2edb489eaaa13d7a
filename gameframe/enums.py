"""Enumerations shared by the engine."""

from enum import Enum, IntEnum


class State(IntEnum):
    """Rows of a world matrix: the three axes and the position."""

    RIGHT = 0
    UP = 1
    LOOK = 2
    POSITION = 3


class Prototype(Enum):
    """Kind of prototype held by the prototype manager."""

    GAMEOBJECT = 0
    COMPONENT = 1


class RenderGroup(IntEnum):
    """Render groups, in the order the renderer draws them."""

    PRIORITY = 0
    NONBLEND = 1
    BLEND = 2
    UI = 3


class WinMode(IntEnum):
    """Full-screen or windowed presentation."""

    FULL = 0
    WIN = 1


class MouseKeyState(IntEnum):
    """Mouse buttons."""

    LB = 0
    RB = 1
    MB = 2


class MouseMoveState(IntEnum):
    """Mouse movement axes."""

    X = 0
    Y = 1
    Z = 2


class TextureKind(Enum):
    """Kind of texture a texture component loads."""

    RECT = 0
    CUBE = 1