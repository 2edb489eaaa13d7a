"""The client's levels: logo, loading screen and gameplay."""

from __future__ import annotations

import math

from gameframe.client.camera import CameraDesc
from gameframe.client.defines import KEY_RETURN, KEY_SPACE, KeyState, LevelId
from gameframe.client.loader import Loader
from gameframe.level import Level

LOGO_TITLE = "This is the logo level."
GAMEPLAY_TITLE = "This is the gameplay level."


def _set_title(device, text: str) -> str:
    window = device.present_parameters.device_window
    if window is not None:
        window.title = text
    return text


class LogoLevel(Level):
    """Shows the background; RETURN starts loading the gameplay level."""

    def __init__(self, device, game_instance=None, keys=None):
        super().__init__(device, game_instance)
        self.keys = keys if keys is not None else KeyState()

    def initialize(self) -> None:
        self.game_instance.add_game_object_to_layer(
            LevelId.LOGO, "Layer_BackGround", LevelId.LOGO, "Prototype_GameObject_BackGround"
        )

    def update(self, time_delta) -> None:
        if self.keys.is_down(KEY_RETURN):
            loading = LoadingLevel.create(
                self.device, self.game_instance, self.keys, LevelId.GAMEPLAY
            )
            self.game_instance.open_level(LevelId.LOADING, loading)

    def render(self) -> str:
        return _set_title(self.device, LOGO_TITLE)

    @classmethod
    def create(cls, device, game_instance, keys) -> "LogoLevel":
        level = cls(device, game_instance, keys)
        level.initialize()
        return level


class LoadingLevel(Level):
    """Loads the next level in the background; SPACE opens it once loaded."""

    def __init__(self, device, game_instance=None, keys=None):
        super().__init__(device, game_instance)
        self.keys = keys if keys is not None else KeyState()
        self.next_level: LevelId | None = None
        self.loader: Loader | None = None

    def initialize(self, next_level) -> None:
        self.next_level = LevelId(next_level)
        self.loader = Loader.create(self.device, self.game_instance, self.keys, self.next_level)

    def update(self, time_delta) -> None:
        if not (self.loader.is_finished() and self.keys.is_down(KEY_SPACE)):
            return
        if self.next_level is LevelId.LOGO:
            new_level = LogoLevel.create(self.device, self.game_instance, self.keys)
        elif self.next_level is LevelId.GAMEPLAY:
            new_level = GamePlayLevel.create(self.device, self.game_instance, self.keys)
        else:
            return
        self.game_instance.open_level(self.next_level, new_level)

    def render(self) -> str:
        return self.loader.show_loading_text()

    @classmethod
    def create(cls, device, game_instance, keys, next_level) -> "LoadingLevel":
        level = cls(device, game_instance, keys)
        level.initialize(next_level)
        return level


class GamePlayLevel(Level):
    """Places the camera and the terrain."""

    def __init__(self, device, game_instance=None, keys=None):
        super().__init__(device, game_instance)
        self.keys = keys if keys is not None else KeyState()

    def initialize(self) -> None:
        self._ready_layer_camera("Layer_Camera")
        self._ready_layer_background("Layer_BackGround")

    def update(self, time_delta) -> None:
        pass

    def render(self) -> str:
        return _set_title(self.device, GAMEPLAY_TITLE)

    def _ready_layer_camera(self, layer_tag: str) -> None:
        desc = CameraDesc(
            speed_per_sec=10.0,
            rotation_per_sec=math.radians(90.0),
            eye=(0.0, 10.0, -10.0),
            at=(10.0, 0.0, 10.0),
            fovy=math.radians(60.0),
            near=0.1,
            far=1000.0,
        )
        self.game_instance.add_game_object_to_layer(
            LevelId.GAMEPLAY, layer_tag, LevelId.GAMEPLAY, "Prototype_GameObject_Camera", desc
        )

    def _ready_layer_background(self, layer_tag: str) -> None:
        self.game_instance.add_game_object_to_layer(
            LevelId.GAMEPLAY, layer_tag, LevelId.GAMEPLAY, "Prototype_GameObject_Terrain"
        )

    @classmethod
    def create(cls, device, game_instance, keys) -> "GamePlayLevel":
        level = cls(device, game_instance, keys)
        level.initialize()
        return level