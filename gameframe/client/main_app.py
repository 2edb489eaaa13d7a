"""The application: starts the engine and runs one frame at a time."""

from __future__ import annotations

from types import SimpleNamespace

from gameframe.client.defines import RS_LIGHTING, WIN_SIZE_X, WIN_SIZE_Y, KeyState, LevelId
from gameframe.client.levels import LoadingLevel
from gameframe.enums import WinMode
from gameframe.game_instance import GameInstance
from gameframe.structs import EngineDesc
from gameframe.transform import Transform
from gameframe.vibuffer import RectBuffer

CLEAR_COLOR = (0.0, 0.0, 1.0, 1.0)


class MainApp:
    """Owns the game instance and drives its update and render."""

    def __init__(self, keys=None, window=None):
        self.keys = keys if keys is not None else KeyState()
        self.window = window if window is not None else SimpleNamespace(title="")
        self.game_instance = GameInstance()
        self.device = None

    def initialize(self) -> None:
        desc = EngineDesc(
            window=self.window,
            win_mode=WinMode.WIN,
            win_size_x=WIN_SIZE_X,
            win_size_y=WIN_SIZE_Y,
            num_levels=len(LevelId),
        )
        self.device = self.game_instance.initialize_engine(desc)
        self.device.set_render_state(RS_LIGHTING, False)
        self._ready_prototype_for_static()
        self._start_level(LevelId.LOGO)

    def update(self, time_delta) -> None:
        self.game_instance.update_engine(time_delta)

    def render(self) -> None:
        """Clear, draw the frame and present it."""
        self.game_instance.render_begin(CLEAR_COLOR)
        try:
            self.game_instance.draw()
        finally:
            self.game_instance.render_end()

    def close(self) -> None:
        self.game_instance.release_engine()

    def _ready_prototype_for_static(self) -> None:
        gi, device = self.game_instance, self.device
        gi.add_prototype(
            LevelId.STATIC, "Prototype_Component_VIBuffer_Rect", RectBuffer.create(device, gi)
        )
        gi.add_prototype(
            LevelId.STATIC, "Prototype_Component_Transform", Transform.create(device, gi)
        )

    def _start_level(self, start_level: LevelId) -> None:
        loading = LoadingLevel.create(self.device, self.game_instance, self.keys, start_level)
        self.game_instance.open_level(LevelId.LOADING, loading)

    @classmethod
    def create(cls, keys) -> "MainApp":
        app = cls(keys)
        app.initialize()
        return app