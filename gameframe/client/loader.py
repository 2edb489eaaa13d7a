"""Background loading of the prototypes a level needs."""

from __future__ import annotations

import threading

from gameframe.client.background import BackGround
from gameframe.client.camera import Camera
from gameframe.client.defines import LevelId
from gameframe.client.terrain import Terrain
from gameframe.enums import TextureKind
from gameframe.texture import Texture
from gameframe.vibuffer import TerrainBuffer

TEXT_TEXTURES = "Loading textures."
TEXT_MODELS = "Loading models."
TEXT_SHADERS = "Loading shaders."
TEXT_OBJECTS = "Loading game objects."
TEXT_DONE = "Loading complete."

LOGO_TEXTURE_PATTERN = "../Bin/Resources/Textures/Default%d.jpg"
TERRAIN_TEXTURE_PATH = "../Bin/Resources/Textures/Terrain/Tile0.jpg"


class Loader:
    """Registers the prototypes of the next level on a worker thread."""

    def __init__(self, device, game_instance, keys, next_level):
        self.device = device
        self.game_instance = game_instance
        self.keys = keys
        self.next_level = LevelId(next_level)
        self.loading_text = ""
        self.error: BaseException | None = None
        self._finished = False
        self._lock = threading.Lock()
        self._thread: threading.Thread | None = None

    def _run(self) -> None:
        try:
            self.loading()
        except Exception as exc:
            self.error = exc

    def _start(self) -> None:
        self._thread = threading.Thread(target=self._run, name="loader", daemon=True)
        self._thread.start()

    def loading(self) -> None:
        """Load the prototypes of the next level; other levels load nothing."""
        with self._lock:
            if self.next_level is LevelId.LOGO:
                self._load_logo()
            elif self.next_level is LevelId.GAMEPLAY:
                self._load_gameplay()

    def _load_logo(self) -> None:
        gi, device = self.game_instance, self.device
        self.loading_text = TEXT_TEXTURES
        gi.add_prototype(
            LevelId.LOGO,
            "Prototype_Component_Texture_BackGround",
            Texture.create(device, gi, TextureKind.RECT, LOGO_TEXTURE_PATTERN, 2),
        )
        self.loading_text = TEXT_MODELS
        self.loading_text = TEXT_SHADERS
        self.loading_text = TEXT_OBJECTS
        gi.add_prototype(
            LevelId.LOGO, "Prototype_GameObject_BackGround", BackGround.create(device, gi, self.keys)
        )
        self.loading_text = TEXT_DONE
        self._finished = True

    def _load_gameplay(self) -> None:
        gi, device = self.game_instance, self.device
        self.loading_text = TEXT_TEXTURES
        gi.add_prototype(
            LevelId.GAMEPLAY,
            "Prototype_Component_Texture_Terrain",
            Texture.create(device, gi, TextureKind.RECT, TERRAIN_TEXTURE_PATH, 1),
        )
        self.loading_text = TEXT_MODELS
        gi.add_prototype(
            LevelId.GAMEPLAY,
            "Prototype_Component_VIBuffer_Terrain",
            TerrainBuffer.create(device, gi, 200, 200),
        )
        self.loading_text = TEXT_SHADERS
        self.loading_text = TEXT_OBJECTS
        gi.add_prototype(LevelId.GAMEPLAY, "Prototype_GameObject_Terrain", Terrain.create(device, gi))
        gi.add_prototype(
            LevelId.GAMEPLAY, "Prototype_GameObject_Camera", Camera.create(device, gi, self.keys)
        )
        self.loading_text = TEXT_DONE
        self._finished = True

    def is_finished(self) -> bool:
        return self._finished

    def show_loading_text(self) -> str:
        """Put the loading text in the window title and return it."""
        text = self.loading_text
        window = self.device.present_parameters.device_window
        if window is not None:
            window.title = text
        return text

    def join(self) -> None:
        """Wait for the worker; raise what made loading fail, if anything."""
        if self._thread is not None:
            self._thread.join()
        if self.error is not None:
            raise self.error

    @classmethod
    def create(cls, device, game_instance, keys, next_level) -> "Loader":
        loader = cls(device, game_instance, keys, next_level)
        loader._start()
        return loader