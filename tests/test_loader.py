import math
from types import SimpleNamespace

import pytest
from PIL import Image

from gameframe.client.background import BackGround
from gameframe.client.camera import Camera, CameraDesc
from gameframe.client.defines import WIN_SIZE_X, WIN_SIZE_Y, KeyState, LevelId
from gameframe.client.loader import Loader
from gameframe.client.terrain import Terrain
from gameframe.enums import WinMode
from gameframe.game_instance import GameInstance
from gameframe.structs import EngineDesc, EngineError
from gameframe.texture import Texture
from gameframe.transform import Transform
from gameframe.vibuffer import RectBuffer, TerrainBuffer


def _engine():
    window = SimpleNamespace(title="")
    gi = GameInstance()
    device = gi.initialize_engine(
        EngineDesc(window, WinMode.WIN, WIN_SIZE_X, WIN_SIZE_Y, len(LevelId))
    )
    gi.add_prototype(LevelId.STATIC, "Prototype_Component_VIBuffer_Rect", RectBuffer.create(device, gi))
    gi.add_prototype(LevelId.STATIC, "Prototype_Component_Transform", Transform.create(device, gi))
    return SimpleNamespace(window=window, gi=gi, device=device, keys=KeyState())


@pytest.fixture
def resources(tmp_path, monkeypatch):
    textures = tmp_path / "Bin" / "Resources" / "Textures"
    (textures / "Terrain").mkdir(parents=True)
    for i in range(2):
        Image.new("RGB", (4, 4), (i * 100, 0, 0)).save(textures / f"Default{i}.jpg")
    Image.new("RGB", (4, 4), (0, 100, 0)).save(textures / "Terrain" / "Tile0.jpg")
    run = tmp_path / "run"
    run.mkdir()
    monkeypatch.chdir(run)
    return _engine()


@pytest.fixture
def empty(tmp_path, monkeypatch):
    run = tmp_path / "run"
    run.mkdir()
    monkeypatch.chdir(run)
    return _engine()


def test_logo_loading_registers_prototypes(resources):
    loader = Loader.create(resources.device, resources.gi, resources.keys, LevelId.LOGO)
    loader.join()
    pm = resources.gi.prototype_manager
    assert loader.is_finished()
    assert isinstance(pm.find_prototype(LevelId.LOGO, "Prototype_GameObject_BackGround"), BackGround)
    texture = pm.find_prototype(LevelId.LOGO, "Prototype_Component_Texture_BackGround")
    assert isinstance(texture, Texture)
    assert len(texture) == 2


def test_show_loading_text_sets_window_title(resources):
    loader = Loader.create(resources.device, resources.gi, resources.keys, LevelId.LOGO)
    loader.join()
    text = loader.show_loading_text()
    assert text == loader.loading_text
    assert resources.window.title == text


def test_gameplay_loading_registers_prototypes(resources):
    loader = Loader.create(resources.device, resources.gi, resources.keys, LevelId.GAMEPLAY)
    loader.join()
    pm = resources.gi.prototype_manager
    assert loader.is_finished()
    assert isinstance(pm.find_prototype(LevelId.GAMEPLAY, "Prototype_GameObject_Terrain"), Terrain)
    assert isinstance(pm.find_prototype(LevelId.GAMEPLAY, "Prototype_GameObject_Camera"), Camera)
    buffer = pm.find_prototype(LevelId.GAMEPLAY, "Prototype_Component_VIBuffer_Terrain")
    assert isinstance(buffer, TerrainBuffer)
    assert buffer.num_vertices == 200 * 200


def test_loaded_camera_can_be_placed(resources):
    Loader.create(resources.device, resources.gi, resources.keys, LevelId.GAMEPLAY).join()
    desc = CameraDesc(
        speed_per_sec=10.0,
        rotation_per_sec=math.radians(90.0),
        eye=(0.0, 10.0, -10.0),
        at=(10.0, 0.0, 10.0),
        fovy=math.radians(60.0),
        near=0.1,
        far=1000.0,
    )
    cam = resources.gi.add_game_object_to_layer(
        LevelId.GAMEPLAY, "Layer_Camera", LevelId.GAMEPLAY, "Prototype_GameObject_Camera", desc
    )
    assert isinstance(cam, Camera)
    assert cam.keys is resources.keys


def test_missing_files_fail(empty):
    loader = Loader.create(empty.device, empty.gi, empty.keys, LevelId.LOGO)
    with pytest.raises(EngineError):
        loader.join()
    assert not loader.is_finished()


def test_loading_level_loads_nothing(resources):
    loader = Loader.create(resources.device, resources.gi, resources.keys, LevelId.LOADING)
    loader.join()
    assert not loader.is_finished()
    assert resources.gi.prototype_manager.tags(LevelId.LOGO) == []
    assert resources.gi.prototype_manager.tags(LevelId.GAMEPLAY) == []


def test_loading_twice_fails(resources):
    loader = Loader.create(resources.device, resources.gi, resources.keys, LevelId.LOGO)
    loader.join()
    with pytest.raises(EngineError):
        loader.loading()