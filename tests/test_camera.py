import math
from types import SimpleNamespace

import numpy as np
import pytest

from gameframe.client.camera import Camera, CameraDesc
from gameframe.client.defines import KEY_A, KEY_D, KEY_S, KEY_W, WIN_SIZE_X, WIN_SIZE_Y, KeyState, LevelId
from gameframe.device import TransformKind
from gameframe.enums import RenderGroup, State, WinMode
from gameframe.game_instance import GameInstance
from gameframe.structs import EngineDesc, EngineError
from gameframe.transform import Transform, normalize, perspective_fov_lh

PROTO_TAG = "Prototype_GameObject_Camera"


def _desc():
    return CameraDesc(
        speed_per_sec=10.0,
        rotation_per_sec=math.radians(90.0),
        eye=(0.0, 10.0, -10.0),
        at=(10.0, 0.0, 10.0),
        fovy=math.radians(60.0),
        near=0.1,
        far=1000.0,
    )


@pytest.fixture
def env():
    gi = GameInstance()
    device = gi.initialize_engine(
        EngineDesc(SimpleNamespace(title=""), WinMode.WIN, WIN_SIZE_X, WIN_SIZE_Y, len(LevelId))
    )
    gi.add_prototype(LevelId.STATIC, "Prototype_Component_Transform", Transform.create(device, gi))
    keys = KeyState()
    gi.add_prototype(LevelId.GAMEPLAY, PROTO_TAG, Camera.create(device, gi, keys))
    desc = _desc()
    cam = gi.add_game_object_to_layer(LevelId.GAMEPLAY, "Layer_Camera", LevelId.GAMEPLAY, PROTO_TAG, desc)
    return SimpleNamespace(gi=gi, device=device, keys=keys, cam=cam, desc=desc)


def test_initialize_places_camera(env):
    transform = env.cam.transform
    assert np.allclose(transform.get_state(State.POSITION), env.desc.eye)
    expected = normalize(np.subtract(env.desc.at, env.desc.eye))
    assert np.allclose(normalize(transform.get_state(State.LOOK)), expected)


def test_initialize_copies_projection_and_speeds(env):
    assert env.cam.aspect == pytest.approx(WIN_SIZE_X / WIN_SIZE_Y)
    assert env.cam.fovy == env.desc.fovy
    assert env.cam.near == env.desc.near
    assert env.cam.far == env.desc.far
    assert env.cam.transform.speed_per_sec == env.desc.speed_per_sec


def test_initialize_without_desc_fails(env):
    with pytest.raises(EngineError):
        env.gi.add_game_object_to_layer(LevelId.GAMEPLAY, "Layer_Camera", LevelId.GAMEPLAY, PROTO_TAG)


def test_view_is_inverse_of_world(env):
    env.cam.priority_update(0.016)
    view = env.device.transforms[TransformKind.VIEW]
    assert np.allclose(view @ env.cam.transform.world_matrix, np.identity(4))


def test_projection_set(env):
    env.cam.priority_update(0.016)
    expected = perspective_fov_lh(env.desc.fovy, WIN_SIZE_X / WIN_SIZE_Y, env.desc.near, env.desc.far)
    assert np.allclose(env.device.transforms[TransformKind.PROJECTION], expected)
    assert np.allclose(env.cam.proj_matrix, expected)


def test_w_moves_towards_target(env):
    before = np.linalg.norm(np.subtract(env.desc.at, env.desc.eye))
    env.keys.press(KEY_W)
    env.cam.priority_update(0.5)
    after = np.linalg.norm(np.subtract(env.desc.at, env.cam.transform.get_state(State.POSITION)))
    assert after < before


def test_w_then_s_returns(env):
    env.keys.press(KEY_W)
    env.cam.priority_update(0.2)
    env.keys.release(KEY_W)
    env.keys.press(KEY_S)
    env.cam.priority_update(0.2)
    assert np.allclose(env.cam.transform.get_state(State.POSITION), env.desc.eye)


def test_d_then_a_returns(env):
    env.keys.press(KEY_D)
    env.cam.priority_update(0.2)
    moved = env.cam.transform.get_state(State.POSITION)
    env.keys.release(KEY_D)
    env.keys.press(KEY_A)
    env.cam.priority_update(0.2)
    assert not np.allclose(moved, env.desc.eye)
    assert np.allclose(env.cam.transform.get_state(State.POSITION), env.desc.eye)


def test_other_phases_do_nothing(env):
    env.cam.update(0.1)
    env.cam.late_update(0.1)
    env.cam.render()
    assert env.gi.renderer.render_objects[RenderGroup.PRIORITY] == []
    assert env.device.draw_calls == []