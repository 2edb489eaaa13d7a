import numpy as np
import pytest

from gameframe.device import GraphicDevice, TransformKind, make_present_parameters
from gameframe.enums import WinMode
from gameframe.structs import EngineError


@pytest.fixture
def device():
    return GraphicDevice("window", WinMode.WIN, 1280, 720)


def test_present_parameters_follow_mode_and_size():
    windowed = make_present_parameters("w", WinMode.WIN, 1280, 720)
    full = make_present_parameters("w", WinMode.FULL, 1280, 720)
    assert windowed.windowed is True
    assert full.windowed is False
    assert (windowed.back_buffer_width, windowed.back_buffer_height) == (1280, 720)
    assert windowed.auto_depth_stencil_format == "D24S8"
    assert windowed.device_window == "w"


@pytest.mark.parametrize("size", [(0, 720), (1280, -1)])
def test_invalid_size_is_rejected(size):
    with pytest.raises(EngineError):
        GraphicDevice(None, WinMode.WIN, *size)


def test_scene_begin_end_counts_frames(device):
    device.render_begin((0.0, 0.0, 1.0, 1.0))
    assert device.clear_color == (0.0, 0.0, 1.0, 1.0)
    device.render_end()
    device.render_begin((0.0, 0.0, 1.0, 1.0))
    device.render_end()
    assert device.frames_presented == 2
    assert device.in_scene is False


def test_scene_misuse_raises(device):
    with pytest.raises(EngineError):
        device.render_end()
    device.render_begin((0, 0, 0, 1))
    with pytest.raises(EngineError):
        device.render_begin((0, 0, 0, 1))


def test_transforms_default_to_identity_and_copy(device):
    assert np.array_equal(device.transforms[TransformKind.VIEW], np.identity(4))
    matrix = np.identity(4) * 2
    device.set_transform(TransformKind.WORLD, matrix)
    matrix[0, 0] = 7
    assert device.transforms[TransformKind.WORLD][0, 0] == 2
    with pytest.raises(ValueError):
        device.set_transform(TransformKind.WORLD, np.identity(3))


def test_draw_requires_bound_buffers(device):
    with pytest.raises(EngineError):
        device.draw_indexed_primitive("TRIANGLELIST", 4, 2)


def test_draw_records_bound_state(device):
    device.render_begin((0, 0, 0, 1))
    device.set_stream_source("vb", 20)
    device.set_indices("ib")
    device.set_fvf(0x102)
    device.set_texture(0, "tex")
    device.set_render_state("LIGHTING", False)
    call = device.draw_indexed_primitive("TRIANGLELIST", 4, 2)
    assert device.draw_calls == [call]
    assert (call.vertices, call.indices, call.stride, call.fvf) == ("vb", "ib", 20, 0x102)
    assert call.texture == "tex"
    assert device.render_states["LIGHTING"] is False
    device.set_texture(0, None)
    assert 0 not in device.textures