import dataclasses

import pytest

from gameframe.enums import WinMode
from gameframe.structs import EngineDesc, EngineError, VertexPosTex


def test_engine_desc_is_immutable():
    desc = EngineDesc(None, WinMode.WIN, 1280, 720, 4)
    with pytest.raises(dataclasses.FrozenInstanceError):
        desc.num_levels = 5
    assert desc.win_size_x == 1280


def test_vertex_converts_components_to_float_tuples():
    vertex = VertexPosTex([1, 2, 3], [0, 1])
    assert vertex.position == (1.0, 2.0, 3.0)
    assert vertex.texcoord == (0.0, 1.0)


def test_vertex_rejects_wrong_component_counts():
    with pytest.raises(ValueError):
        VertexPosTex((0.0, 0.0), (0.0, 0.0))
    with pytest.raises(ValueError):
        VertexPosTex((0.0, 0.0, 0.0), (0.0,))


def test_vertex_stride_is_five_floats():
    assert VertexPosTex.stride() == 20


def test_engine_error_carries_its_message():
    error = EngineError("boom")
    assert str(error) == "boom"
    assert error.args == ("boom",)
    assert issubclass(EngineError, Exception)