"""Vertex and index buffers: the rectangle and the terrain grid."""

from __future__ import annotations

import copy
from enum import IntEnum
from typing import Any

import numpy as np

from gameframe.component import Component
from gameframe.structs import EngineError, VertexPosTex

FVF_XYZ = 0x002
FVF_TEX1 = 0x100

VERTEX_DTYPE = np.dtype([("position", np.float32, (3,)), ("texcoord", np.float32, (2,))])


class PrimitiveType(IntEnum):
    """How the indices of a buffer are assembled into primitives."""

    POINT_LIST = 1
    LINE_LIST = 2
    LINE_STRIP = 3
    TRIANGLE_LIST = 4
    TRIANGLE_STRIP = 5
    TRIANGLE_FAN = 6


class VIBuffer(Component):
    """A vertex buffer with an index buffer, bound and drawn together."""

    def __init__(self, device, game_instance=None):
        super().__init__(device, game_instance)
        self.vertices: np.ndarray | None = None
        self.indices: np.ndarray | None = None
        self.num_vertices = 0
        self.vertex_stride = 0
        self.fvf = 0
        self.primitive_type = PrimitiveType.TRIANGLE_LIST
        self.num_primitives = 0
        self.index_stride = 0
        self.num_indices = 0
        self.index_format: np.dtype | None = None

    def bind_buffers(self) -> None:
        """Bind the vertex and index buffers and the vertex format."""
        self.device.set_stream_source(self.vertices, self.vertex_stride)
        self.device.set_indices(self.indices)
        self.device.set_fvf(self.fvf)

    def render(self):
        """Draw the bound buffers as indexed primitives."""
        return self.device.draw_indexed_primitive(
            self.primitive_type, self.num_vertices, self.num_primitives
        )

    def clone(self, arg: Any) -> "VIBuffer":
        """Return a buffer sharing this prototype's vertex and index data."""
        twin = copy.copy(self)
        twin.initialize(arg)
        return twin

    def _set_layout(self, num_vertices: int, num_primitives: int, index_format) -> None:
        self.num_vertices = num_vertices
        self.vertex_stride = VertexPosTex.stride()
        self.fvf = FVF_XYZ | FVF_TEX1
        self.primitive_type = PrimitiveType.TRIANGLE_LIST
        self.num_primitives = num_primitives
        self.num_indices = num_primitives * 3
        self.index_format = np.dtype(index_format)
        self.index_stride = self.index_format.itemsize


class RectBuffer(VIBuffer):
    """A unit quad centred on the origin in the XY plane."""

    def initialize_prototype(self) -> None:
        self._set_layout(4, 2, np.uint16)
        vertices = np.zeros(self.num_vertices, dtype=VERTEX_DTYPE)
        vertices["position"] = [
            (-0.5, 0.5, 0.0),
            (0.5, 0.5, 0.0),
            (0.5, -0.5, 0.0),
            (-0.5, -0.5, 0.0),
        ]
        vertices["texcoord"] = [(0.0, 0.0), (1.0, 0.0), (1.0, 1.0), (0.0, 1.0)]
        self.vertices = vertices
        self.indices = np.array([0, 1, 2, 0, 2, 3], dtype=self.index_format)

    @classmethod
    def create(cls, device, game_instance) -> "RectBuffer":
        buffer = cls(device, game_instance)
        buffer.initialize_prototype()
        return buffer


class TerrainBuffer(VIBuffer):
    """A flat grid of vertices in the XZ plane, one unit apart."""

    def __init__(self, device, game_instance=None):
        super().__init__(device, game_instance)
        self.num_vertices_x = 0
        self.num_vertices_z = 0

    def initialize_prototype(self, num_vertices_x, num_vertices_z) -> None:
        nx, nz = int(num_vertices_x), int(num_vertices_z)
        if nx < 2 or nz < 2:
            raise EngineError(f"a terrain needs at least 2x2 vertices, got {nx}x{nz}")
        self.num_vertices_x = nx
        self.num_vertices_z = nz
        self._set_layout(nx * nz, (nx - 1) * (nz - 1) * 2, np.uint32)

        xs, zs = np.meshgrid(np.arange(nx), np.arange(nz))
        vertices = np.zeros(self.num_vertices, dtype=VERTEX_DTYPE)
        vertices["position"] = np.stack(
            [xs.ravel(), np.zeros(self.num_vertices), zs.ravel()], axis=1
        )
        vertices["texcoord"] = np.stack(
            [xs.ravel() / (nx - 1.0), zs.ravel() / (nz - 1.0)], axis=1
        )
        self.vertices = vertices

        rows, cols = np.meshgrid(np.arange(nz - 1), np.arange(nx - 1), indexing="ij")
        base = (cols * nx + rows).ravel()
        quads = np.stack(
            [base + nx, base + nx + 1, base + 1, base + nx, base + 1, base], axis=1
        ).ravel()
        if quads.size and int(quads.max()) >= self.num_vertices:
            raise EngineError(f"terrain of {nx}x{nz} vertices produces indices out of range")
        self.indices = quads.astype(self.index_format)

    @classmethod
    def create(cls, device, game_instance, num_vertices_x, num_vertices_z) -> "TerrainBuffer":
        buffer = cls(device, game_instance)
        buffer.initialize_prototype(num_vertices_x, num_vertices_z)
        return buffer