"""Mesh data container and vertex layout definitions."""

from __future__ import annotations

import hashlib
from dataclasses import dataclass
from enum import Enum
from typing import Mapping

import numpy as np

# GPU COMPATIBILITY

ATTRIBUTE_POSITION = "Vertex_Position"
ATTRIBUTE_NORMAL = "Vertex_Normal"
ATTRIBUTE_UV_0 = "Vertex_Uv"


class Topology(Enum):
    TRIANGLE_LIST = "triangle_list"


class VertexAttribType(Enum):
    FLOAT32 = "float32"


class VertexAttribute:
    def __init__(self, name, size, vtype: VertexAttribType, offset):
        self.name = name
        self.size = size
        self.vtype = vtype
        self.offset = offset

    def __repr__(self):
        return f"VertexAttribute({self.name!r}, size={self.size}, offset={self.offset})"


class VertexLayout:
    def __init__(self, stride, attributes):
        self.stride = stride    # размер одной вершины в байтах
        self.attributes = attributes  # список VertexAttribute


def mesh_vertex_layout() -> VertexLayout:
    """Vertex layout of MeshData: pos(3) + normal(3) + uv(2)."""
    return VertexLayout(
        stride=8 * 4,
        attributes=[
            VertexAttribute(ATTRIBUTE_POSITION, 3, VertexAttribType.FLOAT32, 0),
            VertexAttribute(ATTRIBUTE_NORMAL,   3, VertexAttribType.FLOAT32, 12),
            VertexAttribute(ATTRIBUTE_UV_0,     2, VertexAttribType.FLOAT32, 24),
        ]
    )


def primitive_uuid(name: str, *args) -> str:
    """Compute UUID for primitive from name and parameters."""
    key = f"{name}:{':'.join(str(a) for a in args)}"
    return hashlib.sha256(key.encode()).hexdigest()[:16]


def _frozen(array, dtype) -> np.ndarray:
    arr = np.array(array, dtype=dtype)
    arr.flags.writeable = False
    return arr


@dataclass(frozen=True, eq=False)
class MeshData:
    """
    Triangle-list mesh as produced by the primitive generators.

    Attributes:
        positions: (N, 3) float32
        normals:   (N, 3) float32
        uvs:       (N, 2) float32
        indices:   (M,) uint32, M кратно 3
        topology:  всегда Topology.TRIANGLE_LIST

    All buffers are copied on construction and made read-only.
    """

    positions: np.ndarray
    normals: np.ndarray
    uvs: np.ndarray
    indices: np.ndarray
    topology: Topology = Topology.TRIANGLE_LIST
    name: str = ""
    uuid: str = ""

    def __post_init__(self):
        object.__setattr__(self, "positions", _frozen(self.positions, np.float32))
        object.__setattr__(self, "normals", _frozen(self.normals, np.float32))
        object.__setattr__(self, "uvs", _frozen(self.uvs, np.float32))
        object.__setattr__(self, "indices", _frozen(self.indices, np.uint32))
        self.validate()

    def validate(self):
        """Ensure that the attribute/index arrays have correct shapes and bounds."""
        if self.positions.ndim != 2 or self.positions.shape[1] != 3:
            raise ValueError("Positions must be a Nx3 array.")
        if self.normals.ndim != 2 or self.normals.shape[1] != 3:
            raise ValueError("Normals must be a Nx3 array.")
        if self.uvs.ndim != 2 or self.uvs.shape[1] != 2:
            raise ValueError("UVs must be a Nx2 array.")
        n = self.positions.shape[0]
        if self.normals.shape[0] != n or self.uvs.shape[0] != n:
            raise ValueError(
                f"Attribute length mismatch: positions={n}, "
                f"normals={self.normals.shape[0]}, uvs={self.uvs.shape[0]}"
            )
        if self.indices.ndim != 1:
            raise ValueError("Indices must be a flat array.")
        if self.indices.shape[0] % 3 != 0:
            raise ValueError(f"Index count {self.indices.shape[0]} is not a multiple of 3.")
        if self.indices.size and int(self.indices.max()) >= n:
            raise ValueError(f"Index {int(self.indices.max())} out of range for {n} vertices.")

    @property
    def vertex_count(self) -> int:
        return int(self.positions.shape[0])

    @property
    def triangle_count(self) -> int:
        return int(self.indices.shape[0] // 3)

    @property
    def triangles(self) -> np.ndarray:
        """Indices grouped by triangle, shape (M/3, 3)."""
        return self.indices.reshape(-1, 3)

    @property
    def attributes(self) -> Mapping[str, np.ndarray]:
        return {
            ATTRIBUTE_POSITION: self.positions,
            ATTRIBUTE_NORMAL: self.normals,
            ATTRIBUTE_UV_0: self.uvs,
        }

    def attribute(self, name: str) -> np.ndarray:
        try:
            return self.attributes[name]
        except KeyError:
            raise KeyError(f"Unknown vertex attribute: {name}") from None

    def get_vertex_layout(self) -> VertexLayout:
        return mesh_vertex_layout()

    def interleaved_buffer(self) -> np.ndarray:
        """Vertices packed as (N, 8) float32 in get_vertex_layout() order."""
        return np.hstack([self.positions, self.normals, self.uvs]).astype(np.float32)

    def __repr__(self):
        return (
            f"MeshData(name={self.name!r}, vertices={self.vertex_count}, "
            f"triangles={self.triangle_count})"
        )
