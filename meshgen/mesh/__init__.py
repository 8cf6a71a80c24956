"""Mesh module - MeshData, shape descriptors, primitive generators."""

from .mesh import (
    ATTRIBUTE_NORMAL,
    ATTRIBUTE_POSITION,
    ATTRIBUTE_UV_0,
    MeshData,
    Topology,
    VertexAttribType,
    VertexAttribute,
    VertexLayout,
    mesh_vertex_layout,
)
from .errors import MeshGenerationError, TooManyVerticesError
from .shapes import Box, Cube, Icosphere, Plane, Quad, ShapeDescriptor
from .primitives import (
    ICOSPHERE_MAX_SUBDIVISIONS,
    ICOSPHERE_VERTEX_LIMIT,
    box_mesh,
    build,
    build_all,
    cube_mesh,
    icosphere_mesh,
    plane_mesh,
    quad_mesh,
    spherical_uv,
)

__all__ = [
    "ATTRIBUTE_NORMAL",
    "ATTRIBUTE_POSITION",
    "ATTRIBUTE_UV_0",
    "MeshData",
    "Topology",
    "VertexAttribType",
    "VertexAttribute",
    "VertexLayout",
    "mesh_vertex_layout",
    "MeshGenerationError",
    "TooManyVerticesError",
    "Box",
    "Cube",
    "Icosphere",
    "Plane",
    "Quad",
    "ShapeDescriptor",
    "ICOSPHERE_MAX_SUBDIVISIONS",
    "ICOSPHERE_VERTEX_LIMIT",
    "box_mesh",
    "build",
    "build_all",
    "cube_mesh",
    "icosphere_mesh",
    "plane_mesh",
    "quad_mesh",
    "spherical_uv",
]
