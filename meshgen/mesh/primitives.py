"""Primitive mesh shapes: Box, Cube, Quad, Plane, Icosphere."""

import math
from typing import Callable, Dict, Iterable, List

import numpy as np

from meshgen import log
from meshgen.geombase.icosphere import FACE_COUNT, IcoSphereSubdivider, SphereSubdivider
from .errors import TooManyVerticesError
from .mesh import MeshData, primitive_uuid
from .shapes import Box, Cube, Icosphere, Plane, Quad, ShapeDescriptor

# Больше вершин не адресуется 16-битными индексами
ICOSPHERE_VERTEX_LIMIT = 65535
ICOSPHERE_MAX_SUBDIVISIONS = 80

QUAD_INDICES = [0, 2, 1, 0, 3, 2]


def box_mesh(box: Box) -> MeshData:
    """24 vertices, 4 per face; faces do not share vertices so edges stay hard."""
    x0, x1 = box.min_x, box.max_x
    y0, y1 = box.min_y, box.max_y
    z0, z1 = box.min_z, box.max_z

    positions = np.array(
        [
            # Top
            [x0, y0, z1], [x1, y0, z1], [x1, y1, z1], [x0, y1, z1],
            # Bottom
            [x0, y1, z0], [x1, y1, z0], [x1, y0, z0], [x0, y0, z0],
            # Right
            [x1, y0, z0], [x1, y1, z0], [x1, y1, z1], [x1, y0, z1],
            # Left
            [x0, y0, z1], [x0, y1, z1], [x0, y1, z0], [x0, y0, z0],
            # Front
            [x1, y1, z0], [x0, y1, z0], [x0, y1, z1], [x1, y1, z1],
            # Back
            [x1, y0, z1], [x0, y0, z1], [x0, y0, z0], [x1, y0, z0],
        ],
        dtype=np.float32,
    )
    face_normals = np.array(
        [
            [0.0, 0.0, 1.0],
            [0.0, 0.0, -1.0],
            [1.0, 0.0, 0.0],
            [-1.0, 0.0, 0.0],
            [0.0, 1.0, 0.0],
            [0.0, -1.0, 0.0],
        ],
        dtype=np.float32,
    )
    normals = np.repeat(face_normals, 4, axis=0)
    uvs = np.array(
        [
            [0.0, 0.0], [1.0, 0.0], [1.0, 1.0], [0.0, 1.0],
            [1.0, 0.0], [0.0, 0.0], [0.0, 1.0], [1.0, 1.0],
            [0.0, 0.0], [1.0, 0.0], [1.0, 1.0], [0.0, 1.0],
            [1.0, 0.0], [0.0, 0.0], [0.0, 1.0], [1.0, 1.0],
            [1.0, 0.0], [0.0, 0.0], [0.0, 1.0], [1.0, 1.0],
            [0.0, 0.0], [1.0, 0.0], [1.0, 1.0], [0.0, 1.0],
        ],
        dtype=np.float32,
    )
    face_pattern = np.array([0, 1, 2, 2, 3, 0], dtype=np.uint32)
    indices = np.concatenate([face_pattern + 4 * face for face in range(6)])

    uuid = primitive_uuid("Box", x0, x1, y0, y1, z0, z1)
    log.debug(f"[primitives] Box {uuid}: bounds x=({x0}, {x1}) y=({y0}, {y1}) z=({z0}, {z1})")
    return MeshData(positions, normals, uvs, indices, name="Box", uuid=uuid)


def cube_mesh(cube: Cube) -> MeshData:
    return box_mesh(cube.to_box())


def quad_mesh(quad: Quad) -> MeshData:
    """
    Rectangle on the XY plane facing +Z.

    The flipped variant lists the corners mirrored left to right with the
    same index pattern, so it is wound the other way and its texture is
    mirrored.
    """
    extent_x = quad.size[0] / 2.0
    extent_y = quad.size[1] / 2.0

    north_west = [-extent_x, extent_y, 0.0]
    north_east = [extent_x, extent_y, 0.0]
    south_west = [-extent_x, -extent_y, 0.0]
    south_east = [extent_x, -extent_y, 0.0]

    if quad.flip:
        positions = [south_east, north_east, north_west, south_west]
        uvs = [[1.0, 1.0], [1.0, 0.0], [0.0, 0.0], [0.0, 1.0]]
    else:
        positions = [south_west, north_west, north_east, south_east]
        uvs = [[0.0, 1.0], [0.0, 0.0], [1.0, 0.0], [1.0, 1.0]]
    normals = [[0.0, 0.0, 1.0]] * 4

    uuid = primitive_uuid("Quad", quad.size[0], quad.size[1], quad.flip)
    return MeshData(positions, normals, uvs, QUAD_INDICES, name="Quad", uuid=uuid)


def plane_mesh(plane: Plane) -> MeshData:
    """Square on the XZ plane at y = 0 facing +Y."""
    extent = plane.size / 2.0

    positions = [
        [extent, 0.0, -extent],
        [extent, 0.0, extent],
        [-extent, 0.0, extent],
        [-extent, 0.0, -extent],
    ]
    normals = [[0.0, 1.0, 0.0]] * 4
    uvs = [[1.0, 1.0], [1.0, 0.0], [0.0, 0.0], [0.0, 1.0]]

    uuid = primitive_uuid("Plane", plane.size)
    return MeshData(positions, normals, uvs, QUAD_INDICES, name="Plane", uuid=uuid)


def spherical_uv(point) -> List[float]:
    """
    Texture coordinates of a unit-sphere point.

    u follows the inclination from the +Z pole, v the azimuth around Z.
    v lies in [-0.5, 0.5] and wraps at azimuth = ±pi.
    """
    x, y, z = float(point[0]), float(point[1]), float(point[2])
    inclination = math.acos(max(-1.0, min(1.0, z)))
    azimuth = math.atan2(y, x)

    norm_inclination = 1.0 - (inclination / math.pi)
    norm_azimuth = (azimuth / math.pi) * 0.5

    return [norm_inclination, norm_azimuth]


def icosphere_mesh(
    sphere: Icosphere,
    subdivider: Callable[..., SphereSubdivider] = IcoSphereSubdivider,
) -> MeshData:
    """
    Smooth sphere from a subdivided icosahedron.

    Raises TooManyVerticesError for subdivisions >= 80, before anything is
    generated. The projected count uses the OEIS A005901 formula.
    """
    if sphere.subdivisions >= ICOSPHERE_MAX_SUBDIVISIONS:
        segments = sphere.subdivisions + 1
        projected = (segments * segments * 10) + 2
        log.warn(
            f"[primitives] Icosphere rejected: subdivisions={sphere.subdivisions}, "
            f"projected vertices={projected}"
        )
        raise TooManyVerticesError(sphere.subdivisions, projected, ICOSPHERE_VERTEX_LIMIT)

    generated = subdivider(sphere.subdivisions, spherical_uv)

    raw_points = np.asarray(generated.raw_points(), dtype=float)
    points = raw_points * sphere.radius
    normals = raw_points
    uvs = generated.raw_data()

    indices: List[int] = []
    for face in range(FACE_COUNT):
        generated.get_indices(face, indices)

    uuid = primitive_uuid("Icosphere", sphere.radius, sphere.subdivisions)
    log.debug(
        f"[primitives] Icosphere {uuid}: subdivisions={sphere.subdivisions}, "
        f"vertices={len(raw_points)}, indices={len(indices)}"
    )
    return MeshData(points, normals, uvs, indices, name="Icosphere", uuid=uuid)


_BUILDERS: Dict[type, Callable[..., MeshData]] = {
    Cube: cube_mesh,
    Box: box_mesh,
    Quad: quad_mesh,
    Plane: plane_mesh,
    Icosphere: icosphere_mesh,
}


def build(shape: ShapeDescriptor) -> MeshData:
    """Build the mesh described by a shape descriptor."""
    builder = _BUILDERS.get(type(shape))
    if builder is None:
        raise TypeError(f"build: unsupported shape descriptor {type(shape).__name__}")
    return builder(shape)


def build_all(shapes: Iterable[ShapeDescriptor]) -> List[MeshData]:
    return [build(shape) for shape in shapes]
