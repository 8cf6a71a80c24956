"""
Разбиение икосаэдра для построения сферы.

Level n splits every edge of the base icosahedron into n + 1 great-circle
arcs and fills each of the 20 faces with a triangular grid of points. Points
on shared edges are stored once, so a level-n sphere has 10 * (n + 1)**2 + 2
points and 20 * (n + 1)**2 triangles.

Point layout:
    [0, 12)            base icosahedron vertices
    next 30 * n        edge points, n per edge, edges in first-seen order
    next 20 * n(n-1)/2 face interior points, in face order
"""

from __future__ import annotations

from typing import Callable, Dict, List, Protocol, Sequence, Tuple

import numpy as np
from scipy.spatial import geometric_slerp

_T = (1.0 + np.sqrt(5.0)) / 2.0

ICOSAHEDRON_VERTICES = np.array(
    [
        [-1, _T, 0],
        [1, _T, 0],
        [-1, -_T, 0],
        [1, -_T, 0],
        [0, -1, _T],
        [0, 1, _T],
        [0, -1, -_T],
        [0, 1, -_T],
        [_T, 0, -1],
        [_T, 0, 1],
        [-_T, 0, -1],
        [-_T, 0, 1],
    ],
    dtype=float,
)
ICOSAHEDRON_VERTICES /= np.linalg.norm(ICOSAHEDRON_VERTICES[0])
ICOSAHEDRON_VERTICES.flags.writeable = False

# CCW, нормали наружу
ICOSAHEDRON_FACES = np.array(
    [
        [0, 11, 5],
        [0, 5, 1],
        [0, 1, 7],
        [0, 7, 10],
        [0, 10, 11],
        [1, 5, 9],
        [5, 11, 4],
        [11, 10, 2],
        [10, 7, 6],
        [7, 1, 8],
        [3, 9, 4],
        [3, 4, 2],
        [3, 2, 6],
        [3, 6, 8],
        [3, 8, 9],
        [4, 9, 5],
        [2, 4, 11],
        [6, 2, 10],
        [8, 6, 7],
        [9, 8, 1],
    ],
    dtype=int,
)
ICOSAHEDRON_FACES.flags.writeable = False

FACE_COUNT = 20

UVFunction = Callable[[np.ndarray], Sequence[float]]


def icosphere_point_count(subdivisions: int) -> int:
    """Number of points produced at the given level."""
    segments = subdivisions + 1
    return segments * segments * 10 + 2


class SphereSubdivider(Protocol):
    """Capability used by the icosphere generator."""

    def raw_points(self) -> np.ndarray:
        """Unit-sphere points, shape (N, 3)."""
        ...

    def raw_data(self) -> List[Sequence[float]]:
        """Per-point values returned by the callback, in point order."""
        ...

    def indices_per_main_triangle(self) -> int:
        ...

    def get_indices(self, face: int, buffer: List[int]) -> None:
        """Append triangle indices of base face `face` (0..19) to buffer."""
        ...


class IcoSphereSubdivider:
    """Subdivided icosahedron with per-point data from uv_fn."""

    def __init__(self, subdivisions: int, uv_fn: UVFunction):
        if subdivisions < 0:
            raise ValueError(f"IcoSphereSubdivider: subdivisions must be >= 0, got {subdivisions}")

        self.subdivisions = subdivisions
        self._segments = subdivisions + 1

        # (min, max) -> индекс первой точки ребра
        self._edges: Dict[Tuple[int, int], int] = {}

        chunks = [ICOSAHEDRON_VERTICES]
        next_index = len(ICOSAHEDRON_VERTICES)
        t = np.arange(1, self._segments) / self._segments
        for face in ICOSAHEDRON_FACES:
            for a, b in ((face[0], face[1]), (face[1], face[2]), (face[2], face[0])):
                key = (int(min(a, b)), int(max(a, b)))
                if key in self._edges:
                    continue
                self._edges[key] = next_index
                if subdivisions > 0:
                    chunks.append(geometric_slerp(ICOSAHEDRON_VERTICES[key[0]], ICOSAHEDRON_VERTICES[key[1]], t))
                next_index += subdivisions

        edge_points = np.vstack(chunks)

        self._rows: List[List[np.ndarray]] = []
        for face in ICOSAHEDRON_FACES:
            rows, interior = self._build_face(face, edge_points, next_index)
            self._rows.append(rows)
            if len(interior):
                chunks.append(interior)
                next_index += len(interior)

        self._points = np.vstack(chunks)
        self._data = [uv_fn(point) for point in self._points]

    def _edge_point(self, a: int, b: int, k: int) -> int:
        """Index of the point k / segments of the way from vertex a to vertex b."""
        if k == 0:
            return int(a)
        if k == self._segments:
            return int(b)
        start = self._edges[(min(a, b), max(a, b))]
        if a < b:
            return start + k - 1
        return start + self._segments - k - 1

    def _build_face(self, face, edge_points: np.ndarray, first_index: int):
        """
        Rows of point indices for one face and the new interior points.

        Row i (0..segments) holds i + 1 points running from edge (a, b) to
        edge (a, c); row 0 is vertex a, the last row is edge (b, c).
        """
        a, b, c = (int(v) for v in face)
        n = self._segments
        rows = [np.array([a])]
        interior = []
        next_index = first_index
        for i in range(1, n):
            left = self._edge_point(a, b, i)
            right = self._edge_point(a, c, i)
            if i > 1:
                t = np.arange(1, i) / i
                interior.append(geometric_slerp(edge_points[left], edge_points[right], t))
                middle = np.arange(next_index, next_index + i - 1)
                next_index += i - 1
            else:
                middle = np.empty(0, dtype=int)
            rows.append(np.concatenate([[left], middle, [right]]).astype(int))
        rows.append(np.array([self._edge_point(b, c, j) for j in range(n + 1)]))

        if interior:
            return rows, np.vstack(interior)
        return rows, np.empty((0, 3))

    def raw_points(self) -> np.ndarray:
        return self._points

    def raw_data(self) -> List[Sequence[float]]:
        return self._data

    def indices_per_main_triangle(self) -> int:
        return 3 * self._segments * self._segments

    def get_indices(self, face: int, buffer: List[int]) -> None:
        if not 0 <= face < FACE_COUNT:
            raise IndexError(f"IcoSphereSubdivider: face index {face} out of range 0..{FACE_COUNT - 1}")

        rows = self._rows[face]
        for i in range(self._segments):
            top = rows[i]
            bottom = rows[i + 1]
            # обход как у исходной грани
            down = np.stack([top, bottom[:-1], bottom[1:]], axis=1)
            up = np.stack([top[:-1], bottom[1:-1], top[1:]], axis=1)
            buffer.extend(down.ravel().tolist())
            buffer.extend(up.ravel().tolist())
