"""Shape descriptors: Cube, Box, Quad, Plane, Icosphere."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Tuple, Union

if TYPE_CHECKING:
    from meshgen.settings import MeshSettings


@dataclass(frozen=True)
class Box:
    """Axis-aligned cuboid given by its bounds."""

    min_x: float = -1.0
    max_x: float = 1.0

    min_y: float = -0.5
    max_y: float = 0.5

    min_z: float = -0.5
    max_z: float = 0.5

    @staticmethod
    def new(x_length: float, y_length: float, z_length: float) -> "Box":
        """Box centered at the origin with the given full side lengths."""
        return Box(
            min_x=-x_length / 2.0,
            max_x=x_length / 2.0,
            min_y=-y_length / 2.0,
            max_y=y_length / 2.0,
            min_z=-z_length / 2.0,
            max_z=z_length / 2.0,
        )


@dataclass(frozen=True)
class Cube:
    size: float = 1.0

    def to_box(self) -> Box:
        return Box.new(self.size, self.size, self.size)

    @staticmethod
    def from_settings(settings: "MeshSettings") -> "Cube":
        return Cube(size=settings.cube_size)


@dataclass(frozen=True)
class Quad:
    """
    Прямоугольник в плоскости XY.

    size: полная ширина и высота
    flip: зеркалит текстурные координаты и меняет обход вершин
    """

    size: Tuple[float, float] = (1.0, 1.0)
    flip: bool = False

    @staticmethod
    def new(size: Tuple[float, float]) -> "Quad":
        return Quad(size=tuple(size), flip=False)

    @staticmethod
    def flipped(size: Tuple[float, float]) -> "Quad":
        return Quad(size=tuple(size), flip=True)


@dataclass(frozen=True)
class Plane:
    """Square on the XZ plane; size is the total side length."""

    size: float = 1.0


@dataclass(frozen=True)
class Icosphere:
    """Sphere made from a subdivided icosahedron."""

    radius: float = 1.0
    subdivisions: int = 5

    @staticmethod
    def from_settings(settings: "MeshSettings") -> "Icosphere":
        return Icosphere(
            radius=settings.icosphere_radius,
            subdivisions=settings.icosphere_subdivisions,
        )


ShapeDescriptor = Union[Cube, Box, Quad, Plane, Icosphere]
