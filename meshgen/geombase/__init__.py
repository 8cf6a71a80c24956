"""
Базовая геометрия (Geometric Base).

- IcoSphereSubdivider - разбиение икосаэдра на сферу
- SphereSubdivider - протокол, которому должен удовлетворять разбиватель
"""

from .icosphere import (
    FACE_COUNT,
    ICOSAHEDRON_FACES,
    ICOSAHEDRON_VERTICES,
    IcoSphereSubdivider,
    SphereSubdivider,
    icosphere_point_count,
)

__all__ = [
    'FACE_COUNT',
    'ICOSAHEDRON_FACES',
    'ICOSAHEDRON_VERTICES',
    'IcoSphereSubdivider',
    'SphereSubdivider',
    'icosphere_point_count',
]
