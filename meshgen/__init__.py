"""
Meshgen - процедурные примитивы для конвейера рендеринга.

Основные модули:
- mesh - MeshData, дескрипторы фигур (Cube, Box, Quad, Plane, Icosphere) и генераторы
- geombase - разбиение икосаэдра
- settings - настройки по умолчанию
"""

from .mesh import (
    Box,
    Cube,
    Icosphere,
    MeshData,
    MeshGenerationError,
    Plane,
    Quad,
    TooManyVerticesError,
    build,
)
from .settings import MeshSettings

__version__ = '0.1.0'

__all__ = [
    'Box',
    'Cube',
    'Icosphere',
    'MeshData',
    'MeshGenerationError',
    'Plane',
    'Quad',
    'TooManyVerticesError',
    'build',
    'MeshSettings',
]
