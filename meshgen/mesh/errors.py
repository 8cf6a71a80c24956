"""Errors raised by the primitive generators."""


class MeshGenerationError(ValueError):
    """Base class for errors raised while generating a mesh."""


class TooManyVerticesError(MeshGenerationError):
    """
    Запрошенное разбиение даёт больше вершин, чем допускает формат индексов.

    Attributes:
        requested: requested subdivision level
        projected: projected vertex count for that level
        limit: maximum supported vertex count
    """

    def __init__(self, requested: int, projected: int, limit: int):
        self.requested = requested
        self.projected = projected
        self.limit = limit
        super().__init__(
            f"Cannot create an icosphere of {requested} subdivisions due to there "
            f"being too many vertices being generated: {projected} "
            f"(Limited to {limit} vertices or 79 subdivisions)"
        )
