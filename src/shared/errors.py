"""Error types shared by the surface and contour packages."""


class InvalidArgumentError(ValueError):
    """Input that cannot produce a surface or contour (bad grid, too few points, ...)."""


class TriangulationError(RuntimeError):
    """The triangulator found no valid triangulation for the point set."""
