"""Vector, matrix and quaternion math, particle grid generation, an orbit camera and viewer scene state."""

__version__ = "0.1.0"
__all__ = [
    "vector",
    "matrix",
    "quaternion",
    "parameters",
    "formatting",
    "geometry",
    "camera",
    "engine",
]