"""Homogeneous-coordinate tuple kernel: points, vectors and colors."""

from .constants import EPSILON, POINT_W, VECTOR_W
from .tuples import Tuple, build_tuple, color, equal, point, vector

__all__ = [
    "EPSILON",
    "POINT_W",
    "VECTOR_W",
    "Tuple",
    "build_tuple",
    "color",
    "equal",
    "point",
    "vector",
]
