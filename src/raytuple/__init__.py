"""Tuple/vector math kernel with a projectile simulation driver."""

from .core import Tuple, build_tuple, color, equal, point, vector

__all__ = ["Tuple", "build_tuple", "color", "equal", "point", "vector"]
