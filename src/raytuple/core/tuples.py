"""Homogeneous-coordinate 4-tuple: the value type behind points, vectors and colors.

A ``Tuple`` with ``w == 1.0`` is a point and one with ``w == 0.0`` is a vector.
Colors reuse the vector representation (``w == 0.0``) with x/y/z as the red,
green and blue channels. There are no separate classes for these kinds: any
``w`` is accepted and simply propagates through arithmetic, so e.g. adding
two points yields ``w == 2.0``.

Components are stored at single precision and every operation is evaluated in
float32 arithmetic. Degenerate inputs never raise: dividing by zero or
normalizing a zero-length vector produces IEEE-754 inf/NaN components.

Example:
    >>> p = point(0.0, 1.1, 0.0) + vector(1.0, 1.0, 0.0).normalize()
    >>> p.is_point()
    True
"""

import math
from numbers import Real
from typing import cast

import msgpack
import numpy as np
from pydantic import BaseModel, ConfigDict, field_validator

from .constants import EPSILON, POINT_W, SKIP_VALIDATION, VECTOR_W


class Tuple(BaseModel):
    model_config = ConfigDict(frozen=True)

    x: float
    y: float
    z: float
    w: float

    # Equality is tolerance based, so there is no hash consistent with it.
    __hash__ = None  # type: ignore[assignment]
    # Make numpy scalars defer to __rmul__ instead of broadcasting over us.
    __array_ufunc__ = None

    @field_validator("x", "y", "z", "w")
    @classmethod
    def to_single_precision(cls, v: float) -> float:
        with np.errstate(over="ignore"):
            return float(np.float32(v))

    def _values(self) -> np.ndarray:
        return np.array((self.x, self.y, self.z, self.w), dtype=np.float32)

    def _from_values(self, values: np.ndarray) -> "Tuple":
        x, y, z, w = values.tolist()
        return type(self)(x=x, y=y, z=z, w=w)

    def is_point(self) -> bool:
        return self.w == POINT_W

    def is_vector(self) -> bool:
        return self.w == VECTOR_W

    def to_array(self) -> np.ndarray:
        """Return a read-only float32 snapshot ``[x, y, z, w]``."""
        values = self._values()
        values.flags.writeable = False
        return values

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Tuple):
            return NotImplemented
        return equal(self, other)

    def __neg__(self) -> "Tuple":
        return self._from_values(-self._values())

    def __add__(self, other: object) -> "Tuple":
        if not isinstance(other, Tuple):
            return NotImplemented
        with np.errstate(over="ignore", invalid="ignore"):
            return self._from_values(self._values() + other._values())

    def __sub__(self, other: object) -> "Tuple":
        if not isinstance(other, Tuple):
            return NotImplemented
        with np.errstate(over="ignore", invalid="ignore"):
            return self._from_values(self._values() - other._values())

    def __mul__(self, other: object) -> "Tuple":
        """Scale by a real number, or multiply component-wise by another Tuple."""
        if isinstance(other, Tuple):
            with np.errstate(over="ignore", under="ignore", invalid="ignore"):
                return self._from_values(self._values() * other._values())
        if isinstance(other, Real):
            with np.errstate(over="ignore", under="ignore", invalid="ignore"):
                return self._from_values(self._values() * _single_precision(other))
        return NotImplemented

    def __rmul__(self, other: object) -> "Tuple":
        if isinstance(other, Real):
            return self * other
        return NotImplemented

    def __truediv__(self, other: object) -> "Tuple":
        """Divide every component by a real number.

        A zero divisor is not guarded: components become ``inf`` or ``nan``.
        """
        if not isinstance(other, Real):
            return NotImplemented
        with np.errstate(divide="ignore", over="ignore", under="ignore", invalid="ignore"):
            return self._from_values(self._values() / _single_precision(other))

    def magnitude(self) -> float:
        """Euclidean norm over all four components, ``w`` included."""
        values = self._values()
        with np.errstate(over="ignore"):
            return float(np.sqrt(np.sum(values * values)))

    def normalize(self) -> "Tuple":
        """Return the unit vector in this tuple's direction.

        The result is always a vector: ``w`` is discarded, not scaled. A zero
        magnitude yields NaN components.
        """
        m = np.float32(self.magnitude())
        with np.errstate(divide="ignore", invalid="ignore"):
            x, y, z = (self._values()[:3] / m).tolist()
        return vector(x, y, z)

    def dot(self, other: "Tuple") -> float:
        with np.errstate(over="ignore", invalid="ignore"):
            return float(np.dot(self._values(), other._values()))

    def cross(self, other: "Tuple") -> "Tuple":
        """3D cross product of x/y/z; ``w`` of both operands is ignored."""
        with np.errstate(over="ignore", invalid="ignore"):
            x, y, z = np.cross(self._values()[:3], other._values()[:3]).tolist()
        return vector(x, y, z)

    def to_bytes(self) -> bytes:
        return cast(bytes, msgpack.packb(self.model_dump()))

    @classmethod
    def from_bytes(cls, data: bytes) -> "Tuple":
        payload = msgpack.unpackb(data)
        if SKIP_VALIDATION:
            missing = [name for name in ("x", "y", "z", "w") if name not in payload]
            if missing:
                raise ValueError(f"Missing tuple components: {missing}")
            with np.errstate(over="ignore"):
                return cls.model_construct(
                    **{name: float(np.float32(payload[name])) for name in ("x", "y", "z", "w")}
                )
        return cls.model_validate(payload)


def _single_precision(value: Real) -> np.float32:
    try:
        return np.float32(value)
    except OverflowError:
        # Python ints beyond the float range
        return np.float32(math.inf if value > 0 else -math.inf)


def equal(a: Tuple, b: Tuple, epsilon: float = EPSILON) -> bool:
    """Compare two tuples component-wise with an absolute tolerance.

    Each of the four absolute differences must be strictly below ``epsilon``.
    The relation is not transitive, and NaN components never compare equal.
    """
    with np.errstate(over="ignore", invalid="ignore"):
        diff = np.abs(a.to_array() - b.to_array())
    return bool(np.all(diff < epsilon))


def build_tuple(x: float, y: float, z: float, w: float) -> Tuple:
    return Tuple(x=x, y=y, z=z, w=w)


def point(x: float, y: float, z: float) -> Tuple:
    return build_tuple(x, y, z, POINT_W)


def vector(x: float, y: float, z: float) -> Tuple:
    return build_tuple(x, y, z, VECTOR_W)


def color(r: float, g: float, b: float) -> Tuple:
    # Same representation as a vector; channels live in x/y/z.
    return build_tuple(r, g, b, VECTOR_W)
