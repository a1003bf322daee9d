"""Fixed-size 2, 3 and 4 component vectors and component-wise helpers."""

from __future__ import annotations

import math
import operator
from dataclasses import dataclass
from typing import Callable, ClassVar, Iterator, TypeVar, Union

Scalar = Union[int, float]
_V = TypeVar("_V", bound="_Vector")


def _is_scalar(value: object) -> bool:
    return isinstance(value, (int, float))


class _Vector:
    """Arithmetic shared by all vector sizes; components are row-vector style."""

    __slots__ = ()
    _fields: ClassVar[tuple[str, ...]] = ()

    def __iter__(self) -> Iterator[Scalar]:
        return (getattr(self, name) for name in self._fields)

    def __len__(self) -> int:
        return len(self._fields)

    def __getitem__(self, index: int) -> Scalar:
        return tuple(self)[index]

    def _map(self: _V, fn: Callable[[Scalar], Scalar]) -> _V:
        return type(self)(*(fn(c) for c in self))

    def _zip(self: _V, other: _V, fn: Callable[[Scalar, Scalar], Scalar]) -> _V:
        return type(self)(*(fn(a, b) for a, b in zip(self, other)))

    def __add__(self, other):
        if type(other) is not type(self):
            return NotImplemented
        return self._zip(other, operator.add)

    def __sub__(self, other):
        if type(other) is not type(self):
            return NotImplemented
        return self._zip(other, operator.sub)

    def __neg__(self):
        return self._map(operator.neg)

    def __mul__(self, other):
        if _is_scalar(other):
            return self._map(lambda c: c * other)
        if type(other) is type(self):
            return self._zip(other, operator.mul)
        return NotImplemented

    def __rmul__(self, other):
        if _is_scalar(other):
            return self._map(lambda c: other * c)
        return NotImplemented

    def __truediv__(self, other):
        if _is_scalar(other):
            return self._map(lambda c: c / other)
        if type(other) is type(self):
            return self._zip(other, operator.truediv)
        return NotImplemented


@dataclass(frozen=True, slots=True)
class Vector2(_Vector):
    """Two-component vector."""

    x: float = 0.0
    y: float = 0.0

    _fields: ClassVar[tuple[str, ...]] = ("x", "y")


@dataclass(frozen=True, slots=True)
class Vector3(_Vector):
    """Three-component vector."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    _fields: ClassVar[tuple[str, ...]] = ("x", "y", "z")

    def xy(self) -> Vector2:
        """Drop the z component."""
        return Vector2(self.x, self.y)


@dataclass(frozen=True, slots=True)
class Vector4(_Vector):
    """Four-component vector."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0
    w: float = 0.0

    _fields: ClassVar[tuple[str, ...]] = ("x", "y", "z", "w")

    def xyz(self) -> Vector3:
        """Drop the w component."""
        return Vector3(self.x, self.y, self.z)


def _require_same(*vectors: _Vector) -> None:
    first = vectors[0]
    if not isinstance(first, _Vector):
        raise TypeError(f"expected a vector, got {type(first).__name__}")
    for other in vectors[1:]:
        if type(other) is not type(first):
            raise TypeError(
                f"vector types differ: {type(first).__name__} and {type(other).__name__}"
            )


def dot(a: _V, b: _V) -> float:
    """Dot product of two vectors of the same size."""
    _require_same(a, b)
    return sum(x * y for x, y in zip(a, b))


def length(a: _Vector) -> float:
    """Euclidean length."""
    return math.sqrt(dot(a, a))


def normalize(a: _V) -> _V:
    """Unit vector pointing the same way as ``a``."""
    norm = length(a)
    if norm == 0:
        raise ZeroDivisionError("cannot normalize a zero-length vector")
    return a / norm


def cross(a: Vector3, b: Vector3) -> Vector3:
    """Cross product of two 3-component vectors."""
    if not (isinstance(a, Vector3) and isinstance(b, Vector3)):
        raise TypeError("cross product is defined for Vector3 only")
    return Vector3(
        a.y * b.z - a.z * b.y,
        a.z * b.x - a.x * b.z,
        a.x * b.y - a.y * b.x,
    )


def vmin(a: _V, b: _V) -> _V:
    """Component-wise minimum."""
    _require_same(a, b)
    return a._zip(b, min)


def vmax(a: _V, b: _V) -> _V:
    """Component-wise maximum."""
    _require_same(a, b)
    return a._zip(b, max)


def vabs(a: _V) -> _V:
    """Component-wise absolute value."""
    _require_same(a)
    return a._map(lambda c: -c if c < 0 else c)


def vfloor(a: _V) -> _V:
    """Component-wise floor, keeping each component's type."""
    _require_same(a)
    return a._map(lambda c: type(c)(math.floor(c)))


def vceil(a: _V) -> _V:
    """Component-wise ceiling, keeping each component's type."""
    _require_same(a)
    return a._map(lambda c: type(c)(math.ceil(c)))


def _clamp_scalar(value: Scalar, low: Scalar, high: Scalar) -> Scalar:
    if value < low:
        return low
    if value > high:
        return high
    return value


def clamp(value, low, high):
    """Clamp a scalar, or each component of a vector, to ``[low, high]``."""
    if isinstance(value, _Vector):
        _require_same(value, low, high)
        return type(value)(
            *(_clamp_scalar(v, lo, hi) for v, lo, hi in zip(value, low, high))
        )
    return _clamp_scalar(value, low, high)


def lerp(left, right, w: float):
    """Linear interpolation between ``left`` and ``right``."""
    return left * (1.0 - w) + right * w


def smooth_step(left: float, right: float, w: float) -> float:
    """Hermite smooth step of ``w`` between the edges ``left`` and ``right``."""
    t = _clamp_scalar((w - left) / (right - left), 0.0, 1.0)
    return t * t * (3.0 - 2.0 * t)


def max3(x, y, z):
    """Largest of three values."""
    return max(max(x, y), z)


def min3(x, y, z):
    """Smallest of three values."""
    return min(min(x, y), z)