"""Square matrices in row-major, row-vector (``v * M``) convention."""

from __future__ import annotations

import math
from typing import ClassVar, Iterable, Iterator, Optional, TypeVar

from partiview.vector import Vector2, Vector3, Vector4, normalize

_M = TypeVar("_M", bound="_Matrix")

_VECTOR_BY_SIZE = {2: Vector2, 3: Vector3, 4: Vector4}


def _is_scalar(value: object) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _minor(rows: tuple[tuple[float, ...], ...], row: int, col: int) -> tuple[tuple[float, ...], ...]:
    return tuple(
        tuple(value for j, value in enumerate(r) if j != col)
        for i, r in enumerate(rows)
        if i != row
    )


def _determinant(rows: tuple[tuple[float, ...], ...]) -> float:
    if len(rows) == 1:
        return rows[0][0]
    if len(rows) == 2:
        (a, b), (c, d) = rows
        return a * d - b * c
    total = 0.0
    for col, value in enumerate(rows[0]):
        sign = -1.0 if col % 2 else 1.0
        total += sign * value * _determinant(_minor(rows, 0, col))
    return total


class _Matrix:
    """Behaviour shared by all square matrix sizes."""

    __slots__ = ("_rows",)
    _size: ClassVar[int] = 0

    def __init__(self, rows: Optional[Iterable[Iterable[float]]] = None) -> None:
        n = self._size
        if rows is None:
            data = tuple((0.0,) * n for _ in range(n))
        else:
            data = tuple(tuple(row) for row in rows)
            if len(data) != n or any(len(row) != n for row in data):
                raise ValueError(f"{type(self).__name__} needs {n} rows of {n} values")
        self._rows: tuple[tuple[float, ...], ...] = data

    @classmethod
    def _make_filled(cls: type[_M], value: float) -> _M:
        return cls([[value] * cls._size for _ in range(cls._size)])

    @classmethod
    def _make_identity(cls: type[_M]) -> _M:
        n = cls._size
        return cls([[1.0 if i == j else 0.0 for j in range(n)] for i in range(n)])

    def _transposed(self: _M) -> _M:
        return type(self)(zip(*self._rows))

    @property
    def rows(self) -> tuple[tuple[float, ...], ...]:
        return self._rows

    def elements(self) -> tuple[float, ...]:
        """All elements in row-major order."""
        return tuple(value for row in self._rows for value in row)

    def __getitem__(self, row: int) -> tuple[float, ...]:
        return self._rows[row]

    def __iter__(self) -> Iterator[tuple[float, ...]]:
        return iter(self._rows)

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self._rows == other._rows

    def __hash__(self) -> int:
        return hash((type(self).__name__, self._rows))

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._rows!r})"

    def _scaled(self: _M, s: float) -> _M:
        return type(self)([[value * s for value in row] for row in self._rows])

    def _row_times(self, values: tuple[float, ...]) -> tuple[float, ...]:
        return tuple(
            sum(v * row[j] for v, row in zip(values, self._rows)) for j in range(self._size)
        )

    def _times_column(self, values: tuple[float, ...]) -> tuple[float, ...]:
        return tuple(sum(a * v for a, v in zip(row, values)) for row in self._rows)

    def __mul__(self, other):
        if _is_scalar(other):
            return self._scaled(other)
        if type(other) is type(self):
            columns = tuple(zip(*other._rows))
            return type(self)(
                [[sum(a * b for a, b in zip(row, col)) for col in columns] for row in self._rows]
            )
        vector_type = _VECTOR_BY_SIZE[self._size]
        if isinstance(other, vector_type):
            return vector_type(*self._times_column(tuple(other)))
        return NotImplemented

    def __rmul__(self, other):
        if _is_scalar(other):
            return self._scaled(other)
        vector_type = _VECTOR_BY_SIZE[self._size]
        if isinstance(other, vector_type):
            return vector_type(*self._row_times(tuple(other)))
        return NotImplemented


class Matrix2x2(_Matrix):
    """2x2 matrix."""

    __slots__ = ()
    _size: ClassVar[int] = 2

    @classmethod
    def filled(cls, value: float) -> "Matrix2x2":
        """Matrix with every element equal to ``value``."""
        return cls._make_filled(value)

    @classmethod
    def identity(cls) -> "Matrix2x2":
        """Identity matrix."""
        return cls._make_identity()

    @classmethod
    def rotation(cls, angle: float) -> "Matrix2x2":
        """Rotation by ``angle`` radians for row vectors."""
        s, c = math.sin(angle), math.cos(angle)
        return cls([[c, s], [-s, c]])

    def transpose(self) -> "Matrix2x2":
        """Matrix with rows and columns swapped."""
        return self._transposed()

    def determinant(self) -> float:
        """Determinant of the matrix."""
        return _determinant(self._rows)

    def inverse(self) -> "Matrix2x2":
        """Inverse matrix; raises ZeroDivisionError when singular."""
        det = self.determinant()
        if det == 0:
            raise ZeroDivisionError("matrix is singular")
        (a, b), (c, d) = self._rows
        return Matrix2x2([[d, -b], [-c, a]]) * (1.0 / det)


class Matrix3x3(_Matrix):
    """3x3 matrix."""

    __slots__ = ()
    _size: ClassVar[int] = 3

    @classmethod
    def filled(cls, value: float) -> "Matrix3x3":
        """Matrix with every element equal to ``value``."""
        return cls._make_filled(value)

    @classmethod
    def identity(cls) -> "Matrix3x3":
        """Identity matrix."""
        return cls._make_identity()

    def transpose(self) -> "Matrix3x3":
        """Matrix with rows and columns swapped."""
        return self._transposed()

    def determinant(self) -> float:
        """Determinant by cofactor expansion along the first row."""
        return _determinant(self._rows)


class Matrix4x4(_Matrix):
    """4x4 matrix with Direct3D-style transform constructors."""

    __slots__ = ()
    _size: ClassVar[int] = 4

    def __rmul__(self, other):
        if isinstance(other, Vector3):
            x, y, z, w = self._row_times((other.x, other.y, other.z, 1.0))
            return Vector3(x / w, y / w, z / w)
        return super().__rmul__(other)

    @classmethod
    def filled(cls, value: float) -> "Matrix4x4":
        """Matrix with every element equal to ``value``."""
        return cls._make_filled(value)

    @classmethod
    def identity(cls) -> "Matrix4x4":
        """Identity matrix."""
        return cls._make_identity()

    @classmethod
    def translation(cls, x: float, y: float, z: float) -> "Matrix4x4":
        """Translation by ``(x, y, z)``."""
        return cls([[1, 0, 0, 0], [0, 1, 0, 0], [0, 0, 1, 0], [x, y, z, 1]])

    @classmethod
    def scale(cls, x: float, y: Optional[float] = None, z: Optional[float] = None) -> "Matrix4x4":
        """Scale along each axis; a single factor scales uniformly."""
        if y is None and z is None:
            y = z = x
        elif y is None or z is None:
            raise TypeError("give either one factor or all three")
        return cls([[x, 0, 0, 0], [0, y, 0, 0], [0, 0, z, 0], [0, 0, 0, 1]])

    @classmethod
    def rotation_x(cls, angle: float) -> "Matrix4x4":
        """Left-handed rotation around the x axis."""
        s, c = math.sin(angle), math.cos(angle)
        return cls([[1, 0, 0, 0], [0, c, s, 0], [0, -s, c, 0], [0, 0, 0, 1]])

    @classmethod
    def rotation_y(cls, angle: float) -> "Matrix4x4":
        """Left-handed rotation around the y axis."""
        s, c = math.sin(angle), math.cos(angle)
        return cls([[c, 0, -s, 0], [0, 1, 0, 0], [s, 0, c, 0], [0, 0, 0, 1]])

    @classmethod
    def rotation_z(cls, angle: float) -> "Matrix4x4":
        """Left-handed rotation around the z axis."""
        s, c = math.sin(angle), math.cos(angle)
        return cls([[c, s, 0, 0], [-s, c, 0, 0], [0, 0, 1, 0], [0, 0, 0, 1]])

    @classmethod
    def rotation_arbitrary(cls, axis: Vector3, angle: float) -> "Matrix4x4":
        """Rotation by ``angle`` radians around an arbitrary axis."""
        ax, ay, az = normalize(axis)
        s, c = math.sin(angle), math.cos(angle)
        t = 1.0 - c
        return cls(
            [
                [1 + t * (ax * ax - 1), az * s + t * ax * ay, -ay * s + t * ax * az, 0],
                [-az * s + t * ay * ax, 1 + t * (ay * ay - 1), ax * s + t * ay * az, 0],
                [ay * s + t * az * ax, -ax * s + t * az * ay, 1 + t * (az * az - 1), 0],
                [0, 0, 0, 1],
            ]
        )

    @classmethod
    def view_from_basis(cls, x_axis: Vector3, y_axis: Vector3, z_axis: Vector3) -> "Matrix4x4":
        """View matrix whose columns are the given camera axes."""
        return cls(
            [
                [x_axis.x, y_axis.x, z_axis.x, 0],
                [x_axis.y, y_axis.y, z_axis.y, 0],
                [x_axis.z, y_axis.z, z_axis.z, 0],
                [0, 0, 0, 1],
            ]
        )

    def with_near_far_clip_planes(self, z_near: float, z_far: float, is_gl: bool) -> "Matrix4x4":
        """Copy of this projection with its near and far planes replaced."""
        rows = [list(row) for row in self._rows]
        depth = z_far - z_near
        if is_gl:
            rows[2][2] = (z_far + z_near) / depth
            rows[3][2] = -2 * z_near * z_far / depth
        else:
            rows[2][2] = z_far / depth
            rows[3][2] = -z_near * z_far / depth
        rows[2][3] = 1.0
        return Matrix4x4(rows)

    def near_far_clip_planes(self, is_gl: bool) -> tuple[float, float]:
        """Near and far plane distances encoded in this projection."""
        m33 = self._rows[2][2]
        m43 = self._rows[3][2]
        if is_gl:
            return m43 / (-1 - m33), m43 / (1 - m33)
        z_near = -m43 / m33
        return z_near, m33 / (m33 - 1) * z_near

    @classmethod
    def projection(
        cls, fov: float, aspect_ratio: float, z_near: float, z_far: float, is_gl: bool
    ) -> "Matrix4x4":
        """Left-handed perspective projection."""
        y_scale = 1.0 / math.tan(fov / 2.0)
        x_scale = y_scale / aspect_ratio
        base = cls([[x_scale, 0, 0, 0], [0, y_scale, 0, 0], [0, 0, 0, 0], [0, 0, 0, 0]])
        return base.with_near_far_clip_planes(z_near, z_far, is_gl)

    @classmethod
    def ortho_off_center(
        cls,
        left: float,
        right: float,
        bottom: float,
        top: float,
        z_near: float,
        z_far: float,
        is_gl: bool,
    ) -> "Matrix4x4":
        """Left-handed orthographic projection of an off-centre volume."""
        m22 = (2 if is_gl else 1) / (z_far - z_near)
        m32 = (z_near + z_far if is_gl else z_near) / (z_near - z_far)
        return cls(
            [
                [2 / (right - left), 0, 0, 0],
                [0, 2 / (top - bottom), 0, 0],
                [0, 0, m22, 0],
                [(left + right) / (left - right), (top + bottom) / (bottom - top), m32, 1],
            ]
        )

    @classmethod
    def ortho(
        cls, width: float, height: float, z_near: float, z_far: float, is_gl: bool
    ) -> "Matrix4x4":
        """Left-handed orthographic projection centred on the view axis."""
        return cls.ortho_off_center(
            -width * 0.5, width * 0.5, -height * 0.5, height * 0.5, z_near, z_far, is_gl
        )

    def transpose(self) -> "Matrix4x4":
        """Matrix with rows and columns swapped."""
        return self._transposed()

    def determinant(self) -> float:
        """Determinant by cofactor expansion along the first row."""
        return _determinant(self._rows)

    def inverse(self) -> "Matrix4x4":
        """Inverse by adjugate; raises ZeroDivisionError when singular."""
        rows = self._rows
        cofactors = [
            [(-1.0 if (i + j) % 2 else 1.0) * _determinant(_minor(rows, i, j)) for j in range(4)]
            for i in range(4)
        ]
        det = sum(a * c for a, c in zip(rows[0], cofactors[0]))
        if det == 0:
            raise ZeroDivisionError("matrix is singular")
        return Matrix4x4(cofactors).transpose() * (1.0 / det)

    def remove_translation(self) -> "Matrix4x4":
        """Copy with the translation row cleared."""
        rows = [list(row) for row in self._rows]
        rows[3][0] = rows[3][1] = rows[3][2] = 0.0
        return Matrix4x4(rows)