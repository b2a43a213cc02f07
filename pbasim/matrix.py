"""Immutable 3x3 matrices."""

from __future__ import annotations

from numbers import Real
from typing import Callable, Iterable

from pbasim.vector import Vector

DEFAULT_EXP_SCALING = 4
_EXP_TERMS = 30
_SINCH_TERMS = 600
_SINCH_DET_THRESHOLD = 1.0e-4

Rows = tuple[tuple[float, float, float], tuple[float, float, float], tuple[float, float, float]]


class Matrix:
    """A 3x3 matrix of floats.

    Built from no arguments (zero matrix), nine values in row order, or a
    single nested 3x3 iterable of rows.
    """

    __slots__ = ("_rows",)

    def __init__(self, *values: float | Iterable[Iterable[float]]) -> None:
        if not values:
            rows = ((0.0, 0.0, 0.0),) * 3
        elif len(values) == 9:
            flat = iter(float(v) for v in values)
            rows = tuple(zip(flat, flat, flat))
        elif len(values) == 1:
            rows = tuple(tuple(float(v) for v in row) for row in values[0])
            if len(rows) != 3 or any(len(row) != 3 for row in rows):
                raise ValueError("a matrix needs three rows of three values")
        else:
            raise ValueError("a matrix takes 0, 1 or 9 arguments")
        self._rows: Rows = rows  # type: ignore[assignment]

    @property
    def rows(self) -> Rows:
        return self._rows

    def __getitem__(self, key: tuple[int, int]) -> float:
        i, j = key
        return self._rows[i][j]

    def __iter__(self):
        return iter(self._rows)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self._rows == other._rows

    def __hash__(self) -> int:
        return hash(self._rows)

    def __repr__(self) -> str:
        return f"Matrix({self._rows!r})"

    def _map(self, func: Callable[[float], float]) -> Matrix:
        return Matrix(tuple(tuple(func(v) for v in row) for row in self._rows))

    def _combine(self, other: Matrix, func: Callable[[float, float], float]) -> Matrix:
        return Matrix(
            tuple(
                tuple(func(a, b) for a, b in zip(ra, rb))
                for ra, rb in zip(self._rows, other._rows)
            )
        )

    def __add__(self, other: Matrix) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self._combine(other, lambda a, b: a + b)

    def __sub__(self, other: Matrix) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self._combine(other, lambda a, b: a - b)

    def __neg__(self) -> Matrix:
        return self._map(lambda v: -v)

    def __mul__(self, scalar: float) -> Matrix:
        if not isinstance(scalar, Real):
            return NotImplemented
        return self._map(lambda v: v * scalar)

    __rmul__ = __mul__

    def __truediv__(self, scalar: float) -> Matrix:
        if not isinstance(scalar, Real):
            return NotImplemented
        return self._map(lambda v: v / scalar)

    def __matmul__(self, other: Matrix | Vector) -> Matrix | Vector:
        if isinstance(other, Matrix):
            columns = list(zip(*other._rows))
            return Matrix(
                tuple(
                    tuple(sum(a * b for a, b in zip(row, col)) for col in columns)
                    for row in self._rows
                )
            )
        if isinstance(other, Vector):
            return Vector(*(sum(a * b for a, b in zip(row, other)) for row in self._rows))
        return NotImplemented

    def __rmatmul__(self, other: Vector) -> Vector:
        if isinstance(other, Vector):
            return Vector(
                *(sum(a * b for a, b in zip(other, col)) for col in zip(*self._rows))
            )
        return NotImplemented

    def transpose(self) -> Matrix:
        return Matrix(tuple(zip(*self._rows)))

    def det(self) -> float:
        (a, b, c), (d, e, f), (g, h, i) = self._rows
        return a * (e * i - f * h) + b * (f * g - d * i) + c * (d * h - e * g)

    def trace(self) -> float:
        return self._rows[0][0] + self._rows[1][1] + self._rows[2][2]

    def cofactor(self, i: int, j: int) -> float:
        """Signed minor obtained by deleting row ``i`` and column ``j``."""
        if not (0 <= i < 3 and 0 <= j < 3):
            raise IndexError("cofactor indices must lie in 0..2")
        (a, b), (c, d) = (
            [v for col, v in enumerate(row) if col != j]
            for r, row in enumerate(self._rows)
            if r != i
        )
        return (-1) ** (i + j) * (a * d - b * c)

    def inverse(self) -> Matrix:
        determinant = self.det()
        if determinant == 0.0:
            raise ValueError("matrix is singular")
        return Matrix(
            tuple(
                tuple(self.cofactor(j, i) / determinant for j in range(3))
                for i in range(3)
            )
        )

    def exp(self, scaling: int = DEFAULT_EXP_SCALING) -> Matrix:
        """Matrix exponential by Taylor series with scaling and squaring."""
        if scaling < 0:
            raise ValueError("scaling must be non-negative")
        step = self / (2.0 ** scaling)
        result = _IDENTITY
        term = step
        for t in range(1, _EXP_TERMS + 1):
            result = result + term
            term = (term @ step) / (t + 1)
        for _ in range(scaling):
            result = result @ result
        return result

    def sinch(self) -> Matrix:
        """Compute ``M^-1 (I - exp(-M))``, by series when ``M`` is near singular."""
        neg = -self
        if abs(self.det()) > _SINCH_DET_THRESHOLD:
            return -(neg.inverse()) @ (_IDENTITY - neg.exp())
        result = _IDENTITY
        term = neg / 2.0
        for t in range(2, _SINCH_TERMS + 1):
            result = result + term
            term = (term @ neg) / (t + 1)
        return result

    def anticommutator(self, other: Matrix) -> Matrix:
        return self @ other + other @ self

    def commutator(self, other: Matrix) -> Matrix:
        return self @ other - other @ self


_IDENTITY = Matrix(1, 0, 0, 0, 1, 0, 0, 0, 1)