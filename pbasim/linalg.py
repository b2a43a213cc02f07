"""Operations combining vectors and matrices."""

from __future__ import annotations

import math

from pbasim.matrix import Matrix
from pbasim.vector import Vector

_ORDERED_SINCH_TERMS = 50
_MIN_ROTATION_ANGLE = 1.0e-7


def pauli0() -> Matrix:
    return Matrix(0, 0, 0, 0, 0, 1, 0, -1, 0)


def pauli1() -> Matrix:
    return Matrix(0, 0, -1, 0, 0, 0, 1, 0, 0)


def pauli2() -> Matrix:
    return Matrix(0, 1, 0, -1, 0, 0, 0, 0, 0)


def unit_matrix() -> Matrix:
    return Matrix(1, 0, 0, 0, 1, 0, 0, 0, 1)


def outer_product(v1: Vector, v2: Vector) -> Matrix:
    """Matrix with entries ``v1[i] * v2[j]``."""
    return Matrix(tuple(tuple(a * b for b in v2) for a in v1))


def rotation_matrix(axis: Vector, angle: float) -> Matrix:
    """Rotation by ``angle`` radians about ``axis``, applied as ``v @ R``."""
    if abs(angle) < _MIN_ROTATION_ANGLE:
        return unit_matrix()
    cosa = math.cos(angle)
    sina = math.sin(angle)
    ax = axis.normalized()
    return (
        unit_matrix() * cosa
        + outer_product(ax, ax) * (1.0 - cosa)
        + pauli0() * (axis.x * sina)
        + pauli1() * (axis.y * sina)
        + pauli2() * (axis.z * sina)
    )


def mat_vec(m: Matrix, v: Vector) -> Vector:
    """Matrix times column vector."""
    return m @ v


def vec_mat(v: Vector, m: Matrix) -> Vector:
    """Row vector times matrix."""
    return v @ m


def ordered_sinch(a: Matrix, b: Matrix) -> Matrix:
    """Series solution of the ordered sinch of two matrices."""
    result = unit_matrix()
    term = unit_matrix()
    for t in range(1, _ORDERED_SINCH_TERMS + 1):
        term = -(a @ term + term @ b) / (t + 1)
        result = result + term
    return result