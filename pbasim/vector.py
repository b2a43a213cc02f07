"""Three-component vectors, RGBA colours and basic vector operations."""

from __future__ import annotations

import math
from dataclasses import dataclass
from numbers import Real
from typing import Iterator


@dataclass(frozen=True, slots=True)
class Vector:
    """An immutable 3D vector of floats."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y
        yield self.z

    def __len__(self) -> int:
        return 3

    def __getitem__(self, index: int) -> float:
        return (self.x, self.y, self.z)[index]

    def __add__(self, other: Vector) -> Vector:
        if not isinstance(other, Vector):
            return NotImplemented
        return Vector(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: Vector) -> Vector:
        if not isinstance(other, Vector):
            return NotImplemented
        return Vector(self.x - other.x, self.y - other.y, self.z - other.z)

    def __neg__(self) -> Vector:
        return Vector(-self.x, -self.y, -self.z)

    def __mul__(self, scalar: float) -> Vector:
        if not isinstance(scalar, Real):
            return NotImplemented
        return Vector(self.x * scalar, self.y * scalar, self.z * scalar)

    __rmul__ = __mul__

    def __truediv__(self, scalar: float) -> Vector:
        if not isinstance(scalar, Real):
            return NotImplemented
        return Vector(self.x / scalar, self.y / scalar, self.z / scalar)

    def dot(self, other: Vector) -> float:
        """Scalar product."""
        return self.x * other.x + self.y * other.y + self.z * other.z

    def cross(self, other: Vector) -> Vector:
        """Vector product ``self x other``."""
        return Vector(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x,
        )

    def magnitude(self) -> float:
        """Euclidean length."""
        return math.sqrt(self.dot(self))

    def normalized(self) -> Vector:
        """Unit vector in the same direction; a zero vector has none."""
        length = self.magnitude()
        if length == 0.0:
            raise ValueError("cannot normalise a zero vector")
        return self / length


@dataclass(frozen=True, slots=True)
class Color:
    """An RGBA colour."""

    r: float
    g: float
    b: float
    a: float

    def __iter__(self) -> Iterator[float]:
        yield self.r
        yield self.g
        yield self.b
        yield self.a


def cross_product(v1: Vector, v2: Vector) -> Vector:
    """Vector product of two vectors."""
    return v1.cross(v2)


def dot_product(v1: Vector, v2: Vector) -> float:
    """Scalar product of two vectors."""
    return v1.dot(v2)


def rotate_vector(v: Vector, axis: Vector, angle: float) -> Vector:
    """Rotate ``v`` by ``angle`` radians about the unit vector ``axis``."""
    c = math.cos(angle)
    s = math.sin(angle)
    return v * c + axis * (axis.dot(v) * (1.0 - c)) + axis.cross(v) * s