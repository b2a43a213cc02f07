"""Particle state stored as named per-particle attributes."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from pbasim.aabb import AABB
from pbasim.vector import Color, Vector

_ATTRIBUTE_TYPES = (int, float, Vector, Color)


@dataclass
class _Attribute:
    name: str
    default: Any
    values: list = field(default_factory=list)

    def expand_to(self, size: int) -> None:
        if size > len(self.values):
            self.values.extend([self.default] * (size - len(self.values)))

    def coerce(self, value: Any) -> Any:
        kind = type(self.default)
        if kind in (int, float):
            if isinstance(value, (Vector, Color)):
                raise TypeError(f"attribute {self.name!r} holds {kind.__name__} values")
            return kind(value)
        if not isinstance(value, kind):
            raise TypeError(f"attribute {self.name!r} holds {kind.__name__} values")
        return value


class DynamicalState:
    """A set of particles, each carrying the same named attributes.

    Every state starts with ``pos``, ``vel`` and ``accel`` (vectors),
    ``mass`` and ``rad`` (floats), ``id`` (int) and ``ci`` (colour).
    """

    def __init__(self, name: str = "DynamicalState") -> None:
        self.name = name
        self.time = 0.0
        self._count = 0
        self._attrs: dict[str, _Attribute] = {}
        self.create_attr("pos", Vector(0.0, 0.0, 0.0))
        self.create_attr("vel", Vector(0.0, 0.0, 0.0))
        self.create_attr("accel", Vector(0.0, 0.0, 0.0))
        self.create_attr("mass", 1.0)
        self.create_attr("rad", 0.0)
        self.create_attr("id", -1)
        self.create_attr("ci", Color(1.0, 1.0, 1.0, 0.0))

    def __len__(self) -> int:
        return self._count

    def __contains__(self, name: object) -> bool:
        return name in self._attrs

    def create_attr(self, name: str, default: Any) -> None:
        """Add an attribute with a default value; an existing one is kept."""
        if name in self._attrs:
            return
        if isinstance(default, bool) or not isinstance(default, _ATTRIBUTE_TYPES):
            raise TypeError(f"unsupported attribute type {type(default).__name__}")
        attr = _Attribute(name, default)
        attr.expand_to(self._count)
        self._attrs[name] = attr

    def add(self, count: int = 1) -> int:
        """Append ``count`` particles with default values; return the last index."""
        if count < 1:
            raise ValueError("count must be at least 1")
        self._count += count
        for attr in self._attrs.values():
            attr.expand_to(self._count)
        return self._count - 1

    def clear(self) -> None:
        """Remove every particle and reset the time."""
        for attr in self._attrs.values():
            attr.values.clear()
        self.time = 0.0
        self._count = 0

    def _lookup(self, name: str) -> _Attribute:
        try:
            return self._attrs[name]
        except KeyError:
            raise KeyError(f"no attribute named {name!r}") from None

    def _check_index(self, index: int) -> None:
        if not 0 <= index < self._count:
            raise IndexError(f"particle index {index} out of range")

    def get(self, name: str, index: int) -> Any:
        """Value of attribute ``name`` for particle ``index``."""
        attr = self._lookup(name)
        self._check_index(index)
        return attr.values[index]

    def set(self, name: str, index: int, value: Any) -> None:
        """Store ``value`` in attribute ``name`` of particle ``index``."""
        attr = self._lookup(name)
        self._check_index(index)
        attr.values[index] = attr.coerce(value)

    def attribute(self, name: str) -> tuple:
        """All values of one attribute, in particle order."""
        return tuple(self._lookup(name).values)

    def erase_outside_bounds(self, llc: Vector, urc: Vector) -> int:
        """Drop particles whose position lies outside the box; return how many."""
        box = AABB(llc, urc)
        keep = [box.is_inside(p) for p in self._attrs["pos"].values]
        removed = keep.count(False)
        if removed:
            for attr in self._attrs.values():
                attr.values = [v for v, k in zip(attr.values, keep) if k]
            self._count -= removed
        return removed


def bounding_box(state: DynamicalState) -> AABB:
    """Smallest box holding every particle position."""
    positions = state.attribute("pos")
    if not positions:
        raise ValueError("state has no particles")
    xs, ys, zs = zip(*positions)
    return AABB(Vector(min(xs), min(ys), min(zs)), Vector(max(xs), max(ys), max(zs)))