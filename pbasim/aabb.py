"""Axis-aligned bounding boxes."""

from __future__ import annotations

from dataclasses import dataclass

from pbasim.vector import Vector


@dataclass(frozen=True)
class AABB:
    """A box spanned by its lower-left and upper-right corners."""

    llc: Vector = Vector()
    urc: Vector = Vector()

    def is_inside(self, point: Vector) -> bool:
        """True when the point lies within the box, boundary included."""
        return all(lo <= p <= hi for p, lo, hi in zip(point, self.llc, self.urc))