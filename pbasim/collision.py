"""Collision detection and response against infinite planes."""

from __future__ import annotations

from dataclasses import dataclass, field

from pbasim.dynamical_state import DynamicalState
from pbasim.vector import Vector

_MIN_SPEED_SQUARED = 1.0e-12
_TINY_NORMAL = Vector(1.0e-6, 1.0e-6, 1.0e-6)
_MAX_BOUNCES = 100


@dataclass(frozen=True)
class CollisionInfinitePlane:
    """A plane through ``p0`` with the given normal; the normal side is outside."""

    normal: Vector
    p0: Vector

    def hit(
        self, x0: Vector, xu: Vector, v: Vector, dt: float, radius: float = 0.0
    ) -> tuple[Vector, float] | None:
        """Find where the path from ``x0`` to ``xu`` meets the plane.

        Returns the hit point and the time from ``x0`` to it, or None.
        """
        if v.dot(v) < _MIN_SPEED_SQUARED:
            return None
        fx0 = self.normal.dot(x0 - self.p0)
        fxu = self.normal.dot(xu - self.p0)
        vn = self.normal.dot(v)
        if fx0 <= 0.0 and vn < 0.0:
            return x0, 0.0
        if not (fxu == 0.0 or fx0 * fxu < 0.0):
            return None
        if vn == 0.0:
            vn = self.normal.dot(_TINY_NORMAL)
        dth = self.normal.dot(self.p0 - x0) / vn
        return x0 + v * dth, dth

    def handle(
        self,
        xs: Vector,
        vs: Vector,
        dt: float,
        xh: Vector,
        dth: float,
        sticky: float,
        restitution: float,
    ) -> tuple[Vector, Vector]:
        """Bounce off the plane at ``xh``; return the end position and velocity."""
        vr = vs * sticky - self.normal * ((sticky + restitution) * self.normal.dot(vs))
        xr = xh + vr * (dt - dth)
        return xr, vr


@dataclass
class CollisionData:
    """The earliest plane hit found along a path."""

    hit_time: float
    xh: Vector
    hit_plane: bool = False
    plane: CollisionInfinitePlane | None = None
    hit_index: int = -1


@dataclass
class CollisionSurface:
    """A collection of planes with shared bounce coefficients."""

    planes: list[CollisionInfinitePlane] = field(default_factory=list)
    visible: bool = True
    wireframe: bool = True
    points: bool = False
    coeff_restitution: float = 1.0
    coeff_sticky: float = 1.0

    def add_plane(self, plane: CollisionInfinitePlane) -> None:
        self.planes.append(plane)

    def hit(
        self, x0: Vector, xu: Vector, v: Vector, dt: float, radius: float = 0.0
    ) -> CollisionData | None:
        """Test every plane; return the hit nearest in time, or None."""
        data = CollisionData(hit_time=2.0 * dt, xh=x0)
        any_hit = False
        for index, plane in enumerate(self.planes):
            found = plane.hit(x0, xu, v, dt, radius)
            if found is None:
                continue
            any_hit = True
            xh, dth = found
            if abs(dth) < abs(data.hit_time):
                data = CollisionData(dth, xh, True, plane, index)
        return data if any_hit else None


@dataclass
class ElasticCollisionHandler:
    """Bounces particles off a collision surface after a position update."""

    surface: CollisionSurface = field(default_factory=CollisionSurface)

    def handle_collisions(self, dt: float, state: DynamicalState) -> None:
        """Replay each particle's last step of length ``dt`` against the surface."""
        surf = self.surface
        for i in range(len(state)):
            v0 = state.get("vel", i)
            xr = state.get("pos", i)
            x0 = xr - v0 * dt
            vr = v0
            radius = state.get("rad", i)
            running_dt = dt
            for _ in range(_MAX_BOUNCES):
                data = surf.hit(x0, xr, v0, running_dt, radius)
                if data is None:
                    break
                if data.hit_plane:
                    xr, vr = data.plane.handle(
                        x0, v0, running_dt, data.xh, data.hit_time,
                        surf.coeff_sticky, surf.coeff_restitution,
                    )
                x0 = data.xh
                v0 = vr
                running_dt -= data.hit_time
                if running_dt <= 0.0:
                    break
            state.set("pos", i, xr)
            state.set("vel", i, vr)