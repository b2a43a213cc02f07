import pytest

from pbasim.collision import CollisionInfinitePlane, CollisionSurface, ElasticCollisionHandler
from pbasim.dynamical_state import DynamicalState
from pbasim.dynamics import AdvancePosition, AdvancePositionWithCollisions, AdvanceVelocity
from pbasim.forces import GravityForce
from pbasim.vector import Vector


def _state(pos, vel):
    state = DynamicalState()
    state.add()
    state.set("pos", 0, pos)
    state.set("vel", 0, vel)
    return state


def test_advance_position_moves_along_velocity():
    vel = Vector(1.0, 2.0, 3.0)
    state = _state(Vector(), vel)
    solver = AdvancePosition(state)
    solver.init()
    solver.solve(0.5)
    assert state.get("pos", 0) == vel * 0.5
    assert state.get("vel", 0) == vel


def test_advance_velocity_uses_force():
    g = Vector(0.0, -2.0, 0.0)
    state = _state(Vector(), Vector())
    solver = AdvanceVelocity(state, GravityForce(g))
    solver.init()
    solver.solve(0.25)
    assert state.get("vel", 0) == g * 0.25
    assert state.get("accel", 0) == g


def test_collisions_bounce_off_floor():
    surface = CollisionSurface()
    surface.add_plane(CollisionInfinitePlane(Vector(0.0, 1.0, 0.0), Vector()))
    v0 = Vector(0.0, -4.0, 0.0)
    state = _state(Vector(0.0, 1.0, 0.0), v0)
    solver = AdvancePositionWithCollisions(state, ElasticCollisionHandler(surface))
    solver.init()
    solver.solve(0.5)
    assert state.get("vel", 0) == -v0
    assert state.get("pos", 0).y > 0.0
    assert state.get("pos", 0).y == pytest.approx(1.0)


def test_collisions_without_hit_match_plain_advance():
    surface = CollisionSurface()
    surface.add_plane(CollisionInfinitePlane(Vector(0.0, 1.0, 0.0), Vector()))
    vel = Vector(1.0, 0.5, 0.0)
    a = _state(Vector(0.0, 1.0, 0.0), vel)
    b = _state(Vector(0.0, 1.0, 0.0), vel)
    AdvancePositionWithCollisions(a, ElasticCollisionHandler(surface)).solve(0.1)
    AdvancePosition(b).solve(0.1)
    assert a.get("pos", 0) == b.get("pos", 0)
    assert a.get("vel", 0) == vel