import pytest

from pbasim.dynamical_state import DynamicalState
from pbasim.forces import AccumulatingForce, GravityForce, HarmonicOscillatorForce
from pbasim.vector import Vector


def _state(n=3):
    state = DynamicalState("test")
    state.add(n)
    for i in range(n):
        state.set("pos", i, Vector(i + 1.0, 2.0 * i, -1.0))
    return state


def test_gravity_adds_to_every_particle():
    g = Vector(0.0, -9.8, 0.0)
    state = _state()
    GravityForce(g).compute(state, 0.1)
    assert state.attribute("accel") == (g, g, g)


def test_gravity_accumulates_on_repeat():
    g = Vector(1.0, 2.0, 3.0)
    state = _state(1)
    force = GravityForce(g)
    force.compute(state, 0.1)
    force.compute(state, 0.1)
    assert state.get("accel", 0) == g * 2


def test_harmonic_points_towards_origin():
    state = _state()
    HarmonicOscillatorForce(2.0).compute(state, 0.1)
    for pos, accel in zip(state.attribute("pos"), state.attribute("accel")):
        assert accel.dot(pos) < 0.0
        assert accel.cross(pos).magnitude() == pytest.approx(0.0)


def test_harmonic_scales_inversely_with_mass():
    light = _state(1)
    heavy = _state(1)
    heavy.set("mass", 0, 2.0)
    force = HarmonicOscillatorForce(3.0)
    force.compute(light, 0.1)
    force.compute(heavy, 0.1)
    a_light = light.get("accel", 0)
    a_heavy = heavy.get("accel", 0)
    assert a_heavy * 2 == a_light


def test_accumulating_resets_then_sums():
    g = Vector(0.0, -1.0, 0.0)
    state = _state(2)
    state.set("accel", 0, Vector(5.0, 5.0, 5.0))
    total = AccumulatingForce()
    total.add_force(GravityForce(g))
    total.add_force(GravityForce(g))
    total.compute(state, 0.1)
    assert state.attribute("accel") == (g * 2, g * 2)


def test_empty_accumulating_zeroes():
    state = _state(2)
    state.set("accel", 1, Vector(1.0, 1.0, 1.0))
    AccumulatingForce().compute(state, 0.1)
    assert state.attribute("accel") == (Vector(), Vector())