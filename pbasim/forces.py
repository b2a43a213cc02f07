"""Forces that accumulate per-particle accelerations into a state."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Protocol

from pbasim.dynamical_state import DynamicalState
from pbasim.vector import Vector


class _Force(Protocol):
    def compute(self, state: DynamicalState, dt: float) -> None: ...


@dataclass
class GravityForce:
    """Adds a constant acceleration to every particle."""

    gravity: Vector = Vector(0.0, -9.8, 0.0)

    def compute(self, state: DynamicalState, dt: float) -> None:
        for p, accel in enumerate(state.attribute("accel")):
            state.set("accel", p, accel + self.gravity)


@dataclass
class HarmonicOscillatorForce:
    """Pulls every particle towards the origin with spring constant ``kd``."""

    kd: float = 1.0

    def compute(self, state: DynamicalState, dt: float) -> None:
        particles = zip(
            state.attribute("accel"), state.attribute("pos"), state.attribute("mass")
        )
        for p, (accel, pos, mass) in enumerate(particles):
            state.set("accel", p, accel - pos * self.kd / mass)


@dataclass
class AccumulatingForce:
    """Zeroes accelerations, then lets each contained force add to them."""

    forces: list[_Force] = field(default_factory=list)

    def add_force(self, force: _Force) -> None:
        self.forces.append(force)

    def compute(self, state: DynamicalState, dt: float) -> None:
        zero = Vector(0.0, 0.0, 0.0)
        for p in range(len(state)):
            state.set("accel", p, zero)
        for force in self.forces:
            force.compute(state, dt)