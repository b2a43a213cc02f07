"""Explicit integration steps for positions and velocities."""

from __future__ import annotations

from typing import Protocol

from pbasim.collision import ElasticCollisionHandler
from pbasim.dynamical_state import DynamicalState


class _Force(Protocol):
    def compute(self, state: DynamicalState, dt: float) -> None: ...


def _check_attributes(state: DynamicalState, *names: str) -> None:
    """Ensure each named attribute holds one value per particle."""
    count = len(state)
    for name in names:
        values = list(state.attribute(name))
        if len(values) != count:
            raise ValueError(
                f"attribute {name!r} holds {len(values)} values for {count} particles"
            )


def _advance_positions(state: DynamicalState, dt: float) -> None:
    for p, (pos, vel) in enumerate(zip(state.attribute("pos"), state.attribute("vel"))):
        state.set("pos", p, pos + vel * dt)


class AdvancePosition:
    """Moves every particle along its velocity."""

    def __init__(self, state: DynamicalState) -> None:
        self.state = state

    def init(self) -> None:
        """Check that the state carries the attributes this step reads."""
        _check_attributes(self.state, "pos", "vel")

    def solve(self, dt: float) -> None:
        _advance_positions(self.state, dt)


class AdvancePositionWithCollisions:
    """Moves every particle along its velocity, then resolves collisions."""

    def __init__(self, state: DynamicalState, handler: ElasticCollisionHandler) -> None:
        self.state = state
        self.handler = handler

    def init(self) -> None:
        """Check that the state carries the attributes this step reads."""
        _check_attributes(self.state, "pos", "vel", "rad")

    def solve(self, dt: float) -> None:
        _advance_positions(self.state, dt)
        self.handler.handle_collisions(dt, self.state)


class AdvanceVelocity:
    """Computes accelerations from a force and updates velocities with them."""

    def __init__(self, state: DynamicalState, force: _Force) -> None:
        self.state = state
        self.force = force

    def init(self) -> None:
        """Check that the state carries the attributes this step reads."""
        _check_attributes(self.state, "vel", "accel", "mass")

    def solve(self, dt: float) -> None:
        self.force.compute(self.state, dt)
        state = self.state
        for p, (vel, accel) in enumerate(
            zip(state.attribute("vel"), state.attribute("accel"))
        ):
            state.set("vel", p, vel + accel * dt)