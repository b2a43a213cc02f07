"""Emitting blocks of particles into a state."""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass, field
from itertools import product

from pbasim.dynamical_state import DynamicalState
from pbasim.vector import Color, Vector

_log = logging.getLogger(__name__)


@dataclass
class ParticleEmitter:
    """Creates particles with a given colour and random initial velocities."""

    location: Vector = Vector(0.0, 0.0, 0.0)
    velocity: Vector = Vector(0.0, 0.0, 0.0)
    rate: int = 0
    particle_color: Color = Color(0.0, 0.0, 1.0, 1.0)
    rng: random.Random = field(default_factory=random.Random, repr=False)

    def emit_cube(self, state: DynamicalState, per_axis: int, center: Vector) -> range:
        """Add a cube of ``per_axis**3`` particles centred on ``center``.

        Particles are spaced by twice the radius of the new particles.
        Returns the indices of the added particles.
        """
        if per_axis < 1:
            raise ValueError("per_axis must be at least 1")
        count = per_axis ** 3
        last = state.add(count)
        first = last + 1 - count
        _log.debug("Emit: Total Points %d", len(state))

        half = (per_axis - 1) * 0.5
        indices = range(first, last + 1)
        for i, (x, y, z) in zip(indices, product(range(per_axis), repeat=3)):
            spacing = 2.0 * state.get("rad", i)
            offset = Vector(x - half, y - half, z - half) * spacing
            state.set("pos", i, center + offset)
            state.set(
                "vel",
                i,
                Vector(self.rng.random(), self.rng.random(), self.rng.random()),
            )
            state.set("mass", i, 1.0)
            state.set("ci", i, self.particle_color)
            state.set("id", i, i)
        return indices