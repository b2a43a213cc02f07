"""Particle-based animation building blocks: vectors and matrices, particle state, neighbour search, plane collisions, forces and explicit integration steps."""

__version__ = "0.1.0"