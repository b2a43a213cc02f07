# pbasim

Building blocks for particle-based animation in plain Python, with no
third-party dependencies.

## Modules

- `pbasim.vector`: `Vector`, an immutable 3D vector (`+`, `-`, negation,
  multiplication and division by a number, `dot`, `cross`, `magnitude`,
  `normalized`, which raises `ValueError` for a zero vector); `Color`, an RGBA
  colour; and the functions `cross_product`, `dot_product` and
  `rotate_vector(v, axis, angle)` for rotating about a unit axis.
- `pbasim.matrix`: `Matrix`, an immutable 3x3 matrix built from nothing (zero
  matrix), nine values in row order, or three rows. It supports `+`, `-`,
  scaling by a number, and `@` for matrix-matrix, matrix-vector (`m @ v`) and
  vector-matrix (`v @ m`) products. Methods: `transpose`, `det`, `trace`,
  `cofactor`, `inverse` (raises `ValueError` when singular), `exp` (Taylor
  series with scaling and squaring), `sinch`, `commutator` and
  `anticommutator`.
- `pbasim.linalg`: `unit_matrix`, `outer_product`, `rotation_matrix`,
  `mat_vec`, `vec_mat`, `ordered_sinch` and the generators `pauli0`, `pauli1`,
  `pauli2`.
- `pbasim.aabb`: `AABB`, an axis-aligned box with `is_inside` (boundary
  included).
- `pbasim.dynamical_state`: `DynamicalState`, a set of particles with named
  per-particle attributes. Every state starts with `pos`, `vel`, `accel`
  (vectors), `mass` (default 1.0), `rad` (default 0.0), `id` (default -1) and
  `ci` (colour); `create_attr` adds more of type int, float, `Vector` or
  `Color`. Use `add`, `get`, `set`, `attribute`, `clear`,
  `erase_outside_bounds` and `len()`. Unknown names raise `KeyError`, bad
  indices `IndexError`, values of the wrong kind `TypeError`.
  `bounding_box(state)` returns the `AABB` around all positions.
- `pbasim.neighbor_search`: `NeighborSearch(bounds, radius)`, a uniform grid of
  cells of side `2 * radius`. `populate(state)` bins the particles and
  `neighbors(pos)` lists those in the cell holding `pos` and the 26 around it.
- `pbasim.collision`: `CollisionInfinitePlane` (`hit` returns the hit point and
  time or `None`; `handle` returns the bounced position and velocity),
  `CollisionData`, `CollisionSurface` (a list of planes with
  `coeff_restitution` and `coeff_sticky`, both 1.0 by default) and
  `ElasticCollisionHandler`, which replays each particle's last step against
  the surface, bouncing at most 100 times per step.
- `pbasim.forces`: `GravityForce`, `HarmonicOscillatorForce` and
  `AccumulatingForce`, which zeroes accelerations before adding those of its
  forces.
- `pbasim.dynamics`: the solver steps `AdvancePosition`,
  `AdvancePositionWithCollisions` and `AdvanceVelocity`, each with `init`
  (checks the attributes it reads) and `solve(dt)`.
- `pbasim.emitter`: `ParticleEmitter.emit_cube(state, per_axis, center)` adds
  `per_axis**3` particles centred on `center`, spaced by twice the `rad` of
  the new particles, with random velocities in [0, 1), mass 1.0, the
  emitter's colour and `id` equal to the index. It returns the range of new
  indices. Since new particles have `rad` 0.0, they all start at `center`
  until you give them a radius and place them yourself.
- `pbasim.thing`: `PbaThing`, which holds a time step (`dt`, 1/24 by default)
  and an animation switch. `keyboard` handles space (start/stop) and `t`/`T`
  (shrink/grow `dt` by a factor of 1.1); `idle` calls `solve` when animating;
  `solve` calls the `step` callable given to the constructor with `dt`;
  `usage` prints and returns the key bindings; `metadata` returns
  `{"<name>:dt": ...}`.

## Installing

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Example

```python
from pbasim.vector import Vector
from pbasim.dynamical_state import DynamicalState
from pbasim.forces import AccumulatingForce, GravityForce
from pbasim.collision import CollisionInfinitePlane, CollisionSurface, ElasticCollisionHandler
from pbasim.dynamics import AdvanceVelocity, AdvancePositionWithCollisions

state = DynamicalState("particles")
for x in (-1.0, 0.0, 1.0):
    i = state.add()
    state.set("pos", i, Vector(x, 2.0, 0.0))
    state.set("rad", i, 0.1)

force = AccumulatingForce()
force.add_force(GravityForce(Vector(0.0, -9.8, 0.0)))

surface = CollisionSurface()
surface.add_plane(CollisionInfinitePlane(Vector(0.0, 1.0, 0.0), Vector(0.0, 0.0, 0.0)))
handler = ElasticCollisionHandler(surface)

velocity_step = AdvanceVelocity(state, force)
position_step = AdvancePositionWithCollisions(state, handler)

dt = 1.0 / 24.0
for _ in range(100):
    velocity_step.solve(dt / 2)
    position_step.solve(dt)
    velocity_step.solve(dt / 2)

print(state.attribute("pos"))
```

The particles fall under gravity and bounce off the plane `y = 0`.

## What it does not do

- There is no display, window or interactive viewer. `PbaThing` only reacts
  to the `keyboard` and `idle` calls your own code makes, and reports by
  printing.
- There are no fluid (SPH) pressure solvers, soft-body springs, or
  higher-order integrators; the package offers the explicit position and
  velocity steps above, which you combine yourself.
- There is no command-line program and nothing is saved to disk.