import pytest

from pbasim.aabb import AABB
from pbasim.dynamical_state import DynamicalState
from pbasim.neighbor_search import NeighborSearch
from pbasim.vector import Vector


@pytest.fixture
def search():
    return NeighborSearch(AABB(Vector(0, 0, 0), Vector(4, 4, 4)), 0.25)


def make_state(points):
    s = DynamicalState()
    s.add(len(points))
    for i, p in enumerate(points):
        s.set("pos", i, p)
    return s


def test_grid_dimensions(search):
    assert search.cell_size == 0.5
    assert search.size == search.nx * search.ny * search.nz
    assert len(search.grid) == search.size


def test_index_round_trip(search):
    for ijk in [(0, 0, 0), (3, 1, 2), (search.nx - 1, search.ny - 1, search.nz - 1)]:
        assert search.cell_coords(search.index_of(*ijk)) == ijk


def test_out_of_range_index_is_size(search):
    assert search.index_of(search.nx, 0, 0) == search.size
    assert search.index_of(-1, 0, 0) == search.size
    assert search.cell_index(Vector(-0.1, 1, 1)) == search.size


def test_cell_index_of_corner(search):
    assert search.cell_index(Vector(0, 0, 0)) == 0


def test_neighbors_near_and_far(search):
    state = make_state([Vector(1, 1, 1), Vector(1.2, 1.1, 0.9), Vector(3.5, 3.5, 3.5)])
    search.populate(state)
    near = search.neighbors(Vector(1, 1, 1))
    assert sorted(near) == [0, 1]
    assert search.neighbors(Vector(3.5, 3.5, 3.5)) == [2]


def test_particles_outside_bounds_are_ignored(search):
    state = make_state([Vector(-1, 1, 1), Vector(1, 1, 1)])
    search.populate(state)
    assert sum(len(c) for c in search.grid) == 1
    assert search.neighbors(Vector(-1, 1, 1)) == []


def test_populate_resets(search):
    search.populate(make_state([Vector(1, 1, 1)]))
    search.populate(make_state([Vector(3, 3, 3)]))
    assert search.neighbors(Vector(1, 1, 1)) == []
    assert search.neighbors(Vector(3, 3, 3)) == [0]


def test_set_cellsize_and_bounds(search):
    search.set_cellsize(1.0)
    assert search.cell_size == 1.0
    assert len(search.grid) == search.size
    search.set_bounds(AABB(Vector(0, 0, 0), Vector(2, 2, 2)))
    assert search.size == search.nx * search.ny * search.nz
    assert search.cell_index(Vector(3, 1, 1)) == search.size