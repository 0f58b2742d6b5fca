"""
Subset Algebra and Operator Tests
=================================

Tests the SimplicialSubset container, St / Cl / growth, χ, and the
sparse incidence matrices.

Run: python -m pytest tests/core/test_operators.py -v
"""

import pytest
import numpy as np
import sys
import os
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.dirname(os.path.abspath(__file__)))))

from disk_region.builders import (
    build_single_triangle,
    build_cube,
    build_octahedron,
    build_grid_disk,
    build_torus_grid,
    grid_vertex,
)
from disk_region.contract import build_connectivity, create_mesh
from disk_region.operators import (
    SimplicialSubset,
    star,
    closure,
    grow_disk,
    euler_characteristic,
    is_closed,
    build_d0,
    build_boundary_operator,
    face_indicator,
    boundary_chain,
)


@pytest.fixture
def grid():
    return build_connectivity(build_grid_disk(7, 7))


# =============================================================================
# SIMPLICIAL SUBSET
# =============================================================================

def test_subset_construct_partial():
    assert SimplicialSubset() == SimplicialSubset(vertices=(), edges=(), faces=())
    S = SimplicialSubset(edges={1, 2})
    assert S.vertices == set() and S.edges == {1, 2} and S.faces == set()


def test_subset_add_is_idempotent():
    S = SimplicialSubset(vertices={1})
    S.add_vertex(1)
    S.add_edges([4, 4, 5])
    S.add_face(0)
    S.add_face(0)
    assert S == SimplicialSubset({1}, {4, 5}, {0})
    assert len(S) == 4


def test_subset_delete_absent_is_noop():
    S = SimplicialSubset({1, 2}, {3}, {4})
    S.delete_vertex(9)
    S.delete_edges([7, 8])
    S.delete_face(5)
    assert S == SimplicialSubset({1, 2}, {3}, {4})

    S.delete_vertices({1})
    S.delete_edge(3)
    S.delete_faces({4})
    assert S == SimplicialSubset(vertices={2})


def test_subset_equality_ignores_order():
    assert SimplicialSubset([3, 1, 2], [5, 4], [0]) == SimplicialSubset({1, 2, 3}, {4, 5}, {0})
    assert SimplicialSubset({1}) != SimplicialSubset({1}, {0})


def test_subset_union_and_difference():
    A = SimplicialSubset({1, 2}, {10}, {20})
    B = SimplicialSubset({2, 3}, {11}, {20})

    A.add_subset(B)
    assert A == SimplicialSubset({1, 2, 3}, {10, 11}, {20})

    A.delete_subset(B)
    assert A == SimplicialSubset({1}, {10}, set())


def test_subset_copy_is_deep():
    A = SimplicialSubset({1}, {2}, {3})
    B = A.copy()
    B.add_vertex(9)
    B.delete_face(3)
    assert A == SimplicialSubset({1}, {2}, {3})
    assert A.issuperset(SimplicialSubset({1}))
    assert not A.issuperset(B)


def test_subset_is_unhashable():
    with pytest.raises(TypeError):
        hash(SimplicialSubset())


# =============================================================================
# STAR / CLOSURE / GROWTH
# =============================================================================

def test_star_of_triangle_vertex(triangle):
    """St({v0}) adds v0's two edges and the face; vertices unchanged."""
    S = star(triangle, SimplicialSubset(vertices={0}))
    assert S == SimplicialSubset({0}, {0, 1}, {0})


def test_closure_of_single_cube_face(cube):
    S = closure(cube, SimplicialSubset(faces={0}))
    assert S.faces == {0}
    assert S.edges == set(cube.face_edges(0))
    assert S.vertices == {0, 1, 2, 3}
    assert euler_characteristic(S) == 1


def test_star_is_single_pass(grid):
    """St adds faces of new edges but not the edges of those faces."""
    center = grid_vertex(3, 3, 7)
    S = star(grid, SimplicialSubset(vertices={center}))
    assert S.vertices == {center}
    assert len(S.edges) == 6
    assert len(S.faces) == 6
    assert not is_closed(grid, S)
    # No new vertices → a second St changes nothing
    assert star(grid, S) == S


def test_operators_do_not_modify_input(grid):
    S = SimplicialSubset(vertices={grid_vertex(3, 3, 7)})
    before = S.copy()
    star(grid, S)
    closure(grid, S)
    assert S == before


def test_monotonicity(grid):
    """St(S) ⊇ S, Cl(S) ⊇ S, grow(S) ⊇ S."""
    subsets = [
        SimplicialSubset(vertices={0, 24}),
        SimplicialSubset(edges={5, 17}),
        SimplicialSubset(faces={3, 40}),
        SimplicialSubset({10}, {2}, {30}),
    ]
    for S in subsets:
        assert star(grid, S).issuperset(S)
        assert closure(grid, S).issuperset(S)
        before = S.copy()
        assert grow_disk(grid, S).issuperset(before)


def test_closure_validity(grid):
    """Cl(S) is downward closed for arbitrary S."""
    for S in [SimplicialSubset(faces={0, 7, 33}),
              SimplicialSubset(edges={1, 50}),
              star(grid, SimplicialSubset(vertices={8, 40}))]:
        assert is_closed(grid, closure(grid, S))


def test_grow_disk_in_place(grid):
    S = SimplicialSubset(vertices={grid_vertex(3, 3, 7)})
    result = grow_disk(grid, S)
    assert result is S
    assert is_closed(grid, S)
    # Closed star of an interior vertex: 7 vertices, 12 edges, 6 faces
    assert (len(S.vertices), len(S.edges), len(S.faces)) == (7, 12, 6)
    assert euler_characteristic(S) == 1


def test_repeated_growth_keeps_expanding(grid):
    S = SimplicialSubset(vertices={grid_vertex(3, 3, 7)})
    sizes = [len(S)]
    for _ in range(3):
        grow_disk(grid, S)
        sizes.append(len(S))
    assert sizes == sorted(set(sizes)), f"Growth not strictly increasing: {sizes}"


def test_growth_saturates_on_whole_mesh():
    mesh = build_connectivity(build_octahedron())
    S = SimplicialSubset(vertices={0})
    grow_disk(mesh, S)
    grow_disk(mesh, S)
    assert len(S) == mesh.n_elements()
    before = S.copy()
    assert grow_disk(mesh, S) == before


def test_euler_characteristic_counts():
    assert euler_characteristic(SimplicialSubset({1, 2, 3})) == 3
    assert euler_characteristic(SimplicialSubset({1, 2, 3}, {0, 1, 2}, {0})) == 1


# =============================================================================
# INCIDENCE MATRICES
# =============================================================================

@pytest.mark.parametrize("builder", [
    build_single_triangle,
    build_cube,
    build_octahedron,
    lambda: build_grid_disk(4, 5),
    lambda: build_torus_grid(4, 5),
])
def test_exactness_d1_d0(builder):
    """d₁d₀ = 0: every face boundary is a closed cycle."""
    mesh = build_connectivity(builder())
    d0 = build_d0(mesh)
    d1 = build_boundary_operator(mesh)
    assert d0.shape == (mesh.n_edges, mesh.n_vertices)
    assert d1.shape == (mesh.n_faces, mesh.n_edges)
    assert np.all((d1 @ d0).toarray() == 0)


def test_d0_rows():
    mesh = build_connectivity(build_cube())
    d0 = build_d0(mesh).toarray()
    assert np.all(d0.sum(axis=1) == 0)
    assert np.all(np.abs(d0).sum(axis=1) == 2)


def test_face_indicator(cube):
    assert face_indicator(cube, {1, 4}).tolist() == [0, 1, 0, 0, 1, 0]
    with pytest.raises(IndexError):
        face_indicator(cube, {6})


def test_boundary_chain_single_triangle(triangle):
    assert boundary_chain(triangle, {0}) == {0: 1, 1: -1, 2: 1}


def test_boundary_chain_closed_surface_is_empty():
    """Consistent orientation: all edges cancel on a closed surface."""
    for mesh_dict in (build_cube(), build_octahedron(), build_torus_grid(3, 4)):
        mesh = build_connectivity(mesh_dict)
        assert boundary_chain(mesh, range(mesh.n_faces)) == {}


def test_boundary_chain_is_exact_integer():
    """Two triangles both running 0 -> 1: the shared edge gets +2, kept as an int."""
    mesh = build_connectivity(create_mesh(4, [[0, 1, 2], [0, 1, 3]]))
    chain = boundary_chain(mesh, {0, 1})
    assert sorted(chain.values()) == [-1, -1, 1, 1, 2]
    assert all(type(c) is int for c in chain.values())


def test_boundary_chain_grid_perimeter():
    rows, cols = 4, 5
    mesh = build_connectivity(build_grid_disk(rows, cols))
    chain = boundary_chain(mesh, range(mesh.n_faces))
    assert len(chain) == 2 * (rows - 1) + 2 * (cols - 1)
    assert set(chain.values()) <= {-1, 1}
