"""
Small Closed Surfaces
=====================

Combinatorial polyhedra used as fixtures for the reconstruction tests.

POLYHEDRA INCLUDED:
    - Single triangle (V=3, E=3, F=1)   χ = 1  (a disk by itself)
    - Tetrahedron    (V=4, E=6, F=4)    χ = 2
    - Cube           (V=8, E=12, F=6)   χ = 2  (quad faces)
    - Octahedron     (V=6, E=12, F=8)   χ = 2

Faces are listed with consistent orientation: every interior edge is
traversed once in each direction. Verified for all four by hand and by
tests/core/test_contract.py (builder section).
"""

import numpy as np

from ..contract.structures import create_mesh


def build_single_triangle() -> dict:
    """
    One triangle spanning the whole mesh.

    TOPOLOGY:
        V = 3, E = 3, F = 1
        χ = 3 - 3 + 1 = 1
    """
    V = np.array([[0.0, 0.0, 0.0],
                  [1.0, 0.0, 0.0],
                  [0.0, 1.0, 0.0]])
    F = [[0, 1, 2]]
    return create_mesh(V, F, name="triangle")


def build_tetrahedron() -> dict:
    """
    Regular tetrahedron, faces oriented outward.

    TOPOLOGY:
        V = 4, E = 6, F = 4
        χ = 4 - 6 + 4 = 2
    """
    V = np.array([[1.0, 1.0, 1.0],
                  [1.0, -1.0, -1.0],
                  [-1.0, 1.0, -1.0],
                  [-1.0, -1.0, 1.0]])
    F = [[0, 2, 1],
         [0, 1, 3],
         [0, 3, 2],
         [1, 2, 3]]
    return create_mesh(V, F, name="tetrahedron")


def build_cube() -> dict:
    """
    Unit cube with 6 quad faces.

    Vertex index = 4x + 2y + z for corner (x, y, z) ∈ {0, 1}³.

    TOPOLOGY:
        V = 8, E = 12, F = 6
        χ = 8 - 12 + 6 = 2
    """
    V = np.array([(x, y, z) for x in (0, 1) for y in (0, 1) for z in (0, 1)], dtype=float)
    F = [[0, 1, 3, 2],   # x = 0
         [4, 6, 7, 5],   # x = 1
         [0, 4, 5, 1],   # y = 0
         [2, 3, 7, 6],   # y = 1
         [0, 2, 6, 4],   # z = 0
         [1, 5, 7, 3]]   # z = 1
    return create_mesh(V, F, name="cube")


def build_octahedron() -> dict:
    """
    Octahedron with vertices at ±x, ±y, ±z.

    Vertex order: +x, -x, +y, -y, +z, -z.

    TOPOLOGY:
        V = 6, E = 12, F = 8
        χ = 6 - 12 + 8 = 2
    """
    V = np.array([[1.0, 0.0, 0.0], [-1.0, 0.0, 0.0],
                  [0.0, 1.0, 0.0], [0.0, -1.0, 0.0],
                  [0.0, 0.0, 1.0], [0.0, 0.0, -1.0]])
    F = [[0, 2, 4], [2, 1, 4], [1, 3, 4], [3, 0, 4],
         [2, 0, 5], [1, 2, 5], [3, 1, 5], [0, 3, 5]]
    return create_mesh(V, F, name="octahedron")
