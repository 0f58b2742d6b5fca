"""
Triangulated Grids
==================

Regular triangulations of a square (disk) and of a torus (one handle).

CONSTRUCTION:
    Vertex (r, c) has index r * cols + c.
    Each grid cell with corners
        a = (r, c)      b = (r, c+1)
        d = (r+1, c)    c' = (r+1, c+1)
    is split along the a–c' diagonal into triangles [a, b, c'] and [a, c', d].
    This orientation is shared by every cell, so adjacent triangles traverse
    their common edge in opposite directions.

OUTPUTS:
    grid disk  (rows × cols vertices):
        E = rows(cols-1) + (rows-1)cols + (rows-1)(cols-1)
        F = 2(rows-1)(cols-1)
        χ = 1
    torus      (rows × cols vertices, periodic in both directions):
        E = 3·rows·cols,  F = 2·rows·cols,  χ = 0
"""

import numpy as np
from typing import List

from ..contract.constants import MIN_TORUS_SIZE
from ..contract.structures import create_mesh


def grid_vertex(row: int, col: int, cols: int) -> int:
    """Index of vertex (row, col) in a grid with `cols` columns."""
    return row * cols + col


def _cell_triangles(a: int, b: int, c: int, d: int) -> List[List[int]]:
    return [[a, b, c], [a, c, d]]


def build_grid_disk(rows: int, cols: int) -> dict:
    """
    Triangulated rows × cols vertex grid in the z = 0 plane.

    Args:
        rows, cols: number of vertex rows / columns (each >= 2)

    Returns:
        mesh dict, a topological disk (χ = 1)
    """
    if rows < 2 or cols < 2:
        raise ValueError(f"Grid disk needs rows, cols >= 2, got rows={rows}, cols={cols}")

    V = np.array([(c, r, 0.0) for r in range(rows) for c in range(cols)], dtype=float)

    F = []
    for r in range(rows - 1):
        for c in range(cols - 1):
            F.extend(_cell_triangles(
                grid_vertex(r, c, cols),
                grid_vertex(r, c + 1, cols),
                grid_vertex(r + 1, c + 1, cols),
                grid_vertex(r + 1, c, cols),
            ))

    return create_mesh(V, F, name=f"grid_{rows}x{cols}")


def build_torus_grid(rows: int, cols: int,
                     major_radius: float = 3.0,
                     minor_radius: float = 1.0) -> dict:
    """
    Triangulated torus: the grid with both directions wrapped.

    Rows run around the tube (minor circle), columns around the
    central axis (major circle).

    Args:
        rows, cols: number of vertex rows / columns (each >= 3)
        major_radius, minor_radius: embedding radii (geometry only)

    Returns:
        mesh dict, closed genus-1 surface (χ = 0)

    FAIL-FAST:
        rows or cols < 3 would make periodic edges coincide.
    """
    if rows < MIN_TORUS_SIZE or cols < MIN_TORUS_SIZE:
        raise ValueError(
            f"Torus grid needs rows, cols >= {MIN_TORUS_SIZE}, got rows={rows}, cols={cols}"
        )

    theta = 2.0 * np.pi * np.arange(rows) / rows   # around the tube
    phi = 2.0 * np.pi * np.arange(cols) / cols     # around the axis
    T, P = np.meshgrid(theta, phi, indexing='ij')
    ring = major_radius + minor_radius * np.cos(T)
    V = np.stack([ring * np.cos(P), ring * np.sin(P), minor_radius * np.sin(T)], axis=-1)
    V = V.reshape(rows * cols, 3)

    F = []
    for r in range(rows):
        for c in range(cols):
            r1, c1 = (r + 1) % rows, (c + 1) % cols
            F.extend(_cell_triangles(
                grid_vertex(r, c, cols),
                grid_vertex(r, c1, cols),
                grid_vertex(r1, c1, cols),
                grid_vertex(r1, c, cols),
            ))

    return create_mesh(V, F, name=f"torus_{rows}x{cols}")
