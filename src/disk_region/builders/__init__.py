"""
Mesh builders - pure combinatorial construction, no operators dependency.

EXPORTS:
- Polyhedra: build_single_triangle, build_tetrahedron, build_cube, build_octahedron
- Grids: build_grid_disk, build_torus_grid, grid_vertex
"""

from .polyhedra import build_single_triangle, build_tetrahedron, build_cube, build_octahedron
from .grids import build_grid_disk, build_torus_grid, grid_vertex
