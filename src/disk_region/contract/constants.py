"""
Global constants for disk_region
================================

All magic numbers in ONE place.
"""

# Topology
DISK_EULER_CHARACTERISTIC = 1   # χ = V - E + F of a single-loop disk patch
CLOSED_SURFACE_CHI = 2          # χ of a sphere (tetrahedron, cube, ...)
TORUS_CHI = 0                   # χ of a closed genus-1 surface

# Phase 1 growth bound.
# None = no explicit cap. Growth is monotone and the mesh is finite, so the
# plateau check in grow_until_disk() still stops the loop.
DEFAULT_MAX_GROW_STEPS = None

# Mesh contract
MIN_FACE_SIZE = 3
MIN_TORUS_SIZE = 3     # rows, cols >= 3 or periodic edges coincide

# Seed file format: "v <index>" per seed vertex
SEED_VERTEX_TOKEN = "v"

# =============================================================================
# ORIENTATION CONVENTIONS
# =============================================================================
#
# EDGES:
#   Stored as (i, j) with i < j. i is the FIRST endpoint, j the SECOND.
#
# d₀: C⁰ → C¹   shape (E, V)
#   d₀[e, i] = -1, d₀[e, j] = +1
#
# d₁: C¹ → C²   shape (F, E)   (the boundary operator, transposed as ∂₂)
#   d₁[f, e] = +1 if face f traverses e as first → second
#   d₁[f, e] = -1 if face f traverses e as second → first
#
# BOUNDARY CHAIN of a face set S with indicator x:
#   c = d₁ᵀ x
#   Interior edges of a consistently oriented patch cancel to 0.
#   c[e] = +1 → boundary half-edge first → second
#   c[e] = -1 → boundary half-edge second → first
#
