"""
Boundary Loop of a Face Set
===========================

Turns a face selection into its ordered boundary vertex loop.

PIPELINE:
    1. c = d₁ᵀ x                     signed boundary chain
    2. c[e] = +1 → (first, second)   oriented boundary half-edges
       c[e] = -1 → (second, first)
    3. stitch: follow head → next tail through an explicit
       tail → head map until the walk returns to its start

VALID INPUT:
    A face set whose boundary is exactly ONE simple cycle
    (a disk, consistently oriented).

FAIL-FAST on everything else (BoundaryStitchError):
    - chain coefficient other than ±1   (inconsistent orientation)
    - no boundary                       (closed surface or empty set)
    - two half-edges leaving one vertex (pinched / non-manifold boundary)
    - a head with no outgoing half-edge
    - walk closes before using every half-edge (several boundary loops)

A shrunken region can be two patches sharing one vertex (a bowtie):
χ = 1 and one vertex/edge component, but that vertex starts two
boundary half-edges. pinched_vertices() names such vertices without
raising.
"""

from typing import Dict, Iterable, List, Tuple

from ..contract.connectivity import MeshConnectivity
from ..operators.incidence import boundary_chain


class BoundaryStitchError(ValueError):
    """Face set boundary is not a single simple loop."""


def boundary_halfedges(mesh: MeshConnectivity, faces: Iterable[int],
                       d1=None) -> List[Tuple[int, int]]:
    """
    Oriented boundary half-edges (tail, head) of a face set, ordered by edge id.
    """
    chain = boundary_chain(mesh, faces, d1=d1)

    halfedges = []
    for e in sorted(chain):
        coeff = chain[e]
        if abs(coeff) != 1:
            raise BoundaryStitchError(
                f"Edge {e} has boundary coefficient {coeff}; "
                f"face set is not consistently oriented or not manifold"
            )
        first, second = mesh.edge_vertices(e)
        halfedges.append((first, second) if coeff > 0 else (second, first))
    return halfedges


def boundary_vertex_loop(mesh: MeshConnectivity, faces: Iterable[int],
                         d1=None) -> List[int]:
    """
    Ordered boundary vertices of a face set.

    The loop starts at the smallest boundary vertex and follows the
    boundary orientation induced by the faces. The start vertex appears
    once (the closing edge back to it is implicit).

    Raises:
        BoundaryStitchError: see module docstring
    """
    halfedges = boundary_halfedges(mesh, faces, d1=d1)
    if not halfedges:
        raise BoundaryStitchError("Face set has no boundary (empty or closed surface)")

    next_vertex = {}
    for tail, head in halfedges:
        if tail in next_vertex:
            raise BoundaryStitchError(
                f"Vertex {tail} starts two boundary half-edges "
                f"(→{next_vertex[tail]} and →{head}); boundary is not a simple loop"
            )
        next_vertex[tail] = head

    start = min(next_vertex)
    loop = [start]
    v = next_vertex[start]
    while v != start:
        if v not in next_vertex:
            raise BoundaryStitchError(f"No boundary half-edge leaves vertex {v}")
        if len(loop) >= len(next_vertex):
            raise BoundaryStitchError(f"Boundary walk from {start} does not close")
        loop.append(v)
        v = next_vertex[v]

    if len(loop) != len(halfedges):
        raise BoundaryStitchError(
            f"Boundary has more than one loop: walk from {start} used "
            f"{len(loop)} of {len(halfedges)} half-edges"
        )

    return loop


def pinched_vertices(mesh: MeshConnectivity, faces: Iterable[int],
                     d1=None) -> List[int]:
    """
    Boundary vertices that start more than one boundary half-edge, ascending.

    Empty for a disk whose boundary is a simple loop. A bowtie (two
    patches meeting at one vertex) returns the shared vertex.
    """
    starts: Dict[int, int] = {}
    for tail, _ in boundary_halfedges(mesh, faces, d1=d1):
        starts[tail] = starts.get(tail, 0) + 1
    return sorted(v for v, n in starts.items() if n > 1)
