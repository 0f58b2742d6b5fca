"""
Star, Closure and Growth
========================

One-hop expansion operators on a SimplicialSubset, built only from
MeshConnectivity queries.

DEFINITIONS:
    St(S): S, plus every edge incident to a vertex of S,
           plus every face incident to an edge of the result.
    Cl(S): S, plus every boundary edge of a face of S,
           plus both endpoints of every edge of the result.
    grow(S) = Cl(St(S))

Each operator is a SINGLE pass. Neither iterates to a fixed point;
repeated growth is the caller's loop.

MONOTONICITY:
    St(S) ⊇ S,  Cl(S) ⊇ S,  grow(S) ⊇ S

EULER CHARACTERISTIC:
    χ(S) = |V| - |E| + |F|
    χ = 1 for a connected patch with one boundary loop, no holes, no
    handles. The converse does not hold: a handle cancelled by an extra
    hole also gives χ = 1. Reconstruction uses χ only as a cheap proxy for
    "exactly one boundary loop".
"""

from ..contract.connectivity import MeshConnectivity
from .subset import SimplicialSubset


def star(mesh: MeshConnectivity, subset: SimplicialSubset) -> SimplicialSubset:
    """
    Simplicial star St(S). Returns a new subset; S is not modified.

    Vertices are left unchanged.
    """
    S = subset.copy()

    for v in subset.vertices:
        S.add_edges(mesh.vertex_edges(v))

    # Edges now in S: input edges plus those just added
    for e in list(S.edges):
        S.add_faces(mesh.edge_faces(e))

    return S


def closure(mesh: MeshConnectivity, subset: SimplicialSubset) -> SimplicialSubset:
    """
    Closure Cl(S). Returns a new subset; S is not modified.

    Guarantees downward closure relative to the faces and edges of S.
    """
    S = subset.copy()

    for f in subset.faces:
        S.add_edges(mesh.face_edges(f))

    # Edges now in S: input edges plus those acquired from faces
    for e in list(S.edges):
        S.add_vertices(mesh.edge_vertices(e))

    return S


def grow_disk(mesh: MeshConnectivity, subset: SimplicialSubset) -> SimplicialSubset:
    """
    Replace S in place by Cl(St(S)) and return it.

    In place so the caller's reference follows the growth, as the
    reconstruction loop expects.
    """
    grown = closure(mesh, star(mesh, subset))
    subset.vertices = grown.vertices
    subset.edges = grown.edges
    subset.faces = grown.faces
    return subset


def euler_characteristic(subset: SimplicialSubset) -> int:
    """χ(S) = |V| - |E| + |F|"""
    return len(subset.vertices) - len(subset.edges) + len(subset.faces)


def is_closed(mesh: MeshConnectivity, subset: SimplicialSubset) -> bool:
    """
    True if S is downward closed: every face's edges and vertices and
    every edge's endpoints are members.
    """
    for f in subset.faces:
        if not subset.edges.issuperset(mesh.face_edges(f)):
            return False
        if not subset.vertices.issuperset(mesh.face_vertices(f)):
            return False
    for e in subset.edges:
        if not subset.vertices.issuperset(mesh.edge_vertices(e)):
            return False
    return True
