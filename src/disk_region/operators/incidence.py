"""
Signed Incidence Matrices
=========================

Pure combinatorics over MeshConnectivity.

DEFINITIONS:
    d₀: E × V  oriented edge-vertex incidence
        d₀[e, first] = -1, d₀[e, second] = +1
    d₁: F × E  oriented face-edge incidence (the boundary operator)
        d₁[f, e] = ±1 by the direction f traverses e

EXACTNESS:
    d₁ d₀ = 0   (each face boundary is a closed cycle)

BOUNDARY CHAIN:
    For a face selection with 0/1 indicator x, c = d₁ᵀ x is the signed
    edge chain of its boundary. In a consistently oriented patch every
    interior edge is traversed once each way and cancels.

Both operators are scipy.sparse CSR matrices: a face touches a handful of
edges out of the whole mesh.

REFERENCE: Discrete Exterior Calculus (Desbrun et al., 2005)
"""

import numpy as np
import scipy.sparse as sp
from typing import Dict, Iterable

from ..contract.connectivity import MeshConnectivity


def build_d0(mesh: MeshConnectivity) -> sp.csr_matrix:
    """
    Build d₀: C⁰ → C¹ as an (E, V) sparse matrix.

    PROPERTY:
        Each row has exactly one -1 and one +1.
    """
    E = mesh.n_edges
    rows = np.repeat(np.arange(E), 2)
    cols = np.empty(2 * E, dtype=int)
    vals = np.tile([-1, 1], E)
    for e in range(E):
        cols[2 * e], cols[2 * e + 1] = mesh.edge_vertices(e)
    return sp.csr_matrix((vals, (rows, cols)), shape=(E, mesh.n_vertices), dtype=int)


def build_boundary_operator(mesh: MeshConnectivity) -> sp.csr_matrix:
    """
    Build the signed face-edge matrix d₁: C¹ → C² as an (F, E) sparse matrix.

    FAIL-FAST:
        Raises ValueError if a face uses the same edge twice.
    """
    rows, cols, vals = [], [], []
    for f in range(mesh.n_faces):
        face_edges = mesh.face_edges(f)
        if len(set(face_edges)) != len(face_edges):
            raise ValueError(f"Face {f} uses an edge twice: {face_edges}")
        for e, sign in zip(face_edges, mesh.face_edge_signs(f)):
            rows.append(f)
            cols.append(e)
            vals.append(sign)
    return sp.csr_matrix((vals, (rows, cols)), shape=(mesh.n_faces, mesh.n_edges), dtype=int)


def face_indicator(mesh: MeshConnectivity, faces: Iterable[int]) -> np.ndarray:
    """0/1 vector of length F selecting `faces`."""
    x = np.zeros(mesh.n_faces, dtype=int)
    idx = np.fromiter(faces, dtype=int)
    if idx.size and (idx.min() < 0 or idx.max() >= mesh.n_faces):
        raise IndexError(f"Face ids out of range [0, {mesh.n_faces - 1}]")
    x[idx] = 1
    return x


def boundary_chain(mesh: MeshConnectivity, faces: Iterable[int],
                   d1: sp.csr_matrix = None) -> Dict[int, int]:
    """
    Signed boundary chain of a face set: {edge: coefficient} for nonzero
    entries of d₁ᵀ x.

    Args:
        mesh: connectivity
        faces: selected face ids
        d1: prebuilt boundary operator (built on demand if None)

    Returns:
        dict edge → integer coefficient (±1 on a manifold patch)
    """
    if d1 is None:
        d1 = build_boundary_operator(mesh)
    chain = d1.T @ face_indicator(mesh, faces)
    nonzero = np.flatnonzero(chain != 0)
    return {int(e): int(chain[e]) for e in nonzero}
