"""
Mesh Connectivity
=================

Read-only incidence tables over a contract mesh dict.

QUERIES:
    vertex → incident edges
    edge   → incident faces, (first, second) endpoints
    face   → boundary edges (cyclic), edge signs, boundary vertices (cyclic)

Element identifiers are plain ints: the position in mesh['V'], mesh['E'],
mesh['F']. Non-cyclic tables are sorted ascending so every traversal is
reproducible.

Built once per mesh and never mutated afterwards.
"""

from collections import defaultdict
from typing import Dict, List, Tuple

from .structures import canonical_edge, validate_mesh


class MeshConnectivity:
    """
    Immutable adjacency tables for one mesh.

    Construct with build_connectivity(mesh). Unknown ids raise IndexError.
    """

    def __init__(self,
                 n_vertices: int,
                 edges: List[Tuple[int, int]],
                 faces: List[List[int]],
                 name: str = "unnamed"):
        self.name = name
        self._edges = tuple(tuple(e) for e in edges)
        self._faces = tuple(tuple(f) for f in faces)
        self._n_vertices = n_vertices

        edge_index: Dict[Tuple[int, int], int] = {e: k for k, e in enumerate(self._edges)}

        vertex_edges = defaultdict(list)
        for e_idx, (i, j) in enumerate(self._edges):
            vertex_edges[i].append(e_idx)
            vertex_edges[j].append(e_idx)

        edge_faces = defaultdict(list)
        face_edges = []
        face_signs = []
        for f_idx, face in enumerate(self._faces):
            n = len(face)
            cycle, signs = [], []
            for k in range(n):
                key, sign = canonical_edge(face[k], face[(k + 1) % n])
                e_idx = edge_index[key]
                cycle.append(e_idx)
                signs.append(sign)
                edge_faces[e_idx].append(f_idx)
            face_edges.append(tuple(cycle))
            face_signs.append(tuple(signs))

        self._vertex_edges = tuple(tuple(sorted(vertex_edges[v])) for v in range(n_vertices))
        self._edge_faces = tuple(tuple(sorted(edge_faces[e])) for e in range(len(self._edges)))
        self._face_edges = tuple(face_edges)
        self._face_signs = tuple(face_signs)

    # --- counts -----------------------------------------------------------

    @property
    def n_vertices(self) -> int:
        return self._n_vertices

    @property
    def n_edges(self) -> int:
        return len(self._edges)

    @property
    def n_faces(self) -> int:
        return len(self._faces)

    def n_elements(self) -> int:
        """Total element count V + E + F (upper bound for any subset size)."""
        return self.n_vertices + self.n_edges + self.n_faces

    # --- membership -------------------------------------------------------

    def has_vertex(self, v: int) -> bool:
        return 0 <= v < self._n_vertices

    def _check(self, idx: int, n: int, kind: str) -> None:
        if not 0 <= idx < n:
            raise IndexError(f"{kind} {idx} not in mesh '{self.name}' (valid range [0, {n-1}])")

    # --- adjacency --------------------------------------------------------

    def vertex_edges(self, v: int) -> Tuple[int, ...]:
        self._check(v, self._n_vertices, "Vertex")
        return self._vertex_edges[v]

    def edge_faces(self, e: int) -> Tuple[int, ...]:
        self._check(e, self.n_edges, "Edge")
        return self._edge_faces[e]

    def edge_vertices(self, e: int) -> Tuple[int, int]:
        """(first, second) endpoints; first < second by contract."""
        self._check(e, self.n_edges, "Edge")
        return self._edges[e]

    def face_edges(self, f: int) -> Tuple[int, ...]:
        """Boundary edges of f in cyclic order."""
        self._check(f, self.n_faces, "Face")
        return self._face_edges[f]

    def face_edge_signs(self, f: int) -> Tuple[int, ...]:
        """+1 where f traverses the edge first → second, -1 otherwise."""
        self._check(f, self.n_faces, "Face")
        return self._face_signs[f]

    def face_vertices(self, f: int) -> Tuple[int, ...]:
        """Boundary vertices of f in cyclic order."""
        self._check(f, self.n_faces, "Face")
        return self._faces[f]

    def __repr__(self) -> str:
        return (f"MeshConnectivity(name={self.name!r}, V={self.n_vertices}, "
                f"E={self.n_edges}, F={self.n_faces})")


def build_connectivity(mesh: dict) -> MeshConnectivity:
    """
    Build connectivity tables from a contract-compliant mesh dict.

    FAIL-FAST:
        Raises ValueError if the mesh violates the contract.
    """
    validate_mesh(mesh, strict=True)
    return MeshConnectivity(
        n_vertices=len(mesh['V']),
        edges=mesh['E'],
        faces=mesh['F'],
        name=mesh.get('name', 'unnamed'),
    )
