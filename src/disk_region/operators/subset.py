"""
Simplicial Subset
=================

A selection of vertex, edge and face ids from one mesh.

The container does NOT enforce downward closure: mid-shrink candidates
are allowed to be non-closed until closure() is re-applied.
Adding a present element or deleting an absent one is a no-op.
"""

from typing import Iterable


class SimplicialSubset:
    """
    Three id sets: vertices, edges, faces.

    Equality compares the three sets, independent of insertion order.
    Iteration order is left to the caller; sweeps that depend on order
    sort explicitly.
    """

    __slots__ = ('vertices', 'edges', 'faces')

    def __init__(self,
                 vertices: Iterable[int] = (),
                 edges: Iterable[int] = (),
                 faces: Iterable[int] = ()):
        self.vertices = set(vertices)
        self.edges = set(edges)
        self.faces = set(faces)

    def copy(self) -> 'SimplicialSubset':
        """Deep copy (the id sets are not shared)."""
        return SimplicialSubset(self.vertices, self.edges, self.faces)

    # --- vertices ---

    def add_vertex(self, v: int) -> None:
        self.vertices.add(v)

    def add_vertices(self, vs: Iterable[int]) -> None:
        self.vertices.update(vs)

    def delete_vertex(self, v: int) -> None:
        self.vertices.discard(v)

    def delete_vertices(self, vs: Iterable[int]) -> None:
        self.vertices.difference_update(vs)

    # --- edges ---

    def add_edge(self, e: int) -> None:
        self.edges.add(e)

    def add_edges(self, es: Iterable[int]) -> None:
        self.edges.update(es)

    def delete_edge(self, e: int) -> None:
        self.edges.discard(e)

    def delete_edges(self, es: Iterable[int]) -> None:
        self.edges.difference_update(es)

    # --- faces ---

    def add_face(self, f: int) -> None:
        self.faces.add(f)

    def add_faces(self, fs: Iterable[int]) -> None:
        self.faces.update(fs)

    def delete_face(self, f: int) -> None:
        self.faces.discard(f)

    def delete_faces(self, fs: Iterable[int]) -> None:
        self.faces.difference_update(fs)

    # --- set algebra ---

    def add_subset(self, other: 'SimplicialSubset') -> None:
        """In-place union."""
        self.add_vertices(other.vertices)
        self.add_edges(other.edges)
        self.add_faces(other.faces)

    def delete_subset(self, other: 'SimplicialSubset') -> None:
        """In-place difference."""
        self.delete_vertices(other.vertices)
        self.delete_edges(other.edges)
        self.delete_faces(other.faces)

    def issuperset(self, other: 'SimplicialSubset') -> bool:
        return (self.vertices >= other.vertices
                and self.edges >= other.edges
                and self.faces >= other.faces)

    def __eq__(self, other) -> bool:
        if not isinstance(other, SimplicialSubset):
            return NotImplemented
        return (self.vertices == other.vertices
                and self.edges == other.edges
                and self.faces == other.faces)

    __hash__ = None  # mutable

    def __len__(self) -> int:
        return len(self.vertices) + len(self.edges) + len(self.faces)

    def __repr__(self) -> str:
        return (f"SimplicialSubset(V={len(self.vertices)}, "
                f"E={len(self.edges)}, F={len(self.faces)})")
