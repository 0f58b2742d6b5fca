"""
Mesh Contract
=============

Builders return a MESH DICT conforming to this contract.
Everything downstream (connectivity, operators, reconstruction) reads it.
"""

import numpy as np
from typing import List, Tuple

from .constants import MIN_FACE_SIZE


def canonical_edge(i: int, j: int) -> Tuple[Tuple[int, int], int]:
    """
    Return the stored key of segment (i, j) and the traversal sign.

    Returns:
        ((min, max), sign) with sign = +1 if i < j (first → second),
        -1 otherwise.

    Example:
        canonical_edge(4, 1) → ((1, 4), -1)
    """
    if i == j:
        raise ValueError(f"Degenerate segment ({i},{j})")
    if i < j:
        return (i, j), +1
    return (j, i), -1


def edges_from_faces(faces: List[List[int]]) -> List[Tuple[int, int]]:
    """
    Collect every face segment as a sorted, de-duplicated edge list.

    Args:
        faces: list of vertex cycles

    Returns:
        edges: ascending list of (i, j) with i < j
    """
    edge_set = set()
    for face in faces:
        n = len(face)
        for k in range(n):
            key, _ = canonical_edge(face[k], face[(k + 1) % n])
            edge_set.add(key)
    return sorted(edge_set)


class MeshContract:
    """
    Documents the required fields for a mesh dict.

    Required fields:
        V : np.ndarray (N×3)
            Vertex coordinates (combinatorial meshes may use zeros)
        E : list of tuples (i, j)
            Edges with i < j convention
        F : list of lists
            Faces as cycles of vertex indices, consistently oriented

    Optional metadata:
        name : str
            Human-readable name
        n_V, n_E, n_F : int
            Derived counts (filled by create_mesh)
    """

    REQUIRED_FIELDS = ['V', 'E', 'F']


def validate_mesh(mesh: dict, strict: bool = True) -> Tuple[bool, List[str]]:
    """
    Validate a mesh dict against the contract.

    Args:
        mesh: The mesh dict to validate
        strict: If True, raise ValueError when any error is found

    Returns:
        (is_valid, list of error messages)
    """
    errors = []

    for field in MeshContract.REQUIRED_FIELDS:
        if field not in mesh:
            errors.append(f"Missing required field: {field}")

    if errors:
        if strict:
            raise ValueError(f"Mesh contract violation: {errors}")
        return False, errors

    n_V = len(mesh['V'])

    # Edge bounds, i < j convention, duplicates
    edge_set = set()
    for idx, (i, j) in enumerate(mesh['E']):
        if i < 0 or i >= n_V or j < 0 or j >= n_V:
            errors.append(f"Edge {idx}: ({i},{j}) has index out of bounds [0, {n_V-1}]")
            break  # Don't spam
        if i >= j:
            errors.append(f"Edge {idx}: ({i},{j}) violates i<j convention")
            break
        if (i, j) in edge_set:
            errors.append(f"Edge {idx}: ({i},{j}) is listed twice")
            break
        edge_set.add((i, j))

    for f_idx, face in enumerate(mesh['F']):
        if len(face) < MIN_FACE_SIZE:
            errors.append(f"Face {f_idx}: has < {MIN_FACE_SIZE} vertices")
            continue
        if len(face) != len(set(face)):
            errors.append(f"Face {f_idx}: has repeated vertices")
            continue
        if any(v < 0 or v >= n_V for v in face):
            errors.append(f"Face {f_idx}: vertex index out of bounds [0, {n_V-1}]")
            continue
        n = len(face)
        for k in range(n):
            key, _ = canonical_edge(face[k], face[(k + 1) % n])
            if key not in edge_set:
                errors.append(f"Face {f_idx}: segment ({face[k]},{face[(k + 1) % n]}) not in edge list")
                break  # Don't spam per face

    if errors and strict:
        raise ValueError(f"Mesh contract violation: {errors}")

    return (len(errors) == 0, errors)


def create_mesh(V, F, E=None, name: str = "unnamed") -> dict:
    """
    Helper to create a contract-compliant mesh dict.

    Args:
        V: Vertex coordinates, or an int vertex count for purely
           combinatorial meshes (coordinates become zeros)
        F: Face list [cycle, ...]
        E: Edge list [(i,j), ...]; derived from F when omitted
        name: Human-readable name

    Returns:
        Contract-compliant mesh dict
    """
    if isinstance(V, (int, np.integer)):
        V = np.zeros((int(V), 3))

    faces = [list(face) for face in F]
    if E is None:
        E = edges_from_faces(faces)

    mesh = {
        'V': np.array(V, dtype=float) if not isinstance(V, np.ndarray) else V,
        'E': [tuple(e) for e in E],
        'F': faces,
        'name': name,
    }

    mesh['n_V'] = len(mesh['V'])
    mesh['n_E'] = len(mesh['E'])
    mesh['n_F'] = len(mesh['F'])

    validate_mesh(mesh, strict=True)

    return mesh
