"""
Disk Reconstruction
===================

Find a topological disk containing a seed vertex set.

ASSUMPTION:
    The target region has no handles and no interior holes.

PHASE 1 - GROWTH:
    region = SimplicialSubset(seeds)
    while χ(region) ≠ 1: region = Cl(St(region))

    χ changes whenever the number of boundary loops changes, and is far
    cheaper to track. Growth is monotone and bounded by the mesh size,
    so it either reaches χ = 1 or stops changing. A step that changes
    nothing is a PLATEAU: χ = 1 is unreachable (e.g. the seeds wrap a
    handle) and DiskNotReachableError is raised.

PHASE 2 - SHRINK-TO-FIT:
    χ₀ = χ at the end of phase 1.
    Sweep the faces in ascending id over a snapshot. For each face f:
        (1) skip f if more than one of its vertices is a seed
        (2) candidate = Cl(region - f - edges(f) - vertices(f))
        (3) reject unless every seed is still a candidate vertex
        (4) reject unless χ(candidate) = χ₀
        commit the first accepted candidate and start a fresh sweep.
    Stop after a sweep with no commit.

    Every commit removes f and closure never adds faces, so the face count
    strictly drops and phase 2 terminates.

KNOWN LIMITATIONS:
    Check (3) can leave small components hanging off the region
    (count_components() reports them); dropping it can isolate seeds.
    Neither is resolved here.

    More often the sweep ends on a BOWTIE: face patches that meet at a
    single vertex. χ = 1 and the vertex/edge graph is connected, so
    count_components() gives 1, but the boundary is not one simple loop.
    On a grid most multi-seed inputs end this way, e.g. 8 x 9 grid,
    seeds {14, 25} -> faces {27, 44} pinched at vertex 24.
    pinched_vertices() detects it; reconstruct_from_mesh() reports it.
"""

import logging
import warnings
from collections import deque
from typing import FrozenSet, Iterable, Optional, Tuple

from ..contract.connectivity import MeshConnectivity, build_connectivity
from ..contract.constants import DISK_EULER_CHARACTERISTIC, DEFAULT_MAX_GROW_STEPS
from ..contract.io import validate_vertex_set
from ..operators.subset import SimplicialSubset
from ..operators.topology import closure, grow_disk, euler_characteristic
from ..operators.incidence import build_boundary_operator
from .boundary import BoundaryStitchError, boundary_vertex_loop, pinched_vertices

logger = logging.getLogger(__name__)


class DiskNotReachableError(RuntimeError):
    """Phase 1 growth cannot (or did not, within the bound) reach χ = 1."""

    def __init__(self, message: str, steps: int, euler_characteristic: int):
        super().__init__(message)
        self.steps = steps
        self.euler_characteristic = euler_characteristic


# =============================================================================
# PHASE 1
# =============================================================================

def grow_until_disk(mesh: MeshConnectivity,
                    region: SimplicialSubset,
                    max_steps: Optional[int] = DEFAULT_MAX_GROW_STEPS
                    ) -> Tuple[SimplicialSubset, int]:
    """
    Grow `region` in place until χ = 1.

    Args:
        mesh: connectivity
        region: starting subset (mutated)
        max_steps: cap on growth steps (None = stop only on plateau)

    Returns:
        (region, n_steps)

    Raises:
        DiskNotReachableError: on plateau, or after max_steps steps
    """
    steps = 0
    chi = euler_characteristic(region)

    while chi != DISK_EULER_CHARACTERISTIC:
        if max_steps is not None and steps >= max_steps:
            raise DiskNotReachableError(
                f"Disk not reachable within {max_steps} growth steps (χ = {chi})",
                steps=steps, euler_characteristic=chi,
            )

        size_before = len(region)
        grow_disk(mesh, region)
        steps += 1
        chi = euler_characteristic(region)
        logger.debug(f"Growth step {steps}: {region!r}, χ = {chi}")

        if len(region) == size_before:
            raise DiskNotReachableError(
                f"Growth plateaued after {steps} steps at χ = {chi} with {region!r}; "
                f"no single-loop disk contains the seeds",
                steps=steps, euler_characteristic=chi,
            )

    return region, steps


# =============================================================================
# PHASE 2
# =============================================================================

def is_essential_face(mesh: MeshConnectivity, f: int, seeds: FrozenSet[int]) -> bool:
    """True if more than one vertex of f is a seed (never removed)."""
    return sum(1 for v in mesh.face_vertices(f) if v in seeds) > 1


def removal_candidate(mesh: MeshConnectivity,
                      region: SimplicialSubset,
                      f: int) -> SimplicialSubset:
    """
    Region with f, its edges and its vertices removed, then re-closed.

    Closure re-admits any edge or vertex a remaining face or edge still needs.
    `region` is not modified.
    """
    candidate = region.copy()
    candidate.delete_face(f)
    candidate.delete_edges(mesh.face_edges(f))
    candidate.delete_vertices(mesh.face_vertices(f))
    return closure(mesh, candidate)


def shrink_step(mesh: MeshConnectivity,
                region: SimplicialSubset,
                seeds: FrozenSet[int],
                chi0: int) -> Optional[Tuple[SimplicialSubset, int]]:
    """
    One sweep over a snapshot of region.faces in ascending id.

    Returns:
        (candidate, removed_face) for the first accepted removal,
        or None if the sweep accepts nothing.
    """
    for f in sorted(region.faces):
        if is_essential_face(mesh, f, seeds):
            continue

        candidate = removal_candidate(mesh, region, f)

        if not candidate.vertices.issuperset(seeds):
            continue
        if euler_characteristic(candidate) != chi0:
            continue

        return candidate, f

    return None


def shrink_to_fit(mesh: MeshConnectivity,
                  region: SimplicialSubset,
                  seeds: Iterable[int],
                  chi0: Optional[int] = None) -> SimplicialSubset:
    """
    Greedily remove redundant faces until a full sweep commits nothing.

    Args:
        mesh: connectivity
        region: closed subset from phase 1 (not modified)
        seeds: vertices that must stay in the region
        chi0: χ to preserve (defaults to χ(region))

    Returns:
        the shrunk region (a new subset)
    """
    seeds = frozenset(seeds)
    if chi0 is None:
        chi0 = euler_characteristic(region)
    if chi0 != DISK_EULER_CHARACTERISTIC:
        warnings.warn(
            f"Shrinking a region with χ = {chi0}; result preserves χ = {chi0}, "
            f"not a single boundary loop",
            UserWarning
        )

    commits = 0
    while True:
        step = shrink_step(mesh, region, seeds, chi0)
        if step is None:
            break
        candidate, f = step

        # Postcondition on every commit (if/raise survives python -O)
        if not candidate.vertices.issuperset(seeds):
            raise RuntimeError(f"Removing face {f} dropped seed vertices")
        if euler_characteristic(candidate) != chi0:
            raise RuntimeError(f"Removing face {f} changed χ from {chi0}")

        region = candidate
        commits += 1
        logger.debug(f"Removed face {f}: {region!r}")

    logger.debug(f"Shrink reached a fixed point after {commits} removals")
    return region


# =============================================================================
# DRIVER
# =============================================================================

def determine_disk_region(mesh: MeshConnectivity,
                          seeds: Iterable[int],
                          max_steps: Optional[int] = DEFAULT_MAX_GROW_STEPS
                          ) -> SimplicialSubset:
    """
    Smallest-found topological disk containing every seed vertex.

    Pure function of (mesh, seeds): the seed collection is copied and
    never mutated.

    Raises:
        ValueError: empty seed set or seed ids outside the mesh
        DiskNotReachableError: phase 1 does not reach χ = 1
    """
    seeds = frozenset(seeds)
    if not seeds:
        raise ValueError("Seed vertex set is empty")
    validate_vertex_set(mesh, seeds)

    region = SimplicialSubset(vertices=seeds)
    region, steps = grow_until_disk(mesh, region, max_steps=max_steps)
    chi0 = euler_characteristic(region)
    logger.info(f"Growth converged after {steps} steps: {region!r}, χ = {chi0}")

    region = shrink_to_fit(mesh, region, seeds, chi0)
    logger.info(f"Shrink finished: {region!r}, χ = {euler_characteristic(region)}")

    return region


def count_components(mesh: MeshConnectivity, region: SimplicialSubset) -> int:
    """
    Connected components of the region's vertex/edge graph (BFS).

    Isolated vertices count as components. More than 1 indicates the
    hanging components described in the module docstring. A bowtie
    still gives 1; use pinched_vertices() for that.
    """
    adj = {v: [] for v in region.vertices}
    for e in region.edges:
        i, j = mesh.edge_vertices(e)
        if i in adj and j in adj:
            adj[i].append(j)
            adj[j].append(i)

    visited = set()
    components = 0
    for start in sorted(adj):
        if start in visited:
            continue
        queue = deque([start])
        visited.add(start)
        while queue:
            v = queue.popleft()
            for neighbor in adj[v]:
                if neighbor not in visited:
                    visited.add(neighbor)
                    queue.append(neighbor)
        components += 1

    return components


# =============================================================================
# CONTRACT-AWARE WRAPPER
# =============================================================================

def reconstruct_from_mesh(mesh: dict,
                          seeds: Iterable[int],
                          max_steps: Optional[int] = DEFAULT_MAX_GROW_STEPS) -> dict:
    """
    Run the reconstruction on a contract mesh dict and summarize it.

    A region whose boundary is not one simple loop (the bowtie in the
    module docstring) is still returned: 'boundary' is None and
    'boundary_error' / 'pinched' say why.

    Returns:
        dict with:
            region: SimplicialSubset
            n_V, n_E, n_F: region counts
            chi: Euler characteristic of the region
            components: count_components(region)
            boundary: ordered boundary vertex loop, or None when the
                      region has no faces or its boundary does not stitch
            boundary_error: stitch failure message, or None
            pinched: pinched_vertices(region.faces), ascending

    Raises:
        DiskNotReachableError: growth does not reach χ = 1
        BoundaryStitchError: region faces are not consistently oriented
    """
    connectivity = build_connectivity(mesh)
    region = determine_disk_region(connectivity, seeds, max_steps=max_steps)

    boundary = None
    boundary_error = None
    pinched = []
    if region.faces:
        d1 = build_boundary_operator(connectivity)
        pinched = pinched_vertices(connectivity, region.faces, d1=d1)
        try:
            boundary = boundary_vertex_loop(connectivity, region.faces, d1=d1)
        except BoundaryStitchError as exc:
            boundary_error = str(exc)
            logger.warning(f"Region boundary is not a single loop: {exc}")

    return {
        'region': region,
        'n_V': len(region.vertices),
        'n_E': len(region.edges),
        'n_F': len(region.faces),
        'chi': euler_characteristic(region),
        'components': count_components(connectivity, region),
        'boundary': boundary,
        'boundary_error': boundary_error,
        'pinched': pinched,
    }
