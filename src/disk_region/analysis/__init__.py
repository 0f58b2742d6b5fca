"""
Analysis functions - depend on operators layer.

    analysis → operators → contract

Includes:
- reconstruction: grow/shrink disk reconstruction from seed vertices
- boundary: ordered boundary loop of a face set, pinched-vertex check
"""

from .reconstruction import (
    DiskNotReachableError,
    grow_until_disk,
    is_essential_face,
    removal_candidate,
    shrink_step,
    shrink_to_fit,
    determine_disk_region,
    count_components,
    reconstruct_from_mesh,
)
from .boundary import (
    BoundaryStitchError,
    boundary_halfedges,
    boundary_vertex_loop,
    pinched_vertices,
)
