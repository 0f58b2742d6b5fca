"""
DISK_REGION - Topological disks from seed vertices
==================================================

Pure combinatorics over a read-only polygon mesh. NO geometry, NO plotting.

Structure:
    contract/   - Constants, mesh dict contract, connectivity, seed I/O
    builders/   - Test meshes (triangle, polyhedra, grid disk, torus)
    operators/  - SimplicialSubset, star/closure/growth, incidence matrices
    analysis/   - Disk reconstruction, boundary loop stitching

Entry point:
    determine_disk_region(connectivity, seeds) -> SimplicialSubset
"""

__version__ = "0.1.0"

import logging

logging.getLogger(__name__).addHandler(logging.NullHandler())

from . import contract
from . import builders
from . import operators
from . import analysis

from .contract import build_connectivity, MeshConnectivity
from .operators import SimplicialSubset, euler_characteristic
from .analysis import (
    determine_disk_region,
    reconstruct_from_mesh,
    boundary_vertex_loop,
    DiskNotReachableError,
    BoundaryStitchError,
)
