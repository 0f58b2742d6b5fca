"""Constants, mesh contract, connectivity tables and seed I/O."""

from .constants import (
    DISK_EULER_CHARACTERISTIC,
    CLOSED_SURFACE_CHI,
    TORUS_CHI,
    DEFAULT_MAX_GROW_STEPS,
    MIN_FACE_SIZE,
    SEED_VERTEX_TOKEN,
)
from .structures import canonical_edge, edges_from_faces, validate_mesh, create_mesh
from .connectivity import MeshConnectivity, build_connectivity
from .io import parse_vertex_set, read_vertex_set, write_vertex_set, validate_vertex_set
