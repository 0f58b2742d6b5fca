#!/usr/bin/env python3
"""
Reconstruct a Disk from Seed Vertices
=====================================

Runs determine_disk_region() on one of the builder meshes and prints the
region summary and its boundary loop.

Usage:
    cd src
    python scripts/01_reconstruct_disk.py --mesh grid --rows 9 --cols 9 --seeds 30 32 48
    python scripts/01_reconstruct_disk.py --mesh torus --rows 6 --cols 8 --seed-file seeds.txt
    python scripts/01_reconstruct_disk.py --mesh triangle --seeds 0 1 2 -v

Exit status 1 when the disk is not reachable or the region faces are not
consistently oriented. A region pinched at a vertex is printed with its
pinched vertices instead of a boundary loop.
"""

import argparse
import logging
import sys
from pathlib import Path

# Add src/ to path
src_root = Path(__file__).parent.parent.resolve()
if str(src_root) not in sys.path:
    sys.path.insert(0, str(src_root))

from disk_region.builders import (
    build_single_triangle,
    build_tetrahedron,
    build_cube,
    build_octahedron,
    build_grid_disk,
    build_torus_grid,
)
from disk_region.contract import read_vertex_set
from disk_region.analysis import reconstruct_from_mesh, DiskNotReachableError, BoundaryStitchError
from disk_region.logging_config import setup_logging


MESHES = {
    'triangle': lambda rows, cols: build_single_triangle(),
    'tetrahedron': lambda rows, cols: build_tetrahedron(),
    'cube': lambda rows, cols: build_cube(),
    'octahedron': lambda rows, cols: build_octahedron(),
    'grid': build_grid_disk,
    'torus': build_torus_grid,
}


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Reconstruct a topological disk from seed vertices")
    parser.add_argument("--mesh", choices=sorted(MESHES), default="grid", help="Builder mesh")
    parser.add_argument("--rows", type=int, default=9, help="Vertex rows (grid/torus)")
    parser.add_argument("--cols", type=int, default=9, help="Vertex columns (grid/torus)")
    seeds = parser.add_mutually_exclusive_group(required=True)
    seeds.add_argument("--seeds", type=int, nargs="+", help="Seed vertex ids")
    seeds.add_argument("--seed-file", type=Path, help="File with 'v <index>' lines")
    parser.add_argument("--max-steps", type=int, default=None, help="Cap on growth steps")
    parser.add_argument("--log-file", default=None, help="Also write the log here")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log every growth/shrink step")
    return parser.parse_args(argv)


def main(argv=None) -> int:
    args = parse_args(argv)
    setup_logging(logging.DEBUG if args.verbose else logging.INFO, log_file=args.log_file)

    mesh = MESHES[args.mesh](args.rows, args.cols)
    seeds = set(args.seeds) if args.seeds else read_vertex_set(args.seed_file)

    print("=" * 60)
    print(f"DISK RECONSTRUCTION: {mesh['name']}")
    print(f"Mesh: V={mesh['n_V']}, E={mesh['n_E']}, F={mesh['n_F']}")
    print(f"Seeds ({len(seeds)}): {sorted(seeds)}")
    print("=" * 60)

    try:
        result = reconstruct_from_mesh(mesh, seeds, max_steps=args.max_steps)
    except DiskNotReachableError as exc:
        print(f"FAILED: {exc}")
        return 1
    except BoundaryStitchError as exc:
        print(f"FAILED (boundary): {exc}")
        return 1

    print(f"Region: V={result['n_V']}, E={result['n_E']}, F={result['n_F']}")
    print(f"χ = {result['chi']}, components = {result['components']}")
    if result['boundary_error']:
        print(f"Boundary: not a single loop ({result['boundary_error']})")
        if result['pinched']:
            print(f"  pinched at {result['pinched']}")
    elif result['boundary'] is None:
        print("Boundary: (region has no faces)")
    else:
        print(f"Boundary ({len(result['boundary'])}): {result['boundary']}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
