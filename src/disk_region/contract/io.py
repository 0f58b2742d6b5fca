"""
Seed vertex sets
================

Line-oriented format, one seed per line:

    v 12
    v 40

Blank lines and lines with any other leading token are ignored.
"""

from pathlib import Path
from typing import Iterable, Set, Union

from .constants import SEED_VERTEX_TOKEN


def parse_vertex_set(lines: Iterable[str]) -> Set[int]:
    """
    Parse seed vertex indices from text lines.

    Raises:
        ValueError: a 'v' line without a non-negative integer index
    """
    vertices = set()
    for line_no, line in enumerate(lines, start=1):
        tokens = line.split()
        if not tokens or tokens[0] != SEED_VERTEX_TOKEN:
            continue
        if len(tokens) < 2:
            raise ValueError(f"Line {line_no}: '{SEED_VERTEX_TOKEN}' without a vertex index")
        try:
            idx = int(tokens[1])
        except ValueError:
            raise ValueError(f"Line {line_no}: invalid vertex index {tokens[1]!r}") from None
        if idx < 0:
            raise ValueError(f"Line {line_no}: negative vertex index {idx}")
        vertices.add(idx)
    return vertices


def read_vertex_set(path: Union[str, Path]) -> Set[int]:
    """Read a seed vertex file."""
    with open(path, 'r', encoding='utf-8') as fh:
        return parse_vertex_set(fh)


def write_vertex_set(path: Union[str, Path], vertices: Iterable[int]) -> None:
    """Write seeds in ascending order, one 'v <index>' line each."""
    with open(path, 'w', encoding='utf-8') as fh:
        for v in sorted(vertices):
            fh.write(f"{SEED_VERTEX_TOKEN} {v}\n")


def validate_vertex_set(connectivity, vertices: Iterable[int]) -> None:
    """
    Reject seed ids that are not vertices of the mesh.

    Raises:
        ValueError: listing (up to 10) out-of-range ids
    """
    bad = sorted(v for v in vertices if not connectivity.has_vertex(v))
    if bad:
        shown = bad[:10]
        more = f" (+{len(bad) - 10} more)" if len(bad) > 10 else ""
        raise ValueError(
            f"Seed vertices {shown}{more} out of range [0, {connectivity.n_vertices - 1}] "
            f"for mesh '{connectivity.name}'"
        )
