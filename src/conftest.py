"""
Pytest Configuration
====================

Puts src/ on sys.path so disk_region imports without installation,
and provides the connectivity fixtures shared across tests/core/.

Usage:
    cd src
    pytest tests/ -v
"""

import sys
from pathlib import Path

import pytest

src_root = Path(__file__).parent
if str(src_root) not in sys.path:
    sys.path.insert(0, str(src_root))

from disk_region.builders import build_single_triangle, build_cube, build_torus_grid
from disk_region.contract import build_connectivity


@pytest.fixture
def triangle():
    """One-face mesh: edges [(0,1), (0,2), (1,2)], face 0 = [0, 1, 2]."""
    return build_connectivity(build_single_triangle())


@pytest.fixture
def cube():
    return build_connectivity(build_cube())


@pytest.fixture
def torus():
    """6 × 8 torus grid (χ = 0)."""
    return build_connectivity(build_torus_grid(6, 8))
