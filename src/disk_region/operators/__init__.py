"""Subset algebra, star/closure operators, signed incidence matrices."""

from .subset import SimplicialSubset

from .topology import (
    star,
    closure,
    grow_disk,
    euler_characteristic,
    is_closed,
)

from .incidence import (
    build_d0,
    build_boundary_operator,
    face_indicator,
    boundary_chain,
)
