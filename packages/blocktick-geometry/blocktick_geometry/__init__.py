"""blocktick-geometry - Distance, direction and field-of-view predicates."""
from __future__ import annotations

from blocktick_geometry import vec
from blocktick_geometry.sides import Side, is_within_fov, side_facing
from blocktick_geometry.vec import Vec, angle_between, block_coord, direction, distance

__all__ = [
    "Side",
    "Vec",
    "angle_between",
    "block_coord",
    "direction",
    "distance",
    "is_within_fov",
    "side_facing",
    "vec",
]
