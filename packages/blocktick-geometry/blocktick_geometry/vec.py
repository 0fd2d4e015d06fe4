"""3D vector helpers operating on plain tuples.

Positions and directions are ``tuple[float, ...]`` of length 3. Integer
block cells are accepted anywhere a vector is.
"""
from __future__ import annotations

import math

Vec = tuple[float, ...]


def add(a: Vec, b: Vec) -> Vec:
    return tuple(ai + bi for ai, bi in zip(a, b, strict=True))


def sub(a: Vec, b: Vec) -> Vec:
    return tuple(ai - bi for ai, bi in zip(a, b, strict=True))


def scale(v: Vec, s: float) -> Vec:
    return tuple(vi * s for vi in v)


def dot(a: Vec, b: Vec) -> float:
    return sum(ai * bi for ai, bi in zip(a, b, strict=True))


def cross(a: Vec, b: Vec) -> Vec:
    ax, ay, az = a
    bx, by, bz = b
    return (ay * bz - az * by, az * bx - ax * bz, ax * by - ay * bx)


def magnitude(v: Vec) -> float:
    return math.sqrt(dot(v, v))


def normalize(v: Vec) -> Vec:
    mag = magnitude(v)
    if mag == 0.0:
        return v
    return scale(v, 1.0 / mag)


def distance(a: Vec, b: Vec) -> float:
    return magnitude(sub(a, b))


def direction(origin: Vec, target: Vec) -> Vec:
    """Unit vector from ``origin`` toward ``target``; zero if they coincide."""
    return normalize(sub(target, origin))


def angle_between(a: Vec, b: Vec) -> float:
    """Unsigned angle in radians, 0 when either vector is zero.

    Uses atan2 of the cross and dot products so that parallel vectors give
    exactly 0 instead of a rounding residue from acos.
    """
    return math.atan2(magnitude(cross(a, b)), dot(a, b))


def block_coord(position: Vec) -> tuple[int, ...]:
    """The block cell containing ``position``. Cells are centered on integers."""
    return tuple(math.floor(c + 0.5) for c in position)
