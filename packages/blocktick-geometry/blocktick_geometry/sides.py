"""The six faces of a block and the directional predicates built on them."""
from __future__ import annotations

from enum import Enum

from blocktick_geometry import vec
from blocktick_geometry.vec import Vec


class Side(Enum):
    """A block face, valued by its outward unit vector.

    ``FRONT`` points toward -z, matching the default facing of a freshly
    placed block.
    """

    TOP = (0, 1, 0)
    BOTTOM = (0, -1, 0)
    LEFT = (-1, 0, 0)
    RIGHT = (1, 0, 0)
    FRONT = (0, 0, -1)
    BACK = (0, 0, 1)

    @property
    def vector(self) -> Vec:
        return tuple(float(c) for c in self.value)

    @property
    def opposite(self) -> Side:
        return Side(tuple(-c for c in self.value))

    def yaw(self, quarter_turns: int) -> Side:
        """Rotate clockwise about the vertical axis, seen from above."""
        if self not in _YAW_CYCLE:
            return self
        return _YAW_CYCLE[(_YAW_CYCLE.index(self) + quarter_turns) % 4]

    def pitch(self, quarter_turns: int) -> Side:
        """Tip the front face upward about the left/right axis."""
        if self not in _PITCH_CYCLE:
            return self
        return _PITCH_CYCLE[(_PITCH_CYCLE.index(self) + quarter_turns) % 4]

    def relative_to(self, facing: Side) -> Side:
        """Map this block-local face to world space for a block facing ``facing``.

        ``Side.FRONT.relative_to(f)`` is always ``f``.
        """
        if facing is Side.RIGHT:
            return self.yaw(1)
        if facing is Side.BACK:
            return self.yaw(2)
        if facing is Side.LEFT:
            return self.yaw(3)
        if facing is Side.TOP:
            return self.pitch(1)
        if facing is Side.BOTTOM:
            return self.pitch(3)
        return self

    @classmethod
    def parse(cls, name: str) -> Side:
        return cls[name.strip().upper()]


_YAW_CYCLE = (Side.FRONT, Side.RIGHT, Side.BACK, Side.LEFT)
_PITCH_CYCLE = (Side.FRONT, Side.TOP, Side.BACK, Side.BOTTOM)


def side_facing(direction: Vec) -> Side:
    """The face whose axis dominates ``direction``.

    Ties fall through toward the z axis: x wins only when strictly larger
    than both y and z, y only when strictly larger than z.
    """
    x, y, z = direction
    ax, ay, az = abs(x), abs(y), abs(z)
    if ax > ay:
        if ax > az:
            return Side.RIGHT if x > 0 else Side.LEFT
    elif ay > az:
        return Side.TOP if y > 0 else Side.BOTTOM
    return Side.BACK if z > 0 else Side.FRONT


def is_within_fov(direction: Vec, face_vector: Vec, fov: float) -> bool:
    """True iff the angle between ``direction`` and ``face_vector`` is at most ``fov`` radians."""
    return vec.angle_between(direction, face_vector) <= fov
