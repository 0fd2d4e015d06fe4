"""VoxelRaycaster - line-of-sight traces over a VoxelWorld."""
from __future__ import annotations

import math
from typing import TYPE_CHECKING

from blocktick_geometry import block_coord, vec

from blocktick_voxel.components import Category, Location
from blocktick_voxel.types import CollisionGroup, Coord, RayHit, group_for_category

if TYPE_CHECKING:
    from blocktick import EntityId, World
    from blocktick_geometry import Vec

    from blocktick_voxel.memory import VoxelWorld


class VoxelRaycaster:
    """Walks the cells a ray crosses (Amanatides-Woo) and reports the first hit.

    The origin cell is never reported, so a block can look out of itself.
    Within a cell, mobile entities in the mask are hit before the block;
    ``prefer`` names the entity reported when several share the cell,
    otherwise the lowest id wins.
    Blocks collide under ``CollisionGroup.WORLD`` unless penetrable.
    """

    def __init__(self, voxels: VoxelWorld, world: World | None = None) -> None:
        self._voxels = voxels
        self._world = world

    def _mobile_cells(self, mask: CollisionGroup) -> dict[Coord, list[EntityId]]:
        cells: dict[Coord, list[EntityId]] = {}
        if self._world is None:
            return cells
        for eid, (loc, category) in self._world.query(Location, Category):
            if group_for_category(category.name) & mask:
                cells.setdefault(block_coord(loc.position), []).append(eid)
        return cells

    def _hit_in(
        self,
        cell: Coord,
        mask: CollisionGroup,
        mobiles: dict[Coord, list[EntityId]],
        prefer: EntityId | None,
    ) -> RayHit | None:
        occupants = mobiles.get(cell)
        if occupants:
            if prefer in occupants:
                return RayHit(cell, prefer)
            return RayHit(cell, min(occupants))
        if mask & CollisionGroup.WORLD and not self._voxels.block_type_at(cell).penetrable:
            return RayHit(cell, self._voxels.entity_at(cell))
        return None

    def trace(
        self,
        origin: Vec,
        direction: Vec,
        max_distance: float,
        mask: CollisionGroup = CollisionGroup.ALL,
        prefer: EntityId | None = None,
    ) -> RayHit | None:
        if not math.isfinite(max_distance):
            raise ValueError(f"max_distance must be finite, got {max_distance}")
        d = vec.normalize(direction)
        if d == (0.0, 0.0, 0.0) or max_distance <= 0:
            return None
        mobiles = self._mobile_cells(mask)

        # Cells are centered on integers; shift so they span [n, n + 1).
        start = tuple(c + 0.5 for c in origin)
        cell = [math.floor(c) for c in start]
        step = [0, 0, 0]
        t_max = [math.inf, math.inf, math.inf]
        t_delta = [math.inf, math.inf, math.inf]
        for axis in range(3):
            if d[axis] > 0:
                step[axis] = 1
                t_max[axis] = (cell[axis] + 1 - start[axis]) / d[axis]
                t_delta[axis] = 1.0 / d[axis]
            elif d[axis] < 0:
                step[axis] = -1
                t_max[axis] = (start[axis] - cell[axis]) / -d[axis]
                t_delta[axis] = -1.0 / d[axis]

        while True:
            axis = min(range(3), key=t_max.__getitem__)
            if t_max[axis] > max_distance:
                return None
            cell[axis] += step[axis]
            t_max[axis] += t_delta[axis]
            hit = self._hit_in(tuple(cell), mask, mobiles, prefer)
            if hit is not None:
                return hit
