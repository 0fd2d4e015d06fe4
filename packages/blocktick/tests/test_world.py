"""Tests for entity storage, queries and lifecycle hooks."""

from dataclasses import dataclass

import pytest

from blocktick.types import DeadEntityError
from blocktick.world import World


@dataclass
class Position:
    x: float
    y: float


@dataclass
class Health:
    hp: int


class TestSpawnAndAttach:
    def test_spawn_assigns_increasing_ids(self):
        world = World()
        assert world.spawn() == 0
        assert world.spawn() == 1

    def test_spawn_with_components(self):
        world = World()
        eid = world.spawn(Position(1.0, 2.0), Health(5))
        assert world.get(eid, Position) == Position(1.0, 2.0)
        assert world.get(eid, Health).hp == 5

    def test_attach_to_dead_entity_raises(self):
        world = World()
        eid = world.spawn()
        world.despawn(eid)
        with pytest.raises(DeadEntityError):
            world.attach(eid, Health(1))

    def test_get_missing_component_raises_key_error(self):
        world = World()
        eid = world.spawn()
        with pytest.raises(KeyError):
            world.get(eid, Health)

    def test_find_returns_none_instead_of_raising(self):
        world = World()
        eid = world.spawn(Health(3))
        assert world.find(eid, Position) is None
        assert world.find(eid, Health) == Health(3)
        world.despawn(eid)
        assert world.find(eid, Health) is None


class TestQuery:
    def test_query_requires_all_types(self):
        world = World()
        both = world.spawn(Position(0, 0), Health(1))
        world.spawn(Position(1, 1))
        result = list(world.query(Position, Health))
        assert [eid for eid, _ in result] == [both]

    def test_query_without_types_yields_nothing(self):
        world = World()
        world.spawn(Health(1))
        assert list(world.query()) == []

    def test_query_skips_despawned_entities(self):
        world = World()
        a = world.spawn(Health(1))
        b = world.spawn(Health(2))
        world.despawn(a)
        assert [eid for eid, _ in world.query(Health)] == [b]

    def test_despawn_during_query_is_safe(self):
        world = World()
        ids = [world.spawn(Health(i)) for i in range(3)]
        seen = []
        for eid, (health,) in world.query(Health):
            seen.append(eid)
            if eid == ids[0]:
                world.despawn(ids[1])
        assert seen == [ids[0], ids[2]]


class TestHooks:
    def test_on_attach_fires_with_component(self):
        world = World()
        calls = []
        world.on_attach(Health, lambda w, e, c: calls.append((e, c)))
        eid = world.spawn(Health(4))
        assert calls == [(eid, Health(4))]

    def test_despawn_fires_detach_while_entity_still_readable(self):
        world = World()
        seen = []

        def on_detach(w, e, c):
            seen.append((w.alive(e), w.find(e, Position)))

        world.on_detach(Health, on_detach)
        eid = world.spawn(Position(1.0, 1.0), Health(1))
        world.despawn(eid)
        assert len(seen) == 1
        assert seen[0][0] is True
        assert not world.alive(eid)

    def test_detach_fires_hook_once(self):
        world = World()
        calls = []
        world.on_detach(Health, lambda w, e, c: calls.append(e))
        eid = world.spawn(Health(1))
        world.detach(eid, Health)
        world.detach(eid, Health)
        assert calls == [eid]

    def test_off_attach_removes_callback(self):
        world = World()
        calls = []

        def cb(w, e, c):
            calls.append(e)

        world.on_attach(Health, cb)
        world.off_attach(Health, cb)
        world.spawn(Health(1))
        assert calls == []

    def test_despawn_twice_is_noop(self):
        world = World()
        calls = []
        world.on_detach(Health, lambda w, e, c: calls.append(e))
        eid = world.spawn(Health(1))
        world.despawn(eid)
        world.despawn(eid)
        assert calls == [eid]
