"""Tests for engine lifecycle, system ordering and the seeded random stream."""

from blocktick.engine import Engine
from blocktick.world import World


def test_engine_init_defaults():
    engine = Engine()
    assert engine.clock.tps == 20
    assert engine.clock.tick_number == 0
    assert isinstance(engine.world, World)


def test_systems_run_in_registration_order():
    engine = Engine()
    order = []
    engine.add_system(lambda w, ctx: order.append("first"))
    engine.add_system(lambda w, ctx: order.append("second"))
    engine.step()
    assert order == ["first", "second"]


def test_systems_see_advancing_game_time():
    engine = Engine(tps=10)
    seen = []
    engine.add_system(lambda w, ctx: seen.append(ctx.now_ms))
    engine.run(3)
    assert seen == [100, 200, 300]


def test_request_stop_halts_run():
    engine = Engine()
    calls = []

    def sys(world, ctx):
        calls.append(ctx.tick_number)
        if ctx.tick_number == 2:
            ctx.request_stop()

    engine.add_system(sys)
    engine.run(10)
    assert calls == [1, 2]


def test_start_and_stop_hooks_bracket_run():
    engine = Engine()
    events = []
    engine.on_start(lambda w, ctx: events.append(("start", ctx.tick_number)))
    engine.add_system(lambda w, ctx: events.append(("tick", ctx.tick_number)))
    engine.on_stop(lambda w, ctx: events.append(("stop", ctx.tick_number)))
    engine.run(2)
    assert events == [("start", 0), ("tick", 1), ("tick", 2), ("stop", 2)]


def test_same_seed_same_random_stream():
    a = Engine(seed=1234)
    b = Engine(seed=1234)
    assert [a.random.random() for _ in range(5)] == [b.random.random() for _ in range(5)]
    assert a.seed == 1234


def test_context_random_is_engine_stream():
    engine = Engine(seed=7)
    seen = []
    engine.add_system(lambda w, ctx: seen.append(ctx.random))
    engine.step()
    assert seen[0] is engine.random


def test_unseeded_engine_picks_a_seed():
    engine = Engine()
    assert isinstance(engine.seed, int)


def test_run_until_stops_at_game_time():
    engine = Engine(tps=20, seed=1, start_ms=1000)
    seen = []
    engine.add_system(lambda w, ctx: seen.append(ctx.now_ms))
    engine.run_until(1200)
    assert seen == [1050, 1100, 1150, 1200]
    assert engine.clock.now_millis() == 1200
