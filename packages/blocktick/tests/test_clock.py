"""Tests for game-time derivation and TickContext generation."""

import random

import pytest
from blocktick.clock import Clock

_test_rng = random.Random(0)


def test_clock_rejects_non_positive_tps():
    with pytest.raises(ValueError):
        Clock(tps=0)
    with pytest.raises(ValueError):
        Clock(tps=-5)


def test_now_millis_starts_at_zero():
    clock = Clock(tps=20)
    assert clock.now_millis() == 0


def test_now_millis_follows_ticks():
    """At 20 tps every tick is 50 ms of game time."""
    clock = Clock(tps=20)
    for _ in range(7):
        clock.advance()
    assert clock.now_millis() == 350


def test_now_millis_is_integer_for_uneven_rates():
    clock = Clock(tps=3)
    clock.advance()
    assert clock.now_millis() == 333
    clock.advance()
    assert clock.now_millis() == 666
    clock.advance()
    assert clock.now_millis() == 1000


def test_context_carries_game_time():
    clock = Clock(tps=10)
    clock.advance()
    clock.advance()
    ctx = clock.context(lambda: None, _test_rng)
    assert ctx.tick_number == 2
    assert ctx.now_ms == 200
    assert abs(ctx.dt - 0.1) < 1e-9
    assert ctx.random is _test_rng


def test_start_offset_shifts_game_time():
    clock = Clock(tps=20, start_ms=90_000)
    assert clock.now_millis() == 90_000
    clock.advance()
    assert clock.now_millis() == 90_050
    assert clock.start_ms == 90_000


def test_negative_start_rejected():
    with pytest.raises(ValueError):
        Clock(tps=20, start_ms=-1)


@pytest.mark.parametrize("tps", [1, 3, 20, 60])
def test_ticks_until_lands_on_first_tick_at_or_past_target(tps):
    clock = Clock(tps=tps, start_ms=500)
    n = clock.ticks_until(1750)
    for _ in range(n - 1):
        clock.advance()
    assert clock.now_millis() < 1750
    clock.advance()
    assert clock.now_millis() >= 1750


def test_ticks_until_past_time_is_zero():
    clock = Clock(tps=10)
    clock.advance()
    assert clock.ticks_until(100) == 0
    assert clock.ticks_until(0) == 0
