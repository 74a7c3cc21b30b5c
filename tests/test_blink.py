from board.blink import BlinkTimer, BlinkPhase
from conftest import FakeClock

def test_timer_starts_stopped():
    t = BlinkTimer(500, clock=FakeClock())
    assert t.phase is BlinkPhase.STOPPED
    assert t.visible
    assert t.seconds_until_tick() is None
    assert not t.tick_due()

def test_tick_flips_after_one_period():
    clock = FakeClock()
    t = BlinkTimer(500, clock=clock)
    t.restart()
    clock.advance(0.4)
    assert not t.tick_due()
    clock.advance(0.1)
    assert t.tick_due()
    assert t.visible is False
    assert not t.tick_due()

def test_restart_resets_phase_to_visible():
    clock = FakeClock()
    t = BlinkTimer(500, clock=clock)
    t.restart()
    clock.advance(0.5)
    assert t.tick_due()
    assert not t.visible

    clock.advance(0.2)
    t.restart()
    assert t.visible
    assert abs(t.seconds_until_tick() - 0.5) < 1e-9

def test_missed_ticks_coalesce_into_one_flip():
    clock = FakeClock()
    t = BlinkTimer(100, clock=clock)
    t.restart()
    clock.advance(0.35)
    ticks = 0
    while t.tick_due():
        ticks += 1
    assert ticks == 1
    assert t.visible is False
    # next flip stays on the 100ms grid
    assert abs(t.seconds_until_tick() - 0.05) < 1e-9

def test_stop_cancels_pending_tick():
    clock = FakeClock()
    t = BlinkTimer(100, clock=clock)
    t.restart()
    t.stop()
    clock.advance(1.0)
    assert t.phase is BlinkPhase.STOPPED
    assert not t.tick_due()
