"""Tests for the millisecond Tween."""

import pytest

from mappoints.anim.tween import Tween


class TestLinearInterpolation:
    """Linear tweens over a fixed duration."""

    def test_intermediate_value(self):
        """After 5 of 10 ms, linear interpolation is at 50%."""
        tw = Tween(start_val=0.0, end_val=100.0, duration_ms=10)
        tw.advance(5)
        assert tw.value == 50.0
        assert not tw.finished

    def test_decreasing_range(self):
        tw = Tween(start_val=100.0, end_val=0.0, duration_ms=10)
        tw.advance(2.5)
        assert tw.value == pytest.approx(75.0)

    def test_value_before_advance(self):
        tw = Tween(start_val=16.0, end_val=120.0, duration_ms=500)
        assert tw.value == 16.0
        assert tw.progress == 0.0


class TestTermination:
    """Terminal detection uses progress >= 1, never float equality."""

    def test_overshoot_snaps_to_end(self):
        """A tick that jumps past the duration lands exactly on end_val."""
        tw = Tween(start_val=0.0, end_val=0.3, duration_ms=7)
        assert tw.advance(9.3)
        assert tw.progress == 1.0
        assert tw.value == 0.3

    def test_many_small_steps_finish(self):
        """Accumulated float error cannot keep the tween from finishing."""
        tw = Tween(start_val=0.0, end_val=1.0, duration_ms=1000)
        steps = 0
        while not tw.advance(1000 / 60):
            steps += 1
            assert steps < 100
        assert tw.value == 1.0

    def test_zero_duration_is_finished(self):
        tw = Tween(start_val=1.0, end_val=2.0, duration_ms=0)
        assert tw.finished
        assert tw.value == 2.0

    def test_negative_dt_ignored(self):
        tw = Tween(start_val=0.0, end_val=10.0, duration_ms=10)
        tw.advance(-5)
        assert tw.elapsed_ms == 0.0

    def test_rewind(self):
        tw = Tween(start_val=0.0, end_val=10.0, duration_ms=10)
        tw.advance(10)
        tw.rewind()
        assert tw.value == 0.0
        assert not tw.finished


class TestEasedTween:
    def test_ease_in_applied(self):
        tw = Tween(start_val=0.0, end_val=100.0, duration_ms=10, easing="ease_in")
        tw.advance(5)
        assert tw.value == pytest.approx(25.0)
