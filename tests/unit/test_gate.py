"""Tests for the RateLimit gate."""

from __future__ import annotations

import threading
from datetime import timedelta

import pytest

from iter_progress.errors import ConfigurationError, IterationCancelled
from iter_progress.ratelimit.gate import RateLimit


class TestConstruction:
    def test_float_interval(self):
        assert RateLimit(0.5).interval == 0.5

    def test_timedelta_interval(self):
        assert RateLimit(timedelta(milliseconds=10)).interval == pytest.approx(0.01)

    def test_negative_interval_rejected(self):
        with pytest.raises(ConfigurationError, match="invalid interval"):
            RateLimit(-1)

    def test_non_numeric_interval_rejected(self):
        with pytest.raises(ConfigurationError):
            RateLimit("soon")

    def test_configuration_error_is_value_error(self):
        with pytest.raises(ValueError):
            RateLimit(timedelta(seconds=-1))


class TestTryAct:
    def test_skips_everything_but_first(self, clock):
        limiter = RateLimit(5.0, clock=clock)
        total = 0
        for i in range(3, 10):
            result = limiter.try_act(lambda i=i: i)
            if result is not None:
                total += result
        assert total == 3

    def test_counts_skips(self, clock):
        limiter = RateLimit(5.0, clock=clock)
        results = [limiter.try_act(lambda: 100) for _ in range(10)]
        assert sum(r for r in results if r is not None) == 100
        assert results.count(None) == 9

    def test_opens_again_after_interval(self, clock):
        limiter = RateLimit(5.0, clock=clock)
        assert limiter.try_act(lambda: "a") == "a"
        clock.advance(4.9)
        assert limiter.try_act(lambda: "b") is None
        clock.advance(0.1)
        assert limiter.try_act(lambda: "c") == "c"


class TestAct:
    def test_reports_whether_action_ran(self, clock):
        limiter = RateLimit(1.0, clock=clock)
        calls = []
        assert limiter.act(lambda: calls.append(1)) is True
        assert limiter.act(lambda: calls.append(2)) is False
        assert calls == [1]

    def test_zero_interval_always_runs(self, clock):
        limiter = RateLimit(0, clock=clock)
        assert all(limiter.act(lambda: None) for _ in range(5))

    def test_reset_reopens_gate(self, clock):
        limiter = RateLimit(10.0, clock=clock)
        limiter.act(lambda: None)
        assert limiter.remaining() == pytest.approx(10.0)
        limiter.reset()
        assert limiter.remaining() == 0.0


class TestSleepAct:
    def test_first_call_does_not_sleep(self, clock):
        limiter = RateLimit(0.01, clock=clock, sleep=clock.sleep)
        assert limiter.sleep_act(lambda: 42) == 42
        assert clock.sleeps == []

    def test_sleeps_for_shortfall_only(self, clock):
        limiter = RateLimit(1.0, clock=clock, sleep=clock.sleep)
        limiter.sleep_act(lambda: None)
        clock.advance(0.25)
        limiter.sleep_act(lambda: None)
        assert clock.sleeps == [pytest.approx(0.75)]

    def test_no_sleep_when_interval_already_passed(self, clock):
        limiter = RateLimit(1.0, clock=clock, sleep=clock.sleep)
        limiter.sleep_act(lambda: None)
        clock.advance(3.0)
        limiter.sleep_act(lambda: None)
        assert clock.sleeps == []

    def test_ten_actions_take_nine_intervals(self, clock):
        limiter = RateLimit(0.01, clock=clock, sleep=clock.sleep)
        start = clock()
        for _ in range(10):
            limiter.sleep_act(lambda: None)
        assert clock() - start == pytest.approx(0.09)


class TestWait:
    def test_cancel_already_set(self, clock):
        limiter = RateLimit(1.0, clock=clock)
        cancel = threading.Event()
        cancel.set()
        with pytest.raises(IterationCancelled):
            limiter.wait(cancel)

    def test_cancel_during_wait(self):
        limiter = RateLimit(30.0)
        limiter.mark()
        cancel = threading.Event()
        timer = threading.Timer(0.05, cancel.set)
        timer.start()
        try:
            with pytest.raises(IterationCancelled, match="during"):
                limiter.wait(cancel)
        finally:
            timer.cancel()
