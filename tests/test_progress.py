"""
Tests for ProgressReporter and FixedIntervalThrottle.
"""

import pytest

from scholarnotes.summarization import FixedIntervalThrottle, ProgressReporter


class TestProgressReporter:
    """Percentage mapping for extraction and reduction."""

    def test_extraction_owns_first_twenty_percent(self):
        values = []
        progress = ProgressReporter(values.append)
        for page in range(1, 5):
            progress.report_extraction(page, 4)

        assert values == [5.0, 10.0, 15.0, 20.0]

    def test_zero_total_pages_reports_nothing(self):
        values = []
        ProgressReporter(values.append).report_extraction(0, 0)
        assert values == []

    def test_reduction_mapping(self):
        values = []
        progress = ProgressReporter(values.append)
        progress.report_extraction(5, 5)
        progress.begin_reduction(5)
        progress.step()
        progress.step()

        assert progress.total_units == 8
        assert values == [20.0, pytest.approx(30.0), pytest.approx(40.0)]

    def test_clamped_at_hundred(self):
        values = []
        progress = ProgressReporter(values.append)
        progress.begin_reduction(10)
        for _ in range(17):
            progress.step()

        assert max(values) == 100.0
        assert progress.completed_steps == 17

    def test_values_never_decrease(self):
        values = []
        progress = ProgressReporter(values.append)
        progress.report_extraction(1, 1)
        progress.report_extraction(0, 1)
        progress.begin_reduction(2)
        progress.step()

        assert values == sorted(values)
        assert values[0] == 20.0

    def test_finish_reports_hundred(self):
        values = []
        progress = ProgressReporter(values.append)
        progress.begin_reduction(0)
        progress.step()
        progress.finish()

        assert values[-1] == 100.0
        assert progress.percent == 100.0

    def test_unchanged_value_is_not_repeated(self):
        values = []
        progress = ProgressReporter(values.append)
        progress.finish()
        progress.finish()
        assert values == [100.0]

    def test_step_before_begin_raises(self):
        with pytest.raises(RuntimeError):
            ProgressReporter().step()

    def test_callback_is_optional(self):
        progress = ProgressReporter()
        progress.report_extraction(1, 2)
        assert progress.percent == 10.0


class TestFixedIntervalThrottle:
    """Test the inter-call pause."""

    def test_pause_sleeps_interval(self):
        delays = []
        throttle = FixedIntervalThrottle(1.0, sleep=delays.append)
        throttle.pause()
        throttle.pause()

        assert delays == [1.0, 1.0]
        assert throttle.pause_count == 2

    def test_zero_interval_never_sleeps(self):
        delays = []
        throttle = FixedIntervalThrottle(0, sleep=delays.append)
        throttle.pause()

        assert delays == []
        assert throttle.pause_count == 1

    def test_negative_interval_rejected(self):
        with pytest.raises(ValueError):
            FixedIntervalThrottle(-1)
