"""Tests for interval, window and rectangle types."""

from datetime import date, datetime, time, timedelta

import pytest

from daybands.core.intervals import (
    MINUTES_PER_DAY,
    Rect,
    TimeInterval,
    VisibleWindow,
    covers_date,
    effective_minute_range,
    end_minutes_of_day,
    minutes_of_day,
    window_band,
)


@pytest.fixture
def today():
    return date(2025, 1, 15)


@pytest.fixture
def make_interval(today):
    def _make(start: time | None, end: time | None, end_day_offset: int = 0) -> TimeInterval:
        return TimeInterval(
            id="i",
            date=today,
            start=datetime.combine(today, start) if start else None,
            end=datetime.combine(today + timedelta(days=end_day_offset), end) if end else None,
            is_pause=True,
        )
    return _make


class TestTimeInterval:
    def test_is_complete(self, make_interval):
        assert make_interval(time(9, 0), time(10, 0)).is_complete is True
        assert make_interval(None, time(10, 0)).is_complete is False
        assert make_interval(time(9, 0), None).is_complete is False

    def test_single_day(self, make_interval, today):
        interval = make_interval(time(9, 0), time(10, 0))
        assert interval.is_multi_day is False
        assert interval.end_date == today

    def test_multi_day(self, make_interval, today):
        interval = make_interval(time(22, 0), time(6, 0), end_day_offset=2)
        assert interval.is_multi_day is True
        assert interval.end_date == today + timedelta(days=2)

    def test_incomplete_is_not_multi_day(self, make_interval, today):
        interval = make_interval(None, time(6, 0), end_day_offset=1)
        assert interval.is_multi_day is False
        assert interval.end_date == today

    def test_paint_key_ignores_title(self, make_interval):
        a = make_interval(time(9, 0), time(10, 0))
        b = make_interval(time(9, 0), time(10, 0))
        b.title = "Other"
        assert a.paint_key() == b.paint_key()


class TestVisibleWindow:
    def test_defaults(self, today):
        window = VisibleWindow(column_date=today, pixels_per_minute=1.0, pixel_width=10, pixel_height=1440)
        assert window.start_hour == 0
        assert window.end_hour == 24
        assert window.visible_minutes == 1440

    def test_visible_minutes(self, today):
        window = VisibleWindow(
            column_date=today, pixels_per_minute=1.0, pixel_width=10, pixel_height=480,
            start_hour=9, end_hour=17,
        )
        assert window.visible_minutes == 480

    def test_for_date(self, today):
        window = VisibleWindow(column_date=today, pixels_per_minute=0.5, pixel_width=10, pixel_height=720)
        other = window.for_date(today + timedelta(days=1))
        assert other.column_date == today + timedelta(days=1)
        assert other.pixels_per_minute == 0.5
        assert window.column_date == today

    @pytest.mark.parametrize("start_hour,end_hour", [(9, 9), (10, 9), (-1, 5), (0, 25)])
    def test_rejects_bad_hours(self, today, start_hour, end_hour):
        with pytest.raises(ValueError):
            VisibleWindow(
                column_date=today, pixels_per_minute=1.0, pixel_width=10, pixel_height=10,
                start_hour=start_hour, end_hour=end_hour,
            )

    @pytest.mark.parametrize("ppm", [0, -1.0])
    def test_rejects_non_positive_scale(self, today, ppm):
        with pytest.raises(ValueError, match="pixels_per_minute"):
            VisibleWindow(column_date=today, pixels_per_minute=ppm, pixel_width=10, pixel_height=10)

    def test_rejects_negative_size(self, today):
        with pytest.raises(ValueError, match="Surface size"):
            VisibleWindow(column_date=today, pixels_per_minute=1.0, pixel_width=-1, pixel_height=10)


class TestRect:
    def test_edges(self):
        rect = Rect(10, 20, 30, 40)
        assert rect.right == 40
        assert rect.bottom == 60

    def test_translate(self):
        assert Rect(0, 10, 5, 5).translate(dx=100) == Rect(100, 10, 5, 5)
        assert Rect(0, 10, 5, 5).translate(dy=-10) == Rect(0, 0, 5, 5)


class TestMinutes:
    def test_minutes_of_day(self):
        assert minutes_of_day(datetime(2025, 1, 15, 0, 0)) == 0
        assert minutes_of_day(datetime(2025, 1, 15, 13, 45, 59)) == 825

    def test_end_2359_is_end_of_day(self):
        assert end_minutes_of_day(datetime(2025, 1, 15, 23, 59)) == MINUTES_PER_DAY
        assert end_minutes_of_day(datetime(2025, 1, 15, 23, 59, 59)) == MINUTES_PER_DAY

    def test_end_other_times_unchanged(self):
        assert end_minutes_of_day(datetime(2025, 1, 15, 23, 58)) == 1438


class TestEffectiveMinuteRange:
    def test_single_day_match(self, make_interval, today):
        assert effective_minute_range(make_interval(time(9, 0), time(10, 30)), today) == (540, 630)

    def test_single_day_other_column(self, make_interval, today):
        interval = make_interval(time(9, 0), time(10, 0))
        assert effective_minute_range(interval, today + timedelta(days=1)) is None
        assert covers_date(interval, today + timedelta(days=1)) is False

    def test_incomplete(self, make_interval, today):
        assert effective_minute_range(make_interval(time(9, 0), None), today) is None
        assert covers_date(make_interval(time(9, 0), None), today) is False

    def test_empty_range(self, make_interval, today):
        interval = make_interval(time(10, 0), time(9, 0))
        assert covers_date(interval, today) is True
        assert effective_minute_range(interval, today) is None

    def test_multi_day_ranges(self, make_interval, today):
        interval = make_interval(time(20, 0), time(23, 59), end_day_offset=2)
        assert effective_minute_range(interval, today) == (1200, 1440)
        assert effective_minute_range(interval, today + timedelta(days=1)) == (0, 1440)
        assert effective_minute_range(interval, today + timedelta(days=2)) == (0, 1440)
        assert effective_minute_range(interval, today + timedelta(days=3)) is None

    def test_anchor_date_used_for_single_day(self, today):
        """A single-day interval is matched by its anchor date, not by its instants."""
        interval = TimeInterval(
            id="slice",
            date=today,
            start=datetime(2000, 1, 1, 9, 0),
            end=datetime(2000, 1, 1, 11, 0),
            is_pause=True,
        )
        assert effective_minute_range(interval, today) == (540, 660)
        assert effective_minute_range(interval, date(2000, 1, 1)) is None


class TestWindowBand:
    @pytest.fixture
    def window(self, today):
        return VisibleWindow(
            column_date=today, pixels_per_minute=0.5, pixel_width=200, pixel_height=240,
            start_hour=9, end_hour=17,
        )

    def test_inside(self, window):
        assert window_band(600, 660, window) == Rect(0.0, 30.0, 200, 30.0)

    def test_outside(self, window):
        assert window_band(0, 540, window) is None
        assert window_band(1020, 1440, window) is None

    def test_spanning_window(self, window):
        assert window_band(0, 1440, window) == Rect(0.0, 0.0, 200, 240.0)
