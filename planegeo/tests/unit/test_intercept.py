"""Unit tests for the interception solver."""

import logging
import math

import pytest
from planegeo.domain.services.intercept import time_intercept
from planegeo.domain.value_objects.geometry import Point, Vector


class TestTimeIntercept:
    """Tests for time_intercept."""

    def test_crossing_paths(self):
        t1, t2 = time_intercept(
            Point(0, 0), Point(8, 0), Vector(1, 1), Vector(-1, 1), 2
        )
        assert t1 == pytest.approx(3)
        assert t2 == pytest.approx(5)

    def test_times_in_the_past(self):
        t1, t2 = time_intercept(
            Point(0, 0), Point(8, 0), Vector(-1, -1), Vector(1, -1), 2
        )
        assert (t1, t2) == pytest.approx((-5, -3))

    def test_result_is_ordered(self):
        t1, t2 = time_intercept(
            Point(-3, 2), Point(10, -4), Vector(2, 0.5), Vector(-1, 1), 5
        )
        assert t1 <= t2

    def test_swapping_points_gives_same_times(self):
        a = time_intercept(Point(0, 0), Point(8, 0), Vector(1, 1), Vector(-1, 1), 2)
        b = time_intercept(Point(8, 0), Point(0, 0), Vector(-1, 1), Vector(1, 1), 2)
        assert a == pytest.approx(b)

    def test_tangent_gives_single_time(self):
        # closest approach is exactly the radius at t=5
        t1, t2 = time_intercept(
            Point(0, 0), Point(5, 2), Vector(1, 0), Vector(0, 0), 2
        )
        assert t1 == t2 == pytest.approx(5)

    def test_zero_radius_collision(self):
        t1, t2 = time_intercept(
            Point(0, 0), Point(10, 0), Vector(1, 0), Vector(-1, 0), 0
        )
        assert t1 == t2 == pytest.approx(5)

    def test_never_close_enough(self):
        t1, t2 = time_intercept(
            Point(0, 0), Point(10, 0), Vector(0, 1), Vector(0, -1), 2
        )
        assert math.isnan(t1)
        assert math.isnan(t2)

    def test_equal_velocity_in_range(self):
        t1, t2 = time_intercept(
            Point(0, 0), Point(1, 0), Vector(1, 1), Vector(1, 1), 2
        )
        assert t1 == -math.inf
        assert t2 == math.inf

    def test_equal_velocity_on_boundary(self):
        t1, t2 = time_intercept(
            Point(0, 0), Point(2, 0), Vector(1, 1), Vector(1, 1), 2
        )
        assert (t1, t2) == (-math.inf, math.inf)

    def test_equal_velocity_out_of_range(self):
        t1, t2 = time_intercept(
            Point(0, 0), Point(8, 0), Vector(1, 1), Vector(1, 1), 2
        )
        assert math.isnan(t1)
        assert math.isnan(t2)

    def test_both_stationary(self):
        t1, t2 = time_intercept(
            Point(0, 0), Point(0, 0), Vector(0, 0), Vector(0, 0), 0
        )
        assert (t1, t2) == (-math.inf, math.inf)

    def test_logs_degenerate_branch(self, caplog):
        caplog.set_level(logging.DEBUG, logger="planegeo.domain.services.intercept")
        time_intercept(Point(0, 0), Point(1, 0), Vector(1, 1), Vector(1, 1), 2)
        assert "always within range" in caplog.text
