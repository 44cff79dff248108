"""Interception solver - closest approach of two moving points."""

from __future__ import annotations

import logging
import math

from ...domain.value_objects.geometry import Point, Vector

logger = logging.getLogger(__name__)


def time_intercept(
    s1: Point,
    s2: Point,
    v1: Vector,
    v2: Vector,
    radius: float
) -> tuple[float, float]:
    """Compute the times at which two moving points are ``radius`` apart.

    Points start at s1 and s2 and move with constant velocities v1 and v2.
    Use a radius of zero for a true intersection. Times may lie in the past
    or the future.

    Algorithm:
        The squared distance over time, |(s2 + t*v2) - (s1 + t*v1)|^2,
        expands to a*t^2 + b*t + c. Moving radius^2 into the constant term
        leaves a quadratic solved with the usual formula.

    Args:
        s1: Start of the first point
        s2: Start of the second point
        v1: Velocity of the first point
        v2: Velocity of the second point
        radius: Interception distance

    Returns:
        (earlier, later). With equal velocities the distance never changes:
        (-inf, inf) if it is within radius, otherwise (nan, nan). Points that
        never come within radius also give (nan, nan).
    """
    a = (v2.y * v2.y - 2 * v1.y * v2.y + v2.x * v2.x - 2 * v1.x * v2.x
         + v1.y * v1.y + v1.x * v1.x)
    b = ((2 * s2.y - 2 * s1.y) * v2.y + (2 * s2.x - 2 * s1.x) * v2.x
         + (2 * s1.y - 2 * s2.y) * v1.y + (2 * s1.x - 2 * s2.x) * v1.x)
    c = (s2.y * s2.y - 2 * s1.y * s2.y + s2.x * s2.x - 2 * s1.x * s2.x
         + s1.y * s1.y + s1.x * s1.x)

    if a == 0:
        # Same velocity: either always or never in range
        if s1.distance_to(s2) <= radius:
            logger.debug("Equal velocities, always within range")
            return -math.inf, math.inf
        logger.debug("Equal velocities, never within range")
        return math.nan, math.nan

    inner = b * b - 4 * a * (c - radius * radius)
    if inner < 0:
        logger.debug(f"Negative discriminant ({inner}), no interception")
        return math.nan, math.nan

    discr = math.sqrt(inner)
    sol1 = (-b + discr) / (2 * a)
    sol2 = (-b - discr) / (2 * a)
    return _sort_pair(sol1, sol2)


def _sort_pair(n: float, m: float) -> tuple[float, float]:
    if n <= m:
        return n, m
    return m, n
