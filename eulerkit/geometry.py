"""Puzzles about rectangles in grids, cuboid routes and almost equilateral triangles."""

from __future__ import annotations

import itertools
import math


def _rectangles(width: int, height: int) -> int:
    return width * (width + 1) // 2 * (height * (height + 1) // 2)


def rectangle_grid_area(target: int = 2_000_000, tolerance: int = 1_000) -> int:
    """Area of the first grid (width from 3, height up to width) holding within ``tolerance`` of ``target`` rectangles."""
    if tolerance <= 0:
        raise ValueError("tolerance must be positive")
    for width in itertools.count(3):
        if _rectangles(width, 1) - target >= tolerance:
            break
        for height in range(1, width + 1):
            if abs(_rectangles(width, height) - target) < tolerance:
                return width * height
    raise LookupError(f"no grid holds within {tolerance} of {target} rectangles")


def _is_square(n: int) -> bool:
    root = math.isqrt(n)
    return root * root == n


def cuboid_route_size(threshold: int = 1_000_000) -> int:
    """Smallest M for which more than ``threshold`` cuboids up to M x M x M have an integer shortest route."""
    solutions = 0
    for size in itertools.count(1):
        for pair in range(2, 2 * size + 1):
            if _is_square(size * size + pair * pair):
                if pair <= size:
                    solutions += pair // 2
                else:
                    solutions += size - (pair + 1) // 2 + 1
        if solutions > threshold:
            return size
    raise AssertionError("unreachable")


def _has_integral_area(side: int, base: int) -> bool:
    sixteen_area_squared = base * base * (4 * side * side - base * base)
    root = math.isqrt(sixteen_area_squared)
    return root * root == sixteen_area_squared and root % 4 == 0


def almost_equilateral_perimeter_sum(limit: int = 1_000_000_000) -> int:
    """Sum of perimeters up to ``limit`` of triangles (a, a, a +/- 1) with integral sides and area."""
    total = 0
    x, y = 2, 1
    while 2 * x - 2 <= limit:
        for sign in (1, -1):
            side, remainder = divmod(2 * x + sign, 3)
            if remainder or side < 2:
                continue
            base = side + sign
            perimeter = 2 * side + base
            if perimeter <= limit and _has_integral_area(side, base):
                total += perimeter
        x, y = 2 * x + 3 * y, x + 2 * y
    return total