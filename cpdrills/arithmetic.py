"""Small closed-form and arithmetic problems."""

from __future__ import annotations

import math
from collections.abc import Iterable, Sequence

_SEGMENTS = {0: 6, 1: 2, 2: 5, 3: 5, 4: 4, 5: 5, 6: 6, 7: 3, 8: 7, 9: 6}


def cube_paint_cost(n: int, costs: Sequence[int]) -> int:
    """Cost of painting ceil(n / 2) cubes, each needing all six faces."""
    faces = list(costs)
    if len(faces) != 6:
        raise ValueError(f"a cube has 6 faces, got {len(faces)} costs")
    cubes = -(-n // 2)
    return cubes * sum(faces)


def defeats_monster(health: int, x: int, y: int) -> bool:
    """Whether the monster can be defeated: attack x must exceed regeneration y."""
    return x > y


def is_lucky(n: int) -> bool:
    """A positive number is lucky when its power-of-two factor has even exponent."""
    if n <= 0:
        raise ValueError("n must be positive")
    exponent = 0
    while n % 2 == 0:
        n //= 2
        exponent += 1
    return exponent % 2 == 0


def count_rectangles(n: int, m: int) -> int:
    """Number of sub-rectangles of an n x m grid that are not single cells."""
    return (m * (m + 1) * n * (n + 1)) // 4 - n * m


def segment_count(a: int, b: int) -> int:
    """Seven-segment strokes needed to display a + b (zero for non-positive sums)."""
    total = a + b
    if total <= 0:
        return 0
    return sum(_SEGMENTS[int(digit)] for digit in str(total))


def forms_expression(a: int, b: int, c: int) -> bool:
    """Whether one of the three numbers is the sum of the other two after sorting."""
    low, mid, high = sorted((a, b, c))
    return high == mid + low or mid == high + low


def pixel_damaged(x1: int, y1: int, x2: int, y2: int, k: int) -> bool:
    """Whether the point (x1, y1) lies strictly within distance k of (y2, x2)."""
    distance = math.sqrt((x1 - y2) ** 2 + (y1 - x2) ** 2)
    return distance < k


def adjust_proximity(p: float, x: float, y: float, z: int) -> float:
    """Raise p by y percent when z is set, otherwise lower it by x percent."""
    if z:
        return p + p * (y / 100.0)
    return p - p * (x / 100.0)


def second_smallest(values: Iterable[int]) -> int:
    """The second element of the values in ascending order."""
    ordered = sorted(values)
    if len(ordered) < 2:
        raise ValueError("at least two values are required")
    return ordered[1]


def _trunc_mod(a: int, b: int) -> int:
    remainder = abs(a) % abs(b)
    return -remainder if a < 0 else remainder


def gcd(a: int, b: int) -> int:
    """Greatest common divisor by Euclid's algorithm (remainder truncates toward zero)."""
    while b != 0:
        a, b = b, _trunc_mod(a, b)
    return a


def lcm(a: int, b: int) -> int:
    """Least common multiple, computed as (a / gcd(a, b)) * b."""
    divisor = gcd(a, b)
    if divisor == 0:
        raise ZeroDivisionError("lcm of 0 and 0 is undefined")
    quotient = abs(a) // abs(divisor)
    if (a < 0) != (divisor < 0):
        quotient = -quotient
    return quotient * b


def divisibility_answer(x: int, y: int, z: int) -> int | None:
    """-1 when z is 1, since then no number fits; no answer is decided otherwise."""
    if z == 1:
        return -1
    return None