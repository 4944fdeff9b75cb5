"""Problems over sequences: collisions, runs, sliding state and subset sums."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from itertools import groupby, pairwise


def _collide(stack: list[tuple[int, int]], velocity: int, index: int) -> None:
    """Resolve a left-moving asteroid against right-movers on top of the stack.

    When the merged asteroid stops colliding while the stack still holds
    asteroids, it is dropped rather than pushed; that matches the reference
    behaviour of this problem.
    """
    top_velocity, top_index = stack[-1]
    while stack and velocity < 0 and top_velocity > 0:
        stack.pop()
        mass = abs(velocity) + abs(top_velocity)
        if abs(velocity) > abs(top_velocity):
            velocity = -mass
        elif abs(velocity) < abs(top_velocity):
            velocity = mass
            index = top_index
        else:
            return
        if not stack:
            stack.append((velocity, index))
            return
        top_velocity, top_index = stack[-1]


def surviving_asteroids(asteroids: Iterable[tuple[int, int]]) -> list[int]:
    """1-based indices, ascending, of asteroids left after all collisions.

    Each asteroid is a ``(direction, radius)`` pair; direction 0 moves left,
    any other value moves right.  A collision merges the two asteroids into
    one whose radius is their sum, keeping the identity of the larger; equal
    asteroids destroy each other.
    """
    stack: list[tuple[int, int]] = []
    for index, (direction, radius) in enumerate(asteroids, start=1):
        velocity = -radius if direction == 0 else radius
        if stack and velocity < 0 and stack[-1][0] > 0:
            _collide(stack, velocity, index)
        else:
            stack.append((velocity, index))
    return sorted(index for _, index in stack)


def max_removals(values: Iterable[int]) -> int:
    """Most removals of "01"/"10" pairs, then of "111" triples, from a 0/1 array."""
    zeros = ones = removed = 0
    for value in values:
        if value == 0:
            zeros += 1
        elif value == 1:
            ones += 1
        matched = min(zeros, ones)
        zeros -= matched
        ones -= matched
        removed += matched
    return removed + ones // 3


def count_weird_subarrays(values: Sequence[int]) -> int:
    """Number of subarrays that fall at most once and then only rise."""
    n = len(values)
    if n == 0:
        raise ValueError("at least one value is required")
    if n == 1:
        return 1
    falls = (current < previous for previous, current in pairwise(values))
    runs = [(flag, sum(1 for _ in group)) for flag, group in groupby(falls)]
    runs.append((False, 0))

    total = sum(length * (length + 1) // 2 for _, length in runs[:-1])
    total += sum(
        length * next_length
        for (flag, length), (_, next_length) in pairwise(runs)
        if flag
    )
    return total + n


def taxi_cost(forecasts: Iterable[int], cost: int) -> int:
    """Total paid when a taxi is taken on rainy days and on the day after rain."""
    total = 0
    previous = 0
    for forecast in forecasts:
        if forecast == 1 or previous == 1:
            total += cost
        previous = forecast
    return total


def walktober_deficit(scores: Sequence[Sequence[int]], player: int) -> int:
    """Extra steps the 1-based ``player`` needs to match the daily best of the others."""
    rows = [list(row) for row in scores]
    if not 1 <= player <= len(rows):
        raise ValueError(f"player must be between 1 and {len(rows)}, got {player}")
    days = len(rows[player - 1])
    if any(len(row) != days for row in rows):
        raise ValueError("every player needs a score for every day")

    own = rows[player - 1]
    others = [row for number, row in enumerate(rows, start=1) if number != player]
    deficit = 0
    for day, mine in enumerate(own):
        best = max((row[day] for row in others), default=0)
        best = max(best, 0)
        if mine < best:
            deficit += best - mine
    return deficit


def best_balanced_split(a: Sequence[int], b: Sequence[int]) -> int:
    """Largest min(red, blue) when each item i adds a[i] to red or b[i] to blue."""
    if len(a) != len(b):
        raise ValueError("a and b must have the same length")
    states: dict[int, int] = {0: 0}
    for red_gain, blue_gain in zip(a, b):
        following: dict[int, int] = {}
        for red, blue in states.items():
            for new_red, new_blue in ((red + red_gain, blue), (red, blue + blue_gain)):
                if following.get(new_red, new_blue - 1) < new_blue:
                    following[new_red] = new_blue
        states = following
    return max(max(min(red, blue) for red, blue in states.items()), 0)