"""Command-line runner that reads test cases and prints each problem's answers."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Callable
from dataclasses import dataclass

from cpdrills.arithmetic import (
    adjust_proximity,
    count_rectangles,
    cube_paint_cost,
    defeats_monster,
    divisibility_answer,
    forms_expression,
    is_lucky,
    pixel_damaged,
    second_smallest,
    segment_count,
)
from cpdrills.sequences import (
    best_balanced_split,
    count_weird_subarrays,
    max_removals,
    surviving_asteroids,
    taxi_cost,
    walktober_deficit,
)
from cpdrills.strings import count_zero_one_pairs, minimum_lcs, palindrome_partition


class _Tokens:
    """Whitespace-separated input tokens."""

    def __init__(self, text: str) -> None:
        self._items = iter(text.split())

    def word(self) -> str:
        try:
            return next(self._items)
        except StopIteration:
            raise ValueError("unexpected end of input") from None

    def integer(self) -> int:
        word = self.word()
        try:
            return int(word)
        except ValueError:
            raise ValueError(f"expected an integer, got {word!r}") from None

    def number(self) -> float:
        word = self.word()
        try:
            return float(word)
        except ValueError:
            raise ValueError(f"expected a number, got {word!r}") from None

    def integers(self, count: int) -> list[int]:
        return [self.integer() for _ in range(count)]


@dataclass(frozen=True)
class Problem:
    """How one problem reads a test case and what it prints."""

    solve: Callable[[_Tokens], list[str]]
    numbered: bool = False


def _zero_one_pairs(tokens: _Tokens) -> list[str]:
    n = tokens.integer()
    return [str(count_zero_one_pairs(tokens.word()[:n]))]


def _asteroids(tokens: _Tokens) -> list[str]:
    n = tokens.integer()
    asteroids = [(tokens.integer(), tokens.integer()) for _ in range(n)]
    survivors = surviving_asteroids(asteroids)
    lines = [str(len(survivors))]
    if survivors:
        lines.append(" ".join(map(str, survivors)))
    return lines


def _proximity(tokens: _Tokens) -> list[str]:
    p, x, y, z = (tokens.number() for _ in range(4))
    return [f"{adjust_proximity(p, x, y, z):.10f}"]


def _minimum_lcs(tokens: _Tokens) -> list[str]:
    n = tokens.integer()
    a = tokens.word()[:n]
    b = tokens.word()[:n]
    return [str(minimum_lcs(a, b))]


def _attack(tokens: _Tokens) -> list[str]:
    n = tokens.integer()
    return [str(second_smallest(tokens.integers(n)))]


def _cube(tokens: _Tokens) -> list[str]:
    n = tokens.integer()
    return [str(cube_paint_cost(n, tokens.integers(6)))]


def _monster(tokens: _Tokens) -> list[str]:
    health, x, y = tokens.integers(3)
    return [str(int(defeats_monster(health, x, y)))]


def _divisible(tokens: _Tokens) -> list[str]:
    x, y, z = tokens.integers(3)
    answer = divisibility_answer(x, y, z)
    return [] if answer is None else [str(answer)]


def _segments(tokens: _Tokens) -> list[str]:
    a, b = tokens.integers(2)
    return [str(segment_count(a, b))]


def _lucky(tokens: _Tokens) -> list[str]:
    return [str(int(is_lucky(tokens.integer())))]


def _rectangles(tokens: _Tokens) -> list[str]:
    n, m = tokens.integers(2)
    return [str(count_rectangles(n, m))]


def _palindrome(tokens: _Tokens) -> list[str]:
    n = tokens.integer()
    parts = palindrome_partition(tokens.word()[: 2 * n])
    if parts is None:
        return ["-1"]
    return [str(len(parts)), " ".join(map(str, parts))]


def _pixel(tokens: _Tokens) -> list[str]:
    x1, y1, x2, y2, k = tokens.integers(5)
    return [str(int(pixel_damaged(x1, y1, x2, y2, k)))]


def _red_blue(tokens: _Tokens) -> list[str]:
    n = tokens.integer()
    a = tokens.integers(n)
    b = tokens.integers(n)
    return [str(best_balanced_split(a, b))]


def _subarray_removal(tokens: _Tokens) -> list[str]:
    n = tokens.integer()
    return [str(max_removals(tokens.integers(n)))]


def _taxi(tokens: _Tokens) -> list[str]:
    n, cost = tokens.integers(2)
    return [str(taxi_cost(tokens.integers(n), cost))]


def _expression(tokens: _Tokens) -> list[str]:
    a, b, c = tokens.integers(3)
    return ["YES" if forms_expression(a, b, c) else "NO"]


def _walktober(tokens: _Tokens) -> list[str]:
    players, days, player = tokens.integers(3)
    scores = [tokens.integers(days) for _ in range(players)]
    return [str(walktober_deficit(scores, player))]


def _weird(tokens: _Tokens) -> list[str]:
    n = tokens.integer()
    return [str(count_weird_subarrays(tokens.integers(n)))]


PROBLEMS: dict[str, Problem] = {
    "zero-one-pairs": Problem(_zero_one_pairs),
    "asteroids": Problem(_asteroids),
    "emotional-proximity": Problem(_proximity),
    "minimum-lcs": Problem(_minimum_lcs),
    "attack-on-kingdom": Problem(_attack),
    "color-the-cube": Problem(_cube),
    "defeat-the-monster": Problem(_monster),
    "divisible": Problem(_divisible),
    "kth-number": Problem(_segments),
    "lucky-number": Problem(_lucky),
    "rectangles": Problem(_rectangles),
    "palindrome-partition": Problem(_palindrome),
    "pixel-damage": Problem(_pixel),
    "red-blue": Problem(_red_blue),
    "subarray-removal": Problem(_subarray_removal),
    "taxi-cost": Problem(_taxi),
    "number-expression": Problem(_expression),
    "walktober": Problem(_walktober, numbered=True),
    "weird-subarrays": Problem(_weird),
}


def run(problem: str, text: str) -> str:
    """Solve every test case in ``text`` (a count followed by the cases) for ``problem``."""
    try:
        spec = PROBLEMS[problem]
    except KeyError:
        raise ValueError(f"unknown problem {problem!r}") from None
    tokens = _Tokens(text)
    cases = tokens.integer()
    lines: list[str] = []
    for number in range(1, cases + 1):
        output = spec.solve(tokens)
        if spec.numbered:
            output = [f"Case #{number}: {line}" for line in output]
        lines.extend(output)
    return "".join(f"{line}\n" for line in lines)


def main(argv: list[str] | None = None) -> int:
    """Read a problem's input from a file or standard input and print the answers."""
    parser = argparse.ArgumentParser(prog="cpdrills", description=__doc__)
    parser.add_argument("problem", choices=sorted(PROBLEMS))
    parser.add_argument("input", nargs="?", help="input file (standard input if omitted)")
    args = parser.parse_args(argv)

    try:
        if args.input is None:
            text = sys.stdin.read()
        else:
            with open(args.input, encoding="utf-8") as handle:
                text = handle.read()
        output = run(args.problem, text)
    except (OSError, ValueError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    sys.stdout.write(output)
    return 0