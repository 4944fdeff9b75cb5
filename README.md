# cpdrills

A collection of solved competitive-programming drills. Each problem is a
plain Python function that takes the problem's input as ordinary values and
returns the answer. A command-line tool runs the same solutions on
judge-style input text.

## Installation

```
pip install .
```

The `test` extra installs pytest for the test suite in `tests/`:

```
pip install ".[test]"
```

## Library use

### `cpdrills.arithmetic`

- `cube_paint_cost(n, costs)` — `ceil(n / 2)` times the sum of six face
  costs; raises `ValueError` unless exactly six costs are given.
- `defeats_monster(health, x, y)` — `True` when `x > y`.
- `is_lucky(n)` — `True` when the exponent of 2 in `n` is even; raises
  `ValueError` for `n <= 0`.
- `count_rectangles(n, m)` — sub-rectangles of an `n x m` grid, not counting
  single cells.
- `segment_count(a, b)` — seven-segment strokes needed to show `a + b`
  (0 when the sum is not positive).
- `forms_expression(a, b, c)` — whether, after sorting, one number is the
  sum of the other two.
- `pixel_damaged(x1, y1, x2, y2, k)` — whether `(x1, y1)` lies strictly
  within distance `k` of `(y2, x2)`.
- `adjust_proximity(p, x, y, z)` — `p` raised by `y` percent when `z` is
  truthy, otherwise lowered by `x` percent.
- `second_smallest(values)` — second value in ascending order; raises
  `ValueError` for fewer than two values.
- `gcd(a, b)`, `lcm(a, b)` — Euclid's algorithm with remainders truncated
  toward zero; `lcm(0, 0)` raises `ZeroDivisionError`.
- `divisibility_answer(x, y, z)` — `-1` when `z == 1`, otherwise `None`.

### `cpdrills.sequences`

- `surviving_asteroids(asteroids)` — takes `(direction, radius)` pairs
  (direction 0 moves left) and returns the ascending 1-based indices of the
  asteroids left after collisions. Colliding asteroids merge into one whose
  radius is their sum and which keeps the larger one's index; equal ones
  destroy each other.
- `max_removals(values)` — removals of matched 0/1 pairs, plus a third of the
  unmatched ones.
- `count_weird_subarrays(values)` — subarrays that fall at most once and
  otherwise only rise; raises `ValueError` for an empty list.
- `taxi_cost(forecasts, cost)` — `cost` is paid on each rainy day (forecast
  1) and on the day after one.
- `walktober_deficit(scores, player)` — extra steps the 1-based `player`
  needs to reach the best of the others on every day; raises `ValueError`
  for a bad player number or ragged score rows.
- `best_balanced_split(a, b)` — largest `min(red, blue)` when each item adds
  `a[i]` to red or `b[i]` to blue; raises `ValueError` when the lengths differ.

### `cpdrills.strings`

- `count_zero_one_pairs(bits)` — pairs `i < j` with a `'0'` before a
  non-`'0'` character, modulo `MODULUS` (1 000 000 007).
- `minimum_lcs(a, b)` — largest count of one letter that both strings hold
  at least that often; raises `ValueError` when the lengths differ.
- `palindrome_partition(s)` — a tuple of part lengths splitting an
  even-length string into non-palindromic pieces, or `None` when there is
  none; raises `ValueError` for odd length.

### Examples

```python
from cpdrills.arithmetic import count_rectangles, cube_paint_cost, segment_count
from cpdrills.sequences import taxi_cost
from cpdrills.strings import count_zero_one_pairs

count_rectangles(1, 1)                  # 0
cube_paint_cost(3, [1, 1, 1, 1, 1, 1])  # 12
segment_count(1, 2)                     # 5  (strokes needed for "3")
taxi_cost([0, 1, 0], 5)                 # 10
count_zero_one_pairs("0101")            # 3
```

## Command line

```
cpdrills PROBLEM [INPUT]
```

reads the number of test cases followed by the cases, whitespace separated,
from the file `INPUT` or from standard input, and writes the answers to
standard output. `walktober` answers are prefixed with `Case #k: `. On bad
input the command prints `error: ...` to standard error and exits with
status 1.

Problem names: `asteroids`, `attack-on-kingdom`, `color-the-cube`,
`defeat-the-monster`, `divisible`, `emotional-proximity`, `kth-number`,
`lucky-number`, `minimum-lcs`, `number-expression`, `palindrome-partition`,
`pixel-damage`, `rectangles`, `red-blue`, `subarray-removal`, `taxi-cost`,
`walktober`, `weird-subarrays`, `zero-one-pairs`.

```
cpdrills --help
```

lists them as well. From Python, `cpdrills.cli.run(problem, text)` takes the
input text and returns the output text, raising `ValueError` for an unknown
problem or malformed input; `cpdrills.cli.PROBLEMS` maps each name to its
reader.

## Limitations

The `divisible` problem is only decided for `z == 1` (answer `-1`); for any
other input `divisibility_answer` returns `None` and the command prints
nothing for that case.