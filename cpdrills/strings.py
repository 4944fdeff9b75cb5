"""Problems over strings: ordered pairs, shared letters and palindrome splits."""

from __future__ import annotations

from collections import Counter

MODULUS = 1_000_000_007


def count_zero_one_pairs(bits: str) -> int:
    """Pairs i < j with bits[i] == '0' and bits[j] a one, modulo 1e9 + 7.

    Every character other than '0' counts as a one.
    """
    zeros = 0
    total = 0
    for ch in bits:
        if ch == "0":
            zeros += 1
        else:
            total += zeros
    return total % MODULUS


def minimum_lcs(a: str, b: str) -> int:
    """Largest count of a single letter that both strings hold at least that often."""
    if len(a) != len(b):
        raise ValueError("both strings must have the same length")
    counts_a = Counter(a)
    counts_b = Counter(b)
    return max((min(count, counts_b[ch]) for ch, count in counts_a.items()), default=0)


def palindrome_partition(s: str) -> tuple[int, ...] | None:
    """Lengths of the parts of a split of ``s`` into non-palindromic pieces.

    Returns the part lengths in order, or ``None`` when no split exists.
    A string that starts with '0' is treated as if all its characters were '0'.
    """
    length = len(s)
    if length % 2:
        raise ValueError("the string must have even length")
    if s.startswith("0"):
        s = s.replace("1", "0")
    if s != s[::-1]:
        return (length,)

    zeros = [index for index, ch in enumerate(s) if ch == "0"]
    if not zeros:
        return None

    gap = length - 1 - zeros[-1]
    for current, previous in zip(reversed(zeros), reversed(zeros[:-1])):
        if current - previous - 1 != gap:
            return (previous + 1, length - 1 - previous)

    previous = zeros[-2]
    return (previous + 2, length - 2 - previous)