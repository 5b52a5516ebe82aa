"""Arrangements of a string produced by recursive swapping."""

from __future__ import annotations

from collections.abc import Iterator


def swap_permutations(text):
    """Yield arrangements of ``text`` by swapping each position into place.

    The characters are swapped in a shared buffer and never swapped back,
    so for longer strings some arrangements repeat and others are skipped;
    exactly ``len(text)!`` strings are yielded for non-empty text.
    """
    chars = list(text)
    high = len(chars) - 1

    def arrange(low: int) -> Iterator[str]:
        if low == high:
            yield "".join(chars)
            return
        for i in range(low, high + 1):
            chars[i], chars[low] = chars[low], chars[i]
            yield from arrange(low + 1)

    if chars:
        yield from arrange(0)