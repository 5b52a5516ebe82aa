import math

import pytest

from dskit.permute import swap_permutations


def test_empty_string_yields_nothing():
    assert list(swap_permutations("")) == []


def test_single_character():
    assert list(swap_permutations("x")) == ["x"]


def test_two_characters():
    assert list(swap_permutations("ab")) == ["ab", "ba"]


def test_three_characters_swap_order():
    assert list(swap_permutations("abc")) == ["abc", "acb", "cab", "cba", "abc", "acb"]


@pytest.mark.parametrize("text", ["ab", "abc", "abcd", "hello"])
def test_yields_factorial_many_rearrangements(text):
    results = list(swap_permutations(text))
    assert len(results) == math.factorial(len(text))
    assert results[0] == text
    assert all(sorted(result) == sorted(text) for result in results)


def test_is_lazy_generator():
    generator = swap_permutations("abcdefgh")
    assert next(generator) == "abcdefgh"