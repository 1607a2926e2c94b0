import math
from types import SimpleNamespace

import pytest

from graphpart import random_functions as rf


def test_seed_makes_draws_repeatable():
    rf.set_seed(42)
    first = [rf.next_int(0, 1000) for _ in range(20)]
    rf.set_seed(42)
    second = [rf.next_int(0, 1000) for _ in range(20)]
    assert first == second


def test_next_int_bounds():
    rf.set_seed(1)
    draws = [rf.next_int(3, 7) for _ in range(500)]
    assert min(draws) >= 3 and max(draws) <= 7
    assert set(draws) == {3, 4, 5, 6, 7}


def test_next_int_single_value():
    assert rf.next_int(9, 9) == 9


def test_next_int_empty_range():
    with pytest.raises(ValueError):
        rf.next_int(5, 4)


def test_next_double_in_range():
    rf.set_seed(3)
    draws = [rf.next_double(-2.0, 3.0) for _ in range(200)]
    assert all(-2.0 <= d <= 3.0 for d in draws)


def test_next_bool_gives_both_values():
    rf.set_seed(5)
    assert {rf.next_bool() for _ in range(200)} == {True, False}


def test_fast_rand_bool_both_values_and_repeatable():
    rf.set_seed(7)
    first = [rf.FastRandBool().next_bool() for _ in range(3)]
    gen = rf.FastRandBool()
    bits = [gen.next_bool() for _ in range(300)]
    assert set(bits) == {True, False}
    rf.set_seed(7)
    again = [rf.FastRandBool().next_bool() for _ in range(3)]
    assert first == again


@pytest.mark.parametrize("size", [2, 5, 50])
def test_circular_permutation_is_permutation(size):
    rf.set_seed(11)
    seq = [0] * size
    rf.circular_permutation(seq)
    assert sorted(seq) == list(range(size))


def test_circular_permutation_short_untouched():
    seq = [42]
    rf.circular_permutation(seq)
    assert seq == [42]


@pytest.mark.parametrize("size", [10, 37, 200])
def test_fast_permutation_is_permutation(size):
    rf.set_seed(13)
    seq = [0] * size
    rf.permutate_vector_fast(seq, True)
    assert sorted(seq) == list(range(size))


def test_fast_permutation_short_is_identity():
    seq = [9] * 6
    rf.permutate_vector_fast(seq, True)
    assert seq == list(range(6))


@pytest.mark.parametrize("size", [3, 9, 10, 64])
def test_good_permutation_is_permutation(size):
    rf.set_seed(17)
    seq = [0] * size
    rf.permutate_vector_good(seq, True)
    assert sorted(seq) == list(range(size))


def test_good_small_keeps_elements():
    rf.set_seed(19)
    seq = ["a", "b", "c", "d"]
    rf.permutate_vector_good_small(seq)
    assert sorted(seq) == ["a", "b", "c", "d"]


def test_pairs_short_unchanged():
    pairs = [(0, 1), (2, 3), (4, 5)]
    rf.permutate_pairs_good(pairs)
    assert pairs == [(0, 1), (2, 3), (4, 5)]


def test_pairs_keep_elements():
    rf.set_seed(23)
    pairs = [(i, i + 1) for i in range(12)]
    original = sorted(pairs)
    rf.permutate_pairs_good(pairs)
    assert sorted(pairs) == original


def test_entries_none_is_identity():
    config = SimpleNamespace(permutation_quality=rf.PermutationQuality.NONE)
    seq = [5] * 15
    rf.permutate_entries(config, seq, True)
    assert seq == list(range(15))


@pytest.mark.parametrize(
    "quality", [rf.PermutationQuality.FAST, rf.PermutationQuality.GOOD]
)
def test_entries_permute(quality):
    rf.set_seed(29)
    config = SimpleNamespace(permutation_quality=quality)
    seq = [0] * 30
    rf.permutate_entries(config, seq, True)
    assert sorted(seq) == list(range(30))


@pytest.mark.parametrize("value", [0.25, 1.0, 2.0, 4.0, 100.0, 12345.0])
def test_approx_sqrt_close(value):
    assert rf.approx_sqrt(value) == pytest.approx(math.sqrt(value), rel=0.01)
    assert rf.approx_invsqrt(value) == pytest.approx(1 / math.sqrt(value), rel=0.01)


def test_approx_sqrt_of_zero_is_tiny():
    assert 0 < rf.approx_sqrt(0.0) < 1e-100