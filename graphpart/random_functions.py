"""Seeded random helpers: draws, in-place permutations and fast square roots."""

from __future__ import annotations

import random
import struct
from enum import IntEnum
from typing import Any, MutableSequence

_DEFAULT_MT_SEED = 5489
_INVSQRT_MAGIC = 0x5FE6EB50C7B537A9

_mt = random.Random(_DEFAULT_MT_SEED)
_crand = random.Random(1)
_seed = 0


class PermutationQuality(IntEnum):
    NONE = 0
    FAST = 1
    GOOD = 2


def set_seed(seed: int) -> None:
    """Reseed every generator used by this module."""
    global _seed
    _seed = seed
    _crand.seed(seed)
    _mt.seed(seed)


def next_bool() -> bool:
    return bool(_mt.randint(0, 1))


def next_int(lb: int, rb: int) -> int:
    """Uniform integer in ``[lb, rb]``, both ends included."""
    if lb > rb:
        raise ValueError(f"empty range [{lb}, {rb}]")
    return _mt.randint(lb, rb)


def next_double(lb: float, rb: float) -> float:
    """Uniform float between ``lb`` and ``rb``."""
    return lb + _crand.random() * (rb - lb)


class FastRandBool:
    """Hands out random booleans one bit at a time from a cached word."""

    def __init__(self, bits: int = 64) -> None:
        self._bits = bits
        self._mask_left = 1 << (bits - 1)
        self._rand = 1

    def next_bool(self) -> bool:
        if self._rand == 1:
            self._rand = _mt.getrandbits(self._bits) | self._mask_left
        bit = bool(self._rand & 1)
        self._rand >>= 1
        return bit


def _fill_identity(seq: MutableSequence[Any]) -> None:
    seq[:] = range(len(seq))


def _swap_runs(seq: MutableSequence[Any], a: int, b: int, length: int = 4) -> None:
    for offset in range(length):
        seq[a + offset], seq[b + offset] = seq[b + offset], seq[a + offset]


def circular_permutation(seq: MutableSequence[int]) -> None:
    """Fill ``seq`` with ``0..n-1`` and scramble it by random distinct swaps."""
    size = len(seq)
    if size < 2:
        return
    _fill_identity(seq)
    for _ in range(size):
        pos_a = _mt.randint(0, size - 1)
        pos_b = _mt.randint(0, size - 1)
        while pos_b == pos_a:
            pos_b = _mt.randint(0, size - 1)
        if pos_a != seq[pos_b] and pos_b != seq[pos_a]:
            seq[pos_a], seq[pos_b] = seq[pos_b], seq[pos_a]


def permutate_vector_fast(seq: MutableSequence[Any], init: bool) -> None:
    """Cheap local shuffle: swaps runs of four with nearby positions."""
    if init:
        _fill_identity(seq)
    if len(seq) < 10:
        return
    distance = 20
    size = len(seq) - 4
    for pos_a in range(size):
        pos_b = (pos_a + _mt.randint(0, distance)) % size
        _swap_runs(seq, pos_a, pos_b)


def permutate_vector_good(seq: MutableSequence[Any], init: bool) -> None:
    """Shuffle by swapping runs of four between random positions."""
    if init:
        _fill_identity(seq)
    if len(seq) < 10:
        permutate_vector_good_small(seq)
        return
    size = len(seq)
    for _ in range(size):
        pos_a = _mt.randint(0, size - 4)
        pos_b = _mt.randint(0, size - 4)
        _swap_runs(seq, pos_a, pos_b)


def permutate_pairs_good(seq: MutableSequence[tuple[int, int]]) -> None:
    """Shuffle a sequence of pairs by swapping runs of four; short ones stay."""
    size = len(seq)
    if size < 4:
        return
    for _ in range(size):
        pos_a = _mt.randint(0, size - 4)
        pos_b = _mt.randint(0, size - 4)
        _swap_runs(seq, pos_a, pos_b)


def permutate_vector_good_small(seq: MutableSequence[Any]) -> None:
    """Shuffle by ``len(seq)`` swaps of single random positions."""
    size = len(seq)
    if size < 2:
        return
    for _ in range(size):
        pos_a = _mt.randint(0, size - 1)
        pos_b = _mt.randint(0, size - 1)
        seq[pos_a], seq[pos_b] = seq[pos_b], seq[pos_a]


def permutate_entries(config: Any, seq: MutableSequence[Any], init: bool) -> None:
    """Permute ``seq`` with the strategy named by ``config.permutation_quality``."""
    if init:
        _fill_identity(seq)
    quality = PermutationQuality(config.permutation_quality)
    if quality is PermutationQuality.FAST:
        permutate_vector_fast(seq, False)
    elif quality is PermutationQuality.GOOD:
        permutate_vector_good(seq, False)


def _wrap_int64(value: int) -> int:
    return (value + (1 << 63)) % (1 << 64) - (1 << 63)


def approx_invsqrt(number: float) -> float:
    """Approximate ``1/sqrt(number)`` by the bit trick plus one Newton step."""
    (bits,) = struct.unpack("<q", struct.pack("<d", number))
    bits = _wrap_int64(_INVSQRT_MAGIC - (bits >> 1))
    (y,) = struct.unpack("<d", struct.pack("<q", bits))
    return y * (1.5 - (number * 0.5 * y * y))


def approx_sqrt(number: float) -> float:
    """Approximate ``sqrt(number)`` as the reciprocal of :func:`approx_invsqrt`."""
    return 1 / approx_invsqrt(number)