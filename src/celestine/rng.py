"""Seeded pseudo-random stream for reproducible readings.

Readings must come out identical on every machine, so the generator is a
fixed 32-bit algorithm (Mulberry32) rather than :mod:`random`, whose stream
is tied to the interpreter. All arithmetic is masked to 32 bits to mirror
unsigned integer overflow.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import TypeVar

T = TypeVar("T")

MASK_32 = 0xFFFFFFFF
MULBERRY_INCREMENT = 0x6D2B79F5
_TWO_32 = 4294967296.0


def _to_int32(value: int) -> int:
    value &= MASK_32
    return value - 0x100000000 if value & 0x80000000 else value


def _imul(a: int, b: int) -> int:
    """Low 32 bits of a 32x32-bit multiply."""
    return ((a & MASK_32) * (b & MASK_32)) & MASK_32


def _utf16_code_units(text: str) -> list[int]:
    data = text.encode("utf-16-le")
    return [data[i] | (data[i + 1] << 8) for i in range(0, len(data), 2)]


def hash_string(text: str) -> int:
    """Rolling polynomial hash (``h * 31 + unit``) over UTF-16 code units.

    Returns a signed 32-bit integer.
    """
    value = 0
    for unit in _utf16_code_units(text):
        value = _to_int32(value * 31 + unit)
    return value


class Mulberry32:
    """Mulberry32 generator producing floats in [0, 1)."""

    __slots__ = ("_state",)

    def __init__(self, seed: int) -> None:
        self._state = seed & MASK_32

    @property
    def state(self) -> int:
        return self._state

    def next_uint32(self) -> int:
        self._state = (self._state + MULBERRY_INCREMENT) & MASK_32
        s = self._state
        t = _imul(s ^ (s >> 15), 1 | s)
        t = ((t + _imul(t ^ (t >> 7), 61 | t)) & MASK_32) ^ t
        return (t ^ (t >> 14)) & MASK_32

    def random(self) -> float:
        return self.next_uint32() / _TWO_32

    __call__ = random


def create_rng(zodiac_sign: str, date: str, salt: str) -> Mulberry32:
    """Stream for a (sign, date) pair."""
    return Mulberry32(hash_string(f"{zodiac_sign}::{date}::{salt}"))


def pick(items: Sequence[T], rng: Mulberry32) -> T:
    return items[int(rng() * len(items))]


def shuffled(items: Sequence[T], rng: Mulberry32) -> list[T]:
    """Fisher-Yates shuffle of a copy, walking from the last index down."""
    result = list(items)
    for i in range(len(result) - 1, 0, -1):
        j = int(rng() * (i + 1))
        result[i], result[j] = result[j], result[i]
    return result


def pick_n(items: Sequence[T], n: int, rng: Mulberry32) -> list[T]:
    """``n`` distinct entries drawn without replacement."""
    return shuffled(items, rng)[:n]
