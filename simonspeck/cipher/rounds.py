"""Single-round mixing steps for both families, forward and inverse.

Every function takes and returns the block halves ``(x, y)`` so the
pipeline can drive either family through the same loop.
"""
from __future__ import annotations

from typing import Callable, Tuple

from .spec import VariantDescriptor
from .words import WordArith

Halves = Tuple[int, int]
RoundFn = Callable[[int, int, int], Halves]


def speck_round(ar: WordArith, alpha: int, beta: int, x: int, y: int, k: int) -> Halves:
    x = ar.rotr(x, alpha)
    x = ar.add(x, y)
    x = ar.xor(x, k)
    y = ar.rotl(y, beta)
    y = ar.xor(y, x)
    return x, y


def speck_round_inverse(ar: WordArith, alpha: int, beta: int, x: int, y: int, k: int) -> Halves:
    y = ar.xor(y, x)
    y = ar.rotr(y, beta)
    x = ar.xor(x, k)
    x = ar.sub(x, y)
    x = ar.rotl(x, alpha)
    return x, y


def simon_f(ar: WordArith, v: int) -> int:
    """The AND-rotate-XOR mix: (v <<< 1 & v <<< 8) ^ v <<< 2."""
    return ar.xor(ar.and_(ar.rotl(v, 1), ar.rotl(v, 8)), ar.rotl(v, 2))


def simon_round(ar: WordArith, x: int, y: int, k: int) -> Halves:
    t = ar.xor(simon_f(ar, x), y)
    return ar.xor(t, k), x


def simon_round_inverse(ar: WordArith, x: int, y: int, k: int) -> Halves:
    # forward was (x, y) -> (y ^ f(x) ^ k, x), so the old x sits in y
    t = ar.xor(x, k)
    return y, ar.xor(t, simon_f(ar, y))


def round_functions(variant: VariantDescriptor) -> Tuple[RoundFn, RoundFn]:
    """Bind the family's forward and inverse rounds to the variant's parameters."""
    ar = WordArith(variant.word_bits)
    if variant.family == "SPECK":
        a, b = variant.alpha, variant.beta
        return (
            lambda x, y, k: speck_round(ar, a, b, x, y, k),
            lambda x, y, k: speck_round_inverse(ar, a, b, x, y, k),
        )
    return (
        lambda x, y, k: simon_round(ar, x, y, k),
        lambda x, y, k: simon_round_inverse(ar, x, y, k),
    )
