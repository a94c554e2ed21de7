"""Width-parametrized word arithmetic for Simon and Speck.

Python ints never overflow, so every operation masks its result back to
the word width instead of relying on native integer wraparound.
"""
from __future__ import annotations

from dataclasses import dataclass, field

from .errors import InvalidVariant, UnsupportedRotationAmount

SUPPORTED_WORD_BITS = (16, 24, 32, 48, 64)


def _check_rotation(r: int, w: int) -> None:
    if r < 0 or r > w:
        raise UnsupportedRotationAmount(f"rotation by {r} is outside a {w}-bit word")


def rotate_left(x: int, r: int, w: int) -> int:
    """Rotate-left x by r bits in a w-bit word."""
    _check_rotation(r, w)
    mask = (1 << w) - 1
    x &= mask
    r %= w
    if r == 0:
        return x
    return ((x << r) & mask) | (x >> (w - r))


def rotate_right(x: int, r: int, w: int) -> int:
    """Rotate-right x by r bits in a w-bit word."""
    _check_rotation(r, w)
    mask = (1 << w) - 1
    x &= mask
    r %= w
    if r == 0:
        return x
    return (x >> r) | ((x << (w - r)) & mask)


@dataclass(frozen=True)
class WordArith:
    """Modular arithmetic on words of a fixed bit width."""
    bits: int
    mask: int = field(init=False)

    def __post_init__(self):
        if self.bits not in SUPPORTED_WORD_BITS:
            raise InvalidVariant(
                f"word width {self.bits} not supported, expected one of {SUPPORTED_WORD_BITS}"
            )
        object.__setattr__(self, "mask", (1 << self.bits) - 1)

    def rotl(self, x: int, r: int) -> int:
        return rotate_left(x, r, self.bits)

    def rotr(self, x: int, r: int) -> int:
        return rotate_right(x, r, self.bits)

    def add(self, a: int, b: int) -> int:
        return (a + b) & self.mask

    def sub(self, a: int, b: int) -> int:
        # Python's & on a negative int yields the two's-complement residue
        return (a - b) & self.mask

    def xor(self, a: int, b: int) -> int:
        return (a ^ b) & self.mask

    def and_(self, a: int, b: int) -> int:
        return (a & b) & self.mask
