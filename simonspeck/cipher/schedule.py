from __future__ import annotations

from dataclasses import dataclass
from typing import List, Tuple

from .errors import InvalidKeyLength
from .packing import bytes_to_words
from .spec import Z_PERIOD, VariantDescriptor
from .validator import ensure_valid_variant
from .words import WordArith


@dataclass(frozen=True)
class KeySchedule:
    """Round keys for one (variant, master key) pair, in encryption order."""
    variant: VariantDescriptor
    round_keys: Tuple[int, ...]

    def __len__(self) -> int:
        return len(self.round_keys)

    def __getitem__(self, i: int) -> int:
        return self.round_keys[i]

    def reversed(self) -> Tuple[int, ...]:
        return self.round_keys[::-1]


def _speck_round_keys(variant: VariantDescriptor, window: List[int]) -> List[int]:
    ar = WordArith(variant.word_bits)
    m = variant.key_words
    out = [window[0]]
    for i in range(variant.rounds - 1):
        x = ar.rotr(window[1], variant.alpha)
        x = ar.add(x, window[0])
        x = ar.xor(x, i)
        y = ar.rotl(window[0], variant.beta)
        y = ar.xor(y, x)
        window[0] = y
        window[1:m - 1] = window[2:m]
        window[m - 1] = x
        out.append(y)
    return out


def _simon_round_keys(variant: VariantDescriptor, window: List[int]) -> List[int]:
    ar = WordArith(variant.word_bits)
    m = variant.key_words
    z = variant.z_sequence
    c = variant.round_constant
    out = [window[0]]
    for i in range(variant.rounds - 1):
        x = ar.rotr(window[m - 1], 3)
        if m == 4:
            x = ar.xor(x, window[1])
        y = ar.rotr(x, 1)
        x = ar.xor(x, window[0])
        x = ar.xor(x, y)
        y = c ^ ((z >> (i % Z_PERIOD)) & 1)
        x = ar.xor(x, y)
        window[:m - 1] = window[1:]
        window[m - 1] = x
        out.append(window[0])
    return out


def expand_key(variant: VariantDescriptor, key_bytes: bytes) -> KeySchedule:
    """Expand a master key into ``variant.rounds`` round keys.

    The key bytes hold ``key_words`` little-endian words; the first word is
    round key 0. Raises ``InvalidVariant`` or ``InvalidKeyLength`` before any
    round key is computed.
    """
    ensure_valid_variant(variant)
    if len(key_bytes) != variant.key_bytes:
        raise InvalidKeyLength(
            f"{variant.name} key must be {variant.key_bytes} bytes, got {len(key_bytes)}"
        )

    window = bytes_to_words(bytes(key_bytes), variant.word_bits)
    if variant.family == "SPECK":
        keys = _speck_round_keys(variant, window)
    else:
        keys = _simon_round_keys(variant, window)
    return KeySchedule(variant=variant, round_keys=tuple(keys))
