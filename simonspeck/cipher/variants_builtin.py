"""Built-in Simon and Speck variants.

Parameters follow the published Simon and Speck family definitions. Names
use the block/key convention of the published paper: ``Speck32/64`` has a
32-bit block and a 64-bit key.
"""
from __future__ import annotations

from typing import Dict

from .spec import VariantDescriptor, make_variant


def _simon(block: int, key: int, rounds: int, z_index: int) -> VariantDescriptor:
    word = block // 2
    return make_variant(
        name=f"Simon{block}/{key}",
        family="SIMON",
        block_size_bits=block,
        key_size_bits=key,
        word_bits=word,
        key_words=key // word,
        rounds=rounds,
        z_index=z_index,
    )


def _speck(block: int, key: int, rounds: int) -> VariantDescriptor:
    word = block // 2
    alpha, beta = (7, 2) if word == 16 else (8, 3)
    return make_variant(
        name=f"Speck{block}/{key}",
        family="SPECK",
        block_size_bits=block,
        key_size_bits=key,
        word_bits=word,
        key_words=key // word,
        rounds=rounds,
        alpha=alpha,
        beta=beta,
    )


SIMON_32_64 = _simon(32, 64, 32, 0)
SIMON_48_72 = _simon(48, 72, 36, 0)
SIMON_48_96 = _simon(48, 96, 36, 1)
SIMON_64_96 = _simon(64, 96, 42, 2)
SIMON_64_128 = _simon(64, 128, 44, 3)
SIMON_96_96 = _simon(96, 96, 52, 2)
SIMON_96_144 = _simon(96, 144, 54, 3)
SIMON_128_128 = _simon(128, 128, 68, 2)
SIMON_128_192 = _simon(128, 192, 69, 3)
SIMON_128_256 = _simon(128, 256, 72, 4)

SPECK_32_64 = _speck(32, 64, 22)
SPECK_48_72 = _speck(48, 72, 22)
SPECK_48_96 = _speck(48, 96, 23)
SPECK_64_96 = _speck(64, 96, 26)
SPECK_64_128 = _speck(64, 128, 27)
SPECK_96_96 = _speck(96, 96, 28)
SPECK_96_144 = _speck(96, 144, 29)
SPECK_128_128 = _speck(128, 128, 32)
SPECK_128_192 = _speck(128, 192, 33)
SPECK_128_256 = _speck(128, 256, 34)

BUILTIN_VARIANTS = (
    SIMON_32_64,
    SIMON_48_72,
    SIMON_48_96,
    SIMON_64_96,
    SIMON_64_128,
    SIMON_96_96,
    SIMON_96_144,
    SIMON_128_128,
    SIMON_128_192,
    SIMON_128_256,
    SPECK_32_64,
    SPECK_48_72,
    SPECK_48_96,
    SPECK_64_96,
    SPECK_64_128,
    SPECK_96_96,
    SPECK_96_144,
    SPECK_128_128,
    SPECK_128_192,
    SPECK_128_256,
)


def builtins() -> Dict[str, VariantDescriptor]:
    """Return all built-in variants keyed by name, in catalog order."""
    return {v.name: v for v in BUILTIN_VARIANTS}
