"""Little-endian conversion between byte buffers and cipher words.

Word byte counts of 3 and 6 have no ``struct`` format code, so words are
converted with ``int.from_bytes``/``int.to_bytes`` for every width.
"""
from __future__ import annotations

from typing import List, Sequence, Tuple

from .errors import InvalidBlockLength


def word_bytes_for(word_bits: int) -> int:
    return (word_bits + 7) // 8


def unpack_word(data: bytes, word_bits: int) -> int:
    """Read one little-endian word and mask it to ``word_bits``."""
    if len(data) != word_bytes_for(word_bits):
        raise InvalidBlockLength(
            f"word of {word_bits} bits needs {word_bytes_for(word_bits)} bytes, got {len(data)}"
        )
    return int.from_bytes(data, "little") & ((1 << word_bits) - 1)


def pack_word(value: int, word_bits: int) -> bytes:
    """Write the low ``word_bytes`` bytes of ``value`` little-endian."""
    value &= (1 << word_bits) - 1
    return value.to_bytes(word_bytes_for(word_bits), "little")


def bytes_to_words(data: bytes, word_bits: int) -> List[int]:
    """Convert bytes to a list of words, first word from the first bytes."""
    wb = word_bytes_for(word_bits)
    if len(data) % wb != 0:
        raise InvalidBlockLength(f"{len(data)} bytes is not a whole number of {wb}-byte words")
    return [unpack_word(data[i:i + wb], word_bits) for i in range(0, len(data), wb)]


def words_to_bytes(words: Sequence[int], word_bits: int) -> bytes:
    return b"".join(pack_word(w, word_bits) for w in words)


def split_block(block: bytes, word_bits: int) -> Tuple[int, int]:
    """Unpack a block into ``(x, y)``; the buffer stores ``y`` first."""
    wb = word_bytes_for(word_bits)
    if len(block) != 2 * wb:
        raise InvalidBlockLength(f"Block must be {2 * wb} bytes, got {len(block)}")
    y = unpack_word(block[:wb], word_bits)
    x = unpack_word(block[wb:], word_bits)
    return x, y


def join_block(x: int, y: int, word_bits: int) -> bytes:
    return pack_word(y, word_bits) + pack_word(x, word_bits)
