from __future__ import annotations

from .errors import InvalidBlockLength
from .packing import join_block, split_block
from .rounds import round_functions
from .schedule import KeySchedule


def _check_block(schedule: KeySchedule, block: bytes, what: str) -> None:
    bs = schedule.variant.block_bytes
    if len(block) != bs:
        raise InvalidBlockLength(f"{what} block must be {bs} bytes, got {len(block)}")


def encrypt_block(schedule: KeySchedule, plaintext: bytes) -> bytes:
    """Encrypt one block with an expanded key schedule."""
    _check_block(schedule, plaintext, "Plaintext")
    word_bits = schedule.variant.word_bits
    forward, _ = round_functions(schedule.variant)

    x, y = split_block(bytes(plaintext), word_bits)
    for k in schedule.round_keys:
        x, y = forward(x, y, k)
    return join_block(x, y, word_bits)


def decrypt_block(schedule: KeySchedule, ciphertext: bytes) -> bytes:
    """Decrypt one block, applying the inverse rounds with the keys reversed."""
    _check_block(schedule, ciphertext, "Ciphertext")
    word_bits = schedule.variant.word_bits
    _, inverse = round_functions(schedule.variant)

    x, y = split_block(bytes(ciphertext), word_bits)
    for k in schedule.reversed():
        x, y = inverse(x, y, k)
    return join_block(x, y, word_bits)
