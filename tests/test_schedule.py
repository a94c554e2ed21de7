import random

import pytest

from simonspeck.cipher import (
    SIMON_32_64,
    SIMON_128_128,
    SPECK_32_64,
    SPECK_128_128,
    InvalidKeyLength,
    InvalidVariant,
    VariantDescriptor,
    expand_key,
    list_variants,
)
from simonspeck.cipher.packing import bytes_to_words


@pytest.mark.parametrize("variant", list_variants(), ids=lambda v: v.name)
def test_schedule_shape_and_determinism(variant):
    rng = random.Random(99)
    key = bytes(rng.randrange(0, 256) for _ in range(variant.key_bytes))
    a = expand_key(variant, key)
    b = expand_key(variant, key)
    assert a.round_keys == b.round_keys
    assert len(a) == variant.rounds
    assert a[0] == bytes_to_words(key, variant.word_bits)[0]
    assert all(0 <= k <= variant.mask for k in a.round_keys)


def test_different_keys_give_different_schedules():
    k1 = bytes(16)
    k2 = bytes(15) + b"\x01"
    assert expand_key(SPECK_128_128, k1).round_keys != expand_key(SPECK_128_128, k2).round_keys
    assert expand_key(SIMON_128_128, k1).round_keys != expand_key(SIMON_128_128, k2).round_keys


def test_simon_leading_round_keys_are_master_words():
    # Simon copies the master key words into the first key_words round keys
    key = bytes([0x00, 0x01, 0x08, 0x09, 0x10, 0x11, 0x18, 0x19])
    schedule = expand_key(SIMON_32_64, key)
    assert schedule.round_keys[:4] == (0x0100, 0x0908, 0x1110, 0x1918)


def test_speck_first_step():
    key = bytes([0x00, 0x01, 0x08, 0x09, 0x10, 0x11, 0x18, 0x19])
    schedule = expand_key(SPECK_32_64, key)
    k0, l0 = 0x0100, 0x0908
    l_next = ((((l0 >> 7) | (l0 << 9)) & 0xFFFF) + k0) & 0xFFFF
    k1 = (((k0 << 2) | (k0 >> 14)) & 0xFFFF) ^ l_next
    assert schedule.round_keys[:2] == (k0, k1)


def test_schedule_is_immutable():
    schedule = expand_key(SPECK_32_64, bytes(8))
    with pytest.raises(Exception):
        schedule.round_keys = ()
    assert schedule.reversed() == schedule.round_keys[::-1]


@pytest.mark.parametrize("length", [0, 7, 9, 16])
def test_wrong_key_length(length):
    with pytest.raises(InvalidKeyLength):
        expand_key(SPECK_32_64, bytes(length))


def test_inconsistent_descriptor_rejected_before_expansion():
    bad = VariantDescriptor.model_construct(
        name="Unchecked", family="SIMON", block_size_bits=32, key_size_bits=64,
        word_bits=16, key_words=4, rounds=32, alpha=None, beta=None, z_index=None,
    )
    with pytest.raises(InvalidVariant):
        expand_key(bad, bytes(8))
