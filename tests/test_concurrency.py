import random
from concurrent.futures import ThreadPoolExecutor

import pytest

from simonspeck.cipher import (
    SIMON_96_144,
    SPECK_48_72,
    InvalidBlockLength,
    encrypt_block,
    expand_key,
)
from simonspeck.evaluation.batch import decrypt_blocks, encrypt_blocks


def _blocks(variant, n, seed=1337):
    rng = random.Random(seed)
    return [bytes(rng.randrange(0, 256) for _ in range(variant.block_bytes)) for _ in range(n)]


@pytest.mark.parametrize("variant", [SPECK_48_72, SIMON_96_144], ids=lambda v: v.name)
def test_batch_matches_serial(variant):
    schedule = expand_key(variant, bytes(range(variant.key_bytes)))
    blocks = _blocks(variant, 64)
    serial = [encrypt_block(schedule, b) for b in blocks]

    threaded = encrypt_blocks(schedule, blocks, workers=8)
    assert threaded == serial
    assert decrypt_blocks(schedule, threaded, workers=8) == blocks


def test_shared_schedule_across_threads():
    schedule = expand_key(SPECK_48_72, bytes(9))
    blocks = _blocks(SPECK_48_72, 200, seed=3)
    expected = [encrypt_block(schedule, b) for b in blocks]
    with ThreadPoolExecutor(max_workers=16) as pool:
        got = list(pool.map(lambda b: encrypt_block(schedule, b), blocks))
    assert got == expected


def test_batch_rejects_bad_block_before_work():
    schedule = expand_key(SPECK_48_72, bytes(9))
    with pytest.raises(InvalidBlockLength):
        encrypt_blocks(schedule, [bytes(6), bytes(5)], workers=2)


def test_batch_rejects_bad_worker_count():
    schedule = expand_key(SPECK_48_72, bytes(9))
    with pytest.raises(ValueError):
        encrypt_blocks(schedule, [bytes(6)], workers=0)


def test_batch_single_worker_and_empty():
    schedule = expand_key(SPECK_48_72, bytes(9))
    assert encrypt_blocks(schedule, [], workers=4) == []
    blocks = _blocks(SPECK_48_72, 3)
    assert encrypt_blocks(schedule, blocks, workers=1) == [encrypt_block(schedule, b) for b in blocks]
