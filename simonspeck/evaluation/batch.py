"""Encrypt or decrypt many independent blocks under one expanded key.

The ``KeySchedule`` is immutable, so worker threads share it without
locking. Results come back in input order.
"""
from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor
from typing import Callable, List, Optional, Sequence

from simonspeck.cipher.errors import InvalidBlockLength
from simonspeck.cipher.pipeline import decrypt_block, encrypt_block
from simonspeck.cipher.schedule import KeySchedule
from simonspeck.config import load_settings

logger = logging.getLogger(__name__)


def _run(
    fn: Callable[[KeySchedule, bytes], bytes],
    schedule: KeySchedule,
    blocks: Sequence[bytes],
    workers: Optional[int],
) -> List[bytes]:
    n = workers if workers is not None else load_settings().batch_workers
    if n < 1:
        raise ValueError(f"workers must be positive, got {n}")
    # reject bad lengths before any worker starts
    bs = schedule.variant.block_bytes
    for i, block in enumerate(blocks):
        if len(block) != bs:
            raise InvalidBlockLength(f"block {i} must be {bs} bytes, got {len(block)}")

    logger.debug("%s: %d blocks on %d workers", schedule.variant.name, len(blocks), n)
    if n == 1 or len(blocks) < 2:
        return [fn(schedule, b) for b in blocks]
    with ThreadPoolExecutor(max_workers=n) as pool:
        return list(pool.map(lambda b: fn(schedule, b), blocks))


def encrypt_blocks(schedule: KeySchedule, blocks: Sequence[bytes], *, workers: Optional[int] = None) -> List[bytes]:
    return _run(encrypt_block, schedule, blocks, workers)


def decrypt_blocks(schedule: KeySchedule, blocks: Sequence[bytes], *, workers: Optional[int] = None) -> List[bytes]:
    return _run(decrypt_block, schedule, blocks, workers)
