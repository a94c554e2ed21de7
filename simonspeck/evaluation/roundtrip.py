"""Algebraic unit testing: roundtrip verification P = D(E(P, K), K).

Generates randomized test vectors per variant and verifies that decryption
exactly inverts encryption for every vector.
"""
from __future__ import annotations

import logging
import random
import time
from dataclasses import dataclass, field, asdict
from typing import Any, Callable, Dict, List, Optional

from simonspeck.cipher.pipeline import decrypt_block, encrypt_block
from simonspeck.cipher.registry import VariantRegistry, list_variants
from simonspeck.cipher.schedule import expand_key
from simonspeck.cipher.spec import VariantDescriptor
from simonspeck.config import load_settings
from simonspeck.utils.repro import rand_bytes

logger = logging.getLogger(__name__)


@dataclass
class RoundtripFailure:
    """Details of a single failed roundtrip test vector."""
    vector_index: int
    plaintext_hex: str
    key_hex: str
    ciphertext_hex: str
    decrypted_hex: str       # What decrypt returned (should equal plaintext)


@dataclass
class RoundtripResult:
    """Aggregate result of roundtrip testing for one variant."""
    variant_name: str
    family: str
    block_size_bits: int
    key_size_bits: int
    rounds: int
    total_vectors: int
    passed: int
    failed: int
    failures: List[RoundtripFailure] = field(default_factory=list)
    elapsed_seconds: float = 0.0
    seed: int = 1337

    @property
    def success_rate(self) -> float:
        return self.passed / self.total_vectors if self.total_vectors > 0 else 0.0

    @property
    def is_perfect(self) -> bool:
        return self.failed == 0

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    def summary(self) -> str:
        status = "PASS" if self.is_perfect else "FAIL"
        return (
            f"[{status}] {self.variant_name} ({self.family}): "
            f"{self.passed}/{self.total_vectors} vectors passed "
            f"({self.elapsed_seconds:.2f}s)"
        )


def run_roundtrip_tests(
    variant: Optional[VariantDescriptor] = None,
    *,
    num_vectors: Optional[int] = None,
    seed: Optional[int] = None,
    max_failures_recorded: int = 10,
) -> RoundtripResult:
    """Run roundtrip verification P = D(E(P, K), K) across many test vectors.

    Args:
        variant: Variant to test; defaults to the configured default variant.
        num_vectors: Number of random (plaintext, key) pairs to test.
        seed: Random seed for deterministic reproducibility.
        max_failures_recorded: Maximum number of failure details to keep.

    Returns:
        RoundtripResult with pass/fail counts and failure details.
    """
    settings = load_settings()
    if variant is None:
        variant = VariantRegistry().get(settings.default_variant)
    if num_vectors is None:
        num_vectors = settings.roundtrip_vectors
    if seed is None:
        seed = settings.global_seed

    rng = random.Random(seed)
    passed = 0
    failed = 0
    failures: List[RoundtripFailure] = []

    start = time.perf_counter()

    for i in range(num_vectors):
        pt = rand_bytes(rng, variant.block_bytes)
        key = rand_bytes(rng, variant.key_bytes)

        schedule = expand_key(variant, key)
        ct = encrypt_block(schedule, pt)
        pt2 = decrypt_block(schedule, ct)

        if pt == pt2:
            passed += 1
            continue

        failed += 1
        if len(failures) < max_failures_recorded:
            failures.append(RoundtripFailure(
                vector_index=i,
                plaintext_hex=pt.hex(),
                key_hex=key.hex(),
                ciphertext_hex=ct.hex(),
                decrypted_hex=pt2.hex(),
            ))

    elapsed = time.perf_counter() - start
    if failed:
        logger.error("%s: %d/%d roundtrip vectors failed", variant.name, failed, num_vectors)
    else:
        logger.info("%s: %d roundtrip vectors passed in %.2fs", variant.name, num_vectors, elapsed)

    return RoundtripResult(
        variant_name=variant.name,
        family=variant.family,
        block_size_bits=variant.block_size_bits,
        key_size_bits=variant.key_size_bits,
        rounds=variant.rounds,
        total_vectors=num_vectors,
        passed=passed,
        failed=failed,
        failures=failures,
        elapsed_seconds=round(elapsed, 4),
        seed=seed,
    )


def run_all_variants(
    *,
    num_vectors: Optional[int] = None,
    seed: Optional[int] = None,
    variants: Optional[List[VariantDescriptor]] = None,
    progress_callback: Optional[Callable[[str, int, int], None]] = None,
) -> List[RoundtripResult]:
    """Run roundtrip tests for every catalog variant.

    Args:
        num_vectors: Number of test vectors per variant.
        seed: Random seed for reproducibility.
        variants: Variants to test; defaults to the whole catalog.
        progress_callback: Optional callback(variant_name, current_index, total).

    Returns:
        List of RoundtripResult sorted by variant name.
    """
    todo = variants if variants is not None else list_variants()
    results: List[RoundtripResult] = []

    for idx, variant in enumerate(todo):
        if progress_callback:
            progress_callback(variant.name, idx, len(todo))
        results.append(run_roundtrip_tests(variant, num_vectors=num_vectors, seed=seed))

    return sorted(results, key=lambda r: r.variant_name)
