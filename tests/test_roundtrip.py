import random
import sys
from pathlib import Path

import pytest

# Ensure project root is on path when running without an install
_project_root = Path(__file__).parent.parent
if str(_project_root) not in sys.path:
    sys.path.insert(0, str(_project_root))

from simonspeck.cipher import (
    SIMON_64_128,
    SPECK_64_128,
    InvalidBlockLength,
    build_cipher,
    decrypt_block,
    encrypt_block,
    expand_key,
    list_variants,
)
from simonspeck.evaluation.roundtrip import run_all_variants, run_roundtrip_tests


def test_speck_roundtrip():
    cipher = build_cipher(SPECK_64_128)
    key = b"K" * 16
    pt = bytes(range(8))
    ct = cipher.encrypt_block(pt, key)
    assert ct != pt
    assert cipher.decrypt_block(ct, key) == pt


def test_simon_roundtrip():
    cipher = build_cipher(SIMON_64_128)
    key = b"K" * 16
    pt = bytes(range(8))
    ct = cipher.encrypt_block(pt, key)
    assert ct != pt
    assert cipher.decrypt_block(ct, key) == pt


@pytest.mark.parametrize("variant", list_variants(), ids=lambda v: v.name)
def test_all_variants_roundtrip(variant):
    """Roundtrip P = D(E(P, K), K) for each catalog variant."""
    rng = random.Random(1337)

    for _ in range(50):
        pt = bytes(rng.randrange(0, 256) for _ in range(variant.block_bytes))
        key = bytes(rng.randrange(0, 256) for _ in range(variant.key_bytes))
        schedule = expand_key(variant, key)
        ct = encrypt_block(schedule, pt)
        rt = decrypt_block(schedule, ct)
        assert len(ct) == variant.block_bytes
        assert rt == pt, (
            f"{variant.name}: roundtrip failed. "
            f"pt={pt.hex()}, key={key.hex()}, ct={ct.hex()}, rt={rt.hex()}"
        )


def test_extreme_blocks_roundtrip():
    for variant in list_variants():
        for fill in (0x00, 0xFF):
            key = bytes([fill]) * variant.key_bytes
            pt = bytes([fill ^ 0xFF]) * variant.block_bytes
            schedule = expand_key(variant, key)
            assert decrypt_block(schedule, encrypt_block(schedule, pt)) == pt


def test_run_roundtrip_tests_reports_all_passed():
    result = run_roundtrip_tests(SPECK_64_128, num_vectors=100, seed=7)
    assert result.is_perfect
    assert result.passed == 100
    assert result.success_rate == 1.0
    assert result.failures == []
    assert result.summary().startswith("[PASS] Speck64/128")


def test_run_all_variants_sorted_and_perfect():
    seen = []
    results = run_all_variants(
        num_vectors=5,
        progress_callback=lambda name, i, total: seen.append((name, i, total)),
    )
    assert len(results) == len(list_variants())
    assert [r.variant_name for r in results] == sorted(r.variant_name for r in results)
    assert all(r.is_perfect for r in results)
    assert seen[0][1] == 0 and seen[0][2] == len(results)


@pytest.mark.parametrize("variant", [SPECK_64_128, SIMON_64_128], ids=lambda v: v.name)
@pytest.mark.parametrize("length", [0, 7, 9, 16])
def test_pipeline_rejects_wrong_block_length(variant, length):
    schedule = expand_key(variant, bytes(variant.key_bytes))
    with pytest.raises(InvalidBlockLength):
        encrypt_block(schedule, bytes(length))
    with pytest.raises(InvalidBlockLength):
        decrypt_block(schedule, bytes(length))
