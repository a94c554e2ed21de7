"""Deterministic evaluation of the Simon and Speck engine.

Roundtrip verification, Strict Avalanche Criterion measurement, threaded
batch processing and report aggregation.
"""

from .roundtrip import RoundtripResult, RoundtripFailure, run_roundtrip_tests, run_all_variants
from .avalanche import SACResult, compute_sac
from .batch import encrypt_blocks, decrypt_blocks
from .report import EvaluationReport

__all__ = [
    "RoundtripResult",
    "RoundtripFailure",
    "run_roundtrip_tests",
    "run_all_variants",
    "SACResult",
    "compute_sac",
    "encrypt_blocks",
    "decrypt_blocks",
    "EvaluationReport",
]
