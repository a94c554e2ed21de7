from __future__ import annotations

from typing import List, Tuple

from .errors import InvalidVariant
from .spec import Z_SEQUENCES, VariantDescriptor
from .words import SUPPORTED_WORD_BITS


def validate_variant(variant: VariantDescriptor) -> Tuple[bool, List[str]]:
    """Re-check a descriptor, including ones built with ``model_construct``."""
    errs: List[str] = []

    if variant.family not in ("SIMON", "SPECK"):
        errs.append(f"Unsupported family: {variant.family}")
        return False, errs

    if variant.word_bits not in SUPPORTED_WORD_BITS:
        errs.append(f"Unsupported word width: {variant.word_bits}")
        return False, errs

    if not 2 <= variant.key_words <= 4:
        errs.append(f"key_words must be 2..4, got {variant.key_words}")
    if variant.rounds < 1:
        errs.append(f"rounds must be positive, got {variant.rounds}")
    if variant.family == "SIMON" and variant.z_index is not None:
        if not 0 <= variant.z_index < len(Z_SEQUENCES):
            errs.append(f"z_index must be 0..{len(Z_SEQUENCES) - 1}, got {variant.z_index}")

    errs.extend(variant.problems())
    return (len(errs) == 0), errs


def ensure_valid_variant(variant: VariantDescriptor) -> VariantDescriptor:
    ok, errs = validate_variant(variant)
    if not ok:
        raise InvalidVariant(f"{variant.name}: " + "; ".join(errs))
    return variant
