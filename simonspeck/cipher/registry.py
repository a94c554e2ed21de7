from __future__ import annotations

import logging
from typing import Dict, List, Optional

from .spec import VariantDescriptor
from .validator import ensure_valid_variant
from .variants_builtin import builtins

logger = logging.getLogger(__name__)


class VariantRegistry:
    def __init__(self):
        self._variants: Dict[str, VariantDescriptor] = builtins()

    def get(self, name: str) -> VariantDescriptor:
        if name not in self._variants:
            raise KeyError(f"Unknown variant: {name}")
        return self._variants[name]

    def list(self) -> List[VariantDescriptor]:
        return list(self._variants.values())

    def list_by_family(self, family: str) -> List[VariantDescriptor]:
        family = family.upper()
        out = [v for v in self._variants.values() if v.family == family]
        out.sort(key=lambda v: (v.block_size_bits, v.key_size_bits))
        return out

    def find(
        self,
        family: str,
        block_size_bits: int,
        key_size_bits: int,
    ) -> Optional[VariantDescriptor]:
        family = family.upper()
        for v in self._variants.values():
            if (v.family, v.block_size_bits, v.key_size_bits) == (family, block_size_bits, key_size_bits):
                return v
        return None

    def exists(self, name: str) -> bool:
        return name in self._variants

    def register(self, variant: VariantDescriptor) -> None:
        ensure_valid_variant(variant)
        if variant.name in self._variants:
            logger.warning("Replacing registered variant %s", variant.name)
        self._variants[variant.name] = variant
        logger.debug("Registered %s", variant.label())


_default_registry = VariantRegistry()


def list_variants() -> List[VariantDescriptor]:
    """All built-in variants, Simon first, each family ordered by size."""
    return list(_default_registry.list())


def get_variant(family: str, block_size_bits: int, key_size_bits: int) -> VariantDescriptor:
    variant = _default_registry.find(family, block_size_bits, key_size_bits)
    if variant is None:
        raise KeyError(f"No {family.upper()} variant with {block_size_bits}-bit block and {key_size_bits}-bit key")
    return variant
