"""Simon and Speck block ciphers over one parametrized engine.

Not constant-time and not audited. Research / education only.
"""

from .errors import (
    CipherError,
    InvalidVariant,
    InvalidKeyLength,
    InvalidBlockLength,
    UnsupportedRotationAmount,
)
from .spec import VariantDescriptor, make_variant
from .registry import VariantRegistry, list_variants, get_variant
from .variants_builtin import (
    SIMON_32_64,
    SIMON_48_72,
    SIMON_48_96,
    SIMON_64_96,
    SIMON_64_128,
    SIMON_96_96,
    SIMON_96_144,
    SIMON_128_128,
    SIMON_128_192,
    SIMON_128_256,
    SPECK_32_64,
    SPECK_48_72,
    SPECK_48_96,
    SPECK_64_96,
    SPECK_64_128,
    SPECK_96_96,
    SPECK_96_144,
    SPECK_128_128,
    SPECK_128_192,
    SPECK_128_256,
)
from .schedule import KeySchedule, expand_key
from .pipeline import encrypt_block, decrypt_block
from .builder import BlockCipher, VariantCipher, build_cipher

__all__ = [
    "CipherError",
    "InvalidVariant",
    "InvalidKeyLength",
    "InvalidBlockLength",
    "UnsupportedRotationAmount",
    "VariantDescriptor",
    "make_variant",
    "VariantRegistry",
    "list_variants",
    "get_variant",
    "SIMON_32_64",
    "SIMON_48_72",
    "SIMON_48_96",
    "SIMON_64_96",
    "SIMON_64_128",
    "SIMON_96_96",
    "SIMON_96_144",
    "SIMON_128_128",
    "SIMON_128_192",
    "SIMON_128_256",
    "SPECK_32_64",
    "SPECK_48_72",
    "SPECK_48_96",
    "SPECK_64_96",
    "SPECK_64_128",
    "SPECK_96_96",
    "SPECK_96_144",
    "SPECK_128_128",
    "SPECK_128_192",
    "SPECK_128_256",
    "KeySchedule",
    "expand_key",
    "encrypt_block",
    "decrypt_block",
    "BlockCipher",
    "VariantCipher",
    "build_cipher",
]
